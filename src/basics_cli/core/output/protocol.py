"""Protocol definition for OutputStrategy (for testing/mocking)."""

from typing import Protocol, runtime_checkable

from basics_cli.core.output.verbosity import Verbosity


@runtime_checkable
class OutputStrategyProtocol(Protocol):
    """Interface for the sinks the program and commands write to.

    | Method     | NORMAL | VERBOSE | DEBUG |
    |------------|--------|---------|-------|
    | error      | Yes    | Yes     | Yes   |
    | warning    | Yes    | Yes     | Yes   |
    | success    | Yes    | Yes     | Yes   |
    | plain      | Yes    | Yes     | Yes   |
    | separator  | Yes    | Yes     | Yes   |
    | section    | Yes    | Yes     | Yes   |
    | subsection | Yes    | Yes     | Yes   |
    | info       | No     | Yes     | Yes   |
    | detail     | No     | Yes     | Yes   |
    | debug      | No     | No      | Yes   |
    """

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        ...

    def error(self, message: str, to_stderr: bool = True) -> None: ...

    def warning(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def plain(self, message: str, err: bool = False) -> None: ...

    def separator(self, char: str = ..., length: int = ...) -> None: ...

    def section(self, title: str, icon: str | None = None) -> None: ...

    def subsection(self, title: str) -> None: ...

    def info(self, message: str) -> None: ...

    def detail(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...
