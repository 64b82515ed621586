"""Default output strategy implementation."""

from __future__ import annotations

import click

from basics_cli.core.constants import SEPARATOR_CHAR, SEPARATOR_WIDTH, Icons
from basics_cli.core.output.verbosity import Verbosity


class OutputStrategy:
    """Verbosity-aware writer for everything the CLI prints.

    | Level    | Flag      | User Sees                                 |
    |----------|-----------|-------------------------------------------|
    | NORMAL   | (default) | Program lines, results, errors, warnings  |
    | VERBOSE  | -v        | + Operation details                       |
    | DEBUG    | -vvv      | + Debug traces                            |

    Parameters
    ----------
    verbosity : Verbosity
        Current verbosity level
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self._verbosity = verbosity
        self._last_was_blank = False

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        return self._verbosity

    def _emit(
        self,
        message: str,
        *,
        err: bool = False,
        style: dict | None = None,
    ) -> None:
        """Emit a message with optional styling and blank line coalescing.

        Parameters
        ----------
        message : str
            Message to emit
        err : bool
            Whether to output to stderr
        style : dict | None
            Click style kwargs (fg, bold, etc.)
        """
        if not message or message.strip() == "":
            if self._last_was_blank:
                return
            click.echo("", err=err)
            self._last_was_blank = True
            return

        rendered = click.style(message, **style) if style else message
        click.echo(rendered, err=err)
        self._last_was_blank = False

    def error(self, message: str, to_stderr: bool = True) -> None:
        """Display error message (red). Always visible."""
        self._emit(f"{Icons.ERROR} {message}", err=to_stderr, style={"fg": "red"})

    def warning(self, message: str) -> None:
        """Display warning message (yellow). Always visible."""
        self._emit(message, style={"fg": "yellow"})

    def success(self, message: str) -> None:
        """Display success message (green). Always visible."""
        self._emit(message, style={"fg": "green"})

    def plain(self, message: str, err: bool = False) -> None:
        """Display plain message without formatting. Always visible.

        Parameters
        ----------
        message : str
            Plain message
        err : bool
            Whether to send to stderr
        """
        self._emit(message, err=err)

    def section(self, title: str, icon: str | None = None) -> None:
        """Display section heading framed by separators. Always visible.

        Parameters
        ----------
        title : str
            Section title
        icon : str | None
            Optional icon to display
        """
        icon_prefix = f"{icon} " if icon else ""
        self.separator(length=40)
        click.echo(f"{icon_prefix}{title}:")
        self.separator(length=40)

    def subsection(self, title: str) -> None:
        """Display subsection heading. Always visible."""
        click.echo(f"\n{title}:")
        self._last_was_blank = False

    def info(self, message: str) -> None:
        """Display info message. Visible at VERBOSE+."""
        if self._verbosity >= Verbosity.VERBOSE:
            self._emit(message)

    def detail(self, message: str) -> None:
        """Display operational detail (dimmed). Visible at VERBOSE+."""
        if self._verbosity >= Verbosity.VERBOSE:
            self._emit(f"  {message}", style={"dim": True})

    def debug(self, message: str) -> None:
        """Display debug message (cyan) on stderr. Visible at DEBUG only."""
        if self._verbosity >= Verbosity.DEBUG:
            self._emit(f"[DEBUG] {message}", err=True, style={"fg": "cyan"})

    def separator(
        self,
        char: str = SEPARATOR_CHAR,
        length: int = SEPARATOR_WIDTH,
    ) -> None:
        """Display separator line. Always visible.

        Parameters
        ----------
        char : str
            Character to repeat
        length : int
            Number of repetitions
        """
        click.echo(char * length)
        self._last_was_blank = False

    @classmethod
    def from_click_context(cls, ctx: click.Context) -> OutputStrategy:
        """Create OutputStrategy from Click context.

        Parameters
        ----------
        ctx : click.Context
            Click context

        Returns
        -------
        OutputStrategy
            Output strategy configured from context
        """
        basics_ctx = ctx.obj
        verbose = getattr(basics_ctx, "verbose", False) if basics_ctx else False
        verbose_debug = (
            getattr(basics_ctx, "verbose_debug", False) if basics_ctx else False
        )
        return cls(verbosity=Verbosity.from_flags(verbose, verbose_debug))
