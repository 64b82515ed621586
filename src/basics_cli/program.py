"""The introductory program: bindings, a branch, a counted loop and a greeting.

Running :func:`run_program` writes exactly these lines to stdout::

    Hello, world!
    --------------
    x: 5, y: 15
    --------------
    Single digit
    --------------
    Number: 1
    Number: 2
    Number: 3
    Number: 4
    Number: 5
    --------------
    Hello, Rustacean!
"""

from __future__ import annotations

from collections.abc import Iterator

from basics_cli.core.output import OutputStrategy, OutputStrategyProtocol
from basics_logging import get_cli_logger

logger = get_cli_logger(__name__)

DIGIT_THRESHOLD = 10


def greeting(name: str) -> str:
    """Return the greeting line for ``name``, interpolated verbatim."""
    return f"Hello, {name}!"


def greet(name: str, output: OutputStrategyProtocol | None = None) -> None:
    """Write one greeting line for ``name``.

    Parameters
    ----------
    name : str
        Any string, including the empty one; it is not validated.
    output : OutputStrategyProtocol, optional
        Sink for the line. A NORMAL-verbosity ``OutputStrategy`` if omitted.
    """
    output = output or OutputStrategy()
    output.plain(greeting(name))


def format_bindings(x: int, y: int) -> str:
    return f"x: {x}, y: {y}"


def classify_digits(number: int, threshold: int = DIGIT_THRESHOLD) -> str:
    """Label ``number`` by comparing it strictly against ``threshold``."""
    if number < threshold:
        return "Single digit"
    return "Double digit"


def count_up(start: int, stop: int) -> Iterator[int]:
    """Yield every integer from ``start`` to ``stop`` inclusive, ascending."""
    yield from range(start, stop + 1)


def run_program(output: OutputStrategyProtocol | None = None) -> None:
    """Run the fixed sequence of output statements.

    Parameters
    ----------
    output : OutputStrategyProtocol, optional
        Sink for every line. A NORMAL-verbosity ``OutputStrategy`` if omitted.
    """
    output = output or OutputStrategy()
    logger.debug("Running program")

    output.plain("Hello, world!")
    output.separator()

    x = 5
    y = 10
    y += 5
    output.plain(format_bindings(x, y))
    output.separator()

    number = 7
    output.plain(classify_digits(number))
    output.separator()

    for i in count_up(1, 5):
        output.plain(f"Number: {i}")
    output.separator()

    greet("Rustacean", output)
    logger.debug("Program finished")
