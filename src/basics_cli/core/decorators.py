"""Custom Click decorators for common CLI patterns."""

import functools
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

from basics_cli.core.constants import ExitCode
from basics_cli.core.errors import BasicsError
from basics_cli.core.output import OutputStrategy
from basics_logging import get_cli_logger

logger = get_cli_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _output_for(ctx: click.Context) -> OutputStrategy:
    output = getattr(ctx.obj, "output", None)
    if isinstance(output, OutputStrategy):
        return output
    return OutputStrategy.from_click_context(ctx)


def handle_exceptions(func: F) -> F:
    """Handle exceptions and convert to appropriate exit codes.

    Parameters
    ----------
    func : Callable
        Function to wrap

    Returns
    -------
    Callable
        Wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.get_current_context().exit(ExitCode.GENERAL_ERROR)
        except (click.exceptions.Exit, click.ClickException):
            raise
        except Exception as e:
            ctx = click.get_current_context()
            output = _output_for(ctx)
            logger.debug("Command %s failed: %s", ctx.info_name, e, exc_info=True)

            if isinstance(e, BasicsError):
                output.error(str(e))
                ctx.exit(ExitCode.GENERAL_ERROR)
            elif isinstance(e, FileNotFoundError):
                output.error(f"File not found: {e}")
                ctx.exit(ExitCode.NOT_FOUND)
            elif isinstance(e, PermissionError):
                output.error(f"Permission denied: {e}")
                ctx.exit(ExitCode.PERMISSION_ERROR)
            else:
                output.error(f"Unexpected error: {e}")
                verbose_debug = bool(getattr(ctx.obj, "verbose_debug", False))
                if verbose_debug:
                    output.error("Full traceback:")
                    output.error(traceback.format_exc())
                else:
                    output.plain("Re-run with -vvv for full traceback", err=True)
                ctx.exit(ExitCode.GENERAL_ERROR)

    return wrapper  # type: ignore[return-value]
