"""Commands that run the introductory program.

Commands:
- run
- greet NAME
"""

from typing import TYPE_CHECKING

import click

from basics_cli.core.decorators import handle_exceptions
from basics_cli.program import greet, run_program
from basics_logging import get_cli_logger

if TYPE_CHECKING:
    from basics_cli.cli import Context

logger = get_cli_logger(__name__)


@click.command(name="run")
@click.pass_context
@handle_exceptions
def run(ctx: click.Context) -> None:
    """Run the full program (default when no command is given)."""
    basics_ctx: Context = ctx.obj
    logger.info("Running program with verbosity %s", basics_ctx.output.verbosity.name)
    run_program(basics_ctx.output)


@click.command(name="greet")
@click.argument("name")
@click.pass_context
@handle_exceptions
def greet_command(ctx: click.Context, name: str) -> None:
    """Print only the greeting line for NAME."""
    basics_ctx: Context = ctx.obj
    logger.debug("Greeting %r", name)
    greet(name, basics_ctx.output)
