"""Main CLI entry point for basics.

This module provides the main Click command group. Invoked without a subcommand it
runs the program, so ``basics`` on its own prints the full output.
"""

import os
import sys
from pathlib import Path

import click

from basics_cli.commands import program
from basics_cli.core.config import CliConfig
from basics_cli.core.constants import ALL_LOG_LEVELS, EnvVars, Icons, LogLevel
from basics_cli.core.output import OutputStrategy, Verbosity
from basics_common.repo import detect_repo_root
from basics_logging import configure_logger, get_cli_logger
from basics_logging.utils import get_log_file_path

logger = get_cli_logger(__name__)

LOGGING_PACKAGES = ("basics_cli", "basics_common")


def _resolve_log_level(
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
    cli_config: CliConfig,
) -> str | None:
    """Work out the effective log level from flags, environment and config.

    Parameters
    ----------
    verbose : bool
        Whether -v verbose mode is enabled
    verbose_debug : bool
        Whether -vvv verbose debug mode is enabled
    log_level : str | None
        Explicit log level if provided
    cli_config : CliConfig
        Merged user/project configuration

    Returns
    -------
    str | None
        The effective log level, or None if logging stays unconfigured
    """
    if log_level:
        return log_level
    if verbose_debug:
        return "TRACE"
    if verbose or cli_config.verbose:
        return LogLevel.DEBUG.value
    env_level = os.environ.get(EnvVars.LOG_LEVEL)
    if env_level:
        return env_level.upper()
    if cli_config.log_level is not None:
        return cli_config.log_level.value
    return None


def _configure_package_loggers(effective_level: str, verbose_debug: bool) -> None:
    """Configure package loggers; stdout is never a log destination.

    Parameters
    ----------
    effective_level : str
        The log level to set
    verbose_debug : bool
        Whether to mirror log records to stderr
    """
    for pkg_name in LOGGING_PACKAGES:
        try:
            configure_logger(
                pkg_name,
                profile="cli",
                level=effective_level,
                to_console=True if verbose_debug else None,
            )
        except Exception as e:
            logger.debug("Failed to configure logger for package %s: %s", pkg_name, e)


class Context:
    """CLI context object for sharing state between commands."""

    def __init__(self, repo_root: Path | None = None) -> None:
        """Initialize CLI context.

        Parameters
        ----------
        repo_root : Path, optional
            Repository root directory. If not provided, will be auto-detected.
        """
        self.verbose: bool = False
        self.verbose_debug: bool = False
        self.repo_root: Path = repo_root or detect_repo_root()
        self._config: CliConfig | None = None
        self._output: OutputStrategy | None = None

    @property
    def config(self) -> CliConfig:
        """Get the merged configuration, loading it on first use."""
        if self._config is None:
            self._config = CliConfig(self.repo_root)
        return self._config

    @property
    def output(self) -> OutputStrategy:
        """Get output strategy singleton instance.

        Returns
        -------
        OutputStrategy
            Output strategy configured with current verbosity
        """
        if self._output is None:
            verbosity = Verbosity.from_flags(self.verbose, self.verbose_debug)
            self._output = OutputStrategy(verbosity=verbosity)
        return self._output


@click.group(invoke_without_command=True)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output and debug logging",
)
@click.option(
    "--verbose-debug",
    "-vvv",
    is_flag=True,
    help="Enable debug output and trace logging mirrored to stderr",
)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in ALL_LOG_LEVELS]),
    help="Set logging level",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
) -> None:
    """basics - a tour of bindings, branches, loops and functions.

    \b
    Run without a command to print the full program output.
    """  # noqa: W605
    ctx.ensure_object(Context)
    basics_ctx: Context = ctx.obj
    basics_ctx.verbose = verbose
    basics_ctx.verbose_debug = verbose_debug

    effective_level = _resolve_log_level(
        verbose,
        verbose_debug,
        log_level,
        basics_ctx.config,
    )
    if effective_level:
        _configure_package_loggers(effective_level, verbose_debug)
        logger.info("basics starting with repo root: %s", basics_ctx.repo_root)

    if ctx.invoked_subcommand is None:
        ctx.invoke(program.run)


cli.add_command(program.run)
cli.add_command(program.greet_command)


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show basics CLI information."""
    basics_ctx: Context = ctx.obj
    output = basics_ctx.output

    output.section("basics CLI Information", Icons.INFO)

    output.plain(f"basics CLI v{__import__('basics_cli').__version__}")
    output.plain(f"Repository root: {basics_ctx.repo_root}")
    output.plain(f"Config file: {basics_ctx.config.config_file}")
    output.plain(f"Python executable: {sys.executable}")

    if basics_ctx.verbose or basics_ctx.verbose_debug:
        output.subsection("Logging Configuration")
        mode = "debug" if basics_ctx.verbose_debug else "verbose"
        output.plain(f"Verbose mode: {mode}")
        output.plain(
            f"{EnvVars.LOG_LEVEL}: {os.environ.get(EnvVars.LOG_LEVEL, 'not set')}",
        )
        output.plain(f"CLI log: {get_log_file_path('cli')}")


def main() -> None:
    """Serve as the main entry point for the CLI."""
    cli(prog_name="basics")


if __name__ == "__main__":
    main()
