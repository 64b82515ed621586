"""Logging setup shared by the basics packages."""

from basics_logging.config import TRACE, configure_logger, get_cli_logger

__all__ = ["TRACE", "configure_logger", "get_cli_logger"]
