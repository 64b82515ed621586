"""Constants and enums for the basics CLI."""

from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


ALL_LOG_LEVELS = list(LogLevel)

# Program separator: a fixed-width run of dashes between output blocks
SEPARATOR_CHAR = "-"
SEPARATOR_WIDTH = 14


class ExitCode:
    """Exit codes for CLI operations."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 2
    CONFIG_ERROR = 3
    PERMISSION_ERROR = 4


class Icons:
    """Unicode icons for CLI headers and errors."""

    ERROR = "❌"
    INFO = "📄"


class EnvVars:
    """Environment variable names."""

    LOG_LEVEL = "BASICS_LOG_LEVEL"
