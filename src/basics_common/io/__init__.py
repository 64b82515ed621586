"""File IO helpers."""

from .files import FileOperationError, safe_read_yaml

__all__ = ["FileOperationError", "safe_read_yaml"]
