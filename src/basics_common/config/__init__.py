"""Shared configuration utilities (basics_common.config)."""

from .project import load_merged_config

__all__ = ["load_merged_config"]
