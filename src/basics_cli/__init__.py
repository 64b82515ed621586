"""basics - an introductory program behind a small click CLI."""

__version__ = "0.1.0"
