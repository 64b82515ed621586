"""Core CLI building blocks: constants, config, output and decorators."""
