"""Shared helpers for the basics packages."""
