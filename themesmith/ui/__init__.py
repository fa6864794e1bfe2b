"""Textual user interface for themesmith."""
