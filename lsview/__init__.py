"""Coloured formatting of file metadata fields for an ls-style listing."""

__version__ = "1.1.5"