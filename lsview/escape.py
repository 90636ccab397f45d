"""Quoting and escaping of file names for display."""

from __future__ import annotations

_NAMED_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


def _escape_char(char: str) -> str:
    if char >= " " and char != "\x7f":
        return char
    return _NAMED_ESCAPES.get(char, f"\\u{{{ord(char):x}}}")


def escape(text: str, literal: bool) -> str:
    """Quote a name the way a shell would need it unless literal, and escape control characters."""
    name = text
    if not literal:
        if "\\" in name or '"' in name:
            name = "'" + name.replace("'", "'\\''") + "'"
        elif "'" in name:
            name = f'"{name}"'
        elif " " in name or "$" in name:
            name = f"'{name}'"
    return "".join(_escape_char(char) for char in name)