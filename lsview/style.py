"""Terminal colouring of listing elements."""

from __future__ import annotations

import enum
import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path


class ThemeOption(enum.Enum):
    """How output is coloured."""

    NO_COLOR = "no-color"
    DEFAULT = "default"
    NO_LSCOLORS = "no-lscolors"


class ElemKind(enum.Enum):
    """The kinds of element a listing colours."""

    USER = "user"
    GROUP = "group"
    READ = "read"
    WRITE = "write"
    EXEC = "exec"
    EXEC_STICKY = "exec-sticky"
    NO_ACCESS = "no-access"
    OCTAL = "octal"
    ACL = "acl"
    CONTEXT = "context"
    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"
    BROKEN_SYMLINK = "broken-symlink"
    MISSING_SYMLINK_TARGET = "missing-symlink-target"
    PIPE = "pipe"
    BLOCK_DEVICE = "block-device"
    CHAR_DEVICE = "char-device"
    SOCKET = "socket"
    SPECIAL = "special"
    HOUR_OLD = "hour-old"
    DAY_OLD = "day-old"
    WEEK_OLD = "week-old"
    MONTH_OLD = "month-old"
    OLDER = "older"
    NON_FILE = "non-file"
    FILE_SMALL = "file-small"
    FILE_MEDIUM = "file-medium"
    FILE_LARGE = "file-large"
    INODE = "inode"
    LINKS = "links"
    TREE_EDGE = "tree-edge"
    GIT_STATUS = "git-status"
    ARCHIVE = "archive"
    ATTRIBUTE_READ = "attribute-read"
    HIDDEN = "hidden"
    SYSTEM = "system"


@dataclass(frozen=True)
class Elem:
    """An element to colour, with the details that select its colour."""

    kind: ElemKind
    executable: bool = False
    uid: bool = False
    valid: bool = True
    status: str | None = None


# Named terminal colours as 256-colour indices.
_DARK_RED = 1
_DARK_GREEN = 2
_DARK_YELLOW = 3
_DARK_CYAN = 6
_CYAN = 14

_PALETTE: dict[ElemKind, int] = {
    ElemKind.USER: 230,
    ElemKind.GROUP: 187,
    ElemKind.READ: _DARK_GREEN,
    ElemKind.WRITE: _DARK_YELLOW,
    ElemKind.EXEC: _DARK_RED,
    ElemKind.EXEC_STICKY: 5,
    ElemKind.NO_ACCESS: 245,
    ElemKind.OCTAL: _DARK_CYAN,
    ElemKind.ACL: _DARK_CYAN,
    ElemKind.CONTEXT: _CYAN,
    ElemKind.DIR: 33,
    ElemKind.SYMLINK: 44,
    ElemKind.BROKEN_SYMLINK: 124,
    ElemKind.MISSING_SYMLINK_TARGET: 124,
    ElemKind.PIPE: 44,
    ElemKind.BLOCK_DEVICE: 44,
    ElemKind.CHAR_DEVICE: 44,
    ElemKind.SOCKET: 44,
    ElemKind.SPECIAL: 44,
    ElemKind.HOUR_OLD: 40,
    ElemKind.DAY_OLD: 42,
    ElemKind.WEEK_OLD: 36,
    ElemKind.MONTH_OLD: 36,
    ElemKind.OLDER: 36,
    ElemKind.NON_FILE: 245,
    ElemKind.FILE_SMALL: 229,
    ElemKind.FILE_MEDIUM: 216,
    ElemKind.FILE_LARGE: 172,
    ElemKind.TREE_EDGE: 245,
    ElemKind.ARCHIVE: _DARK_GREEN,
    ElemKind.ATTRIBUTE_READ: _DARK_GREEN,
    ElemKind.HIDDEN: 13,
    ElemKind.SYSTEM: _DARK_RED,
}

_GIT_PALETTE: dict[str, int] = {
    "default": 245,
    "unmodified": 245,
    "ignored": 245,
    "new_in_index": _DARK_GREEN,
    "new_in_workdir": _DARK_GREEN,
    "typechange": _DARK_YELLOW,
    "deleted": _DARK_RED,
    "renamed": _DARK_GREEN,
    "modified": _DARK_YELLOW,
    "conflicted": _DARK_RED,
}

_LS_TYPE_KEYS: dict[ElemKind, str] = {
    ElemKind.DIR: "di",
    ElemKind.SYMLINK: "ln",
    ElemKind.BROKEN_SYMLINK: "or",
    ElemKind.MISSING_SYMLINK_TARGET: "mi",
    ElemKind.PIPE: "pi",
    ElemKind.SOCKET: "so",
    ElemKind.BLOCK_DEVICE: "bd",
    ElemKind.CHAR_DEVICE: "cd",
}


def _color_code(elem: Elem) -> int:
    if elem.kind is ElemKind.FILE:
        return 40 if elem.executable else 184
    if elem.kind in (ElemKind.INODE, ElemKind.LINKS):
        return 13 if elem.valid else 245
    if elem.kind is ElemKind.GIT_STATUS:
        return _GIT_PALETTE.get(elem.status or "default", 245)
    return _PALETTE[elem.kind]


def _parse_ls_colors(spec: str) -> tuple[dict[str, str], list[tuple[str, str]]]:
    types: dict[str, str] = {}
    patterns: list[tuple[str, str]] = []
    for entry in spec.split(":"):
        key, sep, value = entry.partition("=")
        if not sep or not key or not value:
            continue
        if key.startswith("*"):
            patterns.append((key, value))
        else:
            types[key] = value
    return types, patterns


class Colors:
    """Colours text for an element according to a theme."""

    def __init__(self, theme: ThemeOption = ThemeOption.DEFAULT, ls_colors: str | None = None):
        self.theme = theme
        if theme is ThemeOption.DEFAULT:
            if ls_colors is None:
                ls_colors = os.environ.get("LS_COLORS", "")
            self._types, self._patterns = _parse_ls_colors(ls_colors)
        else:
            self._types, self._patterns = {}, []

    def colorize(self, text: object, elem: Elem) -> str:
        """Return the text styled with the colour of the element."""
        text = str(text)
        if self.theme is ThemeOption.NO_COLOR:
            return text
        return f"\x1b[38;5;{_color_code(elem)}m{text}\x1b[39m"

    def colorize_using_path(self, text: object, path: str | os.PathLike, elem: Elem) -> str:
        """Colour the text, letting LS_COLORS decide by the path where it applies."""
        text = str(text)
        if self.theme is not ThemeOption.DEFAULT:
            return self.colorize(text, elem)
        code = self._ls_code(Path(path).name, elem)
        if code is None:
            return self.colorize(text, elem)
        return f"\x1b[{code}m{text}\x1b[0m"

    def _ls_code(self, name: str, elem: Elem) -> str | None:
        if elem.kind is ElemKind.FILE:
            key = "ex" if elem.executable else None
        else:
            key = _LS_TYPE_KEYS.get(elem.kind)
        if key is not None and key in self._types:
            return self._types[key]
        if elem.kind is not ElemKind.FILE:
            return None
        for pattern, code in reversed(self._patterns):
            if fnmatch.fnmatchcase(name, pattern):
                return code
        return self._types.get("fi")