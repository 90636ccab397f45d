"""Symbolic link targets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from lsview.options import Flags
from lsview.style import Colors, Elem, ElemKind


@dataclass(frozen=True)
class SymLink:
    """The target of a link, if the path is one, and whether it exists."""

    target: str | None = None
    valid: bool = False

    def render(self, colors: Colors, flags: Flags) -> str:
        if self.target is None:
            return ""
        kind = ElemKind.SYMLINK if self.valid else ElemKind.MISSING_SYMLINK_TARGET
        return f" {flags.symlink_arrow} " + colors.colorize(self.target, Elem(kind))


def symlink_for_path(path: str | os.PathLike) -> SymLink:
    """Read the link at path; a path that is not a link has no target."""
    path = Path(path)
    try:
        target = os.readlink(path)
    except OSError:
        return SymLink()
    target_path = Path(target)
    resolved = target_path if target_path.is_absolute() else path.parent / target_path
    return SymLink(target=target, valid=resolved.exists())