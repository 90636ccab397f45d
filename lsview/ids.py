"""Inode numbers and hard-link counts."""

from __future__ import annotations

import os
from dataclasses import dataclass

from lsview.style import Colors, Elem, ElemKind


@dataclass(frozen=True)
class INode:
    index: int | None = None

    def render(self, colors: Colors) -> str:
        if self.index is None:
            return colors.colorize("-", Elem(ElemKind.INODE, valid=False))
        return colors.colorize(str(self.index), Elem(ElemKind.INODE, valid=True))


@dataclass(frozen=True)
class Links:
    nlink: int | None = None

    def render(self, colors: Colors) -> str:
        if self.nlink is None:
            return colors.colorize("-", Elem(ElemKind.LINKS, valid=False))
        return colors.colorize(str(self.nlink), Elem(ElemKind.LINKS, valid=True))


def inode_from_stat(st: os.stat_result) -> INode:
    """The inode of a stat result; unknown on Windows."""
    if os.name == "nt":
        return INode(None)
    return INode(st.st_ino)


def links_from_stat(st: os.stat_result) -> Links:
    """The hard-link count of a stat result; unknown on Windows."""
    if os.name == "nt":
        return Links(None)
    return Links(st.st_nlink)