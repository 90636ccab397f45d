"""The kind of a directory entry."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass
from typing import Protocol

from lsview.style import Colors, Elem, ElemKind


class _PermissionBits(Protocol):
    setuid: bool

    def is_executable(self) -> bool: ...


class FileKind(enum.IntEnum):
    """Entry kinds, in the order used when sorting by type."""

    BLOCK_DEVICE = 0
    CHAR_DEVICE = 1
    DIRECTORY = 2
    FILE = 3
    SYMLINK = 4
    PIPE = 5
    SOCKET = 6
    SPECIAL = 7


@dataclass(frozen=True, order=True)
class FileType:
    """An entry kind with the details that matter for its kind.

    ``uid`` applies to files and directories, ``executable`` to files and
    ``is_dir`` to links, telling whether the target is a directory.
    """

    kind: FileKind
    uid: bool = False
    executable: bool = False
    is_dir: bool = False

    def is_dirlike(self) -> bool:
        """Whether the entry is a directory or a link to one."""
        return self.kind is FileKind.DIRECTORY or (self.kind is FileKind.SYMLINK and self.is_dir)

    def render(self, colors: Colors) -> str:
        """The one-letter marker of the kind, coloured."""
        if self.kind is FileKind.FILE:
            return colors.colorize(".", Elem(ElemKind.FILE, executable=self.executable, uid=False))
        symbol, elem_kind = _MARKERS[self.kind]
        return colors.colorize(symbol, Elem(elem_kind))


_MARKERS: dict[FileKind, tuple[str, ElemKind]] = {
    FileKind.DIRECTORY: ("d", ElemKind.DIR),
    FileKind.PIPE: ("|", ElemKind.PIPE),
    FileKind.SYMLINK: ("l", ElemKind.SYMLINK),
    FileKind.BLOCK_DEVICE: ("b", ElemKind.BLOCK_DEVICE),
    FileKind.CHAR_DEVICE: ("c", ElemKind.CHAR_DEVICE),
    FileKind.SOCKET: ("s", ElemKind.SOCKET),
    FileKind.SPECIAL: ("?", ElemKind.SPECIAL),
}


def file_type_from_stat(
    st: os.stat_result,
    target_st: os.stat_result | None,
    permissions: _PermissionBits | None,
) -> FileType:
    """Classify a stat result.

    ``target_st`` is the stat of a link's target, or None when the link is
    broken; ``permissions`` supplies the executable and setuid bits.
    """
    mode = st.st_mode
    setuid = bool(permissions.setuid) if permissions is not None else False
    if stat.S_ISREG(mode):
        executable = permissions.is_executable() if permissions is not None else False
        return FileType(FileKind.FILE, uid=setuid, executable=executable)
    if stat.S_ISDIR(mode):
        return FileType(FileKind.DIRECTORY, uid=setuid)
    if stat.S_ISFIFO(mode):
        return FileType(FileKind.PIPE)
    if stat.S_ISLNK(mode):
        is_dir = target_st is not None and stat.S_ISDIR(target_st.st_mode)
        return FileType(FileKind.SYMLINK, is_dir=is_dir)
    if stat.S_ISCHR(mode):
        return FileType(FileKind.CHAR_DEVICE)
    if stat.S_ISBLK(mode):
        return FileType(FileKind.BLOCK_DEVICE)
    if stat.S_ISSOCK(mode):
        return FileType(FileKind.SOCKET)
    return FileType(FileKind.SPECIAL)