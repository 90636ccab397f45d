"""Unix permission bits and how they are shown."""

from __future__ import annotations

import stat
from dataclasses import dataclass

from lsview.options import Flags, PermissionFlag
from lsview.style import Colors, Elem, ElemKind


def _octal_digit(first: bool, second: bool, third: bool) -> str:
    return str(first * 4 + second * 2 + third)


@dataclass(frozen=True)
class Permissions:
    """The read, write and execute bits of owner, group and others, with the special bits."""

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    def is_executable(self) -> bool:
        """Whether anyone may execute the file."""
        return self.user_execute or self.group_execute or self.other_execute

    def render(self, colors: Colors, flags: Flags) -> str:
        """The permissions as rwx letters or octal digits, as the flags ask."""
        if flags.permission is PermissionFlag.RWX:
            return self._render_rwx(colors)
        if flags.permission is PermissionFlag.OCTAL:
            digits = "".join(
                (
                    _octal_digit(self.setuid, self.setgid, self.sticky),
                    _octal_digit(self.user_read, self.user_write, self.user_execute),
                    _octal_digit(self.group_read, self.group_write, self.group_execute),
                    _octal_digit(self.other_read, self.other_write, self.other_execute),
                )
            )
            return colors.colorize(digits, Elem(ElemKind.OCTAL))
        return colors.colorize("-", Elem(ElemKind.NO_ACCESS))

    def _render_rwx(self, colors: Colors) -> str:
        def bit(on: bool, letter: str, kind: ElemKind) -> str:
            if on:
                return colors.colorize(letter, Elem(kind))
            return colors.colorize("-", Elem(ElemKind.NO_ACCESS))

        def execute(on: bool, special: bool, letter: str) -> str:
            if special:
                symbol = letter if on else letter.upper()
                return colors.colorize(symbol, Elem(ElemKind.EXEC_STICKY))
            return bit(on, "x", ElemKind.EXEC)

        return "".join(
            (
                bit(self.user_read, "r", ElemKind.READ),
                bit(self.user_write, "w", ElemKind.WRITE),
                execute(self.user_execute, self.setuid, "s"),
                bit(self.group_read, "r", ElemKind.READ),
                bit(self.group_write, "w", ElemKind.WRITE),
                execute(self.group_execute, self.setgid, "s"),
                bit(self.other_read, "r", ElemKind.READ),
                bit(self.other_write, "w", ElemKind.WRITE),
                execute(self.other_execute, self.sticky, "t"),
            )
        )


def permissions_from_mode(mode: int) -> Permissions:
    """Read the permission bits of a st_mode value."""

    def has(bit: int) -> bool:
        return mode & bit == bit

    return Permissions(
        user_read=has(stat.S_IRUSR),
        user_write=has(stat.S_IWUSR),
        user_execute=has(stat.S_IXUSR),
        group_read=has(stat.S_IRGRP),
        group_write=has(stat.S_IWGRP),
        group_execute=has(stat.S_IXGRP),
        other_read=has(stat.S_IROTH),
        other_write=has(stat.S_IWOTH),
        other_execute=has(stat.S_IXOTH),
        sticky=has(stat.S_ISVTX),
        setgid=has(stat.S_ISGID),
        setuid=has(stat.S_ISUID),
    )