"""Type indicators appended to names, like ls -F."""

from __future__ import annotations

from dataclasses import dataclass

from lsview.filetype import FileKind, FileType
from lsview.options import Flags


@dataclass(frozen=True)
class Indicator:
    symbol: str = ""

    def render(self, flags: Flags) -> str:
        """The symbol when indicators are turned on, else nothing."""
        return self.symbol if flags.display_indicators else ""


_SYMBOLS = {
    FileKind.DIRECTORY: "/",
    FileKind.PIPE: "|",
    FileKind.SOCKET: "=",
    FileKind.SYMLINK: "@",
}


def indicator_for(file_type: FileType) -> Indicator:
    """The indicator of an entry kind."""
    if file_type.kind is FileKind.FILE:
        return Indicator("*" if file_type.executable else "")
    return Indicator(_SYMBOLS.get(file_type.kind, ""))