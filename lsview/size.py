"""File sizes in human-readable units."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from lsview.options import Flags, SizeFlag
from lsview.style import Colors, Elem, ElemKind

KB = 1024
MB = 1024**2
GB = 1024**3
TB = 1024**4


class Unit(enum.Enum):
    BYTE = 1
    KILO = KB
    MEGA = MB
    GIGA = GB
    TERA = TB


_LONG_NAMES = {Unit.BYTE: "B", Unit.KILO: "KB", Unit.MEGA: "MB", Unit.GIGA: "GB", Unit.TERA: "TB"}
_SHORT_NAMES = {Unit.BYTE: "B", Unit.KILO: "K", Unit.MEGA: "M", Unit.GIGA: "G", Unit.TERA: "T"}


def _format_number(number: float) -> str:
    return f"{number:.1f}" if number < 10.0 else f"{number:.0f}"


@dataclass(frozen=True, order=True)
class Size:
    """A size in bytes."""

    bytes: int

    def _unit(self, flags: Flags) -> Unit:
        if flags.size is SizeFlag.BYTES or self.bytes < KB:
            return Unit.BYTE
        if self.bytes < MB:
            return Unit.KILO
        if self.bytes < GB:
            return Unit.MEGA
        if self.bytes < TB:
            return Unit.GIGA
        return Unit.TERA

    def value_string(self, flags: Flags) -> str:
        """The number part, with one decimal below ten."""
        unit = self._unit(flags)
        if unit is Unit.BYTE:
            return str(self.bytes)
        rounded = math.floor(self.bytes / unit.value * 10.0 + 0.5) / 10.0
        return _format_number(rounded)

    def unit_string(self, flags: Flags) -> str:
        """The unit part; empty when sizes are shown in plain bytes."""
        if flags.size is SizeFlag.BYTES:
            return ""
        unit = self._unit(flags)
        names = _SHORT_NAMES if flags.size is SizeFlag.SHORT else _LONG_NAMES
        return names[unit]

    def _paint(self, colors: Colors, text: str) -> str:
        if self.bytes >= GB:
            kind = ElemKind.FILE_LARGE
        elif self.bytes >= MB:
            kind = ElemKind.FILE_MEDIUM
        else:
            kind = ElemKind.FILE_SMALL
        return colors.colorize(text, Elem(kind))

    def render_value(self, colors: Colors, flags: Flags) -> str:
        return self._paint(colors, self.value_string(flags))

    def render_unit(self, colors: Colors, flags: Flags) -> str:
        return self._paint(colors, self.unit_string(flags))

    def render(self, colors: Colors, flags: Flags, val_alignment: int | None = None) -> str:
        """Value and unit, the value right-aligned to val_alignment characters."""
        value = self.value_string(flags)
        pad = " " * (val_alignment - len(value)) if val_alignment is not None else ""
        separator = "" if flags.size is SizeFlag.SHORT else " "
        return pad + self.render_value(colors, flags) + separator + self.render_unit(colors, flags)