"""Settings that control how a listing is produced."""

from __future__ import annotations

import enum
import fnmatch
from dataclasses import dataclass, field


class SizeFlag(enum.Enum):
    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"


class PermissionFlag(enum.Enum):
    RWX = "rwx"
    OCTAL = "octal"
    ATTRIBUTES = "attributes"
    DISABLE = "disable"


class DateFlag(enum.Enum):
    """Date style; FORMATTED uses Flags.date_format."""

    DATE = "date"
    LOCALE = "locale"
    RELATIVE = "relative"
    ISO = "iso"
    FORMATTED = "formatted"


class SortColumn(enum.Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"
    TYPE = "type"
    VERSION = "version"
    EXTENSION = "extension"
    GIT_STATUS = "git"
    NONE = "none"


class SortOrder(enum.Enum):
    DEFAULT = "default"
    REVERSE = "reverse"


class DirGrouping(enum.Enum):
    NONE = "none"
    FIRST = "first"
    LAST = "last"


class Display(enum.Enum):
    ALL = "all"
    ALMOST_ALL = "almost-all"
    DIRECTORY_ONLY = "directory-only"
    VISIBLE_ONLY = "visible-only"
    SYSTEM_PROTECTED = "system-protected"


class Layout(enum.Enum):
    GRID = "grid"
    TREE = "tree"
    ONE_LINE = "oneline"


class HyperlinkOption(enum.Enum):
    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


@dataclass
class TruncateOwner:
    """Cut owner names after a number of characters, appending a marker."""

    after: int | None = None
    marker: str | None = None


@dataclass
class Sorting:
    column: SortColumn = SortColumn.NAME
    order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE


@dataclass
class Flags:
    """All settings of a listing."""

    size: SizeFlag = SizeFlag.DEFAULT
    permission: PermissionFlag = PermissionFlag.RWX
    date: DateFlag = DateFlag.DATE
    date_format: str | None = None
    sorting: Sorting = field(default_factory=Sorting)
    display: Display = Display.VISIBLE_ONLY
    layout: Layout = Layout.GRID
    display_indicators: bool = False
    truncate_owner: TruncateOwner = field(default_factory=TruncateOwner)
    symlink_arrow: str = "\u21d2"
    ignore_globs: tuple[str, ...] = ()
    dereference: bool = False
    blocks: tuple[str, ...] = ("name",)
    hyperlink: HyperlinkOption = HyperlinkOption.NEVER
    literal: bool = False

    def is_ignored(self, name: str) -> bool:
        """Whether a file name matches one of the ignore globs."""
        return any(fnmatch.fnmatchcase(name, glob) for glob in self.ignore_globs)