# lsview

`lsview` turns file metadata into the coloured fields of an `ls`-style
listing: file type markers, permissions, sizes, dates, inode numbers,
hard-link counts, link targets, type indicators and quoted names. Each
renderer returns a plain string, with ANSI 256-colour escapes unless
colouring is turned off.

## Installation

```
pip install .
```

## Modules

- `lsview.style`: `Colors(theme, ls_colors=None)` with `ThemeOption`
  (`DEFAULT`, `NO_LSCOLORS`, `NO_COLOR`). `Colors.colorize(text, elem)`
  colours text for an `Elem` (an `ElemKind` plus details such as
  `executable` or `valid`); `Colors.colorize_using_path` lets `LS_COLORS`
  choose the colour by file type or name pattern under the default theme.
- `lsview.options`: `Flags` and its parts `Sorting` and `TruncateOwner`, with
  the enums `SizeFlag`, `PermissionFlag`, `DateFlag`, `SortColumn`,
  `SortOrder`, `DirGrouping`, `Display`, `Layout` and `HyperlinkOption`.
  `Flags.is_ignored(name)` tests a name against `ignore_globs`.
- `lsview.filetype`: `file_type_from_stat(st, target_st, permissions)` gives a
  `FileType` (a `FileKind` with details); `FileType.is_dirlike()` and
  `FileType.render(colors)`.
- `lsview.permissions`: `permissions_from_mode(mode)` gives `Permissions`,
  rendered as `rwxr-xr-x` letters or, with `PermissionFlag.OCTAL`, as
  `0755`.
- `lsview.size`: `Size(bytes)` with `value_string`, `unit_string`,
  `render_value`, `render_unit` and `render(colors, flags, val_alignment)`.
  Units are binary (`KB`, `MB`, ... or `K`, `M`, ... with `SizeFlag.SHORT`),
  with one decimal place below ten.
- `lsview.date`: `date_from_timestamp(timestamp)` gives a `Date`;
  `Date.date_string(flags)` formats it as a full date, in the locale, relative
  (`2 days ago`), ISO-like, or with `Flags.date_format`, and `Date.render`
  colours it by age. `current_locale()` reads the locale from the environment.
- `lsview.ids`: `inode_from_stat` and `links_from_stat` give `INode` and
  `Links`, each with `render(colors)`.
- `lsview.symlink`: `symlink_for_path(path)` gives a `SymLink` with its target
  and whether the target exists; `render` shows `⇒ target`.
- `lsview.indicator`: `indicator_for(file_type)` gives the `ls -F` style
  `Indicator` (`/`, `*`, `|`, `=`, `@`), shown when
  `Flags.display_indicators` is set.
- `lsview.escape`: `escape(text, literal)` quotes names for a shell unless
  `literal`, and escapes control characters.
- `lsview.hyperlink`: `file_url(path)` and `hyperlink(path, text, option)`,
  which wraps text in a terminal hyperlink to the real path.
- `lsview.disk`: `calculate_total_file_size(path)` sums the sizes of a file
  or a whole directory tree.
- `lsview.theme`: `load_theme(file, search_dirs, default)` finds
  `file.yaml` or `file.yml` and reads it with `parse_theme_yaml(text,
  default)`, raising `ThemeReadError`, `ThemeFormatError` or `ThemePathError`
  (all `ThemeError`).

## Example

```python
import os

from lsview.options import Flags, PermissionFlag, SizeFlag
from lsview.permissions import permissions_from_mode
from lsview.size import Size
from lsview.style import Colors, ThemeOption

colors = Colors(ThemeOption.NO_COLOR)

print(permissions_from_mode(0o755).render(colors, Flags()))  # rwxr-xr-x
print(permissions_from_mode(0o755).render(colors, Flags(permission=PermissionFlag.OCTAL)))  # 0755
print(Size(42 * 1024).render(colors, Flags(size=SizeFlag.SHORT), 3))  # " 42K"
print(Size(os.stat("README.md").st_size).render(colors, Flags(), None))
```

## What it does not do

`lsview` formats single fields; it is not a listing program. There is no
command to run, no record that gathers all the fields of a path, no walking
of directories into a listing, no sorting of entries, no rendering of owner
and group names or of ACL and security-context markers, no file icons, no
git status, and no grid or tree layout. Those are left to the program that
uses these modules.

## Running the tests

```
pip install .[test]
pytest
```