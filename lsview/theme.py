"""Loading theme files written in YAML."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml


class ThemeError(Exception):
    """A theme file could not be loaded."""


class ThemeReadError(ThemeError):
    def __init__(self) -> None:
        super().__init__("Can not read the theme file")


class ThemeFormatError(ThemeError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Theme file format invalid")
        self.detail = detail


class ThemePathError(ThemeError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Theme file path invalid {path}")
        self.path = path


def parse_theme_yaml(text: str, default: Mapping[str, Any]) -> dict[str, Any]:
    """Parse a theme document; keys must be those of default, missing ones keep it."""
    if text.strip() == "":
        return dict(default)
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ThemeFormatError(str(exc)) from exc
    if document is None:
        return dict(default)
    if not isinstance(document, Mapping):
        raise ThemeFormatError("the document is not a mapping")
    unknown = [key for key in document if key not in default]
    if unknown:
        raise ThemeFormatError(f"unknown field {unknown[0]!r}")
    return {**default, **document}


def _expand_home(file: str) -> str | None:
    if not file.startswith("~"):
        return file
    expanded = os.path.expanduser(file)
    return None if expanded.startswith("~") else expanded


def load_theme(
    file: str, search_dirs: Iterable[str | os.PathLike], default: Mapping[str, Any]
) -> dict[str, Any]:
    """Find a theme as file.yaml or file.yml and parse it.

    An absolute path is used as it is; otherwise each search directory is tried in order.
    """
    real = _expand_home(file)
    if real is None:
        print(f"lsview: Not a valid theme file path: {file}.", file=sys.stderr)
        raise ThemePathError(file)

    real_path = Path(real)
    candidates = [real_path] if real_path.is_absolute() else [Path(d) / real_path for d in search_dirs]

    found = next(
        (
            candidate
            for base in candidates
            for candidate in (base.with_suffix(".yaml"), base.with_suffix(".yml"))
            if candidate.is_file()
        ),
        None,
    )
    if found is None:
        raise ThemePathError("No valid theme file found")

    try:
        text = found.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeReadError() from exc
    return parse_theme_yaml(text, default)