"""Terminal hyperlinks to files."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from lsview.options import HyperlinkOption


def file_url(path: str | os.PathLike) -> str:
    """The file URL of an absolute path; a relative path raises ValueError."""
    return Path(path).as_uri()


def hyperlink(path: str | os.PathLike, text: str, option: HyperlinkOption) -> str:
    """Wrap text in a terminal hyperlink to the real path when option is ALWAYS.

    A path that no longer exists, such as the target of a broken link, is
    shown as plain text without complaint; other failures are reported on
    standard error and also fall back to plain text.
    """
    if option is not HyperlinkOption.ALWAYS:
        return text
    try:
        real = os.path.realpath(path, strict=True)
    except FileNotFoundError:
        return text
    except OSError as exc:
        print(f"lsview: {text}: {exc}", file=sys.stderr)
        return text
    try:
        url = file_url(real)
    except ValueError:
        print(f"lsview: {text}: unable to form url.", file=sys.stderr)
        return text
    return f"\x1b]8;;{url}\x1b\\{text}\x1b]8;;\x1b\\"