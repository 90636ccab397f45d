"""Space taken by files and directory trees."""

from __future__ import annotations

import os
import stat
import sys


def calculate_total_file_size(path: str | os.PathLike) -> int:
    """The size of a file, or of a directory with everything below it.

    Links and special files count as nothing. Entries that cannot be read
    are reported on standard error and skipped.
    """
    try:
        st = os.lstat(path)
    except OSError as exc:
        print(f"lsview: {os.fspath(path)}: {exc}.", file=sys.stderr)
        return 0
    if stat.S_ISREG(st.st_mode):
        return st.st_size
    if not stat.S_ISDIR(st.st_mode):
        return 0
    total = st.st_size
    try:
        with os.scandir(path) as entries:
            children = [entry.path for entry in entries]
    except OSError as exc:
        print(f"lsview: {os.fspath(path)}: {exc}.", file=sys.stderr)
        return total
    return total + sum(calculate_total_file_size(child) for child in children)