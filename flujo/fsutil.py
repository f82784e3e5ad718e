"""Small filesystem and number-parsing helpers."""

from __future__ import annotations

import os
import re
import shutil
from contextlib import suppress
from pathlib import Path

__all__ = ["create_dir", "copy_file", "remove_file", "parse_int"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def create_dir(path: str | os.PathLike[str]) -> None:
    """Create a single directory (mode 0755); an existing one is left alone."""
    Path(path).mkdir(mode=0o755, exist_ok=True)


def copy_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> bool:
    """Copy *source* to *target* byte for byte; return False if either cannot be opened."""
    try:
        with open(source, "rb") as src, open(target, "wb") as dst:
            shutil.copyfileobj(src, dst)
    except OSError:
        return False
    return True


def remove_file(path: str | os.PathLike[str]) -> None:
    """Remove a file, ignoring any failure."""
    with suppress(OSError):
        os.remove(path)


def parse_int(text: str) -> int:
    """Read a leading integer the way a stream extraction does.

    Leading whitespace is skipped and an optional sign is allowed; text that
    does not start with a number yields 0. Values outside the 32-bit range are
    clamped to its limits.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))