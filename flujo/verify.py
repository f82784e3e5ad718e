"""Byte-for-byte comparison of two files."""

from __future__ import annotations

import os
from contextlib import ExitStack

__all__ = ["files_equal"]

_CHUNK = 8192


def files_equal(original: str | os.PathLike[str], copy: str | os.PathLike[str]) -> bool:
    """Return True if both files open and hold exactly the same bytes."""
    with ExitStack() as stack:
        try:
            first = stack.enter_context(open(original, "rb"))
            second = stack.enter_context(open(copy, "rb"))
        except OSError:
            return False
        while True:
            left = first.read(_CHUNK)
            right = second.read(_CHUNK)
            if left != right:
                return False
            if not left:
                return True