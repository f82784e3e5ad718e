"""Shift cipher over ASCII letters with digit mirroring.

Letters are rotated three places forward (wrapping within their case) and
digits are mirrored (``d`` becomes ``9 - d``). Every other character or byte
is left untouched. Decryption rotates letters back; mirroring digits is its
own inverse.
"""

from __future__ import annotations

import string
from typing import TypeVar

__all__ = ["encrypt", "decrypt"]

_T = TypeVar("_T", str, bytes)

_SHIFT = 3


def _rotate(alphabet: str, shift: int) -> str:
    shift %= len(alphabet)
    return alphabet[shift:] + alphabet[:shift]


def _build(shift: int) -> tuple[dict[int, int], bytes]:
    source = string.ascii_lowercase + string.ascii_uppercase + string.digits
    target = (
        _rotate(string.ascii_lowercase, shift)
        + _rotate(string.ascii_uppercase, shift)
        + string.digits[::-1]
    )
    return str.maketrans(source, target), bytes.maketrans(
        source.encode("ascii"), target.encode("ascii")
    )


_ENC_STR, _ENC_BYTES = _build(_SHIFT)
_DEC_STR, _DEC_BYTES = _build(-_SHIFT)


def _apply(data: _T, str_table: dict[int, int], bytes_table: bytes) -> _T:
    if isinstance(data, str):
        return data.translate(str_table)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).translate(bytes_table)
    raise TypeError(f"expected str or bytes, got {type(data).__name__}")


def encrypt(data: _T) -> _T:
    """Encrypt text or bytes, returning the same type."""
    return _apply(data, _ENC_STR, _ENC_BYTES)


def decrypt(data: _T) -> _T:
    """Reverse :func:`encrypt`, returning the same type."""
    return _apply(data, _DEC_STR, _DEC_BYTES)