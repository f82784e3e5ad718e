"""A simple 32-byte rolling checksum and its hex form."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Hash32", "toy_hash", "hash_to_hex"]

DIGEST_SIZE = 32


@dataclass(frozen=True)
class Hash32:
    """A 32-byte digest."""

    value: bytes = bytes(DIGEST_SIZE)

    def __post_init__(self) -> None:
        if len(self.value) != DIGEST_SIZE:
            raise ValueError(
                f"digest must be {DIGEST_SIZE} bytes, got {len(self.value)}"
            )
        object.__setattr__(self, "value", bytes(self.value))

    def hex(self) -> str:
        """Return the digest as 64 lower-case hex digits."""
        return self.value.hex()


def toy_hash(data: bytes | str) -> Hash32:
    """Fold *data* into 32 bytes; each byte mixes in the value and its position."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    state = bytearray(DIGEST_SIZE)
    for position, byte in enumerate(data):
        slot = position % DIGEST_SIZE
        state[slot] = ((state[slot] + byte + position) * 31) & 0xFF
    return Hash32(bytes(state))


def hash_to_hex(digest: Hash32) -> str:
    """Return the hex form of *digest*."""
    return digest.hex()