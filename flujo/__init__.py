"""Timed copy, encrypt, hash and verify pipeline over a single file."""

__version__ = "0.1.0"
__all__ = ["cipher", "digest", "verify", "fsutil", "pipeline"]