"""Copy, encrypt, hash and verify a file N times, timing each stage.

Two variants are provided. The base pipeline runs each stage over all copies
in turn and goes through the disk between stages. The optimised pipeline
reads the original once and handles every copy in a single pass, checking
the round trip in memory.
"""

from __future__ import annotations

import math
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from flujo.cipher import decrypt, encrypt
from flujo.digest import hash_to_hex, toy_hash
from flujo.fsutil import copy_file, create_dir, parse_int, remove_file
from flujo.verify import files_equal

__all__ = [
    "BaseReport",
    "OptReport",
    "copy_files",
    "encrypt_and_hash",
    "verify_all",
    "run_base",
    "run_opt",
    "main",
]

COPIES_DIR = "copias"
CIPHER_DIR = "cifrados"
HASH_DIR = "sha"
TEMP_FILE = "tmp.txt"

_RULE = "-------------------------------"
_USAGE = "Uso: flujo [opt] <original> <N>"

PathLike = str | os.PathLike[str]


def _copy_path(root: Path, index: int) -> Path:
    return root / COPIES_DIR / f"{index}.txt"


def _cipher_path(root: Path, index: int) -> Path:
    return root / CIPHER_DIR / f"{index}.txt"


def _hash_path(root: Path, index: int) -> Path:
    return root / HASH_DIR / f"{index}.sha"


def _read_bytes(path: PathLike) -> bytes:
    """Return the file's contents, or nothing if it cannot be read."""
    try:
        return Path(path).read_bytes()
    except OSError:
        return b""


def _write_quietly(path: Path, data: bytes) -> None:
    """Write *data*, silently giving up if the file cannot be opened."""
    try:
        path.write_bytes(data)
    except OSError:
        pass


def _now_ms() -> float:
    return time.process_time() * 1000.0


def _per_file(total_ms: int, count: int) -> float:
    if count:
        return total_ms / count
    if total_ms == 0:
        return math.nan
    return math.copysign(math.inf, total_ms)


def _verdict(ok: bool) -> str:
    return "✅ Verificación OK" if ok else "❌ Error de verificación"


@dataclass(frozen=True)
class BaseReport:
    """Timings of the staged pipeline, in milliseconds of CPU time."""

    start_ms: int
    end_ms: int
    copy_ms: int
    cipher_ms: int
    verify_ms: int
    total_ms: int
    per_file_ms: float
    ok: bool

    def format(self) -> str:
        """Render the report as printed by the command."""
        return "\n".join(
            [
                _RULE,
                "PROCESO BASE",
                f"TI: {self.start_ms} ms",
                f"Copiado: {self.copy_ms} ms",
                f"Cif+Hash: {self.cipher_ms} ms",
                f"Verif: {self.verify_ms} ms",
                f"TFIN: {self.end_ms} ms",
                f"TPPA: {self.per_file_ms:g} ms",
                f"TT: {self.total_ms} ms",
                _verdict(self.ok),
                _RULE,
            ]
        )


@dataclass(frozen=True)
class OptReport:
    """Timings of the single-pass pipeline, in milliseconds of CPU time."""

    start_ms: int
    end_ms: int
    total_ms: int
    per_file_ms: float
    ok: bool

    def format(self) -> str:
        """Render the report as printed by the command."""
        return "\n".join(
            [
                _RULE,
                "PROCESO OPTIMIZADO",
                f"TI: {self.start_ms} ms",
                f"TFIN: {self.end_ms} ms",
                f"TPPA: {self.per_file_ms:g} ms",
                f"TT: {self.total_ms} ms",
                _verdict(self.ok),
                _RULE,
            ]
        )


def copy_files(original: PathLike, count: int, root: PathLike = ".") -> None:
    """Copy *original* to ``copias/1.txt`` .. ``copias/<count>.txt`` under *root*."""
    base = Path(root)
    create_dir(base / COPIES_DIR)
    for index in range(1, count + 1):
        copy_file(original, _copy_path(base, index))


def encrypt_and_hash(count: int, root: PathLike = ".") -> None:
    """Encrypt each copy into ``cifrados/`` and store its hex digest in ``sha/``."""
    base = Path(root)
    create_dir(base / CIPHER_DIR)
    create_dir(base / HASH_DIR)
    for index in range(1, count + 1):
        cipher = encrypt(_read_bytes(_copy_path(base, index)))
        _write_quietly(_cipher_path(base, index), cipher)
        digest = hash_to_hex(toy_hash(cipher))
        _write_quietly(_hash_path(base, index), digest.encode("ascii"))


def verify_all(count: int, original: PathLike, root: PathLike = ".") -> bool:
    """Decrypt every ciphered copy and compare it with *original*.

    Stops at the first mismatch, reporting it on standard error.
    """
    base = Path(root)
    temp = base / TEMP_FILE
    for index in range(1, count + 1):
        plain = decrypt(_read_bytes(_cipher_path(base, index)))
        _write_quietly(temp, plain)
        same = files_equal(original, temp)
        remove_file(temp)
        if not same:
            print(f"Fallo en copia {index}", file=sys.stderr)
            return False
    return True


def run_base(original: PathLike, count: int, root: PathLike = ".") -> BaseReport:
    """Run the staged pipeline and return its timings."""
    started = _now_ms()
    copy_files(original, count, root)
    copied = _now_ms()
    encrypt_and_hash(count, root)
    ciphered = _now_ms()
    ok = verify_all(count, original, root)
    finished = _now_ms()

    total = int(finished - started)
    return BaseReport(
        start_ms=int(started),
        end_ms=int(finished),
        copy_ms=int(copied - started),
        cipher_ms=int(ciphered - copied),
        verify_ms=int(finished - ciphered),
        total_ms=total,
        per_file_ms=_per_file(total, count),
        ok=ok,
    )


def _process_one(index: int, original: PathLike, data: bytes, base: Path) -> bool:
    try:
        copy_file(original, _copy_path(base, index))
        cipher = encrypt(data)
        _cipher_path(base, index).write_bytes(cipher)
        digest = hash_to_hex(toy_hash(cipher))
        _hash_path(base, index).write_text(digest, encoding="ascii")
        return decrypt(cipher) == data
    except OSError:
        return False


def run_opt(original: PathLike, count: int, root: PathLike = ".") -> OptReport:
    """Run the single-pass pipeline and return its timings."""
    base = Path(root)
    for name in (COPIES_DIR, CIPHER_DIR, HASH_DIR):
        create_dir(base / name)
    data = _read_bytes(original)

    started = _now_ms()
    failures = [
        index
        for index in range(1, count + 1)
        if not _process_one(index, original, data, base)
    ]
    finished = _now_ms()

    total = int(finished - started)
    return OptReport(
        start_ms=int(started),
        end_ms=int(finished),
        total_ms=total,
        per_file_ms=_per_file(total, count),
        ok=not failures,
    )


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``flujo [opt] <original> <N>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(_USAGE, file=sys.stderr)
        return 1
    if args[0] == "opt":
        args = args[1:]
    if len(args) < 2:
        print(_USAGE, file=sys.stderr)
        return 1

    original = args[0]
    count = parse_int(args[1])
    print(run_base(original, count).format())
    print(run_opt(original, count).format())
    return 0