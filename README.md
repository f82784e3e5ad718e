# flujo

`flujo` times a small file-processing pipeline. The pipeline runs on one
input file and repeats its work a given number of times.

The stages are:

1. **Copy**: the original is copied to `copias/1.txt` … `copias/N.txt`.
2. **Encrypt + hash**: each copy is encrypted and written to
   `cifrados/<i>.txt`. A 32-byte digest of the ciphertext is written as
   64 hex digits to `sha/<i>.sha`.
3. **Verify**: each ciphertext is decrypted and compared with the original.

The cipher is deliberately simple. ASCII letters move three places forward
and keep their case. Each decimal digit `d` becomes `9 - d`. Every other
character or byte is left as it is.

The digest (`toy_hash`) is a lightweight rolling checksum. It is not SHA-256
and it is not a cryptographic hash.

## Installation

```
pip install .
```

To install with the test dependencies (pytest):

```
pip install ".[test]"
```

## Command line

```
flujo [opt] <original> <N>
```

`N` is read as a leading integer. Text that does not start with a number
counts as 0.

The optional word `opt` is accepted but does not change anything. The
command always runs both passes, one after the other. Both passes write
their output directories into the current working directory.

- **Base pass**: the stages run one after another, and each stage covers
  all `N` files. Verification writes each decrypted text to a temporary
  `tmp.txt`, compares it with the original, and then removes it. On the
  first mismatch the pass prints `Fallo en copia <i>` to standard error and
  stops verifying. The report shows:
  - the CPU time at the start (`TI`) and at the end (`TFIN`),
  - the time for each stage (`Copiado`, `Cif+Hash`, `Verif`),
  - the total time (`TT`),
  - the average time per file (`TPPA`),
  - a line saying whether verification passed.
- **Optimised pass**: the original is read into memory once. Each file then
  goes through copy, encrypt, hash and an in-memory round-trip check before
  the next file starts. The report shows `TI`, `TFIN`, `TT`, `TPPA` and the
  verification line.

All times are process CPU time in milliseconds.

The command exits with status 0 after both reports are printed, even if
verification failed. If fewer than two arguments follow the optional `opt`,
it prints a usage line to standard error and exits with status 1.

## Library use

```python
from flujo.cipher import encrypt, decrypt
from flujo.digest import toy_hash, hash_to_hex

cipher_text = encrypt(b"Hello 123")
assert decrypt(cipher_text) == b"Hello 123"
print(hash_to_hex(toy_hash(cipher_text)))
```

`encrypt` and `decrypt` take either `str` or `bytes` and return the same
type. `toy_hash` returns a `Hash32`, which holds 32 bytes in `value`.
Calling `Hash32.hex()` gives the same string as `hash_to_hex`.

The pipeline functions take a `root` directory to work in. It defaults to
the current directory.

```python
from pathlib import Path
from flujo.pipeline import run_base, run_opt

report = run_base(Path("input.txt"), 10, Path("work"))
print(report.ok, report.total_ms)
print(report.format())
print(run_opt(Path("input.txt"), 10, Path("work")).format())
```

`run_base` returns a `BaseReport` and `run_opt` returns an `OptReport`. The
separate stages are also available as `copy_files`, `encrypt_and_hash` and
`verify_all`.

Other helpers:

- `flujo.verify.files_equal` compares two files byte by byte. It returns
  `False` if either file cannot be opened.
- `flujo.fsutil` provides `create_dir`, `copy_file`, `remove_file` and
  `parse_int`.