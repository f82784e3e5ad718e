from pathlib import Path

import pytest

from flujo.cipher import encrypt
from flujo.digest import toy_hash
from flujo.pipeline import (
    BaseReport,
    OptReport,
    copy_files,
    encrypt_and_hash,
    main,
    run_base,
    run_opt,
    verify_all,
)

CONTENT = b"Hello World 0123456789 xyz XYZ!\n" * 50


@pytest.fixture
def original(tmp_path: Path) -> Path:
    path = tmp_path / "original.txt"
    path.write_bytes(CONTENT)
    return path


@pytest.fixture
def work(tmp_path: Path) -> Path:
    root = tmp_path / "work"
    root.mkdir()
    return root


def test_copy_files_creates_identical_copies(original, work):
    copy_files(original, 3, work)
    copies = sorted(p.name for p in (work / "copias").iterdir())
    assert copies == ["1.txt", "2.txt", "3.txt"]
    for name in copies:
        assert (work / "copias" / name).read_bytes() == CONTENT


def test_encrypt_and_hash_writes_cipher_and_digest(original, work):
    copy_files(original, 2, work)
    encrypt_and_hash(2, work)
    for index in (1, 2):
        cipher = (work / "cifrados" / f"{index}.txt").read_bytes()
        assert cipher == encrypt(CONTENT)
        digest = (work / "sha" / f"{index}.sha").read_text()
        assert digest == toy_hash(cipher).hex()
        assert len(digest) == 64


def test_encrypt_and_hash_missing_copy_gives_empty_cipher(work):
    encrypt_and_hash(1, work)
    assert (work / "cifrados" / "1.txt").read_bytes() == b""
    assert (work / "sha" / "1.sha").read_text() == "0" * 64


def test_verify_all_accepts_good_ciphers(original, work):
    copy_files(original, 3, work)
    encrypt_and_hash(3, work)
    assert verify_all(3, original, work) is True
    assert not (work / "tmp.txt").exists()


def test_verify_all_reports_tampered_copy(original, work, capsys):
    copy_files(original, 3, work)
    encrypt_and_hash(3, work)
    (work / "cifrados" / "2.txt").write_bytes(b"tampered")
    assert verify_all(3, original, work) is False
    assert "Fallo en copia 2" in capsys.readouterr().err
    assert not (work / "tmp.txt").exists()


def test_run_base_succeeds_and_reports(original, work):
    report = run_base(original, 4, work)
    assert isinstance(report, BaseReport)
    assert report.ok is True
    assert report.total_ms >= 0
    assert report.end_ms >= report.start_ms
    text = report.format()
    assert "PROCESO BASE" in text
    assert f"TT: {report.total_ms} ms" in text
    assert "Verificación OK" in text
    assert len(list((work / "sha").iterdir())) == 4


def test_run_opt_matches_base_outputs(original, tmp_path):
    base_root = tmp_path / "base"
    opt_root = tmp_path / "opt"
    base_root.mkdir()
    opt_root.mkdir()
    run_base(original, 2, base_root)
    report = run_opt(original, 2, opt_root)
    assert isinstance(report, OptReport)
    assert report.ok is True
    for sub, name in (("copias", "1.txt"), ("cifrados", "2.txt"), ("sha", "2.sha")):
        assert (opt_root / sub / name).read_bytes() == (base_root / sub / name).read_bytes()
    text = report.format()
    assert "PROCESO OPTIMIZADO" in text
    assert f"TFIN: {report.end_ms} ms" in text


def test_error_report_format_marks_failure():
    report = OptReport(start_ms=1, end_ms=5, total_ms=4, per_file_ms=2.0, ok=False)
    text = report.format()
    assert "Error de verificación" in text
    assert "TPPA: 2 ms" in text


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Uso: flujo [opt] <original> <N>" in capsys.readouterr().err


def test_main_opt_without_count_prints_usage(capsys):
    assert main(["opt", "file.txt"]) == 1
    assert "Uso:" in capsys.readouterr().err


def test_main_runs_both_pipelines(original, work, monkeypatch, capsys):
    monkeypatch.chdir(work)
    assert main([str(original), "2"]) == 0
    out = capsys.readouterr().out
    assert "PROCESO BASE" in out
    assert "PROCESO OPTIMIZADO" in out
    assert out.count("Verificación OK") == 2
    assert (work / "cifrados" / "2.txt").read_bytes() == encrypt(CONTENT)


def test_main_accepts_opt_flag(original, work, monkeypatch, capsys):
    monkeypatch.chdir(work)
    assert main(["opt", str(original), "1"]) == 0
    out = capsys.readouterr().out
    assert "PROCESO OPTIMIZADO" in out
    assert (work / "copias" / "1.txt").read_bytes() == CONTENT