"""Tests for the cargo2port command line."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cargo2port.cli import app
from cargo2port.core.types import AlignmentMode, Package
from cargo2port.fetch.registry import RegistryClient
from cargo2port.output.formatter import format_cargo_crates
from conftest import ADLER_SUM, AHO_SUM, MEMCHR_SUM, NO_CHECKSUM_LOCK, SAMPLE_LOCK

runner = CliRunner()

EXPECTED = [
    Package(name="adler", version="1.0.2", checksum=ADLER_SUM),
    Package(name="aho-corasick", version="1.1.3", checksum=AHO_SUM),
    Package(name="memchr", version="2.7.4", checksum=MEMCHR_SUM),
]


def _block(mode: AlignmentMode) -> str:
    return format_cargo_crates(EXPECTED, mode) + "\n"


@pytest.mark.parametrize("mode", list(AlignmentMode))
def test_align_flag_selects_mode(sample_lock_path, mode):
    result = runner.invoke(app, [f"--align={mode.value}", str(sample_lock_path)])

    assert result.exit_code == 0
    assert result.stdout == _block(mode)


def test_default_mode_is_justify(sample_lock_path):
    result = runner.invoke(app, [str(sample_lock_path)])

    assert result.exit_code == 0
    assert result.stdout == _block(AlignmentMode.JUSTIFY)


def test_last_align_flag_wins(sample_lock_path):
    result = runner.invoke(app, ["--align=plain", "--align=justify", str(sample_lock_path)])

    assert result.exit_code == 0
    assert result.stdout == _block(AlignmentMode.JUSTIFY)


def test_no_sources_reads_lockfile_in_working_directory(monkeypatch, sample_lock_path):
    monkeypatch.chdir(sample_lock_path.parent)

    result = runner.invoke(app, ["--align=plain"])

    assert result.exit_code == 0
    assert result.stdout == _block(AlignmentMode.NORMAL)


def test_directory_source(sample_lock_path):
    result = runner.invoke(app, ["--align=maxlen", str(sample_lock_path.parent)])

    assert result.exit_code == 0
    assert result.stdout == _block(AlignmentMode.MAXLEN)


def test_stdin_source():
    result = runner.invoke(app, ["--align=plain", "-"], input=SAMPLE_LOCK)

    assert result.exit_code == 0
    assert result.stdout == _block(AlignmentMode.NORMAL)


def test_sources_are_merged_and_deduplicated(sample_lock_path, monkeypatch):
    monkeypatch.setattr(RegistryClient, "fetch_lockfile_text", lambda self, name, version: SAMPLE_LOCK)

    result = runner.invoke(app, ["--align=plain", str(sample_lock_path), "ripgrep@14.1.0"])

    assert result.exit_code == 0
    assert result.stdout == _block(AlignmentMode.NORMAL)


def test_empty_result_exits_zero_without_block(tmp_path):
    lock = tmp_path / "Cargo.lock"
    lock.write_text(NO_CHECKSUM_LOCK, encoding="utf-8")

    result = runner.invoke(app, [str(lock)])

    assert result.exit_code == 0
    assert "cargo.crates" not in result.stdout
    assert "No packages with checksums found." in result.output


def test_missing_path_exits_one(tmp_path):
    missing = tmp_path / "nowhere.lock"

    result = runner.invoke(app, [str(missing)])

    assert result.exit_code == 1
    assert "cannot find file" in result.output
    assert "cargo.crates" not in result.stdout


def test_bad_crate_spec_exits_one():
    result = runner.invoke(app, ["ripgrep@"])

    assert result.exit_code == 1
    assert "invalid crate specifier: ripgrep@" in result.output


def test_malformed_lockfile_exits_one(tmp_path):
    lock = tmp_path / "Cargo.lock"
    lock.write_text("[[package]\n", encoding="utf-8")

    result = runner.invoke(app, [str(lock)])

    assert result.exit_code == 1
    assert "invalid Cargo.lock" in result.output


@pytest.mark.parametrize("flag", ["--help", "-h", "-?"])
def test_help_flags_print_usage_to_stderr(flag):
    result = runner.invoke(app, [flag])

    assert result.exit_code == 0
    assert result.stdout == ""
    assert "--align" in result.stderr
    assert "Usage:" in result.stderr


def test_help_wins_over_other_arguments(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing.lock"), "-h"])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_align_value_is_case_insensitive(sample_lock_path):
    result = runner.invoke(app, ["--align=MAXLEN", str(sample_lock_path)])

    assert result.exit_code == 0
    assert result.stdout == _block(AlignmentMode.MAXLEN)


def test_unknown_align_value_exits_one(sample_lock_path):
    result = runner.invoke(app, ["--align=bogus", str(sample_lock_path)])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "invalid alignment mode: bogus" in result.stderr
