#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the exebat command-line interface."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
import pytest

from exebat.cli import main as cli_main
from exebat.payload import extract_payload

MZ_STUB = bytes([0x4D, 0x5A, 0x90, 0x00])


@pytest.fixture
def exe_file(tmp_path: Path) -> Path:
    path = tmp_path / "setup.exe"
    path.write_bytes(MZ_STUB)
    return path


@pytest.mark.integration
class TestConvertCommand:
    """Test suite for 'exebat convert'."""

    def test_writes_script_next_to_input(self, exe_file: Path) -> None:
        result = CliRunner().invoke(cli_main, ["convert", str(exe_file)])

        assert result.exit_code == 0, result.output
        script = exe_file.with_suffix(".bat")
        assert script.exists()
        assert extract_payload(script.read_text(encoding="ascii")) == "TVqQAA=="

    def test_output_dir(self, exe_file: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        result = CliRunner().invoke(cli_main, ["convert", str(exe_file), "-o", str(out_dir)])

        assert result.exit_code == 0, result.output
        assert (out_dir / "setup.bat").exists()

    def test_refuses_to_overwrite(self, exe_file: Path) -> None:
        script = exe_file.with_suffix(".bat")
        script.write_text("existing")

        result = CliRunner().invoke(cli_main, ["convert", str(exe_file)])

        assert result.exit_code != 0
        assert script.read_text() == "existing"

    def test_force_overwrites(self, exe_file: Path) -> None:
        script = exe_file.with_suffix(".bat")
        script.write_text("existing")

        result = CliRunner().invoke(cli_main, ["convert", str(exe_file), "--force"])

        assert result.exit_code == 0, result.output
        assert "-----BEGIN PAYLOAD-----" in script.read_text()

    def test_encoding_failure_writes_nothing(self, tmp_path: Path) -> None:
        good = tmp_path / "good.exe"
        good.write_bytes(MZ_STUB)
        bad = tmp_path / "程序.exe"
        bad.write_bytes(MZ_STUB)

        result = CliRunner().invoke(cli_main, ["convert", str(good), str(bad)])

        assert result.exit_code != 0
        assert not (tmp_path / "good.bat").exists()
        assert not (tmp_path / "程序.bat").exists()

    def test_same_named_inputs_collide(self, tmp_path: Path) -> None:
        first = tmp_path / "a" / "setup.exe"
        second = tmp_path / "b" / "setup.exe"
        for path, data in ((first, MZ_STUB), (second, MZ_STUB + b"\x01")):
            path.parent.mkdir()
            path.write_bytes(data)
        out_dir = tmp_path / "out"

        result = CliRunner().invoke(cli_main, ["convert", str(first), str(second), "-o", str(out_dir)])

        assert result.exit_code != 0
        assert not (out_dir / "setup.bat").exists()

    def test_same_named_inputs_collide_even_with_force(self, tmp_path: Path) -> None:
        first = tmp_path / "a" / "setup.exe"
        second = tmp_path / "b" / "setup.exe"
        for path in (first, second):
            path.parent.mkdir()
            path.write_bytes(MZ_STUB)
        out_dir = tmp_path / "out"

        args = ["convert", str(first), str(second), "-o", str(out_dir), "--force"]
        result = CliRunner().invoke(cli_main, args)

        assert result.exit_code != 0
        assert not (out_dir / "setup.bat").exists()

    def test_same_names_in_their_own_directories(self, tmp_path: Path) -> None:
        first = tmp_path / "a" / "setup.exe"
        second = tmp_path / "b" / "setup.exe"
        for path in (first, second):
            path.parent.mkdir()
            path.write_bytes(MZ_STUB)

        result = CliRunner().invoke(cli_main, ["convert", str(first), str(second)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "a" / "setup.bat").exists()
        assert (tmp_path / "b" / "setup.bat").exists()

    def test_missing_input(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli_main, ["convert", str(tmp_path / "absent.exe")])
        assert result.exit_code != 0


@pytest.mark.integration
class TestExtractCommand:
    """Test suite for 'exebat extract'."""

    def test_recovers_original_bytes(self, exe_file: Path, tmp_path: Path) -> None:
        runner = CliRunner()
        assert runner.invoke(cli_main, ["convert", str(exe_file)]).exit_code == 0

        recovered = tmp_path / "recovered.exe"
        result = runner.invoke(cli_main, ["extract", str(exe_file.with_suffix(".bat")), str(recovered)])

        assert result.exit_code == 0, result.output
        assert recovered.read_bytes() == MZ_STUB

    def test_rejects_script_without_payload(self, tmp_path: Path) -> None:
        script = tmp_path / "plain.bat"
        script.write_text("@echo off\n")

        result = CliRunner().invoke(cli_main, ["extract", str(script), str(tmp_path / "out.exe")])

        assert result.exit_code != 0
        assert not (tmp_path / "out.exe").exists()


@pytest.mark.integration
def test_formats_command() -> None:
    result = CliRunner().invoke(cli_main, ["formats"])

    assert result.exit_code == 0, result.output
    assert "exe2bat" in result.output
    assert "application/vnd.microsoft.portable-executable" in result.output
    assert "lossless" in result.output


@pytest.mark.integration
def test_version_option() -> None:
    result = CliRunner().invoke(cli_main, ["--version"])
    assert result.exit_code == 0
    assert "exebat version" in result.output
