# SPDX-License-Identifier: MIT
"""Tests for msgcodegen CLI."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from msgcodegen import __version__, get_var
from msgcodegen.cli import main, setup_logging


def write_table(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_normal(self) -> None:
        """Test normal logging setup."""
        # Just ensure it doesn't crash
        setup_logging(verbose=False, debug=False)

    def test_setup_logging_verbose(self) -> None:
        setup_logging(verbose=True, debug=False)

    def test_setup_logging_debug(self) -> None:
        setup_logging(verbose=False, debug=True)


class TestGetVar:
    def test_reads_prefixed_variable(self, monkeypatch) -> None:
        monkeypatch.setenv("MSGCODEGEN_SOURCE_DIR", "proto")
        assert get_var("source_dir") == "proto"

    def test_default(self, monkeypatch) -> None:
        monkeypatch.delenv("MSGCODEGEN_OUTPUT_DIR", raising=False)
        assert get_var("OUTPUT_DIR", "gen") == "gen"


class TestGenerateCommand:
    def test_default_command_generates(self, tmp_path: Path) -> None:
        write_table(tmp_path / "msgs.csv", "0,PutRequest,RpbPut\n")

        assert main(["-s", str(tmp_path)]) == 0
        assert (tmp_path / "msgs.py").exists()

    def test_generate_subcommand_output_dir(self, tmp_path: Path) -> None:
        write_table(tmp_path / "src" / "msgs.csv", "0,PutRequest,RpbPut\n")

        result = main(
            ["generate", "-s", str(tmp_path / "src"), "-o", str(tmp_path / "gen")]
        )

        assert result == 0
        assert (tmp_path / "gen" / "msgs.py").exists()

    def test_options_before_subcommand(self, tmp_path: Path) -> None:
        src = tmp_path / "tables"
        write_table(src / "msgs.csv", "0,PutRequest,RpbPut\n")

        result = main(["-s", str(src), "-o", str(tmp_path / "gen"), "generate"])

        assert result == 0
        assert (tmp_path / "gen" / "msgs.py").exists()

    def test_force_before_subcommand(self, tmp_path: Path) -> None:
        write_table(tmp_path / "msgs.csv", "0,PutRequest,RpbPut\n")
        output = tmp_path / "msgs.py"
        output.write_text("# newer\n")
        os.utime(output, (os.path.getmtime(tmp_path / "msgs.csv") + 10,) * 2)

        assert main(["-f", "-s", str(tmp_path), "generate"]) == 0
        assert "def msg_type" in output.read_text()

    def test_source_dir_from_environment(self, tmp_path: Path, monkeypatch) -> None:
        write_table(tmp_path / "msgs.csv", "0,PutRequest,RpbPut\n")
        monkeypatch.setenv("MSGCODEGEN_SOURCE_DIR", str(tmp_path))
        monkeypatch.delenv("MSGCODEGEN_OUTPUT_DIR", raising=False)

        assert main(["generate"]) == 0
        assert (tmp_path / "msgs.py").exists()

    def test_bad_table_fails(self, tmp_path: Path, caplog) -> None:
        table = write_table(tmp_path / "msgs.csv", "0,PutRequest\n")

        assert main(["generate", "-s", str(tmp_path)]) == 1
        assert f"{table}:1:" in caplog.text
        assert not (tmp_path / "msgs.py").exists()

    def test_keep_going_reports_failure(self, tmp_path: Path) -> None:
        write_table(tmp_path / "a.csv", "x,Bad,bad\n")
        write_table(tmp_path / "b.csv", "0,Good,good\n")

        assert main(["generate", "-k", "-s", str(tmp_path)]) == 1
        assert (tmp_path / "b.py").exists()

    def test_missing_source_dir(self, tmp_path: Path) -> None:
        assert main(["generate", "-s", str(tmp_path / "missing")]) == 1

    def test_force(self, tmp_path: Path) -> None:
        write_table(tmp_path / "msgs.csv", "0,PutRequest,RpbPut\n")
        output = tmp_path / "msgs.py"
        output.write_text("# newer\n")
        os.utime(output, (os.path.getmtime(tmp_path / "msgs.csv") + 10,) * 2)

        assert main(["generate", "-s", str(tmp_path)]) == 0
        assert output.read_text() == "# newer\n"
        assert main(["generate", "-f", "-s", str(tmp_path)]) == 0
        assert "def msg_type" in output.read_text()


class TestOtherCommands:
    def test_clean(self, tmp_path: Path) -> None:
        write_table(tmp_path / "msgs.csv", "0,PutRequest,RpbPut\n")
        main(["generate", "-s", str(tmp_path)])

        assert main(["clean", "-s", str(tmp_path)]) == 0
        assert not (tmp_path / "msgs.py").exists()

    def test_clean_source_dir_before_subcommand(self, tmp_path: Path) -> None:
        write_table(tmp_path / "msgs.csv", "0,PutRequest,RpbPut\n")
        main(["generate", "-s", str(tmp_path)])

        assert main(["-s", str(tmp_path), "clean"]) == 0
        assert not (tmp_path / "msgs.py").exists()

    def test_list(self, tmp_path: Path, capsys) -> None:
        write_table(tmp_path / "msgs.csv", "0,PutRequest,RpbPut\n")

        assert main(["list", "-s", str(tmp_path)]) == 0
        assert "(out-of-date)" in capsys.readouterr().out

        main(["generate", "-s", str(tmp_path)])
        main(["list", "-s", str(tmp_path)])
        out = capsys.readouterr().out
        assert f"{tmp_path / 'msgs.py'} (up-to-date)" in out


class TestCLIProcess:
    def test_help(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "msgcodegen.cli", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "msgcodegen" in result.stdout
        assert "generate" in result.stdout
        assert "clean" in result.stdout
        assert "list" in result.stdout

    def test_version(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "msgcodegen.cli", "--version"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert __version__ in result.stdout
