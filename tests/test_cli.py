"""Tests for the resxlint command-line interface."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from resxlint.cli import main
from tests.helpers.resx_documents import data_element


class TestMain:
    """Exit codes and output."""

    def test_clean_project(
        self,
        tmp_path: Path,
        write_resx: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """No diagnostics exits 0 with a summary line."""
        write_resx("Strings.resx", data_element("greeting", "Hello, {0}!", "{string name}"))
        write_resx("Strings.de.resx", data_element("greeting", "Hallo, {0}!"))

        assert main([str(tmp_path)]) == 0

        err = capsys.readouterr().err
        assert "resxlint completed with 0 errors and 0 warnings." in err

    def test_errors_exit_1(
        self,
        tmp_path: Path,
        write_resx: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Errors are printed as build-log lines."""
        base = write_resx("Strings.resx", data_element("a", "b", "!(c, d)"))

        assert main([str(tmp_path)]) == 1

        err = capsys.readouterr().err
        assert f"{base}(1,1): error RSX4001: a: provided value 'b'" in err
        assert "resxlint completed with 1 errors and 0 warnings." in err

    def test_lenient_downgrades(
        self,
        tmp_path: Path,
        write_resx: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """--lenient turns undeclared parameters into warnings."""
        write_resx("Strings.resx", data_element("a", "{0}"))

        assert main(["--lenient", str(tmp_path)]) == 0

        err = capsys.readouterr().err
        assert "warning RSX5001" in err
        assert "resxlint completed with 0 errors and 1 warnings." in err

    def test_strict_is_default(
        self, tmp_path: Path, write_resx: Callable[..., Path]
    ) -> None:
        """Without --lenient the same file fails."""
        write_resx("Strings.resx", data_element("a", "{0}"))

        assert main([str(tmp_path)]) == 1

    def test_json_format(
        self,
        tmp_path: Path,
        write_resx: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """--format json prints one object per diagnostic."""
        write_resx("Strings.resx", data_element("a", "{0}", "{int_i}"))

        assert main(["--format", "json", str(tmp_path)]) == 1

        first = capsys.readouterr().err.splitlines()[0]
        assert json.loads(first)["code"] == "BAD_PARAMETER_DECLARATION"

    def test_diagnostics_in_report_order(
        self,
        tmp_path: Path,
        write_resx: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Errors and warnings of one file are printed as they are reported."""
        write_resx(
            "Strings.resx",
            data_element("first", "{0:x}", "{string name}"),
            data_element("second", "b", "!(c, d)"),
            data_element("third", "{0:y}", "{string name}"),
        )

        assert main([str(tmp_path)]) == 1

        lines = capsys.readouterr().err.splitlines()
        assert [line.split(": ")[2] for line in lines[:3]] == ["first", "second", "third"]
        assert " warning " in lines[0]
        assert " error " in lines[1]
        assert " warning " in lines[2]
        assert lines[3] == "resxlint completed with 1 errors and 2 warnings."

    def test_max_message_length(
        self,
        tmp_path: Path,
        write_resx: Callable[..., Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """--max-message-length truncates long messages."""
        write_resx("Strings.resx", data_element("a", "b", "!(c, d)"))

        assert main(["--format", "simple", "--max-message-length", "10", str(tmp_path)]) == 1

        first = capsys.readouterr().err.splitlines()[0]
        assert first == "RSX4001: a: provide..."

    def test_no_files(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Nothing to validate exits 2."""
        assert main([str(tmp_path)]) == 2

        assert "no .resx files found" in capsys.readouterr().err

    def test_paths_required(self) -> None:
        """argparse rejects a missing path argument."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
