"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from ninepack import __version__
from ninepack.cli.main import main, parse_numbers


def run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "ninepack.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "ninepack: 9-bit integer packing codec" in result.stdout
    assert "--encode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert f"ninepack {__version__}" in result.stdout


def test_cli_encode() -> None:
    """Test CLI --encode."""
    result = run_cli("--encode", "5")
    assert result.returncode == 0
    assert result.stdout.strip() == "AAECgA=="


def test_cli_decode() -> None:
    """Test CLI --decode."""
    result = run_cli("--decode", "AAECgA==")
    assert result.returncode == 0
    assert result.stdout.strip() == "5"


def test_cli_strict_encode_error() -> None:
    """Test CLI --strict rejects out-of-range values."""
    result = run_cli("--encode", "1,600", "--strict")
    assert result.returncode == 1
    assert "Error" in result.stderr
    assert "out of bounds" in result.stderr


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert "ninepack: 9-bit integer packing codec" in result.stdout


class TestMainInProcess:
    """Test main() without a subprocess."""

    def test_roundtrip(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test encoding then decoding through main()."""
        assert main(["--encode", "300 1 17"]) == 0
        text = capsys.readouterr().out.strip()

        assert main(["--decode", text]) == 0
        assert capsys.readouterr().out.strip() == "300,1,17"

    def test_urlsafe(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the URL-safe alphabet option."""
        assert main(["--encode", ",".join(["511"] * 8), "--urlsafe"]) == 0
        text = capsys.readouterr().out.strip()
        assert "/" not in text

        assert main(["--decode", text, "--urlsafe"]) == 0
        assert capsys.readouterr().out.strip() == ",".join(["511"] * 8)

    def test_compare(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --compare prints a report."""
        assert main(["--compare", "1,2,3"]) == 0
        out = capsys.readouterr().out
        assert "--- Test: command line ---" in out
        assert "Round trip: OK" in out

    def test_benchmark(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --benchmark prints every scenario."""
        assert main(["--benchmark", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Random 1000 values" in out
        assert "FAILED" not in out

    def test_bad_numbers(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a non-integer token."""
        assert main(["--encode", "1,two"]) == 1
        assert "Invalid integer list" in capsys.readouterr().err

    def test_bad_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test invalid base64."""
        assert main(["--decode", "***"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_strict_decode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --strict on a short payload."""
        # header declares 2 values, payload holds 1
        assert main(["--decode", "AAICgA==", "--strict"]) == 1
        assert "declares 2 values" in capsys.readouterr().err

    def test_benchmark_urlsafe(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --benchmark uses the URL-safe alphabet when asked."""
        assert main(["--benchmark", "--seed", "1", "--urlsafe"]) == 0
        packed_lines = [
            line for line in capsys.readouterr().out.splitlines() if line.startswith("Packed text:")
        ]

        assert packed_lines
        assert not any("/" in line or "+" in line for line in packed_lines)

    def test_benchmark_strict(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --benchmark accepts --strict for in-range scenarios."""
        assert main(["--benchmark", "--seed", "1", "--strict"]) == 0
        assert "FAILED" not in capsys.readouterr().out

    def test_compare_strict(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --compare passes --strict to the encoder."""
        assert main(["--compare", "1,600", "--strict"]) == 1
        assert "out of bounds" in capsys.readouterr().err

        assert main(["--compare", "1,600"]) == 0
        assert "Round trip: FAILED" in capsys.readouterr().out


def test_parse_numbers() -> None:
    """Test separator handling."""
    assert parse_numbers("1,2,3") == [1, 2, 3]
    assert parse_numbers(" 1, 2  3 ") == [1, 2, 3]
    assert parse_numbers("") == []
