"""Functional tests for ``servkit colorize``, ``servkit emoji`` and ``servkit csv``."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from servkit.entrypoints.cli.main import servkit

LS_COLORS = "rs=0:di=01;34:*.txt=38;5;178:*.bz=38;5;105"


class TestColorize:
    """An operator colors file names like `ls` would."""

    @staticmethod
    def test_colors_matching_names(runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
        """Paths matching a glob are wrapped; others are printed as is."""
        monkeypatch.setenv("LS_COLORS", LS_COLORS)

        result = runner.invoke(servkit, ["--color", "colorize", "/tmp/a.txt", "/tmp/a.log"])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["\x1b[38;5;178m/tmp/a.txt\x1b[0m", "/tmp/a.log"]

    @staticmethod
    def test_no_color_env(runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
        """NO_COLOR turns coloring off."""
        monkeypatch.setenv("LS_COLORS", LS_COLORS)
        monkeypatch.setenv("NO_COLOR", "1")

        result = runner.invoke(servkit, ["colorize", "/tmp/a.txt"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "/tmp/a.txt\n"

    @staticmethod
    def test_no_color_flag(runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
        """--no-color strips the sequences from the output."""
        monkeypatch.setenv("LS_COLORS", LS_COLORS)

        result = runner.invoke(servkit, ["--no-color", "colorize", "/tmp/a.txt"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "/tmp/a.txt\n"


class TestEmoji:
    """A script author looks up and expands emoji shortcodes."""

    @staticmethod
    @pytest.mark.parametrize("alias", ["zap", ":zap:"])
    def test_get(runner: CliRunner, alias: str):
        """Aliases are accepted with or without colons."""
        result = runner.invoke(servkit, ["emoji", "get", alias])

        assert result.exit_code == 0, result.output
        assert result.stdout == "⚡️\n"

    @staticmethod
    def test_get_unknown(runner: CliRunner):
        """Unknown aliases fail."""
        result = runner.invoke(servkit, ["emoji", "get", "smile__1"])

        assert result.exit_code == 1
        assert "Unknown emoji alias: smile__1" in result.stderr

    @staticmethod
    def test_name(runner: CliRunner):
        """Glyphs resolve to their alias."""
        result = runner.invoke(servkit, ["emoji", "name", "💯"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "100\n"

    @staticmethod
    def test_find(runner: CliRunner):
        """find lists glyph and alias for each match."""
        result = runner.invoke(servkit, ["emoji", "find", "bikin"])

        assert result.exit_code == 0, result.output
        assert [line.split("  ")[1] for line in result.stdout.splitlines()] == [
            "biking_man",
            "biking_woman",
            "mountain_biking_man",
        ]

    @staticmethod
    def test_emojize_argument(runner: CliRunner):
        """Text given as an argument is expanded."""
        result = runner.invoke(servkit, ["emoji", "emojize", "Hi :smile: emoji: :zap:!"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "Hi 😄 emoji: ⚡️!\n"

    @staticmethod
    def test_emojize_stdin(runner: CliRunner):
        """Without an argument standard input is expanded line by line."""
        result = runner.invoke(
            servkit, ["emoji", "emojize"], input="Hi :smile:\nbye :smile__1:\n"
        )

        assert result.exit_code == 0, result.output
        assert result.stdout == "Hi 😄\nbye :smile__1:\n"


class TestCsv:
    """A user splits delimiter-separated lines."""

    @staticmethod
    def test_file(runner: CliRunner, tmp_path: Path):
        """Fields are printed TAB-separated, trailing empty field included."""
        path = tmp_path / "data.csv"
        path.write_text("123,ABC,A_C,A C,\n1,2\n", encoding="utf-8")

        result = runner.invoke(servkit, ["csv", "-d", ",", str(path)])

        assert result.exit_code == 0, result.output
        assert result.stdout == "123\tABC\tA_C\tA C\t\n1\t2\n"

    @staticmethod
    def test_latin1_file_passes_through(runner: CliRunner, tmp_path: Path):
        """Bytes that are not UTF-8 are split and written back unchanged."""
        path = tmp_path / "legacy.csv"
        path.write_bytes("caf\u00e9;na\u00efve\n".encode("latin-1"))

        result = runner.invoke(servkit, ["csv", str(path)])

        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b"caf\xe9\tna\xefve\n"

    @staticmethod
    def test_stdin_default_delimiter(runner: CliRunner):
        """Standard input and ';' are the defaults; an empty line stops reading."""
        result = runner.invoke(servkit, ["csv", "-s", "|"], input="a;b\nc;d\n\ne;f\n")

        assert result.exit_code == 0, result.output
        assert result.stdout == "a|b\nc|d\n"

    @staticmethod
    def test_bad_delimiter(runner: CliRunner):
        """Delimiters longer than one character are rejected."""
        result = runner.invoke(servkit, ["csv", "-d", "::"], input="a\n")

        assert result.exit_code == 2
        assert "single character" in result.output
