"""Unit tests for LS_COLORS parsing and colorizing."""

from __future__ import annotations

import pytest

from servkit import lscolors
from servkit.lscolors import SGR_RESET, ColorMap

LS_COLORS = (
    "rs=0:di=01;38;5;75:ln=01;38;5;111:mh=00:pi=40;33:so=01;35:do=01;35:"
    "bd=40;33;01:cd=40;33;01:or=40;31;01:mi=00:su=37;41:sg=30;43:ca=30;41:"
    "tw=30;42:ow=34;42:st=37;44:ex=01;32:*.txt=38;5;178:*.bz=38;5;105"
)


class TestColorMapParsing:
    """Building a ColorMap from a raw LS_COLORS value."""

    def test_entries_in_order(self):
        """Entries keep the order they had in LS_COLORS."""
        cmap = ColorMap.from_string("di=01;34:*.txt=00;33:*.md=00;32")
        assert cmap.items() == [
            ("rs", "0"),
            ("di", "01;34"),
            ("*.txt", "00;33"),
            ("*.md", "00;32"),
        ]

    def test_reset_is_seeded(self):
        """A non-empty value always defines the reset entry."""
        assert ColorMap.from_string("di=01;34").items()[0] == ("rs", "0")

    def test_explicit_reset_overrides_seed(self):
        """An explicit multi-code rs= entry replaces the seeded one."""
        assert dict(ColorMap.from_string("rs=00;00:di=01;34").items())["rs"] == "00;00"

    def test_single_code_entries_are_skipped(self):
        """Entries without a ; in them are dropped."""
        cmap = ColorMap.from_string("rs=00:ex=01:*.log=01:*.txt=38;5;178")
        assert cmap.items() == [("rs", "0"), ("*.txt", "38;5;178")]
        assert cmap.get_color("a.log") == ""
        assert cmap.get_color("ex") == ""
        assert cmap.get_color("a.txt") == "\x1b[38;5;178m"

    def test_skips_entries_without_equals(self):
        """Malformed entries are ignored."""
        cmap = ColorMap.from_string("garbage:;::di=01;34:")
        assert "di" in cmap
        assert "garbage" not in cmap
        assert ";" not in cmap
        assert len(cmap) == 2

    def test_value_may_contain_equals(self):
        """Only the first = separates key from value."""
        assert dict(ColorMap.from_string("*.a=b=1;2").items())["*.a"] == "b=1;2"

    def test_empty_value(self):
        """An empty LS_COLORS yields an empty map."""
        cmap = ColorMap.from_string("")
        assert len(cmap) == 0
        assert cmap.get_color("test.txt") == ""

    def test_disabled(self):
        """A disabled map colors nothing, whatever the rules."""
        cmap = ColorMap.from_string(LS_COLORS, disabled=True)
        assert cmap.disabled
        assert cmap.colorize("test.txt") == "test.txt"


class TestColorLookup:
    """get_color/colorize over a populated map."""

    @pytest.fixture
    def cmap(self) -> ColorMap:
        """A map built from a typical dircolors database."""
        return ColorMap.from_string(LS_COLORS)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("test.log", ""),
            ("test.txt", "\x1b[38;5;178m"),
            ("test.tar.bz", "\x1b[38;5;105m"),
            ("di", "\x1b[01;38;5;75m"),
        ],
    )
    def test_get_color(self, cmap: ColorMap, name: str, expected: str):
        """Globs match file names; literal keys match exactly."""
        assert cmap.get_color(name) == expected

    def test_globs_are_case_sensitive(self, cmap: ColorMap):
        """*.txt does not match an upper-case extension."""
        assert cmap.get_color("TEST.TXT") == ""

    def test_first_matching_glob_wins(self):
        """Overlapping globs resolve in LS_COLORS order."""
        cmap = ColorMap.from_string("*.gz=00;31:*.tar.gz=00;32")
        assert cmap.get_color("a.tar.gz") == "\x1b[00;31m"
        cmap = ColorMap.from_string("*.tar.gz=00;32:*.gz=00;31")
        assert cmap.get_color("a.tar.gz") == "\x1b[00;32m"

    def test_colorize_wraps(self, cmap: ColorMap):
        """A matched name is wrapped between its color and a reset."""
        assert cmap.colorize("test.txt") == "\x1b[38;5;178mtest.txt" + SGR_RESET

    def test_colorize_unmatched(self, cmap: ColorMap):
        """An unmatched name comes back unchanged."""
        assert cmap.colorize("test.log") == "test.log"

    def test_colorize_path_uses_base_name(self, cmap: ColorMap):
        """Directories in the path don't take part in matching."""
        assert cmap.colorize_path("/var/tmp.txt/file.log") == "/var/tmp.txt/file.log"
        assert cmap.colorize_path("/srv/notes.txt") == "\x1b[38;5;178m/srv/notes.txt\x1b[0m"


class TestProcessWideMap:
    """The lazily built map shared by the module-level helpers."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """The first lookup reads LS_COLORS."""
        monkeypatch.setenv("LS_COLORS", LS_COLORS)
        assert lscolors.get_color("test.txt") == "\x1b[38;5;178m"
        assert lscolors.colorize("test.log") == "test.log"

    def test_built_once(self, monkeypatch: pytest.MonkeyPatch):
        """Later environment changes are ignored until reset()."""
        monkeypatch.setenv("LS_COLORS", "*.txt=00;31")
        first = lscolors.get_map()
        monkeypatch.setenv("LS_COLORS", "*.txt=00;32")
        assert lscolors.get_map() is first
        assert lscolors.get_color("a.txt") == "\x1b[00;31m"

        lscolors.reset()
        assert lscolors.get_color("a.txt") == "\x1b[00;32m"

    def test_no_color(self, monkeypatch: pytest.MonkeyPatch):
        """NO_COLOR disables coloring even when LS_COLORS is set."""
        monkeypatch.setenv("LS_COLORS", LS_COLORS)
        monkeypatch.setenv("NO_COLOR", "1")
        assert lscolors.colorize_path("/srv/notes.txt") == "/srv/notes.txt"

    def test_unset(self):
        """Without LS_COLORS nothing is colored."""
        assert lscolors.colorize("test.txt") == "test.txt"
