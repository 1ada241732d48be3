"""Tests for terminal output helpers and the shared analysis rendering."""

import io

from smart_renamer.app.commands.helpers.rendering import (
    print_file_summary,
    print_histogram,
)
from smart_renamer.core.enums import NamingConvention
from smart_renamer.engine.analysis import FileNamingSummary
from smart_renamer.output import colorize


class _TTY(io.StringIO):
    def isatty(self):
        return True


class TestColorize:
    def test_plain_when_not_a_tty(self, capsys):
        assert colorize("ok", "green") == "ok"

    def test_ansi_on_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setattr("sys.stdout", _TTY())
        assert colorize("ok", "red") == "\033[31mok\033[0m"

    def test_no_color_wins_on_tty(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        monkeypatch.setattr("sys.stdout", _TTY())
        assert colorize("ok", "red") == "ok"

    def test_unknown_style_is_plain(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setattr("sys.stdout", _TTY())
        assert colorize("ok", "cyan") == "ok"


class TestHistogram:
    def test_largest_first_with_shares(self, capsys):
        print_histogram({"snake_case": 1, "camelCase": 3})
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["camelCase", "3", "(75.0%)"]
        assert lines[1].split() == ["snake_case", "1", "(25.0%)"]

    def test_zero_counts_and_empty_skipped(self, capsys):
        print_histogram({"camelCase": 0})
        print_histogram({})
        assert capsys.readouterr().out == ""

    def test_file_shares_use_file_count(self, capsys):
        # "user" counts for three conventions at once.
        summary = FileNamingSummary(
            total_files=2,
            conventions={
                NamingConvention.CAMEL: 2,
                NamingConvention.SNAKE: 1,
                NamingConvention.KEBAB: 1,
                NamingConvention.PASCAL: 0,
                NamingConvention.UPPER_SNAKE: 0,
            },
            most_common=NamingConvention.CAMEL,
            consistency=1.0,
        )
        print_file_summary(summary)
        out = capsys.readouterr().out
        assert "camelCase              2 (100.0%)" in out
        assert "snake_case             1 (50.0%)" in out
        assert "PascalCase" not in out
