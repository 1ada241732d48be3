"""Tests for smart_renamer.engine.analysis: summaries and batch isolation."""

import logging

import pytest

from smart_renamer.core.enums import Category, NamingConvention
from smart_renamer.core.models import Identifier
from smart_renamer.engine.analysis import (
    MIXED,
    analyze_file_names,
    analyze_sources,
    summarize_identifiers,
)
from smart_renamer.languages.typescript.parser import ParseError


def _ident(name, category=Category.VARIABLE, **kwargs):
    return Identifier(name=name, category=category, line=1, column=0, source_file="a.ts", **kwargs)


def _program(*names):
    return {
        "type": "Program",
        "body": [
            {
                "type": "VariableDeclaration",
                "declarations": [{"type": "VariableDeclarator", "id": {"type": "Identifier", "name": n}}],
            }
            for n in names
        ],
    }


# ===========================================================================
# analyze_file_names
# ===========================================================================

class TestAnalyzeFileNames:
    def test_most_common_and_consistency(self):
        summary = analyze_file_names(["fileOne.ts", "fileTwo.ts", "file-three.ts"])
        assert summary.total_files == 3
        assert summary.most_common == NamingConvention.CAMEL
        assert summary.conventions[NamingConvention.KEBAB] == 1
        assert summary.consistency == pytest.approx(2 / 3)

    def test_empty(self):
        summary = analyze_file_names([])
        assert summary.total_files == 0
        assert summary.most_common is None
        assert summary.consistency == 0.0


# ===========================================================================
# summarize_identifiers
# ===========================================================================

class TestSummarizeIdentifiers:
    def test_histograms_by_config_category(self):
        summary = summarize_identifiers(
            [
                _ident("userName"),
                _ident("user_name"),
                _ident("fetchData", Category.FUNCTION),
                _ident("Button", is_component_like=True),
                _ident("MAX", Category.CONSTANT),
            ]
        )
        assert summary.total_identifiers == 5
        assert summary.conventions["variables"] == {"camelCase": 1, "snake_case": 1}
        assert summary.conventions["functions"] == {"camelCase": 1}
        assert summary.conventions["components"] == {"PascalCase": 1}
        assert summary.conventions["constants"] == {"UPPER_SNAKE_CASE": 1}
        assert summary.conventions["enums"] == {}
        assert summary.consistency_score == pytest.approx((0.5 + 1 + 1 + 1) / 4)

    def test_unclassifiable_name_is_mixed(self):
        summary = summarize_identifiers([_ident("User_name", Category.CLASS)])
        assert summary.conventions["classes"] == {MIXED: 1}

    def test_empty(self):
        summary = summarize_identifiers([])
        assert summary.total_identifiers == 0
        assert summary.consistency_score == 0.0
        assert set(summary.conventions) == {
            "variables", "functions", "components", "constants",
            "classes", "interfaces", "types", "enums",
        }


# ===========================================================================
# analyze_sources
# ===========================================================================

class TestAnalyzeSources:
    SOURCES = {"good.ts": "good", "bad.ts": "bad", "other.ts": "other"}

    def _read(self, path):
        if path not in self.SOURCES:
            raise FileNotFoundError(path)
        return self.SOURCES[path]

    @staticmethod
    def _parse(source, path):
        if source == "bad":
            raise ParseError(f"syntax error in {path}")
        return _program(f"{source}Value")

    def test_failures_are_skipped(self, caplog):
        caplog.set_level(logging.DEBUG, logger="smart_renamer.engine.analysis")
        result = analyze_sources(
            ["good.ts", "bad.ts", "missing.ts", "other.ts"],
            read_source=self._read,
            parse_source=self._parse,
        )
        assert [i.name for i in result.identifiers] == ["goodValue", "otherValue"]
        assert [i.source_file for i in result.identifiers] == ["good.ts", "other.ts"]
        assert [path for path, _ in result.skipped] == ["bad.ts", "missing.ts"]
        assert result.summary.total_identifiers == 2
        assert "Skipped bad.ts" in caplog.text

    def test_malformed_tree_is_skipped(self):
        result = analyze_sources(
            ["good.ts"],
            read_source=self._read,
            parse_source=lambda source, path: None,
        )
        assert result.identifiers == []
        assert result.skipped[0][0] == "good.ts"

    def test_unexpected_errors_propagate(self):
        def explode(source, path):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            analyze_sources(["good.ts"], read_source=self._read, parse_source=explode)
