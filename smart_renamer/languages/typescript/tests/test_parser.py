"""Tests for the tree-sitter TypeScript adapter feeding the classifier."""

from __future__ import annotations

import pytest

from smart_renamer.core.enums import Category, Scope
from smart_renamer.engine.classifier import classify_tree
from smart_renamer.languages.typescript.parser import ParseError, grammar_for, parse_source

pytest.importorskip("tree_sitter_language_pack")


SOURCE = """\
export const Button = () => null;
function fetchData() {
  const inner_value = 1;
}
class UserService {}
interface UserProps {}
type UserId = string;
enum Status { On }
const MAX_RETRY = 3;
"""


def _classify(source: str, path: str = "src/sample.ts"):
    return {ident.name: ident for ident in classify_tree(parse_source(source, path), path)}


def test_grammar_selection():
    assert grammar_for("a.ts") == "typescript"
    assert grammar_for("a.mts") == "typescript"
    assert grammar_for("a.tsx") == "tsx"
    assert grammar_for("a.js") == "tsx"


def test_every_category_found():
    found = _classify(SOURCE)
    assert {name: ident.category for name, ident in found.items()} == {
        "Button": Category.VARIABLE,
        "fetchData": Category.FUNCTION,
        "inner_value": Category.VARIABLE,
        "UserService": Category.CLASS,
        "UserProps": Category.INTERFACE,
        "UserId": Category.TYPE,
        "Status": Category.ENUM,
        "MAX_RETRY": Category.CONSTANT,
    }


def test_export_and_component_shape():
    found = _classify(SOURCE)
    assert found["Button"].is_exported is True
    assert found["Button"].is_component_like is True
    assert found["fetchData"].is_exported is False


def test_positions_are_one_based_lines():
    found = _classify(SOURCE)
    assert (found["fetchData"].line, found["fetchData"].column) == (2, 0)
    assert found["MAX_RETRY"].line == 9


def test_function_body_scope():
    assert _classify(SOURCE)["inner_value"].scope == Scope.FUNCTION


def test_default_export_component():
    found = _classify("export default function App() { return null; }\n", "App.tsx")
    assert found["App"].is_exported is True
    assert found["App"].is_component_like is True


def test_syntax_error_raises():
    with pytest.raises(ParseError):
        parse_source("const = ;", "broken.ts")
