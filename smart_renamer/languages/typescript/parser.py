"""Tree-sitter parsing of TypeScript/JavaScript into ESTree-shaped mappings.

Only the node kinds the identifier classifier cares about are given ESTree
names and fields; every other node becomes ``{"type": <tree-sitter type>,
"children": [...]}`` so declarations nested inside it are still reachable.
Requires the optional ``tree-sitter-language-pack`` distribution.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PARSE_INIT_ERRORS = (ImportError, LookupError, OSError, RuntimeError, ValueError)

_TYPESCRIPT_SUFFIXES = frozenset({".ts", ".mts", ".cts"})
_NAME_NODE_TYPES = frozenset({"identifier", "type_identifier"})

_FUNCTION_EXPRESSION_TYPES = frozenset(
    {"function_expression", "function", "generator_function"}
)
_PLAIN_RENAMES = {
    "statement_block": "BlockStatement",
    "class_body": "ClassBody",
    "method_definition": "ClassMethod",
    "for_statement": "ForStatement",
    "for_in_statement": "ForInStatement",
    "catch_clause": "CatchClause",
    "switch_statement": "SwitchStatement",
}


class ParseError(Exception):
    """Source text could not be parsed into a syntax tree."""


class ParserUnavailableError(RuntimeError):
    """The tree-sitter grammar package is not installed or failed to load."""


def grammar_for(filepath: str) -> str:
    return "typescript" if Path(filepath).suffix in _TYPESCRIPT_SUFFIXES else "tsx"


@functools.lru_cache(maxsize=None)
def _get_parser(grammar: str):
    from tree_sitter_language_pack import get_parser

    return get_parser(grammar)


def _package_errors() -> tuple[type[Exception], ...]:
    """The grammar package's own error base (grammar download and cache failures)."""
    try:
        from tree_sitter_language_pack import Error
    except ImportError:
        return ()
    return (Error,)


def get_parser(grammar: str):
    try:
        return _get_parser(grammar)
    except PARSE_INIT_ERRORS + _package_errors() as exc:
        logger.debug("tree-sitter init failed for %s: %s", grammar, exc)
        raise ParserUnavailableError(
            f"tree-sitter grammar '{grammar}' is unavailable ({exc}). "
            "Install it with: pip install 'smart-renamer[treesitter]'"
        ) from exc


def parse_source(source: str, filepath: str) -> dict[str, Any]:
    """Parse ``source`` and return the Program mapping for ``filepath``."""
    parser = get_parser(grammar_for(filepath))
    tree = parser.parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        raise ParseError(f"syntax error in {filepath}")
    return convert_node(root)


def _loc(node) -> dict[str, Any]:
    row, column = node.start_point
    end_row, end_column = node.end_point
    return {
        "start": {"line": row + 1, "column": column},
        "end": {"line": end_row + 1, "column": end_column},
    }


def _text(node) -> str:
    return node.text.decode("utf-8", errors="replace")


def _identifier(node) -> dict[str, Any] | None:
    if node is None or node.type not in _NAME_NODE_TYPES:
        return None
    return {"type": "Identifier", "name": _text(node), "loc": _loc(node)}


def _field(node, name: str) -> dict[str, Any] | None:
    child = node.child_by_field_name(name)
    return convert_node(child) if child is not None else None


def _named_children(node) -> list[dict[str, Any]]:
    return [convert_node(child) for child in node.named_children]


def _declaration(node, kind: str, *fields: str) -> dict[str, Any]:
    converted = {
        "type": kind,
        "id": _identifier(node.child_by_field_name("name")),
        "loc": _loc(node),
    }
    for name in fields:
        converted[name] = _field(node, name)
    return converted


def convert_node(node) -> dict[str, Any]:
    """Convert one tree-sitter node (and its subtree) to an ESTree-style dict."""
    kind = node.type
    if kind == "program":
        return {"type": "Program", "body": _named_children(node), "loc": _loc(node)}
    if kind in ("lexical_declaration", "variable_declaration"):
        return {
            "type": "VariableDeclaration",
            "declarations": [
                convert_node(child)
                for child in node.named_children
                if child.type == "variable_declarator"
            ],
            "loc": _loc(node),
        }
    if kind == "variable_declarator":
        converted = _declaration(node, "VariableDeclarator", "value")
        converted["init"] = converted.pop("value")
        return converted
    if kind in ("function_declaration", "generator_function_declaration"):
        return _declaration(node, "FunctionDeclaration", "parameters", "body")
    if kind in ("class_declaration", "abstract_class_declaration"):
        return _declaration(node, "ClassDeclaration", "body")
    if kind == "interface_declaration":
        return _declaration(node, "TSInterfaceDeclaration", "body")
    if kind == "type_alias_declaration":
        return _declaration(node, "TSTypeAliasDeclaration", "value")
    if kind == "enum_declaration":
        return _declaration(node, "TSEnumDeclaration", "body")
    if kind == "export_statement":
        return _convert_export(node)
    if kind == "arrow_function":
        return {
            "type": "ArrowFunctionExpression",
            "body": _field(node, "body"),
            "loc": _loc(node),
        }
    if kind in _FUNCTION_EXPRESSION_TYPES:
        return {
            "type": "FunctionExpression",
            "body": _field(node, "body"),
            "loc": _loc(node),
        }
    if kind in _PLAIN_RENAMES:
        return {
            "type": _PLAIN_RENAMES[kind],
            "body": _named_children(node),
            "loc": _loc(node),
        }
    return {"type": kind, "children": _named_children(node), "loc": _loc(node)}


def _convert_export(node) -> dict[str, Any]:
    is_default = any(child.type == "default" for child in node.children)
    target = node.child_by_field_name("declaration")
    if target is None:
        target = node.child_by_field_name("value")
    converted = {
        "type": "ExportDefaultDeclaration" if is_default else "ExportNamedDeclaration",
        "declaration": convert_node(target) if target is not None else None,
        "loc": _loc(node),
    }
    if target is None:
        converted["children"] = _named_children(node)
    return converted


__all__ = [
    "PARSE_INIT_ERRORS",
    "ParseError",
    "ParserUnavailableError",
    "convert_node",
    "get_parser",
    "grammar_for",
    "parse_source",
]
