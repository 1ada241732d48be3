"""Identifier classification over ESTree-shaped syntax trees.

The classifier consumes plain mappings in the shape produced by Babel,
typescript-estree or the bundled tree-sitter adapter: every node carries a
``type`` tag, declarations name themselves through ``id.name`` and positions
live under ``loc.start.line`` / ``loc.start.column``.

Traversal is an explicit-stack pre-order walk over every structural field, so
declarations nested inside unrecognised wrappers are still reached and deep
trees never hit the recursion limit.
"""

from __future__ import annotations

import enum
import functools
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from smart_renamer.core.conventions import matches_convention
from smart_renamer.core.enums import Category, NamingConvention, Scope
from smart_renamer.core.models import Identifier


class DeclarationKind(enum.StrEnum):
    VARIABLE_DECLARATOR = "VariableDeclarator"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    CLASS_DECLARATION = "ClassDeclaration"
    INTERFACE_DECLARATION = "TSInterfaceDeclaration"
    TYPE_ALIAS_DECLARATION = "TSTypeAliasDeclaration"
    ENUM_DECLARATION = "TSEnumDeclaration"


EXPORT_WRAPPER_KINDS = frozenset({"ExportNamedDeclaration", "ExportDefaultDeclaration"})
FUNCTION_LIKE_KINDS = frozenset(
    {"ArrowFunctionExpression", "FunctionExpression", "FunctionDeclaration"}
)
_FUNCTION_SCOPE_KINDS = FUNCTION_LIKE_KINDS | {
    "ClassMethod",
    "ClassPrivateMethod",
    "ObjectMethod",
    "TSDeclareMethod",
}
_CLASS_SCOPE_KINDS = frozenset({"ClassBody"})
_BLOCK_SCOPE_KINDS = frozenset(
    {
        "BlockStatement",
        "StaticBlock",
        "ForStatement",
        "ForInStatement",
        "ForOfStatement",
        "CatchClause",
        "SwitchStatement",
        "TSModuleBlock",
    }
)

# Position, range, parent-link and comment metadata never hold declarations.
METADATA_FIELDS = frozenset(
    {
        "loc",
        "range",
        "start",
        "end",
        "parent",
        "_parent",
        "leadingComments",
        "trailingComments",
        "innerComments",
        "comments",
        "tokens",
        "extra",
    }
)

@dataclass(frozen=True)
class _Site:
    """Where a declaration was found: file, enclosing scope, export wrapper."""

    source_file: str
    scope: Scope
    exported: bool

    def identifier(
        self,
        node: Mapping,
        name: str,
        category: Category,
        *,
        component_like: bool = False,
    ) -> Identifier:
        line, column = node_position(node)
        return Identifier(
            name=name,
            category=category,
            line=line,
            column=column,
            source_file=self.source_file,
            scope=self.scope,
            is_exported=self.exported,
            is_component_like=component_like,
        )


def declared_name(node: Mapping) -> str | None:
    """Return ``node.id.name`` when it is a non-empty string."""
    ident = node.get("id")
    if not isinstance(ident, Mapping):
        return None
    name = ident.get("name")
    return name if isinstance(name, str) and name else None


def node_position(node: Mapping) -> tuple[int, int]:
    """Return (line, column) from ``loc.start``; missing pieces default to 0."""
    loc = node.get("loc")
    start = loc.get("start") if isinstance(loc, Mapping) else None
    if not isinstance(start, Mapping):
        return 0, 0
    return _as_int(start.get("line")), _as_int(start.get("column"))


def _as_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def is_function_like(node: object) -> bool:
    return isinstance(node, Mapping) and node.get("type") in FUNCTION_LIKE_KINDS


def _starts_uppercase(name: str) -> bool:
    return name[:1].isascii() and name[:1].isupper()


def _is_component_like(name: str, value: object) -> bool:
    # Name shape + function shape only; returned JSX is not inspected.
    return _starts_uppercase(name) and is_function_like(value)


def _classify_variable(node: Mapping, site: _Site) -> Identifier | None:
    name = declared_name(node)
    if name is None:
        return None
    if matches_convention(name, NamingConvention.UPPER_SNAKE):
        return site.identifier(node, name, Category.CONSTANT)
    return site.identifier(
        node,
        name,
        Category.VARIABLE,
        component_like=_is_component_like(name, node.get("init")),
    )


def _classify_function(node: Mapping, site: _Site) -> Identifier | None:
    name = declared_name(node)
    if name is None:
        return None
    return site.identifier(
        node,
        name,
        Category.FUNCTION,
        component_like=_is_component_like(name, node),
    )


def _classify_plain(category: Category, node: Mapping, site: _Site) -> Identifier | None:
    name = declared_name(node)
    if name is None:
        return None
    return site.identifier(node, name, category)


DeclarationHandler = Callable[[Mapping, _Site], Identifier | None]

DECLARATION_HANDLERS: dict[DeclarationKind, DeclarationHandler] = {
    DeclarationKind.VARIABLE_DECLARATOR: _classify_variable,
    DeclarationKind.FUNCTION_DECLARATION: _classify_function,
    DeclarationKind.CLASS_DECLARATION: functools.partial(_classify_plain, Category.CLASS),
    DeclarationKind.INTERFACE_DECLARATION: functools.partial(
        _classify_plain, Category.INTERFACE
    ),
    DeclarationKind.TYPE_ALIAS_DECLARATION: functools.partial(
        _classify_plain, Category.TYPE
    ),
    DeclarationKind.ENUM_DECLARATION: functools.partial(_classify_plain, Category.ENUM),
}


def _child_scope(kind: object, scope: Scope) -> Scope:
    if kind in _FUNCTION_SCOPE_KINDS:
        return Scope.FUNCTION
    if kind in _CLASS_SCOPE_KINDS:
        return Scope.CLASS
    if kind in _BLOCK_SCOPE_KINDS and scope is Scope.GLOBAL:
        return Scope.LOCAL
    return scope


def _exported_field(kind: object, exported: bool) -> str | None:
    """Field whose node(s) inherit the export flag from ``kind``."""
    if kind in EXPORT_WRAPPER_KINDS:
        return "declaration"
    if exported and kind == "VariableDeclaration":
        return "declarations"
    return None


def iter_child_nodes(node: Mapping) -> Iterator[tuple[str, Mapping]]:
    """Yield (field, child) for every node-shaped value, in field order."""
    for field, value in node.items():
        if field in METADATA_FIELDS:
            continue
        if isinstance(value, Mapping):
            yield field, value
        elif isinstance(value, (list, tuple)):
            for item in value:
                if isinstance(item, Mapping):
                    yield field, item


def classify_tree(root: Mapping, source_file: str) -> list[Identifier]:
    """Classify every recognised declaration in one file's syntax tree.

    Identifiers come back in pre-order (source order for well-formed trees).
    A declaration wrapped in an export is emitted once, with
    ``is_exported=True``.
    """
    identifiers: list[Identifier] = []
    stack: list[tuple[Mapping, Scope, bool]] = [(root, Scope.GLOBAL, False)]
    seen: set[int] = set()

    while stack:
        node, scope, exported = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))

        kind = node.get("type")
        handler = DECLARATION_HANDLERS.get(kind) if isinstance(kind, str) else None
        if handler is not None:
            identifier = handler(node, _Site(source_file, scope, exported))
            if identifier is not None:
                identifiers.append(identifier)

        inherit_field = _exported_field(kind, exported)
        child_scope = _child_scope(kind, scope)
        children = [
            (child, child_scope, field == inherit_field)
            for field, child in iter_child_nodes(node)
        ]
        stack.extend(reversed(children))

    return identifiers


__all__ = [
    "DECLARATION_HANDLERS",
    "DeclarationKind",
    "EXPORT_WRAPPER_KINDS",
    "FUNCTION_LIKE_KINDS",
    "METADATA_FIELDS",
    "classify_tree",
    "declared_name",
    "is_function_like",
    "iter_child_nodes",
    "node_position",
]
