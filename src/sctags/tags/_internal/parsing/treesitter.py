"""Tree-sitter syntax tree provider for Scala sources.

Parses with the ``tree-sitter-scala`` grammar and converts the concrete tree
into the variants in ``sctags.tags._internal.syntax``. Only declaration
shapes are converted; everything else becomes ``OtherStatement``.

tree-sitter always produces a tree, recovering from errors with ERROR and
MISSING nodes. For tagging, any such node makes the file a parse failure:
positions after a recovery point are not trustworthy.

Usage::

    parser = ScalaSyntaxParser.get()
    source = parser.parse(content, path="src/Foo.scala")
"""

from __future__ import annotations

import importlib
from typing import Any

import tree_sitter

from sctags.core.errors import GrammarUnavailableError, ParseFailure
from sctags.tags._internal.syntax import (
    ClassDef,
    FunctionDef,
    InfixPattern,
    Modifier,
    ModifierKind,
    Name,
    NamePattern,
    ObjectDef,
    OtherPattern,
    OtherStatement,
    PackageDecl,
    PackageObjectDef,
    Param,
    Pattern,
    SourceFile,
    Statement,
    TraitDef,
    TuplePattern,
    TypeDef,
    TypedPattern,
    ValueDef,
)
from sctags.tags.models import Position

GRAMMAR_MODULE = "tree_sitter_scala"

_IDENTIFIER_TYPES = frozenset({"identifier", "operator_identifier"})
_FUNCTION_TYPES = frozenset({"function_definition", "function_declaration"})
_TYPE_MEMBER_TYPES = frozenset({"type_definition", "type_declaration"})
_VALUE_DEFINITION_TYPES = frozenset({"val_definition", "var_definition"})
_VALUE_DECLARATION_TYPES = frozenset({"val_declaration", "var_declaration"})
_PARAM_GROUP_KEYWORDS = frozenset({"implicit", "using"})
_PARAM_FIELD_KEYWORDS = frozenset({"val", "var"})


def _load_language() -> tree_sitter.Language:
    try:
        module = importlib.import_module(GRAMMAR_MODULE)
    except ImportError as err:
        raise GrammarUnavailableError.missing(GRAMMAR_MODULE, str(err)) from err
    return tree_sitter.Language(module.language())


class ScalaSyntaxParser:
    """Shared tree-sitter parser for Scala (grammar loaded once)."""

    _instance: ScalaSyntaxParser | None = None

    def __init__(self) -> None:
        self._language = _load_language()
        self._parser = tree_sitter.Parser(self._language)

    @classmethod
    def get(cls) -> ScalaSyntaxParser:
        """Return the singleton parser instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton (mainly for testing)."""
        cls._instance = None

    def parse(self, content: bytes | str, path: str = "<memory>") -> SourceFile:
        """Parse Scala source into a ``SourceFile``.

        Raises:
            ParseFailure: The source has syntax errors.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        tree = self._parser.parse(content)
        root = tree.root_node
        if root.has_error:
            raise _parse_failure(root, content, path)
        converter = _Converter(content)
        return SourceFile(stats=converter.statements(root.named_children))


def _first_error(node: Any) -> Any | None:
    """First ERROR or MISSING node in source order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return None


def _parse_failure(root: Any, content: bytes, path: str) -> ParseFailure:
    node = _first_error(root) or root
    position = _position(content, node)
    if node.is_missing:
        reason = f"missing '{node.type}'"
    else:
        snippet = content[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
        snippet = snippet.strip().splitlines()[0][:40] if snippet.strip() else ""
        reason = f"syntax error near '{snippet}'" if snippet else "syntax error"
    return ParseFailure.at(path, position.line, position.column, reason)


def _position(content: bytes, node: Any) -> Position:
    """1-based line and character column (tree-sitter columns are bytes)."""
    line_start = content.rfind(b"\n", 0, node.start_byte) + 1
    prefix = content[line_start : node.start_byte].decode("utf-8", errors="replace")
    return Position(line=node.start_point[0] + 1, column=len(prefix) + 1)


class _Converter:
    """Concrete tree -> syntax variants, for one source buffer."""

    def __init__(self, content: bytes) -> None:
        self._content = content

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def statements(self, nodes: list[Any]) -> tuple[Statement, ...]:
        return tuple(self.statement(node) for node in nodes)

    def statement(self, node: Any) -> Statement:
        kind = node.type
        if kind == "package_clause":
            name_node = node.child_by_field_name("name")
            return PackageDecl(
                name=self._text(name_node) if name_node is not None else "",
                stats=self._body(node),
            )
        if kind in _VALUE_DEFINITION_TYPES:
            return ValueDef(self._binding_patterns(node), self._modifiers(node))
        if kind in _VALUE_DECLARATION_TYPES:
            names = self._declared_names(node)
            return ValueDef(tuple(NamePattern(n) for n in names), self._modifiers(node))

        name = self._name(node)
        if name is None:
            return OtherStatement(kind)
        if kind == "object_definition":
            return ObjectDef(name, self._modifiers(node), self._body(node))
        if kind == "package_object":
            return PackageObjectDef(name, self._modifiers(node), self._body(node))
        if kind == "trait_definition":
            return TraitDef(name, self._modifiers(node), self._body(node))
        if kind == "class_definition":
            return ClassDef(name, self._modifiers(node), self._param_groups(node), self._body(node))
        if kind in _FUNCTION_TYPES:
            return FunctionDef(name, self._modifiers(node))
        if kind in _TYPE_MEMBER_TYPES:
            return TypeDef(name, self._modifiers(node))
        return OtherStatement(kind)

    def _body(self, node: Any) -> tuple[Statement, ...]:
        body = node.child_by_field_name("body")
        if body is None:
            return ()
        return self.statements(body.named_children)

    # ------------------------------------------------------------------
    # Names and modifiers
    # ------------------------------------------------------------------

    def _text(self, node: Any) -> str:
        return self._content[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _to_name(self, node: Any) -> Name:
        value = self._text(node)
        if len(value) > 1 and value.startswith("`") and value.endswith("`"):
            value = value[1:-1]
        return Name(value, _position(self._content, node))

    def _name(self, node: Any) -> Name | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return self._to_name(name_node)

    def _modifiers(self, node: Any, *, param: bool = False) -> tuple[Modifier, ...]:
        mods: list[Modifier] = []
        for child in node.children:
            if child.type == "modifiers":
                mods.extend(self._modifier_list(child))
            elif child.type == "case":
                mods.append(Modifier(ModifierKind.CASE))
            elif child.type.endswith("_modifier"):
                keyword = child.type.removesuffix("_modifier")
                mods.append(Modifier(ModifierKind.from_keyword(keyword)))
            elif param and child.type in _PARAM_FIELD_KEYWORDS:
                mods.append(Modifier(ModifierKind(child.type)))
        return tuple(mods)

    def _modifier_list(self, node: Any) -> list[Modifier]:
        mods: list[Modifier] = []
        for child in node.children:
            if child.type == "access_modifier":
                mods.append(self._access_modifier(child))
            elif child.type == "annotation":
                continue
            elif child.type.endswith("_modifier"):
                keyword = child.type.removesuffix("_modifier")
                mods.append(Modifier(ModifierKind.from_keyword(keyword)))
            else:
                mods.append(Modifier(ModifierKind.from_keyword(child.type)))
        return mods

    def _access_modifier(self, node: Any) -> Modifier:
        keyword = node.children[0].type if node.children else "private"
        qualifier: str | None = None
        for child in node.children:
            if child.type == "access_qualifier":
                qualifier = self._text(child).strip("[] \t") or None
        return Modifier(ModifierKind.from_keyword(keyword), qualifier)

    # ------------------------------------------------------------------
    # Constructor parameters
    # ------------------------------------------------------------------

    def _param_groups(self, node: Any) -> tuple[tuple[Param, ...], ...]:
        groups: list[tuple[Param, ...]] = []
        for child in node.children:
            if child.type != "class_parameters":
                continue
            group_mods = tuple(
                Modifier(ModifierKind(c.type))
                for c in child.children
                if c.type in _PARAM_GROUP_KEYWORDS
            )
            params: list[Param] = []
            for param_node in child.named_children:
                if param_node.type != "class_parameter":
                    continue
                name = self._name(param_node)
                if name is None:
                    continue
                params.append(Param(name, group_mods + self._modifiers(param_node, param=True)))
            groups.append(tuple(params))
        return tuple(groups)

    # ------------------------------------------------------------------
    # Value bindings
    # ------------------------------------------------------------------

    def _binding_patterns(self, node: Any) -> tuple[Pattern, ...]:
        patterns: list[Pattern] = []
        for pattern in node.children_by_field_name("pattern"):
            if pattern.type == "identifiers":
                patterns.extend(
                    NamePattern(self._to_name(c))
                    for c in pattern.named_children
                    if c.type in _IDENTIFIER_TYPES
                )
            else:
                patterns.append(self.pattern(pattern))
        return tuple(patterns)

    def _declared_names(self, node: Any) -> list[Name]:
        name_nodes = node.children_by_field_name("name")
        if not name_nodes:
            name_nodes = []
            for child in node.children:
                if child.type == ":":
                    break
                if child.type in _IDENTIFIER_TYPES:
                    name_nodes.append(child)
        return [self._to_name(n) for n in name_nodes]

    def pattern(self, node: Any) -> Pattern:
        kind = node.type
        if kind in _IDENTIFIER_TYPES:
            return NamePattern(self._to_name(node))
        if kind == "typed_pattern":
            inner = node.child_by_field_name("pattern")
            if inner is None:
                return OtherPattern(kind)
            return TypedPattern(self.pattern(inner))
        if kind == "tuple_pattern":
            return TuplePattern(tuple(self.pattern(c) for c in node.named_children))
        if kind == "infix_pattern":
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            if left is None or right is None:
                return OtherPattern(kind)
            return InfixPattern(self.pattern(left), (self.pattern(right),))
        return OtherPattern(kind)
