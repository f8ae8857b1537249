"""Provider-neutral syntax tree for tag extraction.

The parser turns its concrete tree into these variants; the extractor only
ever sees this closed set. Anything the parser does not recognise becomes an
``OtherStatement`` / ``OtherPattern``, which contributes no tags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from sctags.tags.models import Position


class ModifierKind(StrEnum):
    """Declaration modifiers the classifier and extractor care about.

    Values are the source keywords; ``VAL_PARAM``/``VAR_PARAM`` are the
    ``val``/``var`` markers on constructor parameters.
    """

    PRIVATE = "private"
    PROTECTED = "protected"
    VAL_PARAM = "val"
    VAR_PARAM = "var"
    IMPLICIT = "implicit"
    USING = "using"
    CASE = "case"
    ABSTRACT = "abstract"
    FINAL = "final"
    SEALED = "sealed"
    OVERRIDE = "override"
    LAZY = "lazy"
    OPAQUE = "opaque"
    INLINE = "inline"
    OPEN = "open"
    TRANSPARENT = "transparent"
    INFIX = "infix"
    OTHER = "other"

    @classmethod
    def from_keyword(cls, keyword: str) -> ModifierKind:
        try:
            return cls(keyword)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Modifier:
    kind: ModifierKind
    qualifier: str | None = None  # X in private[X] / protected[X]


@dataclass(frozen=True, slots=True)
class Name:
    value: str
    position: Position


# ---------------------------------------------------------------------------
# Patterns (left-hand side of val/var bindings)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NamePattern:
    name: Name


@dataclass(frozen=True, slots=True)
class TypedPattern:
    pattern: Pattern


@dataclass(frozen=True, slots=True)
class TuplePattern:
    patterns: tuple[Pattern, ...]


@dataclass(frozen=True, slots=True)
class InfixPattern:
    """``lhs op rhs`` extractor pattern, e.g. ``head :: tail``."""

    left: Pattern
    arguments: tuple[Pattern, ...]


@dataclass(frozen=True, slots=True)
class OtherPattern:
    kind: str


Pattern = NamePattern | TypedPattern | TuplePattern | InfixPattern | OtherPattern


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Param:
    name: Name
    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True, slots=True)
class PackageDecl:
    name: str
    stats: tuple[Statement, ...] = ()


@dataclass(frozen=True, slots=True)
class ObjectDef:
    name: Name
    modifiers: tuple[Modifier, ...] = ()
    body: tuple[Statement, ...] = ()


@dataclass(frozen=True, slots=True)
class PackageObjectDef:
    name: Name
    modifiers: tuple[Modifier, ...] = ()
    body: tuple[Statement, ...] = ()


@dataclass(frozen=True, slots=True)
class TraitDef:
    name: Name
    modifiers: tuple[Modifier, ...] = ()
    body: tuple[Statement, ...] = ()


@dataclass(frozen=True, slots=True)
class ClassDef:
    name: Name
    modifiers: tuple[Modifier, ...] = ()
    param_groups: tuple[tuple[Param, ...], ...] = ()
    body: tuple[Statement, ...] = ()

    @property
    def is_case(self) -> bool:
        return any(m.kind is ModifierKind.CASE for m in self.modifiers)

    @property
    def is_implicit(self) -> bool:
        return any(m.kind is ModifierKind.IMPLICIT for m in self.modifiers)


@dataclass(frozen=True, slots=True)
class FunctionDef:
    """``def`` with or without a body."""

    name: Name
    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True, slots=True)
class TypeDef:
    """Type alias (``type A = B``) or abstract type member (``type A <: B``)."""

    name: Name
    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True, slots=True)
class ValueDef:
    """``val``/``var`` definition or declaration; one pattern per binding."""

    patterns: tuple[Pattern, ...]
    modifiers: tuple[Modifier, ...] = ()


@dataclass(frozen=True, slots=True)
class OtherStatement:
    kind: str


Statement = (
    PackageDecl
    | ObjectDef
    | PackageObjectDef
    | TraitDef
    | ClassDef
    | FunctionDef
    | TypeDef
    | ValueDef
    | OtherStatement
)


@dataclass(frozen=True, slots=True)
class SourceFile:
    stats: tuple[Statement, ...] = field(default_factory=tuple)
