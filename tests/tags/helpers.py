"""Builders for syntax trees and expected tags."""

from __future__ import annotations

from sctags.tags._internal.syntax import Modifier, ModifierKind, Name
from sctags.tags.models import Position, Tag

PRIVATE = Modifier(ModifierKind.PRIVATE)
VAL = Modifier(ModifierKind.VAL_PARAM)
VAR = Modifier(ModifierKind.VAR_PARAM)
CASE = Modifier(ModifierKind.CASE)
IMPLICIT = Modifier(ModifierKind.IMPLICIT)
FINAL = Modifier(ModifierKind.FINAL)


def name(value: str, line: int = 1, column: int = 1) -> Name:
    return Name(value, Position(line, column))


def tag(qualifier: str | None, value: str, local: bool, line: int, column: int) -> Tag:
    return Tag(qualifier, value, local, Position(line, column))


def private_in(scope: str) -> Modifier:
    return Modifier(ModifierKind.PRIVATE, scope)


def protected_in(scope: str | None = None) -> Modifier:
    return Modifier(ModifierKind.PROTECTED, scope)
