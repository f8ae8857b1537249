"""Tag extraction over the provider-neutral syntax tree.

Scoping rules:
- ``package`` blocks are transparent; their statements are top level.
- Members of an object (or package object) get a second tag qualified by
  that object's name. Only the nearest object qualifies: for ``A { B { m } }``
  the qualified tag is ``B.m``, never ``A.B.m``.
- Class and trait members are instance members, so their bodies are walked
  with no qualifier. The class/trait itself is still qualified by its
  enclosing object.
- Constructor parameters are only ever tagged unqualified.

Unknown statements and patterns produce nothing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sctags.tags._internal.classifier import is_file_local, is_file_local_ctor_param
from sctags.tags._internal.syntax import (
    ClassDef,
    FunctionDef,
    InfixPattern,
    Modifier,
    Name,
    NamePattern,
    ObjectDef,
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
from sctags.tags.models import Tag


def extract_tags(source: SourceFile) -> list[Tag]:
    """Generate the tags for one parsed source file, in tree order."""
    tags: list[Tag] = []
    for stat in source.stats:
        tags.extend(_tags_for_top_level(stat))
    return tags


def _tags_for_top_level(stat: Statement) -> Iterator[Tag]:
    if isinstance(stat, PackageDecl):
        for child in stat.stats:
            yield from _tags_for_top_level(child)
    else:
        yield from _tags_for_statement(None, stat)


def _tags_for_statement(scope: str | None, stat: Statement) -> Iterator[Tag]:
    if isinstance(stat, FunctionDef | TypeDef):
        yield from _member_tags(scope, stat.modifiers, stat.name)
    elif isinstance(stat, ValueDef):
        for pattern in stat.patterns:
            for name in bound_names(pattern):
                yield from _member_tags(scope, stat.modifiers, name)
    elif isinstance(stat, ObjectDef | PackageObjectDef):
        yield from _member_tags(scope, stat.modifiers, stat.name)
        yield from _tags_for_body(stat.name.value, stat.body)
    elif isinstance(stat, TraitDef):
        yield from _member_tags(scope, stat.modifiers, stat.name)
        yield from _tags_for_body(None, stat.body)
    elif isinstance(stat, ClassDef):
        yield from _member_tags(scope, stat.modifiers, stat.name)
        if stat.is_implicit:
            yield from _implicit_class_param_tags(stat.param_groups)
        else:
            yield from _ctor_param_tags(stat.is_case, stat.param_groups)
        yield from _tags_for_body(None, stat.body)


def _tags_for_body(scope: str | None, body: Iterable[Statement]) -> Iterator[Tag]:
    for child in body:
        yield from _tags_for_statement(scope, child)


def _member_tags(scope: str | None, modifiers: tuple[Modifier, ...], name: Name) -> Iterator[Tag]:
    local = is_file_local(scope, modifiers)
    yield Tag(None, name.value, local, name.position)
    if scope is not None:
        yield Tag(scope, name.value, local, name.position)


def bound_names(pattern: Pattern) -> Iterator[Name]:
    """Every simple name bound by a val/var pattern, left to right."""
    if isinstance(pattern, NamePattern):
        yield pattern.name
    elif isinstance(pattern, TypedPattern):
        yield from bound_names(pattern.pattern)
    elif isinstance(pattern, TuplePattern):
        for p in pattern.patterns:
            yield from bound_names(p)
    elif isinstance(pattern, InfixPattern):
        yield from bound_names(pattern.left)
        for p in pattern.arguments:
            yield from bound_names(p)


def _implicit_class_param_tags(param_groups: tuple[tuple[Param, ...], ...]) -> Iterator[Tag]:
    # An implicit class has exactly one parameter, but malformed ones still parse.
    for group in param_groups:
        for param in group:
            yield Tag(None, param.name.value, True, param.name.position)


def _ctor_param_tags(is_case: bool, param_groups: tuple[tuple[Param, ...], ...]) -> Iterator[Tag]:
    if not param_groups:
        return
    first, *rest = param_groups
    for param in first:
        # Case class parameters in the first group are public accessors.
        if is_case:
            local = is_file_local(None, param.modifiers)
        else:
            local = is_file_local_ctor_param(param.modifiers)
        yield Tag(None, param.name.value, local, param.name.position)
    for group in rest:
        for param in group:
            yield Tag(
                None,
                param.name.value,
                is_file_local_ctor_param(param.modifiers),
                param.name.position,
            )
