"""Entity classifier: decides whether a declaration is file-local.

Rules are checked in a fixed priority order, whatever order the modifiers
were written in. The first rule that applies decides; if none applies the
declaration is exported.

1. ``private``            -> file-local
2. ``private[X]``         -> file-local iff X is the enclosing scope name
3. ``val``/``var`` param  -> exported
4. anything else          -> no decision (``protected`` never makes a tag local)

Because ``private`` outranks the parameter markers, ``private val x`` in a
constructor is file-local.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from sctags.tags._internal.syntax import Modifier, ModifierKind

Rule = Callable[[str | None, tuple[Modifier, ...]], bool | None]


def _bare_private(scope: str | None, mods: tuple[Modifier, ...]) -> bool | None:  # noqa: ARG001
    if any(m.kind is ModifierKind.PRIVATE and m.qualifier is None for m in mods):
        return True
    return None


def _qualified_private(scope: str | None, mods: tuple[Modifier, ...]) -> bool | None:
    qualifiers = [m.qualifier for m in mods if m.kind is ModifierKind.PRIVATE and m.qualifier]
    if not qualifiers:
        return None
    # private[Outer] inside Outer is plain private; a wider scope is reachable.
    return scope is not None and scope in qualifiers


def _field_param(scope: str | None, mods: tuple[Modifier, ...]) -> bool | None:  # noqa: ARG001
    if any(m.kind in (ModifierKind.VAL_PARAM, ModifierKind.VAR_PARAM) for m in mods):
        return False
    return None


RULES: tuple[Rule, ...] = (_bare_private, _qualified_private, _field_param)


def is_file_local(scope: str | None, modifiers: Iterable[Modifier]) -> bool:
    """Classify a declaration under ``scope`` with the given modifiers."""
    mods = tuple(modifiers)
    for rule in RULES:
        decision = rule(scope, mods)
        if decision is not None:
            return decision
    return False


def is_file_local_ctor_param(modifiers: Iterable[Modifier]) -> bool:
    """Plain constructor parameters are not fields, so they stay file-local."""
    mods = tuple(modifiers)
    return not mods or is_file_local(None, mods)
