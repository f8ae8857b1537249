"""Tests for file-local classification of declarations."""

from __future__ import annotations

import pytest

from sctags.tags._internal.classifier import is_file_local, is_file_local_ctor_param
from sctags.tags._internal.syntax import Modifier, ModifierKind
from tests.tags.helpers import FINAL, PRIVATE, VAL, VAR, private_in, protected_in


class TestIsFileLocal:
    """Classifier rule tests."""

    def test_given_no_modifiers_when_classified_then_exported(self) -> None:
        assert is_file_local(None, ()) is False
        assert is_file_local("Outer", ()) is False

    def test_given_bare_private_when_classified_then_file_local(self) -> None:
        assert is_file_local(None, [PRIVATE]) is True
        assert is_file_local("Outer", [PRIVATE]) is True

    def test_given_private_to_enclosing_scope_when_classified_then_file_local(self) -> None:
        """private[T] inside T means the same as private."""
        assert is_file_local("T", [private_in("T")]) is True

    @pytest.mark.parametrize("scope", ["T", None])
    def test_given_private_to_other_scope_when_classified_then_exported(
        self, scope: str | None
    ) -> None:
        assert is_file_local(scope, [private_in("U")]) is False

    @pytest.mark.parametrize("mod", [protected_in(), protected_in("T"), FINAL])
    def test_given_non_private_modifier_when_classified_then_exported(
        self, mod: Modifier
    ) -> None:
        assert is_file_local("T", [mod]) is False

    @pytest.mark.parametrize("field_mod", [VAL, VAR])
    def test_given_field_param_marker_when_classified_then_exported(
        self, field_mod: Modifier
    ) -> None:
        assert is_file_local(None, [field_mod]) is False

    @pytest.mark.parametrize(
        "mods",
        [
            [PRIVATE, VAL],
            [VAL, PRIVATE],
            [VAR, PRIVATE],
        ],
    )
    def test_given_private_and_field_marker_when_classified_then_private_wins(
        self, mods: list[Modifier]
    ) -> None:
        """Source order of modifiers does not change the outcome."""
        assert is_file_local(None, mods) is True

    def test_given_private_this_when_classified_then_treated_as_other_scope(self) -> None:
        assert is_file_local("Outer", [Modifier(ModifierKind.PRIVATE, "this")]) is False

    def test_given_several_qualified_privates_when_one_matches_then_file_local(self) -> None:
        assert is_file_local("T", [private_in("U"), private_in("T")]) is True


class TestIsFileLocalCtorParam:
    """Constructor parameter convention tests."""

    def test_given_bare_param_when_classified_then_file_local(self) -> None:
        assert is_file_local_ctor_param(()) is True

    def test_given_val_param_when_classified_then_exported(self) -> None:
        assert is_file_local_ctor_param([VAL]) is False

    def test_given_private_val_param_when_classified_then_file_local(self) -> None:
        assert is_file_local_ctor_param([PRIVATE, VAL]) is True

    def test_given_implicit_param_when_classified_then_exported(self) -> None:
        assert is_file_local_ctor_param([Modifier(ModifierKind.IMPLICIT)]) is False
