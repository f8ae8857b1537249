"""Tests for tag value types."""

from __future__ import annotations

import dataclasses

import pytest

from sctags.tags.models import Position, Tag, TagLine


class TestTag:
    def test_full_name_unqualified(self) -> None:
        assert Tag(None, "apply", False, Position(1, 1)).full_name == "apply"

    def test_full_name_qualified(self) -> None:
        tag = Tag("Foo", "apply", False, Position(1, 1))

        assert tag.full_name == "Foo.apply"
        assert tag.is_qualified

    def test_str_shows_visibility(self) -> None:
        assert str(Tag("O", "f", True, Position(3, 5))) == "Tag(O.f, static, 3, 5)"
        assert str(Tag(None, "f", False, Position(3, 5))) == "Tag(f, non-static, 3, 5)"

    def test_tags_are_immutable(self) -> None:
        tag = Tag(None, "f", False, Position(1, 1))

        with pytest.raises(dataclasses.FrozenInstanceError):
            tag.name = "g"  # type: ignore[misc]


class TestTagLine:
    def test_full_name_delegates_to_tag(self) -> None:
        line = TagLine(Tag("O", "f", False, Position(1, 1)), "src/O.scala")

        assert line.full_name == "O.f"
        assert line.file == "src/O.scala"


class TestPosition:
    def test_positions_order_by_line_then_column(self) -> None:
        assert Position(1, 9) < Position(2, 1) < Position(2, 3)
