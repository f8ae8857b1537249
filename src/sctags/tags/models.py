"""Tag value types.

A ``Tag`` is what the extractor knows about one named declaration; it does
not know which file it came from. A ``TagLine`` binds a tag to the file
identifier that ends up in the tag file.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """1-based line and column of a declaration's name token."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Tag:
    """An indexed declaration.

    ``qualifier`` is the enclosing object a member is statically reachable
    through; ``None`` for the unqualified form. ``is_file_local`` marks tags
    that are only meaningful inside their own file (ctags ``file:`` field).
    """

    qualifier: str | None
    name: str
    is_file_local: bool
    position: Position

    @property
    def full_name(self) -> str:
        """``Parent.name`` for qualified tags, ``name`` otherwise. Sort key."""
        if self.qualifier is None:
            return self.name
        return f"{self.qualifier}.{self.name}"

    @property
    def is_qualified(self) -> bool:
        return self.qualifier is not None

    def __str__(self) -> str:
        visibility = "static" if self.is_file_local else "non-static"
        return f"Tag({self.full_name}, {visibility}, {self.position.line}, {self.position.column})"


@dataclass(frozen=True, slots=True)
class TagLine:
    """A tag bound to the identifier of the file that declares it."""

    tag: Tag
    file: str

    @property
    def full_name(self) -> str:
        return self.tag.full_name
