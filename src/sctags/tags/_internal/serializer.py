"""Tag line rendering in vim's tags file format.

One line per tag::

    {full_name}\t{file}\t{line}G{column}|;"\t[file:{file}\t]language:{language}

The address is an Ex command (go to line, then column); everything after
``;"`` is extension fields. ``file:`` is only present for file-local tags.
See ``:help tags-file-format``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from sctags.config.constants import (
    ADDRESS_TERMINATOR,
    DEFAULT_LANGUAGE,
    FIELD_SEPARATOR,
    FILE_SCOPE_FIELD,
    LANGUAGE_FIELD,
)
from sctags.tags.models import Tag, TagLine


def tag_address(tag: Tag) -> str:
    return f"{tag.position.line}G{tag.position.column}|"


def to_line(tag: Tag, file_identifier: str, *, language: str = DEFAULT_LANGUAGE) -> str:
    """Render one tag for ``file_identifier``."""
    fields: list[tuple[str, str]] = []
    if tag.is_file_local:
        fields.append((FILE_SCOPE_FIELD, file_identifier))
    fields.append((LANGUAGE_FIELD, language))

    extras = FIELD_SEPARATOR.join(f"{key}:{value}" for key, value in fields)
    head = FIELD_SEPARATOR.join((tag.full_name, file_identifier, tag_address(tag)))
    return head + ADDRESS_TERMINATOR + FIELD_SEPARATOR + extras


def sort_tag_lines(lines: Iterable[TagLine]) -> list[TagLine]:
    """Sort by full name. Stable, so equal names keep file/tree order."""
    return sorted(lines, key=lambda line: line.full_name)


def file_identifier(path: str, relative_to: Path | None = None) -> str:
    """The file name written into the tag file.

    With ``relative_to`` (the tag file's directory) the name is made relative
    to it, which is how vim resolves relative names in a tags file.
    """
    if relative_to is None:
        return path
    return os.path.relpath(os.path.abspath(path), os.path.abspath(relative_to))


def render_tag_lines(
    lines: Iterable[TagLine],
    *,
    relative_to: Path | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> list[str]:
    """Sort and render tag lines; identifiers are rewritten once per file."""
    identifiers: dict[str, str] = {}
    rendered: list[str] = []
    for line in sort_tag_lines(lines):
        ident = identifiers.get(line.file)
        if ident is None:
            ident = identifiers[line.file] = file_identifier(line.file, relative_to)
        rendered.append(to_line(line.tag, ident, language=language))
    return rendered
