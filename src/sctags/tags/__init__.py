"""Tag generation for Scala sources.

Public API is in ``sctags.tags.ops``; value types in ``sctags.tags.models``.
Parsing, extraction, classification and rendering live in
``sctags.tags._internal``.
"""

from sctags.tags.models import Position, Tag, TagLine
from sctags.tags.ops import (
    BatchResult,
    FileTagsResult,
    generate_tags,
    generate_tags_for_file,
    generate_tags_for_files,
    generate_tags_for_source,
    parse_source,
    write_tags_file,
)

__all__ = [
    "BatchResult",
    "FileTagsResult",
    "Position",
    "Tag",
    "TagLine",
    "generate_tags",
    "generate_tags_for_file",
    "generate_tags_for_files",
    "generate_tags_for_source",
    "parse_source",
    "write_tags_file",
]
