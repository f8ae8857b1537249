"""Tag generation operations.

Pipeline per file: read -> parse (tree-sitter) -> extract -> bind to the
file identifier. A file that cannot be read or parsed yields a
``FileTagsResult`` carrying the error and no tags; other files are not
affected. Batches merge all tag lines and sort them by full name.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from sctags.config.constants import DEFAULT_LANGUAGE
from sctags.core.errors import ParseFailure, SourceReadError
from sctags.core.progress import progress
from sctags.tags._internal.extractor import extract_tags
from sctags.tags._internal.parsing import ScalaSyntaxParser
from sctags.tags._internal.serializer import render_tag_lines, sort_tag_lines
from sctags.tags._internal.syntax import SourceFile
from sctags.tags.models import Tag, TagLine

log = structlog.get_logger()


@dataclass
class FileTagsResult:
    """Tags for one file, or the recoverable error that prevented them."""

    path: Path
    tag_lines: list[TagLine] = field(default_factory=list)
    error: ParseFailure | SourceReadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Merged, sorted tag lines for many files plus per-file outcomes."""

    tag_lines: list[TagLine] = field(default_factory=list)
    results: list[FileTagsResult] = field(default_factory=list)

    @property
    def failures(self) -> list[FileTagsResult]:
        return [r for r in self.results if not r.ok]

    @property
    def files_processed(self) -> int:
        return len(self.results)


def parse_source(content: bytes | str, path: str = "<memory>") -> SourceFile:
    """Parse Scala source. Raises ``ParseFailure`` on syntax errors."""
    return ScalaSyntaxParser.get().parse(content, path)


def generate_tags(source: SourceFile) -> list[Tag]:
    """Tags for a parsed source file, in tree order."""
    return extract_tags(source)


def generate_tags_for_source(content: bytes | str, path: str = "<memory>") -> list[Tag]:
    """Parse and extract in one step. Raises ``ParseFailure``."""
    return generate_tags(parse_source(content, path))


def generate_tags_for_file(path: Path, *, emit_qualified: bool = True) -> FileTagsResult:
    """Generate tag lines for one file; errors are returned, not raised."""
    file_id = str(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        error = SourceReadError.unreadable(file_id, e.strerror or str(e))
        log.warning("source_read_failed", path=file_id, reason=str(e))
        return FileTagsResult(path=path, error=error)

    try:
        tags = generate_tags_for_source(content, file_id)
    except ParseFailure as e:
        log.warning("parse_failed", path=file_id, line=e.line, column=e.column, reason=e.message)
        return FileTagsResult(path=path, error=e)

    if not emit_qualified:
        tags = [t for t in tags if not t.is_qualified]
    log.debug("tags_generated", path=file_id, count=len(tags))
    return FileTagsResult(path=path, tag_lines=[TagLine(tag, file_id) for tag in tags])


def generate_tags_for_files(
    paths: Iterable[Path],
    *,
    emit_qualified: bool = True,
) -> BatchResult:
    """Generate, merge and sort tag lines for many files.

    Failed files are recorded in the result and contribute no tags.
    """
    paths = list(paths)
    batch = BatchResult()
    merged: list[TagLine] = []
    for path in progress(paths, desc="Tagging", unit="files"):
        result = generate_tags_for_file(path, emit_qualified=emit_qualified)
        batch.results.append(result)
        merged.extend(result.tag_lines)
    batch.tag_lines = sort_tag_lines(merged)
    log.info(
        "batch_tagged",
        files=batch.files_processed,
        failures=len(batch.failures),
        tags=len(batch.tag_lines),
    )
    return batch


def write_tags_file(
    tag_lines: Iterable[TagLine],
    output: Path,
    *,
    relative_paths: bool = False,
    language: str = DEFAULT_LANGUAGE,
) -> int:
    """Write sorted tag lines to ``output``, replacing it atomically.

    Returns the number of lines written.
    """
    relative_to = Path(os.path.abspath(output)).parent if relative_paths else None
    lines = render_tag_lines(tag_lines, relative_to=relative_to, language=language)

    output.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{output.name}.", dir=output.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
        os.replace(tmp_name, output)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise

    log.info("tags_written", output=str(output), lines=len(lines))
    return len(lines)
