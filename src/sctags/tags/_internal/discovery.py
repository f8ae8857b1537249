"""Source discovery for command line arguments.

Files are taken as given. Directories are walked (sorted, so output is
reproducible), pruning VCS and build directories, and keep files whose
extension is configured.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from sctags.config.models import DiscoveryConfig
from sctags.core.excludes import should_prune

log = structlog.get_logger()


@dataclass
class DiscoveryResult:
    files: list[Path] = field(default_factory=list)
    skipped_large: list[Path] = field(default_factory=list)


def _walk_with_pruning(root: Path, config: DiscoveryConfig) -> list[Path]:
    results: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=config.follow_symlinks):
        dirnames[:] = sorted(d for d in dirnames if not should_prune(d, config.include_dirs))
        for filename in sorted(filenames):
            results.append(Path(dirpath) / filename)
    return results


def _has_source_extension(path: Path, extensions: Iterable[str]) -> bool:
    return path.suffix.lower().lstrip(".") in set(extensions)


def _add_once(files: list[Path], seen: set[Path], path: Path) -> None:
    # The same file can be reached through a directory and an explicit path.
    key = path.resolve()
    if key not in seen:
        seen.add(key)
        files.append(path)


def discover_sources(
    paths: Iterable[Path], config: DiscoveryConfig | None = None
) -> DiscoveryResult:
    """Expand file and directory arguments into source files, keeping argument order."""
    config = config or DiscoveryConfig()
    max_bytes = config.max_file_size_mb * 1024 * 1024
    result = DiscoveryResult()
    seen: set[Path] = set()

    for path in paths:
        if path.is_dir():
            candidates = [
                p
                for p in _walk_with_pruning(path, config)
                if _has_source_extension(p, config.extensions)
            ]
            for candidate in candidates:
                try:
                    too_large = candidate.stat().st_size > max_bytes
                except OSError:
                    too_large = False
                if too_large:
                    result.skipped_large.append(candidate)
                    log.info("source_skipped_large", path=str(candidate))
                    continue
                _add_once(result.files, seen, candidate)
        else:
            _add_once(result.files, seen, path)

    log.debug("sources_discovered", count=len(result.files), skipped=len(result.skipped_large))
    return result
