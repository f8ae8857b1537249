"""Directory pruning for source discovery.

Tier 0 (HARDCODED_DIRS): Never traversed, not configurable.
Tier 1 (DEFAULT_PRUNABLE_DIRS): Skipped by default; ``discovery.include_dirs``
    in the config re-enables individual names.
"""

from __future__ import annotations

from collections.abc import Iterable

# =============================================================================
# Tier 0: HARDCODED - Never traverse
# =============================================================================

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
    )
)

# =============================================================================
# Tier 1: DEFAULT_PRUNABLE - Build outputs and tool caches
# =============================================================================

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # sbt / mill / scala-cli
        "target",
        "out",
        ".bsp",
        ".bloop",
        ".metals",
        ".scala-build",
        ".ammonite",
        # Gradle / Maven wrappers and caches
        ".gradle",
        "build",
        ".m2",
        # IDEs
        ".idea",
        ".vscode",
        # JavaScript tooling sometimes vendored into Scala.js projects
        "node_modules",
    )
)

def is_hardcoded_dir(dirname: str) -> bool:
    """Check if directory is hardcoded (never traversable, not overridable)."""
    return dirname in HARDCODED_DIRS


def is_default_prunable(dirname: str) -> bool:
    """Check if directory is prunable by default (but user can override)."""
    return dirname in DEFAULT_PRUNABLE_DIRS


def should_prune(dirname: str, include_dirs: Iterable[str] = ()) -> bool:
    """Decide whether a directory is skipped during discovery."""
    if is_hardcoded_dir(dirname):
        return True
    return is_default_prunable(dirname) and dirname not in set(include_dirs)
