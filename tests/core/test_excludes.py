"""Tests for directory pruning."""

import pytest

from sctags.core.excludes import (
    DEFAULT_PRUNABLE_DIRS,
    HARDCODED_DIRS,
    is_default_prunable,
    is_hardcoded_dir,
    should_prune,
)


class TestTiers:
    def test_tiers_are_disjoint(self) -> None:
        assert not HARDCODED_DIRS & DEFAULT_PRUNABLE_DIRS

    @pytest.mark.parametrize("dirname", ["target", ".bloop", ".metals", ".bsp", "out"])
    def test_build_dirs_prunable(self, dirname: str) -> None:
        assert is_default_prunable(dirname)
        assert not is_hardcoded_dir(dirname)


class TestShouldPrune:
    @pytest.mark.parametrize(
        ("dirname", "include_dirs", "expected"),
        [
            ("src", (), False),
            ("target", (), True),
            ("target", ("target",), False),
            (".git", (), True),
            (".git", (".git",), True),
        ],
    )
    def test_given_dir_when_checked_then_pruned_per_tier(
        self, dirname: str, include_dirs: tuple[str, ...], expected: bool
    ) -> None:
        assert should_prune(dirname, include_dirs) is expected
