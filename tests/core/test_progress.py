"""Tests for terminal feedback helpers."""

import pytest

from sctags.core.progress import (
    is_console_suppressed,
    pluralize,
    progress,
    status,
    suppress_console_logs,
)


class TestStatus:
    def test_given_long_message_when_printed_then_single_line_on_stderr(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        # Given
        message = "Wrote 12 tags from 3 files to " + "deeply/nested/" * 20 + "tags"

        # When
        status(message, style="success")

        # Then
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.splitlines() == [f"✓ {message}"]

    def test_given_info_style_when_printed_then_no_marker(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        status("nothing to do")

        assert capsys.readouterr().err == "nothing to do\n"


class TestPluralize:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 files"), (1, "1 file"), (2, "2 files")],
    )
    def test_regular_plural(self, count: int, expected: str) -> None:
        assert pluralize(count, "file") == expected

    def test_irregular_plural(self) -> None:
        assert pluralize(2, "entry", "entries") == "2 entries"


class TestProgress:
    def test_given_non_tty_when_iterated_then_all_items_in_order(self) -> None:
        items = list(range(120))

        assert list(progress(items, desc="Tagging")) == items
        assert not is_console_suppressed()

    def test_given_nested_suppression_when_inner_exits_then_outer_still_active(self) -> None:
        with suppress_console_logs():
            with suppress_console_logs():
                pass
            assert is_console_suppressed()

        assert not is_console_suppressed()
