"""Tests for the sctags show command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from sctags.cli.main import cli

runner = CliRunner()


class TestShow:
    def test_given_file_when_shown_then_sorted_lines_on_stdout(self, project: Path) -> None:
        path = "src/main/scala/Greeter.scala"

        result = runner.invoke(cli, ["show", path])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[0] == f'Greeter\t{path}\t3G8|;"\tlanguage:scala'
        assert [line.split("\t")[0] for line in lines] == [
            "Greeter",
            "Greeter.hello",
            "Greeter.secret",
            "hello",
            "secret",
        ]
        assert not (project / "tags").exists()

    def test_given_broken_file_when_shown_then_diagnostic_and_exit_1(self, project: Path) -> None:
        broken = project / "Broken.scala"
        broken.write_text("object Broken {\n")

        result = runner.invoke(cli, ["show", "Broken.scala"])

        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Broken.scala:" in result.stderr

    def test_version_option(self) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "sctags" in result.output
