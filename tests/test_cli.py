"""Tests for CLI commands."""

from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner

from chartkit.cli import app

runner = CliRunner()

PIE_DOCUMENT = """
type: pie
title: Fruit basket
values: [1, 1, 2]
labels: [apple, pear, plum]
colours: ["#BF69B1", "#96A65B"]
"""


class TestRenderCommand:
    """Test the render CLI command."""

    def test_render_to_stdout(self, write_chart: Callable[[str], Path]) -> None:
        """Test rendering HTML to stdout."""
        result = runner.invoke(app, ["render", str(write_chart(PIE_DOCUMENT))])

        assert result.exit_code == 0
        assert result.stdout.startswith('<div class="container"')
        assert "Fruit basket" in result.stdout
        assert 'stroke="#BF69B1"' in result.stdout
        assert "plum" in result.stdout

    def test_render_to_file(self, write_chart: Callable[[str], Path], tmp_path: Path) -> None:
        """Test writing HTML to a file."""
        output = tmp_path / "chart.html"
        result = runner.invoke(
            app, ["render", str(write_chart(PIE_DOCUMENT)), "--output", str(output)]
        )

        assert result.exit_code == 0
        assert f"Chart written to {output}" in result.stdout
        assert '<svg class="chart"' in output.read_text(encoding="utf-8")

    def test_render_hbar(self, write_chart: Callable[[str], Path]) -> None:
        """Test horizontal bars end to end."""
        path = write_chart("type: bar-horizontal\nvalues: [10, 20, 5]\nlabels: [a, b, c]\n")
        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 0
        assert "width: 50%" in result.stdout
        assert ">b 20</span>" in result.stdout

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test the error path for a missing document."""
        result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Error: File not found" in result.output

    def test_zero_sum_pie(self, write_chart: Callable[[str], Path]) -> None:
        """Test that degenerate data exits with an error."""
        path = write_chart("type: pie\nvalues: [0, 0]\nlabels: [a, b]\n")
        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "zero total" in result.output

    def test_invalid_document(self, write_chart: Callable[[str], Path]) -> None:
        """Test that schema errors exit with an error."""
        result = runner.invoke(app, ["render", str(write_chart("type: radar\n"))])

        assert result.exit_code == 1
        assert "Invalid chart document" in result.output


class TestStylesCommand:
    """Test the styles CLI command."""

    def test_prints_cascade(self, write_chart: Callable[[str], Path]) -> None:
        """Test that the resolved cascade is printed as YAML."""
        path = write_chart(PIE_DOCUMENT + "styles:\n  chart:\n    width: 300px\n")
        result = runner.invoke(app, ["styles", str(path)])

        assert result.exit_code == 0
        assert "chart:" in result.stdout
        assert "background-color: grey" in result.stdout
        assert "width: 300px" in result.stdout
