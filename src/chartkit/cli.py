"""Command-line interface for chartkit."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml

from .config import build_model, load_chart_document
from .elements import to_html
from .exceptions import ChartError
from .logger import setup_logger
from .models import Model
from .render import render as render_model

app = typer.Typer(
    name="chartkit",
    help="Declarative bar, pie and line charts rendered to HTML and SVG",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show updates, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
) -> None:
    """Global options for chartkit commands."""
    setup_logger(verbose)


def _load_model(file: Path) -> Model:
    try:
        return build_model(load_chart_document(file))
    except ChartError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


@app.command()
def render(
    file: Annotated[Path, typer.Argument(help="Path to the chart YAML file")] = Path("chart.yaml"),
    *,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Render a chart document to HTML."""
    model = _load_model(file)

    try:
        tree = render_model(model)
    except ChartError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    html_output = to_html(tree)

    if output:
        output.write_text(html_output, encoding="utf-8")
        typer.echo(f"Chart written to {output}")
    else:
        typer.echo(html_output, nl=False)


@app.command()
def styles(
    file: Annotated[Path, typer.Argument(help="Path to the chart YAML file")] = Path("chart.yaml"),
) -> None:
    """Print the resolved style cascade of a chart document as YAML."""
    model = _load_model(file)
    typer.echo(yaml.safe_dump(model.styles.to_dict(), sort_keys=False), nl=False)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
