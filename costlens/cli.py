"""
CostLens CLI - Command line interface for Azure cost analysis.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from costlens.config import setup_logging
from costlens.dashboard import DashboardState, DashboardStatus, load_csv, render, render_json, summarize
from costlens.ingest import demo_rows, write_demo_csv

app = typer.Typer(
    name="costlens",
    help="Azure Cost Analysis Dashboard - Summarize an exported usage-cost CSV",
    add_completion=False,
)
console = Console()


def _show(state: DashboardState, json_output: bool) -> None:
    if json_output:
        # Plain print keeps rich from wrapping the JSON
        print(json.dumps(render_json(state), indent=2))
        return
    render(state, console)


@app.command()
def analyze(
    file: Path = typer.Argument(..., help="Azure usage CSV export"),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter", "-d",
        help="Field delimiter (defaults to COSTLENS_CSV_DELIMITER or ',')",
    ),
    json_output: bool = typer.Option(
        False,
        "--json", "-j",
        help="Output as JSON",
    ),
):
    """Summarize a usage-cost CSV file."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
        disable=json_output,
    ) as progress:
        progress.add_task("Processing file...", total=None)
        state = load_csv(file, delimiter=delimiter)

    _show(state, json_output)

    # Aggregation faults still render the zero summary; only decode failures are fatal
    if state.status == DashboardStatus.ERROR and not state.has_summary:
        raise typer.Exit(code=1)


@app.command()
def demo(
    days: int = typer.Option(30, "--days", help="Number of days of demo data", min=1),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Also write the demo data to this CSV file",
    ),
    json_output: bool = typer.Option(False, "--json", "-j"),
):
    """Show the dashboard for generated demo data."""
    if output is not None:
        write_demo_csv(output, days=days)
        if not json_output:
            console.print(f"[green]Wrote demo data to {output}[/]")

    state = summarize(demo_rows(days), source="demo")
    _show(state, json_output)


@app.command()
def version():
    """Show version information."""
    from costlens import __version__
    console.print(f"CostLens v{__version__}")
    console.print("Azure Cost Analysis Dashboard")


def main():
    """Entry point."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
