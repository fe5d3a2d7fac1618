#!/usr/bin/env python3
"""
Demo script for CostLens - Azure Cost Analysis Dashboard.

Run this to see the dashboard in action with demo data. It walks the
same path as an uploaded file: write a CSV, decode it, aggregate, render.
"""

import tempfile
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from costlens.config import setup_logging
from costlens.dashboard import DashboardState, load_csv, render
from costlens.ingest import write_demo_csv


console = Console()


def main():
    setup_logging()

    console.print(Panel.fit(
        "[bold blue]CostLens[/bold blue]\n"
        "Azure Cost Analysis Dashboard\n"
        "[dim]Demo Mode - Using simulated data[/dim]",
        border_style="blue",
    ))
    console.print()

    # Nothing loaded yet
    state = DashboardState.initial()
    render(state, console)
    console.print()

    with tempfile.TemporaryDirectory() as tmp:
        console.print("[bold]1. Writing demo usage export...[/bold]")
        path = write_demo_csv(Path(tmp) / "azure-usage-demo.csv", days=30)
        console.print(f"   [green]Wrote {path.name}[/green]\n")

        console.print("[bold]2. Loading file...[/bold]")
        render(DashboardState.loading(path.name), console)
        state = load_csv(path)
        console.print()

    console.print("[bold]3. Dashboard[/bold]")
    render(state, console)


if __name__ == "__main__":
    main()
