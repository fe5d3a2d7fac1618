"""
Console rendering of the cost dashboard.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from costlens.dashboard.state import DashboardState, DashboardStatus
from costlens.formatting import format_currency, format_percentage
from costlens.optimize import generate_recommendations
from costlens.see.models import CostSummary

RECOMMENDATION_COLORS = ["yellow", "blue", "green"]


def _kpi_panel(summary: CostSummary) -> Panel:
    top_service = summary.top_service
    peak = summary.peak_usage
    resource = summary.resource_costs

    return Panel(
        f"[bold]Monthly Spend:[/] [yellow]{format_currency(summary.total_cost)}[/]\n"
        f"[bold]Daily Average:[/] {format_currency(summary.daily_average)}\n\n"
        f"[bold]Top Service:[/] {escape(top_service.name)} "
        f"({format_currency(top_service.value)})\n"
        f"[bold]Peak Usage Date:[/] {escape(peak.date)} "
        f"({format_currency(peak.cost)})\n"
        f"[bold]Highest Cost Resource:[/] {escape(resource.name)} "
        f"({format_currency(resource.cost)})",
        title="Cost Summary",
    )


def _daily_table(summary: CostSummary) -> Table:
    table = Table(title="Daily Cost Trend")
    table.add_column("Date", style="cyan")
    table.add_column("Cost", justify="right")

    for day in summary.daily_costs:
        cost = format_currency(day.cost)
        if day is summary.peak_usage:
            cost = f"[red]{cost}[/]"
        table.add_row(escape(day.date), cost)

    return table


def _services_table(summary: CostSummary) -> Table:
    table = Table(title="Top 5 Services by Cost")
    table.add_column("Service", style="magenta")
    table.add_column("Cost", justify="right")
    table.add_column("Share", justify="right")

    for service in summary.top_services():
        table.add_row(
            escape(service.name),
            format_currency(service.value),
            format_percentage(service.value, summary.total_cost),
        )

    return table


def _resource_groups_table(summary: CostSummary) -> Table:
    table = Table(title="Resource Group Cost Distribution")
    table.add_column("Resource Group")
    table.add_column("Cost", justify="right")

    for group in summary.resource_group_costs:
        table.add_row(escape(group.name), format_currency(group.cost))

    return table


def _recommendations_panel(summary: CostSummary) -> Panel:
    lines = []
    for color, rec in zip(RECOMMENDATION_COLORS, generate_recommendations(summary)):
        lines.append(f"[bold {color}]{rec.title}[/]\n{escape(rec.message)}")

    return Panel("\n\n".join(lines), title="Cost Optimization Recommendations")


def render(state: DashboardState, console: Optional[Console] = None) -> None:
    """Print the dashboard for the given state."""
    console = console or Console()

    if state.status == DashboardStatus.EMPTY:
        console.print(Panel(
            "Upload your Azure usage CSV file to view the cost analysis dashboard.\n"
            "[dim]Run: costlens analyze <file.csv>[/dim]",
            title="Azure Cost Analysis Dashboard",
        ))
        return

    if state.status == DashboardStatus.LOADING:
        console.print("[blue]Processing file...[/]")
        return

    if state.error:
        console.print(f"[red]{escape(state.error)}[/]")

    if state.summary is None:
        return

    summary = state.summary
    title = "Azure Cost Analysis Dashboard"
    if state.source:
        title += f" - {escape(state.source)}"
    console.print(f"[bold]{title}[/]")
    console.print()

    console.print(_kpi_panel(summary))

    if summary.daily_costs:
        console.print(_daily_table(summary))
    if summary.service_breakdown:
        console.print(_services_table(summary))
    if summary.resource_group_costs:
        console.print(_resource_groups_table(summary))

    console.print(_recommendations_panel(summary))


def render_json(state: DashboardState) -> dict:
    """JSON-ready view of the state for --json output and the API."""
    summary = state.summary
    return {
        "status": state.status.value,
        "error": state.error,
        "source": state.source,
        "summary": summary.to_dict() if summary is not None else None,
        "recommendations": (
            [r.to_dict() for r in generate_recommendations(summary)]
            if summary is not None else []
        ),
    }
