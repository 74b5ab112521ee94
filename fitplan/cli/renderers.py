"""Rich renderers for CLI outputs."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fitplan.cli.io import console
from fitplan.services.plan_renderer import BlockKind, GroupVariant, PlanGroup, RenderedBlock

TOPIC_ICONS = {
    "exercise": "🏋",
    "nutrition": "🥗",
    "schedule": "📅",
    "diet": "🍽",
    "cardio": "⚡",
    "strength": "💪",
    "tips": "💡",
}

VARIANT_STYLES = {
    GroupVariant.A: "blue",
    GroupVariant.B: "magenta",
}


def block_renderable(block: RenderedBlock) -> Text:
    """Return the styled line for one block.

    Plan text is wrapped in `Text` so brackets from the model are never read as markup.
    """

    if block.kind is BlockKind.HEADER:
        icon = TOPIC_ICONS.get(block.topic or "")
        label = f"{icon} {block.text}" if icon else block.text
        return Text(label, style="bold")
    if block.kind is BlockKind.BULLET:
        return Text.assemble(("  • ", "cyan"), block.text)
    if block.kind is BlockKind.NUMBERED:
        return Text.assemble((f"  {block.ordinal}. ", "bold cyan"), block.text)
    return Text(block.text)


def render_plan_groups(groups: Sequence[PlanGroup], *, title: str | None = None) -> None:
    """Display plan groups as alternating panels."""

    if title:
        console.print(Panel(Text(title, style="bold"), border_style="green"))
    if not groups:
        console.print(Panel("The generated plan is empty.", title="Plan"))
        return
    for group in groups:
        console.print(
            Panel(
                Group(*(block_renderable(block) for block in group.blocks)),
                border_style=VARIANT_STYLES[group.variant],
            )
        )


def render_validation_errors(field_errors: Mapping[str, str]) -> None:
    table = Table(title="Please fix the following fields", show_lines=False)
    table.add_column("Field", style="bold red")
    table.add_column("Problem")
    for field_name, message in sorted(field_errors.items()):
        table.add_row(field_name, message)
    console.print(table)


def render_prompt(prompt: str) -> None:
    console.print(Panel(Text(prompt), title="Prompt"))


def render_dashboard(overview: Mapping[str, Any]) -> None:
    """Render the static dashboard metrics and quick actions."""

    metrics = Table(title="Dashboard")
    metrics.add_column("Metric", style="bold")
    metrics.add_column("Value", justify="right")
    for metric in overview.get("metrics", []):
        metrics.add_row(metric["title"], Text(metric["value"], style=metric["color"]))
    console.print(metrics)

    lines = [f"{action['icon']} {action['title']} ({action['path']})" for action in overview.get("quick_actions", [])]
    console.print(Panel("\n".join(lines) or "No actions.", title="Quick Actions"))


def render_analysis(analysis: Mapping[str, Any]) -> None:
    """Render the static progress analysis view."""

    progress = Table(title="Weight Progress")
    progress.add_column("Month", style="bold")
    progress.add_column("Weight (kg)", justify="right")
    progress.add_column("Target (kg)", justify="right")
    progress.add_column("")
    for point in analysis.get("progress", []):
        bar = "█" * round(point["bar_ratio"] * 20)
        progress.add_row(point["month"], f"{point['weight']:g}", f"{point['target']:g}", Text(bar, style="blue"))
    console.print(progress)

    stats = Table(title="Statistics")
    stats.add_column("Statistic", style="bold")
    stats.add_column("Value", justify="right")
    stats.add_column("Trend", justify="right", style="green")
    for stat in analysis.get("stats", []):
        stats.add_row(stat["title"], stat["value"], stat["trend"])
    console.print(stats)

    recommendations = analysis.get("recommendations") or []
    body = "\n".join(f"- {item}" for item in recommendations) or "No recommendations."
    console.print(Panel(body, title="Recommendations"))


__all__ = [
    "TOPIC_ICONS",
    "VARIANT_STYLES",
    "block_renderable",
    "render_analysis",
    "render_dashboard",
    "render_plan_groups",
    "render_prompt",
    "render_validation_errors",
]
