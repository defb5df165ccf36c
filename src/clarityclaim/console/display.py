"""Display components for console output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree


if TYPE_CHECKING:
    from rich.console import Console

    from clarityclaim.core.models import (
        AppealRecord,
        PatternReport,
        RiskAssessment,
        RiskFactorDefinition,
    )

LEVEL_COLORS = {"high": "red", "medium": "yellow", "low": "green"}


def print_assessment(console: Console, claim_id: str, assessment: RiskAssessment) -> None:
    """Print a risk assessment with its factors and recommendations."""
    color = LEVEL_COLORS[assessment.level.value]
    bar_width, filled = 20, int(max(0, min(assessment.score, 100)) / 100 * 20)
    bar = "█" * filled + "░" * (bar_width - filled)
    mode = "rules + AI" if assessment.ai_insights else "rules only"
    console.print(Panel(
        f"[bold]Claim:[/bold] {claim_id}\n"
        f"[bold]Score:[/bold] [{color}]{bar}[/{color}] {assessment.score}/100\n"
        f"[bold]Level:[/bold] [{color}]{assessment.level.value.upper()}[/{color}] [dim]({mode})[/dim]",
        title="Denial Risk",
        border_style=color,
    ))
    if assessment.factors:
        tree = Tree("[bold]Risk Factors[/bold]")
        for factor in assessment.factors:
            tree.add(f"[cyan]{factor.category.value}[/cyan] {factor.factor} "
                     f"[dim](+{factor.weight})[/dim]\n[dim]{factor.description}[/dim]")
        console.print(tree)
    else:
        console.print("  [green]✓[/green] No risk factors found")
    if assessment.recommendations:
        table = Table(title="Recommendations", border_style="dim")
        table.add_column("Type", width=14)
        table.add_column("Recommendation")
        table.add_column("Priority", width=8)
        table.add_column("Conf", justify="right", width=5)
        for rec in assessment.recommendations:
            prio = LEVEL_COLORS[rec.priority.value]
            table.add_row(rec.type, rec.recommendation, f"[{prio}]{rec.priority.value}[/{prio}]",
                          f"{rec.confidence:.2f}")
        console.print(table)
    if assessment.ai_insights and assessment.ai_insights.insights:
        console.print(Panel(assessment.ai_insights.insights, title="AI Insights", border_style="blue"))


def print_appeal(console: Console, appeal: AppealRecord) -> None:
    """Print a stored appeal and its letter."""
    source = f"AI ({appeal.model})" if appeal.ai_generated else "template"
    console.print(Panel(
        f"[bold]Appeal:[/bold] {appeal.appeal_number}\n"
        f"[bold]Claim:[/bold] {appeal.claim_id}\n"
        f"[bold]Source:[/bold] {source}\n"
        f"[bold]Deadline:[/bold] {appeal.deadline_date.isoformat()}",
        title="Appeal Draft",
        border_style="blue",
    ))
    console.print(appeal.letter_content, markup=False, highlight=False)


def print_patterns(console: Console, report: PatternReport) -> None:
    """Print a pattern analysis report."""
    if report.stats is None:
        console.print(f"  [yellow]⚠[/yellow] {report.summary}")
        return
    stats = report.stats
    table = Table(title="Claim Statistics", border_style="blue")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Claims Analyzed", str(report.claims_analyzed))
    table.add_row("Denial Rate", f"{stats.denial_rate:.1f}%")
    table.add_row("Total Billed", f"${stats.total_billed:,.2f}")
    table.add_row("Total Paid", f"${stats.total_paid:,.2f}")
    table.add_row("Avg Risk Score", f"{stats.avg_risk_score:.1f}")
    for status, count in stats.by_status.items():
        table.add_row(f"  {status.replace('_', ' ').title()}", str(count))
    console.print(table)
    if not report.patterns:
        console.print("  [green]✓[/green] No denial patterns detected")
        return
    for pattern in report.patterns:
        color = LEVEL_COLORS[pattern.severity.value]
        console.print(Panel(
            f"{pattern.description}\n\n[bold]Recommendation:[/bold] {pattern.recommendation}",
            title=f"[{color}]{pattern.title}[/{color}]",
            border_style=color,
        ))


def print_risk_factors(console: Console, factors: list[RiskFactorDefinition]) -> None:
    """Print the risk factor catalog."""
    table = Table(title="Denial Risk Factors", border_style="blue")
    table.add_column("ID", style="dim")
    table.add_column("Category", width=14)
    table.add_column("Factor")
    table.add_column("Impact", width=7)
    table.add_column("Weight", justify="right", width=6)
    for f in factors:
        color = LEVEL_COLORS[f.impact.value]
        table.add_row(f.id, f.category.value, f.factor, f"[{color}]{f.impact.value}[/{color}]", str(f.weight))
    console.print(table)


def print_db_stats(console: Console, stats: dict[str, Any]) -> None:
    """Print database statistics."""
    table = Table(title="Claims Database", border_style="blue")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    for key, value in stats.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    console.print(table)
