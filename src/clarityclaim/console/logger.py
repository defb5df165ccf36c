"""Console logging and output for the command-line interface."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from clarityclaim.console.display import (
    print_appeal,
    print_assessment,
    print_db_stats,
    print_patterns,
    print_risk_factors,
)


if TYPE_CHECKING:
    from clarityclaim.core.models import (
        AppealRecord,
        PatternReport,
        RiskAssessment,
        RiskFactorDefinition,
    )


class ClaimsConsole:
    """Rich console interface for command results."""

    def __init__(self, verbose: bool = False) -> None:
        self.console = Console()
        self.verbose = verbose

    def setup_logging(self, level: str = "INFO") -> None:
        logging.basicConfig(
            level=level if self.verbose else "WARNING",
            format="%(message)s",
            handlers=[
                RichHandler(
                    console=self.console, rich_tracebacks=True, show_time=False, show_path=False
                )
            ],
            force=True,
        )

    def print_header(self, command: str, ai_configured: bool) -> None:
        header = Text()
        header.append("ClarityClaim", style="bold blue")
        header.append(" - Denial Risk & Appeals\n\n", style="dim")
        header.append("Command: ", style="bold")
        header.append(f"{command}\n", style="green")
        header.append("AI: ", style="bold")
        header.append("enabled" if ai_configured else "disabled (rules and templates only)", style="dim")
        self.console.print(Panel(header, border_style="blue"))
        self.console.print()

    def print_json(self, data: Any) -> None:
        self.console.print_json(json.dumps(data, default=str))

    def print_assessment(self, claim_id: str, assessment: RiskAssessment) -> None:
        print_assessment(self.console, claim_id, assessment)

    def print_appeal(self, appeal: AppealRecord) -> None:
        print_appeal(self.console, appeal)

    def print_patterns(self, report: PatternReport) -> None:
        print_patterns(self.console, report)

    def print_risk_factors(self, factors: list[RiskFactorDefinition]) -> None:
        print_risk_factors(self.console, factors)

    def print_db_stats(self, stats: dict[str, Any]) -> None:
        print_db_stats(self.console, stats)

    def print_success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, error: str) -> None:
        self.console.print()
        self.console.print(
            Panel(f"[red]{error}[/red]", title="[red]Error[/red]", border_style="red")
        )
