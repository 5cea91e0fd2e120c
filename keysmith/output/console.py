"""
Keysmith Console Output
========================

Rich-based displays for generated passwords and strength reports, built
on the shared :class:`shared.console.ForgeConsole`.
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ForgeConsole
from keysmith.core.models import GeneratedPassword, StrengthReport, format_keyspace

_STRENGTH_COLOURS: dict[str, str] = {
    "weak": "bold red",
    "moderate": "bold yellow",
    "strong": "bold bright_green",
}

_METER_WIDTH = 30


class KeysmithConsoleOutput:
    """Console formatters for Keysmith results.

    Usage::

        output = KeysmithConsoleOutput(ForgeConsole())
        output.display_generated(generated)
        output.display_strength(report)
    """

    def __init__(self, console: Optional[ForgeConsole] = None) -> None:
        self.console = console or ForgeConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Generation Display
    # ------------------------------------------------------------------ #

    def display_generated(self, result: GeneratedPassword) -> None:
        """Show generation details; the password line itself is printed by the CLI."""
        self.console.table(
            "Generation Details",
            ["Property", "Value"],
            [
                ("Length", result.length),
                ("Categories", ", ".join(c.value for c in result.categories)),
                ("Character Pool", result.pool_size),
                ("Entropy", f"{result.entropy_bits:.2f} bits"),
            ],
            styles=["bold", ""],
        )

    # ------------------------------------------------------------------ #
    #  Strength Display
    # ------------------------------------------------------------------ #

    def display_strength(self, result: StrengthReport) -> None:
        """Display a strength report with a category meter."""
        self.console.section("Password Analysis")

        colour = _STRENGTH_COLOURS.get(result.strength.value, "white")
        filled = _METER_WIDTH * result.category_count // 4

        meter = Text()
        meter.append("Categories: ", style="bold")
        meter.append(f"{result.category_count}/4  ")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (_METER_WIDTH - filled), style="dim")
        meter.append("]  ", style="dim")
        meter.append(result.strength.value.upper(), style=colour)

        self._rich.print(Panel(meter, title="Strength", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        tbl.add_row("Password", Text(result.password_masked))
        tbl.add_row("Length", str(result.length))
        tbl.add_row(
            "Categories",
            ", ".join(c.value for c in result.categories) or "none",
        )
        tbl.add_row("Pool Size", str(result.pool_size))
        tbl.add_row("Keyspace", format_keyspace(result.keyspace))
        tbl.add_row("Entropy", f"{result.entropy_bits:.2f} bits")

        self._rich.print(tbl)

        if result.crack_time_estimates:
            crack_tbl = Table(
                title="Crack Time Estimates",
                border_style="bright_cyan",
                header_style="bold bright_magenta",
                show_lines=True,
            )
            crack_tbl.add_column("Attack Scenario", style="bold")
            crack_tbl.add_column("Speed", justify="right")
            crack_tbl.add_column("Estimated Time", justify="right")

            for estimate in result.crack_time_estimates:
                crack_tbl.add_row(
                    estimate.scenario,
                    f"{estimate.guesses_per_second:.0e} g/s",
                    estimate.display,
                )

            self._rich.print(crack_tbl)

        if result.suggestions:
            self.console.blank()
            self.console.print("[bold]Suggestions:[/bold]")
            for suggestion in result.suggestions:
                self.console.print(f"  [bright_cyan]•[/bright_cyan] {suggestion}")
