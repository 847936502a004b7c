"""
Quality Console Output
=======================

Rich-based display of password quality results: a colour-coded score
meter, a details table and the feedback list.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pwquality.core.models import QualityResult, Strength
from pwquality.core.settings import Settings
from pwquality.shared.console import QualityConsole


_STRENGTH_COLOURS: dict[Strength, str] = {
    Strength.VERY_WEAK: "bold white on red",
    Strength.WEAK: "bold red",
    Strength.FAIR: "bold yellow",
    Strength.GOOD: "bold green",
    Strength.STRONG: "bold bright_green",
}

_METER_WIDTH = 40


def mask_password(password: str) -> str:
    """Mask all but the first and last character.

    Passwords of two characters or fewer are masked entirely.
    """
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class QualityConsoleOutput:
    """Console formatter for :class:`QualityResult` and :class:`Settings`.

    Usage::

        output = QualityConsoleOutput(QualityConsole())
        output.display_result(result, password="hunter2")
    """

    def __init__(self, console: Optional[QualityConsole] = None) -> None:
        self.console = console or QualityConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Result Display
    # ------------------------------------------------------------------ #

    def display_result(
        self, result: QualityResult, password: Optional[str] = None
    ) -> None:
        """Display an evaluation result with a visual score meter.

        Args:
            result: Result returned by the engine.
            password: Original password, shown masked when given.
        """
        self.console.section("Password Quality")
        self._rich.print(
            Panel(self._meter(result), title="Strength Meter", border_style="cyan")
        )

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        if password is not None:
            tbl.add_row("Password", escape(mask_password(password)))
            tbl.add_row("Length", str(len(password)))
        if result.entropy is not None:
            tbl.add_row("Entropy", f"{result.entropy:.2f} bits")
        tbl.add_row("Strength", result.strength.value)
        tbl.add_row("Valid", "Yes" if result.valid else "No")

        self._rich.print(tbl)

        if result.feedback:
            self._rich.print()
            self._rich.print("[bold]Feedback:[/bold]")
            for message in result.feedback:
                self._rich.print(f"  [yellow]⚠[/yellow] {escape(message)}")
        else:
            self._rich.print()
            self.console.success("No issues found.")

    @staticmethod
    def _meter(result: QualityResult) -> Text:
        filled = max(0, min(_METER_WIDTH, int(result.score / 100 * _METER_WIDTH)))
        colour = _STRENGTH_COLOURS.get(result.strength, "white")

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/100  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.2:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.4:
                meter.append("█", style="dark_orange")
            elif i < _METER_WIDTH * 0.6:
                meter.append("█", style="yellow")
            elif i < _METER_WIDTH * 0.8:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]", style="dim")
        meter.append("  ")
        meter.append(result.strength.value.upper(), style=colour)
        return meter

    # ------------------------------------------------------------------ #
    #  Settings Display
    # ------------------------------------------------------------------ #

    def display_settings(self, settings: Settings) -> None:
        """Display the effective settings as an option/value table."""
        rows = []
        for key, value in settings.to_options().items():
            if isinstance(value, list):
                value = ", ".join(value) or "(empty)"
            rows.append((key, value))
        for key, value in settings.extra.items():
            rows.append((f"{key} (ignored)", value))
        self.console.table("Effective Settings", ["Option", "Value"], rows)
