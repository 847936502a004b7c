"""
pwquality Console Interface
============================

Rich-powered console abstraction used by the command-line tool.

Wraps :class:`rich.console.Console` with helpers for the banner, section
headers, status messages and tables, all with a consistent theme.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_QUALITY_THEME = Theme(
    {
        "quality.banner": "bold bright_cyan",
        "quality.section": "bold bright_magenta",
        "quality.success": "bold green",
        "quality.error": "bold red",
        "quality.dim": "dim white",
    }
)

_TAGLINE = "Password quality checker"


class QualityConsole:
    """Unified console interface for pwquality output.

    Usage::

        con = QualityConsole()
        con.banner()
        con.section("Evaluation")
        con.success("Password accepted")
    """

    def __init__(
        self,
        *,
        quiet: bool = False,
        record: bool = False,
        stderr: bool = False,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output.
            record: Enable Rich recording for export.
            stderr: Write to standard error instead of standard output.
        """
        self._console = Console(
            theme=_QUALITY_THEME,
            quiet=quiet,
            record=record,
            stderr=stderr,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner and sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str) -> None:
        """Print the tool banner."""
        title = Text("pwquality", style="quality.banner")
        title.append(f"  v{version}", style="quality.dim")
        self._console.print(
            Panel(
                Text.assemble(title, "\n", (_TAGLINE, "quality.dim")),
                border_style="bright_cyan",
                expand=False,
            )
        )

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.print()
        self._console.rule(f"[quality.section]{title}[/quality.section]")

    # ------------------------------------------------------------------ #
    #  Status messages
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[quality.success]\\[✔] OK:[/quality.success] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[quality.error]\\[✘] ERROR:[/quality.error] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
    ) -> None:
        """Render a styled Rich table; every cell is stringified."""
        tbl = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for col_name in columns:
            tbl.add_column(col_name)
        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))
        self._console.print(tbl)
