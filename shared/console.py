"""
Keysmith Console Interface
===========================

Rich-powered console abstraction giving every Keysmith command the same
banner, section headers, coloured status messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_FORGE_THEME = Theme(
    {
        "forge.banner": "bold bright_cyan",
        "forge.section": "bold bright_magenta",
        "forge.success": "bold green",
        "forge.warning": "bold yellow",
        "forge.error": "bold red",
        "forge.info": "bold bright_blue",
        "forge.dim": "dim white",
        "forge.tagline": "bold bright_green",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ██╗  ██╗███████╗██╗   ██╗███████╗███╗   ███╗██╗████████╗██╗  ██╗
  ██║ ██╔╝██╔════╝╚██╗ ██╔╝██╔════╝████╗ ████║██║╚══██╔══╝██║  ██║
  █████╔╝ █████╗   ╚████╔╝ ███████╗██╔████╔██║██║   ██║   ███████║
  ██╔═██╗ ██╔══╝    ╚██╔╝  ╚════██║██║╚██╔╝██║██║   ██║   ██╔══██║
  ██║  ██╗███████╗   ██║   ███████║██║ ╚═╝ ██║██║   ██║   ██║  ██║
  ╚═╝  ╚═╝╚══════╝   ╚═╝   ╚══════╝╚═╝     ╚═╝╚═╝   ╚═╝   ╚═╝  ╚═╝
[/bright_cyan]"""

_TAGLINE = "Random Password Generator & Strength Analyzer"


class ForgeConsole:
    """Unified console interface for Keysmith commands.

    Usage::

        con = ForgeConsole()
        con.banner()
        con.section("Password Analysis")
        con.warning("Length out of range")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all Rich output (plain ``click.echo`` lines
                printed by the CLI are unaffected).
        """
        self._console = Console(
            theme=_FORGE_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner and sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Keysmith ASCII-art logo."""
        subtitle = (
            f"[forge.tagline]{_TAGLINE}[/forge.tagline]\n"
            f"[forge.dim]Version: {version}[/forge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(f"  {title}  ", style="forge.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._message("forge.success", "✔", "SUCCESS", message)

    def warning(self, message: str) -> None:
        self._message("forge.warning", "⚠", "WARNING", message)

    def error(self, message: str) -> None:
        self._message("forge.error", "✘", "ERROR", message)

    def _message(self, style: str, icon: str, label: str, message: str) -> None:
        # Messages may echo user input, so the body is appended as plain text
        line = Text.from_markup(f"[{style}][{icon}] {label}:[/{style}] ")
        line.append(message)
        self._console.print(line)

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()
