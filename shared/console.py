"""
PinPoint Console Interface
===========================

Rich-powered console abstraction providing one presentation layer for
every PinPoint command.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages and tables,
all with consistent styling.

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

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all PinPoint output
# ---------------------------------------------------------------------------
_PINPOINT_THEME = Theme(
    {
        "pinpoint.banner": "bold bright_cyan",
        "pinpoint.section": "bold bright_magenta",
        "pinpoint.success": "bold green",
        "pinpoint.warning": "bold yellow",
        "pinpoint.error": "bold red",
        "pinpoint.info": "bold bright_blue",
        "pinpoint.dim": "dim white",
        "pinpoint.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ██████╗ ██╗███╗   ██╗██████╗  ██████╗ ██╗███╗   ██╗████████╗
  ██╔══██╗██║████╗  ██║██╔══██╗██╔═══██╗██║████╗  ██║╚══██╔══╝
  ██████╔╝██║██╔██╗ ██║██████╔╝██║   ██║██║██╔██╗ ██║   ██║
  ██╔═══╝ ██║██║╚██╗██║██╔═══╝ ██║   ██║██║██║╚██╗██║   ██║
  ██║     ██║██║ ╚████║██║     ╚██████╔╝██║██║ ╚████║   ██║
  ╚═╝     ╚═╝╚═╝  ╚═══╝╚═╝      ╚═════╝ ╚═╝╚═╝  ╚═══╝   ╚═╝
[/bright_cyan]"""

_TAGLINE = "WPS Default PIN Predictor"


class PinpointConsole:
    """Unified console interface for PinPoint commands.

    Usage::

        con = PinpointConsole()
        con.banner()
        con.section("Predictions")
        con.success("Prediction complete")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for later export.
        """
        self._console = Console(
            theme=_PINPOINT_THEME,
            quiet=quiet,
            record=record,
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
        """Display the PinPoint ASCII-art banner."""
        subtitle = (
            f"[pinpoint.banner]{_TAGLINE}[/pinpoint.banner]\n"
            f"[pinpoint.dim]Version: {version}[/pinpoint.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="pinpoint.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[pinpoint.success][✔] SUCCESS:[/pinpoint.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[pinpoint.warning][⚠] WARNING:[/pinpoint.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[pinpoint.error][✘] ERROR:[/pinpoint.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[pinpoint.info][ℹ] INFO:[/pinpoint.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
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
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)
