"""
PinPoint Console Output
========================

Rich-based console output for the PinPoint predictor: the ranked
candidate table, the catalog listing and a short run summary.

References:
    - Rich library: https://github.com/Textualize/rich
    - PinPoint Console: shared.console.PinpointConsole
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table

from shared.console import PinpointConsole

from pinpoint.core.models import PinCandidate, PredictionResult
from pinpoint.generators.catalog import PinGenerator


_BAR_WIDTH = 20


def _confidence_color(confidence: float) -> str:
    if confidence >= 0.5:
        return "bold bright_green"
    if confidence >= 0.2:
        return "bold yellow"
    if confidence >= 0.05:
        return "bold bright_red"
    return "dim"


def _confidence_bar(confidence: float) -> str:
    filled = round(confidence * _BAR_WIDTH)
    color = _confidence_color(confidence)
    return (
        f"[{color}]{'█' * filled}[/{color}]"
        f"[dim]{'░' * (_BAR_WIDTH - filled)}[/dim] "
        f"{confidence * 100:6.2f}%"
    )


class PinpointConsoleOutput:
    """Console display for prediction results.

    Usage::

        output = PinpointConsoleOutput()
        output.display_prediction(result)
    """

    def __init__(self, console: Optional[PinpointConsole] = None) -> None:
        self._console = console or PinpointConsole()

    def display_prediction(
        self,
        result: PredictionResult,
        *,
        top: int = 0,
        min_confidence: float = 0.0,
    ) -> None:
        """Show the ranked candidates and a summary panel."""
        candidates = result.filtered(top=top, min_confidence=min_confidence)
        self._console.section(f"WPS PIN predictions for {result.bssid}")

        if not candidates:
            self._console.warning(
                f"No candidates: {result.observations} neighbor row(s) scored"
            )
        else:
            self._console.print(self._candidate_table(candidates))

        self.display_summary(result, shown=len(candidates))

    def display_summary(self, result: PredictionResult, shown: int) -> None:
        lines = [
            f"[bold]Target:[/bold]        {result.bssid}",
            f"[bold]Neighbors:[/bold]     {result.observations}",
            f"[bold]Candidates:[/bold]    {shown} of {len(result.candidates)}",
            f"[bold]Total weight:[/bold]  {result.total_weight:.4f}",
        ]
        discoveries = result.metadata.get("discoveries") or []
        if discoveries:
            lines.append(f"[bold]Discovered:[/bold]    {len(discoveries)}")
        if result.truncated:
            lines.append("[yellow]Neighbor scan stopped at the deadline[/yellow]")
        self._console.print(
            Panel("\n".join(lines), title="Summary", border_style="bright_cyan")
        )

    def display_generators(
        self,
        bssid: str,
        pins: Sequence[tuple[PinGenerator, str]],
    ) -> None:
        """Show the PIN produced by each catalog generator."""
        rows = [
            (g.name, "yes" if g.checksum else "no", pin)
            for g, pin in pins
        ]
        self._console.table(
            f"Catalog PINs for {bssid}",
            ["Generator", "Checksum", "PIN"],
            rows,
            styles=["bold", "dim", "bold bright_white"],
        )

    @staticmethod
    def _candidate_table(candidates: Sequence[PinCandidate]) -> Table:
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", justify="right", width=3)
        tbl.add_column("PIN", style="bold bright_white")
        tbl.add_column("Generator")
        tbl.add_column("Confidence", no_wrap=True)
        tbl.add_column("DB", justify="center")

        for idx, c in enumerate(candidates, start=1):
            tbl.add_row(
                str(idx),
                c.value,
                c.name,
                _confidence_bar(c.confidence),
                "[green]✔[/green]" if c.fromdb else "",
            )
        return tbl
