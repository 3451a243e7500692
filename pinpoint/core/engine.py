"""
PinPoint Engine
================

Central orchestration engine for the WPS PIN predictor.

The engine follows a pipeline architecture:
    1. Collection: Stream neighbor observations from a provider
    2. Scoring: Attribute observations to known or discovered generators
    3. Aggregation: Normalise scores and rank candidate PINs
    4. Output: Console display and optional JSON report

Every call builds its own scorer, so one engine can serve concurrent
requests as long as each request brings its own provider.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from shared.config import PinpointConfig
from shared.console import PinpointConsole
from shared.logger import PinpointLogger
from shared.math_utils import ranking_entropy

from pinpoint.collectors.base import NeighborProvider
from pinpoint.collectors.database import ObservationDatabase
from pinpoint.core.aggregator import aggregate
from pinpoint.core.codec import format_bssid
from pinpoint.core.models import PredictionResult
from pinpoint.core.scoring import ScoringEngine
from pinpoint.generators.catalog import PinGenerator, build_catalog
from pinpoint.output.console import PinpointConsoleOutput
from pinpoint.output.report import PinpointReportGenerator

logger = PinpointLogger("core.engine")


class PinpointEngine:
    """Orchestrates PIN prediction and catalog listing.

    Usage::

        engine = PinpointEngine()
        result = engine.predict("00:11:22:33:44:55")
        pins = engine.generate("00:11:22:33:44:55")
    """

    def __init__(
        self,
        config: Optional[PinpointConfig] = None,
        console: Optional[PinpointConsole] = None,
    ) -> None:
        self._config = config or PinpointConfig()
        self._console = console or PinpointConsole(quiet=True)
        self._output = PinpointConsoleOutput(self._console)
        self._report_gen = PinpointReportGenerator()

    @property
    def config(self) -> PinpointConfig:
        return self._config

    # ------------------------------------------------------------------ #
    #  Prediction
    # ------------------------------------------------------------------ #

    def predict(
        self,
        bssid: str,
        provider: Optional[NeighborProvider] = None,
        *,
        output_path: Optional[str] = None,
        display: bool = False,
    ) -> PredictionResult:
        """Predict default WPS PINs for a BSSID.

        Args:
            bssid: Target BSSID in any notation.
            provider: Neighbor dataset provider.  Defaults to the SQLite
                      database named in the configuration.
            output_path: Optional JSON report path.
            display: Render the ranking on the console.

        Returns:
            PredictionResult with ranked candidates.

        Raises:
            DatasetError: If the provider cannot be read.
        """
        settings = self._config.predictor
        target = format_bssid(bssid)
        result = PredictionResult(bssid=target)

        owned: Optional[ObservationDatabase] = None
        if provider is None:
            owned = ObservationDatabase(
                settings.database, limit=settings.neighbor_limit, read_only=True
            )
            provider = owned

        deadline = None
        if settings.scan_timeout > 0:
            deadline = time.monotonic() + settings.scan_timeout

        try:
            with logger.timed(f"prediction for {target}"):
                scorer = ScoringEngine(target)
                state = scorer.consume(provider.neighbors(target), deadline=deadline)
                ranking = aggregate(state)
        finally:
            if owned is not None:
                owned.close()

        result.candidates = ranking.candidates
        result.total_weight = ranking.total_weight
        result.observations = state.observations
        result.truncated = state.truncated
        result.metadata = {
            "source": type(provider).__name__,
            "discoveries": [c.generator.describe() for c in state.discoveries],
            "unresolved": len(state.unresolved),
            "ranking_entropy": ranking_entropy(
                [c.confidence for c in result.candidates if not c.is_exact_match]
            ),
        }
        result.finalize()

        if display:
            self._output.display_prediction(
                result,
                top=settings.top,
                min_confidence=settings.min_confidence,
            )

        if output_path:
            self._generate_report(result, output_path)

        return result

    # ------------------------------------------------------------------ #
    #  Catalog listing
    # ------------------------------------------------------------------ #

    def generate(
        self, bssid: str, *, display: bool = False
    ) -> list[tuple[PinGenerator, str]]:
        """PIN of every catalog generator for a BSSID.

        Args:
            bssid: Target BSSID in any notation.
            display: Render the list on the console.

        Returns:
            ``(generator, pin)`` pairs in catalog order.
        """
        target = format_bssid(bssid)
        pins = [(g, g.pin_str(target)) for g in build_catalog()]
        if display:
            self._output.display_generators(target, pins)
        return pins

    # ------------------------------------------------------------------ #
    #  Reports
    # ------------------------------------------------------------------ #

    def report_path(self, output_path: str) -> Path:
        """Where a report named *output_path* is written.

        Relative paths are placed under the configured ``output_dir``;
        the suffix is always ``.json``.
        """
        path = Path(output_path)
        output_dir = self._config.global_settings.output_dir
        if not path.is_absolute() and output_dir:
            path = Path(output_dir) / path
        if path.suffix.lower() != ".json":
            path = path.with_suffix(".json")
        return path

    def _generate_report(self, result: PredictionResult, output_path: str) -> None:
        path = self.report_path(output_path)
        try:
            written = self._report_gen.generate_json(result, str(path))
            self._console.info(f"JSON report: {written}")
        except OSError as exc:
            logger.exception("JSON report error: %s", exc)
            self._console.error(f"Could not write report {path}: {exc}")
