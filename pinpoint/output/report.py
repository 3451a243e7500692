"""
PinPoint Report Generator
==========================

Writes prediction results as JSON documents for integration with other
tools.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shared.logger import PinpointLogger

from pinpoint import __version__
from pinpoint.core.models import PredictionResult

logger = PinpointLogger("output.report")


class _PinpointJSONEncoder(json.JSONEncoder):
    """JSON encoder handling datetimes and pydantic models."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        if hasattr(obj, "model_dump"):
            return obj.model_dump()
        if hasattr(obj, "value"):  # Enum
            return obj.value
        return super().default(obj)


class PinpointReportGenerator:
    """Serialises :class:`PredictionResult` objects.

    Usage::

        gen = PinpointReportGenerator()
        gen.generate_json(result, "report.json")
    """

    def build(self, result: PredictionResult) -> dict[str, Any]:
        """Report document as a plain dictionary."""
        return {
            "tool": "pinpoint",
            "version": __version__,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "bssid": result.bssid,
            "duration_seconds": result.duration_seconds,
            "summary": {
                "observations": result.observations,
                "candidates": len(result.candidates),
                "total_weight": result.total_weight,
                "confidence_mass": result.confidence_mass,
                "truncated": result.truncated,
            },
            "scores": [c.model_dump() for c in result.candidates],
            "metadata": result.metadata,
        }

    def to_json(self, result: PredictionResult, indent: int | None = 2) -> str:
        return json.dumps(
            self.build(result),
            cls=_PinpointJSONEncoder,
            indent=indent,
            ensure_ascii=False,
        )

    def generate_json(self, result: PredictionResult, output_path: str) -> str:
        """Write a JSON report.

        Returns:
            Absolute path to the generated report.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(result), encoding="utf-8")
        logger.info("JSON report written to %s", path)
        return str(path.resolve())
