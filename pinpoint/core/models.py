"""
PinPoint Data Models
=====================

Pydantic models for the predictor's inputs and outputs: observed
(BSSID, PIN) pairs, ranked PIN candidates and the result of one
prediction run.

References:
    - Pydantic v2 Documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pinpoint.core.codec import format_bssid

UNKNOWN_NAME = "Unknown"


# ---------------------------------------------------------------------------
# Observations
# ---------------------------------------------------------------------------


class Observation(BaseModel):
    """One (BSSID, PIN) pair seen in the field.

    Attributes:
        bssid: Canonical 12-hex-digit BSSID (canonicalised on input).
        pin:   WPS PIN as an integer in [0, 99999999].
    """

    model_config = ConfigDict(frozen=True)

    bssid: str
    pin: int = Field(..., ge=0, le=99_999_999)

    @field_validator("bssid", mode="before")
    @classmethod
    def _canonical_bssid(cls, v: Any) -> str:
        return format_bssid(str(v))

    @field_validator("pin", mode="before")
    @classmethod
    def _coerce_pin(cls, v: Any) -> int:
        """Accept PINs as zero-padded strings, as exported by most tools."""
        if isinstance(v, str):
            return int(v.strip())
        return v

    def as_row(self) -> tuple[str, int]:
        return self.bssid, self.pin


# ---------------------------------------------------------------------------
# Prediction output
# ---------------------------------------------------------------------------


class PinCandidate(BaseModel):
    """A predicted PIN with its confidence.

    Attributes:
        name:       Generator display name, or ``"Unknown"`` for PINs
                    observed at the target BSSID itself.
        value:      8-digit decimal PIN string.
        confidence: Normalised score in [0, 1].
        fromdb:     Whether this PIN was observed at the target BSSID.
    """

    name: str
    value: str = Field(..., min_length=8, max_length=8, pattern=r"^\d{8}$")
    confidence: float = Field(..., ge=0.0, le=1.0)
    fromdb: bool = False

    @property
    def is_exact_match(self) -> bool:
        return self.name == UNKNOWN_NAME and self.fromdb


class PredictionResult(BaseModel):
    """Aggregated output of one prediction run.

    Attributes:
        bssid:        Canonical target BSSID.
        candidates:   Ranked candidates, exact "Unknown" matches first.
        total_weight: Normalisation denominator used for confidences.
        observations: Number of neighbor rows scored.
        truncated:    Whether the neighbor stream was abandoned early
                      because of a deadline.
        start_time:   UTC timestamp when the run started.
        end_time:     UTC timestamp when the run finished.
        metadata:     Arbitrary extra data (discoveries, source, ...).
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    bssid: str
    candidates: list[PinCandidate] = Field(default_factory=list)
    total_weight: float = 0.0
    observations: int = 0
    truncated: bool = False
    start_time: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    end_time: Optional[datetime] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def best(self) -> PinCandidate | None:
        """Highest-ranked candidate, or ``None`` when nothing was found."""
        return self.candidates[0] if self.candidates else None

    @property
    def confidence_mass(self) -> float:
        """Sum of confidences over ranked (non-exact) candidates."""
        return sum(c.confidence for c in self.candidates if not c.is_exact_match)

    def values(self) -> list[str]:
        return [c.value for c in self.candidates]

    def filtered(self, *, top: int = 0, min_confidence: float = 0.0) -> list[PinCandidate]:
        """Candidates passing a display filter.

        Exact matches are always kept.  ``top == 0`` means no limit.
        """
        kept = [
            c for c in self.candidates
            if c.is_exact_match or c.confidence >= min_confidence
        ]
        return kept[:top] if top > 0 else kept

    def finalize(self) -> PredictionResult:
        self.end_time = datetime.now(timezone.utc)
        return self
