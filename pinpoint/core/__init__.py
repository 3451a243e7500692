"""
PinPoint Core
==============

Codec, checksum, scoring, aggregation and domain models for the PinPoint
predictor.  The orchestration engine lives in :mod:`pinpoint.core.engine`.
"""

from pinpoint.core.checksum import checksum, is_valid_pin, with_checksum
from pinpoint.core.codec import format_bssid, pin_to_str
from pinpoint.core.models import Observation, PinCandidate, PredictionResult

__all__ = [
    "checksum",
    "is_valid_pin",
    "with_checksum",
    "format_bssid",
    "pin_to_str",
    "Observation",
    "PinCandidate",
    "PredictionResult",
]
