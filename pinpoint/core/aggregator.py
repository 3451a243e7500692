"""
PinPoint Aggregator
====================

Turns a finished :class:`~pinpoint.core.scoring.ScanState` into the
ranked candidate list.

PINs that nothing explained but that were observed at the target BSSID
itself are reported first, with full confidence, provided there are at
most three of them.  Every other unexplained observation only dilutes
the confidence of the ranked generators.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared.logger import PinpointLogger
from shared.math_utils import distance_weights, normalize_scores

from pinpoint.core.codec import format_bssid, low24, pin_to_str
from pinpoint.core.models import UNKNOWN_NAME, PinCandidate
from pinpoint.core.scoring import ScanState

logger = PinpointLogger("core.aggregator")

MAX_EXACT_MATCHES = 3


@dataclass(slots=True)
class Ranking:
    """Aggregator output."""

    candidates: list[PinCandidate]
    total_weight: float


def aggregate(state: ScanState) -> Ranking:
    """Rank the candidates of a scan.

    The state is not modified.

    Args:
        state: Result of a scoring pass.

    Returns:
        A :class:`Ranking` whose candidates list exact matches first,
        then generators by descending score.  Generators with equal
        scores keep their creation order (catalog before discoveries).
    """
    target = format_bssid(state.target)
    target_low = low24(target)
    unresolved = dict(state.unresolved)
    total_weight = state.total_weight
    results: list[PinCandidate] = []

    exact = [pin for pin, bssid in unresolved.items() if bssid == target]
    if 0 < len(exact) <= MAX_EXACT_MATCHES:
        for pin in exact:
            results.append(
                PinCandidate(
                    name=UNKNOWN_NAME,
                    value=pin_to_str(pin),
                    confidence=1.0,
                    fromdb=True,
                )
            )
            del unresolved[pin]
    elif exact:
        logger.debug(
            "%d unexplained PINs at %s; not reporting them as exact matches",
            len(exact), target,
        )

    dilution = distance_weights([low24(b) for b in unresolved.values()], target_low)
    for w in dilution:
        total_weight += float(w)

    ranked = sorted(state.candidates, key=lambda c: c.score, reverse=True)
    scored = [c for c in ranked if c.score > 0]
    confidences = normalize_scores([c.score for c in scored], total_weight)

    for candidate, confidence in zip(scored, confidences):
        pin = candidate.generator.pin(target)
        results.append(
            PinCandidate(
                name=candidate.generator.name,
                value=pin_to_str(pin),
                confidence=float(confidence),
                fromdb=pin in state.from_db,
            )
        )

    return Ranking(candidates=results, total_weight=total_weight)
