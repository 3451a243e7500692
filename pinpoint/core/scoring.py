"""
PinPoint Scoring Engine
========================

Consumes the neighbor stream of a target BSSID once and attributes every
observed (BSSID, PIN) pair to an explanation:

    1. Sentinel PIN ``1``: counted as weight, credited to nobody.
    2. Known generators: every generator reproducing the PIN, catalog
       and discovered alike, is credited with the row's weight.
    3. Discovery: a PIN seen at two neighbors becomes a ``Static``
       generator; three unexplained PINs lying on one line become a
       ``Linear`` generator.
    4. Anything else waits in the unresolved bucket.

Each row's weight decays with its distance from the target in the low
24 bits of the BSSID.  ``total_weight`` sums every weight attributed to
any explanation; a row matched by several generators counts once per
match.

References:
    - Shepard, D. (1968). Inverse distance weighting.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Optional

from shared.logger import PinpointLogger
from shared.math_utils import distance_weight

from pinpoint.core.checksum import is_valid_pin
from pinpoint.core.codec import bssid_to_int, format_bssid, low24
from pinpoint.generators.catalog import (
    PinGenerator,
    build_catalog,
    linear_generator,
    static_generator,
)

logger = PinpointLogger("core.scoring")

SENTINEL_PIN = 1
MIN_PATTERN_ENTRIES = 2
MAX_PATTERN_ENTRIES = 10


@dataclass(slots=True)
class Candidate:
    """A generator and the weight accumulated in its favour."""

    generator: PinGenerator
    score: float = 0.0
    discovered: bool = False


@dataclass(slots=True)
class ScanState:
    """Everything one scoring pass accumulates.

    Attributes:
        target:       Canonical target BSSID.
        candidates:   Catalog candidates followed by discovered ones, in
                      creation order.
        unresolved:   PIN -> most recent unexplained BSSID with that PIN,
                      in insertion order.
        total_weight: Normalisation denominator accumulated so far.
        from_db:      PINs observed at the target BSSID itself.
        observations: Rows consumed.
        truncated:    Whether the stream was abandoned at a deadline.
    """

    target: str
    candidates: list[Candidate]
    unresolved: dict[int, str] = field(default_factory=dict)
    total_weight: float = 0.0
    from_db: set[int] = field(default_factory=set)
    observations: int = 0
    truncated: bool = False

    @property
    def discoveries(self) -> list[Candidate]:
        return [c for c in self.candidates if c.discovered]


# ---------------------------------------------------------------------------
# Linear pattern search
# ---------------------------------------------------------------------------


def _slope(dx: int, dy: int) -> Optional[Fraction]:
    if dy == 0:
        return None
    return Fraction(dx, dy)


def find_linear_relation(
    unresolved: dict[int, str],
    bssid: str,
    pin: int,
    use_checksum: bool,
) -> Optional[tuple[int, int, Fraction]]:
    """Find the first unresolved pair lying on one line with a new row.

    Pairs ``(i, j)`` with ``i < j`` are tried in bucket insertion order.
    For a pair, the slope ``k`` is the ratio of their low-24 BSSID
    difference to their PIN difference.  The pair matches when the new
    row's slope against ``i`` equals ``k`` exactly.

    With *use_checksum* the PINs are compared without their check
    digits and only pairs whose PINs carry valid checksums qualify;
    the caller must only ask for this when *pin* itself is valid.

    Returns:
        ``(pin_i, pin_j, k)`` for the first matching pair, else ``None``.
    """
    entries = list(unresolved.items())
    value = pin // 10 if use_checksum else pin
    x = low24(bssid)

    for i in range(len(entries) - 1):
        pin_i, bss_i = entries[i]
        if use_checksum and not is_valid_pin(pin_i):
            continue
        value_i = pin_i // 10 if use_checksum else pin_i
        x_i = low24(bss_i)
        for j in range(i + 1, len(entries)):
            pin_j, bss_j = entries[j]
            if use_checksum and not is_valid_pin(pin_j):
                continue
            value_j = pin_j // 10 if use_checksum else pin_j
            k = _slope(x_i - low24(bss_j), value_i - value_j)
            if not k:
                continue
            if k == _slope(x - x_i, value - value_i):
                return pin_i, pin_j, k
    return None


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class ScoringEngine:
    """Single-pass scorer for one target BSSID.

    One instance serves one prediction; it owns its catalog copy and
    unresolved bucket, so concurrent predictions need no locking.

    Usage::

        scorer = ScoringEngine("00:11:22:33:44:55")
        state = scorer.consume(provider.neighbors(scorer.target))
    """

    def __init__(self, target: str) -> None:
        self._target = format_bssid(target)
        self._target_low = low24(self._target)
        self._state = ScanState(
            target=self._target,
            candidates=[Candidate(g) for g in build_catalog()],
        )

    @property
    def target(self) -> str:
        return self._target

    @property
    def state(self) -> ScanState:
        return self._state

    def weight(self, bssid: str) -> float:
        """Distance weight of an observed BSSID relative to the target."""
        return distance_weight(low24(bssid), self._target_low)

    # ------------------------------------------------------------------ #
    #  Stream consumption
    # ------------------------------------------------------------------ #

    def consume(
        self,
        rows: Iterable[tuple[str, int]],
        deadline: Optional[float] = None,
    ) -> ScanState:
        """Score every row of a neighbor stream.

        Args:
            rows:     ``(bssid, pin)`` pairs ordered by distance.
            deadline: Optional :func:`time.monotonic` instant after which
                      the rest of the stream is abandoned.

        Returns:
            The accumulated :class:`ScanState`.
        """
        with logger.operation("scan"):
            for bssid, pin in rows:
                if deadline is not None and time.monotonic() >= deadline:
                    self._state.truncated = True
                    logger.warning(
                        "Deadline reached after %d row(s); ranking partial data",
                        self._state.observations,
                    )
                    break
                self.observe(bssid, pin)

            logger.info(
                "Scored %d row(s) for %s: %d discovered, %d unresolved",
                self._state.observations,
                self._target,
                len(self._state.discoveries),
                len(self._state.unresolved),
            )
        return self._state

    def observe(self, bssid: str, pin: int) -> None:
        """Attribute one observation."""
        state = self._state
        bssid = format_bssid(bssid)
        pin = int(pin)
        state.observations += 1

        if bssid == self._target:
            state.from_db.add(pin)

        w = self.weight(bssid)
        if pin == SENTINEL_PIN:
            state.total_weight += w
            return

        correct = is_valid_pin(pin)
        if self._credit_known(bssid, pin, correct, w):
            return

        if pin in state.unresolved:
            self._discover_static(bssid, pin, correct, w)
        elif not (
            MIN_PATTERN_ENTRIES <= len(state.unresolved) <= MAX_PATTERN_ENTRIES
            and self._discover_linear(bssid, pin, correct)
        ):
            state.unresolved[pin] = bssid

    # ------------------------------------------------------------------ #
    #  Attribution steps
    # ------------------------------------------------------------------ #

    def _credit_known(self, bssid: str, pin: int, correct: bool, w: float) -> bool:
        matched = False
        for candidate in self._state.candidates:
            generator = candidate.generator
            if generator.pin(bssid) != pin:
                continue
            if generator.checksum and not correct:
                continue
            candidate.score += w
            self._state.total_weight += w
            matched = True
        return matched

    def _discover_static(self, bssid: str, pin: int, correct: bool, w: float) -> None:
        state = self._state
        previous = state.unresolved.pop(pin)
        score = self.weight(previous) + w
        state.total_weight += score
        generator = static_generator(pin // 10 if correct else pin, correct)
        state.candidates.append(Candidate(generator, score, discovered=True))
        logger.debug(
            "Discovered static PIN %08d at %s and %s", pin, previous, bssid
        )

    def _discover_linear(self, bssid: str, pin: int, correct: bool) -> bool:
        state = self._state
        relation = None
        use_checksum = False
        if correct:
            relation = find_linear_relation(state.unresolved, bssid, pin, True)
            use_checksum = relation is not None
        if relation is None:
            relation = find_linear_relation(state.unresolved, bssid, pin, False)
        if relation is None:
            return False

        pin_i, pin_j, k = relation
        value = pin // 10 if use_checksum else pin
        x0 = bssid_to_int(bssid) - value * k
        score = (
            self.weight(bssid)
            + self.weight(state.unresolved[pin_i])
            + self.weight(state.unresolved[pin_j])
        )
        state.total_weight += score
        generator = linear_generator(k, x0, use_checksum)
        state.candidates.append(Candidate(generator, score, discovered=True))
        del state.unresolved[pin_i]
        del state.unresolved[pin_j]
        logger.debug(
            "Discovered linear sequence k=%s x0=%s from PINs %08d, %08d, %08d",
            k, x0, pin, pin_i, pin_j,
        )
        return True
