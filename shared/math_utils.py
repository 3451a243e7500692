"""
PinPoint Mathematical Utilities
================================

Numeric helpers shared by the scoring engine, the aggregator and the
report generator: distance weighting, score normalisation and an entropy
measure for how concentrated a ranking is.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
    [2] Shepard, D. (1968). A two-dimensional interpolation function for
        irregularly-spaced data. Proceedings of the 1968 ACM National
        Conference, 517-524.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


FloatArray = NDArray[np.floating]


# ========================== Distance Weighting =============================


def distance_weight(observed: int, target: int) -> float:
    """Inverse square-root distance weight of one observation.

    .. math::

        w = \\frac{1}{\\sqrt{|o - t| + 1}}

    The weight is 1.0 at zero distance, strictly decreasing in
    ``|o - t|`` and never reaches zero.  It is symmetric in its two
    arguments.

    Reference:
        Shepard, D. (1968). Inverse distance weighting.

    Args:
        observed: Variable part (low 24 bits) of the observed BSSID.
        target:   Variable part (low 24 bits) of the target BSSID.

    Returns:
        Weight in (0, 1].
    """
    return 1.0 / math.sqrt(abs(observed - target) + 1)


def distance_weights(observed: Sequence[int], target: int) -> FloatArray:
    """Vectorised :func:`distance_weight` over many observations.

    Produces the same IEEE-754 values as the scalar form, element by
    element.

    Args:
        observed: Variable parts of the observed BSSIDs.
        target:   Variable part of the target BSSID.

    Returns:
        Array of weights, one per observation.
    """
    arr = np.asarray(observed, dtype=np.int64)
    if arr.size == 0:
        return np.zeros(0, dtype=np.float64)
    return 1.0 / np.sqrt(np.abs(arr - np.int64(target)).astype(np.float64) + 1.0)


# ========================== Normalisation ==================================


def normalize_scores(scores: Sequence[float], total: float) -> FloatArray:
    """Divide accumulated scores by a normalisation denominator.

    The denominator is supplied by the caller rather than derived from
    ``sum(scores)`` because it may include mass that no score received.

    Args:
        scores: Raw accumulated scores.
        total:  Normalisation denominator.

    Returns:
        Array of normalised scores.  All zeros when *total* is not
        positive.
    """
    arr = np.asarray(scores, dtype=np.float64)
    if total <= 0.0:
        return np.zeros_like(arr)
    return arr / total


# ========================== Entropy ========================================


def ranking_entropy(probabilities: Sequence[float]) -> float:
    """Shannon entropy (bits) of a set of confidences.

    The input is renormalised to sum to one first, so this measures how
    concentrated the ranking is regardless of diluted mass.  A single
    candidate gives 0.0; *n* equally likely candidates give ``log2(n)``.

    Reference:
        Shannon, C. E. (1948). A Mathematical Theory of Communication.

    Args:
        probabilities: Non-negative confidence values.

    Returns:
        Entropy in bits. 0.0 for empty or all-zero input.
    """
    arr = np.asarray(probabilities, dtype=np.float64)
    arr = arr[arr > 0.0]
    if arr.size == 0:
        return 0.0
    p = arr / arr.sum()
    return float(-np.sum(p * np.log2(p)))
