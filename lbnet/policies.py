# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# policies.py
# -----------------------------------------------------------------------------
# Purpose:
#   Routing policy: map a uniform draw onto a station index through the
#   cumulative routing probabilities.
#
# Design notes:
#   - Keep pure functions to ease testing (draw -> decision).
#   - Probabilities are not required to sum to exactly 1. If rounding leaves
#     the draw above the last cumulative value we fall back to the last index.
#
# Usage:
#   from lbnet.policies import select_station
#   idx = select_station(rs.uniform(), [0.3, 0.7])
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Sequence


def select_station(r: float, probs: Sequence[float]) -> int:
    """
    Return the smallest index i with sum(probs[0..i]) >= r.

    Parameters
    ----------
    r : float
        Uniform draw, normally in [0, 1).
    probs : sequence of float
        Routing probabilities P_0..P_{M-1}; must be non-empty.

    Returns
    -------
    int
        Station index; len(probs) - 1 when no prefix sum reaches r.
    """
    cumulative = 0.0
    for i, p in enumerate(probs):
        cumulative += p
        if r <= cumulative:
            return i
    return len(probs) - 1
