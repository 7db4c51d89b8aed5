# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# variates.py
# -----------------------------------------------------------------------------
# Purpose:
#   Random variate source for one run: exponential inter-arrival and service
#   times plus the uniform draw used for routing.
#
# Design notes:
#   - Every draw comes from one private random.Random, so two streams never
#     share state and a replication is reproducible from its seed alone.
#   - seed=None seeds from the OS entropy pool (non-deterministic runs).
#   - Rates are validated upstream (lbnet.config); no checks here.
#
# Usage:
#   rs = RandomStream(seed=7)
#   gap = rs.exponential(2.0); r = rs.uniform()
# -----------------------------------------------------------------------------

from __future__ import annotations
import random
from typing import Optional


class RandomStream:
    """Single pseudo-random stream shared by arrivals, service and routing."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def exponential(self, rate: float) -> float:
        """Sample from Exp(rate), i.e. mean 1/rate."""
        return self._rng.expovariate(rate)

    def uniform(self) -> float:
        """Sample from U[0, 1)."""
        return self._rng.random()
