# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# arrivals.py
# -----------------------------------------------------------------------------
# Purpose:
#   Exogenous Poisson arrival stream with rate lambda.
#
# Design notes:
#   - Arrivals are generated one at a time: each fired arrival schedules its
#     successor at t + Exp(lambda), so the stream does not depend on routing.
#   - A successor later than the horizon is never scheduled; this is what
#     lets the run terminate.
#   - lambda = 0 means no arrivals at all (empty run, all-zero summary).
#
# Usage:
#   arrivals = PoissonArrivals(rate)
#   arrivals.schedule_next(env)
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from .queues import ARRIVAL


class PoissonArrivals:
    def __init__(self, rate: float):
        self.rate = rate
        self.generated: int = 0   # arrivals placed on the FEL so far

    def draw_gap(self, env) -> float:
        if self.rate <= 0:
            return math.inf
        return env.stream.exponential(self.rate)

    def schedule_next(self, env) -> bool:
        """Schedule the next arrival after env.t if it falls within the horizon."""
        t_next = env.t + self.draw_gap(env)
        if t_next > env.horizon:
            return False
        env.schedule(t_next, ARRIVAL)
        self.generated += 1
        return True
