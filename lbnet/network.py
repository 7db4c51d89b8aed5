# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# network.py
# -----------------------------------------------------------------------------
# Purpose:
#   Router for the parallel-station network. Every arrival is sent to one
#   station chosen by the routing probabilities; the station admits, queues
#   or drops it.
#
# Design notes:
#   - One uniform draw per arrival, resolved by policies.select_station.
#   - No overflow: a packet dropped at its station is lost, it is never
#     retried elsewhere.
#
# Usage:
#   router = Router(cfg["routing"], stations)
#   env = Env(stream, horizon, router, arrivals, stations)
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import List, Sequence
from .queues import Station
from . import policies

logger = logging.getLogger(__name__)


class Router:
    def __init__(self, probs: Sequence[float], stations: List[Station]):
        self.probs = list(probs)
        self.S = stations

    def route(self, env) -> int:
        return policies.select_station(env.stream.uniform(), self.probs)

    def on_arrival(self, env) -> bool:
        sid = self.route(env)
        server = self.S[sid]
        ok = server.enqueue(env)
        if not ok:
            logger.debug("t=%.4f drop at %s (queue %d/%d)", env.t, server.name, len(server.queue), server.K)
        return ok
