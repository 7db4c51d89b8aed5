# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# simulation.py
# -----------------------------------------------------------------------------
# Purpose:
#   Simulate a single replication: build stations, router and arrival
#   stream, seed the first arrival, drain the event list, and summarize.
#
# Design notes:
#   - Each Simulation owns its RandomStream, stations and Env; nothing is
#     shared between replications.
#   - cfg must already have passed lbnet.config.validate_cfg.
#   - A stream object can be injected (anything with exponential(rate) and
#     uniform()); otherwise one is built from cfg["sim"]["seed"].
#
# Usage:
#   from lbnet.simulation import run_simulation
#   results = run_simulation(cfg)
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Dict, Optional
from .queues import Env
from .stations import make_stations
from .network import Router
from .metrics import Metrics
from .arrivals import PoissonArrivals
from .variates import RandomStream

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(self, cfg: Dict, stream=None):
        self.cfg = cfg
        self.horizon = cfg["sim"]["horizon"]
        if stream is None:
            stream = RandomStream(cfg["sim"].get("seed"))
        self.stream = stream
        self.stations = make_stations(cfg)
        self.router = Router(cfg["routing"], self.stations)
        self.arrivals = PoissonArrivals(cfg["arrival_rate"])
        self.env = Env(self.stream, self.horizon, self.router, self.arrivals, self.stations)
        self.metrics = Metrics(self.stations)

    def run(self, observer=None) -> Dict:
        logger.info(
            "run start: horizon=%s M=%d lambda=%s seed=%s",
            self.horizon, len(self.stations), self.arrivals.rate, getattr(self.stream, "seed", None),
        )
        self.arrivals.schedule_next(self.env)
        self.env.run(observer)
        res = self.summary()
        logger.info(
            "run done: arrivals=%d served=%d dropped=%d last_event=%.4f",
            self.arrivals.generated, res["served_total"], res["dropped_total"], res["last_event_time"],
        )
        return res

    def summary(self) -> Dict:
        return self.metrics.summary(self.env.last_event_time)


def run_simulation(cfg: Dict, seed: Optional[int] = None) -> Dict:
    """Run one replication; seed, if given, overrides cfg["sim"]["seed"]."""
    stream = RandomStream(seed) if seed is not None else None
    return Simulation(cfg, stream=stream).run()
