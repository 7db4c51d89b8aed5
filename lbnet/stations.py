# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# stations.py
# -----------------------------------------------------------------------------
# Purpose:
#   Build the station list (one Station per configured server) from config.
#
# Design notes:
#   - Stations are addressed by list index only; the router, the event list
#     and the metrics all use the same index.
#
# Usage:
#   from lbnet.stations import make_stations
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import List
from .queues import Station


def make_stations(cfg: dict) -> List[Station]:
    """
    Create all stations from a validated config.

    Parameters
    ----------
    cfg : dict
        Config with equal-length 'capacities' and 'service_rates' lists.

    Returns
    -------
    list[Station]
        Station i has capacity capacities[i] and rate service_rates[i].
    """
    caps = cfg["capacities"]
    rates = cfg["service_rates"]
    return [Station(i, K=int(k), service_rate=float(mu)) for i, (k, mu) in enumerate(zip(caps, rates))]
