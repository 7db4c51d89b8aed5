# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# metrics.py
# -----------------------------------------------------------------------------
# Purpose:
#   Reduce per-station counters into run totals and averages: served,
#   dropped, average wait and average service time, plus a per-station
#   breakdown (utilization, queue high-water mark).
#
# Design notes:
#   - summary() only reads station state, so calling it twice on the same
#     stations gives the same dict.
#   - Averages are over served packets; dropped packets contribute nothing.
#     With zero served packets every average is 0.0.
#   - Summaries return JSON-serializable dicts for easy tabulation.
#
# Usage:
#   M = Metrics(stations); print(format_summary(M.summary(env.last_event_time)))
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Dict, List
from .queues import Station

SUMMARY_FIELDS = ("served_total", "dropped_total", "last_event_time", "avg_wait", "avg_service")


def _ratio(num: float, den: float) -> float:
    return num / den if den > 0 else 0.0


class Metrics:
    def __init__(self, stations: List[Station]):
        self.stations = stations

    def station_summary(self, st: Station, last_event_time: float) -> Dict:
        return {
            "served": st.served,
            "dropped": st.dropped,
            "avg_wait": _ratio(st.total_wait, st.served),
            "avg_service": _ratio(st.total_service, st.served),
            "utilization": _ratio(st.busy_time, last_event_time),
            "max_queue": st.max_queue,
        }

    def summary(self, last_event_time: float) -> Dict:
        served = 0
        dropped = 0
        total_wait = 0.0
        total_service = 0.0
        for st in self.stations:
            served += st.served
            dropped += st.dropped
            total_wait += st.total_wait
            total_service += st.total_service
        return {
            "served_total": served,
            "dropped_total": dropped,
            "last_event_time": last_event_time,
            "avg_wait": _ratio(total_wait, served),
            "avg_service": _ratio(total_service, served),
            "stations": [self.station_summary(st, last_event_time) for st in self.stations],
        }


def format_summary(summary: Dict) -> str:
    """One line: served dropped last_event_time avg_wait avg_service."""
    return (
        f"{summary['served_total']:d} {summary['dropped_total']:d} "
        f"{summary['last_event_time']:.4f} {summary['avg_wait']:.4f} {summary['avg_service']:.4f}"
    )


def format_station_table(summary: Dict) -> List[str]:
    lines = [f"{'station':>7} {'served':>8} {'dropped':>8} {'avg_wait':>10} {'avg_svc':>10} {'util':>7} {'max_q':>6}"]
    for i, st in enumerate(summary.get("stations", [])):
        lines.append(
            f"{i:>7} {st['served']:>8} {st['dropped']:>8} "
            f"{st['avg_wait']:>10.4f} {st['avg_service']:>10.4f} "
            f"{st['utilization'] * 100.0:>6.1f}% {st['max_queue']:>6}"
        )
    return lines
