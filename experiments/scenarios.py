"""
experiments/scenarios.py

Holds scenario definitions (overrides on config/baseline.yaml) to sweep
during experiments. Add routing splits, buffer sizes and rates here.
"""

from __future__ import annotations

BASELINE = {
    "name": "baseline",
    "overrides": {},  # override config keys here per scenario
}

BALANCED_ROUTING = {
    "name": "balanced_routing",
    "overrides": {
        # P_i proportional to mu_i, so every station sees rho = lambda / sum(mu)
        "routing": [0.475, 0.285, 0.24],
    },
}

SATURATED_LARGE_BUFFER = {
    "name": "saturated_large_buffer",
    "overrides": {
        "sim": {"horizon": 2000.0},
        "arrival_rate": 5.0,
        "routing": [1.0],
        "capacities": [100000],
        "service_rates": [1.0],
    },
}

SATURATED_NO_BUFFER = {
    "name": "saturated_no_buffer",
    "overrides": {
        "sim": {"horizon": 2000.0},
        "arrival_rate": 5.0,
        "routing": [1.0],
        "capacities": [0],
        "service_rates": [1.0],
    },
}

ROUTING_DRIFT = {
    "name": "routing_drift",
    "overrides": {
        # Sums to slightly less than 1; the remainder lands on the last station
        "routing": [0.3333333, 0.3333333, 0.3333333],
    },
}

SCENARIOS = [BASELINE, BALANCED_ROUTING, SATURATED_LARGE_BUFFER, SATURATED_NO_BUFFER, ROUTING_DRIFT]
