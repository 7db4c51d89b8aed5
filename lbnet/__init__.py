"""
lbnet package initializer.

This package contains the discrete-event engine (event list, stations with
finite waiting rooms), probabilistic routing, the random variate source and
the run summary for a network of M parallel single-server stations fed by one
Poisson arrival stream.
"""
__all__ = [
    "variates", "policies", "queues", "network",
    "arrivals", "stations", "metrics", "simulation", "config",
]
