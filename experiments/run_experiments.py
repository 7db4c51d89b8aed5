"""
experiments/run_experiments.py

Experiment harness that loads the baseline config, applies scenario overrides,
runs a few sequential replications per scenario (one seed each), and reports
the summary line per seed plus the plain mean across seeds.
"""

from __future__ import annotations
import copy, os, sys
from typing import Callable, Dict, List
from statistics import mean
try:
    # When executed as a module: python -m experiments.run_experiments
    from .scenarios import SCENARIOS  # type: ignore
except Exception:  # pragma: no cover
    # When run as a script in VSCode/terminal
    ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if ROOT not in sys.path:
        sys.path.insert(0, ROOT)
    from experiments.scenarios import SCENARIOS  # type: ignore

from lbnet.config import ConfigError, apply_overrides, load_cfg, validate_cfg
from lbnet.metrics import format_summary
from lbnet.simulation import run_simulation

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def series(results: List[Dict], extractor: Callable[[Dict], float]) -> List[float]:
    """Collect a numeric series from each replication result."""
    return [float(extractor(res)) for res in results]


def run_scenario(cfg: Dict, scenario: Dict, replications: int) -> List[tuple]:
    """Run `replications` independent runs of one scenario; returns (seed, summary) pairs."""
    sc_cfg = validate_cfg(apply_overrides(cfg, scenario["overrides"]))
    base_seed = sc_cfg["sim"].get("seed") or 0
    out = []
    for rep in range(replications):
        run_cfg = copy.deepcopy(sc_cfg)
        # Advance the seed per replication so replications remain iid
        run_cfg["sim"]["seed"] = base_seed + rep
        out.append((run_cfg["sim"]["seed"], run_simulation(run_cfg)))
    return out


def main():
    """Entry point: drive all scenarios and replications, print KPIs."""
    cfg = load_cfg(os.path.join(ROOT, "config", "baseline.yaml"))
    exp_cfg = cfg.get("experiments", {})
    replications = max(1, int(exp_cfg.get("replications", 1)))

    for sc in SCENARIOS:
        try:
            runs = run_scenario(cfg, sc, replications)
        except ConfigError as e:
            print(f"[warn] skipping scenario {sc['name']}: {e}")
            continue
        results = [res for _, res in runs]
        print(f"Scenario: {sc['name']} (replications={replications})")
        print("  seed | served dropped last_event avg_wait avg_service")
        for seed, res in runs:
            print(f"  {seed:4d} | {format_summary(res)}")
        served = mean(series(results, lambda r: r["served_total"]))
        dropped = mean(series(results, lambda r: r["dropped_total"]))
        wait = mean(series(results, lambda r: r["avg_wait"]))
        svc = mean(series(results, lambda r: r["avg_service"]))
        offered = served + dropped
        print(f"  Mean served: {served:.1f}  dropped: {dropped:.1f} ({dropped / offered * 100.0 if offered else 0.0:.2f}%)")
        print(f"  Mean wait: {wait:.4f}  service: {svc:.4f}")
        util = [
            round(mean(r["stations"][i]["utilization"] for r in results) * 100.0, 1)
            for i in range(len(results[0]["stations"]))
        ]
        print(f"  Station utilization (mean % busy): {util}")
        print("-")


if __name__ == "__main__":
    main()
