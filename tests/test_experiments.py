import os

from experiments.run_experiments import main, run_scenario
from experiments.scenarios import SCENARIOS
from lbnet.config import load_cfg

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_scenarios_have_unique_names():
    names = [sc["name"] for sc in SCENARIOS]
    assert len(names) == len(set(names))


def test_run_scenario_advances_seed_per_replication():
    cfg = load_cfg(os.path.join(ROOT, "config", "baseline.yaml"))
    short = {"name": "short", "overrides": {"sim": {"horizon": 50.0, "seed": 10}}}
    runs = run_scenario(cfg, short, 3)
    assert [seed for seed, _ in runs] == [10, 11, 12]
    assert runs[0][1] != runs[1][1]


def test_main_prints_every_scenario(capsys, monkeypatch):
    import experiments.run_experiments as rx

    monkeypatch.setattr(
        rx, "SCENARIOS",
        [{"name": "tiny", "overrides": {"sim": {"horizon": 20.0}}},
         {"name": "broken", "overrides": {"capacities": [1]}}],
    )
    main()
    out = capsys.readouterr().out
    assert "Scenario: tiny" in out
    assert "[warn] skipping scenario broken" in out
