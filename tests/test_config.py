import logging
import os

import pytest

from lbnet.config import ConfigError, apply_overrides, cfg_from_args, load_cfg, validate_cfg

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_cfg_from_args_two_servers():
    cfg = validate_cfg(cfg_from_args(["100", "2", "0.3", "0.7", "1.5", "4", "0", "2.0", "1.0"]))
    assert cfg["sim"] == {"horizon": 100.0, "seed": None}
    assert cfg["arrival_rate"] == 1.5
    assert cfg["routing"] == [0.3, 0.7]
    assert cfg["capacities"] == [4, 0]
    assert cfg["service_rates"] == [2.0, 1.0]


@pytest.mark.parametrize(
    "values",
    [
        [],
        ["10", "1", "1.0", "2.0", "3"],
        ["10", "1", "1.0", "2.0", "3", "1.0", "9"],
        ["10", "2", "0.5", "0.5", "1.0", "1", "1", "1.0"],
        ["10", "x", "1.0", "2.0", "3", "1.0"],
        ["10", "0", "1.0", "2.0", "3", "1.0"],
    ],
)
def test_cfg_from_args_rejects_bad_counts(values):
    with pytest.raises(ConfigError):
        cfg_from_args(values)


@pytest.mark.parametrize(
    "values",
    [
        ["ten", "1", "1.0", "2.0", "3", "1.0"],
        ["10", "1", "1.0", "fast", "3", "1.0"],
        ["10", "1", "1.0", "2.0", "3.5", "1.0"],
        ["10", "1", "1.0", "2.0", "-1", "1.0"],
        ["10", "1", "1.0", "2.0", "3", "0"],
        ["10", "1", "1.0", "-2.0", "3", "1.0"],
        ["-1", "1", "1.0", "2.0", "3", "1.0"],
        ["inf", "1", "1.0", "2.0", "3", "1.0"],
        ["10", "1", "nan", "2.0", "3", "1.0"],
    ],
)
def test_validate_rejects_bad_values(values):
    with pytest.raises(ConfigError):
        validate_cfg(cfg_from_args(values))


def test_probabilities_off_by_drift_are_accepted_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="lbnet.config"):
        cfg = validate_cfg(cfg_from_args(["10", "2", "0.3", "0.6", "1.0", "1", "1", "1.0", "1.0"]))
    assert cfg["routing"] == [0.3, 0.6]
    assert "sum to 0.9" in caplog.text


def test_exact_probabilities_do_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="lbnet.config"):
        validate_cfg(cfg_from_args(["10", "2", "0.3", "0.7", "1.0", "1", "1", "1.0", "1.0"]))
    assert caplog.text == ""


def test_validate_reports_length_mismatch():
    cfg = {"sim": {"horizon": 5}, "arrival_rate": 1, "routing": [1.0], "capacities": [1, 2], "service_rates": [1.0]}
    with pytest.raises(ConfigError, match="length mismatch"):
        validate_cfg(cfg)


def test_validate_reports_missing_keys():
    with pytest.raises(ConfigError, match="sim.horizon"):
        validate_cfg({"arrival_rate": 1.0})
    with pytest.raises(ConfigError, match="arrival_rate"):
        validate_cfg({"sim": {"horizon": 1.0}})
    with pytest.raises(ConfigError, match="routing"):
        validate_cfg({"sim": {"horizon": 1.0}, "arrival_rate": 1.0})


def test_validate_does_not_mutate_input():
    raw = cfg_from_args(["10", "1", "1.0", "2.0", "3", "1.0"])
    validate_cfg(raw)
    assert raw["capacities"] == ["3"]


def test_load_baseline_yaml():
    cfg = validate_cfg(load_cfg(os.path.join(ROOT, "config", "baseline.yaml")))
    assert len(cfg["routing"]) == len(cfg["capacities"]) == len(cfg["service_rates"])
    assert cfg["sim"]["seed"] == 1


def test_load_cfg_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_cfg(str(tmp_path / "missing.yaml"))
    bad = tmp_path / "bad.yaml"
    bad.write_text("sim: [unclosed\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_cfg(str(bad))
    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("42\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_cfg(str(scalar))


def test_apply_overrides_merges_nested_and_replaces_lists():
    base = {"sim": {"horizon": 10.0, "seed": 1}, "routing": [0.5, 0.5]}
    new = apply_overrides(base, {"sim": {"horizon": 20.0}, "routing": [1.0]})
    assert new == {"sim": {"horizon": 20.0, "seed": 1}, "routing": [1.0]}
    assert base["sim"]["horizon"] == 10.0


def test_negative_probability_is_accepted_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="lbnet.config"):
        cfg = validate_cfg(cfg_from_args(["10", "2", "-0.1", "1.1", "1.0", "1", "1", "1.0", "1.0"]))
    assert cfg["routing"] == [-0.1, 1.1]
    assert "routing[0] is negative" in caplog.text


@pytest.mark.parametrize("sim", [None, 5, [1.0]])
def test_validate_rejects_non_mapping_sim(sim):
    cfg = {"sim": sim, "arrival_rate": 1.0, "routing": [1.0], "capacities": [1], "service_rates": [1.0]}
    with pytest.raises(ConfigError, match="sim: expected a mapping"):
        validate_cfg(cfg)
