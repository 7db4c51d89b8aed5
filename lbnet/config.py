# Copyright (c) 2025
# MIT License
# -----------------------------------------------------------------------------
# config.py
# -----------------------------------------------------------------------------
# Purpose:
#   Load, merge and validate run configurations. A config is a plain dict:
#
#     sim:            {horizon: float, seed: int | None}
#     arrival_rate:   float                 # lambda
#     routing:        [P_0, ..., P_{M-1}]
#     capacities:     [Q_0, ..., Q_{M-1}]   # waiting-room sizes
#     service_rates:  [mu_0, ..., mu_{M-1}]
#
# Design notes:
#   - Configs come from YAML (load_cfg) or from the 3 + 3M positional CLI
#     values (cfg_from_args); both go through validate_cfg before a
#     Simulation is built.
#   - Routing probabilities are not required to sum to 1; a sum that is off
#     is logged and left alone (the router falls back to the last station).
#
# Usage:
#   cfg = validate_cfg(load_cfg("config/baseline.yaml"))
#   cfg = validate_cfg(cfg_from_args(sys.argv[1:]))
# -----------------------------------------------------------------------------

from __future__ import annotations
import copy, logging, math
from typing import Dict, List, Sequence
import yaml

logger = logging.getLogger(__name__)

USAGE = "<Time> <M> <P1..PM> <Lambda> <Q1..QM> <Mu1..MuM>"
PROB_SUM_TOLERANCE = 1e-9


class ConfigError(ValueError):
    """Malformed or insufficient simulation parameters."""


def load_cfg(path: str) -> Dict:
    try:
        with open(path, "r") as f:
            cfg = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"{path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    return cfg


def apply_overrides(cfg: Dict, overrides: Dict) -> Dict:
    """Apply scenario overrides (recursive merge) on top of the base config."""
    new = copy.deepcopy(cfg)

    def _merge(dst: Dict, src: Dict):
        for key, val in src.items():
            if isinstance(val, dict) and isinstance(dst.get(key), dict):
                _merge(dst[key], val)
            else:
                dst[key] = copy.deepcopy(val)

    _merge(new, overrides)
    return new


def _float(raw, what: str) -> float:
    try:
        val = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{what}: not a number: {raw!r}") from None
    if not math.isfinite(val):
        raise ConfigError(f"{what}: must be finite, got {raw!r}")
    return val


def _int(raw, what: str) -> int:
    if isinstance(raw, bool):
        raise ConfigError(f"{what}: not an integer: {raw!r}")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ConfigError(f"{what}: not an integer: {raw!r}")
        return int(raw)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{what}: not an integer: {raw!r}") from None


def cfg_from_args(values: Sequence[str]) -> Dict:
    """
    Build a config from positional values laid out as
    Time M P_1..P_M Lambda Q_1..Q_M Mu_1..Mu_M (3 + 3M values, 4 + 3M
    argv entries counting the program name).

    Raises
    ------
    ConfigError
        Wrong number of values or an unparseable M.
    """
    values = list(values)
    if len(values) < 6:
        raise ConfigError(f"expected at least 6 values, got {len(values)}")
    M = _int(values[1], "M")
    if M < 1:
        raise ConfigError(f"M: need at least one server, got {M}")
    if len(values) != 3 + 3 * M:
        raise ConfigError(f"expected {3 + 3 * M} values for M={M}, got {len(values)}")
    idx = 2
    probs = values[idx:idx + M]; idx += M
    lam = values[idx]; idx += 1
    caps = values[idx:idx + M]; idx += M
    mus = values[idx:idx + M]
    return {
        "sim": {"horizon": values[0], "seed": None},
        "arrival_rate": lam,
        "routing": probs,
        "capacities": caps,
        "service_rates": mus,
    }


def _list(cfg: Dict, key: str) -> List:
    val = cfg.get(key)
    if not isinstance(val, (list, tuple)):
        raise ConfigError(f"{key}: expected a list, got {val!r}")
    return list(val)


def validate_cfg(cfg: Dict) -> Dict:
    """
    Return a normalised copy of cfg with numeric types checked.

    Raises ConfigError on missing keys, list-length mismatches, non-numeric
    or non-finite values, a negative horizon or arrival rate, negative or
    fractional capacities and non-positive service rates. Routing
    probabilities are only checked for being finite numbers.
    """
    sim = cfg.get("sim", {})
    if not isinstance(sim, dict):
        raise ConfigError(f"sim: expected a mapping, got {sim!r}")
    if "horizon" not in sim:
        raise ConfigError("sim.horizon: missing")
    horizon = _float(sim["horizon"], "sim.horizon")
    if horizon < 0:
        raise ConfigError(f"sim.horizon: must be >= 0, got {horizon}")
    seed = sim.get("seed")
    if seed is not None:
        seed = _int(seed, "sim.seed")

    if "arrival_rate" not in cfg:
        raise ConfigError("arrival_rate: missing")
    lam = _float(cfg["arrival_rate"], "arrival_rate")
    if lam < 0:
        raise ConfigError(f"arrival_rate: must be >= 0, got {lam}")

    probs = [_float(p, f"routing[{i}]") for i, p in enumerate(_list(cfg, "routing"))]
    caps = [_int(q, f"capacities[{i}]") for i, q in enumerate(_list(cfg, "capacities"))]
    mus = [_float(m, f"service_rates[{i}]") for i, m in enumerate(_list(cfg, "service_rates"))]
    M = len(probs)
    if M < 1:
        raise ConfigError("routing: need at least one server")
    if len(caps) != M or len(mus) != M:
        raise ConfigError(
            f"length mismatch: {M} routing, {len(caps)} capacities, {len(mus)} service_rates"
        )
    for i, p in enumerate(probs):
        if p < 0:
            logger.warning("routing[%d] is negative (%s); it shrinks the cumulative sum", i, p)
    for i, q in enumerate(caps):
        if q < 0:
            raise ConfigError(f"capacities[{i}]: must be >= 0, got {q}")
    for i, mu in enumerate(mus):
        if mu <= 0:
            raise ConfigError(f"service_rates[{i}]: must be > 0, got {mu}")

    total = sum(probs)
    if abs(total - 1.0) > PROB_SUM_TOLERANCE:
        logger.warning("routing probabilities sum to %.6f, not 1; draws past the sum go to station %d", total, M - 1)

    new = copy.deepcopy(cfg)
    new["sim"] = dict(sim, horizon=horizon, seed=seed)
    new["arrival_rate"] = lam
    new["routing"] = probs
    new["capacities"] = caps
    new["service_rates"] = mus
    return new
