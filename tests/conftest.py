import pytest


class ScriptedStream:
    """Stand-in for RandomStream that replays fixed draws in call order."""

    def __init__(self, exps, uniforms=()):
        self.exps = list(exps)
        self.uniforms = list(uniforms)
        self.rates = []

    def exponential(self, rate):
        self.rates.append(rate)
        return self.exps.pop(0)

    def uniform(self):
        return self.uniforms.pop(0) if self.uniforms else 0.0


def build_cfg(horizon=100.0, probs=(1.0,), lam=1.0, caps=(5,), mus=(2.0,), seed=0):
    return {
        "sim": {"horizon": float(horizon), "seed": seed},
        "arrival_rate": float(lam),
        "routing": [float(p) for p in probs],
        "capacities": list(caps),
        "service_rates": [float(m) for m in mus],
    }


@pytest.fixture
def make_cfg():
    return build_cfg


@pytest.fixture
def scripted():
    return ScriptedStream
