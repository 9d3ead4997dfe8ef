"""
Tests for the rejection samplers (Gamma and Beta).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy import stats

from pysatl_variates.config import SamplingConfig, set_config
from pysatl_variates.errors import InvalidParameter, SamplingExhausted
from pysatl_variates.generators import (
    beta,
    beta_envelope_bound,
    beta_sample,
    gamma,
    gamma_sample,
)
from tests.utils.sources import ConstantSource, ScriptedSource, seeded

N = 4000
P_THRESHOLD = 1e-4


class TestGamma:
    @pytest.mark.parametrize("shape, rate", [(2.5, 2.0), (1.0, 0.5), (0.4, 1.0), (7.0, 3.0)])
    def test_distribution(self, shape: float, rate: float) -> None:
        draws = gamma_sample(shape, rate, N, source=seeded(31))
        assert min(draws) >= 0
        pvalue = stats.kstest(draws, stats.gamma(a=shape, scale=1 / rate).cdf).pvalue
        assert pvalue > P_THRESHOLD

    def test_moments(self) -> None:
        draws = np.array(gamma_sample(3.0, 1.5, 20000, source=seeded(32)))
        assert abs(draws.mean() - 2.0) < 0.05
        assert abs(draws.var() - 3.0 / 1.5**2) < 0.1

    def test_exhaustion(self) -> None:
        # u = 0.99 makes every proposal land far in the tail and get rejected
        source = ConstantSource(0.99)
        with pytest.raises(SamplingExhausted) as excinfo:
            gamma(3.0, 1.0, max_iterations=4, source=source)
        assert excinfo.value.distribution == "Gamma"
        assert excinfo.value.iterations == 4
        assert source.calls == 8

    @pytest.mark.parametrize("shape, rate", [(0.0, 1.0), (1.0, 0.0), (-2.0, 1.0)])
    def test_invalid_parameters(self, shape: float, rate: float) -> None:
        source = ScriptedSource()
        with pytest.raises(InvalidParameter):
            gamma(shape, rate, source=source)
        assert source.calls == 0

    def test_invalid_cap(self) -> None:
        with pytest.raises(InvalidParameter, match="max_iterations"):
            gamma(2.0, 1.0, max_iterations=0)


class TestBeta:
    @pytest.mark.parametrize(
        "a, b",
        [
            (2.0, 5.0),  # envelope rejection
            (30.0, 12.0),  # envelope rejection, peaked
            (0.5, 0.5),  # gamma ratio, U-shaped
            (1.0, 3.0),  # gamma ratio, boundary shape
            (0.8, 2.0),  # gamma ratio
        ],
    )
    def test_distribution(self, a: float, b: float) -> None:
        draws = beta_sample(a, b, N, source=seeded(41))
        assert 0.0 <= min(draws)
        assert max(draws) <= 1.0
        assert stats.kstest(draws, stats.beta(a, b).cdf).pvalue > P_THRESHOLD

    def test_large_shapes_do_not_underflow(self) -> None:
        draws = np.array(beta_sample(200.0, 300.0, 300, source=seeded(42)))
        assert abs(draws.mean() - 0.4) < 0.01

    def test_envelope_accepts_mode(self) -> None:
        # u1 at the mode always passes: density / bound == 1
        source = ScriptedSource([0.5, 0.999])
        assert beta(2.0, 2.0, source=source) == pytest.approx(0.5)

    def test_envelope_rejects_then_accepts(self) -> None:
        # u1 = 0.1: ratio 4 * 0.1 * 0.9 = 0.36 < 0.9, rejected
        source = ScriptedSource([0.1, 0.9, 0.4, 0.5])
        assert beta(2.0, 2.0, source=source) == pytest.approx(0.4)
        assert len(source.double_calls) == 4

    def test_exhaustion(self) -> None:
        source = ConstantSource(0.99)
        with pytest.raises(SamplingExhausted) as excinfo:
            beta(2.0, 2.0, max_iterations=3, source=source)
        assert excinfo.value.distribution == "Beta"
        assert excinfo.value.iterations == 3
        assert source.calls == 6

    def test_configured_cap(self) -> None:
        set_config(SamplingConfig(max_iterations=5))
        with pytest.raises(SamplingExhausted) as excinfo:
            beta(2.0, 2.0, source=ConstantSource(0.99))
        assert excinfo.value.iterations == 5

    @pytest.mark.parametrize("a, b", [(0.0, 1.0), (1.0, 0.0), (-1.0, 2.0), (float("nan"), 1.0)])
    def test_invalid_parameters(self, a: float, b: float) -> None:
        source = ScriptedSource()
        with pytest.raises(InvalidParameter):
            beta(a, b, source=source)
        assert source.calls == 0


class TestBetaEnvelopeBound:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (2.0, 2.0, 0.25),
            (3.0, 3.0, 1 / 16),
            (2.0, 3.0, (1 / 3) * (2 / 3) ** 2),
        ],
    )
    def test_mode_height(self, a: float, b: float, expected: float) -> None:
        assert beta_envelope_bound(a, b) == pytest.approx(expected)

    def test_bounds_unnormalized_density(self) -> None:
        a, b = 4.0, 2.5
        bound = beta_envelope_bound(a, b)
        grid = np.linspace(0.0, 1.0, 1001)
        assert np.all(grid ** (a - 1) * (1 - grid) ** (b - 1) <= bound + 1e-12)
