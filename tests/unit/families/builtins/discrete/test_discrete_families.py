"""
Tests for the discrete families: Bernoulli, DiscreteUniform, Geometric and
Poisson.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections import Counter

import numpy as np
import pytest
from scipy import stats

from pysatl_variates.generators import PoissonPerformanceWarning
from pysatl_variates.types import FamilyName, UnivariateDiscrete
from tests.utils.sources import seeded

from ..base import BaseDistributionTest


def _chisquare_pvalue(draws: list[int], pmf, support: range) -> float:
    counts = Counter(draws)
    n = len(draws)
    observed = [counts[k] for k in support]
    expected = [n * pmf(k) for k in support]
    tail = n - sum(expected)
    if tail > 1e-6:
        # lump the remaining mass into one tail cell
        observed.append(n - sum(observed))
        expected.append(tail)
    return float(stats.chisquare(observed, expected).pvalue)


class TestBernoulliFamily(BaseDistributionTest):
    def setup_method(self):
        self.bernoulli_family = self.family(FamilyName.BERNOULLI)

    def test_family_properties(self):
        assert self.bernoulli_family.distr_type == UnivariateDiscrete
        assert self.bernoulli_family.base_parametrization_name == "standard"

    def test_moments(self):
        self.assert_moments(self.bernoulli_family(p=0.3), mean=0.3, var=0.21)

    def test_sampling(self):
        sample = self.bernoulli_family(p=0.3).sample(10000, source=seeded(1))
        assert sample.array.dtype == np.int64
        assert set(sample.tolist()) <= {0, 1}
        assert abs(sample.array.mean() - 0.3) < 0.02

    def test_constraints(self):
        with pytest.raises(ValueError, match="0 <= p <= 1"):
            self.bernoulli_family(p=1.5)


class TestDiscreteUniformFamily(BaseDistributionTest):
    def setup_method(self):
        self.uniform_family = self.family(FamilyName.DISCRETE_UNIFORM)

    def test_moments(self):
        self.assert_moments(self.uniform_family(min_=1, max_=6), mean=3.5, var=35 / 12)

    def test_sampling(self):
        draws = self.uniform_family(min_=1, max_=6).sample(12000, source=seeded(2)).tolist()
        assert set(draws) == {1, 2, 3, 4, 5, 6}
        assert _chisquare_pvalue(draws, lambda _: 1 / 6, range(1, 7)) > self.P_THRESHOLD

    def test_single_point(self):
        assert set(self.uniform_family(min_=4, max_=4).sample(20).tolist()) == {4}

    def test_constraints(self):
        with pytest.raises(ValueError, match="max_ >= min_"):
            self.uniform_family(min_=3, max_=2)
        with pytest.raises(ValueError, match="integers"):
            self.uniform_family(min_=0.5, max_=2)


class TestGeometricFamily(BaseDistributionTest):
    def setup_method(self):
        self.geometric_family = self.family(FamilyName.GEOMETRIC)

    def test_moments(self):
        self.assert_moments(self.geometric_family(p=0.25), mean=4.0, var=12.0)

    def test_sampling(self):
        draws = self.geometric_family(p=0.4).sample(10000, source=seeded(3)).tolist()
        assert min(draws) >= 1
        pvalue = _chisquare_pvalue(draws, lambda k: stats.geom.pmf(k, 0.4), range(1, 8))
        assert pvalue > self.P_THRESHOLD

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_constraints(self, p):
        with pytest.raises(ValueError, match="0 < p < 1"):
            self.geometric_family(p=p)


class TestPoissonFamily(BaseDistributionTest):
    def setup_method(self):
        self.poisson_family = self.family(FamilyName.POISSON)

    def test_moments(self):
        self.assert_moments(self.poisson_family(lam=3.5), mean=3.5, var=3.5)

    def test_sampling(self):
        draws = self.poisson_family(lam=3.5).sample(10000, source=seeded(4)).tolist()
        pvalue = _chisquare_pvalue(draws, lambda k: stats.poisson.pmf(k, 3.5), range(0, 9))
        assert pvalue > self.P_THRESHOLD

    def test_large_rate_warns(self):
        with pytest.warns(PoissonPerformanceWarning):
            sample = self.poisson_family(lam=800.0).sample(50, source=seeded(5))
        assert sample.array.dtype == np.int64

    def test_constraints(self):
        with pytest.raises(ValueError, match="lam > 0"):
            self.poisson_family(lam=0.0)
