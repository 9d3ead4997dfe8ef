"""
Tests for the LogNormal, Pareto, Weibull and Stable families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import pytest
from scipy import stats
from scipy.special import gamma as gamma_function

from pysatl_variates.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest


class TestLogNormalFamily(BaseDistributionTest):
    def setup_method(self):
        self.log_normal_family = self.family(FamilyName.LOG_NORMAL)

    def test_moments(self):
        dist = self.log_normal_family(location=0.5, shape=0.75)
        s2 = 0.75**2
        self.assert_moments(
            dist,
            mean=math.exp(0.5 + s2 / 2),
            var=(math.exp(s2) - 1) * math.exp(1.0 + s2),
        )

    def test_sampling(self):
        dist = self.log_normal_family(location=0.5, shape=0.75)
        self.assert_fits(dist, stats.lognorm(s=0.75, scale=math.exp(0.5)), seed=4)

    def test_constraints(self):
        with pytest.raises(ValueError, match="shape > 0"):
            self.log_normal_family(location=0.0, shape=0.0)


class TestParetoFamily(BaseDistributionTest):
    def setup_method(self):
        self.pareto_family = self.family(FamilyName.PARETO)

    def test_moments(self):
        dist = self.pareto_family(scale=2.0, shape=3.0)
        self.assert_moments(dist, mean=3.0, var=3.0)

    def test_infinite_moments(self):
        dist = self.pareto_family(scale=1.0, shape=1.5)
        assert dist.calculate_characteristic(CharacteristicName.MEAN) == pytest.approx(3.0)
        assert dist.calculate_characteristic(CharacteristicName.VAR) == math.inf
        heavy = self.pareto_family(scale=1.0, shape=0.5)
        assert heavy.calculate_characteristic(CharacteristicName.MEAN) == math.inf

    def test_sampling(self):
        dist = self.pareto_family(scale=2.0, shape=3.0)
        self.assert_fits(dist, stats.pareto(b=3.0, scale=2.0), seed=5)

    def test_constraints(self):
        with pytest.raises(ValueError, match="scale > 0"):
            self.pareto_family(scale=0.0, shape=1.0)
        with pytest.raises(ValueError, match="shape > 0"):
            self.pareto_family(scale=1.0, shape=-2.0)


class TestWeibullFamily(BaseDistributionTest):
    def setup_method(self):
        self.weibull_family = self.family(FamilyName.WEIBULL)

    def test_moments(self):
        dist = self.weibull_family(scale=2.0, shape=1.5)
        g1 = gamma_function(1 + 1 / 1.5)
        g2 = gamma_function(1 + 2 / 1.5)
        self.assert_moments(dist, mean=g1 / 2.0, var=(g2 - g1**2) / 4.0)

    def test_exponential_special_case(self):
        dist = self.weibull_family(scale=0.5, shape=1.0)
        self.assert_moments(dist, mean=2.0, var=4.0)

    def test_sampling(self):
        dist = self.weibull_family(scale=2.0, shape=1.5)
        self.assert_fits(dist, stats.weibull_min(c=1.5, scale=0.5), seed=6)


class TestStableFamily(BaseDistributionTest):
    def setup_method(self):
        self.stable_family = self.family(FamilyName.STABLE)

    def test_gaussian_case(self):
        dist = self.stable_family(stability=2.0, skewness=0.0, scale=1.0, location=3.0)
        self.assert_moments(dist, mean=3.0, var=2.0)
        self.assert_fits(dist, stats.norm(loc=3.0, scale=math.sqrt(2.0)), seed=7)

    def test_cauchy_case(self):
        dist = self.stable_family(stability=1.0, skewness=0.0, scale=2.0, location=0.0)
        assert math.isnan(dist.calculate_characteristic(CharacteristicName.MEAN))
        assert dist.calculate_characteristic(CharacteristicName.VAR) == math.inf
        self.assert_fits(dist, stats.cauchy(loc=0.0, scale=2.0), seed=8)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"stability": 0.0, "skewness": 0.0, "scale": 1.0, "location": 0.0}, "stability"),
            ({"stability": 1.5, "skewness": -1.5, "scale": 1.0, "location": 0.0}, "skewness"),
            ({"stability": 1.5, "skewness": 0.0, "scale": -1.0, "location": 0.0}, "scale > 0"),
        ],
    )
    def test_constraints(self, params, message):
        with pytest.raises(ValueError, match=message):
            self.stable_family(**params)
