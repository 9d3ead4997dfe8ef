"""
Tests for Continuous Uniform Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import pytest
from scipy.stats import uniform

from pysatl_variates.types import FamilyName, UnivariateContinuous

from ..base import BaseDistributionTest


class TestContinuousUniformFamily(BaseDistributionTest):
    """Test suite for ContinuousUniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.uniform_family = self.family(FamilyName.CONTINUOUS_UNIFORM)

    def test_family_properties(self):
        """Test basic properties of uniform family."""
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert self.uniform_family.distr_type == UnivariateContinuous
        assert set(self.uniform_family.parametrization_names) == {"standard", "meanWidth"}
        assert self.uniform_family.base_parametrization_name == "standard"

    def test_mean_width_parametrization(self):
        """Test conversion from mean-width to standard parametrization."""
        dist = self.uniform_family(parametrization_name="meanWidth", mean=2.0, width=4.0)
        assert dist.base_parameters == {"lower_bound": 0.0, "upper_bound": 4.0}

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match="lower_bound <= upper_bound"):
            self.uniform_family(lower_bound=1.0, upper_bound=0.0)
        with pytest.raises(ValueError, match="width >= 0"):
            self.uniform_family(parametrization_name="meanWidth", mean=0.0, width=-1.0)

    def test_moments(self):
        """Test moment calculations."""
        dist = self.uniform_family(lower_bound=-1.0, upper_bound=5.0)
        self.assert_moments(dist, mean=2.0, var=3.0)

    def test_sampling(self):
        """Test sampling against scipy reference."""
        dist = self.uniform_family(lower_bound=-1.0, upper_bound=5.0)
        self.assert_fits(dist, uniform(loc=-1.0, scale=6.0))

    def test_degenerate_interval(self):
        """Test sampling from a single-point interval."""
        dist = self.uniform_family(lower_bound=3.0, upper_bound=3.0)
        assert set(dist.sample(10).tolist()) == {3.0}
