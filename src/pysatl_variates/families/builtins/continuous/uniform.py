"""
Continuous uniform distribution family implementation.

Contains the ContinuousUniform family with standard and mean-width
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from pysatl_variates.distributions.strategies import GeneratorSamplingStrategy
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.generators import continuous_uniform_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_continuous_uniform_family() -> None:
    """
    Configure and register the ContinuousUniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution.

    Every point of the interval [lower_bound, upper_bound) is equally likely.
    A degenerate interval (lower_bound == upper_bound) always yields
    lower_bound.

    Probability density function:
        f(x) = 1 / (upper_bound - lower_bound) for lower_bound <= x < upper_bound
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.lower_bound + parameters.upper_bound) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.upper_bound - parameters.lower_bound) ** 2 / 12

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(continuous_uniform_sample),
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower_bound : float
            Lower bound of the interval (inclusive)
        upper_bound : float
            Upper bound of the interval (exclusive)
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="lower_bound <= upper_bound")
        def check_bounds(self) -> bool:
            """Check that the bounds are ordered."""
            return self.lower_bound <= self.upper_bound

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Center of the interval
        width : float
            Length of the interval
        """

        mean: float
        width: float

        @constraint(description="width >= 0")
        def check_width_non_negative(self) -> bool:
            """Check that the width is non-negative."""
            return self.width >= 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half = self.width / 2
            return _Standard(lower_bound=self.mean - half, upper_bound=self.mean + half)

    ParametricFamilyRegister.register(Uniform)
