"""
Discrete uniform distribution family implementation.
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
from pysatl_variates.generators import discrete_uniform_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the DiscreteUniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    DISCRETE_UNIFORM_DOC = """
    Discrete uniform distribution.

    Every integer of the closed interval [min_, max_] has probability
    1 / (max_ - min_ + 1).
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of discrete uniform distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.min_ + parameters.max_) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of discrete uniform distribution."""
        parameters = cast(_Standard, parameters)
        count = parameters.max_ - parameters.min_ + 1
        return (count**2 - 1) / 12

    DiscreteUniform = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(discrete_uniform_sample),
    )
    DiscreteUniform.__doc__ = DISCRETE_UNIFORM_DOC

    @parametrization(family=DiscreteUniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of discrete uniform distribution.

        Parameters
        ----------
        min_ : int
            Smallest value (inclusive)
        max_ : int
            Largest value (inclusive)
        """

        min_: int
        max_: int

        @constraint(description="min_ and max_ are integers")
        def check_integral(self) -> bool:
            return float(self.min_).is_integer() and float(self.max_).is_integer()

        @constraint(description="max_ >= min_")
        def check_bounds(self) -> bool:
            return self.max_ >= self.min_

    ParametricFamilyRegister.register(DiscreteUniform)
