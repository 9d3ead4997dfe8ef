"""
Bernoulli distribution family implementation.
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
from pysatl_variates.generators import binomial_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    A single trial that yields 1 with probability p and 0 otherwise.
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Bernoulli distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Bernoulli distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.p * (1 - parameters.p)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(binomial_sample),
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Bernoulli distribution.

        Parameters
        ----------
        p : float
            Probability of success
        """

        p: float

        @constraint(description="0 <= p <= 1")
        def check_probability(self) -> bool:
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Bernoulli)
