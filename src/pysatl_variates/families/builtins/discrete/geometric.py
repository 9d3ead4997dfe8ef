"""
Geometric distribution family implementation.
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
from pysatl_variates.generators import geometric_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution on {1, 2, ...}.

    Number of Bernoulli trials up to and including the first success.

    Probability mass function:
        P(X = k) = (1 - p)^(k-1) p
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of geometric distribution."""
        parameters = cast(_Standard, parameters)
        return 1 / parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of geometric distribution."""
        parameters = cast(_Standard, parameters)
        return (1 - parameters.p) / parameters.p**2

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(geometric_sample),
    )
    Geometric.__doc__ = GEOMETRIC_DOC

    @parametrization(family=Geometric, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of geometric distribution.

        Parameters
        ----------
        p : float
            Probability of success of a single trial
        """

        p: float

        @constraint(description="0 < p < 1")
        def check_probability(self) -> bool:
            return 0 < self.p < 1

    ParametricFamilyRegister.register(Geometric)
