"""
Beta distribution family implementation.
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
from pysatl_variates.generators import beta_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution on [0, 1].

    Sampled by rejection from a uniform envelope when both shapes exceed 1,
    otherwise as G1 / (G1 + G2) for independent gamma variates. Sampling
    accepts a ``max_iterations`` option.

    Probability density function:
        f(x) = x^(a-1) (1-x)^(b-1) / B(a, b)
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of beta distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.shape1 / (parameters.shape1 + parameters.shape2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of beta distribution."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.shape1, parameters.shape2
        return a * b / ((a + b) ** 2 * (a + b + 1))

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(beta_sample),
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of beta distribution.

        Parameters
        ----------
        shape1 : float
            First shape parameter (a)
        shape2 : float
            Second shape parameter (b)
        """

        shape1: float
        shape2: float

        @constraint(description="shape1 > 0")
        def check_shape1_positive(self) -> bool:
            return self.shape1 > 0

        @constraint(description="shape2 > 0")
        def check_shape2_positive(self) -> bool:
            return self.shape2 > 0

    ParametricFamilyRegister.register(Beta)
