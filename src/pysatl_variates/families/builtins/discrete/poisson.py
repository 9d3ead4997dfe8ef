"""
Poisson distribution family implementation.
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
from pysatl_variates.generators import poisson_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval for a process with rate λ.
    Sampling time grows linearly with λ; rates above the configured
    threshold emit a PoissonPerformanceWarning.

    Probability mass function:
        P(X = k) = λ^k e^(-λ) / k!
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.lam

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.lam

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(poisson_sample),
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Poisson distribution.

        Parameters
        ----------
        lam : float
            Rate λ
        """

        lam: float

        @constraint(description="lam > 0")
        def check_rate_positive(self) -> bool:
            return self.lam > 0

    ParametricFamilyRegister.register(Poisson)
