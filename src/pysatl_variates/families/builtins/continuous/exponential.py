"""
Exponential family, sampled by inverse transform.
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
from pysatl_variates.generators import exponential_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_exponential_family() -> None:
    """
    Register the Exponential family (``rate`` base, ``scale``).
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution with rate λ (or scale β = 1/λ).

    Each variate is X = -ln(1 - U) / λ for one uniform U in [0, 1), so the
    logarithm never sees zero and every variate is finite and non-negative.

    Density (rate form):
        f(x) = λ exp(-λx), x ≥ 0
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / cast(_Rate, parameters).lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / cast(_Rate, parameters).lambda_ ** 2

    def mean_from_scale(parameters: Parametrization, _: Any) -> float:
        return cast(_Scale, parameters).beta

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.MEAN: {"rate": mean_func, "scale": mean_from_scale},
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(exponential_sample),
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Parameters
        ----------
        lambda_ : float
            Rate λ
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Parameters
        ----------
        beta : float
            Scale β = 1/λ, the mean waiting time
        """

        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(Exponential)
