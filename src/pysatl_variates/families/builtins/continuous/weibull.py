"""
Weibull distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from scipy.special import gamma as gamma_function

from pysatl_variates.distributions.strategies import GeneratorSamplingStrategy
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.generators import weibull_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    WEIBULL_DOC = """
    Weibull distribution.

    Generated as X = (1/scale) * (-ln U)^(1/shape), so ``scale`` is an
    inverse scale: larger values concentrate the mass near zero.

    Probability density function (λ = scale, k = shape):
        f(x) = k λ (λx)^(k-1) exp(-(λx)^k) for x ≥ 0
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Weibull distribution."""
        parameters = cast(_Standard, parameters)
        return float(gamma_function(1 + 1 / parameters.shape)) / parameters.scale

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Weibull distribution."""
        parameters = cast(_Standard, parameters)
        k = parameters.shape
        g1 = gamma_function(1 + 1 / k)
        g2 = gamma_function(1 + 2 / k)
        return float(g2 - g1**2) / parameters.scale**2

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(weibull_sample),
    )
    Weibull.__doc__ = WEIBULL_DOC

    @parametrization(family=Weibull, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Weibull distribution.

        Parameters
        ----------
        scale : float
            Inverse scale λ
        shape : float
            Shape k
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(Weibull)
