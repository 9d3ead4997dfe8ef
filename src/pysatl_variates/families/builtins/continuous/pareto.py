"""
Pareto distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_variates.distributions.strategies import GeneratorSamplingStrategy
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.generators import pareto_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto (type I) distribution.

    Support is [scale, ∞). Heavy-tailed: the mean is infinite for
    shape <= 1 and the variance is infinite for shape <= 2.

    Probability density function:
        f(x) = α x_m^α / x^(α+1) for x ≥ x_m
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Pareto distribution (``inf`` when shape <= 1)."""
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 1:
            return math.inf
        return alpha * parameters.scale / (alpha - 1)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Pareto distribution (``inf`` when shape <= 2)."""
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 2:
            return math.inf
        return parameters.scale**2 * alpha / ((alpha - 1) ** 2 * (alpha - 2))

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(pareto_sample),
    )
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Pareto distribution.

        Parameters
        ----------
        scale : float
            Minimum value x_m
        shape : float
            Tail index α
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(Pareto)
