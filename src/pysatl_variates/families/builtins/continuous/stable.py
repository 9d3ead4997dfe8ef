"""
Stable distribution family implementation.

Contains the Stable family sampled with the Chambers-Mallows-Stuck method.
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
from pysatl_variates.generators import stable_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_stable_family() -> None:
    """
    Configure and register the Stable distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STABLE):
        return

    STABLE_DOC = """
    Stable distribution S(α, β, σ, μ).

    Has no closed-form density in general. The mean exists only for α > 1
    and the variance only for α = 2, where the distribution is normal with
    variance 2σ².
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of stable distribution (``nan`` when stability <= 1)."""
        parameters = cast(_Standard, parameters)
        if parameters.stability <= 1:
            return math.nan
        return parameters.location

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of stable distribution (``inf`` when stability < 2)."""
        parameters = cast(_Standard, parameters)
        if parameters.stability < 2:
            return math.inf
        return 2 * parameters.scale**2

    Stable = ParametricFamily(
        name=FamilyName.STABLE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(stable_sample),
    )
    Stable.__doc__ = STABLE_DOC

    @parametrization(family=Stable, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of stable distribution.

        Parameters
        ----------
        stability : float
            Stability index α in (0, 2]
        skewness : float
            Skewness β in [-1, 1]
        scale : float
            Scale σ
        location : float
            Location μ
        """

        stability: float
        skewness: float
        scale: float
        location: float

        @constraint(description="0 < stability <= 2")
        def check_stability(self) -> bool:
            return 0 < self.stability <= 2

        @constraint(description="-1 <= skewness <= 1")
        def check_skewness(self) -> bool:
            return -1 <= self.skewness <= 1

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    ParametricFamilyRegister.register(Stable)
