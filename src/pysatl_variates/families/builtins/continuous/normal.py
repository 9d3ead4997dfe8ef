"""
Normal family, sampled with the paired Box-Muller transform.
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
from pysatl_variates.generators import normal_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_normal_family() -> None:
    """
    Register the Normal family (``meanStd`` base, ``meanPrec``).
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal distribution N(μ, σ²).

    Variates come from :func:`~pysatl_variates.generators.normal_sample`:
    every pair of uniforms (u1, u2) yields r·cos(2πu2) and r·sin(2πu2) with
    r = sqrt(-2 ln(1 - u1)), scaled by σ and shifted by μ. An odd sample size
    finishes with a single draw.

    Density:
        f(x) = exp(-(x-μ)²/(2σ²)) / (σ√(2π))
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).sigma ** 2

    def var_from_precision(parameters: Parametrization, _: Any) -> float:
        return 1.0 / cast(_MeanPrec, parameters).tau

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: {"meanStd": var_func, "meanPrec": var_from_precision},
        },
        sampling_strategy=GeneratorSamplingStrategy(normal_sample),
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Parameters
        ----------
        mu : float
            Location, the mean
        sigma : float
            Standard deviation
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Parameters
        ----------
        mu : float
            Location, the mean
        tau : float
            Precision, 1/σ²
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=1.0 / math.sqrt(self.tau))

    ParametricFamilyRegister.register(Normal)
