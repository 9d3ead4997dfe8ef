"""
Log-normal distribution family implementation.
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
from pysatl_variates.generators import log_normal_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_log_normal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    Log-normal distribution.

    X = exp(Y) where Y is normal with mean ``location`` and standard
    deviation ``shape``.

    Probability density function:
        f(x) = 1/(x σ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of log-normal distribution."""
        parameters = cast(_Standard, parameters)
        return math.exp(parameters.location + parameters.shape**2 / 2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of log-normal distribution."""
        parameters = cast(_Standard, parameters)
        s2 = parameters.shape**2
        return math.expm1(s2) * math.exp(2 * parameters.location + s2)

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(log_normal_sample),
    )
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of log-normal distribution.

        Parameters
        ----------
        location : float
            Mean of the underlying normal distribution
        shape : float
            Standard deviation of the underlying normal distribution
        """

        location: float
        shape: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    ParametricFamilyRegister.register(LogNormal)
