"""
Gamma distribution family implementation.

Contains the Gamma family with shape-rate and shape-scale parameterizations.
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
from pysatl_variates.generators import gamma_sample
from pysatl_variates.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Sampled by rejection from an exponential envelope with mean
    shape / rate. Shapes below 1 are reduced to shape + 1 and rescaled by
    U^(1/shape). Sampling accepts a ``max_iterations`` option.

    Probability density function (shape-rate parametrization):
        f(x) = λ^k x^(k-1) exp(-λx) / Γ(k) for x > 0
    """

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape / parameters.rate**2

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate", "shapeScale"],
        distr_characteristics={
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=GeneratorSamplingStrategy(gamma_sample),
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        rate : float
            Rate parameter λ
        """

        shape: float
        rate: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter θ = 1/λ
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(shape=self.shape, rate=1.0 / self.scale)

    ParametricFamilyRegister.register(Gamma)
