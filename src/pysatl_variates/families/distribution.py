"""
Members of a parametric family: fixed, validated parameter values with
access to the analytical moments and to variate generation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.distributions.distribution import Distribution
from pysatl_variates.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_variates.distributions.computation import AnalyticalComputation
    from pysatl_variates.distributions.sampling import Sample
    from pysatl_variates.distributions.strategies import SamplingStrategy
    from pysatl_variates.families.parametric_family import ParametricFamily
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    One member of a :class:`ParametricFamily`.

    Parameters
    ----------
    family : ParametricFamily
        Owning family.
    _distribution_type : DistributionType
        The family's distribution type.
    parametrization : Parametrization
        Values exactly as the caller gave them.
    base_parametrization : Parametrization
        The same member in the base parametrization; this is what the
        bulk generator receives.
    """

    family: ParametricFamily
    _distribution_type: DistributionType
    parametrization: Parametrization
    base_parametrization: Parametrization
    _characteristics: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = (
        field(default=None, repr=False, compare=False)
    )

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def parametrization_name(self) -> str:
        return self.parametrization.name

    @property
    def parameters(self) -> dict[str, Any]:
        return self.parametrization.parameters

    @property
    def base_parameters(self) -> Mapping[str, Any]:
        return self.base_parametrization.parameters

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Characteristics bound to this member's values, built on first access."""
        if self._characteristics is None:
            self._characteristics = self.family.characteristics_for(
                self.parametrization, self.base_parametrization
            )
        return self._characteristics

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    def mean(self) -> float:
        """Analytical mean; ``inf`` or ``nan`` where the moment does not exist."""
        return float(self.calculate_characteristic(CharacteristicName.MEAN))

    def var(self) -> float:
        """Analytical variance; ``inf`` or ``nan`` where the moment does not exist."""
        return float(self.calculate_characteristic(CharacteristicName.VAR))

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Draw ``n`` variates.

        Parameters
        ----------
        n : int
            Number of variates.
        **options : Any
            Forwarded to the bulk generator, e.g. ``source`` or
            ``max_iterations``.

        Returns
        -------
        Sample
            Array sample of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
