"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL variates.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution (integer variates).
    CONTINUOUS : str
        Continuous probability distribution (floating-point variates).
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Marker base of the distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int

    @property
    def dtype(self) -> type[np.generic]:
        """NumPy dtype used for samples of this type."""
        return np.int64 if self.kind == Kind.DISCRETE else np.float64


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'mean', 'var')."""

type ParametrizationName = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of analytical characteristics exposed by built-in families.
    """

    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    DISCRETE_UNIFORM = "DiscreteUniform"
    GEOMETRIC = "Geometric"
    POISSON = "Poisson"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    EXPONENTIAL = "Exponential"
    NORMAL = "Normal"
    LOG_NORMAL = "LogNormal"
    PARETO = "Pareto"
    WEIBULL = "Weibull"
    STABLE = "Stable"
    BETA = "Beta"
    GAMMA = "Gamma"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "NumPyNumber",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
