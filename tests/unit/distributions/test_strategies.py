from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pytest

from pysatl_variates.distributions import (
    AnalyticalComputation,
    Distribution,
    GeneratorSamplingStrategy,
    SamplingStrategy,
)
from pysatl_variates.errors import InvalidLength
from pysatl_variates.generators import discrete_uniform_sample, normal_sample
from pysatl_variates.types import (
    DistributionType,
    EuclideanDistributionType,
    GenericCharacteristicName,
    Kind,
    UnivariateContinuous,
    UnivariateDiscrete,
)
from tests.utils.sources import seeded


@dataclass(slots=True)
class StandaloneDistribution(Distribution):
    """Minimal distribution wired to an explicit strategy."""

    _distribution_type: DistributionType
    _base_parameters: dict[str, Any]
    _sampling_strategy: SamplingStrategy
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        default_factory=dict
    )

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self._sampling_strategy

    @property
    def base_parameters(self) -> Mapping[str, Any]:
        return self._base_parameters


class TestGeneratorSamplingStrategy:
    def test_continuous_sample(self) -> None:
        distr = StandaloneDistribution(
            UnivariateContinuous,
            {"mean": 1.0, "std": 0.5},
            GeneratorSamplingStrategy(normal_sample),
        )
        sample = distr.sample(100, source=seeded())
        assert sample.shape == (100, 1)
        assert sample.array.dtype == np.float64

    def test_discrete_sample_is_integer(self) -> None:
        distr = StandaloneDistribution(
            UnivariateDiscrete,
            {"min_": 1, "max_": 6},
            GeneratorSamplingStrategy(discrete_uniform_sample),
        )
        sample = distr.sample(50, source=seeded())
        assert sample.array.dtype == np.int64
        assert set(sample.tolist()) <= {1, 2, 3, 4, 5, 6}

    def test_parameters_passed_in_order(self) -> None:
        calls: list[tuple[Any, ...]] = []

        def bulk(*args: Any, **options: Any) -> list[float]:
            calls.append((args, options))
            return [0.0] * args[-1]

        distr = StandaloneDistribution(
            EuclideanDistributionType(Kind.CONTINUOUS, 1),
            {"a": 1.0, "b": 2.0},
            GeneratorSamplingStrategy(bulk),
        )
        distr.sample(3, max_iterations=7)
        assert calls == [((1.0, 2.0, 3), {"max_iterations": 7})]

    def test_same_seed_same_sample(self) -> None:
        distr = StandaloneDistribution(
            UnivariateContinuous,
            {"mean": 0.0, "std": 1.0},
            GeneratorSamplingStrategy(normal_sample),
        )
        first = distr.sample(20, source=seeded(5)).array
        second = distr.sample(20, source=seeded(5)).array
        np.testing.assert_array_equal(first, second)

    def test_negative_length(self) -> None:
        distr = StandaloneDistribution(
            UnivariateContinuous,
            {"mean": 0.0, "std": 1.0},
            GeneratorSamplingStrategy(normal_sample),
        )
        with pytest.raises(InvalidLength):
            distr.sample(-1)

    def test_query_method_missing(self) -> None:
        distr = StandaloneDistribution(
            UnivariateContinuous,
            {"mean": 0.0, "std": 1.0},
            GeneratorSamplingStrategy(normal_sample),
        )
        with pytest.raises(RuntimeError, match="mean"):
            distr.query_method("mean")

    def test_calculate_characteristic(self) -> None:
        mean = AnalyticalComputation(target="mean", func=lambda _, **__: 4.0)
        distr = StandaloneDistribution(
            UnivariateContinuous,
            {"mean": 4.0, "std": 1.0},
            GeneratorSamplingStrategy(normal_sample),
            {"mean": mean},
        )
        assert distr.calculate_characteristic("mean") == 4.0
