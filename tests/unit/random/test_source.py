from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import threading
from collections import Counter

import numpy as np
import pytest
from scipy import stats

from pysatl_variates.errors import InvalidParameter, InvalidRange
from pysatl_variates.random import (
    NumpyUniformSource,
    UniformSource,
    default_source,
    resolve_source,
    set_default_source,
)
from tests.utils.sources import ScriptedSource


class TestNumpyUniformSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(NumpyUniformSource(1), UniformSource)
        assert isinstance(ScriptedSource(), UniformSource)

    def test_same_seed_same_stream(self) -> None:
        a, b = NumpyUniformSource(7), NumpyUniformSource(7)
        assert [a.uniform_double(0.0, 1.0) for _ in range(20)] == [
            b.uniform_double(0.0, 1.0) for _ in range(20)
        ]
        first = [a.uniform_int(-5, 5) for _ in range(20)]
        assert first == [b.uniform_int(-5, 5) for _ in range(20)]

    def test_uniform_int_is_inclusive_and_covers_range(self) -> None:
        source = NumpyUniformSource(3)
        draws = [source.uniform_int(1, 6) for _ in range(6000)]
        assert set(draws) == {1, 2, 3, 4, 5, 6}
        assert all(isinstance(d, int) for d in draws)

    def test_uniform_int_has_no_visible_bias(self) -> None:
        source = NumpyUniformSource(11)
        counts = Counter(source.uniform_int(0, 2) for _ in range(30000))
        _, pvalue = stats.chisquare([counts[0], counts[1], counts[2]])
        assert pvalue > 1e-4

    def test_uniform_int_degenerate_interval(self) -> None:
        assert NumpyUniformSource(0).uniform_int(4, 4) == 4

    def test_uniform_int_reversed_bounds(self) -> None:
        with pytest.raises(InvalidRange):
            NumpyUniformSource(0).uniform_int(5, 4)

    def test_uniform_double_half_open(self) -> None:
        source = NumpyUniformSource(5)
        draws = np.array([source.uniform_double(-2.0, 3.0) for _ in range(5000)])
        assert draws.min() >= -2.0
        assert draws.max() < 3.0

    def test_uniform_double_distribution(self) -> None:
        source = NumpyUniformSource(8)
        draws = [source.uniform_double(0.0, 1.0) for _ in range(5000)]
        assert stats.kstest(draws, "uniform").pvalue > 1e-4

    def test_uniform_double_degenerate_interval_returns_low(self) -> None:
        assert NumpyUniformSource(0).uniform_double(2.5, 2.5) == 2.5

    def test_uniform_double_reversed_bounds(self) -> None:
        with pytest.raises(InvalidRange):
            NumpyUniformSource(0).uniform_double(1.0, 0.0)

    @pytest.mark.parametrize("low, high", [(0.0, math.inf), (-math.inf, 0.0), (math.nan, 1.0)])
    def test_uniform_double_non_finite_bounds(self, low: float, high: float) -> None:
        with pytest.raises(InvalidParameter):
            NumpyUniformSource(0).uniform_double(low, high)

    def test_uniform_double_never_returns_high_on_tiny_interval(self) -> None:
        low = 1.0
        high = float(np.nextafter(low, 2.0))
        source = NumpyUniformSource(1)
        assert all(source.uniform_double(low, high) == low for _ in range(100))


class TestDefaultSource:
    def test_lazily_created_and_reused(self) -> None:
        first = default_source()
        assert isinstance(first, NumpyUniformSource)
        assert default_source() is first

    def test_set_and_clear(self) -> None:
        custom = NumpyUniformSource(1)
        set_default_source(custom)
        assert default_source() is custom
        assert resolve_source(None) is custom

        set_default_source(None)
        assert default_source() is not custom

    def test_resolve_prefers_explicit_source(self) -> None:
        explicit = ScriptedSource()
        assert resolve_source(explicit) is explicit

    def test_threads_get_independent_sources(self) -> None:
        main = default_source()
        seen: list[UniformSource] = []

        def worker() -> None:
            seen.append(default_source())

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert len(seen) == 1
        assert seen[0] is not main
        assert default_source() is main
