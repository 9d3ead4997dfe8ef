from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_variates.distributions import ArraySample


class TestArraySample:
    def test_from_values_shape_and_dtype(self) -> None:
        sample = ArraySample.from_values([1, 2, 3], dtype=np.int64)
        assert sample.shape == (3, 1)
        assert sample.array.dtype == np.int64
        assert len(sample) == 3
        assert sample.tolist() == [1, 2, 3]

    def test_empty(self) -> None:
        sample = ArraySample.from_values([], dtype=np.float64)
        assert sample.shape == (0, 1)
        assert len(sample) == 0
        assert sample.tolist() == []

    def test_iterates_rows(self) -> None:
        sample = ArraySample(np.array([[1.0], [2.0]]))
        rows = list(sample)
        assert len(rows) == 2
        assert rows[1][0] == 2.0
        assert sample.dimension == 1

    def test_rejects_non_2d(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))
