"""
Containers for drawn variates.

Family members return an :class:`ArraySample` holding the variates as an
``(n, 1)`` column: ``int64`` for discrete families, ``float64`` otherwise.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from pysatl_variates.types import NumericArray


class Sample(Protocol):
    """Read-only view of drawn variates as a 2D array."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    Stores samples as a 2D numeric array of shape (n_samples, n_dimensions).
    Discrete distributions produce integer arrays, continuous ones floating
    arrays. ``n_samples`` may be zero.

    Parameters
    ----------
    data : numpy.ndarray
        2D numeric array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: NumericArray

    def __init__(self, data: NumericArray) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_values(cls, values: Sequence[float] | Sequence[int], dtype: type) -> ArraySample:
        """Build a univariate ``(n, 1)`` sample from a flat sequence of variates."""
        return cls(np.asarray(values, dtype=dtype).reshape(-1, 1))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[NumericArray]:
        yield from self.data

    @property
    def array(self) -> NumericArray:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)

    def tolist(self) -> list[float] | list[int]:
        """Return the variates of a univariate sample as a flat Python list."""
        return self.data[:, 0].tolist()
