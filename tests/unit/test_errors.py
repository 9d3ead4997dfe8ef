from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_variates.errors import (
    EmptySource,
    InvalidLength,
    InvalidParameter,
    InvalidRange,
    SamplingExhausted,
    VariateError,
)
from pysatl_variates.generators import normal, sample_with_replacement


@pytest.mark.parametrize(
    "error, builtin",
    [
        (InvalidParameter, ValueError),
        (InvalidRange, ValueError),
        (InvalidLength, ValueError),
        (EmptySource, ValueError),
        (SamplingExhausted, RuntimeError),
    ],
)
def test_hierarchy(error: type[Exception], builtin: type[Exception]) -> None:
    assert issubclass(error, VariateError)
    assert issubclass(error, builtin)


def test_invalid_range_is_invalid_parameter() -> None:
    assert issubclass(InvalidRange, InvalidParameter)


def test_sampling_exhausted_carries_details() -> None:
    error = SamplingExhausted("Beta", 17)
    assert error.distribution == "Beta"
    assert error.iterations == 17
    assert "Beta" in str(error)
    assert "17" in str(error)


def test_validation_message_names_constraint() -> None:
    with pytest.raises(InvalidParameter, match='Constraint "std > 0" does not hold'):
        normal(0.0, -1.0)


def test_builtin_catch_still_works() -> None:
    with pytest.raises(ValueError):
        sample_with_replacement([], 1)
