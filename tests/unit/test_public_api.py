from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pysatl_variates


def test_exports_resolve() -> None:
    for name in pysatl_variates.__all__:
        assert hasattr(pysatl_variates, name), name


def test_top_level_sampling_flow() -> None:
    registry = pysatl_variates.configure_families_register()
    source = pysatl_variates.NumpyUniformSource(2025)
    sample = registry.get(pysatl_variates.FamilyName.GAMMA)(shape=2.0, rate=1.0).sample(
        10, source=source
    )
    assert sample.shape == (10, 1)


def test_library_logger_is_silent_by_default() -> None:
    handlers = logging.getLogger("pysatl_variates").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
