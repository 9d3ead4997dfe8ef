"""
Uniform randomness providers consumed by every generator.
"""

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .source import (
    NumpyUniformSource,
    UniformSource,
    default_source,
    resolve_source,
    set_default_source,
)

__all__ = [
    "UniformSource",
    "NumpyUniformSource",
    "default_source",
    "set_default_source",
    "resolve_source",
]
