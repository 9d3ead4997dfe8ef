"""
Sampling Configuration
======================

Process-wide defaults for rejection caps, weight tolerances and performance
warnings. Individual calls may override any of these through keyword
arguments.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass

from pysatl_variates.errors import InvalidParameter


@dataclass(frozen=True, slots=True)
class SamplingConfig:
    """
    Configuration shared by all generators.

    Parameters
    ----------
    max_iterations : int, default 100000
        Maximum number of proposals a rejection sampler (Beta, Gamma) may
        draw for a single variate before raising
        :class:`~pysatl_variates.errors.SamplingExhausted`.
    weight_tolerance : float, default 1e-7
        Allowed absolute deviation of a probability vector's sum from 1.
    poisson_warning_threshold : float, default 500.0
        Rate above which the cumulative-PMF Poisson walk emits a
        performance warning.

    Raises
    ------
    InvalidParameter
        If any of the values is out of range.
    """

    max_iterations: int = 100_000
    weight_tolerance: float = 1e-7
    poisson_warning_threshold: float = 500.0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_iterations < 1:
            raise InvalidParameter(
                f"max_iterations must be a positive integer, got {self.max_iterations}"
            )
        if not self.weight_tolerance >= 0:
            raise InvalidParameter(
                f"weight_tolerance must be non-negative, got {self.weight_tolerance}"
            )
        if not self.poisson_warning_threshold > 0:
            raise InvalidParameter(
                "poisson_warning_threshold must be positive, "
                f"got {self.poisson_warning_threshold}"
            )


_DEFAULT_CONFIG = SamplingConfig()
_config = _DEFAULT_CONFIG


def get_config() -> SamplingConfig:
    """Return the active process-wide configuration."""
    return _config


def set_config(config: SamplingConfig) -> None:
    """
    Replace the process-wide configuration.

    Parameters
    ----------
    config : SamplingConfig
        New defaults applied to subsequent calls.
    """
    global _config
    _config = config


def reset_config() -> None:
    """Restore the built-in defaults."""
    set_config(_DEFAULT_CONFIG)


__all__ = [
    "SamplingConfig",
    "get_config",
    "set_config",
    "reset_config",
]
