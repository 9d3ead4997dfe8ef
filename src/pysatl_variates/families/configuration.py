"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families:

- discrete: Bernoulli, DiscreteUniform, Geometric, Poisson;
- continuous, transform-based: ContinuousUniform, Exponential, Normal,
  LogNormal, Pareto, Weibull, Stable;
- continuous, rejection-based: Beta, Gamma.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Each family samples through the matching bulk generator of
  :mod:`pysatl_variates.generators`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_variates.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_continuous_uniform_family,
    configure_discrete_uniform_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_log_normal_family,
    configure_normal_family,
    configure_pareto_family,
    configure_poisson_family,
    configure_stable_family,
    configure_weibull_family,
)
from pysatl_variates.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_bernoulli_family()
    configure_discrete_uniform_family()
    configure_geometric_family()
    configure_poisson_family()
    configure_continuous_uniform_family()
    configure_exponential_family()
    configure_normal_family()
    configure_log_normal_family()
    configure_pareto_family()
    configure_weibull_family()
    configure_stable_family()
    configure_beta_family()
    configure_gamma_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
