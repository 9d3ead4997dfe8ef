"""
Built-in distribution families for PySATL Variates.

This package contains implementations of standard statistical distribution
families that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous import (
    configure_beta_family,
    configure_continuous_uniform_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_log_normal_family,
    configure_normal_family,
    configure_pareto_family,
    configure_stable_family,
    configure_weibull_family,
)
from pysatl_variates.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_discrete_uniform_family,
    configure_geometric_family,
    configure_poisson_family,
)

__all__ = [
    "configure_bernoulli_family",
    "configure_discrete_uniform_family",
    "configure_geometric_family",
    "configure_poisson_family",
    "configure_continuous_uniform_family",
    "configure_exponential_family",
    "configure_normal_family",
    "configure_log_normal_family",
    "configure_pareto_family",
    "configure_weibull_family",
    "configure_stable_family",
    "configure_beta_family",
    "configure_gamma_family",
]
