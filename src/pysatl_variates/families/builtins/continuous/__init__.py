"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families, both
transform-based and rejection-based.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous.beta import configure_beta_family
from pysatl_variates.families.builtins.continuous.exponential import configure_exponential_family
from pysatl_variates.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_variates.families.builtins.continuous.log_normal import configure_log_normal_family
from pysatl_variates.families.builtins.continuous.normal import configure_normal_family
from pysatl_variates.families.builtins.continuous.pareto import configure_pareto_family
from pysatl_variates.families.builtins.continuous.stable import configure_stable_family
from pysatl_variates.families.builtins.continuous.uniform import (
    configure_continuous_uniform_family,
)
from pysatl_variates.families.builtins.continuous.weibull import configure_weibull_family

__all__ = [
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
