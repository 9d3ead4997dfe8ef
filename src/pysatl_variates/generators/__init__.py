"""
Generators subpackage

Variate generators and array samplers built on a uniform source:

- discrete generators (:mod:`.discrete`);
- transform-based continuous generators (:mod:`.continuous`);
- rejection-based continuous generators (:mod:`.rejection`);
- finite-sequence samplers (:mod:`.arrays`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .arrays import (
    sample_with_probabilities,
    sample_with_replacement,
    sample_with_weights,
    sample_without_replacement,
)
from .continuous import (
    continuous_uniform,
    continuous_uniform_sample,
    exponential,
    exponential_sample,
    log_normal,
    log_normal_sample,
    normal,
    normal_sample,
    pareto,
    pareto_sample,
    stable,
    stable_sample,
    weibull,
    weibull_sample,
)
from .discrete import (
    PoissonPerformanceWarning,
    bernoulli,
    binomial_sample,
    coin_toss,
    discrete_uniform,
    discrete_uniform_sample,
    geometric,
    geometric_sample,
    poisson,
    poisson_sample,
)
from .rejection import beta, beta_envelope_bound, beta_sample, gamma, gamma_sample

__all__ = [
    # discrete
    "PoissonPerformanceWarning",
    "bernoulli",
    "binomial_sample",
    "coin_toss",
    "discrete_uniform",
    "discrete_uniform_sample",
    "geometric",
    "geometric_sample",
    "poisson",
    "poisson_sample",
    # continuous, transform-based
    "continuous_uniform",
    "continuous_uniform_sample",
    "exponential",
    "exponential_sample",
    "normal",
    "normal_sample",
    "log_normal",
    "log_normal_sample",
    "pareto",
    "pareto_sample",
    "weibull",
    "weibull_sample",
    "stable",
    "stable_sample",
    # continuous, rejection-based
    "beta",
    "beta_envelope_bound",
    "beta_sample",
    "gamma",
    "gamma_sample",
    # arrays
    "sample_with_replacement",
    "sample_without_replacement",
    "sample_with_weights",
    "sample_with_probabilities",
]
