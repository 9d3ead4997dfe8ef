"""
PySATL Variates
===============

Pseudorandom variate generation: a pluggable uniform source, discrete and
continuous generators (transform and rejection based), array sampling
utilities, and parametric distribution families built on top of them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .config import SamplingConfig, get_config, reset_config, set_config
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .generators import *
from .generators import __all__ as _generators_all
from .random import *
from .random import __all__ as _random_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-variates")
__all__ = [
    "__version__",
    "SamplingConfig",
    "get_config",
    "set_config",
    "reset_config",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_generators_all,
    *_random_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _generators_all
del _random_all
del _types_all
