from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import re
from importlib.metadata import version

from pysatl_variates import __version__

PEP440 = re.compile(r"^(\d+!)?\d+(\.\d+)*((a|b|rc)\d+)?(\.post\d+)?(\.dev\d+)?$")


def test_version_pep440() -> None:
    assert PEP440.match(__version__)


def test_version_comes_from_distribution_metadata() -> None:
    assert __version__ == version("pysatl-variates")
