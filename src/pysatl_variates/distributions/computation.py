"""
Characteristic callables.

A family member exposes its analytical moments as
:class:`AnalyticalComputation` objects: the closed-form function of the
family with the member's parameters already bound.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_variates.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Anything evaluating one named characteristic."""

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic.

    Parameters
    ----------
    target : str
        Characteristic name, e.g. ``"mean"``.
    func : Callable[[In, KwArg(Any)], Out]
        Function of the evaluation point; moments ignore it and are called
        with ``None``.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)
