"""
Parameter records of the distribution families.

A parametrization is a frozen dataclass holding the parameter values of one
family member together with the predicates those values must satisfy.
Families may offer several parametrizations; every one of them converts to
the family's base parametrization, which is the form the bulk generators
consume.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_variates.errors import InvalidParameter
from pysatl_variates.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_variates.families.parametric_family import ParametricFamily

_CONSTRAINT_FLAG = "__is_constraint"
_CONSTRAINT_DESCRIPTION = "__constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate over a parametrization instance.

    Parameters
    ----------
    description : str
        Text of the condition, reported when it fails (``"p in [0, 1]"``).
    check : Callable[[Any], bool]
        Predicate evaluated on the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of the parameter records.

    Subclasses are declared with :func:`parametrization`, which turns them
    into frozen slotted dataclasses and attaches the family, the name and
    the collected constraints.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name under which the parametrization is registered."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Evaluate every constraint, stopping at the first one that fails.

        Raises
        ------
        InvalidParameter
            Names the failed constraint and the offending values.
        """
        for item in self._constraints:
            if not item.check(self):
                raise InvalidParameter(
                    f'Constraint "{item.description}" does not hold for '
                    f"{self.__class__.__family__.name}/{self.name} {self.parameters}"
                )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Return the same family member in the base parametrization.

        The base parametrization itself keeps this identity implementation;
        alternative parametrizations override it.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method of a parametrization as a constraint.

    Parameters
    ----------
    description : str
        Text of the condition, used in the error raised on failure.
    """

    def mark(func: Callable[P, bool]) -> Callable[P, bool]:
        setattr(func, _CONSTRAINT_FLAG, True)
        setattr(func, _CONSTRAINT_DESCRIPTION, description)
        return func

    return mark


def _is_marked(obj: object) -> bool:
    return bool(getattr(obj, _CONSTRAINT_FLAG, False))


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if _is_marked(attr.__func__):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and _is_marked(attr):
            description = getattr(attr, _CONSTRAINT_DESCRIPTION, attr_name)
            collected.append(ParametrizationConstraint(description=description, check=attr))
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Register the decorated class as parametrization ``name`` of ``family``.

    Parameters
    ----------
    family : ParametricFamily
        Owner of the parametrization.
    name : str
        Registration name; must be unique within the family.

    Notes
    -----
    Classes that are not yet dataclasses become frozen slotted dataclasses.
    Methods decorated with :func:`constraint` are collected in definition
    order.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return register
