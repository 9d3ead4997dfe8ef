"""
Process-wide register of the parametric families.

Families are looked up by :class:`~pysatl_variates.types.FamilyName` (or any
string for user-defined families). The register is a singleton; it is filled
by :func:`~pysatl_variates.families.configuration.configure_families_register`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import ClassVar

    from pysatl_variates.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """Singleton mapping family names to :class:`ParametricFamily` objects."""

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    def __iter__(self) -> Iterator[ParametricFamily]:
        return iter(self._families.values())

    def __len__(self) -> int:
        return len(self._families)

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look a family up by name.

        Raises
        ------
        ValueError
            If the name is unknown.
        """
        families = cls()._families
        if name not in families:
            raise ValueError(f"No family {name} found in register; known: {sorted(families)}")
        return families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def names(cls) -> list[str]:
        return list(cls()._families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add a family under its own name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
