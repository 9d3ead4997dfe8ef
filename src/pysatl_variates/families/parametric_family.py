"""
Parametric families of distributions.

A :class:`ParametricFamily` ties together the parametrizations of one
distribution law, its analytical moments and the strategy drawing variates
from it. Calling a family builds a validated
:class:`~pysatl_variates.families.distribution.ParametricFamilyDistribution`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_variates.distributions.computation import AnalyticalComputation
from pysatl_variates.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_variates.distributions.strategies import SamplingStrategy
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]
    type CharacteristicForms = dict[ParametrizationName, ParametrizedFunction]


class ParametricFamily:
    """
    Distribution law with named parametrizations.

    Parameters
    ----------
    name : str
        Family name, unique in :class:`ParametricFamilyRegister`.
    distr_type : DistributionType
        Type shared by all members (continuous or discrete, univariate).
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization
        handed to the sampling strategy.
    distr_characteristics : dict
        Characteristic name mapped either to a callable
        ``f(parameters, value)`` written against the base parametrization,
        or to a dict of such callables keyed by parametrization name.
    sampling_strategy : SamplingStrategy
        Strategy drawing variates for members of the family.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName, CharacteristicForms | ParametrizedFunction
        ],
        sampling_strategy: SamplingStrategy,
    ):
        self._name = name
        self.distr_type = distr_type
        self.sampling_strategy = sampling_strategy
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = distr_parametrizations[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics: dict[GenericCharacteristicName, CharacteristicForms] = {}
        for characteristic, forms in distr_characteristics.items():
            if not isinstance(forms, dict):
                forms = {self.base_parametrization_name: forms}
            self.distr_characteristics[characteristic] = forms

    def __repr__(self) -> str:
        return f"ParametricFamily({self._name!r}, parametrizations={self.parametrization_names})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If the base parametrization has not been declared yet.
        """
        cls = self._parametrizations.get(self.base_parametrization_name)
        if cls is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' of "
                f"{self._name} is not registered."
            )
        return cls

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """Attach a parametrization class; names must be unique."""
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered in {self._name}.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert ``parameters`` to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def characteristics_for(
        self, parameters: Parametrization, base_parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Bind every known characteristic to concrete parameter values.

        A form written for the caller's own parametrization wins; otherwise
        the base form is evaluated on ``base_parameters``.
        """
        bound: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        for characteristic, forms in self.distr_characteristics.items():
            if parameters.name in forms:
                func = partial(forms[parameters.name], parameters)
            elif self.base_parametrization_name in forms:
                func = partial(forms[self.base_parametrization_name], base_parameters)
            else:
                continue
            bound[characteristic] = AnalyticalComputation(target=characteristic, func=func)
        return bound

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Build a family member from parameter values.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in; the base one by default.
        **parameters_values
            Field values of that parametrization.

        Returns
        -------
        ParametricFamilyDistribution
            Member whose sampling uses the base parameters.

        Raises
        ------
        KeyError
            If the parametrization name is unknown.
        InvalidParameter
            If the values, or their base conversion, violate a constraint.
        """
        if parametrization_name is None:
            cls = self.base
        else:
            cls = self._parametrizations[parametrization_name]
        parameters = cls(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        if base_parameters is not parameters:
            base_parameters.validate()
        return ParametricFamilyDistribution(self, self.distr_type, parameters, base_parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Method form of :func:`~pysatl_variates.families.parametrizations.parametrization`."""
        from pysatl_variates.families.parametrizations import parametrization as _register

        return _register(family=self, name=name)

    __call__ = distribution
