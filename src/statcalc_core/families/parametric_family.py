"""
Parametric family definitions.

This module contains the class that binds one distribution kind to its
parametrization, characteristic functions, support and parameter ranges,
and enforces the evaluation policy shared by every family:

- invalid parameters evaluate to NaN (``validate`` returns ``False``);
- a NaN argument evaluates to NaN;
- the density is ``0`` outside the support and at ``±inf``;
- the CDF is ``0`` below and ``1`` above the support, clipped to ``[0, 1]``;
- ``ppf`` rejects probabilities outside ``[0, 1]`` with ``ValueError``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import inspect
import math
from dataclasses import fields
from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np

from statcalc_core.distributions.computation import AnalyticalComputation
from statcalc_core.distributions.fitters import ppf_from_cdf_continuous, ppf_from_cdf_discrete
from statcalc_core.distributions.sampling import InverseTransformSamplingStrategy
from statcalc_core.distributions.support import ContinuousSupport, IntegerLatticeDiscreteSupport
from statcalc_core.families.distribution import ParametricFamilyDistribution
from statcalc_core.families.parametrizations import Parametrization
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    DistributionMetadata,
    Kind,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from typing import Any, TypeAlias

    from statcalc_core.distributions.sampling import SamplingStrategy
    from statcalc_core.distributions.support import Support
    from statcalc_core.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        Interval1D,
        Number,
        NumericArray,
    )

    ParametrizedFunction: TypeAlias = Callable[[Parametrization, Any], Any]
    SupportResolver: TypeAlias = Callable[[Parametrization], Support]
    ParameterArg: TypeAlias = Sequence[float] | Parametrization

_REQUIRED_CHARACTERISTICS = frozenset(
    {
        CharacteristicName.PDF,
        CharacteristicName.CDF,
        CharacteristicName.MEAN,
        CharacteristicName.VAR,
    }
)


def _check_probabilities(p: Number | NumericArray) -> None:
    arr = np.asarray(p, dtype=float)
    if np.any((arr < 0) | (arr > 1)):
        raise ValueError("Probability must be in [0, 1]")


def _apply(func: Callable[[float], float], x: Number | NumericArray) -> float | NumericArray:
    """
    Evaluate a scalar function on a scalar, or element by element on an array.

    Arrays go through ``np.vectorize``, which is a Python-level loop over the
    elements rather than a compiled kernel; the result keeps the input shape.
    """
    if np.ndim(x) == 0:
        return func(float(cast(float, x)))
    arr = np.asarray(x, dtype=float)
    return cast("NumericArray", np.vectorize(func, otypes=[float])(arr))


class ParametricFamily:
    """
    A family of distributions of one kind.

    Characteristic functions are scalar callables ``f(parameters, x)``
    receiving a validated parametrization instance; the family takes care
    of parameter checking, support handling and array evaluation.

    Parameters
    ----------
    kind : DistributionKind
        Kind this family implements.
    name : str
        Human-readable name of the distribution.
    distr_type : EuclideanDistributionType
        Univariate continuous or discrete type.
    parameter_ranges : Mapping[str, Interval1D]
        Ordered mapping from public parameter names to their admissible
        ranges; order matches the parametrization fields.
    distr_characteristics : Mapping[str, Callable]
        Mapping from characteristic names to computation functions. ``pdf``,
        ``cdf``, ``mean`` and ``var`` are required; ``ppf`` falls back to a
        numerical inversion of the CDF when absent.
    support_by_parametrization : Callable[[Parametrization], Support]
        Function that returns support for given parameters.
    description : str, optional
        Documentation of the distribution.
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling from distributions.
    """

    def __init__(
        self,
        kind: DistributionKind,
        name: str,
        distr_type: EuclideanDistributionType,
        parameter_ranges: Mapping[str, Interval1D],
        distr_characteristics: Mapping[GenericCharacteristicName, ParametrizedFunction],
        support_by_parametrization: SupportResolver,
        description: str = "",
        sampling_strategy: SamplingStrategy | None = None,
    ):
        missing = _REQUIRED_CHARACTERISTICS - set(distr_characteristics)
        if missing:
            raise ValueError(
                f"Family '{name}' lacks required characteristics: {sorted(missing)}"
            )

        self._kind = DistributionKind(kind)
        self._name = name
        self._distr_type = distr_type
        self._support_resolver = support_by_parametrization
        self.distr_characteristics: dict[GenericCharacteristicName, ParametrizedFunction] = dict(
            distr_characteristics
        )
        self.sampling_strategy = (
            InverseTransformSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self._parametrization: type[Parametrization] | None = None
        self._metadata = DistributionMetadata(
            kind=self._kind,
            name=name,
            parameter_names=tuple(parameter_ranges),
            parameter_ranges=tuple(parameter_ranges.values()),
            category=distr_type.kind,
            description=inspect.cleandoc(description),
        )
        self.__doc__ = self._metadata.description or None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind.name}, name={self._name!r})"

    @property
    def kind(self) -> DistributionKind:
        """Get the distribution kind."""
        return self._kind

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._distr_type

    @property
    def category(self) -> Kind:
        """Continuous or discrete."""
        return self._distr_type.kind

    @property
    def is_discrete(self) -> bool:
        return self.category == Kind.DISCRETE

    @property
    def metadata(self) -> DistributionMetadata:
        """Get the static metadata of this family."""
        return self._metadata

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return self._metadata.parameter_names

    @property
    def parameter_ranges(self) -> tuple[Interval1D, ...]:
        return self._metadata.parameter_ranges

    @property
    def parameter_count(self) -> int:
        return self._metadata.parameter_count

    @property
    def description(self) -> str:
        return self._metadata.description

    @property
    def support_resolver(self) -> SupportResolver:
        """Get the support resolver function."""
        return self._support_resolver

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the parametrization class.

        Raises
        ------
        ValueError
            If no parametrization is registered.
        """
        if self._parametrization is None:
            raise ValueError(f"Parametrization of family '{self._name}' is not registered.")
        return self._parametrization

    def register_parametrization(self, parametrization_class: type[Parametrization]) -> None:
        """
        Register the parametrization class.

        Raises
        ------
        ValueError
            If a parametrization is already registered or its field count
            does not match the declared parameters.
        """
        if self._parametrization is not None:
            raise ValueError(f"Family '{self._name}' already has a parametrization.")
        field_count = len(fields(parametrization_class))  # type: ignore[arg-type]
        if field_count != self.parameter_count:
            raise ValueError(
                f"Parametrization of '{self._name}' has {field_count} fields, "
                f"expected {self.parameter_count}."
            )
        self._parametrization = parametrization_class

    # ------------------------------------------------------------------
    # parameter handling

    def _coerce_parameters(self, params: ParameterArg) -> Parametrization | None:
        """Build a parametrization from raw values, or ``None`` if invalid."""
        if isinstance(params, Parametrization):
            if not isinstance(params, self.base):
                return None
            return params if params.is_valid else None

        values = tuple(params)
        if len(values) != self.parameter_count:
            return None
        try:
            numbers = tuple(float(v) for v in values)
        except (TypeError, ValueError):
            return None
        if not all(math.isfinite(v) for v in numbers):
            return None

        parameters = self.base(*numbers)
        return parameters if parameters.is_valid else None

    def validate(self, params: ParameterArg) -> bool:
        """
        Check parameter count, finiteness and the family constraints.

        Parameters
        ----------
        params : Sequence[float] or Parametrization
            Positional parameter values.

        Returns
        -------
        bool
            ``True`` when the parameters describe a valid distribution.
        """
        return self._coerce_parameters(params) is not None

    def violated_constraints(self, params: Sequence[float]) -> list[str]:
        """
        Describe why a parameter set is rejected.

        Returns
        -------
        list[str]
            Descriptions of the failed checks; empty for valid parameters.
        """
        values = tuple(params)
        if len(values) != self.parameter_count:
            return [f"expected {self.parameter_count} parameters, got {len(values)}"]
        if not all(math.isfinite(float(v)) for v in values):
            return ["parameters must be finite"]
        parameters = self.base(*(float(v) for v in values))
        return [c.description for c in parameters.violated_constraints()]

    # ------------------------------------------------------------------
    # scalar evaluation on validated parameters

    def _characteristic(self, name: GenericCharacteristicName) -> ParametrizedFunction:
        return self.distr_characteristics[name]

    def _pdf_at(self, parameters: Parametrization, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if math.isinf(x) or not self._support_resolver(parameters).contains(x):
            return 0.0
        return float(self._characteristic(CharacteristicName.PDF)(parameters, x))

    def _cdf_at(self, parameters: Parametrization, x: float) -> float:
        if math.isnan(x):
            return math.nan
        lower, upper = self._support_resolver(parameters).bounds
        if self.is_discrete:
            if x < lower:
                return 0.0
            if x >= upper:
                return 1.0
            x = float(math.floor(x))
        else:
            if x <= lower:
                return 0.0
            if x >= upper:
                return 1.0

        value = float(self._characteristic(CharacteristicName.CDF)(parameters, x))
        if math.isfinite(value):
            value = min(max(value, 0.0), 1.0)
        return value

    def _ppf_at(self, parameters: Parametrization, q: float) -> float:
        if math.isnan(q):
            return math.nan
        support = self._support_resolver(parameters)
        lower, upper = support.bounds
        if q == 0.0:
            return lower
        if q == 1.0:
            return upper

        ppf = self.distr_characteristics.get(CharacteristicName.PPF)
        if ppf is not None:
            return float(ppf(parameters, q))

        cdf = partial(self._cdf_at, parameters)
        if self.is_discrete:
            return ppf_from_cdf_discrete(cdf, q, cast(IntegerLatticeDiscreteSupport, support))
        return ppf_from_cdf_continuous(cdf, q, cast(ContinuousSupport, support))

    def _moment_at(self, name: GenericCharacteristicName, parameters: Parametrization) -> float:
        return float(self._characteristic(name)(parameters, None))

    # ------------------------------------------------------------------
    # public uniform contract

    def _evaluate(
        self,
        func: Callable[[Parametrization, float], float],
        x: Number | NumericArray,
        params: ParameterArg,
    ) -> float | NumericArray:
        parameters = self._coerce_parameters(params)
        if parameters is None:
            return _apply(lambda _: math.nan, x)
        return _apply(partial(func, parameters), x)

    def pdf(self, x: Number | NumericArray, params: ParameterArg) -> float | NumericArray:
        """
        Probability density (continuous) or mass (discrete) function.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) of evaluation.
        params : Sequence[float] or Parametrization
            Positional parameter values.

        Returns
        -------
        float or NumericArray
            Density or mass at ``x``; NaN for invalid parameters.
        """
        return self._evaluate(self._pdf_at, x, params)

    def cdf(self, x: Number | NumericArray, params: ParameterArg) -> float | NumericArray:
        """
        Cumulative distribution function P(X <= x).

        Returns
        -------
        float or NumericArray
            Probabilities in ``[0, 1]``; NaN for invalid parameters.
        """
        return self._evaluate(self._cdf_at, x, params)

    def ppf(self, p: Number | NumericArray, params: ParameterArg) -> float | NumericArray:
        """
        Percent point function (inverse CDF).

        For discrete families the result is the smallest support point whose
        CDF reaches ``p``.

        Raises
        ------
        ValueError
            If probability is outside [0, 1].
        """
        _check_probabilities(p)
        return self._evaluate(self._ppf_at, p, params)

    def mean(self, params: ParameterArg) -> float:
        """Mean of the distribution; NaN for invalid parameters."""
        parameters = self._coerce_parameters(params)
        if parameters is None:
            return math.nan
        return self._moment_at(CharacteristicName.MEAN, parameters)

    def variance(self, params: ParameterArg) -> float:
        """Variance of the distribution; NaN for invalid parameters."""
        parameters = self._coerce_parameters(params)
        if parameters is None:
            return math.nan
        return self._moment_at(CharacteristicName.VAR, parameters)

    def support(self, params: ParameterArg) -> Support | None:
        """Support for the given parameters, ``None`` if they are invalid."""
        parameters = self._coerce_parameters(params)
        if parameters is None:
            return None
        return self._support_resolver(parameters)

    # ------------------------------------------------------------------
    # distribution instances

    def _evaluate_bound(
        self,
        func: Callable[[Parametrization, float], float],
        parameters: Parametrization,
        data: Number | NumericArray,
        **options: Any,
    ) -> float | NumericArray:
        return _apply(partial(func, parameters), data)

    def _ppf_bound(
        self, parameters: Parametrization, p: Number | NumericArray, **options: Any
    ) -> float | NumericArray:
        _check_probabilities(p)
        return _apply(partial(self._ppf_at, parameters), p)

    def _moment_bound(
        self,
        name: GenericCharacteristicName,
        parameters: Parametrization,
        _data: Any = None,
        **options: Any,
    ) -> float:
        return self._moment_at(name, parameters)

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every characteristic of the family to ``parameters``."""
        funcs: dict[GenericCharacteristicName, Callable[..., Any]] = {
            CharacteristicName.PDF: partial(self._evaluate_bound, self._pdf_at, parameters),
            CharacteristicName.CDF: partial(self._evaluate_bound, self._cdf_at, parameters),
            CharacteristicName.PPF: partial(self._ppf_bound, parameters),
            CharacteristicName.MEAN: partial(
                self._moment_bound, CharacteristicName.MEAN, parameters
            ),
            CharacteristicName.VAR: partial(
                self._moment_bound, CharacteristicName.VAR, parameters
            ),
        }
        return {
            name: AnalyticalComputation(target=name, func=func) for name, func in funcs.items()
        }

    def distribution(self, *values: float, **named_values: float) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        *values : float
            Positional parameter values.
        **named_values : float
            Parameter values by parametrization field name.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        TypeError
            If parameters are missing or unknown.
        ValueError
            If parameters don't satisfy constraints.
        """
        parameters = self.base(*values, **named_values)
        parameters.validate()
        return ParametricFamilyDistribution(
            family=self,
            parameters=parameters,
            _support=self._support_resolver(parameters),
        )

    __call__ = distribution


__all__ = ["ParametricFamily"]
