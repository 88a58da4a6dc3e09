"""
Parameter Validation
====================

Two-stage checking of distribution parameters against the registry:

1. structural checks: parameter count, finiteness and the registered range
   of every slot;
2. mathematical checks: cross-parameter constraints of particular kinds
   (e.g. a hypergeometric sample cannot exceed the population).

Every check returns a :class:`ValidationOutcome` instead of raising, so the
result can be shown to a user together with a suggested replacement value.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from statcalc_core.errors import ErrorKind, ParameterValidationError
from statcalc_core.registry import configure_registry, resolve_kind
from statcalc_core.types import DistributionKind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TypeAlias

    from statcalc_core.registry import DistributionRegistry

    KindArg: TypeAlias = DistributionKind | int | str


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """
    Result of a validation check.

    Parameters
    ----------
    error_kind : ErrorKind or None
        Failure category, ``None`` when the check passed.
    parameter_index : int or None
        Position of the offending parameter, if a single one is to blame.
    message : str
        Human-readable explanation, empty on success.
    suggested_value : float or None
        Replacement value for the offending parameter, if one exists.
    """

    error_kind: ErrorKind | None = None
    parameter_index: int | None = None
    message: str = ""
    suggested_value: float | None = None

    @property
    def is_valid(self) -> bool:
        return self.error_kind is None

    @property
    def has_suggestion(self) -> bool:
        return self.suggested_value is not None

    def raise_for_error(self) -> None:
        """
        Raise if the check failed.

        Raises
        ------
        ParameterValidationError
            If :attr:`is_valid` is ``False``.
        """
        if not self.is_valid:
            raise ParameterValidationError(self)


VALID = ValidationOutcome()
"""Outcome of a passed check."""


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def _as_float(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan


def _registry(registry: DistributionRegistry | None) -> DistributionRegistry:
    return configure_registry() if registry is None else registry


def _unknown_kind(kind: object) -> ValidationOutcome:
    return ValidationOutcome(
        error_kind=ErrorKind.INVALID_DISTRIBUTION_KIND,
        message=f"Unknown distribution type: {kind!r}",
    )


def _constraint_error(
    registry: DistributionRegistry,
    kind: DistributionKind,
    description: str,
    index: int | None,
    suggested_value: float | None = None,
) -> ValidationOutcome:
    return ValidationOutcome(
        error_kind=ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION,
        parameter_index=index,
        message=f"{registry.name(kind)}: {description}",
        suggested_value=suggested_value,
    )


def validate_parameter_count(
    kind: KindArg, count: int, *, registry: DistributionRegistry | None = None
) -> ValidationOutcome:
    """
    Check that ``count`` parameters is the arity of ``kind``.
    """
    resolved = resolve_kind(kind)
    if resolved is None:
        return _unknown_kind(kind)
    registry = _registry(registry)

    expected = registry.parameter_count(resolved)
    if count != expected:
        return ValidationOutcome(
            error_kind=ErrorKind.INVALID_PARAMETER_COUNT,
            message=(
                f"{registry.name(resolved)} distribution requires {expected} parameters, "
                f"but {count} provided"
            ),
        )
    return VALID


def suggest_parameter_value(
    kind: KindArg, index: int, value: float, *, registry: DistributionRegistry | None = None
) -> float:
    """
    Propose a replacement for a rejected parameter value.

    Out-of-range values are moved to the nearest bound of the registered
    range; a value already inside the range gets the midpoint of the range.

    Parameters
    ----------
    kind : DistributionKind, int or str
        Distribution kind.
    index : int
        Parameter slot.
    value : float
        The rejected value.

    Returns
    -------
    float
        Suggested value; ``value`` itself when the kind or slot is unknown.
    """
    resolved = resolve_kind(kind)
    if resolved is None:
        return value
    registry = _registry(registry)
    if not 0 <= index < registry.parameter_count(resolved):
        return value

    interval = registry.parameter_range(resolved, index)
    if value < interval.left or value > interval.right:
        return interval.clamp(value)
    return (interval.left + interval.right) / 2.0


def validate_parameter_range(
    kind: KindArg, index: int, value: float, *, registry: DistributionRegistry | None = None
) -> ValidationOutcome:
    """
    Check one parameter value against its registered range.

    Non-finite values are rejected without a suggestion; values outside the
    closed range are rejected with the nearest bound as suggestion.

    Raises
    ------
    IndexError
        If ``index`` is not a parameter slot of the kind.
    """
    resolved = resolve_kind(kind)
    if resolved is None:
        return _unknown_kind(kind)
    registry = _registry(registry)

    value = _as_float(value)
    if not math.isfinite(value):
        return ValidationOutcome(
            error_kind=ErrorKind.PARAMETER_OUT_OF_RANGE,
            parameter_index=index,
            message="Parameter value must be a finite number",
        )

    interval = registry.parameter_range(resolved, index)
    if interval.left <= value <= interval.right:
        return VALID

    name = registry.parameter_names(resolved)[index]
    return ValidationOutcome(
        error_kind=ErrorKind.PARAMETER_OUT_OF_RANGE,
        parameter_index=index,
        message=(
            f"{registry.name(resolved)} parameter '{name}' ({value:.3f}) "
            f"must be between {interval.left:.3f} and {interval.right:.3f}"
        ),
        suggested_value=suggest_parameter_value(resolved, index, value, registry=registry),
    )


def validate_single_parameter(
    kind: KindArg, index: int, value: float, *, registry: DistributionRegistry | None = None
) -> ValidationOutcome:
    """
    Check the slot index and then the range of one parameter.
    """
    resolved = resolve_kind(kind)
    if resolved is None:
        return _unknown_kind(kind)
    registry = _registry(registry)

    count = registry.parameter_count(resolved)
    if not 0 <= index < count:
        return ValidationOutcome(
            error_kind=ErrorKind.INVALID_PARAMETER_COUNT,
            message=(
                f"Parameter index {index} is invalid for distribution "
                f"with {count} parameters"
            ),
        )
    return validate_parameter_range(resolved, index, value, registry=registry)


def _hypergeometric_constraints(
    registry: DistributionRegistry, params: Sequence[float]
) -> ValidationOutcome:
    kind = DistributionKind.HYPERGEOMETRIC
    population, success_states, sample_size = params[:3]

    if success_states > population:
        return _constraint_error(
            registry, kind, "Success states cannot exceed population size", 1, population
        )
    if sample_size > population:
        return _constraint_error(
            registry, kind, "Sample size cannot exceed population size", 2, population
        )
    for index, value in enumerate(params[:3]):
        if value != math.floor(value):
            return _constraint_error(
                registry,
                kind,
                "Population, success states and sample size must be integers",
                index,
                _round_half_up(value),
            )
    return VALID


def _degrees_of_freedom_constraints(
    registry: DistributionRegistry, params: Sequence[float]
) -> ValidationOutcome:
    numerator, denominator = params[:2]
    if numerator < 1.0 or denominator < 1.0:
        return _constraint_error(
            registry,
            DistributionKind.F,
            "Degrees of freedom must be at least 1",
            0 if numerator < 1.0 else 1,
            1.0,
        )
    return VALID


def _trial_count_constraints(
    registry: DistributionRegistry, kind: DistributionKind, params: Sequence[float]
) -> ValidationOutcome:
    n = params[0]
    if n < 1.0 or n != math.floor(n):
        return _constraint_error(
            registry,
            kind,
            "Number of trials must be a positive integer",
            0,
            _round_half_up(max(1.0, n)),
        )
    return VALID


def _uniform_constraints(
    registry: DistributionRegistry, params: Sequence[float]
) -> ValidationOutcome:
    a, b = params[:2]
    if a >= b:
        return _constraint_error(
            registry, DistributionKind.UNIFORM, "Lower bound must be less than upper bound", 1
        )
    return VALID


def validate_mathematical_constraints(
    kind: KindArg, params: Sequence[float], *, registry: DistributionRegistry | None = None
) -> ValidationOutcome:
    """
    Check cross-parameter constraints of ``kind``.

    Assumes the structural checks passed; kinds without such constraints
    always pass.

    Parameters
    ----------
    kind : DistributionKind, int or str
        Distribution kind.
    params : Sequence[float]
        Positional parameter values.

    Returns
    -------
    ValidationOutcome
        ``MATHEMATICAL_CONSTRAINT_VIOLATION`` with the offending slot and,
        where one exists, a suggested replacement.
    """
    resolved = resolve_kind(kind)
    if resolved is None:
        return _unknown_kind(kind)
    registry = _registry(registry)
    values = tuple(_as_float(v) for v in params)
    if len(values) < registry.parameter_count(resolved):
        return VALID

    match resolved:
        case DistributionKind.HYPERGEOMETRIC:
            return _hypergeometric_constraints(registry, values)
        case DistributionKind.F:
            return _degrees_of_freedom_constraints(registry, values)
        case DistributionKind.BINOMIAL | DistributionKind.NEGATIVE_BINOMIAL:
            return _trial_count_constraints(registry, resolved, values)
        case DistributionKind.UNIFORM:
            return _uniform_constraints(registry, values)
        case _:
            return VALID


def validate_parameters(
    kind: KindArg, params: Sequence[float], *, registry: DistributionRegistry | None = None
) -> ValidationOutcome:
    """
    Run every parameter check, stopping at the first failure.

    The order is: parameter count, range of each slot in order, then the
    mathematical constraints.

    Examples
    --------
    >>> validate_parameters(DistributionKind.BINOMIAL, [10, 1.5]).suggested_value
    1.0
    """
    resolved = resolve_kind(kind)
    if resolved is None:
        return _unknown_kind(kind)
    registry = _registry(registry)

    values = tuple(params)
    outcome = validate_parameter_count(resolved, len(values), registry=registry)
    if not outcome.is_valid:
        return outcome

    for index, value in enumerate(values):
        outcome = validate_parameter_range(resolved, index, value, registry=registry)
        if not outcome.is_valid:
            return outcome

    return validate_mathematical_constraints(resolved, values, registry=registry)


__all__ = [
    "VALID",
    "ValidationOutcome",
    "suggest_parameter_value",
    "validate_mathematical_constraints",
    "validate_parameter_count",
    "validate_parameter_range",
    "validate_parameters",
    "validate_single_parameter",
]
