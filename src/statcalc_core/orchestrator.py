"""
Calculation Orchestrator
========================

Single entry point turning a calculation request into a result:

1. the kind is resolved;
2. the parameters are validated (registry ranges, cross-parameter
   constraints and the family's own constraints);
3. the input value is checked;
4. PDF/PMF and CDF are evaluated and checked for finiteness;
5. successful results are handed to an optional history recorder.

Failures are reported in the returned :class:`CalculationResult`, never
raised.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from statcalc_core.errors import ErrorKind
from statcalc_core.registry import configure_registry, resolve_kind
from statcalc_core.validation import ValidationOutcome, validate_parameters

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from statcalc_core.families.parametric_family import ParametricFamily
    from statcalc_core.registry import DistributionRegistry
    from statcalc_core.types import DistributionKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculationRequest:
    """
    One evaluation of a distribution at a point.

    Parameters
    ----------
    kind : DistributionKind, int or str
        Distribution kind, its index or its name.
    parameters : Sequence[float]
        Positional parameter values.
    input_value : float
        Evaluation point.
    """

    kind: DistributionKind | int | str
    parameters: Sequence[float]
    input_value: float


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    Outcome of a calculation request.

    Parameters
    ----------
    pdf : float
        PDF (continuous) or PMF (discrete) value; NaN on failure.
    cdf : float
        CDF value; NaN on failure.
    success : bool
        Whether both values were computed.
    error_message : str
        Fixed message of the error kind, empty on success.
    error_kind : ErrorKind or None
        Failure category, ``None`` on success.
    validation : ValidationOutcome or None
        Detailed outcome of the failed parameter check, if any.
    input_value : float
        Evaluation point of the request.
    """

    pdf: float = math.nan
    cdf: float = math.nan
    success: bool = False
    error_message: str = ""
    error_kind: ErrorKind | None = None
    validation: ValidationOutcome | None = None
    input_value: float = math.nan

    @classmethod
    def failure(
        cls,
        error_kind: ErrorKind,
        input_value: float = math.nan,
        validation: ValidationOutcome | None = None,
    ) -> CalculationResult:
        return cls(
            success=False,
            error_message=error_kind.message,
            error_kind=error_kind,
            validation=validation,
            input_value=input_value,
        )

    @classmethod
    def rejected(
        cls, outcome: ValidationOutcome, input_value: float = math.nan
    ) -> CalculationResult:
        """Failure carrying a parameter validation outcome."""
        return cls.failure(
            outcome.error_kind or ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION, input_value, outcome
        )

    @property
    def suggested_value(self) -> float | None:
        """Suggested replacement for the offending parameter, if any."""
        return None if self.validation is None else self.validation.suggested_value


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """A successful calculation."""

    kind: DistributionKind
    parameters: tuple[float, ...]
    input_value: float
    pdf: float
    cdf: float


@runtime_checkable
class HistoryRecorder(Protocol):
    """Collaborator receiving every successful calculation."""

    def record(self, entry: HistoryEntry) -> None: ...


@dataclass(slots=True)
class InMemoryHistory:
    """
    Bounded in-memory history; the oldest entries are dropped first.

    Parameters
    ----------
    maxlen : int, default=100
        Maximum number of kept entries.
    """

    maxlen: int = 100
    _entries: deque[HistoryEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.maxlen < 1:
            raise ValueError("History size must be positive")
        self._entries = deque(maxlen=self.maxlen)

    def record(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)


class CalculationOrchestrator:
    """
    Validate a request, evaluate the distribution and package the result.

    Parameters
    ----------
    registry : DistributionRegistry, optional
        Registry to dispatch through; the process-wide one by default.
    history : HistoryRecorder, optional
        Receives an entry for every successful calculation.
    """

    def __init__(
        self,
        registry: DistributionRegistry | None = None,
        history: HistoryRecorder | None = None,
    ):
        self._registry = registry
        self._history = history

    @property
    def registry(self) -> DistributionRegistry:
        if self._registry is None:
            self._registry = configure_registry()
        return self._registry

    @property
    def history(self) -> HistoryRecorder | None:
        return self._history

    def _check_input(self, family: ParametricFamily, x: float) -> bool:
        if not math.isfinite(x):
            return False
        if family.is_discrete:
            return x >= 0.0 and x == math.floor(x)
        return True

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        """
        Run one calculation.

        Parameters
        ----------
        request : CalculationRequest
            Kind, parameters and evaluation point.

        Returns
        -------
        CalculationResult
            Both values on success; otherwise the failure category with its
            message and, for parameter failures, the validation outcome.
        """
        kind = resolve_kind(request.kind)
        try:
            x = float(request.input_value)
        except (TypeError, ValueError):
            x = math.nan

        if kind is None:
            logger.debug("Rejected unknown distribution kind %r", request.kind)
            return CalculationResult.failure(ErrorKind.INVALID_DISTRIBUTION_KIND, x)

        family = self.registry.get(kind)
        parameters = tuple(request.parameters)

        outcome = validate_parameters(kind, parameters, registry=self.registry)
        if not outcome.is_valid:
            logger.debug("Rejected %s parameters %s: %s", family.name, parameters, outcome.message)
            return CalculationResult.rejected(outcome, x)

        violated = family.violated_constraints(parameters)
        if violated:
            outcome = ValidationOutcome(
                error_kind=ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION,
                message=f"{family.name}: {violated[0]}",
            )
            logger.debug("Rejected %s parameters %s: %s", family.name, parameters, violated)
            return CalculationResult.rejected(outcome, x)

        if not self._check_input(family, x):
            logger.debug("Rejected input value %r for %s", request.input_value, family.name)
            return CalculationResult.failure(ErrorKind.INVALID_INPUT_VALUE, x)

        values = tuple(float(v) for v in parameters)
        pdf = float(family.pdf(x, values))
        cdf = float(family.cdf(x, values))
        if not (math.isfinite(pdf) and math.isfinite(cdf)):
            logger.debug(
                "Calculation failed for %s%s at %r: pdf=%r, cdf=%r",
                family.name,
                values,
                x,
                pdf,
                cdf,
            )
            return CalculationResult.failure(ErrorKind.CALCULATION_FAILED, x)

        if self._history is not None:
            self._history.record(
                HistoryEntry(kind=kind, parameters=values, input_value=x, pdf=pdf, cdf=cdf)
            )
        return CalculationResult(pdf=pdf, cdf=cdf, success=True, input_value=x)


def calculate(
    kind: DistributionKind | int | str, parameters: Sequence[float], input_value: float
) -> CalculationResult:
    """
    Evaluate PDF/PMF and CDF of a distribution at one point.

    Examples
    --------
    >>> calculate("binomial", [10, 0.3], 5).pdf  # doctest: +ELLIPSIS
    0.10291...
    """
    return CalculationOrchestrator().calculate(
        CalculationRequest(kind=kind, parameters=parameters, input_value=input_value)
    )


def parse_input_value(text: str) -> float | None:
    """
    Parse a decimal number typed by a user.

    Surrounding whitespace is ignored; ``nan``, ``inf`` and overflowing
    literals are rejected.

    Returns
    -------
    float or None
        The value, or ``None`` when ``text`` is not a finite number.
    """
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _format_value(value: float) -> str:
    magnitude = abs(value)
    if (0.0 < magnitude < 1e-4) or magnitude >= 1e4:
        return f"{value:.2e}"
    return f"{value:.4f}"


def format_result(result: CalculationResult) -> str:
    """
    Render a result for display.

    Values use four decimals, or scientific notation when very small or very
    large; a failure renders as ``"Error: <message>"``.
    """
    if not result.success:
        return f"Error: {result.error_message}"
    return f"PDF: {_format_value(result.pdf)}\nCDF: {_format_value(result.cdf)}"


def error_message(kind: ErrorKind) -> str:
    """Fixed message of an error kind."""
    return ErrorKind(kind).message


def user_hint(kind: ErrorKind | None) -> str:
    """Advice to show to a user for an error kind."""
    if kind is None:
        return "An error occurred. Please try again"
    return ErrorKind(kind).hint


__all__ = [
    "CalculationOrchestrator",
    "CalculationRequest",
    "CalculationResult",
    "HistoryEntry",
    "HistoryRecorder",
    "InMemoryHistory",
    "calculate",
    "error_message",
    "format_result",
    "parse_input_value",
    "user_hint",
]
