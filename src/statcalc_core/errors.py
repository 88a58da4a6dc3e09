"""
Error taxonomy of the calculation boundary.

Validation and calculation failures are reported as values carrying one of
the :class:`ErrorKind` members; :class:`ParameterValidationError` is the
exception form for callers who prefer raising.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from statcalc_core.validation import ValidationOutcome


class ErrorKind(StrEnum):
    """
    Failure categories reported by the validator and the orchestrator.

    Attributes
    ----------
    INVALID_DISTRIBUTION_KIND : str
        The requested kind is not one of the supported distributions.
    INVALID_PARAMETER_COUNT : str
        Wrong number of parameters for the kind.
    PARAMETER_OUT_OF_RANGE : str
        A parameter is non-finite or outside its registered range.
    MATHEMATICAL_CONSTRAINT_VIOLATION : str
        Parameters are individually in range but jointly inadmissible.
    INVALID_INPUT_VALUE : str
        The evaluation point is not acceptable for the kind.
    CALCULATION_FAILED : str
        Evaluation produced a non-finite result.
    """

    INVALID_DISTRIBUTION_KIND = "invalid_distribution_kind"
    INVALID_PARAMETER_COUNT = "invalid_parameter_count"
    PARAMETER_OUT_OF_RANGE = "parameter_out_of_range"
    MATHEMATICAL_CONSTRAINT_VIOLATION = "mathematical_constraint_violation"
    INVALID_INPUT_VALUE = "invalid_input_value"
    CALCULATION_FAILED = "calculation_failed"

    @property
    def message(self) -> str:
        """Fixed human-readable message of the failure."""
        return _MESSAGES[self]

    @property
    def hint(self) -> str:
        """Short advice to show to an end user."""
        return _HINTS[self]

    @property
    def is_validation_error(self) -> bool:
        """Whether the failure is detected before evaluation."""
        return self is not ErrorKind.CALCULATION_FAILED


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_DISTRIBUTION_KIND: "Invalid distribution type",
    ErrorKind.INVALID_PARAMETER_COUNT: "Invalid parameter count",
    ErrorKind.PARAMETER_OUT_OF_RANGE: "Parameter out of valid range",
    ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION: "Mathematical constraint error",
    ErrorKind.INVALID_INPUT_VALUE: "Invalid input value",
    ErrorKind.CALCULATION_FAILED: "Calculation failed",
}

_HINTS: dict[ErrorKind, str] = {
    ErrorKind.INVALID_DISTRIBUTION_KIND: "Please select a valid distribution",
    ErrorKind.INVALID_PARAMETER_COUNT: "Please check parameter values",
    ErrorKind.PARAMETER_OUT_OF_RANGE: "Please check parameter values",
    ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION: "Please check parameter values",
    ErrorKind.INVALID_INPUT_VALUE: "Please enter a valid input value",
    ErrorKind.CALCULATION_FAILED: "Calculation not possible with these values",
}


class ParameterValidationError(ValueError):
    """
    Raised by :meth:`ValidationOutcome.raise_for_error` for a failed check.

    Parameters
    ----------
    outcome : ValidationOutcome
        The failed validation outcome.
    """

    def __init__(self, outcome: ValidationOutcome):
        super().__init__(outcome.message)
        self.outcome = outcome

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.outcome.error_kind

    @property
    def suggested_value(self) -> float | None:
        return self.outcome.suggested_value


__all__ = ["ErrorKind", "ParameterValidationError"]
