__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from statcalc_core.errors import ErrorKind, ParameterValidationError
from statcalc_core.registry import configure_registry
from statcalc_core.types import DistributionKind
from statcalc_core.validation import (
    VALID,
    ValidationOutcome,
    suggest_parameter_value,
    validate_mathematical_constraints,
    validate_parameter_count,
    validate_parameter_range,
    validate_parameters,
    validate_single_parameter,
)


class TestValidationOutcome:
    def test_valid_outcome(self):
        assert VALID.is_valid
        assert not VALID.has_suggestion
        VALID.raise_for_error()

    def test_raise_for_error_carries_outcome(self):
        outcome = ValidationOutcome(
            error_kind=ErrorKind.PARAMETER_OUT_OF_RANGE,
            parameter_index=1,
            message="bad value",
            suggested_value=1.0,
        )

        with pytest.raises(ParameterValidationError, match="bad value") as exc_info:
            outcome.raise_for_error()

        assert exc_info.value.outcome is outcome
        assert exc_info.value.error_kind == ErrorKind.PARAMETER_OUT_OF_RANGE
        assert exc_info.value.suggested_value == 1.0


class TestParameterCount:
    def test_matching_count(self):
        assert validate_parameter_count(DistributionKind.NORMAL, 2).is_valid

    def test_wrong_count(self):
        outcome = validate_parameter_count(DistributionKind.NORMAL, 3)

        assert outcome.error_kind == ErrorKind.INVALID_PARAMETER_COUNT
        assert outcome.message == "Normal distribution requires 2 parameters, but 3 provided"

    def test_unknown_kind(self):
        outcome = validate_parameter_count(99, 1)

        assert outcome.error_kind == ErrorKind.INVALID_DISTRIBUTION_KIND


class TestParameterRange:
    def test_value_inside_range(self):
        assert validate_parameter_range(DistributionKind.BINOMIAL, 1, 0.5).is_valid

    def test_closed_bounds_accepted(self):
        assert validate_parameter_range(DistributionKind.BINOMIAL, 1, 0.0).is_valid
        assert validate_parameter_range(DistributionKind.BINOMIAL, 1, 1.0).is_valid

    def test_value_above_range(self):
        outcome = validate_parameter_range(DistributionKind.BINOMIAL, 1, 1.5)

        assert outcome.error_kind == ErrorKind.PARAMETER_OUT_OF_RANGE
        assert outcome.parameter_index == 1
        assert outcome.suggested_value == 1.0
        assert outcome.message == (
            "Binomial parameter 'probability' (1.500) must be between 0.000 and 1.000"
        )

    def test_value_below_range(self):
        outcome = validate_parameter_range(DistributionKind.NORMAL, 1, -2.0)

        assert outcome.error_kind == ErrorKind.PARAMETER_OUT_OF_RANGE
        assert outcome.suggested_value == pytest.approx(0.001)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_value(self, value):
        outcome = validate_parameter_range(DistributionKind.NORMAL, 0, value)

        assert outcome.error_kind == ErrorKind.PARAMETER_OUT_OF_RANGE
        assert outcome.message == "Parameter value must be a finite number"
        assert not outcome.has_suggestion

    def test_bad_index_raises(self):
        with pytest.raises(IndexError):
            validate_parameter_range(DistributionKind.NORMAL, 5, 1.0)


class TestSingleParameter:
    def test_bad_index_reported(self):
        outcome = validate_single_parameter(DistributionKind.POISSON, 1, 1.0)

        assert outcome.error_kind == ErrorKind.INVALID_PARAMETER_COUNT
        assert outcome.message == "Parameter index 1 is invalid for distribution with 1 parameters"

    def test_delegates_to_range_check(self):
        outcome = validate_single_parameter(DistributionKind.POISSON, 0, 5000.0)

        assert outcome.error_kind == ErrorKind.PARAMETER_OUT_OF_RANGE
        assert outcome.suggested_value == 1000.0


class TestSuggestParameterValue:
    def test_clamps_to_nearest_bound(self):
        assert suggest_parameter_value(DistributionKind.GEOMETRIC, 0, 3.0) == 1.0
        assert suggest_parameter_value(DistributionKind.GEOMETRIC, 0, -3.0) == 0.001

    def test_midpoint_for_value_inside_range(self):
        assert suggest_parameter_value(DistributionKind.UNIFORM, 0, 5.0) == 0.0

    def test_unknown_kind_or_index_returns_value(self):
        assert suggest_parameter_value(99, 0, 7.0) == 7.0
        assert suggest_parameter_value(DistributionKind.NORMAL, 4, 7.0) == 7.0


class TestMathematicalConstraints:
    def test_hypergeometric_success_states_exceed_population(self):
        outcome = validate_mathematical_constraints(DistributionKind.HYPERGEOMETRIC, [10, 12, 5])

        assert outcome.error_kind == ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION
        assert outcome.parameter_index == 1
        assert outcome.suggested_value == 10
        assert outcome.message.startswith("Hypergeometric: ")

    def test_hypergeometric_sample_exceeds_population(self):
        outcome = validate_mathematical_constraints(DistributionKind.HYPERGEOMETRIC, [10, 4, 15])

        assert outcome.parameter_index == 2
        assert outcome.suggested_value == 10

    def test_hypergeometric_non_integer(self):
        outcome = validate_mathematical_constraints(DistributionKind.HYPERGEOMETRIC, [10, 4.5, 3])

        assert outcome.parameter_index == 1
        assert outcome.suggested_value == 5.0

    def test_f_degrees_of_freedom(self):
        outcome = validate_mathematical_constraints(DistributionKind.F, [3.0, 0.5])

        assert outcome.parameter_index == 1
        assert outcome.suggested_value == 1.0

    @pytest.mark.parametrize(
        "kind", [DistributionKind.BINOMIAL, DistributionKind.NEGATIVE_BINOMIAL]
    )
    def test_trial_count_must_be_integer(self, kind):
        outcome = validate_mathematical_constraints(kind, [2.5, 0.4])

        assert outcome.error_kind == ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION
        assert outcome.parameter_index == 0
        assert outcome.suggested_value == 3.0

    def test_uniform_bounds_order(self):
        outcome = validate_mathematical_constraints(DistributionKind.UNIFORM, [3.0, 1.0])

        assert outcome.error_kind == ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION
        assert outcome.parameter_index == 1
        assert not outcome.has_suggestion

    def test_kind_without_constraints(self):
        assert validate_mathematical_constraints(DistributionKind.NORMAL, [0.0, 1.0]).is_valid


class TestValidateParameters:
    def test_valid_parameters(self):
        assert validate_parameters(DistributionKind.HYPERGEOMETRIC, [50, 10, 5]) is VALID

    def test_probability_out_of_range_suggests_bound(self):
        outcome = validate_parameters(DistributionKind.BINOMIAL, [10, 1.5])

        assert outcome.error_kind == ErrorKind.PARAMETER_OUT_OF_RANGE
        assert outcome.suggested_value == 1.0

    def test_count_checked_before_ranges(self):
        outcome = validate_parameters(DistributionKind.BINOMIAL, [-10])

        assert outcome.error_kind == ErrorKind.INVALID_PARAMETER_COUNT

    def test_ranges_checked_before_constraints(self):
        outcome = validate_parameters(DistributionKind.HYPERGEOMETRIC, [10, 12, 0.5])

        assert outcome.error_kind == ErrorKind.PARAMETER_OUT_OF_RANGE
        assert outcome.parameter_index == 2

    def test_constraints_checked_last(self):
        outcome = validate_parameters(DistributionKind.HYPERGEOMETRIC, [10, 12, 5])

        assert outcome.error_kind == ErrorKind.MATHEMATICAL_CONSTRAINT_VIOLATION

    @pytest.mark.parametrize("kind", ["binomial", 7, DistributionKind.BINOMIAL])
    def test_kind_forms(self, kind):
        assert validate_parameters(kind, [10, 0.3]).is_valid

    def test_unknown_kind(self):
        outcome = validate_parameters("cauchy", [0.0, 1.0])

        assert outcome.error_kind == ErrorKind.INVALID_DISTRIBUTION_KIND

    def test_explicit_registry(self):
        registry = configure_registry()

        assert validate_parameters(DistributionKind.POISSON, [2.5], registry=registry).is_valid
