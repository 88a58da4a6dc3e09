"""
Tests for the evaluation policy shared by every parametric family.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from statcalc_core.distributions.support import ContinuousSupport, IntegerLatticeDiscreteSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.registry import configure_registry
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    Kind,
    UnivariateContinuous,
)


class TestParametricFamily:
    """Uniform contract of pdf, cdf, ppf and moments."""

    def setup_method(self):
        self.registry = configure_registry()
        self.normal = self.registry.get(DistributionKind.NORMAL)
        self.binomial = self.registry.get(DistributionKind.BINOMIAL)
        self.exponential = self.registry.get(DistributionKind.EXPONENTIAL)

    def test_metadata(self):
        metadata = self.normal.metadata
        assert metadata.kind == DistributionKind.NORMAL
        assert metadata.name == "Normal"
        assert metadata.parameter_names == ("mean", "std_dev")
        assert metadata.parameter_count == 2
        assert metadata.category == Kind.CONTINUOUS
        assert not metadata.is_discrete
        assert metadata.parameter_ranges[1] == Interval1D(0.001, 1000.0)
        assert "Normal" in metadata.description

    def test_validate(self):
        assert self.normal.validate([0.0, 1.0])
        assert not self.normal.validate([0.0, 0.0])
        assert not self.normal.validate([0.0])
        assert not self.normal.validate([0.0, 1.0, 2.0])
        assert not self.normal.validate([math.nan, 1.0])
        assert not self.normal.validate([0.0, math.inf])

    def test_violated_constraints(self):
        assert self.normal.violated_constraints([0.0, 1.0]) == []
        assert self.normal.violated_constraints([0.0, -1.0]) == ["std_dev > 0"]
        assert self.normal.violated_constraints([0.0]) == ["expected 2 parameters, got 1"]
        assert self.normal.violated_constraints([0.0, math.nan]) == ["parameters must be finite"]

    @pytest.mark.parametrize("params", [[0.0, -1.0], [0.0], [math.nan, 1.0]])
    def test_invalid_parameters_evaluate_to_nan(self, params):
        assert math.isnan(self.normal.pdf(0.0, params))
        assert math.isnan(self.normal.cdf(0.0, params))
        assert math.isnan(self.normal.ppf(0.5, params))
        assert math.isnan(self.normal.mean(params))
        assert math.isnan(self.normal.variance(params))
        assert self.normal.support(params) is None

    def test_nan_argument_evaluates_to_nan(self):
        assert math.isnan(self.normal.pdf(math.nan, [0.0, 1.0]))
        assert math.isnan(self.normal.cdf(math.nan, [0.0, 1.0]))
        assert math.isnan(self.binomial.pdf(math.nan, [10, 0.3]))

    def test_infinite_arguments(self):
        assert self.normal.pdf(math.inf, [0.0, 1.0]) == 0.0
        assert self.normal.pdf(-math.inf, [0.0, 1.0]) == 0.0
        assert self.normal.cdf(math.inf, [0.0, 1.0]) == 1.0
        assert self.normal.cdf(-math.inf, [0.0, 1.0]) == 0.0
        assert self.binomial.cdf(math.inf, [10, 0.3]) == 1.0

    def test_density_outside_support_is_zero(self):
        assert self.exponential.pdf(-1.0, [2.0]) == 0.0
        assert self.binomial.pdf(11, [10, 0.3]) == 0.0
        assert self.binomial.pdf(2.5, [10, 0.3]) == 0.0
        assert self.binomial.pdf(-1, [10, 0.3]) == 0.0

    def test_cdf_below_and_above_support(self):
        assert self.exponential.cdf(0.0, [2.0]) == 0.0
        assert self.exponential.cdf(-5.0, [2.0]) == 0.0
        assert self.binomial.cdf(-0.5, [10, 0.3]) == 0.0
        assert self.binomial.cdf(10, [10, 0.3]) == 1.0
        assert self.binomial.cdf(25, [10, 0.3]) == 1.0

    def test_discrete_cdf_is_a_step_function(self):
        params = [10, 0.3]
        assert self.binomial.cdf(3.7, params) == self.binomial.cdf(3, params)

    def test_ppf_rejects_probabilities_outside_unit_interval(self):
        with pytest.raises(ValueError, match=r"Probability must be in \[0, 1\]"):
            self.normal.ppf(1.5, [0.0, 1.0])
        with pytest.raises(ValueError):
            self.normal.ppf(np.array([0.5, -0.1]), [0.0, 1.0])

    def test_ppf_endpoints_map_to_support_bounds(self):
        assert self.normal.ppf(0.0, [0.0, 1.0]) == -math.inf
        assert self.normal.ppf(1.0, [0.0, 1.0]) == math.inf
        assert self.exponential.ppf(0.0, [2.0]) == 0.0
        assert self.binomial.ppf(1.0, [10, 0.3]) == 10.0

    def test_array_evaluation(self):
        x = np.array([-1.0, 0.0, 1.0])
        result = self.normal.pdf(x, [0.0, 1.0])
        assert isinstance(result, np.ndarray)
        assert result.shape == (3,)
        assert result[0] == pytest.approx(result[2])

    def test_array_evaluation_with_invalid_parameters(self):
        result = self.normal.cdf(np.array([0.0, 1.0]), [0.0, -1.0])
        assert result.shape == (2,)
        assert np.isnan(result).all()

    def test_array_evaluation_matches_element_by_element(self):
        x = np.array([[-2.0, 0.5], [1.0, 3.0]])
        result = self.normal.cdf(x, [1.0, 2.0])
        assert result.shape == (2, 2)
        expected = [[self.normal.cdf(float(v), [1.0, 2.0]) for v in row] for row in x]
        np.testing.assert_array_equal(result, expected)

    def test_support(self):
        support = self.binomial.support([10, 0.3])
        assert isinstance(support, IntegerLatticeDiscreteSupport)
        assert support.bounds == (0.0, 10.0)
        assert isinstance(self.normal.support([0.0, 1.0]), ContinuousSupport)

    def test_parametrization_instance_accepted(self):
        parameters = self.normal.base(1.0, 2.0)
        assert self.normal.mean(parameters) == 1.0
        assert self.normal.variance(parameters) == 4.0

    def test_parametrization_of_other_family_rejected(self):
        parameters = self.exponential.base(1.0)
        assert math.isnan(self.normal.mean(parameters))


class TestParametricFamilyConstruction:
    def test_required_characteristics(self):
        with pytest.raises(ValueError, match="lacks required characteristics"):
            ParametricFamily(
                kind=DistributionKind.NORMAL,
                name="Incomplete",
                distr_type=UnivariateContinuous,
                parameter_ranges={"x": Interval1D()},
                distr_characteristics={CharacteristicName.PDF: lambda p, x: 0.0},
                support_by_parametrization=lambda p: ContinuousSupport(),
            )


class TestDistributionInstances:
    def setup_method(self):
        self.registry = configure_registry()
        self.normal = self.registry.get(DistributionKind.NORMAL)

    def test_positional_and_named_parameters(self):
        dist = self.normal.distribution(2.0, 1.5)
        assert dist.parameters.parameters == {"mean": 2.0, "std_dev": 1.5}
        named = self.normal.distribution(mean=2.0, std_dev=1.5)
        assert named.parameters == dist.parameters

    def test_invalid_parameters_raise(self):
        with pytest.raises(ValueError, match="std_dev > 0"):
            self.normal.distribution(0.0, -1.0)

    def test_missing_parameters_raise(self):
        with pytest.raises(TypeError):
            self.normal.distribution(0.0)

    def test_instance_properties(self):
        dist = self.normal(0.0, 1.0)
        assert dist.family is self.normal
        assert dist.family_name == "Normal"
        assert dist.kind == DistributionKind.NORMAL
        assert dist.distribution_type == UnivariateContinuous
        assert isinstance(dist.support, ContinuousSupport)

    def test_analytical_computations(self):
        dist = self.normal(0.0, 1.0)
        computations = dist.analytical_computations
        assert set(computations) == {
            CharacteristicName.PDF,
            CharacteristicName.CDF,
            CharacteristicName.PPF,
            CharacteristicName.MEAN,
            CharacteristicName.VAR,
        }
        assert dist.analytical_computations is computations

    def test_query_method(self):
        dist = self.normal(0.0, 1.0)
        assert dist.query_method(CharacteristicName.CDF)(0.0) == 0.5
        assert dist.query_method(CharacteristicName.MEAN)(None) == 0.0
        with pytest.raises(KeyError):
            dist.query_method("skewness")

    def test_characteristics(self):
        dist = self.normal(1.0, 2.0)
        assert dist.pdf(1.0) == pytest.approx(1.0 / (2.0 * math.sqrt(2.0 * math.pi)))
        assert dist.cdf(1.0) == 0.5
        assert dist.ppf(0.5) == pytest.approx(1.0)
        assert dist.mean() == 1.0
        assert dist.variance() == 4.0
