"""
Tests for Binomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import binom

from statcalc_core.distributions.support import IntegerLatticeDiscreteSupport
from statcalc_core.types import DistributionKind, UnivariateDiscrete

from ..continuous.base import BaseDistributionTest


class TestBinomialFamily(BaseDistributionTest):
    """Test suite for Binomial distribution family."""

    def setup_method(self):
        self.binomial_family = self.get_family(DistributionKind.BINOMIAL)
        self.binomial_dist_example = self.binomial_family(10, 0.3)

    def test_family_properties(self):
        assert self.binomial_family.name == "Binomial"
        assert self.binomial_family.parameter_names == ("trials", "probability")
        assert self.binomial_family.distribution_type == UnivariateDiscrete
        assert self.binomial_family.is_discrete

    def test_known_value(self):
        assert self.binomial_dist_example.pdf(5) == pytest.approx(0.1029193452, abs=1e-9)

    def test_pmf_against_scipy(self):
        k = np.arange(-1, 12)
        self.assert_arrays_almost_equal(self.binomial_dist_example.pdf(k), binom.pmf(k, 10, 0.3))

    def test_cdf_against_scipy(self):
        k = np.arange(-1, 12)
        self.assert_arrays_almost_equal(self.binomial_dist_example.cdf(k), binom.cdf(k, 10, 0.3))

    def test_pmf_sums_to_one(self):
        total = sum(self.binomial_dist_example.pdf(k) for k in range(11))
        assert total == pytest.approx(1.0, abs=1e-12)

    def test_non_integer_point(self):
        assert self.binomial_dist_example.pdf(2.5) == 0.0
        assert self.binomial_dist_example.cdf(2.5) == self.binomial_dist_example.cdf(2)

    @pytest.mark.parametrize("p", [0.01, 0.1, 0.5, 0.9, 0.99])
    def test_ppf_is_smallest_point_reaching_probability(self, p):
        k = self.binomial_dist_example.ppf(p)
        assert k == binom.ppf(p, 10, 0.3)
        assert self.binomial_dist_example.cdf(k) >= p
        if k > 0:
            assert self.binomial_dist_example.cdf(k - 1) < p

    def test_degenerate_probabilities(self):
        assert self.binomial_family.pdf(0, [5, 0.0]) == 1.0
        assert self.binomial_family.pdf(1, [5, 0.0]) == 0.0
        assert self.binomial_family.cdf(0, [5, 0.0]) == 1.0
        assert self.binomial_family.pdf(5, [5, 1.0]) == 1.0
        assert self.binomial_family.cdf(4, [5, 1.0]) == 0.0
        assert self.binomial_family.cdf(5, [5, 1.0]) == 1.0

    def test_normal_approximation_regime(self):
        params = [200, 0.4]
        for k in (60, 80, 100):
            assert self.binomial_family.cdf(k, params) == pytest.approx(
                binom.cdf(k, 200, 0.4), abs=1e-2
            )

    def test_moments(self):
        assert self.binomial_dist_example.mean() == pytest.approx(3.0)
        assert self.binomial_dist_example.variance() == pytest.approx(2.1)

    def test_support(self):
        support = self.binomial_dist_example.support
        assert isinstance(support, IntegerLatticeDiscreteSupport)
        assert (support.min_k, support.max_k) == (0, 10)

    def test_constraints(self):
        with pytest.raises(ValueError, match="trials is a non-negative integer"):
            self.binomial_family(2.5, 0.3)
        with pytest.raises(ValueError, match="0 <= probability <= 1"):
            self.binomial_family(10, 1.5)
        assert math.isnan(self.binomial_family.pdf(1, [10, 1.5]))
