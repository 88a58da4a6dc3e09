"""
Tests for Negative Binomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import time

import numpy as np
import pytest
from scipy.stats import nbinom

from statcalc_core.types import DistributionKind

from ..continuous.base import BaseDistributionTest


class TestNegativeBinomialFamily(BaseDistributionTest):
    """Test suite for Negative Binomial distribution family."""

    def setup_method(self):
        self.nb_family = self.get_family(DistributionKind.NEGATIVE_BINOMIAL)

    def test_family_properties(self):
        assert self.nb_family.name == "Negative Binomial"
        assert self.nb_family.parameter_names == ("successes", "probability")

    @pytest.mark.parametrize("r, p", [(1, 0.5), (3, 0.4), (10, 0.7), (5, 0.05)])
    def test_pmf_and_cdf_against_scipy(self, r, p):
        k = np.arange(-1, 80)
        self.assert_arrays_almost_equal(self.nb_family.pdf(k, [r, p]), nbinom.pmf(k, r, p))
        self.assert_arrays_almost_equal(self.nb_family.cdf(k, [r, p]), nbinom.cdf(k, r, p))

    def test_small_probability_large_count(self):
        params = [200, 0.01]
        k = 20000.0
        assert self.nb_family.cdf(k, params) == pytest.approx(nbinom.cdf(k, 200, 0.01), abs=1e-8)

    @pytest.mark.parametrize("k", [9.8e6, 9.99e6, 1.02e7, 1.2e7])
    def test_far_tail_of_widest_parameters(self, k):
        params = [10000, 0.001]

        start = time.perf_counter()
        value = self.nb_family.cdf(k, params)
        elapsed = time.perf_counter() - start

        assert value == pytest.approx(nbinom.cdf(k, 10000, 0.001), abs=1e-6)
        assert elapsed < 1.0

    def test_ppf_of_widest_parameters(self):
        params = [10000, 0.001]

        start = time.perf_counter()
        median = self.nb_family.ppf(0.5, params)
        elapsed = time.perf_counter() - start

        assert abs(median - nbinom.ppf(0.5, 10000, 0.001)) <= 1.0
        assert elapsed < 5.0

    def test_cdf_continuous_across_summation_switch(self):
        params = [50, 0.3]
        k = np.arange(40, 60)
        self.assert_arrays_almost_equal(self.nb_family.cdf(k, params), nbinom.cdf(k, 50, 0.3))
        self.assert_non_decreasing(self.nb_family.cdf(k, params))

    @pytest.mark.parametrize("q", [0.1, 0.5, 0.9])
    def test_ppf_against_scipy(self, q):
        assert self.nb_family.ppf(q, [3, 0.4]) == nbinom.ppf(q, 3, 0.4)

    def test_certain_success(self):
        assert self.nb_family.pdf(0, [4, 1.0]) == 1.0
        assert self.nb_family.pdf(1, [4, 1.0]) == 0.0
        assert self.nb_family.cdf(0, [4, 1.0]) == 1.0

    def test_moments(self):
        assert self.nb_family.mean([3, 0.4]) == pytest.approx(4.5)
        assert self.nb_family.variance([3, 0.4]) == pytest.approx(11.25)

    def test_constraints(self):
        with pytest.raises(ValueError, match="successes is a positive integer"):
            self.nb_family(2.5, 0.5)
        with pytest.raises(ValueError, match="0 < probability <= 1"):
            self.nb_family(2, 0.0)
