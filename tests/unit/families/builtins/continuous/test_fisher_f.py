"""
Tests for F Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import f

from statcalc_core.types import DistributionKind

from .base import BaseDistributionTest


class TestFisherFFamily(BaseDistributionTest):
    """Test suite for F distribution family."""

    def setup_method(self):
        self.f_family = self.get_family(DistributionKind.F)

    def test_family_properties(self):
        assert self.f_family.name == "F-Distribution"
        assert self.f_family.parameter_names == ("df_numerator", "df_denominator")

    @pytest.mark.parametrize("d1, d2", [(1.0, 1.0), (2.0, 5.0), (5.0, 2.0), (10.0, 20.0)])
    def test_pdf_and_cdf_against_scipy(self, d1, d2):
        x = np.linspace(0.05, 10.0, 40)
        self.assert_arrays_almost_equal(self.f_family.pdf(x, [d1, d2]), f.pdf(x, d1, d2))
        self.assert_arrays_almost_equal(self.f_family.cdf(x, [d1, d2]), f.cdf(x, d1, d2))

    @pytest.mark.parametrize("p", [0.05, 0.5, 0.95])
    def test_ppf_against_scipy(self, p):
        assert self.f_family.ppf(p, [5.0, 10.0]) == pytest.approx(f.ppf(p, 5.0, 10.0), rel=1e-8)

    def test_density_at_origin(self):
        assert self.f_family.pdf(0.0, [1.0, 5.0]) == math.inf
        assert self.f_family.pdf(0.0, [2.0, 5.0]) == pytest.approx(1.0)
        assert self.f_family.pdf(0.0, [4.0, 5.0]) == 0.0

    def test_huge_argument(self):
        assert self.f_family.cdf(1e300, [5.0, 10.0]) == pytest.approx(1.0)

    def test_moments(self):
        assert self.f_family.mean([5.0, 10.0]) == pytest.approx(1.25)
        assert self.f_family.mean([5.0, 2.0]) == math.inf
        assert math.isnan(self.f_family.variance([5.0, 2.0]))
        assert self.f_family.variance([5.0, 4.0]) == math.inf
        assert self.f_family.variance([5.0, 10.0]) == pytest.approx(f.var(5.0, 10.0))
