"""
Tests for Gamma Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import gamma

from statcalc_core.types import DistributionKind

from .base import BaseDistributionTest


class TestGammaFamily(BaseDistributionTest):
    """Test suite for Gamma distribution family."""

    def setup_method(self):
        self.gamma_family = self.get_family(DistributionKind.GAMMA)

    def test_family_properties(self):
        assert self.gamma_family.name == "Gamma"
        assert self.gamma_family.parameter_names == ("shape", "scale")

    @pytest.mark.parametrize("shape, scale", [(0.5, 1.0), (1.0, 2.0), (2.5, 0.7), (9.0, 3.0)])
    def test_pdf_against_scipy(self, shape, scale):
        x = np.linspace(0.05, 30.0, 40)
        self.assert_arrays_almost_equal(
            self.gamma_family.pdf(x, [shape, scale]), gamma.pdf(x, shape, scale=scale)
        )

    @pytest.mark.parametrize("shape, scale", [(0.5, 1.0), (1.0, 2.0), (2.5, 0.7), (9.0, 3.0)])
    def test_cdf_against_scipy(self, shape, scale):
        x = np.linspace(0.0, 30.0, 41)
        self.assert_arrays_almost_equal(
            self.gamma_family.cdf(x, [shape, scale]), gamma.cdf(x, shape, scale=scale)
        )

    @pytest.mark.parametrize("p", [0.01, 0.3, 0.5, 0.9, 0.999])
    def test_ppf_against_scipy(self, p):
        expected = gamma.ppf(p, 2.5, scale=0.7)
        assert self.gamma_family.ppf(p, [2.5, 0.7]) == pytest.approx(expected, rel=1e-8)

    def test_density_at_origin(self):
        assert self.gamma_family.pdf(0.0, [0.5, 1.0]) == math.inf
        assert self.gamma_family.pdf(0.0, [1.0, 2.0]) == 0.5
        assert self.gamma_family.pdf(0.0, [3.0, 2.0]) == 0.0
        assert self.gamma_family.cdf(0.0, [3.0, 2.0]) == 0.0

    def test_moments(self):
        dist = self.gamma_family(2.5, 0.7)
        assert dist.mean() == pytest.approx(1.75)
        assert dist.variance() == pytest.approx(1.225)

    def test_constraints(self):
        with pytest.raises(ValueError, match="shape > 0"):
            self.gamma_family(0.0, 1.0)
        with pytest.raises(ValueError, match="scale > 0"):
            self.gamma_family(1.0, -1.0)
