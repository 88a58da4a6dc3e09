"""
Properties shared by every built-in distribution family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.integrate import quad

from statcalc_core.registry import configure_registry
from statcalc_core.types import DistributionKind

CONTINUOUS_CASES = [
    (DistributionKind.NORMAL, [1.0, 2.0]),
    (DistributionKind.EXPONENTIAL, [2.0]),
    (DistributionKind.CHI_SQUARE, [4.0]),
    (DistributionKind.T, [5.0]),
    (DistributionKind.F, [5.0, 10.0]),
    (DistributionKind.UNIFORM, [-1.0, 3.0]),
    (DistributionKind.GAMMA, [2.0, 1.5]),
    (DistributionKind.BETA, [2.0, 3.0]),
    (DistributionKind.WEIBULL, [1.5, 2.0]),
    (DistributionKind.PARETO, [1.0, 3.0]),
    (DistributionKind.RAYLEIGH, [2.0]),
]

DISCRETE_CASES = [
    (DistributionKind.GEOMETRIC, [0.3]),
    (DistributionKind.HYPERGEOMETRIC, [40.0, 12.0, 9.0]),
    (DistributionKind.BINOMIAL, [12.0, 0.4]),
    (DistributionKind.NEGATIVE_BINOMIAL, [3.0, 0.45]),
    (DistributionKind.POISSON, [4.0]),
]


def _case_id(case):
    kind, _ = case
    return kind.name


class TestContinuousProperties:
    @pytest.mark.parametrize("case", CONTINUOUS_CASES, ids=_case_id)
    def test_density_integrates_to_one(self, case):
        kind, params = case
        family = configure_registry().get(kind)
        lower, upper = family.support(params).bounds

        total, _ = quad(lambda x: family.pdf(x, params), lower, upper, limit=200)

        assert total == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("case", CONTINUOUS_CASES, ids=_case_id)
    def test_cdf_is_monotone_and_bounded(self, case):
        kind, params = case
        family = configure_registry().get(kind)
        q = np.linspace(0.01, 0.99, 25)
        x = np.sort(family.ppf(q, params))
        values = family.cdf(np.concatenate(([x[0] - 10.0], x, [x[-1] + 10.0])), params)

        assert np.all(np.diff(values) >= 0.0)
        assert np.all((values >= 0.0) & (values <= 1.0))

    @pytest.mark.parametrize("case", CONTINUOUS_CASES, ids=_case_id)
    @pytest.mark.parametrize("q", [0.05, 0.3, 0.5, 0.8, 0.95])
    def test_cdf_inverts_ppf(self, case, q):
        kind, params = case
        family = configure_registry().get(kind)

        assert family.cdf(family.ppf(q, params), params) == pytest.approx(q, abs=1e-4)

    @pytest.mark.parametrize("case", CONTINUOUS_CASES, ids=_case_id)
    def test_ppf_endpoints_are_support_bounds(self, case):
        kind, params = case
        family = configure_registry().get(kind)
        lower, upper = family.support(params).bounds

        assert family.ppf(0.0, params) == lower
        assert family.ppf(1.0, params) == upper


class TestDiscreteProperties:
    @pytest.mark.parametrize("case", DISCRETE_CASES, ids=_case_id)
    def test_cdf_accumulates_mass(self, case):
        kind, params = case
        family = configure_registry().get(kind)
        lower, _ = family.support(params).bounds
        k = np.arange(lower, lower + 30.0)

        cumulative = np.cumsum(family.pdf(k, params))

        np.testing.assert_allclose(family.cdf(k, params), cumulative, atol=1e-9)
        assert np.all(np.diff(family.cdf(k, params)) >= 0.0)

    @pytest.mark.parametrize("case", DISCRETE_CASES, ids=_case_id)
    def test_mass_sums_to_one(self, case):
        kind, params = case
        family = configure_registry().get(kind)
        lower, _ = family.support(params).bounds

        total = math.fsum(family.pdf(k, params) for k in range(int(lower), int(lower) + 200))

        assert total == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("case", DISCRETE_CASES, ids=_case_id)
    @pytest.mark.parametrize("q", [0.05, 0.3, 0.5, 0.8, 0.95])
    def test_ppf_is_smallest_point_reaching_probability(self, case, q):
        kind, params = case
        family = configure_registry().get(kind)
        lower, _ = family.support(params).bounds
        k = family.ppf(q, params)

        assert k == math.floor(k)
        assert family.cdf(k, params) >= q
        if k > lower:
            assert family.cdf(k - 1.0, params) < q

    @pytest.mark.parametrize("case", DISCRETE_CASES, ids=_case_id)
    def test_mass_vanishes_off_lattice(self, case):
        kind, params = case
        family = configure_registry().get(kind)
        lower, _ = family.support(params).bounds

        assert family.pdf(lower + 0.5, params) == 0.0
        assert family.pdf(lower - 1.0, params) == 0.0


@pytest.mark.parametrize("kind", list(DistributionKind), ids=lambda k: k.name)
def test_invalid_parameters_give_nan(kind):
    family = configure_registry().get(kind)
    params = [math.nan] * family.parameter_count

    assert math.isnan(family.pdf(0.5, params))
    assert math.isnan(family.cdf(0.5, params))
    assert math.isnan(family.mean(params))
    assert family.support(params) is None
