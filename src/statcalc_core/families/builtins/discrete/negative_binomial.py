"""
Negative binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statcalc_core.constants import NEGLIGIBLE_TERM
from statcalc_core.distributions.support import IntegerLatticeDiscreteSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.special import log_combination, safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_negative_binomial_family() -> ParametricFamily:
    """
    Build the Negative binomial distribution family (failures before the
    r-th success).
    """

    NEGATIVE_BINOMIAL_DOC = """
    Negative binomial distribution: number of failures k before the r-th
    success in Bernoulli trials with success probability p.

    Probability mass function:
        P(X = k) = C(k+r-1, k) * p^r * (1-p)^k,  k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_SuccessesProbability, parameters)
        r, p = parameters.successes, parameters.probability
        if p == 1.0:
            return 1.0 if x == 0 else 0.0
        return safe_exp(log_combination(x + r - 1.0, x) + r * math.log(p) + x * math.log1p(-p))

    def _failures_sum(r: float, p: float, k: int) -> float:
        # P(i) = P(i-1) * (i+r-1)(1-p)/i, carried in log space so p^r may underflow
        log_failure = math.log1p(-p)
        mode = (r - 1.0) * (1.0 - p) / p
        log_term = r * math.log(p)
        total = safe_exp(log_term)
        for i in range(1, k + 1):
            log_term += math.log(i + r - 1.0) + log_failure - math.log(i)
            term = safe_exp(log_term)
            total += term
            if i > mode and term < NEGLIGIBLE_TERM:
                break
        return total

    def _short_of_successes(r: float, p: float, k: int) -> float:
        # P(Bin(k+r, p) <= r-1), summed downward from j = r-1
        n = k + r
        binomial_mode = math.floor((n + 1.0) * p)
        log_odds = math.log(p) - math.log1p(-p)
        j = int(r) - 1
        log_term = log_combination(n, j) + j * math.log(p) + (n - j) * math.log1p(-p)
        total = safe_exp(log_term)
        while j > 0:
            log_term += math.log(j) - math.log(n - j + 1.0) - log_odds
            j -= 1
            term = safe_exp(log_term)
            total += term
            if j < binomial_mode and term < NEGLIGIBLE_TERM:
                break
        return total

    def cdf(parameters: Parametrization, x: float) -> float:
        """
        Cumulative distribution function.

        Notes
        -----
        At most ``min(k, r)`` mass terms are summed. For ``k < r`` the
        failure counts ``0..k`` are added directly; otherwise the identity
        ``P(X <= k) = 1 - P(Bin(k + r, p) <= r - 1)`` is used, which needs at
        most ``r`` binomial terms however far ``k`` lies in the tail.
        """
        parameters = cast(_SuccessesProbability, parameters)
        r, p = parameters.successes, parameters.probability
        if p == 1.0:
            return 1.0

        k = int(x)
        if k < r:
            return _failures_sum(r, p, k)
        return 1.0 - _short_of_successes(r, p, k)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_SuccessesProbability, parameters)
        p = parameters.probability
        return parameters.successes * (1.0 - p) / p

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_SuccessesProbability, parameters)
        p = parameters.probability
        return parameters.successes * (1.0 - p) / p**2

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    NegativeBinomial = ParametricFamily(
        kind=DistributionKind.NEGATIVE_BINOMIAL,
        name="Negative Binomial",
        distr_type=UnivariateDiscrete,
        parameter_ranges={
            "successes": Interval1D(1.0, 10000.0),
            "probability": Interval1D(0.001, 1.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=NEGATIVE_BINOMIAL_DOC,
    )

    @parametrization(family=NegativeBinomial)
    class _SuccessesProbability(Parametrization):
        successes: float
        probability: float

        @constraint(description="successes is a positive integer")
        def check_successes_integer(self) -> bool:
            return self.successes > 0 and self.successes == math.floor(self.successes)

        @constraint(description="0 < probability <= 1")
        def check_probability_range(self) -> bool:
            return 0.0 < self.probability <= 1.0

    return NegativeBinomial
