"""
Binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statcalc_core.constants import (
    BINOMIAL_NORMAL_MIN_EXPECTED,
    BINOMIAL_NORMAL_MIN_TRIALS,
    BINOMIAL_NORMAL_MIN_VARIANCE,
)
from statcalc_core.distributions.support import IntegerLatticeDiscreteSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.special import error_function, log_combination, safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

_SQRT_TWO = math.sqrt(2.0)


def _use_normal_approximation(trials: float, probability: float) -> bool:
    expected = trials * probability
    complement = trials * (1.0 - probability)
    return (
        trials >= BINOMIAL_NORMAL_MIN_TRIALS
        and expected * (1.0 - probability) >= BINOMIAL_NORMAL_MIN_VARIANCE
        and expected >= BINOMIAL_NORMAL_MIN_EXPECTED
        and complement >= BINOMIAL_NORMAL_MIN_EXPECTED
    )


def configure_binomial_family() -> ParametricFamily:
    """
    Build the Binomial distribution family.

    Notes
    -----
    The CDF sums the mass function directly unless ``n ≥ 30``, ``np(1-p) ≥ 9``,
    ``np ≥ 5`` and ``n(1-p) ≥ 5``, in which case a continuity-corrected
    normal approximation is used.
    """

    BINOMIAL_DOC = """
    Binomial distribution: number of successes in n independent trials with
    success probability p.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1-p)^(n-k),  k = 0, ..., n
    """

    def _log_pmf(parameters: _TrialsProbability, k: float) -> float:
        n, p = parameters.trials, parameters.probability
        return log_combination(n, k) + k * math.log(p) + (n - k) * math.log1p(-p)

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_TrialsProbability, parameters)
        n, p = parameters.trials, parameters.probability

        if p == 0.0:
            return 1.0 if x == 0 else 0.0
        if p == 1.0:
            return 1.0 if x == n else 0.0
        return safe_exp(_log_pmf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_TrialsProbability, parameters)
        n, p = parameters.trials, parameters.probability

        if p == 0.0:
            return 1.0
        if p == 1.0:
            return 0.0

        if _use_normal_approximation(n, p):
            mean = n * p
            std_dev = math.sqrt(mean * (1.0 - p))
            z = (x + 0.5 - mean) / std_dev
            return 0.5 * (1.0 + error_function(z / _SQRT_TWO))

        return math.fsum(safe_exp(_log_pmf(parameters, k)) for k in range(int(x) + 1))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_TrialsProbability, parameters)
        return parameters.trials * parameters.probability

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_TrialsProbability, parameters)
        p = parameters.probability
        return parameters.trials * p * (1.0 - p)

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        parameters = cast(_TrialsProbability, parameters)
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=int(parameters.trials))

    Binomial = ParametricFamily(
        kind=DistributionKind.BINOMIAL,
        name="Binomial",
        distr_type=UnivariateDiscrete,
        parameter_ranges={
            "trials": Interval1D(1.0, 10000.0),
            "probability": Interval1D(0.0, 1.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=BINOMIAL_DOC,
    )

    @parametrization(family=Binomial)
    class _TrialsProbability(Parametrization):
        """
        Parameters
        ----------
        trials : float
            Number of trials n (non-negative integer)
        probability : float
            Success probability p
        """

        trials: float
        probability: float

        @constraint(description="trials is a non-negative integer")
        def check_trials_integer(self) -> bool:
            return self.trials >= 0 and self.trials == math.floor(self.trials)

        @constraint(description="0 <= probability <= 1")
        def check_probability_range(self) -> bool:
            return 0.0 <= self.probability <= 1.0

    return Binomial
