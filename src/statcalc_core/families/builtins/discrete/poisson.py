"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statcalc_core.constants import NEGLIGIBLE_TERM, POISSON_NORMAL_MIN_RATE
from statcalc_core.distributions.support import IntegerLatticeDiscreteSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.special import error_function, log_factorial, safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

_SQRT_TWO = math.sqrt(2.0)


def configure_poisson_family() -> ParametricFamily:
    """
    Build the Poisson distribution family.

    Notes
    -----
    Below a rate of 30 the CDF is accumulated with the recurrence
    ``P(k) = P(k-1) * λ / k``, stopping once the terms past the mode drop
    under 1e-15. From a rate of 30 on a continuity-corrected normal
    approximation is used.
    """

    POISSON_DOC = """
    Poisson distribution with rate λ.

    Probability mass function:
        P(X = k) = λ^k * exp(-λ) / k!,  k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Rate, parameters)
        rate = parameters.rate
        return safe_exp(x * math.log(rate) - rate - log_factorial(x))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Rate, parameters)
        rate = parameters.rate

        if rate >= POISSON_NORMAL_MIN_RATE:
            z = (x + 0.5 - rate) / math.sqrt(rate)
            return 0.5 * (1.0 + error_function(z / _SQRT_TWO))

        term = math.exp(-rate)
        total = term
        for k in range(1, int(x) + 1):
            term *= rate / k
            total += term
            if k > rate and term < NEGLIGIBLE_TERM:
                break
        return total

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Rate, parameters)
        return parameters.rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Rate, parameters)
        return parameters.rate

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0)

    Poisson = ParametricFamily(
        kind=DistributionKind.POISSON,
        name="Poisson",
        distr_type=UnivariateDiscrete,
        parameter_ranges={"lambda": Interval1D(0.001, 1000.0)},
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=POISSON_DOC,
    )

    @parametrization(family=Poisson)
    class _Rate(Parametrization):
        rate: float

        @constraint(description="lambda > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    return Poisson
