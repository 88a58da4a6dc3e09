"""
Geometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statcalc_core.distributions.support import IntegerLatticeDiscreteSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.special import safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_geometric_family() -> ParametricFamily:
    """
    Build the Geometric distribution family (number of trials up to and
    including the first success).
    """

    GEOMETRIC_DOC = """
    Geometric distribution: number of Bernoulli trials needed to obtain the
    first success, with success probability p.

    Probability mass function:
        P(X = k) = (1-p)^(k-1) * p,  k = 1, 2, ...

    Cumulative distribution function:
        F(k) = 1 - (1-p)^k
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Probability, parameters)
        p = parameters.probability
        if p == 1.0:
            return 1.0 if x == 1 else 0.0
        return p * safe_exp((x - 1.0) * math.log1p(-p))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Probability, parameters)
        p = parameters.probability
        if p == 1.0:
            return 1.0
        return -math.expm1(x * math.log1p(-p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Probability, parameters)
        return 1.0 / parameters.probability

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Probability, parameters)
        p = parameters.probability
        return (1.0 - p) / p**2

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=1)

    Geometric = ParametricFamily(
        kind=DistributionKind.GEOMETRIC,
        name="Geometric",
        distr_type=UnivariateDiscrete,
        parameter_ranges={"probability": Interval1D(0.001, 1.0)},
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=GEOMETRIC_DOC,
    )

    @parametrization(family=Geometric)
    class _Probability(Parametrization):
        probability: float

        @constraint(description="0 < probability <= 1")
        def check_probability_range(self) -> bool:
            return 0.0 < self.probability <= 1.0

    return Geometric
