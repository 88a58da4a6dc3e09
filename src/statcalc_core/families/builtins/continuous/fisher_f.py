"""
Fisher-Snedecor F distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statcalc_core.distributions.support import ContinuousSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.special import log_beta, regularized_incomplete_beta, safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_fisher_f_family() -> ParametricFamily:
    """
    Build the F distribution family.
    """

    FISHER_F_DOC = """
    F distribution with d1 (numerator) and d2 (denominator) degrees of freedom.

    Probability density function:
        f(x) = (d1/d2)^(d1/2) * x^(d1/2-1) * (1 + d1x/d2)^(-(d1+d2)/2) / B(d1/2, d2/2)

    Cumulative distribution function:
        F(x) = I_z(d1/2, d2/2),  z = d1x / (d1x + d2)
    """

    def _log_front(parameters: _DegreesOfFreedom) -> float:
        d1, d2 = parameters.df_numerator, parameters.df_denominator
        return d1 / 2.0 * math.log(d1 / d2) - log_beta(d1 / 2.0, d2 / 2.0)

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        d1, d2 = parameters.df_numerator, parameters.df_denominator

        if x == 0.0:
            if d1 < 2.0:
                return math.inf
            if d1 == 2.0:
                return safe_exp(_log_front(parameters))
            return 0.0

        return safe_exp(
            _log_front(parameters)
            + (d1 / 2.0 - 1.0) * math.log(x)
            - (d1 + d2) / 2.0 * math.log1p(d1 * x / d2)
        )

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        d1, d2 = parameters.df_numerator, parameters.df_denominator
        z = 1.0 / (1.0 + d2 / (d1 * x))
        return regularized_incomplete_beta(z, d1 / 2.0, d2 / 2.0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        d2 = parameters.df_denominator
        if d2 <= 2.0:
            return math.inf
        return d2 / (d2 - 2.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        d1, d2 = parameters.df_numerator, parameters.df_denominator
        if d2 <= 2.0:
            return math.nan
        if d2 <= 4.0:
            return math.inf
        return 2.0 * d2**2 * (d1 + d2 - 2.0) / (d1 * (d2 - 2.0) ** 2 * (d2 - 4.0))

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    FisherF = ParametricFamily(
        kind=DistributionKind.F,
        name="F-Distribution",
        distr_type=UnivariateContinuous,
        parameter_ranges={
            "df_numerator": Interval1D(1.0, 1000.0),
            "df_denominator": Interval1D(1.0, 1000.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=FISHER_F_DOC,
    )

    @parametrization(family=FisherF)
    class _DegreesOfFreedom(Parametrization):
        df_numerator: float
        df_denominator: float

        @constraint(description="df_numerator > 0")
        def check_numerator_positive(self) -> bool:
            return self.df_numerator > 0

        @constraint(description="df_denominator > 0")
        def check_denominator_positive(self) -> bool:
            return self.df_denominator > 0

    return FisherF
