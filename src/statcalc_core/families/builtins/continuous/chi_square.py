"""
Chi-square distribution family implementation.
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
from statcalc_core.special import log_gamma, regularized_incomplete_gamma, safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

_LN2 = math.log(2.0)


def _log_normaliser(df: float) -> float:
    """ln(1 / (2^(k/2) Γ(k/2)))."""
    half = df / 2.0
    return -half * _LN2 - log_gamma(half)


def configure_chi_square_family() -> ParametricFamily:
    """
    Build the Chi-square distribution family.
    """

    CHI_SQUARE_DOC = """
    Chi-square distribution with k degrees of freedom.

    Probability density function:
        f(x) = x^(k/2-1) * exp(-x/2) / (2^(k/2) * Γ(k/2)),  x ≥ 0

    Cumulative distribution function:
        F(x) = P(k/2, x/2)

    At x = 0 the density diverges for k < 2, equals the limit
    1/(2^(k/2) Γ(k/2)) = 1/2 for k = 2 and vanishes for k > 2.
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        df = parameters.df

        if x == 0.0:
            if df < 2.0:
                return math.inf
            if df == 2.0:
                # x^(k/2-1) == 1 and exp(-x/2) == 1 in the limit
                return safe_exp(_log_normaliser(df))
            return 0.0

        return safe_exp(_log_normaliser(df) + (df / 2.0 - 1.0) * math.log(x) - x / 2.0)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        return regularized_incomplete_gamma(parameters.df / 2.0, x / 2.0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        return parameters.df

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        return 2.0 * parameters.df

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    ChiSquare = ParametricFamily(
        kind=DistributionKind.CHI_SQUARE,
        name="Chi-Square",
        distr_type=UnivariateContinuous,
        parameter_ranges={"degrees_of_freedom": Interval1D(1.0, 1000.0)},
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=CHI_SQUARE_DOC,
    )

    @parametrization(family=ChiSquare)
    class _DegreesOfFreedom(Parametrization):
        df: float

        @constraint(description="degrees_of_freedom > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    return ChiSquare
