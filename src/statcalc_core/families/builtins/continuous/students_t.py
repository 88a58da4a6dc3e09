"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statcalc_core.constants import T_NORMAL_MIN_DF
from statcalc_core.distributions.support import ContinuousSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.special import (
    error_function,
    log_gamma,
    regularized_incomplete_beta,
    safe_exp,
)
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

_SQRT_TWO = math.sqrt(2.0)


def configure_students_t_family() -> ParametricFamily:
    """
    Build the Student's t distribution family.

    Notes
    -----
    For more than 100 degrees of freedom the CDF is replaced by the standard
    normal CDF.
    """

    STUDENTS_T_DOC = """
    Student's t distribution with ν degrees of freedom.

    Probability density function:
        f(t) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + t²/ν)^(-(ν+1)/2)

    Cumulative distribution function, with x = ν/(ν+t²):
        F(t) = 1 - I_x(ν/2, 1/2)/2  for t > 0
        F(t) = I_x(ν/2, 1/2)/2      for t < 0
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        df = parameters.df
        log_density = (
            log_gamma((df + 1.0) / 2.0)
            - log_gamma(df / 2.0)
            - 0.5 * math.log(df * math.pi)
            - (df + 1.0) / 2.0 * math.log1p(x * x / df)
        )
        return safe_exp(log_density)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        df = parameters.df

        if df > T_NORMAL_MIN_DF:
            return 0.5 * (1.0 + error_function(x / _SQRT_TWO))
        if x == 0.0:
            return 0.5

        tail = 0.5 * regularized_incomplete_beta(df / (df + x * x), df / 2.0, 0.5)
        return 1.0 - tail if x > 0 else tail

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        return 0.0 if parameters.df > 1.0 else math.nan

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_DegreesOfFreedom, parameters)
        df = parameters.df
        if df > 2.0:
            return df / (df - 2.0)
        if df > 1.0:
            return math.inf
        return math.nan

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    StudentsT = ParametricFamily(
        kind=DistributionKind.T,
        name="t-Distribution",
        distr_type=UnivariateContinuous,
        parameter_ranges={"degrees_of_freedom": Interval1D(1.0, 1000.0)},
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=STUDENTS_T_DOC,
    )

    @parametrization(family=StudentsT)
    class _DegreesOfFreedom(Parametrization):
        df: float

        @constraint(description="degrees_of_freedom > 0")
        def check_df_positive(self) -> bool:
            return self.df > 0

    return StudentsT
