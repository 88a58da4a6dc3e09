"""
Exponential distribution family implementation.
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
from statcalc_core.special import safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_exponential_family() -> ParametricFamily:
    """
    Build the Exponential distribution family.
    """

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Distribution of the waiting time between events of a Poisson process
    with rate λ.

    Probability density function:
        f(x) = λ * exp(-λx),  x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-λx),  x ≥ 0
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Rate, parameters)
        return parameters.rate * safe_exp(-parameters.rate * x)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Rate, parameters)
        return -math.expm1(-parameters.rate * x)

    def ppf(parameters: Parametrization, p: float) -> float:
        parameters = cast(_Rate, parameters)
        return -math.log1p(-p) / parameters.rate

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Rate, parameters)
        return 1.0 / parameters.rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Rate, parameters)
        return 1.0 / parameters.rate**2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Exponential = ParametricFamily(
        kind=DistributionKind.EXPONENTIAL,
        name="Exponential",
        distr_type=UnivariateContinuous,
        parameter_ranges={"lambda": Interval1D(0.001, 1000.0)},
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=EXPONENTIAL_DOC,
    )

    @parametrization(family=Exponential)
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        rate : float
            Rate parameter λ of the distribution
        """

        rate: float

        @constraint(description="lambda > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

    return Exponential
