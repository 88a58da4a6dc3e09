"""
Uniform distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from statcalc_core.distributions.support import ContinuousSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_uniform_family() -> ParametricFamily:
    """
    Build the continuous Uniform distribution family.
    """

    UNIFORM_DOC = """
    Uniform distribution on the closed interval [a, b].

    Probability density function:
        f(x) = 1/(b-a)  for a ≤ x ≤ b, 0 otherwise

    Cumulative distribution function:
        F(x) = (x-a)/(b-a)  for a ≤ x ≤ b
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Bounds, parameters)
        return 1.0 / (parameters.b - parameters.a)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Bounds, parameters)
        return (x - parameters.a) / (parameters.b - parameters.a)

    def ppf(parameters: Parametrization, p: float) -> float:
        parameters = cast(_Bounds, parameters)
        return parameters.a + p * (parameters.b - parameters.a)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Bounds, parameters)
        return (parameters.a + parameters.b) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Bounds, parameters)
        return (parameters.b - parameters.a) ** 2 / 12

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_Bounds, parameters)
        return ContinuousSupport(left=parameters.a, right=parameters.b)

    Uniform = ParametricFamily(
        kind=DistributionKind.UNIFORM,
        name="Uniform",
        distr_type=UnivariateContinuous,
        parameter_ranges={
            "a": Interval1D(-1000.0, 1000.0),
            "b": Interval1D(-1000.0, 1000.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=UNIFORM_DOC,
    )

    @parametrization(family=Uniform)
    class _Bounds(Parametrization):
        """
        Interval parametrization of uniform distribution.

        Parameters
        ----------
        a : float
            Lower bound of the interval
        b : float
            Upper bound of the interval
        """

        a: float
        b: float

        @constraint(description="a < b")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.a < self.b

    return Uniform
