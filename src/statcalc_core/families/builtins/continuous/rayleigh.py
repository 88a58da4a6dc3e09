"""
Rayleigh distribution family implementation.
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


def configure_rayleigh_family() -> ParametricFamily:
    """
    Build the Rayleigh distribution family.
    """

    RAYLEIGH_DOC = """
    Rayleigh distribution with scale σ.

    Probability density function:
        f(x) = x/σ² * exp(-x²/(2σ²)),  x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-x²/(2σ²))
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Scale, parameters)
        variance = parameters.scale**2
        return x / variance * safe_exp(-(x * x) / (2.0 * variance))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Scale, parameters)
        return -math.expm1(-(x * x) / (2.0 * parameters.scale**2))

    def ppf(parameters: Parametrization, p: float) -> float:
        parameters = cast(_Scale, parameters)
        return parameters.scale * math.sqrt(-2.0 * math.log1p(-p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Scale, parameters)
        return parameters.scale * math.sqrt(math.pi / 2.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Scale, parameters)
        return (4.0 - math.pi) / 2.0 * parameters.scale**2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Rayleigh = ParametricFamily(
        kind=DistributionKind.RAYLEIGH,
        name="Rayleigh",
        distr_type=UnivariateContinuous,
        parameter_ranges={"scale": Interval1D(0.001, 1000.0)},
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=RAYLEIGH_DOC,
    )

    @parametrization(family=Rayleigh)
    class _Scale(Parametrization):
        scale: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    return Rayleigh
