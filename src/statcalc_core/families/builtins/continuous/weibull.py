"""
Weibull distribution family implementation.
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
from statcalc_core.special import gamma, safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_weibull_family() -> ParametricFamily:
    """
    Build the Weibull distribution family.
    """

    WEIBULL_DOC = """
    Weibull distribution with shape k and scale λ.

    Probability density function:
        f(x) = (k/λ) * (x/λ)^(k-1) * exp(-(x/λ)^k),  x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-(x/λ)^k)
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ShapeScale, parameters)
        shape, scale = parameters.shape, parameters.scale

        if x == 0.0:
            if shape < 1.0:
                return math.inf
            if shape == 1.0:
                return 1.0 / scale
            return 0.0

        log_ratio = math.log(x / scale)
        return safe_exp(
            math.log(shape / scale) + (shape - 1.0) * log_ratio - safe_exp(shape * log_ratio)
        )

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ShapeScale, parameters)
        if x == 0.0:
            return 0.0
        return -math.expm1(-safe_exp(parameters.shape * math.log(x / parameters.scale)))

    def ppf(parameters: Parametrization, p: float) -> float:
        parameters = cast(_ShapeScale, parameters)
        return parameters.scale * safe_exp(math.log(-math.log1p(-p)) / parameters.shape)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeScale, parameters)
        return parameters.scale * gamma(1.0 + 1.0 / parameters.shape)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeScale, parameters)
        g1 = gamma(1.0 + 1.0 / parameters.shape)
        g2 = gamma(1.0 + 2.0 / parameters.shape)
        if math.isinf(g2):
            return math.inf
        return parameters.scale**2 * (g2 - g1**2)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Weibull = ParametricFamily(
        kind=DistributionKind.WEIBULL,
        name="Weibull",
        distr_type=UnivariateContinuous,
        parameter_ranges={
            "shape": Interval1D(0.001, 100.0),
            "scale": Interval1D(0.001, 1000.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=WEIBULL_DOC,
    )

    @parametrization(family=Weibull)
    class _ShapeScale(Parametrization):
        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    return Weibull
