"""
Gamma distribution family implementation.
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


def configure_gamma_family() -> ParametricFamily:
    """
    Build the Gamma distribution family (shape/scale parametrization).
    """

    GAMMA_DOC = """
    Gamma distribution with shape k and scale θ.

    Probability density function:
        f(x) = x^(k-1) * exp(-x/θ) / (Γ(k) * θ^k),  x ≥ 0

    Cumulative distribution function:
        F(x) = P(k, x/θ)

    where P is the lower regularized incomplete gamma function.
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

        log_density = (
            (shape - 1.0) * math.log(x) - x / scale - log_gamma(shape) - shape * math.log(scale)
        )
        return safe_exp(log_density)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ShapeScale, parameters)
        return regularized_incomplete_gamma(parameters.shape, x / parameters.scale)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale**2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    Gamma = ParametricFamily(
        kind=DistributionKind.GAMMA,
        name="Gamma",
        distr_type=UnivariateContinuous,
        parameter_ranges={
            "shape": Interval1D(0.001, 100.0),
            "scale": Interval1D(0.001, 1000.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=GAMMA_DOC,
    )

    @parametrization(family=Gamma)
    class _ShapeScale(Parametrization):
        """
        Shape/scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter θ
        """

        shape: float
        scale: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    return Gamma
