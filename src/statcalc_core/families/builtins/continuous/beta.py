"""
Beta distribution family implementation.
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


def _endpoint_density(exponent_shape: float, other_shape: float) -> float:
    """Limit of the density at an endpoint whose exponent is ``exponent_shape - 1``."""
    if exponent_shape < 1.0:
        return math.inf
    if exponent_shape == 1.0:
        # 1 / B(1, b) == b
        return other_shape
    return 0.0


def configure_beta_family() -> ParametricFamily:
    """
    Build the Beta distribution family on [0, 1].
    """

    BETA_DOC = """
    Beta distribution with shape parameters α and β on [0, 1].

    Probability density function:
        f(x) = x^(α-1) * (1-x)^(β-1) / B(α, β)

    Cumulative distribution function:
        F(x) = I_x(α, β)

    where I is the regularized incomplete beta function.
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Shapes, parameters)
        alpha, beta = parameters.alpha, parameters.beta

        if x == 0.0:
            return _endpoint_density(alpha, beta)
        if x == 1.0:
            return _endpoint_density(beta, alpha)

        log_density = (
            (alpha - 1.0) * math.log(x) + (beta - 1.0) * math.log1p(-x) - log_beta(alpha, beta)
        )
        return safe_exp(log_density)

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_Shapes, parameters)
        return regularized_incomplete_beta(x, parameters.alpha, parameters.beta)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Shapes, parameters)
        return parameters.alpha / (parameters.alpha + parameters.beta)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Shapes, parameters)
        total = parameters.alpha + parameters.beta
        return parameters.alpha * parameters.beta / (total**2 * (total + 1.0))

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    Beta = ParametricFamily(
        kind=DistributionKind.BETA,
        name="Beta",
        distr_type=UnivariateContinuous,
        parameter_ranges={
            "alpha": Interval1D(0.001, 1000.0),
            "beta": Interval1D(0.001, 1000.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=BETA_DOC,
    )

    @parametrization(family=Beta)
    class _Shapes(Parametrization):
        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    return Beta
