"""
Pareto (type I) distribution family implementation.
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


def configure_pareto_family() -> ParametricFamily:
    """
    Build the Pareto distribution family.
    """

    PARETO_DOC = """
    Pareto distribution with scale x_m and shape α, supported on [x_m, ∞).

    Probability density function:
        f(x) = α * x_m^α / x^(α+1)

    Cumulative distribution function:
        F(x) = 1 - (x_m/x)^α
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ScaleShape, parameters)
        shape = parameters.shape
        return shape / x * safe_exp(shape * math.log(parameters.scale / x))

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_ScaleShape, parameters)
        return -math.expm1(parameters.shape * math.log(parameters.scale / x))

    def ppf(parameters: Parametrization, p: float) -> float:
        parameters = cast(_ScaleShape, parameters)
        return parameters.scale * safe_exp(-math.log1p(-p) / parameters.shape)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ScaleShape, parameters)
        if parameters.shape <= 1.0:
            return math.inf
        return parameters.shape * parameters.scale / (parameters.shape - 1.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ScaleShape, parameters)
        shape = parameters.shape
        if shape <= 2.0:
            return math.inf
        return parameters.scale**2 * shape / ((shape - 1.0) ** 2 * (shape - 2.0))

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_ScaleShape, parameters)
        return ContinuousSupport(left=parameters.scale)

    Pareto = ParametricFamily(
        kind=DistributionKind.PARETO,
        name="Pareto",
        distr_type=UnivariateContinuous,
        parameter_ranges={
            "scale": Interval1D(0.001, 1000.0),
            "shape": Interval1D(0.001, 100.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=PARETO_DOC,
    )

    @parametrization(family=Pareto)
    class _ScaleShape(Parametrization):
        """
        Parameters
        ----------
        scale : float
            Minimum value x_m of the support
        shape : float
            Tail index α
        """

        scale: float
        shape: float

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

    return Pareto
