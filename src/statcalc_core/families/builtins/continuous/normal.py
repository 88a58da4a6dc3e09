"""
Normal distribution family implementation.
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
from statcalc_core.special import (
    error_function,
    inverse_complementary_error_function,
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
_SQRT_TWO_PI = math.sqrt(2.0 * math.pi)


def configure_normal_family() -> ParametricFamily:
    """
    Build the Normal distribution family.

    Returns
    -------
    ParametricFamily
        Family with parameters ``[mean, std_dev]``.
    """

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Cumulative distribution function:
        F(x) = 0.5 * (1 + erf((x-μ)/(σ√2)))
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: float
            - std_dev: float (standard deviation)
        x : float
            Point at which to evaluate the density

        Returns
        -------
        float
            Probability density at x
        """
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mean) / parameters.std_dev
        return safe_exp(-0.5 * z * z) / (parameters.std_dev * _SQRT_TWO_PI)

    def cdf(parameters: Parametrization, x: float) -> float:
        """
        Cumulative distribution function for normal distribution.

        Returns
        -------
        float
            Probability P(X ≤ x); exactly 0.5 at the mean
        """
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mean) / (parameters.std_dev * _SQRT_TWO)
        return 0.5 * (1.0 + error_function(z))

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function (inverse CDF) for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: float
            - std_dev: float (standard deviation)
        p : float
            Probability from (0, 1)

        Returns
        -------
        float
            Quantile corresponding to probability p
        """
        parameters = cast(_MeanStd, parameters)

        # erfcinv(2p) keeps the lower tail that 2p - 1 would cancel
        z = -_SQRT_TWO * inverse_complementary_error_function(2.0 * p)
        return parameters.mean + parameters.std_dev * z

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.mean

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.std_dev**2

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of normal distribution"""
        return ContinuousSupport()

    Normal = ParametricFamily(
        kind=DistributionKind.NORMAL,
        name="Normal",
        distr_type=UnivariateContinuous,
        parameter_ranges={
            "mean": Interval1D(-1000.0, 1000.0),
            "std_dev": Interval1D(0.001, 1000.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=NORMAL_DOC,
    )

    @parametrization(family=Normal)
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mean : float
            Mean of the distribution
        std_dev : float
            Standard deviation of the distribution
        """

        mean: float
        std_dev: float

        @constraint(description="std_dev > 0")
        def check_std_dev_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.std_dev > 0

    return Normal
