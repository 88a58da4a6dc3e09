"""
Hypergeometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statcalc_core.distributions.support import IntegerLatticeDiscreteSupport
from statcalc_core.families.parametric_family import ParametricFamily
from statcalc_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statcalc_core.special import log_combination, safe_exp
from statcalc_core.types import (
    CharacteristicName,
    DistributionKind,
    Interval1D,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def _is_integer(value: float) -> bool:
    return value == math.floor(value)


def configure_hypergeometric_family() -> ParametricFamily:
    """
    Build the Hypergeometric distribution family.
    """

    HYPERGEOMETRIC_DOC = """
    Hypergeometric distribution: number of successes k in n draws without
    replacement from a population of N items containing K successes.

    Probability mass function:
        P(X = k) = C(K, k) * C(N-K, n-k) / C(N, n)

    for max(0, n-(N-K)) ≤ k ≤ min(n, K).
    """

    def pmf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_PopulationSuccessesDraws, parameters)
        N = parameters.population_size
        K = parameters.success_states
        n = parameters.sample_size
        return safe_exp(
            log_combination(K, x) + log_combination(N - K, n - x) - log_combination(N, n)
        )

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_PopulationSuccessesDraws, parameters)
        support = _support(parameters)
        return math.fsum(pmf(parameters, float(k)) for k in support.iter_leq(x))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_PopulationSuccessesDraws, parameters)
        return parameters.sample_size * parameters.success_states / parameters.population_size

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_PopulationSuccessesDraws, parameters)
        N = parameters.population_size
        n = parameters.sample_size
        if N == 1.0:
            return 0.0
        share = parameters.success_states / N
        return n * share * (1.0 - share) * (N - n) / (N - 1.0)

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        parameters = cast(_PopulationSuccessesDraws, parameters)
        N = int(parameters.population_size)
        K = int(parameters.success_states)
        n = int(parameters.sample_size)
        return IntegerLatticeDiscreteSupport(min_k=max(0, n - (N - K)), max_k=min(n, K))

    Hypergeometric = ParametricFamily(
        kind=DistributionKind.HYPERGEOMETRIC,
        name="Hypergeometric",
        distr_type=UnivariateDiscrete,
        parameter_ranges={
            "population_size": Interval1D(1.0, 10000.0),
            "success_states": Interval1D(0.0, 10000.0),
            "sample_size": Interval1D(1.0, 10000.0),
        },
        distr_characteristics={
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        description=HYPERGEOMETRIC_DOC,
    )

    @parametrization(family=Hypergeometric)
    class _PopulationSuccessesDraws(Parametrization):
        """
        Parameters
        ----------
        population_size : float
            Population size N
        success_states : float
            Number of success states K in the population
        sample_size : float
            Number of draws n
        """

        population_size: float
        success_states: float
        sample_size: float

        @constraint(description="all parameters are integers")
        def check_integers(self) -> bool:
            return all(
                _is_integer(v)
                for v in (self.population_size, self.success_states, self.sample_size)
            )

        @constraint(description="population_size >= 1")
        def check_population_positive(self) -> bool:
            return self.population_size >= 1

        @constraint(description="0 <= success_states <= population_size")
        def check_success_states(self) -> bool:
            return 0 <= self.success_states <= self.population_size

        @constraint(description="0 <= sample_size <= population_size")
        def check_sample_size(self) -> bool:
            return 0 <= self.sample_size <= self.population_size

    return Hypergeometric
