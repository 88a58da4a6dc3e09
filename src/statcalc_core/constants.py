"""
Numerical Policy Constants
==========================

Iteration caps, tolerances and approximation thresholds shared by the
special functions and the distribution families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

MAX_ITERATIONS = 200
"""Upper bound on iterations of every series and continued fraction."""

EPSILON = 1e-12
"""Relative change at which a series or continued fraction is converged."""

FPMIN = 1e-30
"""Floor for denominators in the modified Lentz algorithm."""

EXP_LIMIT = 700.0
"""Exponent magnitude beyond which ``safe_exp`` saturates to 0 or +inf."""

NEGLIGIBLE_TERM = 1e-15
"""Term size below which a discrete CDF summation stops past the mode."""

GAMMA_OVERFLOW = 171.62
"""Argument above which the gamma function overflows a double."""

FACTORIAL_OVERFLOW = 170
"""Largest n whose factorial is representable as a double."""

BINOMIAL_NORMAL_MIN_TRIALS = 30
BINOMIAL_NORMAL_MIN_VARIANCE = 9.0
BINOMIAL_NORMAL_MIN_EXPECTED = 5.0
POISSON_NORMAL_MIN_RATE = 30.0
T_NORMAL_MIN_DF = 100.0

MAX_PARAMETERS = 4
"""Capacity of a parameter set."""

__all__ = [
    "MAX_ITERATIONS",
    "EPSILON",
    "FPMIN",
    "EXP_LIMIT",
    "NEGLIGIBLE_TERM",
    "GAMMA_OVERFLOW",
    "FACTORIAL_OVERFLOW",
    "BINOMIAL_NORMAL_MIN_TRIALS",
    "BINOMIAL_NORMAL_MIN_VARIANCE",
    "BINOMIAL_NORMAL_MIN_EXPECTED",
    "POISSON_NORMAL_MIN_RATE",
    "T_NORMAL_MIN_DF",
    "MAX_PARAMETERS",
]
