"""
Overflow-safe elementary functions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from statcalc_core.constants import EXP_LIMIT


def safe_exp(x: float) -> float:
    """
    Exponential that saturates instead of overflowing.

    Returns ``0.0`` for ``x < -EXP_LIMIT`` and ``+inf`` for ``x > EXP_LIMIT``;
    NaN is propagated.
    """
    if math.isnan(x):
        return math.nan
    if x > EXP_LIMIT:
        return math.inf
    if x < -EXP_LIMIT:
        return 0.0
    return math.exp(x)


def safe_log(x: float) -> float:
    """
    Natural logarithm returning NaN for non-positive input.

    ``math.log`` raises on such arguments; every caller in this package
    prefers a NaN that flows into the finiteness checks downstream.
    """
    if math.isnan(x) or x <= 0.0:
        return math.nan
    return math.log(x)


__all__ = ["safe_exp", "safe_log"]
