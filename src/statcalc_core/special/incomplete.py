"""
Regularized incomplete gamma and beta functions.

Both functions combine a power series (or the first continued fraction
branch) with a modified Lentz continued fraction and switch between them
where each converges fastest. All loops share the iteration cap and
convergence tolerance from :mod:`statcalc_core.constants`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from statcalc_core.constants import EPSILON, FPMIN, MAX_ITERATIONS
from statcalc_core.special.gamma import log_gamma
from statcalc_core.special.utils import safe_exp


def _gamma_series(a: float, x: float) -> float:
    """P(a, x) by its power series; converges fast for ``x < a + 1``."""
    denominator = a
    term = 1.0 / a
    total = term
    for _ in range(MAX_ITERATIONS):
        denominator += 1.0
        term *= x / denominator
        total += term
        if abs(term) < abs(total) * EPSILON:
            break
    return safe_exp(a * math.log(x) - x - log_gamma(a) + math.log(total))


def _gamma_continued_fraction(a: float, x: float) -> float:
    """Q(a, x) = 1 - P(a, x) by the Lentz continued fraction; for ``x >= a + 1``."""
    b = x + 1.0 - a
    c = 1.0 / FPMIN
    d = 1.0 / b
    h = d
    for i in range(1, MAX_ITERATIONS + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < FPMIN:
            d = FPMIN
        c = b + an / c
        if abs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < EPSILON:
            break
    return safe_exp(a * math.log(x) - x - log_gamma(a)) * h


def regularized_incomplete_gamma(a: float, x: float) -> float:
    """
    Lower regularized incomplete gamma function P(a, x).

    Parameters
    ----------
    a : float
        Shape, must be positive.
    x : float
        Upper integration limit.

    Returns
    -------
    float
        P(a, x) in ``[0, 1]``; ``0.0`` for ``x <= 0``, ``1.0`` for
        ``x = +inf`` and NaN for ``a <= 0`` or NaN arguments.
    """
    if math.isnan(a) or math.isnan(x) or a <= 0.0:
        return math.nan
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    if x < a + 1.0:
        return min(_gamma_series(a, x), 1.0)
    return max(1.0 - _gamma_continued_fraction(a, x), 0.0)


def _beta_continued_fraction(x: float, a: float, b: float) -> float:
    """Continued fraction for I_x(a, b) by the modified Lentz method."""
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < FPMIN:
        d = FPMIN
    d = 1.0 / d
    h = d
    for m in range(1, MAX_ITERATIONS + 1):
        m2 = 2 * m
        # even step
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < FPMIN:
            d = FPMIN
        c = 1.0 + aa / c
        if abs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        h *= d * c
        # odd step
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < FPMIN:
            d = FPMIN
        c = 1.0 + aa / c
        if abs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < EPSILON:
            break
    return h


def regularized_incomplete_beta(x: float, a: float, b: float) -> float:
    """
    Regularized incomplete beta function I_x(a, b).

    Parameters
    ----------
    x : float
        Upper integration limit.
    a, b : float
        Positive shape parameters.

    Returns
    -------
    float
        I_x(a, b) in ``[0, 1]``; ``0.0`` for ``x <= 0``, ``1.0`` for
        ``x >= 1`` and NaN unless ``a, b > 0``.

    Notes
    -----
    For ``x >= (a + 1) / (a + b + 2)`` the symmetry
    ``I_x(a, b) = 1 - I_{1-x}(b, a)`` keeps the continued fraction in its
    fast-converging region.
    """
    if math.isnan(x) or math.isnan(a) or math.isnan(b) or a <= 0.0 or b <= 0.0:
        return math.nan
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0

    log_front = (
        log_gamma(a + b) - log_gamma(a) - log_gamma(b) + a * math.log(x) + b * math.log1p(-x)
    )
    front = safe_exp(log_front)
    if x < (a + 1.0) / (a + b + 2.0):
        value = front * _beta_continued_fraction(x, a, b) / a
    else:
        value = 1.0 - front * _beta_continued_fraction(1.0 - x, b, a) / b
    return min(max(value, 0.0), 1.0)


__all__ = ["regularized_incomplete_gamma", "regularized_incomplete_beta"]
