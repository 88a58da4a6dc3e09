"""
Error function, its complement and its inverse.

The forward functions use the Abramowitz & Stegun 7.1.26 rational
approximation (absolute error below 1.5e-7). The inverse uses a two-branch
polynomial in ``w = -ln((1 - x)(1 + x))`` (central for ``w < 5``, tail
beyond), extended by a double-precision polynomial in ``sqrt(w)`` for
``w >= 16`` and the asymptotic expansion of erfc once ``w`` leaves the range
reachable from ``erfinv`` in double precision.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

_AS_P = 0.3275911
_AS_COEFFICIENTS = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)

_CENTRAL_COEFFICIENTS = (
    2.81022636e-08,
    3.43273939e-07,
    -3.5233877e-06,
    -4.39150654e-06,
    0.00021858087,
    -0.00125372503,
    -0.00417768164,
    0.246640727,
    1.50140941,
)
_TAIL_COEFFICIENTS = (
    -0.000200214257,
    0.000100950558,
    0.00134934322,
    -0.00367342844,
    0.00573950773,
    -0.0076224613,
    0.00943887047,
    1.00167406,
    2.83297682,
)
_FAR_TAIL_COEFFICIENTS = (
    -2.7109920616438573243e-11,
    -2.5556418169965252055e-10,
    1.5076572693500548083e-09,
    -3.7894654401267369937e-09,
    7.6157012080783393804e-09,
    -1.4960026627149240478e-08,
    2.9147953450901080826e-08,
    -6.7711997758452339498e-08,
    2.2900482228026654717e-07,
    -9.9298272942317002539e-07,
    4.5260625972231537039e-06,
    -1.9681778105531670567e-05,
    7.5995277030017761139e-05,
    -0.00021503011930044477347,
    -0.00013871931833623122026,
    1.0103004648645343977,
    4.8499064014085844221,
)
_FAR_TAIL_LIMIT = 37.0
_ASYMPTOTIC_STEPS = 6
_LOG_TWO = math.log(2.0)
_SQRT_PI = math.sqrt(math.pi)


def _horner(coefficients: tuple[float, ...], x: float) -> float:
    result = 0.0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result


def _erfc_non_negative(x: float) -> float:
    t = 1.0 / (1.0 + _AS_P * x)
    # a1 t + a2 t^2 + ... + a5 t^5
    polynomial = t * _horner(_AS_COEFFICIENTS[::-1], t)
    return polynomial * math.exp(-x * x)


def error_function(x: float) -> float:
    """
    Error function erf(x).

    Parameters
    ----------
    x : float
        Argument.

    Returns
    -------
    float
        erf(x), odd in ``x`` with ``erf(0) == 0`` exactly.
    """
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        return 0.0
    value = 1.0 - _erfc_non_negative(abs(x))
    return value if x > 0 else -value


def complementary_error_function(x: float) -> float:
    """
    Complementary error function erfc(x) = 1 - erf(x).

    Evaluated directly for ``x >= 0`` so the upper tail keeps relative
    accuracy.
    """
    if math.isnan(x):
        return math.nan
    if x >= 0.0:
        return _erfc_non_negative(x)
    return 2.0 - _erfc_non_negative(-x)


def _asymptotic_tail(w: float) -> float:
    """Solve erfc(z) = y for tiny y from the asymptotic series of erfc."""
    # -ln(y) with y*(2-y) == exp(-w) and 2-y == 2 to double precision
    log_inverse = w + _LOG_TWO
    z = math.sqrt(log_inverse)
    for _ in range(_ASYMPTOTIC_STEPS):
        u = 1.0 / (2.0 * z * z)
        # 1 - u + 3u^2 - 15u^3 + 105u^4 - 945u^5 with u = 1/(2z^2)
        series = 1.0 - u * (1.0 - 3.0 * u * (1.0 - 5.0 * u * (1.0 - 7.0 * u * (1.0 - 9.0 * u))))
        z = math.sqrt(log_inverse - math.log(z * _SQRT_PI) + math.log(series))
    return z


def _inverse_from_w(w: float, x: float) -> float:
    """erfinv(x) given w = -ln((1 - x)(1 + x)), computed by the caller."""
    if w < 5.0:
        return _horner(_CENTRAL_COEFFICIENTS, w - 2.5) * x
    if w < 16.0:
        return _horner(_TAIL_COEFFICIENTS, math.sqrt(w) - 3.0) * x
    if w < _FAR_TAIL_LIMIT:
        return _horner(_FAR_TAIL_COEFFICIENTS, math.sqrt(w) - 5.0) * x
    return math.copysign(_asymptotic_tail(w), x)


def inverse_error_function(x: float) -> float:
    """
    Inverse of the error function on ``(-1, 1)``.

    Parameters
    ----------
    x : float
        Value in ``[-1, 1]``.

    Returns
    -------
    float
        ``y`` such that ``erf(y) == x``; ``±inf`` at ``±1`` and NaN outside
        the domain.
    """
    if math.isnan(x) or abs(x) > 1.0:
        return math.nan
    if x == 1.0:
        return math.inf
    if x == -1.0:
        return -math.inf
    return _inverse_from_w(-math.log((1.0 - x) * (1.0 + x)), x)


def inverse_complementary_error_function(y: float) -> float:
    """
    Inverse of the complementary error function on ``(0, 2)``.

    ``erfcinv(y) == erfinv(1 - y)``, but ``w`` is formed from ``y`` itself so
    that ``y`` close to 0 or 2 keeps its precision instead of cancelling in
    ``1 - y``.

    Parameters
    ----------
    y : float
        Value in ``[0, 2]``.

    Returns
    -------
    float
        ``z`` such that ``erfc(z) == y``; ``+inf`` at 0, ``-inf`` at 2 and NaN
        outside the domain.
    """
    if math.isnan(y) or y < 0.0 or y > 2.0:
        return math.nan
    if y == 0.0:
        return math.inf
    if y == 2.0:
        return -math.inf
    # (1 - x)(1 + x) == y(2 - y) for x = 1 - y
    return _inverse_from_w(-math.log(y * (2.0 - y)), 1.0 - y)


__all__ = [
    "error_function",
    "complementary_error_function",
    "inverse_error_function",
    "inverse_complementary_error_function",
]
