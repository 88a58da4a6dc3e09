"""
Numerical quantile search
=========================

Quantile functions for families without a closed-form inverse CDF:

- ``ppf_from_cdf_continuous`` brackets the target by exponential expansion
  from the support and refines it with :func:`scipy.optimize.brentq`;
- ``ppf_from_cdf_discrete`` returns the leftmost integer ``k`` with
  ``cdf(k) >= q`` by doubling followed by integer bisection.

Both expect ``0 < q < 1``; the endpoints are resolved by the caller.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import TYPE_CHECKING

from scipy import optimize as _sp_optimize

from statcalc_core.constants import MAX_ITERATIONS

if TYPE_CHECKING:
    from statcalc_core.distributions.support import (
        ContinuousSupport,
        IntegerLatticeDiscreteSupport,
    )
    from statcalc_core.types import ScalarFunc


def _expand_bracket(
    cdf: ScalarFunc,
    q: float,
    support: ContinuousSupport,
    *,
    init_step: float,
    expand_factor: float,
    max_expand: int,
) -> tuple[float, float] | None:
    """Find ``L < R`` inside the support with ``cdf(L) <= q <= cdf(R)``."""
    left, right = support.bounds
    step = init_step

    if math.isfinite(left):
        lo = left
    else:
        lo = (min(0.0, right) if math.isfinite(right) else 0.0) - step
        for _ in range(max_expand):
            if cdf(lo) <= q:
                break
            step *= expand_factor
            lo -= step
        else:
            return None

    step = init_step
    if math.isfinite(right):
        hi = right
    else:
        hi = max(lo, 0.0) + step
        for _ in range(max_expand):
            if cdf(hi) >= q:
                break
            step *= expand_factor
            hi += step
        else:
            return None

    return lo, hi


def ppf_from_cdf_continuous(
    cdf: ScalarFunc,
    q: float,
    support: ContinuousSupport,
    *,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
) -> float:
    """
    Invert a continuous, monotone CDF at ``q``.

    Parameters
    ----------
    cdf : Callable[[float], float]
        CDF of the distribution, defined on the whole real line.
    q : float
        Probability strictly inside ``(0, 1)``.
    support : ContinuousSupport
        Support used as the starting bracket.
    init_step : float, default 1.0
        Initial distance from the support edge (or from 0) for the bracket.
    expand_factor : float, default 2.0
        Multiplicative growth of the bracket step.
    max_expand : int, default 60
        Maximum number of bracket expansions.
    x_tol : float, default 1e-12
        Absolute tolerance passed to ``brentq``.

    Returns
    -------
    float
        ``x`` with ``cdf(x) ≈ q``; NaN (with a ``RuntimeWarning``) when no
        bracket could be found.
    """
    bracket = _expand_bracket(
        cdf,
        q,
        support,
        init_step=init_step,
        expand_factor=expand_factor,
        max_expand=max_expand,
    )
    if bracket is None:
        warnings.warn(
            f"Could not bracket quantile {q!r} within the support {support.bounds}.",
            RuntimeWarning,
            stacklevel=3,
        )
        return math.nan

    lo, hi = bracket
    f_lo = cdf(lo) - q
    f_hi = cdf(hi) - q
    if f_lo == 0.0:
        return lo
    if f_hi == 0.0:
        return hi

    def _objective(x: float) -> float:
        return cdf(x) - q

    return float(_sp_optimize.brentq(_objective, lo, hi, xtol=x_tol, maxiter=MAX_ITERATIONS))


def ppf_from_cdf_discrete(
    cdf: ScalarFunc,
    q: float,
    support: IntegerLatticeDiscreteSupport,
    *,
    max_doublings: int = 64,
) -> float:
    """
    Step quantile of a discrete CDF on a left-bounded integer support.

    Parameters
    ----------
    cdf : Callable[[float], float]
        CDF of the distribution.
    q : float
        Probability strictly inside ``(0, 1)``.
    support : IntegerLatticeDiscreteSupport
        Support with a finite ``min_k``.
    max_doublings : int, default 64
        Cap on the exponential search for an upper bracket.

    Returns
    -------
    float
        Smallest support point ``k`` with ``cdf(k) >= q``.
    """
    if support.min_k is None:
        raise RuntimeError("Discrete quantile search requires a left-bounded support.")

    lo = support.min_k
    if cdf(lo) >= q:
        return float(lo)

    step = 1
    hi = lo + step
    for _ in range(max_doublings):
        if support.max_k is not None and hi >= support.max_k:
            hi = support.max_k
            break
        if cdf(hi) >= q:
            break
        lo = hi
        step *= 2
        hi = lo + step
    else:
        warnings.warn(
            f"Could not bracket quantile {q!r} on the support starting at {support.min_k}.",
            RuntimeWarning,
            stacklevel=3,
        )
        return math.nan

    # cdf(lo) < q and hi is the first candidate known to reach q
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if cdf(mid) >= q:
            hi = mid
        else:
            lo = mid
    return float(hi)


__all__ = ["ppf_from_cdf_continuous", "ppf_from_cdf_discrete"]
