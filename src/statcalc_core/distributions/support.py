"""
Distribution supports: real intervals for continuous families and bounded
or half-bounded integer ranges for discrete ones.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import floor, inf, isfinite
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from statcalc_core.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    @property
    def bounds(self) -> tuple[float, float]: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[int]: ...

    def iter_leq(self, x: Number) -> Iterator[int]: ...


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Consecutive integers ``min_k, min_k + 1, ..., max_k``.

    Either bound may be ``None`` for an unbounded side.
    """

    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.min_k is not None and self.max_k is not None and self.min_k > self.max_k:
            raise ValueError("min_k must not exceed max_k.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0))

        mask = finite & (xf == v)
        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def bounds(self) -> tuple[float, float]:
        left = -inf if self.min_k is None else float(self.min_k)
        right = inf if self.max_k is None else float(self.max_k)
        return left, right

    def iter_points(self) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "Cannot iterate points of a left-unbounded IntegerLatticeDiscreteSupport."
            )

        def _gen() -> Iterator[int]:
            current = cast(int, self.min_k)
            while self.max_k is None or current <= self.max_k:
                yield current
                current += 1

        return _gen()

    def iter_leq(self, x: Number) -> Iterator[int]:
        if self.min_k is None:
            raise RuntimeError(
                "iter_leq is not supported for left-unbounded IntegerLatticeDiscreteSupport."
            )
        xf = float(x)
        if not isfinite(xf):
            if xf < 0:
                return iter(())
            return self.iter_points()
        last = int(floor(xf))
        if self.max_k is not None:
            last = min(last, self.max_k)
        return iter(range(self.min_k, last + 1))

    __iter__ = iter_points


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
