"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout the statcalc core.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from math import inf, isnan
from typing import Any, TypeAlias, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution categories.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionKind(IntEnum):
    """
    Closed enumeration of the supported distribution variants.

    The integer value is the stable index used for registry lookup.
    """

    NORMAL = 0
    EXPONENTIAL = 1
    CHI_SQUARE = 2
    T = 3
    F = 4
    GEOMETRIC = 5
    HYPERGEOMETRIC = 6
    BINOMIAL = 7
    NEGATIVE_BINOMIAL = 8
    POISSON = 9
    UNIFORM = 10
    GAMMA = 11
    BETA = 12
    WEIBULL = 13
    PARETO = 14
    RAYLEIGH = 15


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution category (discrete or continuous).
    """

    kind: Kind


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Used both for the support of continuous distributions and for the
    admissible range of a single distribution parameter.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        """Check if the interval is empty."""
        if self.left > self.right:
            return True

        return bool(self.left == self.right and not (self.left_closed and self.right_closed))

    @property
    def bounds(self) -> tuple[float, float]:
        """Get ``(left, right)`` endpoints."""
        return self.left, self.right

    def clamp(self, x: float) -> float:
        """
        Project a point onto the closure of the interval.

        Points already inside are returned unchanged; NaN is propagated.
        """
        if isnan(x):
            return x
        if x < self.left:
            return self.left
        if x > self.right:
            return self.right
        return x


GenericCharacteristicName: TypeAlias = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Enumeration of distribution characteristics exposed by the families.

    ``PDF`` denotes the density for continuous families and the mass
    function for discrete ones.
    """

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"


@dataclass(frozen=True, slots=True)
class DistributionMetadata:
    """
    Static description of a distribution kind.

    Parameters
    ----------
    kind : DistributionKind
        Kind this metadata describes.
    name : str
        Human-readable distribution name.
    parameter_names : tuple[str, ...]
        Ordered parameter names; position matches the parameter set.
    parameter_ranges : tuple[Interval1D, ...]
        Closed admissible range per parameter slot.
    category : Kind
        Continuous or discrete.
    description : str
        Short description of the distribution.
    """

    kind: DistributionKind
    name: str
    parameter_names: tuple[str, ...]
    parameter_ranges: tuple[Interval1D, ...]
    category: Kind
    description: str = ""

    @property
    def parameter_count(self) -> int:
        """Number of parameters the distribution takes."""
        return len(self.parameter_names)

    @property
    def is_discrete(self) -> bool:
        """Whether the distribution is discrete."""
        return self.category == Kind.DISCRETE


__all__ = [
    "Kind",
    "DistributionKind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ScalarFunc",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "DistributionMetadata",
]
