"""
Sampling Interfaces
===================

Sample containers and the inverse transform sampling strategy used by
every distribution family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from statcalc_core.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from statcalc_core.families.distribution import ParametricFamilyDistribution


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: ParametricFamilyDistribution, **options: Any) -> Sample: ...


class InverseTransformSamplingStrategy(SamplingStrategy):
    """
    Univariate sampler applying the distribution's ``ppf`` to uniforms.

    Options
    -------
    rng : numpy.random.Generator, optional
        Source of uniforms.
    seed : int, optional
        Seed for a fresh generator when ``rng`` is not given.
    """

    def sample(
        self, n: int, distr: ParametricFamilyDistribution, **options: Any
    ) -> ArraySample:
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        rng = options.get("rng")
        if rng is None:
            rng = np.random.default_rng(options.get("seed"))
        ppf = distr.query_method(CharacteristicName.PPF)
        uniforms = rng.random(n)
        values = np.asarray(ppf(uniforms), dtype=np.float64).reshape(n, 1)
        return ArraySample(values)


__all__ = [
    "Sample",
    "ArraySample",
    "SamplingStrategy",
    "InverseTransformSamplingStrategy",
]
