"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from statcalc_core.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from statcalc_core.distributions.computation import AnalyticalComputation
    from statcalc_core.distributions.sampling import Sample, SamplingStrategy
    from statcalc_core.distributions.support import Support
    from statcalc_core.families.parametric_family import ParametricFamily
    from statcalc_core.families.parametrizations import Parametrization
    from statcalc_core.types import (
        DistributionKind,
        EuclideanDistributionType,
        GenericCharacteristicName,
        Number,
        NumericArray,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution:
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to.
    parameters : Parametrization
        Validated parameter values.
    _support : Support
        Support of this distribution.
    """

    family: ParametricFamily
    parameters: Parametrization
    _support: Support
    _analytical_cache: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] | None = (
        field(default=None, init=False, repr=False, compare=False)
    )

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def kind(self) -> DistributionKind:
        return self.family.kind

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type."""
        return self.family.distribution_type

    @property
    def support(self) -> Support:
        """Get the support of this distribution."""
        return self._support

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Lazily built and cached per instance.
        """
        if self._analytical_cache is None:
            self._analytical_cache = self.family._build_analytical_computations(self.parameters)
        return self._analytical_cache

    def query_method(self, name: GenericCharacteristicName) -> AnalyticalComputation[Any, Any]:
        """
        Get the computation of one characteristic.

        Raises
        ------
        KeyError
            If the characteristic is not provided.
        """
        try:
            return self.analytical_computations[name]
        except KeyError as exc:
            raise KeyError(
                f"Characteristic '{name}' is not available for {self.family_name}"
            ) from exc

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    def pdf(self, x: Number | NumericArray) -> float | NumericArray:
        return self.query_method(CharacteristicName.PDF)(x)  # type: ignore[no-any-return]

    def cdf(self, x: Number | NumericArray) -> float | NumericArray:
        return self.query_method(CharacteristicName.CDF)(x)  # type: ignore[no-any-return]

    def ppf(self, p: Number | NumericArray) -> float | NumericArray:
        return self.query_method(CharacteristicName.PPF)(p)  # type: ignore[no-any-return]

    def mean(self) -> float:
        return self.query_method(CharacteristicName.MEAN)(None)  # type: ignore[no-any-return]

    def variance(self) -> float:
        return self.query_method(CharacteristicName.VAR)(None)  # type: ignore[no-any-return]

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        **options : Any
            Options for the sampling strategy (``rng`` or ``seed``).

        Returns
        -------
        Sample
            Generated samples of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)


__all__ = ["ParametricFamilyDistribution"]
