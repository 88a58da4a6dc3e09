"""
Distribution Registry
=====================

Immutable, build-once table mapping every :class:`DistributionKind` to its
family and metadata.

The registry is constructed on first use by :func:`configure_registry` and
shared for the rest of the process; lookups by kind are tuple indexing by
the enumeration value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from statcalc_core.types import DistributionKind, Kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from statcalc_core.families.parametric_family import ParametricFamily
    from statcalc_core.types import DistributionMetadata, Interval1D

logger = logging.getLogger(__name__)


def resolve_kind(value: object) -> DistributionKind | None:
    """
    Interpret ``value`` as a distribution kind.

    Accepts a :class:`DistributionKind`, its integer index or its member name
    (case-insensitive, e.g. ``"chi_square"``).

    Returns
    -------
    DistributionKind or None
        The kind, or ``None`` when ``value`` does not name one.
    """
    if isinstance(value, DistributionKind):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return DistributionKind(value)
        except ValueError:
            return None
    if isinstance(value, str):
        return DistributionKind.__members__.get(value.strip().upper().replace("-", "_"))
    return None


def is_valid_kind(value: object) -> bool:
    """Whether ``value`` names a distribution kind."""
    return resolve_kind(value) is not None


class DistributionRegistry:
    """
    Read-only lookup table of distribution families.

    Parameters
    ----------
    families : Iterable[ParametricFamily]
        Exactly one family per :class:`DistributionKind`, in any order.

    Raises
    ------
    ValueError
        If a kind is missing or registered twice.
    """

    __slots__ = ("_families", "_by_kind", "_by_category")

    def __init__(self, families: Iterable[ParametricFamily]):
        by_kind: dict[DistributionKind, ParametricFamily] = {}
        for family in families:
            if family.kind in by_kind:
                raise ValueError(f"Family for {family.kind.name} already found in registry")
            by_kind[family.kind] = family

        missing = [kind.name for kind in DistributionKind if kind not in by_kind]
        if missing:
            raise ValueError(f"No family registered for: {', '.join(missing)}")

        self._families: tuple[ParametricFamily, ...] = tuple(
            by_kind[kind] for kind in DistributionKind
        )
        self._by_kind: Mapping[DistributionKind, ParametricFamily] = MappingProxyType(by_kind)
        self._by_category: Mapping[Kind, tuple[DistributionKind, ...]] = MappingProxyType(
            {
                category: tuple(f.kind for f in self._families if f.category == category)
                for category in Kind
            }
        )
        logger.debug("Distribution registry built with %d families", len(self._families))

    def __len__(self) -> int:
        return len(self._families)

    def __iter__(self) -> Iterator[ParametricFamily]:
        return iter(self._families)

    def __contains__(self, kind: object) -> bool:
        return is_valid_kind(kind)

    @property
    def families(self) -> Mapping[DistributionKind, ParametricFamily]:
        """Read-only mapping from kind to family."""
        return self._by_kind

    def get(self, kind: DistributionKind | int | str) -> ParametricFamily:
        """
        Retrieve the family of a kind.

        Raises
        ------
        ValueError
            If ``kind`` does not name a distribution kind.
        """
        resolved = resolve_kind(kind)
        if resolved is None:
            raise ValueError(f"Unknown distribution type: {kind!r}")
        return self._families[resolved]

    __getitem__ = get

    def metadata(self, kind: DistributionKind | int | str) -> DistributionMetadata:
        """Static metadata of a kind."""
        return self.get(kind).metadata

    def name(self, kind: DistributionKind | int | str) -> str:
        return self.get(kind).name

    def parameter_count(self, kind: DistributionKind | int | str) -> int:
        return self.get(kind).parameter_count

    def parameter_names(self, kind: DistributionKind | int | str) -> tuple[str, ...]:
        return self.get(kind).parameter_names

    def parameter_range(self, kind: DistributionKind | int | str, index: int) -> Interval1D:
        """
        Admissible range of one parameter slot.

        Raises
        ------
        IndexError
            If ``index`` is outside the parameter set of the kind.
        """
        ranges = self.get(kind).parameter_ranges
        if not 0 <= index < len(ranges):
            raise IndexError(f"Parameter index {index} out of range for {self.name(kind)}")
        return ranges[index]

    def by_category(self, category: Kind) -> tuple[DistributionKind, ...]:
        """Kinds of one category, in enumeration order."""
        return self._by_category[Kind(category)]

    def continuous(self) -> tuple[DistributionKind, ...]:
        return self.by_category(Kind.CONTINUOUS)

    def discrete(self) -> tuple[DistributionKind, ...]:
        return self.by_category(Kind.DISCRETE)

    def all_metadata(self) -> tuple[DistributionMetadata, ...]:
        """Metadata of every kind, in enumeration order."""
        return tuple(f.metadata for f in self._families)


def configure_registry() -> DistributionRegistry:
    """
    Get the process-wide registry, building it on first use.
    """
    from statcalc_core.families.configuration import configure_families_register

    return configure_families_register()


def reset_registry() -> None:
    """Discard the cached registry so the next access rebuilds it."""
    from statcalc_core.families.configuration import reset_families_register

    reset_families_register()


__all__ = [
    "DistributionRegistry",
    "configure_registry",
    "reset_registry",
    "resolve_kind",
    "is_valid_kind",
]
