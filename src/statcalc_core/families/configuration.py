"""
Distribution Families Configuration
====================================

This module builds the sixteen built-in distribution families and freezes
them into the process-wide :class:`~statcalc_core.registry.DistributionRegistry`.

Notes
-----
- Families are built once per process; :func:`reset_families_register`
  discards the cached registry (used by the test-suite).
- Construction order follows :class:`~statcalc_core.types.DistributionKind`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from statcalc_core.families.builtins import (
    configure_beta_family,
    configure_binomial_family,
    configure_chi_square_family,
    configure_exponential_family,
    configure_fisher_f_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_hypergeometric_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_pareto_family,
    configure_poisson_family,
    configure_rayleigh_family,
    configure_students_t_family,
    configure_uniform_family,
    configure_weibull_family,
)
from statcalc_core.registry import DistributionRegistry


@lru_cache(maxsize=1)
def configure_families_register() -> DistributionRegistry:
    """
    Build every built-in family and return the immutable registry.

    Returns
    -------
    DistributionRegistry
        Registry holding exactly one family per distribution kind.
    """
    return DistributionRegistry(
        [
            configure_normal_family(),
            configure_exponential_family(),
            configure_chi_square_family(),
            configure_students_t_family(),
            configure_fisher_f_family(),
            configure_geometric_family(),
            configure_hypergeometric_family(),
            configure_binomial_family(),
            configure_negative_binomial_family(),
            configure_poisson_family(),
            configure_uniform_family(),
            configure_gamma_family(),
            configure_beta_family(),
            configure_weibull_family(),
            configure_pareto_family(),
            configure_rayleigh_family(),
        ]
    )


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
