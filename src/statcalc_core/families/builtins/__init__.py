"""
Built-in distribution families.

This package contains the implementations of the sixteen distribution kinds
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statcalc_core.families.builtins.continuous import (
    configure_beta_family,
    configure_chi_square_family,
    configure_exponential_family,
    configure_fisher_f_family,
    configure_gamma_family,
    configure_normal_family,
    configure_pareto_family,
    configure_rayleigh_family,
    configure_students_t_family,
    configure_uniform_family,
    configure_weibull_family,
)
from statcalc_core.families.builtins.discrete import (
    configure_binomial_family,
    configure_geometric_family,
    configure_hypergeometric_family,
    configure_negative_binomial_family,
    configure_poisson_family,
)

__all__ = [
    "configure_normal_family",
    "configure_exponential_family",
    "configure_chi_square_family",
    "configure_students_t_family",
    "configure_fisher_f_family",
    "configure_geometric_family",
    "configure_hypergeometric_family",
    "configure_binomial_family",
    "configure_negative_binomial_family",
    "configure_poisson_family",
    "configure_uniform_family",
    "configure_gamma_family",
    "configure_beta_family",
    "configure_weibull_family",
    "configure_pareto_family",
    "configure_rayleigh_family",
]
