"""
Continuous distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .beta import configure_beta_family
from .chi_square import configure_chi_square_family
from .exponential import configure_exponential_family
from .fisher_f import configure_fisher_f_family
from .gamma import configure_gamma_family
from .normal import configure_normal_family
from .pareto import configure_pareto_family
from .rayleigh import configure_rayleigh_family
from .students_t import configure_students_t_family
from .uniform import configure_uniform_family
from .weibull import configure_weibull_family

__all__ = [
    "configure_beta_family",
    "configure_chi_square_family",
    "configure_exponential_family",
    "configure_fisher_f_family",
    "configure_gamma_family",
    "configure_normal_family",
    "configure_pareto_family",
    "configure_rayleigh_family",
    "configure_students_t_family",
    "configure_uniform_family",
    "configure_weibull_family",
]
