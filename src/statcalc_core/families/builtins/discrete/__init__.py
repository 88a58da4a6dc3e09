"""
Discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .binomial import configure_binomial_family
from .geometric import configure_geometric_family
from .hypergeometric import configure_hypergeometric_family
from .negative_binomial import configure_negative_binomial_family
from .poisson import configure_poisson_family

__all__ = [
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_hypergeometric_family",
    "configure_negative_binomial_family",
    "configure_poisson_family",
]
