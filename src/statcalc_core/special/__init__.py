"""
Special Functions
=================

Pure scalar implementations of the special functions the distribution
families are built on: gamma and its relatives, the error function and the
regularized incomplete gamma and beta functions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .erf import (
    complementary_error_function,
    error_function,
    inverse_complementary_error_function,
    inverse_error_function,
)
from .gamma import (
    beta,
    combination,
    factorial,
    gamma,
    log_beta,
    log_combination,
    log_factorial,
    log_gamma,
)
from .incomplete import regularized_incomplete_beta, regularized_incomplete_gamma
from .utils import safe_exp, safe_log

__all__ = [
    "gamma",
    "log_gamma",
    "factorial",
    "log_factorial",
    "combination",
    "log_combination",
    "beta",
    "log_beta",
    "error_function",
    "complementary_error_function",
    "inverse_error_function",
    "inverse_complementary_error_function",
    "regularized_incomplete_gamma",
    "regularized_incomplete_beta",
    "safe_exp",
    "safe_log",
]
