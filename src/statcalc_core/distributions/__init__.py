"""
Distribution infrastructure: supports, analytical computations, sampling
and numerical quantile search shared by all families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .fitters import ppf_from_cdf_continuous, ppf_from_cdf_discrete
from .sampling import ArraySample, InverseTransformSamplingStrategy, Sample, SamplingStrategy
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    "AnalyticalComputation",
    "ArraySample",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
    "InverseTransformSamplingStrategy",
    "Sample",
    "SamplingStrategy",
    "Support",
    "ppf_from_cdf_continuous",
    "ppf_from_cdf_discrete",
]
