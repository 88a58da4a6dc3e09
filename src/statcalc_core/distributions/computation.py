"""
Computation Primitives
======================

:class:`AnalyticalComputation` binds one characteristic of a concrete
distribution (``pdf``, ``cdf``, ``ppf``, ``mean``, ``var``) to a callable.

Notes
-----
The bound callables accept either a scalar or a NumPy array; scalars give
back a ``float`` and arrays an array of the same shape. Moments ignore
their data argument.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mypy_extensions import KwArg

from statcalc_core.types import GenericCharacteristicName

In = TypeVar("In")
Out = TypeVar("Out")


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = ["AnalyticalComputation"]
