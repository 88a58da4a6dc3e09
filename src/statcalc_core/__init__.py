"""
StatCalc Core
=============

Statistical distribution computation engine providing special functions,
sixteen parametric distribution families, a static distribution registry,
parameter validation and calculation orchestration.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from . import special
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .orchestrator import *
from .orchestrator import __all__ as _orchestrator_all
from .registry import *
from .registry import __all__ as _registry_all
from .types import *
from .types import __all__ as _types_all
from .validation import *
from .validation import __all__ as _validation_all

__version__ = version("statcalc-core")
__all__ = [
    "__version__",
    "special",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_orchestrator_all,
    *_registry_all,
    *_types_all,
    *_validation_all,
]

del _distr_all
del _errors_all
del _family_all
del _orchestrator_all
del _registry_all
del _types_all
del _validation_all
