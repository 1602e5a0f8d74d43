"""
Generic parameter machinery.

Keys, descriptor tables, parameter sets and the typed store adapter that
every module builds its parameters on.
"""

from .keys import ParamKey
from .paramset import ParamSet
from .subspace import Subspace
from .table import ParamDescriptor, ParamTable, ParamValidator

__all__ = [
    "ParamKey",
    "ParamDescriptor",
    "ParamTable",
    "ParamValidator",
    "ParamSet",
    "Subspace",
]
