"""Memoized matrix inversion.

``CacheMatrix`` holds a matrix and, at most, one cached inverse of it;
``cache_solve`` returns that inverse, computing it only on a cache miss.
Replacing the matrix with ``CacheMatrix.set`` discards the cached inverse.

    >>> cm = CacheMatrix(hilbert(4))
    >>> inv = cache_solve(cm)        # computed
    >>> inv is cache_solve(cm)       # cached
    True
    >>> cm.set(hilbert(6))           # cache cleared
    >>> cache_solve(cm).shape
    (6, 6)
"""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

import logging as _logging

from ._internal.config import settings
from ._internal.container import CacheMatrix
from ._internal.errors import InversionFailure
from ._internal.factories import PLACEHOLDER_SHAPE, hilbert
from ._internal.inversion import available_methods, invert
from ._internal.logging_config import setup_logging
from ._internal.observability import CacheStats
from ._internal.solve import cache_solve
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixPerformanceWarning,
)

_logging.getLogger(__name__).addHandler(_logging.NullHandler())


__all__ = [
    "__version__",
    "CacheMatrix",
    "CacheStats",
    "CacheMatrixWarning",
    "CacheMatrixPerformanceWarning",
    "InversionFailure",
    "PLACEHOLDER_SHAPE",
    "available_methods",
    "cache_solve",
    "hilbert",
    "invert",
    "settings",
    "setup_logging",
]
