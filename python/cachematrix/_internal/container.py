from __future__ import annotations

import logging
import warnings
from typing import Any

import numpy as np

from .coercion import coerce_matrix
from .factories import placeholder
from .observability import CacheStats
from .warnings import CacheMatrixPerformanceWarning

logger = logging.getLogger(__name__)


class CacheMatrix:
    """A matrix plus a lazily filled slot for its inverse.

    The only way to change the held matrix is ``set``, which empties the
    inverse slot in the same step, so a cached inverse always belongs to the
    current value. Values are copied in and exposed read-only; no outside
    reference can modify them.

    Without ``data`` the container holds a 1x1 float64 NaN placeholder
    (see ``factories.placeholder``), which cannot be inverted. ``dtype``
    applies to ``data`` only and is rejected without it.

    Not safe for concurrent use: callers sharing a container across threads
    must serialize ``cache_solve`` themselves.
    """

    __slots__ = ("_value", "_inverse", "_version", "_stats")

    def __init__(self, data: Any | None = None, *, dtype: Any | None = None) -> None:
        self._inverse: np.ndarray | None = None
        self._version = 0
        self._stats = CacheStats()
        if data is None:
            if dtype is not None:
                raise TypeError("dtype requires data; the default placeholder is always float64 NaN.")
            self._value = coerce_matrix(placeholder())
        else:
            self._value = coerce_matrix(data, dtype=dtype)

    def set(self, value: Any) -> None:
        """Replace the held matrix and discard any cached inverse.

        No equality check is made: setting an identical matrix still clears
        the cache.
        """

        new_value = coerce_matrix(value)
        self._value = new_value
        self._version += 1
        if self._inverse is not None:
            self._inverse = None
            self._stats.record_invalidation()
            logger.debug("cached inverse discarded (version %d)", self._version)

    def get(self) -> np.ndarray:
        return self._value

    def set_inverse(self, inverse: Any) -> None:
        """Store ``inverse`` as the cached inverse of the current value.

        Not validated against the held matrix; ``cache_solve`` is the
        intended caller.
        """

        inv = coerce_matrix(inverse)
        rows, cols = self._value.shape
        if inv.shape != (cols, rows):
            warnings.warn(
                f"cached inverse shape {inv.shape} cannot invert a matrix of shape {self._value.shape}",
                CacheMatrixPerformanceWarning,
                stacklevel=2,
            )
        self._inverse = inv

    def get_inverse(self) -> np.ndarray | None:
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def version(self) -> int:
        """Number of ``set`` calls since construction."""
        return self._version

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._value.shape
        return int(rows), int(cols)

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    @property
    def stats(self) -> CacheStats:
        return self._stats

    def solve(self, **options: Any) -> np.ndarray:
        """Shorthand for ``cache_solve(self, **options)``."""
        from .solve import cache_solve

        return cache_solve(self, **options)

    def __repr__(self) -> str:
        state = "cached" if self._inverse is not None else "absent"
        rows, cols = self.shape
        return f"CacheMatrix(shape=({rows}, {cols}), dtype={self._value.dtype}, inverse={state}, version={self._version})"
