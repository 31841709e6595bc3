from __future__ import annotations

import logging
from typing import Any

import numpy as np

from . import inversion

logger = logging.getLogger(__name__)


def cache_solve(cache_matrix: Any, **options: Any) -> np.ndarray:
    """Return the inverse of the matrix held by ``cache_matrix``.

    A cached inverse is returned as-is. Otherwise the inverse is computed by
    ``inversion.invert`` (``options`` are passed through unchanged), stored
    in the container and returned. ``InversionFailure`` propagates and leaves
    the cache empty.

    The check-compute-store sequence is not atomic.
    """

    inverse = cache_matrix.get_inverse()
    if inverse is not None:
        cache_matrix.stats.record_hit()
        logger.debug("cache hit (version %d)", cache_matrix.version)
        return inverse

    cache_matrix.stats.record_miss()
    logger.debug("cache miss (version %d); computing inverse", cache_matrix.version)
    data = cache_matrix.get()
    inverse = inversion.invert(data, **options)
    cache_matrix.set_inverse(inverse)
    return cache_matrix.get_inverse()
