from __future__ import annotations

import numpy as np

# Shape of the matrix held by a container constructed without data.
PLACEHOLDER_SHAPE: tuple[int, int] = (1, 1)


def placeholder() -> np.ndarray:
    """1x1 float64 matrix holding NaN.

    Inverting it fails: the inversion routine rejects non-finite entries.
    """

    return np.full(PLACEHOLDER_SHAPE, np.nan, dtype=np.float64)


def hilbert(n: int) -> np.ndarray:
    """The n x n Hilbert matrix, ``H[i, j] = 1 / (i + j + 1)`` (0-indexed)."""

    n = int(n)
    if n < 1:
        raise ValueError(f"Hilbert matrix order must be positive; got {n}")
    i = np.arange(n)
    return 1.0 / (i[:, None] + i[None, :] + 1.0)
