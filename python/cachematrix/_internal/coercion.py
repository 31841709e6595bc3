from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

# bool, signed int, unsigned int, float, complex
_NUMERIC_KINDS = frozenset("biufc")


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def coerce_matrix(candidate: Any, *, dtype: Any | None = None) -> np.ndarray:
    """Return a private, read-only 2-D copy of ``candidate``.

    Any 2-D shape is accepted; squareness is left to the inversion routine.
    """

    if not isinstance(candidate, np.ndarray) and not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a 2D nested sequence or a NumPy array; "
            f"got {type(candidate).__name__}."
        )
    try:
        array = np.array(candidate, dtype=dtype, copy=True)
    except ValueError as exc:
        # Ragged nested sequences.
        raise TypeError(f"Matrix data must be rectangular: {exc}") from exc

    if array.ndim != 2:
        raise TypeError(f"Matrix data must be 2D; got {array.ndim}D input.")
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"Matrix entries must be numeric; got dtype {array.dtype}.")

    array.flags.writeable = False
    return array
