from __future__ import annotations

import numpy as np


class InversionFailure(np.linalg.LinAlgError):
    """Raised when a matrix cannot be inverted.

    Covers non-square, empty, non-finite, exactly singular and
    computationally singular input. Subclasses ``numpy.linalg.LinAlgError``
    (and therefore ``ValueError``) so existing NumPy-style handlers keep
    working.
    """
