"""Dense matrix inversion backends.

Every failure to produce an inverse is reported as ``InversionFailure``;
callers that cache the result rely on this routine never returning a
partial or non-finite answer.
"""
from __future__ import annotations

import logging
import warnings
from typing import Any, Callable

import numpy as np
import scipy.linalg

from .config import settings
from .errors import InversionFailure

logger = logging.getLogger(__name__)


def _invert_auto(a: np.ndarray) -> np.ndarray:
    # LAPACK gesv (LU with partial pivoting) through NumPy.
    try:
        return np.linalg.inv(a)
    except np.linalg.LinAlgError as exc:
        raise InversionFailure(f"Lapack routine gesv: system is exactly singular ({exc})") from exc


def _invert_lu(a: np.ndarray) -> np.ndarray:
    with warnings.catch_warnings():
        # Exact singularity is detected below from the U diagonal.
        warnings.simplefilter("ignore", scipy.linalg.LinAlgWarning)
        lu, piv = scipy.linalg.lu_factor(a, check_finite=False)
    zero = np.flatnonzero(np.diag(lu) == 0)
    if zero.size:
        raise InversionFailure(
            f"LU factorization: U[{zero[0]}, {zero[0]}] is exactly zero; matrix is singular"
        )
    identity = np.eye(a.shape[0], dtype=lu.dtype)
    return scipy.linalg.lu_solve((lu, piv), identity, check_finite=False)


def _invert_gauss(a: np.ndarray) -> np.ndarray:
    """Gauss-Jordan elimination with partial pivoting."""
    n = a.shape[0]
    aug = np.hstack([a, np.eye(n, dtype=a.dtype)])
    for i in range(n):
        pivot = i + int(np.argmax(np.abs(aug[i:, i])))
        if aug[pivot, i] == 0:
            raise InversionFailure(f"Gauss-Jordan: no nonzero pivot in column {i}; matrix is singular")
        if pivot != i:
            aug[[i, pivot]] = aug[[pivot, i]]
        aug[i] /= aug[i, i]
        factors = aug[:, i].copy()
        factors[i] = 0
        aug -= np.outer(factors, aug[i])
    return aug[:, n:]


def _invert_qr(a: np.ndarray) -> np.ndarray:
    q, r = np.linalg.qr(a)
    if np.any(np.diag(r) == 0):
        raise InversionFailure("QR factorization: R has a zero diagonal entry; matrix is singular")
    return scipy.linalg.solve_triangular(r, q.conj().T, check_finite=False)


def _invert_svd(a: np.ndarray) -> np.ndarray:
    u, s, vt = np.linalg.svd(a)
    if s[-1] == 0:
        raise InversionFailure("SVD: smallest singular value is zero; matrix is singular")
    return (vt.conj().T / s) @ u.conj().T


_BACKENDS: dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "auto": _invert_auto,
    "lu": _invert_lu,
    "gauss": _invert_gauss,
    "qr": _invert_qr,
    "svd": _invert_svd,
}


_LINALG_DTYPES: frozenset[np.dtype] = frozenset(
    np.dtype(t) for t in (np.float32, np.float64, np.complex64, np.complex128)
)


def available_methods() -> tuple[str, ...]:
    return tuple(_BACKENDS)


def _working_copy(matrix: Any) -> np.ndarray:
    a = np.asarray(matrix)
    if a.ndim != 2:
        raise InversionFailure(f"'a' must be a 2D matrix; got {a.ndim}D input")
    rows, cols = a.shape
    if rows != cols:
        raise InversionFailure(f"'a' ({rows} x {cols}) must be square")
    if rows == 0:
        raise InversionFailure("'a' must not be empty")
    if a.dtype in _LINALG_DTYPES:
        return np.array(a, copy=True)
    # float16 and extended precision are unsupported by NumPy's LAPACK bindings.
    if a.dtype.kind == "f":
        return a.astype(np.float32 if a.dtype.itemsize < 4 else np.float64)
    if a.dtype.kind == "c":
        return a.astype(np.complex128)
    if a.dtype.kind in "biu":
        return a.astype(np.float64)
    raise InversionFailure(f"'a' must be numeric; got dtype {a.dtype}")


def _check_condition(a: np.ndarray, inv: np.ndarray, tol: float) -> None:
    if not np.isfinite(inv).all():
        raise InversionFailure("system is computationally singular: inverse is not finite")
    # 1-norm reciprocal condition number, as LAPACK gecon estimates it.
    rcond = 1.0 / (np.linalg.norm(a, 1) * np.linalg.norm(inv, 1))
    if rcond < tol:
        raise InversionFailure(
            f"system is computationally singular: reciprocal condition number = {rcond:g}"
        )


def invert(
    matrix: Any,
    *,
    method: str | None = None,
    tol: float | None = None,
    check_finite: bool = True,
) -> np.ndarray:
    """Return a new array holding the inverse of ``matrix``.

    Args:
        matrix: Square 2D array-like.
        method: One of ``available_methods()``. Defaults to the configured
            method (``CACHEMATRIX_INVERT_METHOD``, else ``"auto"``).
        tol: Smallest acceptable reciprocal condition number. Defaults to the
            configured tolerance, else machine epsilon of the working dtype.
        check_finite: Reject input containing NaN or infinity.

    Raises:
        InversionFailure: if the matrix is not invertible.
        ValueError: if ``method`` is unknown.
    """

    method = settings.invert_method if method is None else str(method).lower()
    backend = _BACKENDS.get(method)
    if backend is None:
        raise ValueError(f"Unknown inversion method {method!r}; expected one of {available_methods()}")

    a = _working_copy(matrix)
    if check_finite and not np.isfinite(a).all():
        raise InversionFailure("'a' contains NaN or infinite entries")

    if tol is None:
        tol = settings.tol
    if tol is None:
        tol = float(np.finfo(a.dtype).eps)

    logger.debug("inverting %dx%d %s matrix (method=%s)", a.shape[0], a.shape[1], a.dtype, method)
    inv = backend(a)
    _check_condition(a, inv, tol)
    return inv
