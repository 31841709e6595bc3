from __future__ import annotations

import logging
import os
from typing import Mapping

_METHODS: tuple[str, ...] = ("auto", "lu", "gauss", "qr", "svd")


def _parse_method(raw: str, var: str) -> str:
    method = raw.strip().lower()
    if method not in _METHODS:
        raise ValueError(f"{var} must be one of {', '.join(_METHODS)}; got {raw!r}")
    return method


def _parse_tol(raw: str, var: str) -> float:
    try:
        tol = float(raw)
    except ValueError:
        raise ValueError(f"{var} must be a float; got {raw!r}") from None
    if not tol >= 0.0:
        raise ValueError(f"{var} must be non-negative; got {raw!r}")
    return tol


def _parse_level(raw: str, var: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{var} must be a logging level name; got {raw!r}")
    return level


class Settings:
    """Environment-driven defaults, resolved on first access and cached."""

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        prefix: str = "CACHEMATRIX_",
    ) -> None:
        self._environ = environ
        self._prefix = prefix
        self._cache: dict[str, object] = {}

    def _lookup(self, name: str) -> str | None:
        env = os.environ if self._environ is None else self._environ
        raw = env.get(self._prefix + name)
        if raw is None or not raw.strip():
            return None
        return raw

    def _resolve(self, name: str, parse, default):
        if name in self._cache:
            return self._cache[name]
        raw = self._lookup(name)
        value = default if raw is None else parse(raw, self._prefix + name)
        self._cache[name] = value
        return value

    @property
    def invert_method(self) -> str:
        return self._resolve("INVERT_METHOD", _parse_method, "auto")

    @property
    def tol(self) -> float | None:
        # None means "machine epsilon of the working dtype".
        return self._resolve("TOL", _parse_tol, None)

    @property
    def log_level(self) -> int:
        return self._resolve("LOG_LEVEL", _parse_level, logging.WARNING)

    def reload(self) -> None:
        self._cache.clear()


settings = Settings()
