"""Immutable window definitions."""
from __future__ import annotations
from dataclasses import dataclass
import math
import numpy as np

from apodize.errors import InvalidSizeError


def finite_float(v) -> float | None:
    """`v` as a finite float, or None when it cannot be one."""
    try:
        f = float(v)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return f


def is_integer_size(v) -> bool:
    return not isinstance(v, bool) and isinstance(v, (int, np.integer))


@dataclass(frozen=True)
class WindowSpec:
    """Coefficients and length of one generalized cosine window."""
    a: float
    b: float
    c: float
    d: float
    size: int

    def __post_init__(self) -> None:
        if not is_integer_size(self.size):
            raise InvalidSizeError(f"size must be an integer, got {self.size!r}.")
        if self.size <= 1:
            raise InvalidSizeError(f"size must be greater than 1, got {self.size}.")
        for name in ("a", "b", "c", "d"):
            v = finite_float(getattr(self, name))
            if v is None:
                raise ValueError(f"coefficient {name} must be a finite number.")
            object.__setattr__(self, name, v)
        object.__setattr__(self, "size", int(self.size))

    @property
    def coefficients(self) -> tuple[float, float, float, float]:
        return (self.a, self.b, self.c, self.d)


@dataclass(frozen=True)
class WindowConfig:
    """A validated window configuration: preset or cosine name, spec and dtype."""
    name: str
    spec: WindowSpec
    dtype: np.dtype
