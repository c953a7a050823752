"""Generalized cosine window formula and its lazy sequence generator.

The window of length ``size`` with coefficients ``a, b, c, d`` is

    x = pi * k / (size - 1)
    w[k] = (a - b*cos(2x)) + (c*cos(4x) - d*cos(6x))

for ``k = 0 .. size-1``. Hann, Hamming, Blackman and Nuttall are all
members of this family. Every value is computed in a single numpy float
precision (float32 or float64) chosen by the caller.
"""
from __future__ import annotations
import operator

import numpy as np

from apodize.errors import IndexOutOfRangeError
from apodize.types import WindowSpec


SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def resolve_dtype(dtype) -> np.dtype:
    """Return `dtype` as a numpy dtype, rejecting anything but float32/float64."""
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError(f"Unsupported dtype: {dtype!r}") from exc
    if dt not in SUPPORTED_DTYPES:
        raise ValueError(f"Unsupported dtype: {dt} (expected float32 or float64).")
    return dt


def _cosine_at(spec: WindowSpec, index: int, dt: np.dtype) -> np.floating:
    t = dt.type
    x = (t(np.pi) * t(index)) / t(spec.size - 1)
    b_ = t(spec.b) * np.cos(t(2) * x)
    c_ = t(spec.c) * np.cos(t(4) * x)
    d_ = t(spec.d) * np.cos(t(6) * x)
    return (t(spec.a) - b_) + (c_ - d_)


def cosine_value(
    a: float,
    b: float,
    c: float,
    d: float,
    size: int,
    index: int,
    *,
    dtype=np.float64
) -> np.floating:
    """
    Value of the generalized cosine window at a single index.

    Args:
        a, b, c, d: Window coefficients
        size: Window length, must be greater than 1
        index: Position in the window, 0 <= index < size
        dtype: numpy float32 or float64; all arithmetic runs in this precision

    Returns:
        The window weight as a numpy scalar of `dtype`.

    Raises:
        InvalidSizeError: size is not an integer greater than 1.
        IndexOutOfRangeError: index lies outside [0, size).
    """
    spec = WindowSpec(a=a, b=b, c=c, d=d, size=size)
    dt = resolve_dtype(dtype)
    index = operator.index(index)
    if index < 0 or index >= spec.size:
        raise IndexOutOfRangeError(
            f"index {index} out of range for window of size {spec.size}."
        )
    return _cosine_at(spec, index, dt)


class CosineWindowIter:
    """
    Forward-only iterator over the values of one cosine window.

    Yields exactly ``spec.size`` values in index order, then stops for good.
    Build a new iterator from the same spec (or call `fresh`) to traverse
    the window again.
    """

    def __init__(self, spec: WindowSpec, dtype=np.float64):
        self.spec = spec
        self.dtype = resolve_dtype(dtype)
        self.index = 0

    def __iter__(self) -> CosineWindowIter:
        return self

    def __next__(self) -> np.floating:
        if self.index == self.spec.size:
            raise StopIteration
        index = self.index
        self.index += 1
        return _cosine_at(self.spec, index, self.dtype)

    def __length_hint__(self) -> int:
        return self.spec.size - self.index

    def fresh(self) -> CosineWindowIter:
        """New iterator over the same window, positioned at index 0."""
        return CosineWindowIter(self.spec, self.dtype)

    def __repr__(self) -> str:
        return (
            f"CosineWindowIter(spec={self.spec!r}, dtype={self.dtype}, "
            f"index={self.index})"
        )


def cosine_sequence(
    a: float,
    b: float,
    c: float,
    d: float,
    size: int,
    *,
    dtype=np.float64
) -> CosineWindowIter:
    """Iterator over the generalized cosine window of `size` with coefficients a, b, c, d."""
    return CosineWindowIter(WindowSpec(a=a, b=b, c=c, d=d, size=size), dtype)
