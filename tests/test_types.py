from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from apodize.errors import InvalidSizeError
from apodize.types import WindowSpec


def test_window_spec_normalizes_fields():
    spec = WindowSpec(a=1, b=0, c=0, d=0, size=np.int64(5))
    assert spec.coefficients == (1.0, 0.0, 0.0, 0.0)
    assert isinstance(spec.a, float)
    assert type(spec.size) is int


def test_window_spec_is_immutable():
    spec = WindowSpec(a=0.5, b=0.5, c=0.0, d=0.0, size=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.size = 8


@pytest.mark.parametrize("size", [1, 0, -10])
def test_window_spec_rejects_small_size(size):
    with pytest.raises(InvalidSizeError, match="greater than 1"):
        WindowSpec(a=0.5, b=0.5, c=0.0, d=0.0, size=size)


@pytest.mark.parametrize("size", [4.0, "4", True, None])
def test_window_spec_rejects_non_integer_size(size):
    with pytest.raises(InvalidSizeError, match="must be an integer"):
        WindowSpec(a=0.5, b=0.5, c=0.0, d=0.0, size=size)


def test_invalid_size_is_a_value_error():
    with pytest.raises(ValueError):
        WindowSpec(a=0.5, b=0.5, c=0.0, d=0.0, size=1)


def test_window_spec_rejects_non_finite_coefficient():
    with pytest.raises(ValueError, match="coefficient c must be a finite number"):
        WindowSpec(a=0.5, b=0.5, c=float("nan"), d=0.0, size=4)


@pytest.mark.parametrize("value", [None, "x", 10**400, float("inf")])
def test_window_spec_rejects_unconvertible_coefficient(value):
    with pytest.raises(ValueError, match="coefficient a must be a finite number"):
        WindowSpec(a=value, b=0.5, c=0.0, d=0.0, size=4)
