"""Exceptions raised for invalid window arguments."""
from __future__ import annotations


class InvalidSizeError(ValueError):
    """Window size is not an integer greater than 1."""


class IndexOutOfRangeError(IndexError):
    """Window index lies outside [0, size)."""
