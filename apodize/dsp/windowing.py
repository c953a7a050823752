"""Preset cosine windows and helpers for collecting them."""
from __future__ import annotations
import operator

import numpy as np

from apodize.algorithms.registry import WINDOW_PRESETS, preset_spec
from apodize.dsp.cosine import CosineWindowIter, cosine_sequence


def hann_sequence(size: int, *, dtype=np.float64) -> CosineWindowIter:
    """Hann window of length `size` (symmetric, zero at both ends)."""
    return cosine_sequence(*WINDOW_PRESETS["hann"], size, dtype=dtype)


hanning_sequence = hann_sequence


def hamming_sequence(size: int, *, dtype=np.float64) -> CosineWindowIter:
    """Hamming window of length `size`."""
    return cosine_sequence(*WINDOW_PRESETS["hamming"], size, dtype=dtype)


def blackman_sequence(size: int, *, dtype=np.float64) -> CosineWindowIter:
    """Blackman window of length `size`."""
    return cosine_sequence(*WINDOW_PRESETS["blackman"], size, dtype=dtype)


def nuttall_sequence(size: int, *, dtype=np.float64) -> CosineWindowIter:
    """Nuttall window of length `size` (continuous first derivative)."""
    return cosine_sequence(*WINDOW_PRESETS["nuttall"], size, dtype=dtype)


def collect(it: CosineWindowIter) -> np.ndarray:
    """Collect the remaining values of `it` into a 1D array, in order."""
    return np.fromiter(it, dtype=it.dtype, count=operator.length_hint(it))


def window_array(name: str, size: int, *, dtype=np.float64) -> np.ndarray:
    """Generate the named preset window of length `size` as an array."""
    return collect(CosineWindowIter(preset_spec(name, size), dtype))
