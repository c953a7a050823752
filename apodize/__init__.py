"""
apodize - Generalized Cosine Windows

Lazy generators for Hann, Hamming, Blackman, Nuttall and general
four-term cosine windows, in float32 or float64 precision.
"""
from apodize.version import __version__
from apodize.errors import InvalidSizeError, IndexOutOfRangeError
from apodize.types import WindowSpec, WindowConfig
from apodize.dsp.cosine import CosineWindowIter, cosine_value, cosine_sequence
from apodize.dsp.windowing import (
    hann_sequence,
    hanning_sequence,
    hamming_sequence,
    blackman_sequence,
    nuttall_sequence,
    window_array,
)

__all__ = [
    "__version__",
    "InvalidSizeError",
    "IndexOutOfRangeError",
    "WindowSpec",
    "WindowConfig",
    "CosineWindowIter",
    "cosine_value",
    "cosine_sequence",
    "hann_sequence",
    "hanning_sequence",
    "hamming_sequence",
    "blackman_sequence",
    "nuttall_sequence",
    "window_array",
]
