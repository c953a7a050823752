"""DSP modules for apodize."""

from apodize.dsp.cosine import (
    CosineWindowIter,
    cosine_sequence,
    cosine_value,
    resolve_dtype,
)
from apodize.dsp.windowing import (
    blackman_sequence,
    collect,
    hamming_sequence,
    hann_sequence,
    hanning_sequence,
    nuttall_sequence,
    window_array,
)

__all__ = [
    "CosineWindowIter",
    "blackman_sequence",
    "collect",
    "cosine_sequence",
    "cosine_value",
    "hamming_sequence",
    "hann_sequence",
    "hanning_sequence",
    "nuttall_sequence",
    "resolve_dtype",
    "window_array",
]
