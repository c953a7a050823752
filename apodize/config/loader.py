"""Build configured windows from plain mappings."""
from __future__ import annotations

import numpy as np

from apodize.algorithms.registry import GENERAL_COSINE, preset_spec, resolve_window_name
from apodize.config.validator import validate_window_config_dict
from apodize.dsp.cosine import CosineWindowIter
from apodize.dsp.windowing import collect
from apodize.types import WindowConfig, WindowSpec


def load_window_config(j: dict) -> WindowConfig:
    """
    Validate and load a window configuration.

    Accepted shapes:
        {"window": "blackman", "size": 1024, "dtype": "float32"}
        {"window": "cosine", "size": 64,
         "coefficients": {"a": 0.5, "b": 0.5, "c": 0.0, "d": 0.0}}

    Raises:
        ValueError: listing every problem found in the mapping.
    """
    validate_window_config_dict(j)
    size = int(j["size"])
    name = j["window"].strip().lower()
    if name == GENERAL_COSINE:
        coeffs = j["coefficients"]
        spec = WindowSpec(
            a=float(coeffs["a"]),
            b=float(coeffs["b"]),
            c=float(coeffs["c"]),
            d=float(coeffs["d"]),
            size=size
        )
    else:
        name = resolve_window_name(name)
        spec = preset_spec(name, size)
    return WindowConfig(
        name=name,
        spec=spec,
        dtype=np.dtype(j.get("dtype", "float64"))
    )


def config_iter(config: WindowConfig) -> CosineWindowIter:
    """Fresh iterator over the configured window."""
    return CosineWindowIter(config.spec, config.dtype)


def config_array(config: WindowConfig) -> np.ndarray:
    """The configured window collected into an array of its dtype."""
    return collect(config_iter(config))
