"""Window configuration validation helpers."""
from __future__ import annotations
from typing import Any

from apodize.algorithms.registry import GENERAL_COSINE, WINDOW_ALIASES, WINDOW_PRESETS
from apodize.types import finite_float, is_integer_size


COEFFICIENT_KEYS = ("a", "b", "c", "d")
DTYPE_NAMES = ("float32", "float64")


def _is_number(v: Any) -> bool:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return finite_float(v) is not None


def validate_window_config_dict(j: dict) -> None:
    """Validate a window configuration mapping, reporting every problem at once."""
    if not isinstance(j, dict):
        raise ValueError("window config must be a mapping.")

    errors: list[str] = []

    def err(msg: str) -> None:
        errors.append(msg)

    for k in ("window", "size"):
        if k not in j:
            err(f"missing key: {k}")

    if errors:
        raise ValueError("; ".join(errors))

    name = j["window"]
    is_general = False
    if not isinstance(name, str) or not name.strip():
        err("window must be a non-empty string.")
    else:
        key = name.strip().lower()
        key = WINDOW_ALIASES.get(key, key)
        if key == GENERAL_COSINE:
            is_general = True
        elif key not in WINDOW_PRESETS:
            err(f"window is not a known preset: {name}")

    size = j["size"]
    if not is_integer_size(size) or size <= 1:
        err("size must be an integer greater than 1.")

    coeffs = j.get("coefficients")
    if is_general:
        if not isinstance(coeffs, dict):
            err("coefficients must be an object with keys a, b, c, d.")
        else:
            for k in COEFFICIENT_KEYS:
                if not _is_number(coeffs.get(k)):
                    err(f"coefficients.{k} must be a finite number.")
            extra = sorted(str(k) for k in coeffs if k not in COEFFICIENT_KEYS)
            if extra:
                err(f"coefficients has unknown keys: {', '.join(extra)}")
    elif coeffs is not None:
        err(f"coefficients are only allowed for the '{GENERAL_COSINE}' window.")

    dtype = j.get("dtype", "float64")
    if dtype not in DTYPE_NAMES:
        err(f"dtype must be one of: {', '.join(DTYPE_NAMES)}.")

    if errors:
        raise ValueError("; ".join(errors))
