"""Window preset registry and stable identifiers for window definitions."""
from __future__ import annotations

from apodize.types import WindowSpec


GENERAL_COSINE = "cosine"
COSINE_FORMULA = "(a - b*cos(2x)) + (c*cos(4x) - d*cos(6x)), x = pi*k/(size-1)"

WINDOW_PRESETS: dict[str, tuple[float, float, float, float]] = {
    "hann": (0.5, 0.5, 0.0, 0.0),
    "hamming": (0.54, 0.46, 0.0, 0.0),
    "blackman": (0.35875, 0.48829, 0.14128, 0.01168),
    "nuttall": (0.355768, 0.487396, 0.144232, 0.012604),
}

WINDOW_ALIASES = {
    "hanning": "hann",
}


def _normalize_name(name: str) -> str:
    return str(name).strip().lower()


def resolve_window_name(name: str) -> str:
    """Return the canonical preset name for `name` (aliases resolved)."""
    key = _normalize_name(name)
    key = WINDOW_ALIASES.get(key, key)
    if key not in WINDOW_PRESETS:
        known = ", ".join(sorted(WINDOW_PRESETS))
        raise ValueError(f"Unknown window: {name!r} (expected one of: {known}).")
    return key


def preset_spec(name: str, size: int) -> WindowSpec:
    """Build the WindowSpec of a named preset."""
    a, b, c, d = WINDOW_PRESETS[resolve_window_name(name)]
    return WindowSpec(a=a, b=b, c=c, d=d, size=size)


def window_algorithm_id(name: str) -> str:
    """Stable id of a window family, e.g. ``window_hann_symmetric_v1``."""
    key = _normalize_name(name)
    if key != GENERAL_COSINE:
        key = resolve_window_name(key)
    return f"window_{key}_symmetric_v1"


def build_window_registry() -> dict:
    """Build the registry of supported window families with their parameters."""
    registry: dict = {}
    for name, coefficients in WINDOW_PRESETS.items():
        algo_id = window_algorithm_id(name)
        registry[algo_id] = {
            "id": algo_id,
            "params": {
                "formula": COSINE_FORMULA,
                "coefficients": list(coefficients),
                "symmetric": True
            }
        }
    general_id = window_algorithm_id(GENERAL_COSINE)
    registry[general_id] = {
        "id": general_id,
        "params": {
            "formula": COSINE_FORMULA,
            "coefficients": "caller",
            "symmetric": True
        }
    }
    return registry


def algorithm_ids_from_registry(registry: dict) -> list[str]:
    """Return sorted algorithm IDs from registry."""
    return sorted(registry.keys())
