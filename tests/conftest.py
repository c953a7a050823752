from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


PRESET_NAMES = ("hann", "hamming", "blackman", "nuttall")


def build_window_config_dict(
    *,
    window: str = "hann",
    size: int = 8,
    dtype: str | None = None,
    coefficients: dict | None = None
) -> dict:
    cfg: dict = {"window": window, "size": size}
    if dtype is not None:
        cfg["dtype"] = dtype
    if coefficients is not None:
        cfg["coefficients"] = coefficients
    return cfg
