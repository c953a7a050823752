"""Dict-based window configuration."""

from apodize.config.loader import config_array, config_iter, load_window_config
from apodize.config.validator import validate_window_config_dict

__all__ = [
    "config_array",
    "config_iter",
    "load_window_config",
    "validate_window_config_dict",
]
