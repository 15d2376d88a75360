"""Configuration for dotpager indicators."""

from .indicator_config import (
    IndicatorConfig,
    get_config_path,
    load_indicator_config,
    save_indicator_config,
)

__all__ = [
    "IndicatorConfig",
    "get_config_path",
    "load_indicator_config",
    "save_indicator_config",
]
