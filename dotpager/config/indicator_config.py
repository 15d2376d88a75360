"""
Indicator configuration.

Holds the options an indicator is constructed with and handles persistence of
user defaults. Config is stored in ~/.config/dotpager/indicator.json
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from rich.color import Color, ColorParseError

from ..exceptions import ConfigurationError
from .constants import (
    DEFAULT_FILL_COLOR,
    DEFAULT_INDICATOR_MARGIN,
    DEFAULT_INDICATOR_SIZE,
    DEFAULT_MAX_INDICATORS,
    DEFAULT_STROKE_COLOR,
    DEFAULT_STROKE_WIDTH,
    DOTPAGER_CONFIG_DIR,
    MIN_MAX_INDICATORS,
)

logger = logging.getLogger(__name__)


@dataclass
class IndicatorConfig:
    """Options passed to an indicator at construction.

    Only ``max_visible`` affects which dots are shown; the remaining options
    are passed through to the dot widgets untouched.
    """

    max_visible: int = DEFAULT_MAX_INDICATORS
    dot_size: int = DEFAULT_INDICATOR_SIZE
    dot_margin: int = DEFAULT_INDICATOR_MARGIN
    fill_color: str = DEFAULT_FILL_COLOR
    stroke_color: str = DEFAULT_STROKE_COLOR
    stroke_width: int = DEFAULT_STROKE_WIDTH

    def validate(self) -> IndicatorConfig:
        """Check the options, returning self so calls can be chained.

        Raises:
            ConfigurationError: If any option is out of range or a color
                cannot be parsed.
        """
        if self.max_visible < MIN_MAX_INDICATORS:
            raise ConfigurationError(
                f"max_visible must be at least {MIN_MAX_INDICATORS}",
                max_visible=self.max_visible,
            )
        if self.dot_size < 1:
            raise ConfigurationError("dot_size must be positive", dot_size=self.dot_size)
        if self.dot_margin < 0:
            raise ConfigurationError("dot_margin cannot be negative", dot_margin=self.dot_margin)
        if self.stroke_width < 0:
            raise ConfigurationError(
                "stroke_width cannot be negative", stroke_width=self.stroke_width
            )
        for name in ("fill_color", "stroke_color"):
            value = getattr(self, name)
            try:
                Color.parse(value)
            except ColorParseError as e:
                raise ConfigurationError(f"{name} is not a valid color", **{name: value}) from e
        return self

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IndicatorConfig:
        """Build a config from a dict, ignoring unknown keys.

        Raises:
            ConfigurationError: If a known key holds a value of the wrong type.
        """
        known = {f.name: f.type for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.debug("Ignoring unknown indicator option %r", key)
                continue
            if known[key] == "int":
                if isinstance(value, bool):
                    raise ConfigurationError(f"{key} must be an integer", **{key: value})
                try:
                    value = int(value)
                except (TypeError, ValueError) as e:
                    raise ConfigurationError(f"{key} must be an integer", **{key: value}) from e
            else:
                value = str(value)
            values[key] = value
        return cls(**values)


def get_config_path() -> Path:
    """
    Get path to the indicator config file.

    Returns:
        Path to ~/.config/dotpager/indicator.json
    """
    DOTPAGER_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return DOTPAGER_CONFIG_DIR / "indicator.json"


def load_indicator_config() -> IndicatorConfig:
    """
    Load persisted indicator defaults.

    Returns:
        The stored config merged over the built-in defaults, or the defaults
        if the file doesn't exist or is invalid
    """
    path = get_config_path()
    if not path.exists():
        return IndicatorConfig()
    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read %s, using defaults: %s", path, e)
        return IndicatorConfig()
    if not isinstance(raw, dict):
        return IndicatorConfig()
    try:
        return IndicatorConfig.from_dict(raw).validate()
    except ConfigurationError as e:
        logger.warning("Ignoring invalid indicator config in %s: %s", path, e)
        return IndicatorConfig()


def save_indicator_config(config: IndicatorConfig) -> None:
    """
    Save indicator defaults to file.

    Args:
        config: Configuration to save
    """
    path = get_config_path()
    try:
        path.write_text(json.dumps(config.to_dict(), indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.debug("Failed to save indicator config: %s", e)
