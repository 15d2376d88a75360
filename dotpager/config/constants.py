"""
Centralized constants for dotpager.

Indicator defaults and the scale factors used for each dot tier live here so
the widgets, the CLI and the persisted config agree on one set of values.
"""

from pathlib import Path

# =============================================================================
# INDICATOR DEFAULTS
# =============================================================================

DEFAULT_MAX_INDICATORS = 9  # Dots visible before switching to overflow mode
DEFAULT_INDICATOR_SIZE = 1  # Cells per dot
DEFAULT_INDICATOR_MARGIN = 1  # Cells on each side of a dot
DEFAULT_STROKE_WIDTH = 1  # 0 disables the stroke color for tapered dots
DEFAULT_FILL_COLOR = "#ffffff"
DEFAULT_STROKE_COLOR = "#808080"

# The windowing arithmetic reserves one leading and two trailing taper slots
MIN_MAX_INDICATORS = 5

# =============================================================================
# SCALE FACTORS
# =============================================================================

SCALE_GONE = 0.0
SCALE_SMALLEST = 0.2
SCALE_SMALL = 0.4
SCALE_NORMAL = 0.6
SCALE_SELECTED = 1.0

# Seconds for a dot to reach its target scale
SCALE_ANIMATION_DURATION = 0.2

# =============================================================================
# PATHS
# =============================================================================

DOTPAGER_CONFIG_DIR = Path.home() / ".config" / "dotpager"
