"""Indicator state: scale tiers, the tier calculator and the renderer."""

from .calculator import compute_tiers, is_overflow, window_bounds
from .pages import PageList
from .protocols import IndicatorHost, PageSource
from .renderer import IndicatorRenderer, SelectionState
from .tiers import ScaleTier

__all__ = [
    "IndicatorHost",
    "IndicatorRenderer",
    "PageList",
    "PageSource",
    "ScaleTier",
    "SelectionState",
    "compute_tiers",
    "is_overflow",
    "window_bounds",
]
