"""dotpager UI widgets package."""

from .dot import Dot
from .pager_indicator import OverflowPagerIndicator

__all__ = [
    "Dot",
    "OverflowPagerIndicator",
]
