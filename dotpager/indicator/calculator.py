"""Tier calculation for page indicator dots.

Given the selected page, the page count and the visible-dot budget, decide the
tier of every dot. Up to ``max_visible`` pages every dot is shown. Past that the
indicator switches to overflow mode: a window of ``max_visible`` dots slides
along with the selection, and dots shrink towards the window edges so the row
reads as a strip continuing beyond what is shown.

The functions here are pure. Invalid input yields ``None`` instead of raising,
since selection events can race with page count changes.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .tiers import ScaleTier

logger = logging.getLogger(__name__)

# Dots kept ahead of the selection before the window starts sliding
_LEAD_OFFSET = 4

# Absolute page position at which the leading edge starts tapering
_LEADING_TAPER_POSITION = 5


def is_overflow(total_count: int, max_visible: int) -> bool:
    """True when there are more pages than dots that can be shown."""
    return total_count > max_visible


def _accepts(selected_index: int, total_count: int) -> bool:
    if total_count == 0:
        logger.debug("Ignoring selection %d: no pages", selected_index)
        return False
    # selected_index == total_count is let through on purpose; the selected
    # slot then lies past the last dot
    if selected_index < 0 or selected_index > total_count:
        logger.debug("Ignoring selection %d of %d pages", selected_index, total_count)
        return False
    return True


def window_bounds(selected_index: int, total_count: int, max_visible: int) -> Tuple[int, bool]:
    """Return ``(real_start, pinned)`` for an overflow-mode window.

    ``pinned`` is True when the window would run past the last page and has
    been moved back so it ends on it.
    """
    real_start = max(0, selected_index - max_visible + _LEAD_OFFSET)
    if real_start + max_visible > total_count:
        return total_count - max_visible, True
    return real_start, False


def _simple_tiers(selected_index: int, total_count: int) -> List[ScaleTier]:
    tiers = [ScaleTier.NORMAL] * total_count
    if selected_index < total_count:
        tiers[selected_index] = ScaleTier.SELECTED
    return tiers


def _overflow_tiers(selected_index: int, total_count: int, max_visible: int) -> List[ScaleTier]:
    # One spare slot so that selected_index == total_count has somewhere to go
    tiers = [ScaleTier.GONE] * (total_count + 1)

    real_start, pinned = window_bounds(selected_index, total_count, max_visible)
    window_end = real_start + max_visible

    if pinned:
        # Nothing follows the last two dots, so they stay at full size
        tiers[total_count - 1] = ScaleTier.NORMAL
        tiers[total_count - 2] = ScaleTier.NORMAL
    else:
        if window_end - 2 < total_count:
            tiers[window_end - 2] = ScaleTier.SMALL
        if window_end - 1 < total_count:
            tiers[window_end - 1] = ScaleTier.SMALLEST

    for i in range(real_start, window_end - 2):
        tiers[i] = ScaleTier.NORMAL

    # Leading taper keys off the absolute page position, not the window
    if selected_index > _LEADING_TAPER_POSITION:
        tiers[real_start] = ScaleTier.SMALLEST
        tiers[real_start + 1] = ScaleTier.SMALL
    elif selected_index == _LEADING_TAPER_POSITION:
        tiers[real_start] = ScaleTier.SMALL

    tiers[selected_index] = ScaleTier.SELECTED

    return tiers[:total_count]


def compute_tiers(
    selected_index: int, total_count: int, max_visible: int
) -> Optional[List[ScaleTier]]:
    """Compute the tier of every dot for the given selection.

    Args:
        selected_index: Selected page position
        total_count: Number of pages (and dots)
        max_visible: Dot budget; overflow mode assumes at least 5

    Returns:
        One tier per page, or None when the selection should be ignored
        (no pages, or a position outside ``[0, total_count]``)
    """
    if not _accepts(selected_index, total_count):
        return None

    if is_overflow(total_count, max_visible):
        return _overflow_tiers(selected_index, total_count, max_visible)
    return _simple_tiers(selected_index, total_count)
