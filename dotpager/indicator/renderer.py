"""Applies computed tiers to a row of dots.

IndicatorRenderer owns the dot handles of one indicator and the selection
state. It listens to a page source for count changes, recomputes tiers on
every selection and hands the result to its IndicatorHost as show/hide and
scale instructions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..exceptions import ObserverNotRegisteredError
from .calculator import compute_tiers, is_overflow
from .protocols import IndicatorHost, PageSource
from .tiers import ScaleTier

logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Selection bookkeeping for one indicator."""

    selected_index: int
    total_count: int
    max_visible: int
    last_selected_index: Optional[int] = None


class IndicatorRenderer:
    """Drives the dots of a host from page events.

    Example:
        ```python
        renderer = IndicatorRenderer(host, max_visible=9)
        renderer.attach(pages)
        renderer.on_page_selected(3)
        ```
    """

    def __init__(self, host: IndicatorHost, max_visible: int) -> None:
        self._host = host
        self._max_visible = max_visible
        self._source: Optional[PageSource] = None
        self._dots: List[Any] = []
        self._count = 0
        self._selected = 0
        self._last_selected: Optional[int] = None

    @property
    def indicator_count(self) -> int:
        return self._count

    @property
    def dots(self) -> List[Any]:
        """Dot handles in page order."""
        return list(self._dots)

    @property
    def state(self) -> SelectionState:
        return SelectionState(
            selected_index=self._selected,
            total_count=self._count,
            max_visible=self._max_visible,
            last_selected_index=self._last_selected,
        )

    def attach(self, source: PageSource) -> None:
        """Start tracking ``source`` and build one dot per page."""
        if self._source is not None:
            self.detach()
        self._source = source
        source.register_observer(self.on_count_changed)
        self.init_indicators()

    def detach(self) -> None:
        """Stop listening to the page source.

        A source that already forgot the observer is not an error.
        """
        source, self._source = self._source, None
        if source is None:
            return
        try:
            source.unregister_observer(self.on_count_changed)
        except ObserverNotRegisteredError:
            logger.debug("Page source had already dropped the indicator observer")

    def on_count_changed(self) -> None:
        """Rebuild the dots if the page count differs from ours."""
        if self._source is None:
            return
        if self._source.page_count != self._count:
            self.init_indicators()

    def init_indicators(self) -> None:
        self._last_selected = None
        self._selected = 0
        self._count = self._source.page_count if self._source is not None else 0
        self._create_dots()
        self.on_page_selected(0)

    def on_page_selected(self, position: int) -> None:
        """Update the dots for a newly selected page."""
        tiers = compute_tiers(position, self._count, self._max_visible)
        if tiers is None:
            return

        if is_overflow(self._count, self._max_visible):
            self._apply_all(tiers)
        else:
            if self._last_selected is not None:
                self._apply(self._last_selected, ScaleTier.NORMAL)
            self._apply(position, ScaleTier.SELECTED)

        self._selected = position
        self._last_selected = position

    def _create_dots(self) -> None:
        self._host.clear_dots()
        self._dots = []

        # A single page gets no indicator
        if self._count <= 1:
            return

        initial = ScaleTier.SMALLEST if is_overflow(self._count, self._max_visible) else ScaleTier.NORMAL
        for _ in range(self._count):
            self._dots.append(self._host.add_dot(initial.scale))
        logger.debug("Created %d dots (max visible %d)", self._count, self._max_visible)

    def _apply_all(self, tiers: List[ScaleTier]) -> None:
        for index, tier in enumerate(tiers):
            self._apply(index, tier)

    def _apply(self, index: int, tier: ScaleTier) -> None:
        if not 0 <= index < len(self._dots):
            return
        dot = self._dots[index]
        if tier.visible:
            self._host.set_dot_visible(dot, True)
            self._host.animate_scale(dot, tier.scale)
        else:
            self._host.set_dot_visible(dot, False)
