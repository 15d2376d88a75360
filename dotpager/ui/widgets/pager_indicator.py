"""Overflow pager indicator widget.

A row of dots tracking the selected page of a PageSource:

    · • ● ● ● ● ● • ·

- attach to a page source with ``attach()``
- report page changes with ``on_page_selected()`` from whatever decides the
  current page (key bindings, a snapping scroll view, ...)
"""

import logging
from typing import Any, List, Optional

from textual.containers import Horizontal

from ...config import IndicatorConfig
from ...config.constants import SCALE_ANIMATION_DURATION
from ...indicator.protocols import PageSource
from ...indicator.renderer import IndicatorRenderer
from .dot import Dot

logger = logging.getLogger(__name__)


class OverflowPagerIndicator(Horizontal):
    """Page indicator that collapses to a sliding window of dots.

    With up to ``max_visible`` pages every page gets a dot. Beyond that only a
    window of ``max_visible`` dots is shown, shrinking towards its edges.
    """

    DEFAULT_CSS = """
    OverflowPagerIndicator {
        height: 1;
        width: auto;
    }
    """

    def __init__(
        self,
        config: Optional[IndicatorConfig] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        super().__init__(name=name, id=id, classes=classes)
        self.config = (config or IndicatorConfig()).validate()
        self._dot_renderer = IndicatorRenderer(self, self.config.max_visible)
        self._pending_source: Optional[PageSource] = None

    @property
    def indicator_count(self) -> int:
        return self._dot_renderer.indicator_count

    @property
    def selected_index(self) -> int:
        return self._dot_renderer.state.selected_index

    @property
    def dots(self) -> List[Dot]:
        return list(self._dot_renderer.dots)

    def dot_scales(self) -> List[float]:
        """Target scale of every dot, 0.0 for hidden ones."""
        return [dot.target_scale if dot.display else 0.0 for dot in self.dots]

    def attach(self, source: PageSource) -> None:
        """Track ``source``, rebuilding the dots whenever its page count changes."""
        if not self.is_mounted:
            # Dots can only be mounted once we are
            self._pending_source = source
            return
        self._dot_renderer.attach(source)

    def on_page_selected(self, position: int) -> None:
        """Select ``position``; out-of-range positions are ignored."""
        self._dot_renderer.on_page_selected(position)

    def on_mount(self) -> None:
        if self._pending_source is not None:
            source, self._pending_source = self._pending_source, None
            self._dot_renderer.attach(source)

    def on_unmount(self) -> None:
        self._dot_renderer.detach()

    # IndicatorHost

    def clear_dots(self) -> None:
        self.remove_children()

    def add_dot(self, scale: float) -> Dot:
        dot = Dot(
            scale,
            size=self.config.dot_size,
            margin=self.config.dot_margin,
            fill_color=self.config.fill_color,
            stroke_color=self.config.stroke_color,
            stroke_width=self.config.stroke_width,
        )
        self.mount(dot)
        return dot

    def set_dot_visible(self, dot: Any, visible: bool) -> None:
        dot.display = visible

    def animate_scale(self, dot: Any, scale: float) -> None:
        dot.target_scale = scale
        if self.is_running:
            # A new animation on the same attribute replaces the running one
            dot.animate("dot_scale", value=scale, duration=SCALE_ANIMATION_DURATION)
        else:
            dot.dot_scale = scale
