"""Single page indicator dot.

Terminal cells cannot be scaled, so a dot approximates its scale with a glyph:
the nearest tier to the current ``dot_scale`` picks the character. While an
animation runs the glyph steps through the intermediate tiers.
"""

import logging
from typing import Optional

from rich.style import Style
from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from ...config.constants import SCALE_NORMAL
from ...indicator.tiers import ScaleTier

logger = logging.getLogger(__name__)

GLYPHS = {
    ScaleTier.GONE: " ",
    ScaleTier.SMALLEST: "·",
    ScaleTier.SMALL: "•",
    ScaleTier.NORMAL: "●",
    ScaleTier.SELECTED: "●",
}


class Dot(Widget):
    """One indicator dot.

    Shows:
    - ● bold for the selected page
    - ● for pages in the window
    - • and · for pages tapering off at the window edges
    """

    DEFAULT_CSS = """
    Dot {
        height: 1;
        width: 1;
        content-align: center middle;
    }
    """

    dot_scale = reactive(SCALE_NORMAL)

    def __init__(
        self,
        scale: float = SCALE_NORMAL,
        *,
        size: int = 1,
        margin: int = 0,
        fill_color: str = "white",
        stroke_color: str = "grey50",
        stroke_width: int = 0,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        super().__init__(name=name, id=id, classes=classes)
        self.set_reactive(Dot.dot_scale, scale)
        # Last scale handed to animate(); dot_scale lags behind while animating
        self.target_scale = scale
        self.fill_color = fill_color
        self.stroke_color = stroke_color
        self.stroke_width = stroke_width
        self.styles.width = size
        self.styles.margin = (0, margin)

    @property
    def tier(self) -> ScaleTier:
        return ScaleTier.from_scale(self.dot_scale)

    def render(self) -> Text:
        tier = self.tier
        tapered = tier in (ScaleTier.SMALL, ScaleTier.SMALLEST)
        color = self.stroke_color if tapered and self.stroke_width > 0 else self.fill_color
        style = Style(color=color, bold=tier is ScaleTier.SELECTED)
        return Text(GLYPHS[tier], style=style, no_wrap=True)
