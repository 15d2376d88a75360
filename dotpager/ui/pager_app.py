"""
Pager demo app - pages through text with an overflow indicator underneath.
"""

import logging
from typing import Iterable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.widgets import Footer, Static

from ..config import IndicatorConfig
from ..indicator.pages import PageList
from .widget_ids import PAGE_CONTENT, PAGE_INDICATOR, PAGE_STATUS
from .widgets import OverflowPagerIndicator

logger = logging.getLogger(__name__)


def sample_pages(count: int) -> PageList[str]:
    """Build ``count`` placeholder pages."""
    return PageList(f"Page {i + 1}" for i in range(count))


class PagerApp(App[None]):
    """Page through a PageList; every page change is reported to the indicator."""

    CSS = """
    #pager {
        height: 100%;
        align: center middle;
    }

    #page-content {
        width: 40;
        height: 5;
        border: round $accent;
        content-align: center middle;
    }

    #page-status {
        width: auto;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("right,l", "next_page", "Next"),
        Binding("left,h", "previous_page", "Previous"),
        Binding("a", "add_page", "Add page"),
        Binding("x", "remove_page", "Remove page"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        pages: Optional[Iterable[str]] = None,
        config: Optional[IndicatorConfig] = None,
    ):
        super().__init__()
        self.pages: PageList[str] = pages if isinstance(pages, PageList) else PageList(pages or [])
        self.indicator_config = config or IndicatorConfig()
        self.current_page = 0

    def compose(self) -> ComposeResult:
        with Vertical(id="pager"):
            yield Static("", id=PAGE_CONTENT)
            with Center():
                yield OverflowPagerIndicator(self.indicator_config, id=PAGE_INDICATOR)
            with Center():
                yield Static("", id=PAGE_STATUS)
        yield Footer()

    @property
    def indicator(self) -> OverflowPagerIndicator:
        return self.query_one(f"#{PAGE_INDICATOR}", OverflowPagerIndicator)

    def on_mount(self) -> None:
        # The indicator registers first, so it has rebuilt its dots by the
        # time _on_pages_changed reselects the current page
        self.indicator.attach(self.pages)
        self.pages.register_observer(self._on_pages_changed)
        self._show_page()

    def action_next_page(self) -> None:
        self._settle_on(self.current_page + 1)

    def action_previous_page(self) -> None:
        self._settle_on(self.current_page - 1)

    def action_add_page(self) -> None:
        self.pages.append(f"Page {len(self.pages) + 1}")

    def action_remove_page(self) -> None:
        if len(self.pages) > 0:
            self.pages.remove(self.current_page)

    def _settle_on(self, position: int) -> None:
        """Move to ``position`` if it exists and report it to the indicator."""
        if not 0 <= position < len(self.pages):
            return
        self.current_page = position
        self.indicator.on_page_selected(position)
        self._show_page()

    def _on_pages_changed(self) -> None:
        self.current_page = min(self.current_page, max(0, len(self.pages) - 1))
        self.indicator.on_page_selected(self.current_page)
        self._show_page()

    def _show_page(self) -> None:
        content = self.query_one(f"#{PAGE_CONTENT}", Static)
        status = self.query_one(f"#{PAGE_STATUS}", Static)
        if len(self.pages) == 0:
            content.update("[dim]No pages[/dim]")
            status.update("")
            return
        content.update(self.pages[self.current_page])
        status.update(f"{self.current_page + 1} / {len(self.pages)}")
        logger.debug("Showing page %d of %d", self.current_page, len(self.pages))


def run_pager(pages: int, config: Optional[IndicatorConfig] = None) -> None:
    """Run the demo app with ``pages`` placeholder pages."""
    PagerApp(sample_pages(pages), config=config).run()
