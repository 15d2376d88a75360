"""
Protocols for indicator collaborators.

These protocols define what a page source and a dot host must provide for
IndicatorRenderer to drive them.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

PageObserver = Callable[[], None]


@runtime_checkable
class PageSource(Protocol):
    """A paged collection the indicator tracks."""

    @property
    def page_count(self) -> int:
        """Number of pages currently in the source."""
        ...

    def register_observer(self, observer: PageObserver) -> None:
        """Call ``observer`` whenever pages are inserted, removed or reset."""
        ...

    def unregister_observer(self, observer: PageObserver) -> None:
        """Stop notifying ``observer``.

        May raise ObserverNotRegisteredError if the observer is unknown.
        """
        ...


@runtime_checkable
class IndicatorHost(Protocol):
    """
    Owner of the concrete dot handles.

    The renderer never inspects a handle; it only passes back whatever
    ``add_dot`` returned.
    """

    def clear_dots(self) -> None:
        """Remove every dot."""
        ...

    def add_dot(self, scale: float) -> Any:
        """Append a dot starting at ``scale`` and return its handle."""
        ...

    def set_dot_visible(self, dot: Any, visible: bool) -> None:
        """Show or hide a dot."""
        ...

    def animate_scale(self, dot: Any, scale: float) -> None:
        """Start moving a dot towards ``scale`` without waiting for it."""
        ...
