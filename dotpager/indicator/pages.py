"""List-backed page source."""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..exceptions import ObserverNotRegisteredError
from .protocols import PageObserver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PageList(Generic[T]):
    """Ordered pages that notify observers whenever the set changes."""

    def __init__(self, pages: Optional[Iterable[T]] = None) -> None:
        self._pages: List[T] = list(pages or [])
        self._observers: List[PageObserver] = []

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> T:
        return self._pages[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._pages)

    def register_observer(self, observer: PageObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: PageObserver) -> None:
        try:
            self._observers.remove(observer)
        except ValueError as e:
            raise ObserverNotRegisteredError(
                "Observer is not registered", observers=len(self._observers)
            ) from e

    def append(self, page: T) -> None:
        self._pages.append(page)
        self._notify()

    def insert(self, index: int, page: T) -> None:
        self._pages.insert(index, page)
        self._notify()

    def remove(self, index: int) -> T:
        """Remove and return the page at ``index``."""
        page = self._pages.pop(index)
        self._notify()
        return page

    def reset(self, pages: Iterable[T]) -> None:
        """Replace every page at once."""
        self._pages = list(pages)
        self._notify()

    def _notify(self) -> None:
        logger.debug("Page count now %d, notifying %d observers", len(self._pages), len(self._observers))
        # Copy so observers may unregister while being notified
        for observer in list(self._observers):
            observer()
