"""
View models backing the dashboard widgets.

Each view model owns its input state, recomputes derived state when an input
changes, and notifies subscribers synchronously with the new derived value.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar

from .constants import DEFAULT_TOP_N
from .models import CarouselItem, CharacterCount, ListItem, StatisticsSnapshot
from .processing import InvalidArgumentError, compute_statistics, filter_items
from dashboard.utils.logging import get_logger

T = TypeVar("T")

LOGGER = get_logger("dashboard.viewmodels")


class Observable(Generic[T]):
    """Minimal subject that forwards new values to registered callbacks."""

    def __init__(self) -> None:
        self._listeners: List[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it again."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self, value: T) -> None:
        for listener in list(self._listeners):
            listener(value)


class ListViewModel(Observable[List[ListItem]]):
    """Searchable list state."""

    def __init__(self, items: Sequence[ListItem]) -> None:
        super().__init__()
        self._items: Tuple[ListItem, ...] = tuple(items)
        self._search_text = ""
        self._filtered: List[ListItem] = list(self._items)

    @property
    def items(self) -> Tuple[ListItem, ...]:
        return self._items

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def filtered_items(self) -> List[ListItem]:
        return list(self._filtered)

    def set_search_text(self, text: Optional[str]) -> List[ListItem]:
        text = text or ""
        if text == self._search_text:
            return self.filtered_items
        self._search_text = text
        self._filtered = filter_items(self._items, text)
        LOGGER.debug("Search %r matched %d of %d items", text, len(self._filtered), len(self._items))
        self._notify(self.filtered_items)
        return self.filtered_items


class StatisticsViewModel(Observable[StatisticsSnapshot]):
    """Character statistics for the currently selected word list."""

    def __init__(
        self,
        lists: Mapping[str, Sequence[str]],
        selected_list: Optional[str] = None,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        super().__init__()
        if not lists:
            raise InvalidArgumentError("at least one named list is required")
        if top_n <= 0:
            raise InvalidArgumentError(f"top_n must be a positive integer, got {top_n!r}")
        self._lists = {name: tuple(words) for name, words in lists.items()}
        self._top_n = top_n
        initial = selected_list if selected_list in self._lists else next(iter(self._lists))
        if selected_list and selected_list != initial:
            LOGGER.warning("Unknown list %r; starting with %r", selected_list, initial)
        self._selected = initial
        self._snapshot = compute_statistics(self._lists, initial, top_n)
        LOGGER.debug("Initial statistics for %s: %d items", initial, self._snapshot.item_count)

    @property
    def lists(self) -> Mapping[str, Tuple[str, ...]]:
        return dict(self._lists)

    @property
    def list_names(self) -> List[str]:
        return list(self._lists)

    @property
    def top_n(self) -> int:
        return self._top_n

    @property
    def selected_list(self) -> str:
        return self._selected

    @property
    def items(self) -> Tuple[str, ...]:
        return self._snapshot.items

    @property
    def top_characters(self) -> Tuple[CharacterCount, ...]:
        return self._snapshot.top_characters

    @property
    def snapshot(self) -> StatisticsSnapshot:
        return self._snapshot

    def select_list(self, list_name: str) -> bool:
        """Select ``list_name`` and recompute; unknown names are ignored."""
        if list_name not in self._lists:
            LOGGER.warning("Ignoring selection of unknown list %r", list_name)
            return False
        self._selected = list_name
        self._snapshot = compute_statistics(self._lists, list_name, self._top_n)
        LOGGER.info(
            "Selected %s: %s",
            list_name,
            ", ".join(f"{entry.character}={entry.count}" for entry in self._snapshot.top_characters) or "no characters",
        )
        self._notify(self._snapshot)
        return True


class CarouselViewModel(Observable[int]):
    """Paging state for the image carousel."""

    def __init__(self, items: Sequence[CarouselItem]) -> None:
        super().__init__()
        self._items: Tuple[CarouselItem, ...] = tuple(items)
        self._current_index = 0

    @property
    def items(self) -> Tuple[CarouselItem, ...]:
        return self._items

    @property
    def page_count(self) -> int:
        return len(self._items)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_item(self) -> Optional[CarouselItem]:
        if not self._items:
            return None
        return self._items[self._current_index]

    def move_to(self, index: int) -> int:
        """Show page ``index``, clamped into the valid range."""
        if not self._items:
            return 0
        clamped = min(max(int(index), 0), self.page_count - 1)
        if clamped != self._current_index:
            self._current_index = clamped
            self._notify(clamped)
        return self._current_index

    def next(self) -> int:
        if not self._items:
            return 0
        return self.move_to((self._current_index + 1) % self.page_count)

    def previous(self) -> int:
        if not self._items:
            return 0
        return self.move_to((self._current_index - 1) % self.page_count)
