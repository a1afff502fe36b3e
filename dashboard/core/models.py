from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Tuple


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class CarouselItem:
    """A single slide in the dashboard carousel."""

    image_name: str
    item_id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class ListItem:
    """A row in the searchable list; only the title takes part in filtering."""

    title: str
    subtitle: str = ""
    image_name: str = ""
    item_id: str = field(default_factory=_new_id)


class CharacterCount(NamedTuple):
    """A character and the number of times it occurs."""

    character: str
    count: int


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Result of analysing one named word list."""

    list_name: str
    items: Tuple[str, ...] = ()
    top_characters: Tuple[CharacterCount, ...] = ()

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class DashboardData:
    """Sample data loaded once at startup."""

    word_lists: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    list_items: Tuple[ListItem, ...] = ()
    carousel_items: Tuple[CarouselItem, ...] = ()
