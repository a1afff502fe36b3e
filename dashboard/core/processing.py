from __future__ import annotations

import unicodedata
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from .constants import DEFAULT_TOP_N
from .models import CharacterCount, ListItem, StatisticsSnapshot


class InvalidArgumentError(ValueError):
    """Raised when a computation receives an argument outside its domain."""


def count_characters(words: Iterable[str]) -> Dict[str, int]:
    """Tally every character of every word, keyed in first-seen order.

    Words are NFC-normalised first so a base letter and a combining mark that
    have a precomposed form count as one character.
    """
    tally: Dict[str, int] = {}
    for word in words:
        for char in unicodedata.normalize("NFC", word):
            tally[char] = tally.get(char, 0) + 1
    return tally


def top_characters(words: Iterable[str], n: int = DEFAULT_TOP_N) -> List[CharacterCount]:
    """Return the ``n`` most frequent characters across ``words``.

    Counts are sorted in descending order. Characters with equal counts keep
    the order in which they were first seen, since the sort is stable over the
    insertion-ordered tally.
    """
    if n <= 0:
        raise InvalidArgumentError(f"n must be a positive integer, got {n!r}")

    return rank_characters(count_characters(words))[:n]


def filter_items(items: Sequence[ListItem], query: str) -> List[ListItem]:
    """Return the items whose title contains ``query``, ignoring case."""
    if not query:
        return list(items)
    needle = query.lower()
    return [item for item in items if needle in item.title.lower()]


def compute_statistics(
    lists: Mapping[str, Sequence[str]],
    list_name: str,
    n: int = DEFAULT_TOP_N,
) -> StatisticsSnapshot:
    """Analyse the named list; an unknown name is treated as an empty list."""
    words = tuple(lists.get(list_name, ()))
    return StatisticsSnapshot(
        list_name=list_name,
        items=words,
        top_characters=tuple(top_characters(words, n)),
    )


def format_list_title(list_name: str, item_count: int) -> str:
    return f"{list_name} ({item_count} items)"


def format_character_count(entry: CharacterCount) -> str:
    return f"{entry.character} = {entry.count}"


def build_character_frame(
    counts: Optional[Iterable[CharacterCount]] = None,
) -> pd.DataFrame:
    """Return a character/count dataframe for charts and tables."""
    rows = [{"character": entry.character, "count": int(entry.count)} for entry in counts or ()]
    if not rows:
        return pd.DataFrame(columns=["character", "count"])
    return pd.DataFrame(rows, columns=["character", "count"])


def rank_characters(tally: Mapping[str, int]) -> List[CharacterCount]:
    """Convert a tally into ranked counts without truncation."""
    ranked = sorted(tally.items(), key=lambda entry: entry[1], reverse=True)
    return [CharacterCount(char, count) for char, count in ranked]


def build_items_frame(items: Sequence[ListItem]) -> pd.DataFrame:
    """Return the displayable columns of the given list items."""
    if not items:
        return pd.DataFrame(columns=["title", "subtitle", "image_name"])
    return pd.DataFrame(
        [
            {"title": item.title, "subtitle": item.subtitle, "image_name": item.image_name}
            for item in items
        ],
        columns=["title", "subtitle", "image_name"],
    )
