from __future__ import annotations

from dashboard.core.sample_data import (
    build_carousel_items,
    build_dashboard_data,
    build_list_items,
    build_word_lists,
)


def test_word_lists_keep_definition_order() -> None:
    lists = build_word_lists()
    assert list(lists) == ["List 1", "List 2", "List 3"]
    assert lists["List 2"] == ("strawberry", "kiwi", "grape", "melon")


def test_builders_return_fresh_values() -> None:
    first = build_word_lists()
    first["List 1"] = ()
    assert build_word_lists()["List 1"] == ("apple", "banana", "orange", "blueberry")


def test_list_items() -> None:
    items = build_list_items()
    assert [item.title for item in items] == ["Apple", "Banana", "Orange", "Blueberry", "Grape"]
    assert items[2].subtitle == "A citrus fruit"
    assert len({item.item_id for item in items}) == len(items)


def test_carousel_items() -> None:
    assert [item.image_name for item in build_carousel_items()] == [f"image{i}" for i in range(1, 6)]


def test_dashboard_data_bundle() -> None:
    data = build_dashboard_data()
    assert set(data.word_lists) == {"List 1", "List 2", "List 3"}
    assert len(data.list_items) == 5
    assert len(data.carousel_items) == 5
