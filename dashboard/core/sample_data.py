"""Static sample data shown by the dashboard.

Each builder returns freshly constructed values so callers own their copies.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .models import CarouselItem, DashboardData, ListItem


def build_word_lists() -> Dict[str, Tuple[str, ...]]:
    """Named word lists analysed by the statistics sheet, in display order."""
    return {
        "List 1": ("apple", "banana", "orange", "blueberry"),
        "List 2": ("strawberry", "kiwi", "grape", "melon"),
        "List 3": ("peach", "plum", "nectarine", "pear"),
    }


def build_list_items() -> List[ListItem]:
    return [
        ListItem(title="Apple", subtitle="A juicy red fruit", image_name="image1"),
        ListItem(title="Banana", subtitle="A yellow curved fruit", image_name="image2"),
        ListItem(title="Orange", subtitle="A citrus fruit", image_name="image3"),
        ListItem(title="Blueberry", subtitle="Small blue fruit", image_name="image4"),
        ListItem(title="Grape", subtitle="A small purple fruit", image_name="image5"),
    ]


def build_carousel_items() -> List[CarouselItem]:
    return [CarouselItem(image_name=f"image{index}") for index in range(1, 6)]


def build_dashboard_data() -> DashboardData:
    return DashboardData(
        word_lists=build_word_lists(),
        list_items=tuple(build_list_items()),
        carousel_items=tuple(build_carousel_items()),
    )
