from __future__ import annotations

DEFAULT_TOP_N = 3
DEFAULT_LIST_NAME = "List 1"

SEARCH_PLACEHOLDER = "Search fruits..."
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")

TOP_CHARACTERS_HEADER = "Top Characters:"
ITEMS_HEADER = "Items:"
