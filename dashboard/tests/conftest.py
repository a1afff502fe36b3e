from __future__ import annotations

from typing import Iterator, List, Tuple

import pytest

from dashboard.core import config as core_config
from dashboard.core.models import ListItem


@pytest.fixture(autouse=True)
def reset_config_cache(monkeypatch) -> Iterator[None]:
    """Reset cached configuration and clear dashboard variables for tests."""
    for name in ("DASHBOARD_TOP_N", "DASHBOARD_DEFAULT_LIST", "DASHBOARD_ASSETS_DIR", "DASHBOARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_config.cache_clear()
    yield
    core_config.get_config.cache_clear()


@pytest.fixture
def fruit_words() -> Tuple[str, ...]:
    return ("apple", "banana", "orange", "blueberry")


@pytest.fixture
def fruit_items() -> List[ListItem]:
    return [
        ListItem(title="Apple", subtitle="A juicy red fruit", image_name="image1"),
        ListItem(title="Banana", subtitle="A yellow curved fruit", image_name="image2"),
        ListItem(title="Orange", subtitle="A citrus fruit", image_name="image3"),
        ListItem(title="Blueberry", subtitle="Small blue fruit", image_name="image4"),
        ListItem(title="Grape", subtitle="A small purple fruit", image_name="image5"),
    ]
