from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_LIST_NAME, DEFAULT_TOP_N

# Load environment variables once so both Streamlit and tests share the same defaults.
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PROJECT_ROOT = PACKAGE_ROOT.parent
load_dotenv(PROJECT_ROOT / ".env")
load_dotenv()

DEFAULT_ASSETS_DIR = PACKAGE_ROOT / "assets"

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Dashboard configuration derived from the environment."""

    top_n: int = DEFAULT_TOP_N
    default_list: str = DEFAULT_LIST_NAME
    assets_dir: Path = DEFAULT_ASSETS_DIR
    log_level: str = "INFO"

    @property
    def has_assets(self) -> bool:
        """True when the configured assets directory exists."""
        return self.assets_dir.is_dir()


def _parse_top_n(raw: str) -> int:
    if not raw:
        return DEFAULT_TOP_N
    try:
        value = int(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-integer DASHBOARD_TOP_N=%r; using %d", raw, DEFAULT_TOP_N)
        return DEFAULT_TOP_N
    if value <= 0:
        LOGGER.warning("Ignoring non-positive DASHBOARD_TOP_N=%d; using %d", value, DEFAULT_TOP_N)
        return DEFAULT_TOP_N
    return value


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Return the cached application configuration."""
    top_n = _parse_top_n(os.getenv("DASHBOARD_TOP_N", "").strip())
    default_list = os.getenv("DASHBOARD_DEFAULT_LIST", "").strip() or DEFAULT_LIST_NAME
    assets_env = os.getenv("DASHBOARD_ASSETS_DIR", "").strip()
    assets_dir = Path(assets_env).expanduser() if assets_env else DEFAULT_ASSETS_DIR
    log_level = os.getenv("DASHBOARD_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return AppConfig(
        top_n=top_n,
        default_list=default_list,
        assets_dir=assets_dir,
        log_level=log_level,
    )
