from __future__ import annotations

from dashboard.core.models import DashboardData
from dashboard.core.sample_data import build_dashboard_data
from dashboard.utils.cache import cache_data


@cache_data(show_spinner=False)
def load_dashboard_data() -> DashboardData:
    """Build the static sample data once per server process."""
    return build_dashboard_data()
