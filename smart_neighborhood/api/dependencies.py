from __future__ import annotations

from datetime import datetime
from functools import lru_cache

from ..application import DashboardApplication


@lru_cache()
def get_application_service() -> DashboardApplication:
    """
    Provide a cached DashboardApplication instance for API routes.
    """
    return DashboardApplication()


def get_reference_time() -> datetime:
    """
    Provide the reference time used to mark the current hour.

    Overridden in tests to pin the clock.
    """
    return datetime.now()
