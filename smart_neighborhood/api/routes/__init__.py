"""
API route modules.

- schedule: schedule generation, refresh and fleet KPIs
- homes: home catalog with derived display metrics

All routers are prefixed with /api.
"""

from __future__ import annotations

from .homes import router as homes_router
from .schedule import router as schedule_router

__all__ = [
    "schedule_router",
    "homes_router",
]
