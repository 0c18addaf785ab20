"""
Pydantic schemas for API responses.

Organized by domain:
- schedule: hourly samples and fleet KPIs
- homes: homes and their assets
"""

from __future__ import annotations

from .homes import (
    BatteryResponse,
    EVChargerResponse,
    HeatPumpResponse,
    HomeResponse,
    SolarArrayResponse,
)
from .schedule import FleetStatsResponse, HourlySampleResponse, ScheduleResponse

__all__ = [
    # Schedule schemas
    "HourlySampleResponse",
    "ScheduleResponse",
    "FleetStatsResponse",
    # Home schemas
    "BatteryResponse",
    "SolarArrayResponse",
    "EVChargerResponse",
    "HeatPumpResponse",
    "HomeResponse",
]
