"""
Schedule and fleet KPI schemas for API responses.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HourlySampleResponse(BaseModel):
    """
    One hour of the neighbourhood schedule.

    Attributes:
        hour_index: Hour of the day (0-23).
        time_label: ``HH:00`` label for chart axes.
        consumption_kw: Base load plus flexible loads.
        solar_kw: PV generation.
        grid_kw: Grid exchange, negative when exporting.
        price_eur_per_kwh: Day-ahead price.
        optimized_kw: Heuristically load-shifted consumption.
    """

    model_config = ConfigDict(from_attributes=True)

    hour_index: int = Field(ge=0, le=23)
    time_label: str
    consumption_kw: float
    solar_kw: float
    grid_kw: float
    price_eur_per_kwh: float
    optimized_kw: float


class ScheduleResponse(BaseModel):
    """Full 24-hour schedule plus the hour marked as "now"."""

    seed: Optional[int] = None
    now_hour: int = Field(ge=0, le=23)
    samples: List[HourlySampleResponse]


class FleetStatsResponse(BaseModel):
    """Fleet KPIs shown in the dashboard header."""

    model_config = ConfigDict(from_attributes=True)

    hour_index: int = Field(ge=0, le=23)
    total_homes: int
    total_solar_power_kw: float
    total_battery_power_kw: float
    current_grid_power_kw: float
    grid_export_kw: float
    self_consumption_percent: float = Field(ge=0, le=100)
    total_savings_eur: float
    co2_saved_tons: float
