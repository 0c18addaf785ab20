"""
Synthetic energy-profile models.

This package collects the building blocks of the daily neighbourhood schedule:

* Deterministic and stochastic hourly shapes for the household base load,
  PV generation, EV charging and heat-pump duty (`load_profiles`, `solar`).
* The day-ahead price curve (`prices`).
* The schedule synthesizer that composes them into 24 hourly samples
  (`schedule`).
"""

from __future__ import annotations

from .load_profiles import (
    HEAT_PUMP_STANDBY_KW,
    AssetHour,
    AssetProfileGenerator,
    AssetProfiles,
    BaselineLoadProfile,
    EVChargingProfile,
    HeatPumpProfile,
    LoadProfile,
)
from .prices import DayAheadPriceModel, PriceModel
from .schedule import (
    HourlySample,
    ScheduleSynthesizer,
    generate_daily_schedule,
    optimized_load_kw,
)
from .solar import SolarArcModel

__all__ = [
    # Asset shapes
    "LoadProfile",
    "BaselineLoadProfile",
    "EVChargingProfile",
    "HeatPumpProfile",
    "HEAT_PUMP_STANDBY_KW",
    "SolarArcModel",
    "AssetHour",
    "AssetProfiles",
    "AssetProfileGenerator",
    # Prices
    "PriceModel",
    "DayAheadPriceModel",
    # Schedule
    "HourlySample",
    "ScheduleSynthesizer",
    "generate_daily_schedule",
    "optimized_load_kw",
]
