"""
Home and asset schemas for API responses.

Responses are built from ``HomeSummary`` objects: the asset sections mirror
the catalog, while ``status`` and ``net_power_kw`` are the derived values.
The hard-coded catalog label, when present, is exposed separately as
``catalog_status``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ...homes import HomeSummary


class BatteryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    state_of_charge_percent: float
    capacity_kwh: float
    power_kw: float


class SolarArrayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    power_kw: float
    capacity_kwp: float


class EVChargerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    state_of_charge_percent: float
    departure_time: str
    power_kw: float


class HeatPumpResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    power_kw: float
    current_temp_c: float
    target_temp_c: float


class HomeResponse(BaseModel):
    """
    Home card / detail panel data.

    Attributes:
        id: Home identifier.
        name: Display name.
        status: Status derived from the asset powers.
        catalog_status: Label stored in the catalog, if any.
        net_power_kw: solar - heat pump - EV/3 (battery excluded).
        solar_efficiency_percent: Solar output over peak capacity (0 when unknown).
        battery_flow: "charging", "discharging" or None.
        ev_charging: Whether the EV charger is drawing power.
    """

    id: int
    name: str
    status: str
    catalog_status: Optional[str] = None
    net_power_kw: float
    solar_efficiency_percent: float
    battery_flow: Optional[str] = None
    ev_charging: bool
    battery: Optional[BatteryResponse] = None
    solar: Optional[SolarArrayResponse] = None
    ev: Optional[EVChargerResponse] = None
    heat_pump: Optional[HeatPumpResponse] = None

    @classmethod
    def from_summary(cls, summary: HomeSummary) -> "HomeResponse":
        home = summary.home
        return cls(
            id=home.id,
            name=home.name,
            status=summary.status.value,
            catalog_status=home.status.value if home.status is not None else None,
            net_power_kw=summary.net_power_kw,
            solar_efficiency_percent=summary.solar_efficiency_percent,
            battery_flow=summary.battery_flow,
            ev_charging=summary.ev_charging,
            battery=BatteryResponse.model_validate(home.battery) if home.battery else None,
            solar=SolarArrayResponse.model_validate(home.solar) if home.solar else None,
            ev=EVChargerResponse.model_validate(home.ev) if home.ev else None,
            heat_pump=HeatPumpResponse.model_validate(home.heat_pump) if home.heat_pump else None,
        )
