"""
Homes, their energy assets, and the per-home display metrics.

A home owns at most one asset of each kind. Every metric here treats a
missing asset as "not part of this figure" and never raises for it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .simulation.load_profiles import HEAT_PUMP_STANDBY_KW

EV_NET_POWER_DIVISOR: float = 3.0
"""Share of EV charging attributed to a home's displayed net power (1/3)."""


class HomeStatus(str, Enum):
    OPTIMIZING = "optimizing"
    CHARGING = "charging"
    IDLE = "idle"
    HEATING = "heating"
    EXPORTING = "exporting"


def _check_percent(name: str, value: float) -> None:
    if not (0.0 <= value <= 100.0):
        raise ValueError(f"{name} must be between 0 and 100, got {value}")


def _check_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Battery:
    """
    Home battery.

    Attributes:
        state_of_charge_percent: Charge level (0-100).
        capacity_kwh: Usable capacity in kWh.
        power_kw: Positive while charging, negative while discharging, 0 idle.
    """
    state_of_charge_percent: float
    capacity_kwh: float
    power_kw: float

    def __post_init__(self) -> None:
        _check_percent("state_of_charge_percent", self.state_of_charge_percent)
        _check_non_negative("capacity_kwh", self.capacity_kwh)


@dataclass(frozen=True)
class SolarArray:
    """
    Rooftop PV array.

    Attributes:
        power_kw: Current output in kW.
        capacity_kwp: Peak capacity in kWp.
    """
    power_kw: float
    capacity_kwp: float

    def __post_init__(self) -> None:
        _check_non_negative("power_kw", self.power_kw)
        _check_non_negative("capacity_kwp", self.capacity_kwp)


@dataclass(frozen=True)
class EVCharger:
    """
    EV charger with the connected car's state.

    Attributes:
        state_of_charge_percent: Car battery level (0-100).
        departure_time: Planned departure as ``HH:MM``.
        power_kw: Charging power; 0 when not charging.
    """
    state_of_charge_percent: float
    departure_time: str
    power_kw: float

    def __post_init__(self) -> None:
        _check_percent("state_of_charge_percent", self.state_of_charge_percent)
        _check_non_negative("power_kw", self.power_kw)


@dataclass(frozen=True)
class HeatPump:
    """
    Heat pump with indoor temperature readings.

    Attributes:
        power_kw: Electrical draw in kW.
        current_temp_c: Measured indoor temperature in °C.
        target_temp_c: Thermostat set point in °C.
    """
    power_kw: float
    current_temp_c: float
    target_temp_c: float

    def __post_init__(self) -> None:
        _check_non_negative("power_kw", self.power_kw)


@dataclass(frozen=True)
class Home:
    """
    A connected home and the assets it owns.

    ``status`` is only set for fixture records that carry a hard-coded label;
    live figures always come from ``classify_home_status()``.
    """
    id: int
    name: str
    battery: Optional[Battery] = None
    solar: Optional[SolarArray] = None
    ev: Optional[EVCharger] = None
    heat_pump: Optional[HeatPump] = None
    status: Optional[HomeStatus] = None

    @property
    def has_flexible_asset(self) -> bool:
        return any(asset is not None for asset in (self.battery, self.ev, self.heat_pump))


def _power(asset) -> float:
    return asset.power_kw if asset is not None else 0.0


def compute_net_power(home: Home) -> float:
    """
    Displayed net power of a home in kW.

    net = solar - heat_pump - ev / 3

    Battery power is left out on purpose: this is the figure the home cards
    show, not an energy balance.
    """
    return _power(home.solar) - _power(home.heat_pump) - _power(home.ev) / EV_NET_POWER_DIVISOR


def total_home_load(home: Home) -> float:
    """
    Flexible load drawn by a home: heat pump + EV + battery charging (kW).

    A discharging battery supplies power and is not counted.
    """
    return _power(home.heat_pump) + _power(home.ev) + max(_power(home.battery), 0.0)


def classify_home_status(home: Home) -> HomeStatus:
    """
    Derive a home's operating status from its asset powers.

    Rules are evaluated in order, first match wins:

    1. exporting  - solar output exceeds the total home load
    2. charging   - battery or EV power is positive
    3. heating    - heat-pump draw is above standby
    4. optimizing - a battery, EV charger or heat pump is present
    5. idle       - otherwise
    """
    if home.solar is not None and home.solar.power_kw > total_home_load(home):
        return HomeStatus.EXPORTING
    if _power(home.battery) > 0 or _power(home.ev) > 0:
        return HomeStatus.CHARGING
    if home.heat_pump is not None and home.heat_pump.power_kw > HEAT_PUMP_STANDBY_KW:
        return HomeStatus.HEATING
    if home.has_flexible_asset:
        return HomeStatus.OPTIMIZING
    return HomeStatus.IDLE


def solar_efficiency_percent(solar: Optional[SolarArray]) -> float:
    """
    Current output as a percentage of peak capacity.

    Returns 0.0 for a missing array or a non-positive capacity.
    """
    if solar is None or solar.capacity_kwp <= 0:
        return 0.0
    value = solar.power_kw / solar.capacity_kwp * 100.0
    return value if math.isfinite(value) else 0.0


def battery_flow(battery: Optional[Battery]) -> Optional[str]:
    """Return ``"charging"``, ``"discharging"`` or None for an idle/missing battery."""
    if battery is None or battery.power_kw == 0:
        return None
    return "charging" if battery.power_kw > 0 else "discharging"


def is_ev_charging(ev: Optional[EVCharger]) -> bool:
    return ev is not None and ev.power_kw > 0


@dataclass(frozen=True)
class HomeSummary:
    """Display data of one home card."""
    home: Home
    net_power_kw: float
    status: HomeStatus
    solar_efficiency_percent: float
    battery_flow: Optional[str]
    ev_charging: bool

    @property
    def status_matches_catalog(self) -> bool:
        return self.home.status is None or self.home.status == self.status


def annotate_home(home: Home) -> HomeSummary:
    return HomeSummary(
        home=home,
        net_power_kw=compute_net_power(home),
        status=classify_home_status(home),
        solar_efficiency_percent=solar_efficiency_percent(home.solar),
        battery_flow=battery_flow(home.battery),
        ev_charging=is_ev_charging(home.ev),
    )
