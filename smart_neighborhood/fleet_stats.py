from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Sequence

from .homes import Home
from .simulation.schedule import HourlySample

DEFAULT_SAVINGS_EUR: float = 1247.50
DEFAULT_CO2_SAVED_TONS: float = 2.4


@dataclass(frozen=True)
class FleetStats:
    """
    Fleet-wide KPIs shown in the dashboard header.

    Attributes:
        total_homes: Number of connected homes.
        total_solar_power_kw: Sum of current PV output over homes with solar.
        total_battery_power_kw: Signed sum of battery power (negative = discharging).
        current_grid_power_kw: Neighbourhood grid exchange of the latest hour
            (negative = net export).
        grid_export_kw: Exported power, max(-current_grid_power_kw, 0).
        self_consumption_percent: Share of solar generation used on site (0-100).
        total_savings_eur: Reported monthly savings (display figure).
        co2_saved_tons: Reported CO2 avoided (display figure).
    """
    total_homes: int
    total_solar_power_kw: float
    total_battery_power_kw: float
    current_grid_power_kw: float
    grid_export_kw: float
    self_consumption_percent: float
    total_savings_eur: float
    co2_saved_tons: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def self_consumption_percent(sample: Optional[HourlySample]) -> float:
    """
    Solar consumed on site divided by solar generated, in percent.

    Returns 0.0 when there is no sample or no generation.
    """
    if sample is None or sample.solar_kw <= 0:
        return 0.0
    consumed = min(sample.solar_kw, max(sample.consumption_kw, 0.0))
    return consumed / sample.solar_kw * 100.0


def compute_fleet_stats(
    fleet: Sequence[Home],
    latest_sample: Optional[HourlySample],
    *,
    savings_eur: float = DEFAULT_SAVINGS_EUR,
    co2_saved_tons: float = DEFAULT_CO2_SAVED_TONS,
) -> FleetStats:
    """
    Roll up fleet totals and ratios.

    Pure function: the same fleet and sample always give the same result.

    Args:
        fleet: Homes in catalog order.
        latest_sample: Schedule entry for the current hour, or None.
        savings_eur: Monthly savings figure passed through for display.
        co2_saved_tons: CO2 avoided figure passed through for display.

    Returns:
        FleetStats for the inputs.
    """
    total_solar = sum(home.solar.power_kw for home in fleet if home.solar is not None)
    total_battery = sum(home.battery.power_kw for home in fleet if home.battery is not None)
    grid = latest_sample.grid_kw if latest_sample is not None else 0.0
    exporting = latest_sample is not None and latest_sample.is_exporting

    return FleetStats(
        total_homes=len(fleet),
        total_solar_power_kw=float(total_solar),
        total_battery_power_kw=float(total_battery),
        current_grid_power_kw=float(grid),
        grid_export_kw=float(-grid) if exporting else 0.0,
        self_consumption_percent=self_consumption_percent(latest_sample),
        total_savings_eur=float(savings_eur),
        co2_saved_tons=float(co2_saved_tons),
    )
