from .calendar_utils import HOURS_PER_DAY, hour_label, validate_hour
from .catalog import build_default_fleet, build_fleet, load_fleet_data
from .fleet_stats import FleetStats, compute_fleet_stats
from .homes import (
    Battery,
    EVCharger,
    HeatPump,
    Home,
    HomeStatus,
    HomeSummary,
    SolarArray,
    annotate_home,
    classify_home_status,
    compute_net_power,
    solar_efficiency_percent,
)
from .simulation.load_profiles import AssetProfileGenerator, AssetProfiles
from .simulation.prices import DayAheadPriceModel, PriceModel
from .simulation.schedule import HourlySample, ScheduleSynthesizer, generate_daily_schedule
from .simulation.solar import SolarArcModel
from .application import DashboardApplication, DashboardSnapshot

__all__ = [
    "HOURS_PER_DAY",
    "hour_label",
    "validate_hour",
    "AssetProfileGenerator",
    "AssetProfiles",
    "SolarArcModel",
    "PriceModel",
    "DayAheadPriceModel",
    "HourlySample",
    "ScheduleSynthesizer",
    "generate_daily_schedule",
    "Battery",
    "SolarArray",
    "EVCharger",
    "HeatPump",
    "Home",
    "HomeStatus",
    "HomeSummary",
    "annotate_home",
    "classify_home_status",
    "compute_net_power",
    "solar_efficiency_percent",
    "FleetStats",
    "compute_fleet_stats",
    "load_fleet_data",
    "build_fleet",
    "build_default_fleet",
    "DashboardApplication",
    "DashboardSnapshot",
]
