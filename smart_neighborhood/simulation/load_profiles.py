"""
Hourly load shapes for the household base load and the flexible assets.

Each profile returns one value in kW per hour of the day. Stochastic profiles
(EV charging, heat pump duty) draw from the generator passed with each call;
deterministic ones ignore it. Profiles hold no per-run state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..calendar_utils import HOURS, HOURS_PER_DAY, validate_hour
from .solar import SolarArcModel

HEAT_PUMP_STANDBY_KW: float = 0.5
"""Heat-pump draw outside its duty windows; never zero."""


class LoadProfile:
    """Generic interface for hourly load models."""

    def get_hourly_load_kw(self, hour: int, rng: np.random.Generator | None = None) -> float:
        """
        Get hourly load consumption.

        Args:
            hour: Hour index (0-23).
            rng: Generator for stochastic terms (ignored by deterministic profiles).

        Returns:
            Load consumption in kW.
        """
        raise NotImplementedError


class _StochasticLoadProfile(LoadProfile):
    """Base for profiles that draw random values from the caller's generator."""

    def __init__(self) -> None:
        self._fallback_rng = np.random.default_rng()

    def _uniform(self, spread: float, rng: np.random.Generator | None) -> float:
        rng = rng if rng is not None else self._fallback_rng
        return float(rng.uniform(0.0, spread))


class BaselineLoadProfile(LoadProfile):
    """
    Smooth household base load: mean + amplitude × sin(2π × h / 24).

    With the defaults (1.5 kW ± 0.8 kW) the load is always positive.
    """

    def __init__(self, mean_kw: float = 1.5, amplitude_kw: float = 0.8) -> None:
        if amplitude_kw > mean_kw:
            raise ValueError("amplitude_kw must not exceed mean_kw (load would go negative)")
        self.mean_kw = mean_kw
        self.amplitude_kw = amplitude_kw

    def get_hourly_load_kw(self, hour: int, rng: np.random.Generator | None = None) -> float:
        h = validate_hour(hour)
        return self.mean_kw + self.amplitude_kw * math.sin(2.0 * math.pi * h / HOURS_PER_DAY)


class EVChargingProfile(_StochasticLoadProfile):
    """
    Overnight EV charging: base + U(0, spread) kW while plugged in, 0 otherwise.

    The charging window wraps around midnight: hours >= ``start_hour`` or
    <= ``end_hour`` are active.
    """

    def __init__(
        self,
        base_kw: float = 3.5,
        spread_kw: float = 1.5,
        start_hour: int = 22,
        end_hour: int = 6,
    ) -> None:
        super().__init__()
        self.base_kw = base_kw
        self.spread_kw = spread_kw
        self.start_hour = validate_hour(start_hour)
        self.end_hour = validate_hour(end_hour)

    def is_active(self, hour: int) -> bool:
        h = validate_hour(hour)
        return h >= self.start_hour or h <= self.end_hour

    def get_hourly_load_kw(self, hour: int, rng: np.random.Generator | None = None) -> float:
        if not self.is_active(hour):
            return 0.0
        return self.base_kw + self._uniform(self.spread_kw, rng)


class HeatPumpProfile(_StochasticLoadProfile):
    """
    Bimodal heat-pump duty: morning and evening heating blocks, standby otherwise.

    Active hours draw ``active_kw + U(0, spread_kw)``; all other hours draw the
    constant ``standby_kw``.
    """

    def __init__(
        self,
        active_kw: float = 2.0,
        spread_kw: float = 1.0,
        standby_kw: float = HEAT_PUMP_STANDBY_KW,
        morning_window: tuple[int, int] = (5, 8),
        evening_window: tuple[int, int] = (17, 22),
    ) -> None:
        super().__init__()
        if standby_kw <= 0:
            raise ValueError("standby_kw must be positive")
        self.active_kw = active_kw
        self.spread_kw = spread_kw
        self.standby_kw = standby_kw
        self.windows = (morning_window, evening_window)

    def is_active(self, hour: int) -> bool:
        h = validate_hour(hour)
        return any(start <= h <= end for start, end in self.windows)

    def get_hourly_load_kw(self, hour: int, rng: np.random.Generator | None = None) -> float:
        if not self.is_active(hour):
            return self.standby_kw
        return self.active_kw + self._uniform(self.spread_kw, rng)


@dataclass(frozen=True)
class AssetHour:
    """Per-asset power of a single hour, in kW."""
    baseline_kw: float
    solar_kw: float
    ev_kw: float
    heat_pump_kw: float


@dataclass(frozen=True)
class AssetProfiles:
    """
    The four per-asset hourly shapes of one day.

    Attributes:
        baseline_kw: Household base load, shape (24,).
        solar_kw: PV generation, shape (24,).
        ev_kw: EV charging draw, shape (24,).
        heat_pump_kw: Heat-pump draw, shape (24,).
    """
    baseline_kw: np.ndarray
    solar_kw: np.ndarray
    ev_kw: np.ndarray
    heat_pump_kw: np.ndarray

    def __post_init__(self) -> None:
        for name in ("baseline_kw", "solar_kw", "ev_kw", "heat_pump_kw"):
            values = getattr(self, name)
            if np.shape(values) != (HOURS_PER_DAY,):
                raise ValueError(f"{name} must contain {HOURS_PER_DAY} hourly values")

    @classmethod
    def from_hours(cls, hours: list[AssetHour]) -> "AssetProfiles":
        return cls(
            baseline_kw=np.array([a.baseline_kw for a in hours], dtype=float),
            solar_kw=np.array([a.solar_kw for a in hours], dtype=float),
            ev_kw=np.array([a.ev_kw for a in hours], dtype=float),
            heat_pump_kw=np.array([a.heat_pump_kw for a in hours], dtype=float),
        )


class AssetProfileGenerator:
    """
    Produces the per-asset hourly profiles of one day.

    Each asset shape is computed independently per hour. Within an hour the
    stochastic draws happen in a fixed order (EV, then heat pump), so a seeded
    generator always yields the same day.
    """

    def __init__(
        self,
        baseline: LoadProfile | None = None,
        solar: SolarArcModel | None = None,
        ev: LoadProfile | None = None,
        heat_pump: LoadProfile | None = None,
    ) -> None:
        self.baseline = baseline or BaselineLoadProfile()
        self.solar = solar or SolarArcModel()
        self.ev = ev or EVChargingProfile()
        self.heat_pump = heat_pump or HeatPumpProfile()

    def sample_hour(self, hour: int, rng: np.random.Generator | None = None) -> AssetHour:
        h = validate_hour(hour)
        return AssetHour(
            baseline_kw=self.baseline.get_hourly_load_kw(h, rng),
            solar_kw=self.solar.get_hourly_power_kw(h),
            ev_kw=self.ev.get_hourly_load_kw(h, rng),
            heat_pump_kw=self.heat_pump.get_hourly_load_kw(h, rng),
        )

    def generate(
        self,
        rng: np.random.Generator | None = None,
        after_hour: Callable[[int], None] | None = None,
    ) -> AssetProfiles:
        """
        Generate all four profiles for hours 0..23.

        Args:
            rng: Random number generator shared by the stochastic profiles.
                None draws from a fresh unseeded generator.
            after_hour: Called with the hour index once that hour's assets are
                sampled, so callers can draw further terms from ``rng`` in
                the same per-hour order.

        Returns:
            AssetProfiles with one 24-element array per asset.
        """
        if rng is None:
            rng = np.random.default_rng()

        hours = []
        for h in HOURS:
            hours.append(self.sample_hour(h, rng))
            if after_hour is not None:
                after_hour(h)
        return AssetProfiles.from_hours(hours)
