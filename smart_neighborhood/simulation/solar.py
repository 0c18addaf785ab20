from __future__ import annotations

import math

import numpy as np

from ..calendar_utils import HOURS, validate_hour


class SolarArcModel:
    """
    Deterministic neighbourhood PV output as a half-sine arc over the daylight window.
    """

    def __init__(
        self,
        peak_kw: float = 4.5,
        sunrise_hour: int = 6,
        sunset_hour: int = 20,
    ) -> None:
        """
        Initialize the solar arc model.

        Args:
            peak_kw: Amplitude of the arc in kW (reached mid-window).
            sunrise_hour: First hour of the generation window (output is 0 there).
            sunset_hour: Last hour of the generation window (output is 0 there).
        """
        if peak_kw < 0:
            raise ValueError("peak_kw must be non-negative")
        if not (0 <= sunrise_hour < sunset_hour <= 23):
            raise ValueError("sunrise_hour must precede sunset_hour within 0..23")
        self.peak_kw = peak_kw
        self.sunrise_hour = sunrise_hour
        self.sunset_hour = sunset_hour

    @property
    def window_hours(self) -> int:
        return self.sunset_hour - self.sunrise_hour

    def get_hourly_power_kw(self, hour: int) -> float:
        """
        PV output in kW for one hour.

        Returns exactly 0.0 at and outside the window boundaries; sin(π) is
        not exactly zero in floating point, so the end of the window is pinned.
        """
        h = validate_hour(hour)
        if h <= self.sunrise_hour or h >= self.sunset_hour:
            return 0.0
        return self.peak_kw * math.sin(math.pi * (h - self.sunrise_hour) / self.window_hours)

    def daily_profile_kw(self) -> np.ndarray:
        """Return the 24 hourly PV output values in kW."""
        return np.array([self.get_hourly_power_kw(h) for h in HOURS], dtype=float)
