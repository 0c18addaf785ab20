"""
Day-ahead electricity price modeling.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import numpy as np

from ..calendar_utils import HOURS_PER_DAY, validate_hour


class PriceModel(ABC):
    """
    Abstract base class for hourly day-ahead price models.

    Implementations return a price in EUR/kWh for each hour of the day.
    Stochastic models draw from the generator passed to ``get_price()`` and
    keep no per-run state, so one instance can serve concurrent runs.

    Example:
        ```python
        import numpy as np
        from smart_neighborhood.simulation.prices import DayAheadPriceModel

        model = DayAheadPriceModel()
        rng = np.random.default_rng(42)
        prices = [model.get_price(h, rng) for h in range(24)]
        ```
    """

    @abstractmethod
    def get_price(self, hour: int, rng: np.random.Generator | None = None) -> float:
        """
        Get the day-ahead price for one hour.

        Args:
            hour: Hour index (0-23).
            rng: Generator for stochastic terms (None uses a private one).

        Returns:
            Price in EUR per kWh. Always positive.
        """
        raise NotImplementedError


class DayAheadPriceModel(PriceModel):
    """
    Sinusoidal day-ahead price curve with bounded uniform noise.

    Price Formula:
        price(h) = max(floor, base + amplitude × sin(2π × (h − phase_shift) / 24) + noise)

    With the defaults the curve sits around 0.15 EUR/kWh, swings ±0.12 and
    crosses its mean at hour 3 on the way up. Noise is uniform in
    [-noise_amplitude, +noise_amplitude). Setting ``noise_amplitude=0`` makes
    the model fully deterministic.

    Attributes:
        base_price: Mean price level in EUR/kWh.
        amplitude: Half peak-to-peak swing of the sinusoid in EUR/kWh.
        phase_shift_hours: Hour at which the sinusoid crosses the base price upwards.
        noise_amplitude: Bound of the uniform noise term in EUR/kWh.
        floor_price: Minimum price returned in EUR/kWh.
    """

    def __init__(
        self,
        base_price_eur_per_kwh: float = 0.15,
        amplitude_eur_per_kwh: float = 0.12,
        phase_shift_hours: float = 3.0,
        noise_amplitude_eur_per_kwh: float = 0.02,
        floor_price_eur_per_kwh: float = 0.05,
    ) -> None:
        if floor_price_eur_per_kwh <= 0:
            raise ValueError("floor_price_eur_per_kwh must be positive")
        if noise_amplitude_eur_per_kwh < 0:
            raise ValueError("noise_amplitude_eur_per_kwh must be non-negative")
        self.base_price = base_price_eur_per_kwh
        self.amplitude = amplitude_eur_per_kwh
        self.phase_shift_hours = phase_shift_hours
        self.noise_amplitude = noise_amplitude_eur_per_kwh
        self.floor_price = floor_price_eur_per_kwh

        self._fallback_rng = np.random.default_rng()

    def base_price_at(self, hour: int) -> float:
        """
        Deterministic sinusoidal component for ``hour`` (no noise, no floor).
        """
        h = validate_hour(hour)
        phase = 2.0 * math.pi * (h - self.phase_shift_hours) / HOURS_PER_DAY
        return self.base_price + self.amplitude * math.sin(phase)

    def sample_noise(self, rng: np.random.Generator | None = None) -> float:
        if self.noise_amplitude == 0:
            return 0.0
        rng = rng if rng is not None else self._fallback_rng
        return float(rng.uniform(-self.noise_amplitude, self.noise_amplitude))

    def get_price(self, hour: int, rng: np.random.Generator | None = None) -> float:
        price = self.base_price_at(hour) + self.sample_noise(rng)
        return max(self.floor_price, price)
