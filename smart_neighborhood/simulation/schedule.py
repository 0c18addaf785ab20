"""
Daily neighbourhood schedule synthesis.

Combines the per-asset load shapes and the day-ahead price curve into the
24-entry ``HourlySample`` sequence consumed by the dashboard.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Sequence, Tuple

import numpy as np

from ..calendar_utils import HOURS, HOURS_PER_DAY, hour_label, validate_hour
from .load_profiles import AssetProfileGenerator, AssetProfiles
from .prices import DayAheadPriceModel, PriceModel

EV_SHIFT_WINDOW: Tuple[int, int] = (1, 5)
"""Pre-dawn hours in which the optimized curve places the EV draw."""

HEAT_PUMP_BOOST_WINDOW: Tuple[int, int] = (2, 6)
HEAT_PUMP_BOOST_FACTOR: float = 1.5
HEAT_PUMP_DAMP_FACTOR: float = 0.3


@dataclass(frozen=True)
class HourlySample:
    """
    One hour of aggregated neighbourhood energy and price data.

    Attributes:
        hour_index: Hour of the day (0-23).
        consumption_kw: Base load plus active flexible loads (>= 0).
        solar_kw: PV generation (>= 0).
        grid_kw: consumption_kw - solar_kw; negative means net export.
        price_eur_per_kwh: Day-ahead price (>= the model floor).
        optimized_kw: Heuristically load-shifted consumption (>= 0).
    """
    hour_index: int
    consumption_kw: float
    solar_kw: float
    grid_kw: float
    price_eur_per_kwh: float
    optimized_kw: float

    @property
    def time_label(self) -> str:
        return hour_label(self.hour_index)

    @property
    def is_exporting(self) -> bool:
        return self.grid_kw < 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["time_label"] = self.time_label
        return data


def optimized_load_kw(
    hour: int,
    baseline_kw: float,
    ev_kw: float,
    heat_pump_kw: float,
) -> float:
    """
    Load-shifted consumption for one hour.

    EV draw is only counted inside ``EV_SHIFT_WINDOW``; heat-pump draw is
    boosted inside ``HEAT_PUMP_BOOST_WINDOW`` and damped elsewhere. The rule
    depends on the hour index alone and ignores prices.
    """
    h = validate_hour(hour)
    ev_start, ev_end = EV_SHIFT_WINDOW
    hp_start, hp_end = HEAT_PUMP_BOOST_WINDOW
    ev_part = ev_kw if ev_start <= h <= ev_end else 0.0
    hp_factor = HEAT_PUMP_BOOST_FACTOR if hp_start <= h <= hp_end else HEAT_PUMP_DAMP_FACTOR
    return baseline_kw + ev_part + heat_pump_kw * hp_factor


class ScheduleSynthesizer:
    """
    Builds the 24-hour schedule from asset profiles and a price model.

    Example:
        ```python
        synthesizer = ScheduleSynthesizer()
        schedule = synthesizer.generate(seed=42)
        assert len(schedule) == 24
        ```
    """

    def __init__(
        self,
        profile_generator: AssetProfileGenerator | None = None,
        price_model: PriceModel | None = None,
    ) -> None:
        self.profile_generator = profile_generator or AssetProfileGenerator()
        self.price_model = price_model or DayAheadPriceModel()

    def synthesize(
        self,
        profiles: AssetProfiles,
        prices: Sequence[float],
    ) -> Tuple[HourlySample, ...]:
        """
        Compose already generated profiles and prices into hourly samples.

        Args:
            profiles: Per-asset hourly shapes.
            prices: 24 hourly prices in EUR/kWh.

        Returns:
            Tuple of 24 HourlySample ordered by hour.
        """
        if len(prices) != HOURS_PER_DAY:
            raise ValueError(f"prices must contain {HOURS_PER_DAY} hourly values")

        samples = []
        for h in HOURS:
            baseline = float(profiles.baseline_kw[h])
            solar = float(profiles.solar_kw[h])
            ev = float(profiles.ev_kw[h])
            heat_pump = float(profiles.heat_pump_kw[h])

            consumption = baseline + ev + heat_pump
            samples.append(
                HourlySample(
                    hour_index=h,
                    consumption_kw=consumption,
                    solar_kw=solar,
                    grid_kw=consumption - solar,
                    price_eur_per_kwh=float(prices[h]),
                    optimized_kw=optimized_load_kw(h, baseline, ev, heat_pump),
                )
            )
        return tuple(samples)

    def generate(
        self,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> Tuple[HourlySample, ...]:
        """
        Generate a full day in one call.

        Draw order per hour is EV, heat pump, then price noise, all from one
        generator; the same seed therefore reproduces the same schedule. The
        generator lives only for this call, so concurrent calls on a shared
        synthesizer do not interfere.

        Args:
            seed: Seed for a fresh ``numpy.random.default_rng``.
            rng: Explicit generator; takes precedence over ``seed``.

        Returns:
            Tuple of 24 HourlySample ordered by hour.
        """
        if rng is None:
            rng = np.random.default_rng(seed)

        prices: list[float] = []
        profiles = self.profile_generator.generate(
            rng,
            after_hour=lambda h: prices.append(self.price_model.get_price(h, rng)),
        )
        return self.synthesize(profiles, prices)


def generate_daily_schedule(seed: int | None = None) -> Tuple[HourlySample, ...]:
    """
    Generate the 24-hour neighbourhood schedule with the default models.

    Args:
        seed: Optional seed for the stochastic terms (EV draw, heat-pump
            duty, price noise). None gives a naturally random day.

    Returns:
        Tuple of 24 HourlySample with hour_index 0..23.
    """
    return ScheduleSynthesizer().generate(seed=seed)
