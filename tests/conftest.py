from __future__ import annotations

import pytest
from datetime import datetime
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from smart_neighborhood.application import DashboardApplication  # noqa: E402
from smart_neighborhood.catalog import build_default_fleet  # noqa: E402
from smart_neighborhood.simulation.schedule import generate_daily_schedule  # noqa: E402


@pytest.fixture()
def seeded_schedule():
    """A reproducible 24-hour schedule."""
    return generate_daily_schedule(seed=42)


@pytest.fixture()
def default_fleet():
    """The packaged six-home catalog."""
    return build_default_fleet()


@pytest.fixture()
def reference_time() -> datetime:
    """Pinned clock reading at 13:00, the solar peak hour."""
    return datetime(2026, 6, 21, 13, 15, 0)


@pytest.fixture()
def application(monkeypatch) -> DashboardApplication:
    """Application bound to the packaged catalog with default display figures."""
    monkeypatch.delenv("SMART_NB_CATALOG_PATH", raising=False)
    monkeypatch.delenv("SMART_NB_SAVINGS_EUR", raising=False)
    monkeypatch.delenv("SMART_NB_CO2_SAVED_TONS", raising=False)
    monkeypatch.delenv("SMART_NB_SEED", raising=False)
    return DashboardApplication()


def _build_small_fleet_data() -> dict:
    return {
        "neighborhood_name": "Test Street",
        "homes": [
            {
                "id": 10,
                "name": "Solar Only",
                "solar": {"power_kw": 2.0, "capacity_kwp": 4.0},
            },
            {
                "id": 11,
                "name": "Bare",
            },
            {
                "id": 12,
                "name": "Heat Pump",
                "heat_pump": {"power_kw": 1.5, "current_temp_c": 19.0, "target_temp_c": 21.0},
                "status": "heating",
            },
        ],
    }


@pytest.fixture()
def small_fleet_data() -> dict:
    """A lightweight catalog covering homes without some or all assets."""
    return _build_small_fleet_data()
