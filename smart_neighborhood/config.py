from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "default_fleet.json"


def _load_dotenv(path: str = ".env") -> Dict[str, str]:
    """
    Read SMART_NB_* overrides from a local .env file into os.environ.

    Variables already set in the environment win over the file. Returns the
    key/value pairs found in the file.
    """
    env_path = Path(path)
    if not env_path.exists():
        return {}

    parsed: Dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ.setdefault(key, value)
        parsed[key] = value
    return parsed


_load_dotenv()


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def get_reported_savings_eur() -> float:
    """
    Monthly savings figure shown on the dashboard (EUR).

    Read from ``SMART_NB_SAVINGS_EUR``; defaults to 1247.50.
    """
    return _float_from_env("SMART_NB_SAVINGS_EUR", 1247.50)


def get_reported_co2_saved_tons() -> float:
    """
    CO2 avoided figure shown on the dashboard (tonnes).

    Read from ``SMART_NB_CO2_SAVED_TONS``; defaults to 2.4.
    """
    return _float_from_env("SMART_NB_CO2_SAVED_TONS", 2.4)


def get_catalog_path() -> Path:
    """
    Location of the fleet catalog JSON.

    Returns:
        ``SMART_NB_CATALOG_PATH`` when set, otherwise the packaged default catalog.
    """
    raw = os.getenv("SMART_NB_CATALOG_PATH")
    if raw:
        return Path(raw).expanduser()
    return DEFAULT_CATALOG_PATH


def get_default_seed() -> int | None:
    raw = os.getenv("SMART_NB_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"SMART_NB_SEED must be an integer, got {raw!r}") from exc
