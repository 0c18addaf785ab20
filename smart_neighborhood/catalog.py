from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from .config import get_catalog_path
from .homes import Battery, EVCharger, HeatPump, Home, HomeStatus, SolarArray

Fleet = Tuple[Home, ...]


def load_fleet_data(source: str | Path | Mapping[str, Any] | None = None) -> dict[str, Any]:
    """
    Load fleet catalog data from JSON or return the provided mapping.

    Args:
        source: Path to a JSON file, mapping, or None for the configured catalog.

    Returns:
        Dictionary containing the catalog (a ``homes`` list).

    Raises:
        ValueError: If the file is missing, is not valid JSON, or the catalog
            is not a JSON object.
    """
    if source is None:
        source = get_catalog_path()
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            source = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ValueError(f"Fleet catalog not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid fleet catalog JSON ({path}): {exc}") from exc
    if not isinstance(source, Mapping):
        raise ValueError("Fleet catalog must be a JSON object")
    return dict(source)


def _section(data: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ValueError(f"'{key}' must be an object or null")
    return value


def build_home(data: Mapping[str, Any]) -> Home:
    """
    Build a Home from one catalog entry.

    Missing or null asset sections mean the home does not own that asset.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Home entry must be an object, got {type(data).__name__}")
    try:
        home_id = int(data["id"])
        name = str(data["name"])
    except KeyError as exc:
        raise ValueError(f"Home entry is missing required field {exc}") from exc
    except TypeError as exc:
        raise ValueError(f"Home entry has an invalid id: {exc}") from exc

    battery_cfg = _section(data, "battery")
    solar_cfg = _section(data, "solar")
    ev_cfg = _section(data, "ev")
    hp_cfg = _section(data, "heat_pump")
    status_raw = data.get("status")

    try:
        battery = (
            Battery(
                state_of_charge_percent=float(battery_cfg["state_of_charge_percent"]),
                capacity_kwh=float(battery_cfg["capacity_kwh"]),
                power_kw=float(battery_cfg.get("power_kw", 0.0)),
            )
            if battery_cfg is not None
            else None
        )
        solar = (
            SolarArray(
                power_kw=float(solar_cfg.get("power_kw", 0.0)),
                capacity_kwp=float(solar_cfg["capacity_kwp"]),
            )
            if solar_cfg is not None
            else None
        )
        ev = (
            EVCharger(
                state_of_charge_percent=float(ev_cfg["state_of_charge_percent"]),
                departure_time=str(ev_cfg["departure_time"]),
                power_kw=float(ev_cfg.get("power_kw", 0.0)),
            )
            if ev_cfg is not None
            else None
        )
        heat_pump = (
            HeatPump(
                power_kw=float(hp_cfg.get("power_kw", 0.0)),
                current_temp_c=float(hp_cfg["current_temp_c"]),
                target_temp_c=float(hp_cfg["target_temp_c"]),
            )
            if hp_cfg is not None
            else None
        )
    except KeyError as exc:
        raise ValueError(f"Home {home_id} asset is missing field {exc}") from exc
    except TypeError as exc:
        raise ValueError(f"Home {home_id} asset has a non-numeric field: {exc}") from exc

    return Home(
        id=home_id,
        name=name,
        battery=battery,
        solar=solar,
        ev=ev,
        heat_pump=heat_pump,
        status=HomeStatus(status_raw) if status_raw is not None else None,
    )


def build_fleet(fleet_data: Mapping[str, Any] | str | Path | None = None) -> Fleet:
    """
    Build the ordered fleet from catalog data.

    Display order follows the catalog. Duplicate ids are rejected.
    """
    data = load_fleet_data(fleet_data)
    entries = data.get("homes")
    if not isinstance(entries, list):
        raise ValueError("Fleet catalog must contain a 'homes' list")

    homes = []
    seen_ids = set()
    for entry in entries:
        home = build_home(entry)
        if home.id in seen_ids:
            raise ValueError(f"Duplicate home id {home.id} in fleet catalog")
        seen_ids.add(home.id)
        homes.append(home)
    return tuple(homes)


def build_default_fleet() -> Fleet:
    return build_fleet(None)


def find_home(fleet: Fleet, home_id: int) -> Optional[Home]:
    for home in fleet:
        if home.id == home_id:
            return home
    return None
