from __future__ import annotations

import json

import pytest

from smart_neighborhood.catalog import build_fleet, find_home, load_fleet_data
from smart_neighborhood.homes import HomeStatus


def test_default_fleet_keeps_catalog_order(default_fleet) -> None:
    assert [home.id for home in default_fleet] == [1, 2, 3, 4, 5, 6]
    assert default_fleet[0].name == "Villa Noord"
    assert default_fleet[5].status is HomeStatus.EXPORTING


def test_null_assets_are_absent(default_fleet) -> None:
    huis_zuid = find_home(default_fleet, 2)
    assert huis_zuid is not None
    assert huis_zuid.ev is None
    assert find_home(default_fleet, 4).heat_pump is None
    assert find_home(default_fleet, 5).battery is None
    assert find_home(default_fleet, 99) is None


def test_build_fleet_from_mapping(small_fleet_data) -> None:
    fleet = build_fleet(small_fleet_data)
    assert len(fleet) == 3
    assert fleet[0].solar.capacity_kwp == 4.0
    assert fleet[1].battery is None and fleet[1].solar is None
    assert fleet[1].status is None
    assert fleet[2].status is HomeStatus.HEATING


def test_build_fleet_from_json_file(tmp_path, small_fleet_data) -> None:
    path = tmp_path / "fleet.json"
    path.write_text(json.dumps(small_fleet_data), encoding="utf-8")
    assert load_fleet_data(path)["neighborhood_name"] == "Test Street"
    assert [home.id for home in build_fleet(str(path))] == [10, 11, 12]


def test_duplicate_ids_are_rejected(small_fleet_data) -> None:
    small_fleet_data["homes"][1]["id"] = 10
    with pytest.raises(ValueError, match="Duplicate home id"):
        build_fleet(small_fleet_data)


def test_missing_fields_are_rejected(small_fleet_data) -> None:
    del small_fleet_data["homes"][0]["solar"]["capacity_kwp"]
    with pytest.raises(ValueError):
        build_fleet(small_fleet_data)

    with pytest.raises(ValueError):
        build_fleet({"homes": [{"name": "No id"}]})

    with pytest.raises(ValueError):
        build_fleet({"homes": "not-a-list"})


def test_unknown_status_is_rejected(small_fleet_data) -> None:
    small_fleet_data["homes"][2]["status"] = "sleeping"
    with pytest.raises(ValueError):
        build_fleet(small_fleet_data)


@pytest.mark.parametrize(
    "homes",
    [
        [{"id": 1, "name": "Null power", "solar": {"power_kw": None, "capacity_kwp": 4}}],
        [{"id": 1, "name": "Null capacity", "battery": {"state_of_charge_percent": 50, "capacity_kwh": None}}],
        [{"id": None, "name": "Null id"}],
        ["not-a-home"],
        [7],
    ],
)
def test_malformed_entries_raise_value_error(homes) -> None:
    with pytest.raises(ValueError):
        build_fleet({"homes": homes})


def test_catalog_must_be_an_object(tmp_path) -> None:
    path = tmp_path / "fleet.json"
    path.write_text(json.dumps([{"id": 1, "name": "A"}]), encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        build_fleet(path)
    with pytest.raises(ValueError):
        build_fleet([{"id": 1, "name": "A"}])


def test_missing_or_invalid_catalog_file(tmp_path) -> None:
    with pytest.raises(ValueError, match="not found"):
        load_fleet_data(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_fleet_data(broken)
