from __future__ import annotations

import pytest

from smart_neighborhood import config


def test_display_figures_default(monkeypatch):
    """Defaults apply when no environment override is set."""
    monkeypatch.delenv("SMART_NB_SAVINGS_EUR", raising=False)
    monkeypatch.delenv("SMART_NB_CO2_SAVED_TONS", raising=False)
    assert config.get_reported_savings_eur() == pytest.approx(1247.50)
    assert config.get_reported_co2_saved_tons() == pytest.approx(2.4)


def test_display_figures_from_environment(monkeypatch):
    monkeypatch.setenv("SMART_NB_SAVINGS_EUR", "900.5")
    monkeypatch.setenv("SMART_NB_CO2_SAVED_TONS", "1.1")
    assert config.get_reported_savings_eur() == pytest.approx(900.5)
    assert config.get_reported_co2_saved_tons() == pytest.approx(1.1)


def test_invalid_number_names_the_variable(monkeypatch):
    monkeypatch.setenv("SMART_NB_SAVINGS_EUR", "lots")
    with pytest.raises(ValueError, match="SMART_NB_SAVINGS_EUR"):
        config.get_reported_savings_eur()


def test_catalog_path_prefers_environment(monkeypatch, tmp_path):
    """Ensure a configured catalog path takes precedence over the packaged one."""
    monkeypatch.setenv("SMART_NB_CATALOG_PATH", str(tmp_path / "fleet.json"))
    assert config.get_catalog_path() == tmp_path / "fleet.json"

    monkeypatch.delenv("SMART_NB_CATALOG_PATH")
    assert config.get_catalog_path() == config.DEFAULT_CATALOG_PATH
    assert config.DEFAULT_CATALOG_PATH.exists()


def test_default_seed(monkeypatch):
    monkeypatch.delenv("SMART_NB_SEED", raising=False)
    assert config.get_default_seed() is None
    monkeypatch.setenv("SMART_NB_SEED", "17")
    assert config.get_default_seed() == 17
    monkeypatch.setenv("SMART_NB_SEED", "x")
    with pytest.raises(ValueError):
        config.get_default_seed()


def test_load_dotenv_does_not_override_existing(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\nSMART_NB_SEED=5\nSMART_NB_SAVINGS_EUR='12.5'\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("SMART_NB_SEED", "99")
    # setenv then delenv so teardown removes the value written by the loader
    monkeypatch.setenv("SMART_NB_SAVINGS_EUR", "0")
    monkeypatch.delenv("SMART_NB_SAVINGS_EUR")

    parsed = config._load_dotenv(str(env_file))

    assert parsed == {"SMART_NB_SEED": "5", "SMART_NB_SAVINGS_EUR": "12.5"}
    assert config.get_default_seed() == 99
    assert config.get_reported_savings_eur() == pytest.approx(12.5)
