from __future__ import annotations

import pytest

from smart_neighborhood.reporting import (
    SCHEDULE_COLUMNS,
    plot_power_flow,
    plot_price_schedule,
    schedule_to_dataframe,
    summarize_schedule,
)


def test_schedule_to_dataframe(seeded_schedule) -> None:
    df = schedule_to_dataframe(seeded_schedule)
    assert list(df.columns) == SCHEDULE_COLUMNS
    assert len(df) == 24
    assert df["hour_index"].tolist() == list(range(24))
    assert df.loc[13, "time_label"] == "13:00"


def test_summarize_schedule(seeded_schedule) -> None:
    summary = summarize_schedule(seeded_schedule)

    assert summary["consumption_kwh"] == pytest.approx(sum(s.consumption_kw for s in seeded_schedule))
    assert summary["solar_kwh"] == pytest.approx(sum(s.solar_kw for s in seeded_schedule))
    assert summary["grid_net_kwh"] == pytest.approx(summary["consumption_kwh"] - summary["solar_kwh"])
    assert summary["min_price_eur_per_kwh"] >= 0.05
    cheapest = min(seeded_schedule, key=lambda s: s.price_eur_per_kwh)
    assert summary["cheapest_hour"] == cheapest.hour_index
    assert summary["baseline_import_cost_eur"] >= 0
    assert summary["heuristic_cost_delta_eur"] == pytest.approx(
        summary["baseline_import_cost_eur"] - summary["optimized_import_cost_eur"]
    )


def test_summarize_empty_schedule_raises() -> None:
    with pytest.raises(ValueError):
        summarize_schedule(())


def test_plots_are_saved(seeded_schedule, tmp_path) -> None:
    plot_price_schedule(seeded_schedule, save_path=tmp_path / "price.png", now_hour=13)
    plot_power_flow(seeded_schedule, save_path=tmp_path / "flow.png")
    assert (tmp_path / "price.png").stat().st_size > 0
    assert (tmp_path / "flow.png").stat().st_size > 0
