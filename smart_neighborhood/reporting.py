from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .fleet_stats import FleetStats
from .homes import HomeSummary
from .simulation.schedule import HourlySample

SCHEDULE_COLUMNS = [
    "hour_index",
    "time_label",
    "consumption_kw",
    "solar_kw",
    "grid_kw",
    "price_eur_per_kwh",
    "optimized_kw",
]


def _slugify(value: str) -> str:
    return "".join(c if c.isalnum() or c in ("-", "_") else "_" for c in value.strip()).strip("_")


def _create_results_directory(name: str, base_dir: Path, reference_time: datetime) -> Path:
    timestamp = reference_time.strftime("%y%m%d_%H%M")
    slug = _slugify(name) or "neighborhood"
    output_dir = base_dir / f"{timestamp}_{slug}"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def schedule_to_dataframe(schedule: Sequence[HourlySample]) -> pd.DataFrame:
    """
    Tabulate a schedule, one row per hour.
    """
    rows = [sample.to_dict() for sample in schedule]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def summarize_schedule(schedule: Sequence[HourlySample]) -> Dict[str, float]:
    """
    Daily totals of a schedule.

    Hourly samples are 1 h long, so kW sums equal kWh. Grid costs only price
    imports; exported energy is valued at zero.

    Returns:
        Dictionary with consumption/solar/optimized energy (kWh), net grid
        energy (kWh), mean price (EUR/kWh), and the import cost of the
        baseline and optimized curves (EUR).
    """
    df = schedule_to_dataframe(schedule)
    if df.empty:
        raise ValueError("Cannot summarize an empty schedule")

    prices = df["price_eur_per_kwh"].to_numpy()
    baseline_import = np.clip(df["grid_kw"].to_numpy(), 0.0, None)
    optimized_import = np.clip(df["optimized_kw"].to_numpy() - df["solar_kw"].to_numpy(), 0.0, None)

    baseline_cost = float((baseline_import * prices).sum())
    optimized_cost = float((optimized_import * prices).sum())

    return {
        "consumption_kwh": float(df["consumption_kw"].sum()),
        "solar_kwh": float(df["solar_kw"].sum()),
        "grid_net_kwh": float(df["grid_kw"].sum()),
        "optimized_kwh": float(df["optimized_kw"].sum()),
        "mean_price_eur_per_kwh": float(prices.mean()),
        "min_price_eur_per_kwh": float(prices.min()),
        "max_price_eur_per_kwh": float(prices.max()),
        "cheapest_hour": int(df.loc[df["price_eur_per_kwh"].idxmin(), "hour_index"]),
        "baseline_import_cost_eur": baseline_cost,
        "optimized_import_cost_eur": optimized_cost,
        "heuristic_cost_delta_eur": baseline_cost - optimized_cost,
    }


def plot_price_schedule(
    schedule: Sequence[HourlySample],
    save_path: Path,
    now_hour: Optional[int] = None,
) -> None:
    """
    Consumption vs optimized curve on the power axis, price on a twin axis.
    """
    df = schedule_to_dataframe(schedule)
    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.fill_between(df["hour_index"], df["consumption_kw"], color="#3b82f6", alpha=0.2)
    ax.plot(df["hour_index"], df["consumption_kw"], color="#3b82f6", label="Consumption")
    ax.plot(df["hour_index"], df["optimized_kw"], color="#10b981", linestyle="--", label="Optimized")
    ax.set_xlabel("Hour")
    ax.set_ylabel("Power [kW]")
    ax.set_xticks(df["hour_index"].iloc[::3])
    ax.set_xticklabels(df["time_label"].iloc[::3])
    ax.grid(True, alpha=0.2)

    ax_price = ax.twinx()
    ax_price.step(
        df["hour_index"],
        df["price_eur_per_kwh"],
        where="mid",
        color="#f59e0b",
        label="Price",
    )
    ax_price.set_ylabel("Price [€/kWh]")

    if now_hour is not None:
        ax.axvline(now_hour, color="#ef4444", linestyle="--", linewidth=1, label="Now")

    handles, labels = ax.get_legend_handles_labels()
    price_handles, price_labels = ax_price.get_legend_handles_labels()
    ax.legend(handles + price_handles, labels + price_labels, loc="upper left", fontsize=8)
    ax.set_title("Day-ahead price & optimized schedule")
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def plot_power_flow(schedule: Sequence[HourlySample], save_path: Path) -> None:
    """
    Solar generation, consumption and grid exchange over the day.
    """
    df = schedule_to_dataframe(schedule)
    fig, ax = plt.subplots(figsize=(10, 4.5))
    ax.fill_between(df["hour_index"], df["solar_kw"], color="#f59e0b", alpha=0.3, label="Solar")
    ax.plot(df["hour_index"], df["consumption_kw"], color="#3b82f6", label="Consumption")
    ax.plot(df["hour_index"], df["grid_kw"], color="#8b5cf6", label="Grid")
    ax.axhline(0.0, color="gray", linewidth=0.8)
    ax.set_xlabel("Hour")
    ax.set_ylabel("Power [kW]")
    ax.set_xticks(df["hour_index"].iloc[::3])
    ax.set_xticklabels(df["time_label"].iloc[::3])
    ax.set_title("Neighbourhood power flow")
    ax.grid(True, alpha=0.2)
    ax.legend(fontsize=8)
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)


def _write_text_report(
    output_path: Path,
    name: str,
    summary: Dict[str, float],
    homes: Sequence[HomeSummary],
    stats: FleetStats,
) -> None:
    lines = [
        f"Neighbourhood: {name}",
        "",
        "Fleet",
        f"  Connected homes:     {stats.total_homes}",
        f"  Solar generation:    {stats.total_solar_power_kw:.1f} kW",
        f"  Battery power:       {stats.total_battery_power_kw:+.1f} kW",
        f"  Grid power:          {stats.current_grid_power_kw:+.2f} kW",
        f"  Self consumption:    {stats.self_consumption_percent:.0f} %",
        f"  Monthly savings:     {stats.total_savings_eur:.0f} €",
        f"  CO2 saved:           {stats.co2_saved_tons:.1f} t",
        "",
        "Day schedule",
        f"  Consumption:         {summary['consumption_kwh']:.2f} kWh",
        f"  Solar:               {summary['solar_kwh']:.2f} kWh",
        f"  Net grid:            {summary['grid_net_kwh']:.2f} kWh",
        f"  Mean price:          {summary['mean_price_eur_per_kwh']:.3f} €/kWh",
        f"  Cheapest hour:       {summary['cheapest_hour']:02d}:00",
        f"  Import cost:         {summary['baseline_import_cost_eur']:.2f} € "
        f"(optimized {summary['optimized_import_cost_eur']:.2f} €)",
        "",
        "Homes",
    ]
    for item in homes:
        lines.append(
            f"  [{item.home.id}] {item.home.name:<20} {item.status.value:<10} "
            f"{item.net_power_kw:+.1f} kW"
        )
    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def generate_report(
    name: str,
    schedule: Sequence[HourlySample],
    homes: Sequence[HomeSummary],
    stats: FleetStats,
    reference_time: datetime,
    output_root: Path | str = "results",
) -> Path:
    """
    Generate full report: schedule CSV, plots and textual summary saved to disk.
    """
    output_dir = _create_results_directory(name, Path(output_root), reference_time)

    schedule_to_dataframe(schedule).to_csv(output_dir / "schedule.csv", index=False)
    plot_price_schedule(
        schedule,
        save_path=output_dir / "price_schedule.png",
        now_hour=reference_time.hour,
    )
    plot_power_flow(schedule, save_path=output_dir / "power_flow.png")
    _write_text_report(
        output_path=output_dir / "report.txt",
        name=name,
        summary=summarize_schedule(schedule),
        homes=homes,
        stats=stats,
    )
    return output_dir
