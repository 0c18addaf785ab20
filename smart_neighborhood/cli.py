from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from .application import DashboardApplication
from .calendar_utils import validate_hour
from .config import get_catalog_path
from .reporting import plot_power_flow, plot_price_schedule, schedule_to_dataframe, summarize_schedule


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser used by entry points.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(description="Smart Neighborhood energy CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to a JSON fleet catalog (default: configured catalog)",
    )
    sub = parser.add_subparsers(dest="command")

    schedule = sub.add_parser("schedule", help="Generate the 24-hour neighbourhood schedule")
    schedule.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible output")
    schedule.add_argument("--csv", type=str, default=None, help="Write the schedule to this CSV file")
    schedule.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Directory where price_schedule.png and power_flow.png are written",
    )
    schedule.add_argument(
        "--summary",
        action="store_true",
        help="Print daily totals instead of the hourly samples",
    )

    sub.add_parser("homes", help="List homes with derived status and net power")

    stats = sub.add_parser("stats", help="Print fleet KPIs")
    stats.add_argument("--seed", type=int, default=None, help="RNG seed for the schedule")
    stats.add_argument("--hour", type=int, default=None, help="Hour to evaluate (default: now)")

    report = sub.add_parser("report", help="Write CSV, plots and text report to disk")
    report.add_argument("--seed", type=int, default=None, help="RNG seed for the schedule")
    report.add_argument("--output", type=str, default="results", help="Output root directory")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def _load_json_file(path: str | Path) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.exists():
        raise SystemExit(f"File not found: {file_path}")
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON file ({file_path}): {exc}") from exc


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def _resolve_seed(raw: int | None, app: DashboardApplication) -> int | None:
    return raw if raw is not None else app.default_seed


def main(argv: Sequence[str] | None = None) -> None:
    """
    CLI entry point.

    Args:
        argv: Optional sequence of CLI args (defaults to sys.argv).
    """
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        import uvicorn

        uvicorn.run("smart_neighborhood.api.app:app", host=args.host, port=args.port)
        return

    fleet_data = _load_json_file(args.catalog or get_catalog_path())
    try:
        app = DashboardApplication(fleet_data=fleet_data)
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    reference_time = datetime.now()

    try:
        if args.command == "schedule":
            snapshot = app.refresh(reference_time=reference_time, seed=_resolve_seed(args.seed, app))
            if args.csv:
                schedule_to_dataframe(snapshot.schedule).to_csv(args.csv, index=False)
                print(f"Schedule written to: {args.csv}")
            if args.plot:
                plot_dir = Path(args.plot)
                plot_dir.mkdir(parents=True, exist_ok=True)
                plot_price_schedule(
                    snapshot.schedule,
                    save_path=plot_dir / "price_schedule.png",
                    now_hour=snapshot.now_hour,
                )
                plot_power_flow(snapshot.schedule, save_path=plot_dir / "power_flow.png")
                print(f"Plots written to: {plot_dir}")
            if args.summary:
                _print_json(summarize_schedule(snapshot.schedule))
            elif not args.csv and not args.plot:
                _print_json([sample.to_dict() for sample in snapshot.schedule])
            return

        if args.command == "homes":
            snapshot = app.refresh(reference_time=reference_time)
            _print_json(
                [
                    {
                        "id": item.home.id,
                        "name": item.home.name,
                        "status": item.status.value,
                        "catalog_status": item.home.status.value if item.home.status else None,
                        "net_power_kw": round(item.net_power_kw, 2),
                        "solar_efficiency_percent": round(item.solar_efficiency_percent, 1),
                        "battery_flow": item.battery_flow,
                        "ev_charging": item.ev_charging,
                    }
                    for item in snapshot.homes
                ]
            )
            return

        if args.command == "stats":
            snapshot = app.refresh(reference_time=reference_time, seed=_resolve_seed(args.seed, app))
            if args.hour is None:
                hour = snapshot.now_hour
                stats = snapshot.stats
            else:
                hour = validate_hour(args.hour)
                stats = app.stats_at(snapshot, hour)
            payload = stats.to_dict()
            payload["hour_index"] = hour
            _print_json(payload)
            return

        if args.command == "report":
            summary = app.run_report(
                reference_time=reference_time,
                seed=_resolve_seed(args.seed, app),
                output_root=args.output,
            )
            _print_json(summary)
            return
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
