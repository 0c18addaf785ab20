from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .calendar_utils import current_hour, validate_hour
from .catalog import Fleet, build_fleet, load_fleet_data
from .config import get_default_seed, get_reported_co2_saved_tons, get_reported_savings_eur
from .fleet_stats import FleetStats, compute_fleet_stats
from .homes import HomeSummary, annotate_home
from .reporting import generate_report, summarize_schedule
from .simulation.schedule import HourlySample, ScheduleSynthesizer

logger = logging.getLogger(__name__)

FleetData = Mapping[str, Any] | str | Path | None


@dataclass(frozen=True)
class DashboardSnapshot:
    """
    Everything the dashboard renders for one refresh cycle.

    Attributes:
        schedule: 24 hourly samples.
        fleet: Homes in catalog order.
        homes: Display summaries, aligned with ``fleet``.
        stats: Fleet KPIs evaluated at ``now_hour``.
        now_hour: Hour of the reference time the snapshot was built for.
        seed: Seed used for the schedule (None when random).
    """
    schedule: Tuple[HourlySample, ...]
    fleet: Fleet
    homes: Tuple[HomeSummary, ...]
    stats: FleetStats
    now_hour: int
    seed: Optional[int]

    @property
    def latest_sample(self) -> HourlySample:
        return self.schedule[self.now_hour]

    def home_summary(self, home_id: int) -> Optional[HomeSummary]:
        for summary in self.homes:
            if summary.home.id == home_id:
                return summary
        return None


class DashboardApplication:
    """
    High-level orchestrator used by the CLI and the FastAPI surface.

    Each ``refresh()`` builds a complete new snapshot and swaps it in with a
    single assignment; earlier snapshots are never mutated.
    """

    def __init__(
        self,
        *,
        fleet_data: FleetData = None,
        synthesizer: ScheduleSynthesizer | None = None,
        savings_eur: float | None = None,
        co2_saved_tons: float | None = None,
        default_seed: int | None = None,
    ) -> None:
        """
        Args:
            fleet_data: Catalog mapping or JSON path (None = configured catalog).
            synthesizer: Schedule synthesizer (defaults to the standard models).
            savings_eur: Savings display figure (defaults to configuration).
            co2_saved_tons: CO2 display figure (defaults to configuration).
            default_seed: Seed for the first snapshot built by ``current()``
                (defaults to ``SMART_NB_SEED``; None means random).
        """
        self.fleet_data = fleet_data
        self.synthesizer = synthesizer or ScheduleSynthesizer()
        self.savings_eur = savings_eur if savings_eur is not None else get_reported_savings_eur()
        self.co2_saved_tons = (
            co2_saved_tons if co2_saved_tons is not None else get_reported_co2_saved_tons()
        )
        self.default_seed = default_seed if default_seed is not None else get_default_seed()
        self._snapshot: DashboardSnapshot | None = None

    @property
    def neighborhood_name(self) -> str:
        data = load_fleet_data(self.fleet_data)
        return str(data.get("neighborhood_name", "neighborhood"))

    @property
    def snapshot(self) -> DashboardSnapshot | None:
        return self._snapshot

    def build_snapshot(
        self,
        *,
        reference_time: datetime,
        seed: int | None = None,
    ) -> DashboardSnapshot:
        """
        Compute a snapshot without publishing it.

        Args:
            reference_time: Clock reading used to pick the current hour.
            seed: Optional seed for the schedule's stochastic terms.
        """
        now_hour = validate_hour(current_hour(reference_time))
        schedule = self.synthesizer.generate(seed=seed)
        fleet = build_fleet(self.fleet_data)
        homes = tuple(annotate_home(home) for home in fleet)
        stats = compute_fleet_stats(
            fleet,
            schedule[now_hour],
            savings_eur=self.savings_eur,
            co2_saved_tons=self.co2_saved_tons,
        )
        for summary in homes:
            if not summary.status_matches_catalog:
                logger.debug(
                    "Home %s catalog status %s differs from derived status %s",
                    summary.home.id,
                    summary.home.status.value,
                    summary.status.value,
                )
        return DashboardSnapshot(
            schedule=schedule,
            fleet=fleet,
            homes=homes,
            stats=stats,
            now_hour=now_hour,
            seed=seed,
        )

    def refresh(
        self,
        *,
        reference_time: datetime,
        seed: int | None = None,
    ) -> DashboardSnapshot:
        """
        Regenerate schedule, home summaries and KPIs, then publish them together.
        """
        snapshot = self.build_snapshot(reference_time=reference_time, seed=seed)
        self._snapshot = snapshot
        logger.debug(
            "Refreshed snapshot for hour %02d (seed=%s, homes=%d)",
            snapshot.now_hour,
            seed,
            len(snapshot.fleet),
        )
        return snapshot

    def current(self, *, reference_time: datetime) -> DashboardSnapshot:
        """
        Return the published snapshot, refreshing first when none exists yet.

        The first refresh uses ``default_seed``.
        """
        snapshot = self._snapshot
        if snapshot is None:
            snapshot = self.refresh(reference_time=reference_time, seed=self.default_seed)
        return snapshot

    def stats_at(self, snapshot: DashboardSnapshot, hour: int) -> FleetStats:
        """
        Recompute fleet KPIs of a snapshot against another hour of its schedule.
        """
        h = validate_hour(hour)
        return compute_fleet_stats(
            snapshot.fleet,
            snapshot.schedule[h],
            savings_eur=self.savings_eur,
            co2_saved_tons=self.co2_saved_tons,
        )

    def run_report(
        self,
        *,
        reference_time: datetime,
        seed: int | None = None,
        output_root: Path | str = "results",
    ) -> Dict[str, Any]:
        """
        Refresh and write the report bundle to disk.

        Returns:
            Summary dictionary with the daily totals and the output directory.
        """
        snapshot = self.refresh(reference_time=reference_time, seed=seed)
        output_dir = generate_report(
            self.neighborhood_name,
            schedule=snapshot.schedule,
            homes=snapshot.homes,
            stats=snapshot.stats,
            reference_time=reference_time,
            output_root=output_root,
        )
        logger.info("Report written to %s", output_dir)
        summary: Dict[str, Any] = dict(summarize_schedule(snapshot.schedule))
        summary["output_dir"] = str(output_dir)
        return summary
