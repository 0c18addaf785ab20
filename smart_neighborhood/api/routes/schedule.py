"""
Schedule and fleet KPI endpoints.

Endpoints:
- GET /schedule: The published 24-hour schedule
- POST /refresh: Regenerate the schedule, home summaries and KPIs
- GET /stats: Fleet KPIs for the current (or a chosen) hour
- GET /health: Liveness probe
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...application import DashboardApplication, DashboardSnapshot
from .. import dependencies
from ..schemas import schedule as schedule_schemas

router = APIRouter(prefix="/api", tags=["schedule"])


def _schedule_response(snapshot: DashboardSnapshot) -> schedule_schemas.ScheduleResponse:
    return schedule_schemas.ScheduleResponse(
        seed=snapshot.seed,
        now_hour=snapshot.now_hour,
        samples=[
            schedule_schemas.HourlySampleResponse.model_validate(sample)
            for sample in snapshot.schedule
        ],
    )


@router.get("/schedule", response_model=schedule_schemas.ScheduleResponse)
def get_schedule(
    seed: Optional[int] = Query(None, description="Regenerate with this seed before returning"),
    app_service: DashboardApplication = Depends(dependencies.get_application_service),
    reference_time: datetime = Depends(dependencies.get_reference_time),
) -> schedule_schemas.ScheduleResponse:
    """
    Return the 24-hour neighbourhood schedule.

    Without ``seed`` the published snapshot is returned (generated on first
    access). With ``seed`` a reproducible schedule is generated and published.
    """
    if seed is not None:
        snapshot = app_service.refresh(reference_time=reference_time, seed=seed)
    else:
        snapshot = app_service.current(reference_time=reference_time)
    return _schedule_response(snapshot)


@router.post("/refresh", response_model=schedule_schemas.ScheduleResponse)
def refresh(
    seed: Optional[int] = Query(None, description="Seed for the stochastic terms"),
    app_service: DashboardApplication = Depends(dependencies.get_application_service),
    reference_time: datetime = Depends(dependencies.get_reference_time),
) -> schedule_schemas.ScheduleResponse:
    """
    Regenerate the snapshot and return its schedule.
    """
    snapshot = app_service.refresh(reference_time=reference_time, seed=seed)
    return _schedule_response(snapshot)


@router.get("/stats", response_model=schedule_schemas.FleetStatsResponse)
def get_stats(
    hour: Optional[int] = Query(None, ge=0, le=23, description="Hour to evaluate (default: now)"),
    app_service: DashboardApplication = Depends(dependencies.get_application_service),
    reference_time: datetime = Depends(dependencies.get_reference_time),
) -> schedule_schemas.FleetStatsResponse:
    """
    Return fleet KPIs of the published snapshot.
    """
    snapshot = app_service.current(reference_time=reference_time)
    if hour is None:
        hour = snapshot.now_hour
        stats = snapshot.stats
    else:
        stats = app_service.stats_at(snapshot, hour)
    return schedule_schemas.FleetStatsResponse(hour_index=hour, **stats.to_dict())


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}
