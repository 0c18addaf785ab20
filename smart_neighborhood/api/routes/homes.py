"""
Home catalog endpoints.

Endpoints:
- GET /homes: All homes in catalog order with derived display metrics
- GET /homes/{home_id}: One home (404 when unknown)
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ...application import DashboardApplication
from .. import dependencies
from ..schemas import homes as home_schemas

router = APIRouter(prefix="/api", tags=["homes"])


@router.get("/homes", response_model=List[home_schemas.HomeResponse])
def list_homes(
    app_service: DashboardApplication = Depends(dependencies.get_application_service),
    reference_time: datetime = Depends(dependencies.get_reference_time),
) -> List[home_schemas.HomeResponse]:
    snapshot = app_service.current(reference_time=reference_time)
    return [home_schemas.HomeResponse.from_summary(summary) for summary in snapshot.homes]


@router.get("/homes/{home_id}", response_model=home_schemas.HomeResponse)
def get_home(
    home_id: int,
    app_service: DashboardApplication = Depends(dependencies.get_application_service),
    reference_time: datetime = Depends(dependencies.get_reference_time),
) -> home_schemas.HomeResponse:
    """
    Return a single home's card data.

    Raises:
        HTTPException: 404 when no home has this id.
    """
    snapshot = app_service.current(reference_time=reference_time)
    summary = snapshot.home_summary(home_id)
    if summary is None:
        raise HTTPException(status_code=404, detail=f"Home {home_id} not found")
    return home_schemas.HomeResponse.from_summary(summary)
