"""Operations dashboard endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ...persistence.memory import MemStorage
from ...schemas.cleaning import BinCleaningModel
from ...schemas.dashboard import DashboardSummaryResponse
from ...schemas.messages import MessageModel
from ...schemas.routes import ServiceRouteModel
from ...services.dashboard import daily_summary
from ...services.routing.service import route_progress
from ..dependencies import get_storage

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummaryResponse, status_code=status.HTTP_200_OK)
def get_summary(
    day: Optional[date] = Query(default=None, description="Summarize this date instead of today"),
    storage: MemStorage = Depends(get_storage),
) -> DashboardSummaryResponse:
    summary = daily_summary(storage, today=day)
    return DashboardSummaryResponse(
        today=summary.today,
        weekday=summary.weekday,
        todays_routes=[
            ServiceRouteModel(**asdict(route), progress_percent=round(route_progress(route), 1))
            for route in summary.todays_routes
        ],
        completed_routes=summary.completed_routes,
        unread_messages=[MessageModel.model_validate(message) for message in summary.unread_messages],
        todays_cleanings=[BinCleaningModel.model_validate(item) for item in summary.todays_cleanings],
        todays_revenue_cents=summary.todays_revenue_cents,
        todays_bin_count=summary.todays_bin_count,
    )
