"""Operations dashboard schemas."""

from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel

from .cleaning import BinCleaningModel
from .messages import MessageModel
from .routes import ServiceRouteModel


class DashboardSummaryResponse(BaseModel):
    today: date
    weekday: str
    todays_routes: List[ServiceRouteModel]
    completed_routes: int
    unread_messages: List[MessageModel]
    todays_cleanings: List[BinCleaningModel]
    todays_revenue_cents: int
    todays_bin_count: int
