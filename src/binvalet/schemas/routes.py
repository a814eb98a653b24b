"""Service route request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .updates import PartialUpdate

Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
RouteStatus = Literal["pending", "in_progress", "completed"]

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ServiceRouteCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    day: Weekday
    start_time: str = Field(..., pattern=TIME_PATTERN, description="24h start time, e.g. '08:00'.")
    status: RouteStatus = "pending"
    total_customers: int = Field(default=0, ge=0)
    completed_customers: int = Field(default=0, ge=0)


class ServiceRouteUpdate(PartialUpdate):
    nullable_fields = frozenset({"description"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    day: Optional[Weekday] = None
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    status: Optional[RouteStatus] = None
    total_customers: Optional[int] = Field(None, ge=0)
    completed_customers: Optional[int] = Field(None, ge=0)


class ServiceRouteModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    day: str
    start_time: str
    status: str
    total_customers: int
    completed_customers: int
    progress_percent: float = 0.0
    created_at: Optional[datetime] = None
