"""Bin cleaning appointment schemas."""

from __future__ import annotations

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .routes import TIME_PATTERN
from .updates import PartialUpdate

AppointmentStatus = Literal["scheduled", "completed", "cancelled"]


def check_time_window(start_time: str, end_time: str) -> None:
    # zero-padded HH:MM strings compare in time order
    if end_time <= start_time:
        raise ValueError("end_time must be after start_time")


class BinCleaningCreate(BaseModel):
    customer_id: Optional[int] = None
    customer_name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    date: dt.date
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    bin_count: int = Field(..., ge=1)
    price: int = Field(..., ge=0, description="Price in cents.")
    status: AppointmentStatus = "scheduled"

    @model_validator(mode="after")
    def _check_window(self) -> "BinCleaningCreate":
        check_time_window(self.start_time, self.end_time)
        return self


class BinCleaningUpdate(PartialUpdate):
    nullable_fields = frozenset({"customer_id"})

    customer_id: Optional[int] = None
    customer_name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    date: Optional[dt.date] = None
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    bin_count: Optional[int] = Field(None, ge=1)
    price: Optional[int] = Field(None, ge=0)
    status: Optional[AppointmentStatus] = None


class BinCleaningModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_id: Optional[int] = None
    customer_name: str
    address: str
    date: dt.date
    start_time: str
    end_time: str
    bin_count: int
    price: int
    status: str
    created_at: Optional[dt.datetime] = None
