"""Customer request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .updates import PartialUpdate

CustomerStatus = Literal["active", "suspended", "cancelled"]
PlanId = Literal["basic", "premium", "ultimate"]


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: Optional[str] = None
    address: str = Field(..., min_length=1)
    route: str = Field(..., min_length=1, description="Name of the service route the customer is on.")
    status: CustomerStatus = "active"
    plan: PlanId = "basic"
    monthly_rate: float = Field(default=59.99, ge=0)


class CustomerUpdate(PartialUpdate):
    nullable_fields = frozenset({"email"})

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    address: Optional[str] = Field(None, min_length=1)
    route: Optional[str] = Field(None, min_length=1)
    status: Optional[CustomerStatus] = None
    plan: Optional[PlanId] = None
    monthly_rate: Optional[float] = Field(None, ge=0)


class CustomerModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    phone: str
    email: Optional[str] = None
    address: str
    route: str
    status: str
    plan: str
    monthly_rate: float
    created_at: Optional[datetime] = None
