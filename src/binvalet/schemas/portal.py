"""Customer portal schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .cleaning import BinCleaningModel
from .customers import CustomerModel, PlanId
from .messages import MessageModel


class PlanModel(BaseModel):
    id: str
    name: str
    monthly_price: float
    yearly_price: float
    features: List[str]
    popular: bool = False


class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: Optional[str] = None
    address: str = Field(..., min_length=1)
    plan: PlanId


class PaymentDetails(BaseModel):
    cardholder_name: str = Field(..., min_length=1)
    card_number: str = Field(..., min_length=1)
    expiry_date: str = Field(..., description="MM/YY")
    cvv: str
    billing_address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str


class UpgradeQuoteModel(BaseModel):
    customer_id: int
    current_plan: str
    target_plan: str
    monthly_upgrade_price: float
    yearly_upgrade_price: float
    target_monthly_price: float
    target_yearly_price: float


class UpgradeRequest(BaseModel):
    target_plan: PlanId = "ultimate"
    billing_cycle: str = Field(default="monthly", pattern=r"^(monthly|yearly)$")
    payment: PaymentDetails


class PaymentReceiptModel(BaseModel):
    transaction_id: str
    amount: float
    masked_card: str
    captured_at: datetime


class UpgradeResponse(BaseModel):
    customer: CustomerModel
    quote: UpgradeQuoteModel
    receipt: PaymentReceiptModel


class MemberMessageRequest(BaseModel):
    message: str = Field(..., min_length=1)


class MemberDashboardResponse(BaseModel):
    customer: CustomerModel
    plan: PlanModel
    messages: List[MessageModel]
    appointments: List[BinCleaningModel]
