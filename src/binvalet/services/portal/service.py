"""Customer self-service portal: signup, upgrades and the member dashboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...config import settings
from ...models.domain import BinCleaningAppointment, Customer, Message
from ...persistence.memory import MemStorage
from ...schemas.portal import SignupRequest, UpgradeRequest
from ..errors import NotFoundError
from .payments import PaymentReceipt, capture_payment
from .plans import Plan, get_plan

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpgradeQuote:
    customer_id: int
    current_plan: str
    target_plan: str
    monthly_upgrade_price: float
    yearly_upgrade_price: float
    target_monthly_price: float
    target_yearly_price: float


@dataclass(slots=True)
class MemberDashboard:
    customer: Customer
    plan: Plan
    messages: list[Message]
    appointments: list[BinCleaningAppointment]


def _require_customer(storage: MemStorage, customer_id: int) -> Customer:
    customer = storage.get_customer(customer_id)
    if customer is None:
        raise NotFoundError("Customer", customer_id)
    return customer


def signup(storage: MemStorage, payload: SignupRequest) -> Customer:
    """Create an active customer on the default route with the selected plan."""

    plan = get_plan(payload.plan)
    customer = storage.create_customer(
        {
            "name": payload.name.strip(),
            "phone": payload.phone.strip(),
            "email": (payload.email or "").strip() or None,
            "address": payload.address.strip(),
            "route": settings.default_route_name,
            "status": "active",
            "plan": plan.id,
            "monthly_rate": plan.monthly_price,
        }
    )
    logger.info("Portal signup: customer %s on plan %s", customer.id, plan.id)
    return customer


def upgrade_quote(customer: Customer, target_plan_id: str = "ultimate") -> UpgradeQuote:
    current = get_plan(customer.plan)
    target = get_plan(target_plan_id)
    if target.rank <= current.rank:
        raise ValueError(f"Customer is already on the {current.name} plan; cannot upgrade to {target.name}.")
    return UpgradeQuote(
        customer_id=customer.id,
        current_plan=current.id,
        target_plan=target.id,
        monthly_upgrade_price=round(target.monthly_price - current.monthly_price, 2),
        yearly_upgrade_price=round(target.yearly_price - current.yearly_price, 2),
        target_monthly_price=target.monthly_price,
        target_yearly_price=target.yearly_price,
    )


def upgrade_customer(
    storage: MemStorage,
    customer_id: int,
    payload: UpgradeRequest,
    *,
    today: Optional[date] = None,
) -> tuple[Customer, UpgradeQuote, PaymentReceipt]:
    """Quote the upgrade, capture the payment, then switch the customer's plan."""

    customer = _require_customer(storage, customer_id)
    quote = upgrade_quote(customer, payload.target_plan)
    amount = quote.yearly_upgrade_price if payload.billing_cycle == "yearly" else quote.monthly_upgrade_price
    receipt = capture_payment(payload.payment, amount, today=today)

    target = get_plan(quote.target_plan)
    updated = storage.update_customer(customer_id, {"plan": target.id, "monthly_rate": target.monthly_price})
    logger.info("Customer %s upgraded from %s to %s", customer_id, quote.current_plan, target.id)
    return updated, quote, receipt


def member_dashboard(storage: MemStorage, customer_id: int) -> MemberDashboard:
    customer = _require_customer(storage, customer_id)
    messages = [message for message in storage.list_messages() if message.customer_id == customer_id]
    messages.reverse()  # oldest first, like a chat thread
    appointments = [
        appointment
        for appointment in storage.list_bin_cleaning_appointments()
        if appointment.customer_id == customer_id
    ]
    return MemberDashboard(
        customer=customer,
        plan=get_plan(customer.plan),
        messages=messages,
        appointments=appointments,
    )


def send_member_message(storage: MemStorage, customer_id: int, text: str) -> Message:
    customer = _require_customer(storage, customer_id)
    return storage.create_message(
        {
            "customer_id": customer.id,
            "customer_name": customer.name,
            "message": text,
            "is_read": False,
            "is_from_customer": True,
        }
    )
