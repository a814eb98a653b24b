"""Customer portal services."""

from .payments import PaymentReceipt, capture_payment
from .plans import PLANS, Plan, get_plan, list_plans
from .service import (
    MemberDashboard,
    UpgradeQuote,
    member_dashboard,
    send_member_message,
    signup,
    upgrade_customer,
    upgrade_quote,
)

__all__ = [
    "PLANS",
    "Plan",
    "get_plan",
    "list_plans",
    "PaymentReceipt",
    "capture_payment",
    "MemberDashboard",
    "UpgradeQuote",
    "member_dashboard",
    "send_member_message",
    "signup",
    "upgrade_customer",
    "upgrade_quote",
]
