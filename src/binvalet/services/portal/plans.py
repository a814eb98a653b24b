"""Service plan catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Plan:
    id: str
    name: str
    monthly_price: float
    yearly_price: float
    features: tuple[str, ...]
    rank: int
    popular: bool = False


PLANS: dict[str, Plan] = {
    "basic": Plan(
        id="basic",
        name="Basic",
        monthly_price=59.99,
        yearly_price=660.0,
        features=(
            "Weekly trash bin valet service",
            "Up to 3 cans included",
            "Reliable weekly pickup",
            "Email notifications",
        ),
        rank=1,
    ),
    "premium": Plan(
        id="premium",
        name="Premium",
        monthly_price=99.99,
        yearly_price=1089.0,
        features=(
            "Weekly trash bin valet service",
            "2 free bin cleanings per month",
            "15% off all pressure washing services",
            "Priority customer support",
        ),
        rank=2,
        popular=True,
    ),
    "ultimate": Plan(
        id="ultimate",
        name="Ultimate",
        monthly_price=199.99,
        yearly_price=1990.0,
        features=(
            "Weekly trash bin valet service",
            "4 free bin cleanings per month",
            "50% off all pressure washing services",
            "Premium support & priority scheduling",
        ),
        rank=3,
    ),
}

DEFAULT_PLAN_ID = "basic"


def list_plans() -> list[Plan]:
    return sorted(PLANS.values(), key=lambda plan: plan.rank)


def get_plan(plan_id: Optional[str]) -> Plan:
    """Return a plan by id; a missing id means the default plan."""
    plan = PLANS.get(plan_id or DEFAULT_PLAN_ID)
    if plan is None:
        raise ValueError(f"Unknown plan '{plan_id}'.")
    return plan
