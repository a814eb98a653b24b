"""Daily operations summary."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...config import local_today
from ...models.domain import BinCleaningAppointment, Message, ServiceRoute
from ...persistence.memory import MemStorage


@dataclass(slots=True)
class DailySummary:
    today: date
    weekday: str
    todays_routes: list[ServiceRoute]
    completed_routes: int
    unread_messages: list[Message]
    todays_cleanings: list[BinCleaningAppointment]
    todays_revenue_cents: int
    todays_bin_count: int


def daily_summary(storage: MemStorage, today: Optional[date] = None) -> DailySummary:
    today = today or local_today()
    weekday = today.strftime("%A").lower()

    todays_routes = [route for route in storage.list_routes() if route.day == weekday]
    todays_cleanings = [
        appointment for appointment in storage.list_bin_cleaning_appointments() if appointment.date == today
    ]
    revenue = sum(appointment.price for appointment in todays_cleanings if appointment.status == "completed")

    return DailySummary(
        today=today,
        weekday=weekday,
        todays_routes=todays_routes,
        completed_routes=sum(1 for route in todays_routes if route.status == "completed"),
        unread_messages=[message for message in storage.list_messages() if not message.is_read],
        todays_cleanings=todays_cleanings,
        todays_revenue_cents=revenue,
        todays_bin_count=sum(appointment.bin_count for appointment in todays_cleanings),
    )
