"""In-memory storage for customers, routes, messages and cleaning appointments.

A single ``MemStorage`` instance is created per application. Records live in
plain dicts keyed by auto-incrementing integer ids; nothing survives a restart
and there is no locking, so it must only be used from one process.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, TypeVar

from ..config import local_today
from ..models.domain import BinCleaningAppointment, Customer, Message, ServiceRoute

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class _RecordTable(Generic[RecordT]):
    """One entity's records plus its id counter."""

    def __init__(self, factory: Callable[..., RecordT], label: str) -> None:
        self._factory = factory
        self._label = label
        self._records: dict[int, RecordT] = {}
        self._next_id = 1
        self._field_names = {f.name for f in fields(factory)}

    def __len__(self) -> int:
        return len(self._records)

    def values(self) -> list[RecordT]:
        return list(self._records.values())

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)

    def create(self, payload: Mapping[str, Any]) -> RecordT:
        record_id = self._next_id
        self._next_id += 1
        data = {key: value for key, value in payload.items() if key in self._field_names - _IMMUTABLE_FIELDS}
        record = self._factory(id=record_id, created_at=datetime.now(timezone.utc), **data)
        self._records[record_id] = record
        logger.debug("Created %s %s", self._label, record_id)
        return record

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Optional[RecordT]:
        record = self._records.get(record_id)
        if record is None:
            return None
        data = {key: value for key, value in changes.items() if key in self._field_names - _IMMUTABLE_FIELDS}
        updated = replace(record, **data)
        self._records[record_id] = updated
        logger.debug("Updated %s %s (%s)", self._label, record_id, ", ".join(sorted(data)) or "no fields")
        return updated

    def delete(self, record_id: int) -> bool:
        if self._records.pop(record_id, None) is None:
            return False
        logger.debug("Deleted %s %s", self._label, record_id)
        return True


class MemStorage:
    """Typed CRUD over in-memory maps."""

    def __init__(self, *, seed: bool = False, today: Optional[date] = None) -> None:
        self._customers: _RecordTable[Customer] = _RecordTable(Customer, "customer")
        self._routes: _RecordTable[ServiceRoute] = _RecordTable(ServiceRoute, "route")
        self._messages: _RecordTable[Message] = _RecordTable(Message, "message")
        self._appointments: _RecordTable[BinCleaningAppointment] = _RecordTable(
            BinCleaningAppointment, "bin cleaning appointment"
        )
        if seed:
            self._add_sample_data(today or local_today())

    def counts(self) -> dict[str, int]:
        return {
            "customers": len(self._customers),
            "routes": len(self._routes),
            "messages": len(self._messages),
            "bin_cleaning_appointments": len(self._appointments),
        }

    # Customer operations
    def list_customers(self) -> list[Customer]:
        return sorted(self._customers.values(), key=lambda customer: customer.id)

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def create_customer(self, payload: Mapping[str, Any]) -> Customer:
        return self._customers.create(payload)

    def update_customer(self, customer_id: int, changes: Mapping[str, Any]) -> Optional[Customer]:
        return self._customers.update(customer_id, changes)

    def delete_customer(self, customer_id: int) -> bool:
        return self._customers.delete(customer_id)

    # Route operations
    def list_routes(self) -> list[ServiceRoute]:
        return sorted(self._routes.values(), key=lambda route: route.id)

    def get_route(self, route_id: int) -> Optional[ServiceRoute]:
        return self._routes.get(route_id)

    def create_route(self, payload: Mapping[str, Any]) -> ServiceRoute:
        return self._routes.create(payload)

    def update_route(self, route_id: int, changes: Mapping[str, Any]) -> Optional[ServiceRoute]:
        return self._routes.update(route_id, changes)

    def delete_route(self, route_id: int) -> bool:
        return self._routes.delete(route_id)

    # Message operations
    def list_messages(self) -> list[Message]:
        """Newest first."""
        return sorted(
            self._messages.values(),
            key=lambda message: (message.created_at or datetime.min.replace(tzinfo=timezone.utc), message.id),
            reverse=True,
        )

    def get_message(self, message_id: int) -> Optional[Message]:
        return self._messages.get(message_id)

    def create_message(self, payload: Mapping[str, Any]) -> Message:
        return self._messages.create(payload)

    def update_message(self, message_id: int, changes: Mapping[str, Any]) -> Optional[Message]:
        return self._messages.update(message_id, changes)

    def delete_message(self, message_id: int) -> bool:
        return self._messages.delete(message_id)

    # Bin cleaning operations
    def list_bin_cleaning_appointments(self) -> list[BinCleaningAppointment]:
        """Earliest date first."""
        return sorted(self._appointments.values(), key=lambda appointment: (appointment.date, appointment.id))

    def get_bin_cleaning_appointment(self, appointment_id: int) -> Optional[BinCleaningAppointment]:
        return self._appointments.get(appointment_id)

    def create_bin_cleaning_appointment(self, payload: Mapping[str, Any]) -> BinCleaningAppointment:
        return self._appointments.create(payload)

    def update_bin_cleaning_appointment(
        self, appointment_id: int, changes: Mapping[str, Any]
    ) -> Optional[BinCleaningAppointment]:
        return self._appointments.update(appointment_id, changes)

    def delete_bin_cleaning_appointment(self, appointment_id: int) -> bool:
        return self._appointments.delete(appointment_id)

    def _add_sample_data(self, today: date) -> None:
        _create_all(self.create_customer, SAMPLE_CUSTOMERS)
        _create_all(self.create_route, SAMPLE_ROUTES)
        _create_all(self.create_message, SAMPLE_MESSAGES)
        tomorrow = today + timedelta(days=1)
        _create_all(
            self.create_bin_cleaning_appointment,
            [
                {"customer_id": 1, "customer_name": "John Smith", "address": "123 Oak Street", "date": today,
                 "start_time": "14:00", "end_time": "15:00", "bin_count": 2, "price": 3500, "status": "scheduled"},
                {"customer_id": 3, "customer_name": "Mike Davis", "address": "789 Maple Drive", "date": tomorrow,
                 "start_time": "10:00", "end_time": "11:00", "bin_count": 1, "price": 2500, "status": "scheduled"},
            ],
        )
        logger.info("Loaded sample data: %s", self.counts())


def _create_all(create: Callable[[Mapping[str, Any]], Any], rows: Iterable[Mapping[str, Any]]) -> None:
    for row in rows:
        create(row)


SAMPLE_CUSTOMERS = (
    {"name": "John Smith", "phone": "555-0123", "email": "john@example.com", "address": "123 Oak Street",
     "route": "Route A", "status": "active", "plan": "premium", "monthly_rate": 40.0},
    {"name": "Sarah Johnson", "phone": "555-0124", "email": "sarah@example.com", "address": "456 Pine Avenue",
     "route": "Route A", "status": "active", "plan": "basic", "monthly_rate": 25.0},
    {"name": "Mike Davis", "phone": "555-0125", "email": "mike@example.com", "address": "789 Maple Drive",
     "route": "Route B", "status": "active", "plan": "ultimate", "monthly_rate": 60.0},
    {"name": "Lisa Wilson", "phone": "555-0126", "email": "lisa@example.com", "address": "321 Elm Street",
     "route": "Route B", "status": "suspended", "plan": "basic", "monthly_rate": 25.0},
)

SAMPLE_ROUTES = (
    {"name": "Route A - North Side", "description": "Northern residential area", "day": "monday",
     "start_time": "08:00", "status": "pending", "total_customers": 15, "completed_customers": 0},
    {"name": "Route B - South Side", "description": "Southern residential area", "day": "monday",
     "start_time": "10:00", "status": "pending", "total_customers": 12, "completed_customers": 0},
    {"name": "Route C - Downtown", "description": "Downtown commercial area", "day": "tuesday",
     "start_time": "07:00", "status": "pending", "total_customers": 8, "completed_customers": 0},
)

SAMPLE_MESSAGES = (
    {"customer_id": 1, "customer_name": "John Smith",
     "message": "Can you please move my bins earlier today? I have guests coming over.",
     "is_read": False, "is_from_customer": True},
    {"customer_id": 2, "customer_name": "Sarah Johnson",
     "message": "Thank you for the great service! Very reliable.",
     "is_read": True, "is_from_customer": True},
)
