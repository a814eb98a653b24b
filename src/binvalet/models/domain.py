"""Domain models for customers, routes, messages and cleaning appointments."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(slots=True)
class Customer:
    """A valet customer; also the stop visited on a service route."""

    id: int
    name: str
    phone: str
    address: str
    route: str
    status: str = "active"
    email: Optional[str] = None
    plan: str = "basic"
    monthly_rate: float = 59.99
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class ServiceRoute:
    """A weekly service route run on a fixed day."""

    id: int
    name: str
    day: str
    start_time: str
    description: Optional[str] = None
    status: str = "pending"
    total_customers: int = 0
    completed_customers: int = 0
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class Message:
    id: int
    customer_name: str
    message: str
    customer_id: Optional[int] = None
    is_read: bool = False
    is_from_customer: bool = True
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class BinCleaningAppointment:
    """A scheduled bin cleaning visit. Price is stored in cents."""

    id: int
    customer_name: str
    address: str
    date: date
    start_time: str
    end_time: str
    bin_count: int
    price: int
    customer_id: Optional[int] = None
    status: str = "scheduled"
    created_at: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(slots=True)
class RouteStatistics:
    stop_count: int
    total_distance: float
    estimated_time: int
