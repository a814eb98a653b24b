"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ...models.domain import Coordinate, Customer, RouteStatistics


@dataclass(slots=True)
class RouteLeg:
    customer: Customer
    sequence: int
    coordinate: Coordinate
    distance_from_prev: float


@dataclass(slots=True)
class RouteMap:
    route_id: Optional[int]
    route_name: Optional[str]
    legs: List[RouteLeg]
    statistics: RouteStatistics
    metadata: dict = field(default_factory=dict)
