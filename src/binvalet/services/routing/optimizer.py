"""Nearest-neighbor stop ordering and route statistics.

Every function here is total: stops without an address are placed at the
service-area center instead of raising.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from ...models.domain import Coordinate, RouteStatistics
from ..geospatial import haversine_miles, synthesize_coordinate
from .models import RouteLeg

TRAVEL_MINUTES_PER_MILE = 2
SERVICE_MINUTES_PER_STOP = 3

StopT = TypeVar("StopT")


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def stop_coordinate(stop: object) -> Coordinate:
    return synthesize_coordinate(getattr(stop, "address", None) or "")


def optimize_route_order(stops: Sequence[StopT]) -> list[StopT]:
    """Order stops greedily by nearest unvisited neighbor, starting from the first stop.

    The input sequence is not modified. On equal distances the stop that comes
    first in the remaining order wins.
    """
    if len(stops) <= 1:
        return list(stops)

    unvisited = list(stops)
    current = unvisited.pop(0)
    visited = [current]

    while unvisited:
        current_coordinate = stop_coordinate(current)
        nearest_index = 0
        nearest_distance = math.inf
        for index, candidate in enumerate(unvisited):
            distance = haversine_miles(current_coordinate, stop_coordinate(candidate))
            if distance < nearest_distance:
                nearest_distance = distance
                nearest_index = index
        current = unvisited.pop(nearest_index)
        visited.append(current)

    return visited


def _total_distance(ordered_stops: Sequence[object]) -> float:
    coordinates = [stop_coordinate(stop) for stop in ordered_stops]
    return sum(
        haversine_miles(coordinates[index], coordinates[index + 1])
        for index in range(len(coordinates) - 1)
    )


def compute_route_statistics(ordered_stops: Sequence[object]) -> RouteStatistics:
    """Total distance in miles (2 decimals) and estimated minutes for an ordered route."""

    stop_count = len(ordered_stops)
    total_distance = _total_distance(ordered_stops)
    estimated_time = _round_half_up(
        total_distance * TRAVEL_MINUTES_PER_MILE + stop_count * SERVICE_MINUTES_PER_STOP
    )
    return RouteStatistics(
        stop_count=stop_count,
        total_distance=_round_half_up(total_distance, 2),
        estimated_time=int(estimated_time),
    )


def route_legs(ordered_stops: Sequence) -> list[RouteLeg]:
    legs: list[RouteLeg] = []
    previous: Coordinate | None = None
    for sequence, stop in enumerate(ordered_stops, start=1):
        coordinate = stop_coordinate(stop)
        distance = haversine_miles(previous, coordinate) if previous is not None else 0.0
        legs.append(
            RouteLeg(
                customer=stop,
                sequence=sequence,
                coordinate=coordinate,
                distance_from_prev=round(distance, 4),
            )
        )
        previous = coordinate
    return legs
