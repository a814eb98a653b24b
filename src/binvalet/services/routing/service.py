"""Route map orchestration: stop selection, ordering, statistics and exports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from ...models.domain import Customer, ServiceRoute
from ...persistence.filesystem import FileStorage
from ...persistence.memory import MemStorage
from ...schemas.routing import RouteMapResponse, RouteOptimizationRequest
from ..errors import NotFoundError
from ..export.geojson import route_feature_collection, route_line_feature
from ..outputs.routing_formatter import route_map_to_csv, route_map_to_json
from .models import RouteMap
from .optimizer import compute_route_statistics, optimize_route_order, route_legs

logger = logging.getLogger(__name__)

ROUTE_ACTIONS = {"start": "in_progress", "complete": "completed"}


def route_label(route: ServiceRoute) -> str:
    """Short route tag, e.g. 'Route A' for 'Route A - North Side'."""
    return route.name.split(" - ", 1)[0].strip()


def customers_for_route(customers: Sequence[Customer], route: Optional[ServiceRoute]) -> list[Customer]:
    if route is None:
        return list(customers)
    names = {route.name, route_label(route)}
    return [customer for customer in customers if customer.route in names]


def _filter_customers(customers: Sequence[Customer], customer_ids: Sequence[int] | None) -> list[Customer]:
    if not customer_ids:
        return list(customers)
    by_id = {customer.id: customer for customer in customers}
    # keep the caller's order so their first id is the starting stop
    return [by_id[cid] for cid in dict.fromkeys(customer_ids) if cid in by_id]


def route_progress(route: ServiceRoute) -> float:
    if route.total_customers == 0:
        return 0.0
    return (route.completed_customers / route.total_customers) * 100


def advance_route_status(route: ServiceRoute, action: str) -> str:
    return ROUTE_ACTIONS.get(action, route.status)


def build_route_map(
    storage: MemStorage,
    route_id: int | None = None,
    payload: RouteOptimizationRequest | None = None,
) -> RouteMap:
    """Order a route's customers by nearest neighbor and compute its statistics."""

    payload = payload or RouteOptimizationRequest()
    route: Optional[ServiceRoute] = None
    if route_id is not None:
        route = storage.get_route(route_id)
        if route is None:
            raise NotFoundError("Route", route_id)

    stops = customers_for_route(storage.list_customers(), route)
    stops = _filter_customers(stops, payload.customer_ids)
    ordered = optimize_route_order(stops)
    legs = route_legs(ordered)
    statistics = compute_route_statistics(ordered)

    route_name = route.name if route else None
    metadata: dict = {"algorithm": "nearest_neighbor", "distance_unit": "miles", "time_unit": "minutes"}
    line = route_line_feature(legs, route_name=route_name)
    if line is not None:
        metadata["map_overlays"] = {"route_line": line}

    route_map = RouteMap(
        route_id=route.id if route else None,
        route_name=route_name,
        legs=legs,
        statistics=statistics,
        metadata=metadata,
    )
    logger.info(
        "Optimized %s: %d stops, %.2f miles, %d minutes",
        route_name or "all customers",
        statistics.stop_count,
        statistics.total_distance,
        statistics.estimated_time,
    )

    if payload.export:
        route_map.metadata["export_directory"] = str(_export_route_map(route_map))
    return route_map


def _export_route_map(route_map: RouteMap) -> Path:
    prefix = f"route_{route_map.route_id}" if route_map.route_id is not None else "route_all"
    run_dir = FileStorage().export_run(
        prefix,
        {
            "summary.json": route_map_to_json(route_map),
            "stops.csv": route_map_to_csv(route_map),
            "route.geojson": route_feature_collection(route_map.legs, route_name=route_map.route_name),
        },
    )
    logger.info("Exported route map to %s", run_dir)
    return run_dir


def route_map_response(route_map: RouteMap) -> RouteMapResponse:
    return RouteMapResponse.model_validate(route_map_to_json(route_map))
