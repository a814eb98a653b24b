"""Serializers for route map outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..routing.models import RouteMap


def route_map_to_json(route_map: RouteMap) -> dict:
    return {
        "route_id": route_map.route_id,
        "route_name": route_map.route_name,
        "statistics": asdict(route_map.statistics),
        "metadata": route_map.metadata,
        "stops": [
            {
                "customer_id": leg.customer.id,
                "name": leg.customer.name,
                "address": leg.customer.address,
                "status": leg.customer.status,
                "sequence": leg.sequence,
                "latitude": leg.coordinate.latitude,
                "longitude": leg.coordinate.longitude,
                "distance_from_prev": leg.distance_from_prev,
            }
            for leg in route_map.legs
        ],
    }


def route_map_to_csv(route_map: RouteMap) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "route_name",
        "sequence",
        "customer_id",
        "name",
        "address",
        "latitude",
        "longitude",
        "distance_from_prev_miles",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
    writer.writeheader()
    for leg in route_map.legs:
        writer.writerow(
            {
                "route_name": route_map.route_name or "",
                "sequence": leg.sequence,
                "customer_id": leg.customer.id,
                "name": leg.customer.name,
                "address": leg.customer.address,
                "latitude": leg.coordinate.latitude,
                "longitude": leg.coordinate.longitude,
                "distance_from_prev_miles": leg.distance_from_prev,
            }
        )
    return buffer.getvalue()
