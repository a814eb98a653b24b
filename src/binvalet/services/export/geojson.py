"""GeoJSON export of route maps."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from shapely.geometry import LineString, Point, mapping

from ..routing.models import RouteLeg


def _as_list(value: Any) -> Any:
    # shapely's mapping() yields nested tuples; JSON consumers expect arrays
    if isinstance(value, (list, tuple)):
        return [_as_list(item) for item in value]
    return value


def _geometry(shape) -> Dict[str, Any]:
    geometry = dict(mapping(shape))
    geometry["coordinates"] = _as_list(geometry["coordinates"])
    return geometry


def route_line_feature(legs: Sequence[RouteLeg], *, route_name: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Return a LineString feature through the stops in visiting order.

    GeoJSON positions are (longitude, latitude). Routes with fewer than two
    stops have no line.
    """
    if len(legs) < 2:
        return None
    line = LineString([(leg.coordinate.longitude, leg.coordinate.latitude) for leg in legs])
    return {
        "type": "Feature",
        "geometry": _geometry(line),
        "properties": {"route_name": route_name, "stop_count": len(legs)},
    }


def stop_features(legs: Sequence[RouteLeg]) -> List[Dict[str, Any]]:
    features: List[Dict[str, Any]] = []
    for leg in legs:
        point = Point(leg.coordinate.longitude, leg.coordinate.latitude)
        features.append(
            {
                "type": "Feature",
                "geometry": _geometry(point),
                "properties": {
                    "customer_id": leg.customer.id,
                    "name": leg.customer.name,
                    "address": leg.customer.address,
                    "status": leg.customer.status,
                    "sequence": leg.sequence,
                },
            }
        )
    return features


def route_feature_collection(legs: Sequence[RouteLeg], *, route_name: Optional[str] = None) -> Dict[str, Any]:
    features = stop_features(legs)
    line = route_line_feature(legs, route_name=route_name)
    if line is not None:
        features.insert(0, line)
    return {"type": "FeatureCollection", "features": features}
