"""Export services."""

from .geojson import route_feature_collection, route_line_feature, stop_features

__all__ = [
    "route_line_feature",
    "route_feature_collection",
    "stop_features",
]
