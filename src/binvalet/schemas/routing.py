"""Route map request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class RouteOptimizationRequest(BaseModel):
    customer_ids: Optional[List[int]] = Field(
        default=None,
        description="Restrict the route to these customers. The first listed customer is the starting stop.",
    )
    export: bool = Field(default=False, description="Write summary, CSV and GeoJSON files for this run.")


class RouteStopModel(BaseModel):
    customer_id: int
    name: str
    address: str
    status: str
    sequence: int
    latitude: float
    longitude: float
    distance_from_prev: float


class RouteStatisticsModel(BaseModel):
    stop_count: int
    total_distance: float
    estimated_time: int


class RouteMapResponse(BaseModel):
    route_id: Optional[int] = None
    route_name: Optional[str] = None
    statistics: RouteStatisticsModel
    stops: List[RouteStopModel]
    metadata: dict
