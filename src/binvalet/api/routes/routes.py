"""Service route endpoints, including the route map."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from ...models.domain import ServiceRoute
from ...persistence.memory import MemStorage
from ...schemas.routes import ServiceRouteCreate, ServiceRouteModel, ServiceRouteUpdate
from ...schemas.routing import RouteMapResponse, RouteOptimizationRequest
from ...services.errors import NotFoundError
from ...services.routing.service import (
    advance_route_status,
    build_route_map,
    route_map_response,
    route_progress,
)
from ..dependencies import get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routes", tags=["routes"])


def _not_found(route_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Route {route_id} not found")


def _route_model(route: ServiceRoute) -> ServiceRouteModel:
    return ServiceRouteModel(**asdict(route), progress_percent=round(route_progress(route), 1))


def _route_map(storage: MemStorage, route_id: Optional[int], payload: RouteOptimizationRequest) -> RouteMapResponse:
    try:
        return route_map_response(build_route_map(storage, route_id, payload))
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error building route map: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {exc}",
        ) from exc


@router.get("", response_model=List[ServiceRouteModel], status_code=status.HTTP_200_OK)
def list_routes(storage: MemStorage = Depends(get_storage)) -> List[ServiceRouteModel]:
    return [_route_model(route) for route in storage.list_routes()]


@router.get("/map", response_model=RouteMapResponse, status_code=status.HTTP_200_OK)
def all_customers_map(storage: MemStorage = Depends(get_storage)) -> RouteMapResponse:
    """Route map over every customer, in id order with the first customer as the start."""
    return _route_map(storage, None, RouteOptimizationRequest())


@router.post("", response_model=ServiceRouteModel, status_code=status.HTTP_201_CREATED)
def create_route(payload: ServiceRouteCreate, storage: MemStorage = Depends(get_storage)) -> ServiceRouteModel:
    return _route_model(storage.create_route(payload.model_dump()))


@router.get("/{route_id}", response_model=ServiceRouteModel, status_code=status.HTTP_200_OK)
def get_route(route_id: int, storage: MemStorage = Depends(get_storage)) -> ServiceRouteModel:
    route = storage.get_route(route_id)
    if route is None:
        raise _not_found(route_id)
    return _route_model(route)


@router.put("/{route_id}", response_model=ServiceRouteModel, status_code=status.HTTP_200_OK)
def update_route(
    route_id: int,
    payload: ServiceRouteUpdate,
    storage: MemStorage = Depends(get_storage),
) -> ServiceRouteModel:
    route = storage.update_route(route_id, payload.model_dump(exclude_unset=True))
    if route is None:
        raise _not_found(route_id)
    return _route_model(route)


@router.delete("/{route_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_route(route_id: int, storage: MemStorage = Depends(get_storage)) -> Response:
    if not storage.delete_route(route_id):
        raise _not_found(route_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{route_id}/actions/{action}", response_model=ServiceRouteModel, status_code=status.HTTP_200_OK)
def route_action(
    route_id: int,
    action: str,
    storage: MemStorage = Depends(get_storage),
) -> ServiceRouteModel:
    """Apply 'start' or 'complete'; other actions leave the status unchanged."""
    route = storage.get_route(route_id)
    if route is None:
        raise _not_found(route_id)
    updated = storage.update_route(route_id, {"status": advance_route_status(route, action)})
    return _route_model(updated)


@router.post("/{route_id}/optimize", response_model=RouteMapResponse, status_code=status.HTTP_200_OK)
def optimize_route(
    route_id: int,
    payload: Optional[RouteOptimizationRequest] = Body(default=None),
    storage: MemStorage = Depends(get_storage),
) -> RouteMapResponse:
    return _route_map(storage, route_id, payload or RouteOptimizationRequest())
