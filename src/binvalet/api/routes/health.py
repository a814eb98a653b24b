"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...persistence.memory import MemStorage
from ..dependencies import get_storage

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root(storage: MemStorage = Depends(get_storage)) -> dict:
    """Liveness check with the current record counts."""
    return {"status": "ok", "storage": "memory", "records": storage.counts()}
