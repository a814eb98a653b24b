"""Request-scoped dependencies."""

from __future__ import annotations

from fastapi import Request

from ..persistence.memory import MemStorage


def get_storage(request: Request) -> MemStorage:
    """Return the storage instance created with the application."""
    return request.app.state.storage
