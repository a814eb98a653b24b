"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import logging_config
from .api.routes import bin_cleaning, customers, dashboard, health, messages, portal, routes
from .config import settings
from .persistence.memory import MemStorage

_ENTITY_LABELS = {
    "customers": "customer",
    "routes": "route",
    "messages": "message",
    "bin-cleaning": "appointment",
    "portal": "portal",
    "dashboard": "dashboard",
}


def _entity_label(path: str) -> str:
    relative = path[len(settings.api_prefix):] if path.startswith(settings.api_prefix) else path
    segment = relative.strip("/").split("/", 1)[0]
    return _ENTITY_LABELS.get(segment, "request")


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": f"Invalid {_entity_label(request.url.path)} data",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def create_app(storage: MemStorage | None = None) -> FastAPI:
    logging_config.configure(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.storage = storage if storage is not None else MemStorage(seed=settings.seed_sample_data)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(customers.router, prefix=settings.api_prefix)
    app.include_router(routes.router, prefix=settings.api_prefix)
    app.include_router(messages.router, prefix=settings.api_prefix)
    app.include_router(bin_cleaning.router, prefix=settings.api_prefix)
    app.include_router(dashboard.router, prefix=settings.api_prefix)
    app.include_router(portal.router, prefix=settings.api_prefix)
    return app


app = create_app()
