"""FastAPI application for the property management dashboard demo."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.errors import ForbiddenError
from .core.logging_config import configure_logging
from .data.dataset import record_store
from .routers import dashboard, maintenance, meta, sales


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)
    record_store.load(settings.dataset_path)
    yield


app = FastAPI(title="Property Dashboard API", version=meta.API_VERSION, lifespan=lifespan)

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ForbiddenError)
async def forbidden_handler(_request: Request, exc: ForbiddenError) -> JSONResponse:
    """Render role rejections as ``{message, role}``."""

    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


app.include_router(meta.router)
app.include_router(dashboard.router, prefix="/api", tags=["dashboard"])
app.include_router(sales.router, prefix="/api", tags=["sales"])
app.include_router(maintenance.router, prefix="/api", tags=["maintenance"])
