"""
FastAPI application for the user directory and the purchase log.

Run with::

    uvicorn directory_api.app:app --reload
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from directory_api.core.config import Settings, get_settings
from directory_api.core.logging_config import setup_logging
from directory_api.repositories.factory import build_document_store, build_purchase_log
from directory_api.routers import purchases as purchases_router
from directory_api.routers import users as users_router
from directory_api.services.directory_service import DirectoryService
from directory_api.services.purchase_service import PurchaseService

logger = logging.getLogger(__name__)


def _request_errors(exc: RequestValidationError) -> list[str]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append(f"Invalid {'.'.join(loc) or 'body'}")
    return errors


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatível com uvicorn/gunicorn."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    store = build_document_store(settings)
    directory_service = DirectoryService(store)
    purchase_service = PurchaseService(build_purchase_log(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.initialize()
        logger.info("Directory ready (backend=%s, env=%s)", settings.storage_backend, settings.app_env)
        yield

    app = FastAPI(title="User Directory API", lifespan=lifespan)
    app.state.settings = settings
    app.state.directory_service = directory_service
    app.state.purchase_service = purchase_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse({"success": False, "errors": _request_errors(exc)}, status_code=400)

    app.include_router(users_router.router)
    app.include_router(purchases_router.router)

    # Mounted last: "/" would otherwise shadow the API routes.
    if settings.static_dir and os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    elif settings.static_dir:
        logger.warning("STATIC_DIR %s does not exist, static files disabled", settings.static_dir)

    return app


app = create_app()
