"""
Allergen Label API
FastAPI service that parses recipe spreadsheets, relays allergen lookups and
runs the review/selection workflow for the uploaded batch.
"""

from contextlib import asynccontextmanager
from typing import Callable
import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from services.allergen_client import AllergenClient, create_http_client
from services.review_workflow import ReviewWorkflow
from . import allergens, session, upload

logger = logging.getLogger(__name__)


def create_app(client_factory: Callable[[], httpx.AsyncClient] = create_http_client) -> FastAPI:
    """
    Build the application.

    ``client_factory`` supplies the HTTP client used for every allergen
    lookup; it is opened at startup and closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        http_client = client_factory()
        app.state.allergen_client = AllergenClient(http_client)
        app.state.workflow = ReviewWorkflow(
            app.state.allergen_client,
            clear_cache_on_upload=settings.clear_cache_on_upload,
        )
        logger.info(f"Allergen lookups go to {app.state.allergen_client.api_url}")
        try:
            yield
        finally:
            await http_client.aclose()

    app = FastAPI(
        title="Allergen Label API",
        description="Upload recipe spreadsheets, review them, then check each recipe's ingredients for allergens.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=settings.cors_max_age,
    )

    app.include_router(upload.router, tags=["upload"])
    app.include_router(allergens.router, prefix="/api", tags=["allergens"])
    app.include_router(session.router, prefix="/api/session", tags=["session"])

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "service": "Allergen Label API",
            "status": "healthy",
            "version": "1.0.0",
            "endpoints": [
                "POST /upload",
                "POST /api/allergens",
                "GET  /api/session",
                "POST /api/session/approve",
                "POST /api/session/select/{index}",
                "GET  /api/session/report"
            ]
        }

    return app


app = create_app()
