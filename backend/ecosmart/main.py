"""EcoSmart API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EcoSmartError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and receipt analyzer initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Receipt analyzer selected once per process and kept on app.state
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecosmart.api.error_handlers import register_error_handlers
from ecosmart.api.routes import carbon_footprint, health, purchases, receipts
from ecosmart.config import get_settings
from ecosmart.infrastructure.database import init_db
from ecosmart.infrastructure.observability import setup_logging
from ecosmart.services.receipt_analyzers import build_receipt_analyzer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.receipt_analyzer = build_receipt_analyzer(settings)
    logger.info("EcoSmart API started")
    yield
    await manager.dispose()
    logger.info("EcoSmart API shutting down")


app = FastAPI(
    title="EcoSmart API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(purchases.router)
app.include_router(carbon_footprint.router)
app.include_router(receipts.router)
