"""
Invoice Record Store API Server
CRUD over invoice records for the grid and report viewers
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, get_settings
from database.connection import init_database, close_database
from api.routes import health, invoices
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application for the given settings"""
    settings = settings or get_settings()

    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        await init_database(settings)
        yield
        await close_database()

    app = FastAPI(
        title="Invoice Record Store",
        description="Backend API for invoice records shown in the grid and report viewers",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, prefix="/health", tags=["Health"])
    app.include_router(invoices.router, prefix="/invoices", tags=["Invoices"])

    return app

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
