"""
Readers API Server
CRUD endpoints for library reader records
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from readers_api import __version__
from readers_api.config.settings import ALLOWED_ORIGINS
from readers_api.database.connection import init_database, close_database
from readers_api.api.routes import readers
from readers_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await init_database()
    logger.info("Readers API ready")
    yield
    await close_database()

# FastAPI app initialization
app = FastAPI(
    title="Readers API",
    description="Create, list, update and delete library readers",
    version=__version__,
    lifespan=lifespan
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(readers.router, prefix="/readers", tags=["Readers"])
