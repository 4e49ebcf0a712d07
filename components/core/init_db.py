"""Database initialization and dependency injection."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import fastapi
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.database import DatabaseManager
# Import all models to ensure they're registered
import components.transaction.models
import components.activity.models
import components.user.models
import components.admin.models

logger = logging.getLogger(__name__)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    db_manager: DatabaseManager = request.app.state.db_manager
    async with db_manager.get_db() as session:
        yield session


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create tables on startup and release the engine on shutdown."""
    db_manager: DatabaseManager = app.state.db_manager
    await db_manager.create_all()
    logger.info("Database tables are ready")
    try:
        yield
    finally:
        await db_manager.dispose()


def init_db(app: fastapi.FastAPI, db_manager: Optional[DatabaseManager] = None) -> DatabaseManager:
    """Attach a database manager to the application."""
    app.state.db_manager = db_manager or DatabaseManager()
    return app.state.db_manager
