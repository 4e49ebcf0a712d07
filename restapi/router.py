"""Application configuration and router setup."""

from typing import Optional

import fastapi
from fastapi.middleware import cors
from fastapi.openapi.utils import get_openapi

from components.core import init_db
from components.core.config import Settings, get_settings
from components.core.database import DatabaseManager
from components.core.exceptions import register_exception_handlers
from components.core.log_config import configure_logging
from restapi.endpoints import health_check, auth, user, admin, transaction, activity, report
from restapi.middleware import RequestLogMiddleware

TITLE = "Clinic Finance API"
DESCRIPTION = "Transactions, activities, user approval and financial reporting"
VERSION = "1.0.0"


def create_app(
    db_manager: Optional[DatabaseManager] = None,
    settings: Optional[Settings] = None,
) -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = fastapi.FastAPI(
        title=TITLE,
        description=DESCRIPTION,
        version=VERSION,
        debug=settings.DEBUG,
        lifespan=init_db.lifespan,
    )

    # Initialize database
    init_db.init_db(app, db_manager)

    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health_check.router)
    app.include_router(auth.router)
    app.include_router(user.router)
    app.include_router(admin.router)
    app.include_router(transaction.router)
    app.include_router(activity.router)
    app.include_router(report.router)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=TITLE,
            version=VERSION,
            description=DESCRIPTION,
            routes=app.routes,
        )
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app
