"""FastAPI application factory"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.api.error import register_error_handlers
from src.api.middleware import LoggingMiddleware
from src.api.routes import services, users

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    app = FastAPI(
        title="Tarif Service",
        description="Subscription lifecycle: start, stop and change of tarifs",
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(LoggingMiddleware)

    register_error_handlers(app)

    app.include_router(services.router, prefix=config.API_PREFIX)
    app.include_router(users.router, prefix=config.API_PREFIX)

    logger.info(f"Tarif Service API created with prefix {config.API_PREFIX}")
    return app
