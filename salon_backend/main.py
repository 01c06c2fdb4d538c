# salon_backend/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from salon_backend.config.settings import (
    API_HOST, API_PORT, CORS_ORIGINS, FIREBASE_API_KEY, FIREBASE_AUTH_URL, FIREBASE_TIMEOUT,
    IDENTITY_PROVIDER, LOG_LEVEL, SECRET_KEY, TOKEN_MAX_AGE, configure_logging,
)
from salon_backend.database.session import SessionLocal, engine, init_db
from salon_backend.gateway.error_handlers import register_error_handlers
from salon_backend.gateway.gateway_router import gateway_router
from salon_backend.services.identity_provider import IdentityProvider, build_identity_provider

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def _database_status() -> str:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return "connected"
    except Exception as e:
        return f"error: {e.__class__.__name__}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Salon API is starting")
    init_db()
    status = _database_status()
    if status == "connected":
        logger.info("Database connected")
    else:
        logger.error(f"Database connection failed: {status}")

    provider = app.state.identity_provider
    if provider is None:
        logger.warning("No identity provider configured; auth endpoints will answer 500")
    else:
        logger.info(f"Identity provider: {provider.name}")

    yield
    logger.info("Shutting down")


def create_app(identity_provider: Optional[IdentityProvider] = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Salon Management API",
        description="Employees, services, availability, bookings and expenses of a salon",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.state.identity_provider = identity_provider or build_identity_provider(
        IDENTITY_PROVIDER,
        SessionLocal,
        secret_key=SECRET_KEY,
        max_age=TOKEN_MAX_AGE,
        firebase_api_key=FIREBASE_API_KEY,
        firebase_auth_url=FIREBASE_AUTH_URL,
        timeout=FIREBASE_TIMEOUT,
    )

    @app.get("/health")
    def health(request: Request):
        provider = request.app.state.identity_provider
        database = _database_status()
        return {
            "status": "healthy" if database == "connected" and provider else "degraded",
            "service": "salon-api",
            "version": VERSION,
            "database": database,
            "identityProvider": provider.name if provider else "not configured",
        }

    @app.get("/")
    def root():
        return {
            "message": "Salon Management API",
            "version": VERSION,
            "apiBase": "/api",
            "docs": "/docs",
            "endpoints": {"health": "/health"},
        }

    app.include_router(gateway_router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "salon_backend.main:app",
        host=API_HOST,
        port=API_PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
