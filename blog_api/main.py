"""FastAPI application factory.

Run with ``uvicorn blog_api.main:create_app --factory``.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from blog_api.api.exception_handlers import register_exception_handlers
from blog_api.api.routes import build_router
from blog_api.config import Settings
from blog_api.database import create_db_engine, create_session_factory, init_db
from blog_api.services.auth import TokenService
from blog_api.services.images import ImageService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def log_requests(request: Request, call_next):
    """Middleware to log request processing time and status."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {elapsed:.4f}s")
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and wire its collaborators from one settings object."""
    settings = settings or Settings()
    configure_logging(settings)

    engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        if settings.create_tables_on_startup:
            init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(
        title="Blog API",
        description="Multi-user blogging API with posts, comments, categories and image uploads",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.tokens = TokenService(settings)
    app.state.images = ImageService(settings)

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)
    app.include_router(build_router())

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    logger.info(f"Blog API configured for {settings.environment}")
    return app
