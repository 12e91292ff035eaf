"""
Student Management API - Main Application

FastAPI backend with:
- PostgreSQL for student records
- One pooled store client shared by all requests

Run: uvicorn student_api.main:app --reload
 or: python -m student_api.main
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from student_api import __version__
from student_api.api.routes import api_router
from student_api.core.config import Settings, get_settings
from student_api.core.errors import register_error_handlers
from student_api.core.logging_config import setup_logging
from student_api.db.postgres import create_store_engine
from student_api.db.student_store import StudentStore

logger = logging.getLogger(__name__)

BANNER = "Student Management API"


def create_app(settings: Optional[Settings] = None, store: Optional[StudentStore] = None) -> FastAPI:
    """
    Build the application.

    When no store is given, one is created from settings on startup
    and disposed on shutdown.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        if app.state.store is None:
            engine = create_store_engine(settings)
            app.state.store = StudentStore(engine)
            logger.info("Store engine created for %s", engine.url.render_as_string(hide_password=True))
        if settings.create_tables:
            try:
                app.state.store.create_tables()
            except SQLAlchemyError as e:
                logger.warning("Table creation failed: %s", e)

        yield

        # Shutdown
        app.state.store.dispose()

    app = FastAPI(
        title=BANNER,
        description="CRUD over student records stored in PostgreSQL.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse, tags=["Root"])
    def root():
        return BANNER

    @app.get("/health", tags=["Health"])
    def health_check():
        """Report whether the database is reachable."""
        return {
            "status": "healthy",
            "database": "connected" if app.state.store.ping() else "disconnected"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Server is running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
