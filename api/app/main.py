from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
import logging
import uvicorn
from app.core.config import settings
from app.core.database import connect, init_db
from app.core.exceptions import (
    TranslatorException,
    ValidationError,
    StoreError,
)
from app.services.seed_service import seed_database

# Import API router
from app.api.v1 import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect, probe and seed before accepting traffic. Any failure aborts startup."""
    engine: Optional[Engine] = app.state.engine
    owns_engine = engine is None
    if owns_engine:
        engine = connect(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            echo=settings.db_echo,
        )
        app.state.engine = engine
    try:
        if app.state.create_tables:
            init_db(engine)
        seed_database(engine)
        yield
    finally:
        if owns_engine:
            engine.dispose()
            app.state.engine = None


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Client errors carry a specific message and are not logged as failures."""
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)},
    )


async def store_exception_handler(request: Request, exc: StoreError):
    """Store failures return the operation message only; the backend detail stays in the logs."""
    logger.error(
        f"Store error on {request.method} {request.url.path} ({exc.operation}): {exc.__cause__}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


async def translator_exception_handler(request: Request, exc: TranslatorException):
    """Handle remaining application exceptions."""
    logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An internal server error occurred"},
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions so a single request never takes the process down."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An internal server error occurred"},
    )


def create_app(engine: Optional[Engine] = None, create_tables: Optional[bool] = None) -> FastAPI:
    """
    Build the application.

    Args:
        engine: Engine to serve from. When None, the lifespan connects using
            settings.database_url and disposes the engine on shutdown.
        create_tables: Override settings.create_tables
    """
    app = FastAPI(title="Translation API", version="1.0.0", lifespan=lifespan)
    app.state.engine = engine
    app.state.create_tables = settings.create_tables if create_tables is None else create_tables

    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
    app.add_exception_handler(TranslatorException, translator_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {
            "message": "Translation API",
            "status": "running",
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_app()


def run() -> None:
    """Console entry point: configure logging and serve on the configured port."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    logger.info(f"Starting Translation API server on port {settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
