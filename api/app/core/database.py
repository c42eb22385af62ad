"""
Store client: engine/pool creation, startup probe and error-translating query helpers.

The engine is created once by the entry point and handed to every component
explicitly. Request handlers reach it through ``app.state.engine`` via the
``get_session`` dependency, so tests can substitute any engine.
"""
from typing import Any, Generator, Optional, Sequence
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine
from app.core.exceptions import StoreConnectionError, StoreError
import logging

logger = logging.getLogger(__name__)


def _redact(database_url: str) -> str:
    """Return the URL without credentials, for logging."""
    if "@" not in database_url:
        return database_url
    scheme, _, rest = database_url.partition("://")
    return f"{scheme}://***@{rest.split('@', 1)[1]}"


def create_db_engine(
    database_url: str,
    pool_size: int = 5,
    max_overflow: int = 10,
    echo: bool = False,
) -> Engine:
    """Create the pooled engine. No connection is opened yet."""
    try:
        return create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before using
            pool_size=pool_size,
            max_overflow=max_overflow,
        )
    except (SQLAlchemyError, ImportError) as e:
        raise StoreConnectionError(f"Invalid database configuration for {_redact(database_url)}: {e}") from e


def probe(engine: Engine) -> None:
    """Issue a trivial round-trip query so startup fails fast on a dead store."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1")).scalar_one()
    except SQLAlchemyError as e:
        raise StoreConnectionError(f"Database is unreachable: {e}") from e


def connect(
    database_url: str,
    pool_size: int = 5,
    max_overflow: int = 10,
    echo: bool = False,
) -> Engine:
    """Create the engine and probe it. Raises StoreConnectionError."""
    logger.info(f"Connecting to database: {_redact(database_url)}")
    engine = create_db_engine(database_url, pool_size=pool_size, max_overflow=max_overflow, echo=echo)
    try:
        probe(engine)
    except StoreConnectionError:
        engine.dispose()
        raise
    logger.info("Database connection established successfully")
    return engine


def init_db(engine: Engine) -> None:
    """Create the reference data tables if they do not exist yet."""
    # Register the table models on SQLModel.metadata
    from app.models import Language, VocabularyWord, LearningTip  # noqa: F401

    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        raise StoreError("Failed to create tables", operation="create_tables") from e


def get_engine(request: Request) -> Engine:
    """Dependency returning the engine owned by the running application."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise RuntimeError("Database engine is not initialized. Start the app through its lifespan.")
    return engine


def get_session(request: Request) -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(get_engine(request)) as session:
        yield session


def fetch_all(session: Session, statement: Any, operation: str) -> Sequence[Any]:
    """
    Run a SELECT and return all rows.

    Args:
        session: Open session
        statement: SQLModel/SQLAlchemy select statement
        operation: Human-readable description, e.g. "fetch languages"

    Raises:
        StoreError: If the backend rejects the query
    """
    try:
        return session.exec(statement).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to {operation}: {e}")
        raise StoreError(f"Failed to {operation}", operation=operation) from e


def fetch_scalar(connection: Connection, statement: Any, operation: str) -> Optional[Any]:
    """Run a statement returning a single value, e.g. a COUNT."""
    try:
        return connection.execute(statement).scalar()
    except SQLAlchemyError as e:
        logger.error(f"Failed to {operation}: {e}")
        raise StoreError(f"Failed to {operation}", operation=operation) from e


def execute(connection: Connection, statement: Any, operation: str) -> None:
    """Run an INSERT/UPDATE/DELETE statement. No result returned."""
    try:
        connection.execute(statement)
    except SQLAlchemyError as e:
        logger.error(f"Failed to {operation}: {e}")
        raise StoreError(f"Failed to {operation}", operation=operation) from e
