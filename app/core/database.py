import logging
import re
from typing import Any, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Result
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,  # Connection pool size
    max_overflow=20  # Allow up to 20 connections beyond pool_size
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

# Positional placeholders ($1, $2, ...) as emitted by app.core.sql
_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def bind_positional(sql: str, values: Sequence[Any]) -> tuple[str, dict]:
    """
    Rewrite `$N` placeholders into named binds `:pN` understood by `text()`.

    Returns the rewritten statement and the bind parameters, where `pN`
    holds `values[N - 1]`.

    Raises:
        ValueError: If a placeholder has no matching value
    """
    def _replace(match: re.Match) -> str:
        position = int(match.group(1))
        if not 1 <= position <= len(values):
            raise ValueError(f"Placeholder ${position} has no bound value ({len(values)} given)")
        return f":p{position}"

    statement = _PLACEHOLDER_RE.sub(_replace, sql)
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return statement, params


def execute(db: Session, sql: str, values: Sequence[Any] = ()) -> Result:
    """
    Execute a statement written with positional `$N` placeholders.

    Args:
        db: Database session
        sql: SQL text using `$1, $2, ...` placeholders
        values: Values in placeholder order

    Returns:
        SQLAlchemy Result (use `.mappings()` to read rows as dicts)
    """
    statement, params = bind_positional(sql, values)
    logger.debug("Executing SQL: %s | params=%s", " ".join(statement.split()), params)
    return db.execute(text(statement), params)


def init_db():
    """
    Initialize database.

    We rely on Alembic for table creation, so this only makes sure the
    models are imported/registered on Base.metadata.

    Use "alembic upgrade head" to create/update database schema.
    """
    from app.models import company, job, user  # noqa: F401  Import models to register them
