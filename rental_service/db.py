# rental_service/db.py
"""Database engine and session utilities.

One SQLAlchemy engine per process; `get_db` hands every request its own
session and closes it when the request is done.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import get_settings


def engine_options(url: str, pool_size: int = 5, max_overflow: int = 10, statement_timeout_ms: int = 0) -> dict:
    """Keyword arguments for create_engine; pool sizing and timeouts apply to PostgreSQL only."""
    kwargs = {"pool_pre_ping": True}
    if url.startswith("postgresql"):
        # tuned pool settings for cloud DB
        kwargs["pool_size"] = pool_size
        kwargs["max_overflow"] = max_overflow
        if statement_timeout_ms > 0:
            # server side bound for every statement issued on these connections
            kwargs["connect_args"] = {"options": f"-c statement_timeout={statement_timeout_ms}"}
    return kwargs


def build_engine(url: str, pool_size: int = 5, max_overflow: int = 10, statement_timeout_ms: int = 0) -> Engine:
    return create_engine(url, **engine_options(url, pool_size, max_overflow, statement_timeout_ms))


settings = get_settings()

engine = build_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    statement_timeout_ms=settings.db_statement_timeout_ms,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
