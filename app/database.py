"""
Marketplace database access.

The booking pages own these tables; this service only reads provider and
profile emails from them, so sessions never flush or commit.
"""

import logging
import os
import time

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import DATABASE_URL

logger = logging.getLogger(__name__)

# Pool settings for server databases
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "300"))

LOG_SLOW_LOOKUPS = os.getenv("DB_LOG_SLOW_QUERIES", "true").lower() == "true"
SLOW_LOOKUP_SECONDS = float(os.getenv("DB_SLOW_QUERY_THRESHOLD", "1.0"))


def build_engine(url: str) -> Engine:
    """Create an engine; pool tuning only applies to server databases"""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_timeout=DB_POOL_TIMEOUT,
        pool_recycle=DB_POOL_RECYCLE,
    )


def log_slow_lookups(bind: Engine, threshold: float = SLOW_LOOKUP_SECONDS) -> None:
    """Warn about recipient lookups slower than ``threshold`` seconds"""

    @event.listens_for(bind, "before_cursor_execute")
    def _start_timer(conn, _cursor, _statement, _parameters, _context, _executemany):
        conn.info.setdefault("lookup_started", []).append(time.perf_counter())

    @event.listens_for(bind, "after_cursor_execute")
    def _check_timer(conn, _cursor, statement, _parameters, _context, _executemany):
        elapsed = time.perf_counter() - conn.info["lookup_started"].pop()
        if elapsed > threshold:
            logger.warning(f"🐌 Slow lookup ({elapsed:.2f}s): {statement[:200]}...")


engine = build_engine(DATABASE_URL)
logger.info(f"✅ Database engine ready ({engine.dialect.name})")

if LOG_SLOW_LOOKUPS:
    log_slow_lookups(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
