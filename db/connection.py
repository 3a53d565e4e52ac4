"""
db/connection.py
----------------
Manages the PostgreSQL connection pool shared by the link repository.
Repository calls run in worker threads (see LinkService), so the pool is
psycopg2's ThreadedConnectionPool, which guards getconn/putconn with a lock.
Connections are borrowed and returned by the repository around each statement.
"""

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Open the connection pool. Calling it again is a no-op.

    Args:
        min_conn: Connections opened up front.
        max_conn: Upper bound on simultaneously borrowed connections.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info(f"Database pool ready ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Borrow a connection from the pool.

    Raises:
        RuntimeError: If init_pool() was never called.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Give a borrowed connection back to the pool."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close every pooled connection."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database pool closed.")
