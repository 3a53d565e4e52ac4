"""
db/init_db.py
-------------
Creates the `links` table if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Links table: one row per saved bookmark; a URL can be saved only once
CREATE TABLE IF NOT EXISTS links (
    id              SERIAL PRIMARY KEY,
    name            TEXT NOT NULL,
    url             TEXT UNIQUE NOT NULL,
    user_id         BIGINT NOT NULL,
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Paged listing walks a single user's links in id order
CREATE INDEX IF NOT EXISTS idx_links_user ON links(user_id, id);
"""


def create_tables() -> None:
    """
    Execute the schema SQL.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
