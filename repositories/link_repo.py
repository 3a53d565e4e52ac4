"""
repositories/link_repo.py
-------------------------
Data access layer for saved links.
All SQL queries related to the `links` table live here.
"""

from typing import Optional

import psycopg2
from psycopg2 import errors

from db.connection import get_connection, release_connection
from models.link import Link
from utils.errors import DuplicateResourceError, TransientStoreError
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, url, user_id, created_at"


class LinkRepository:
    """
    Repository for CRUD operations on the links table.

    Every method borrows one pooled connection for one statement.
    psycopg2 failures surface as DuplicateResourceError (unique url)
    or TransientStoreError (anything else).
    """

    # ── CREATE ────────────────────────────────────────────

    def create(self, name: str, url: str, user_id: int) -> Link:
        """
        Insert a new link.

        Returns:
            The stored Link with `id` and `created_at` populated.

        Raises:
            DuplicateResourceError: If the url is already saved by anyone.
            TransientStoreError: On any other database error.
        """
        sql = f"""
            INSERT INTO links (name, url, user_id)
            VALUES (%s, %s, %s)
            RETURNING {_COLUMNS};
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (name, url, user_id))
                row = cur.fetchone()
            conn.commit()
            link = self._row_to_link(row)
            logger.info(f"Saved link #{link.id} for user {user_id}")
            return link
        except errors.UniqueViolation as e:
            conn.rollback()
            logger.info(f"Duplicate url rejected for user {user_id}: {url}")
            raise DuplicateResourceError(url) from e
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to save link for user {user_id}: {e}")
            raise TransientStoreError(str(e)) from e
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, link_id: int) -> Optional[Link]:
        """Fetch a link by id, whoever owns it."""
        sql = f"SELECT {_COLUMNS} FROM links WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (link_id,))
                row = cur.fetchone()
                return self._row_to_link(row) if row else None
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to fetch link #{link_id}: {e}")
            raise TransientStoreError(str(e)) from e
        finally:
            release_connection(conn)

    def find_by_user(self, user_id: int, offset: int, limit: int) -> list[Link]:
        """
        Get one slice of a user's links, oldest first.

        Args:
            user_id: Telegram user ID.
            offset: Number of links to skip.
            limit: Maximum number of links to return.
        """
        sql = f"""
            SELECT {_COLUMNS} FROM links
            WHERE user_id = %s
            ORDER BY id ASC
            OFFSET %s LIMIT %s;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id, offset, limit))
                return [self._row_to_link(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to list links for user {user_id}: {e}")
            raise TransientStoreError(str(e)) from e
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, link_id: int) -> bool:
        """Delete a link by id. Ownership is checked by the caller."""
        sql = "DELETE FROM links WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (link_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted link #{link_id}")
            return deleted
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Failed to delete link #{link_id}: {e}")
            raise TransientStoreError(str(e)) from e
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_link(row: tuple) -> Link:
        """Convert a database row tuple to a Link domain object."""
        return Link(
            id=row[0],
            name=row[1],
            url=row[2],
            user_id=row[3],
            created_at=row[4],
        )
