"""
services/link_service.py
------------------------
Business logic for the four link actions: save, list, delete, get.
Orchestrates between input parsing and the LinkRepository.
"""

import asyncio
from datetime import datetime
from typing import Optional

from config import LIST_PAGE_SIZE
from models.events import Keyboard, Reply
from models.link import Link
from repositories.link_repo import LinkRepository
from utils import texts
from utils.errors import (
    AuthorizationError,
    DuplicateResourceError,
    NotFoundError,
    ValidationError,
)
from utils.logger import get_logger
from utils.parsing import parse_int_prefix, split_save_input

logger = get_logger(__name__)


class LinkService:
    """
    Handles all business logic related to saved links.

    Every action returns exactly one Reply and never raises: validation
    problems, missing or foreign links and store failures all become
    user-facing messages. Repository calls run in a worker thread so the
    bot's event loop keeps serving other users meanwhile.
    """

    def __init__(self, repo: Optional[LinkRepository] = None, page_size: int = LIST_PAGE_SIZE):
        self.repo = repo or LinkRepository()
        self.page_size = page_size

    async def _call(self, method, *args):
        return await asyncio.to_thread(method, *args)

    # ── SAVE ──────────────────────────────────────────────

    async def save(self, user_id: int, text: str) -> Reply:
        """
        Save a link from a "name url" reply.

        Args:
            user_id: Telegram user ID of the new owner.
            text: Raw message, e.g. "docs https://docs.python.org".
        """
        try:
            name, url = split_save_input(text)
        except ValidationError as e:
            return Reply(str(e))

        try:
            link = await self._call(self.repo.create, name, url, user_id)
        except DuplicateResourceError:
            return Reply(texts.SAVE_DUPLICATE)
        except Exception as e:
            logger.error(f"Save failed for user {user_id}: {e}")
            return Reply(texts.SAVE_FAILED)

        return Reply(texts.SAVE_OK.format(id=link.id))

    # ── LIST ──────────────────────────────────────────────

    async def list_page(self, user_id: int, page: int) -> Reply:
        """Render one page of the user's links with prev/next controls."""
        page = max(1, page)
        offset = (page - 1) * self.page_size
        try:
            links = await self._call(self.repo.find_by_user, user_id, offset, self.page_size)
        except Exception as e:
            logger.error(f"List failed for user {user_id}, page {page}: {e}")
            return Reply(texts.LIST_FAILED)

        if not links:
            return Reply(texts.LIST_EMPTY)

        body = texts.LIST_HEADER.format(page=page)
        body += "".join(self._format_link(link) for link in links)
        return Reply(body, Keyboard.PAGING)

    @staticmethod
    def _format_link(link: Link) -> str:
        created = link.created_at
        if isinstance(created, datetime):
            created = created.strftime("%Y-%m-%d %H:%M")
        return texts.LIST_ITEM.format(
            id=link.id, name=link.name, url=link.url, created_at=created,
        )

    # ── DELETE ────────────────────────────────────────────

    async def delete(self, user_id: int, text: str) -> Reply:
        """Delete one of the user's own links by id."""
        try:
            link_id = self._require_id(text)
            link = await self._call(self.repo.find_by_id, link_id)
            if link is None:
                raise NotFoundError(link_id)
            if not link.is_owned_by(user_id):
                raise AuthorizationError(link_id)
            await self._call(self.repo.delete_by_id, link_id)
        except NotFoundError:
            return Reply(texts.NOT_FOUND)
        except AuthorizationError:
            logger.warning(f"User {user_id} tried to delete link #{link.id} owned by {link.user_id}")
            return Reply(texts.DELETE_FORBIDDEN)
        except Exception as e:
            logger.error(f"Delete failed for user {user_id}: {e}")
            return Reply(texts.DELETE_FAILED)

        return Reply(texts.DELETE_OK)

    # ── GET ───────────────────────────────────────────────

    async def get(self, text: str) -> Reply:
        """Return the url of any link by id, whoever owns it."""
        try:
            link_id = self._require_id(text)
            link = await self._call(self.repo.find_by_id, link_id)
            if link is None:
                raise NotFoundError(link_id)
        except NotFoundError:
            return Reply(texts.NOT_FOUND)
        except Exception as e:
            logger.error(f"Get failed for {text!r}: {e}")
            return Reply(texts.GET_FAILED)

        return Reply(texts.GET_OK.format(url=link.url))

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _require_id(text: str) -> int:
        """Leading-digits id; text without one cannot match any link."""
        link_id = parse_int_prefix(text)
        if link_id is None:
            raise NotFoundError(text)
        return link_id
