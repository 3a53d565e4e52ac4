from datetime import datetime, timedelta

import pytest

from models.link import Link
from services.dispatcher import SessionDispatcher
from services.link_service import LinkService
from services.session_store import SessionStore
from utils.errors import DuplicateResourceError, TransientStoreError


class FakeLinkRepository:
    """In-memory stand-in for LinkRepository with the same method signatures."""

    def __init__(self):
        self.links: dict[int, Link] = {}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, 12, 0)

    def _maybe_fail(self, name):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def create(self, name, url, user_id):
        self._maybe_fail("create")
        if any(link.url == url for link in self.links.values()):
            raise DuplicateResourceError(url)
        link = Link(name=name, url=url, user_id=user_id, id=self._next_id, created_at=self._clock)
        self.links[link.id] = link
        self._next_id += 1
        self._clock += timedelta(minutes=1)
        return link

    def find_by_id(self, link_id):
        self._maybe_fail("find_by_id")
        return self.links.get(link_id)

    def find_by_user(self, user_id, offset, limit):
        self._maybe_fail("find_by_user")
        owned = [link for link in sorted(self.links.values(), key=lambda l: l.id) if link.user_id == user_id]
        return owned[offset:offset + limit]

    def delete_by_id(self, link_id):
        self._maybe_fail("delete_by_id")
        return self.links.pop(link_id, None) is not None


@pytest.fixture
def repo():
    return FakeLinkRepository()


@pytest.fixture
def service(repo):
    return LinkService(repo)


@pytest.fixture
def sessions():
    return SessionStore()


@pytest.fixture
def dispatcher(service, sessions):
    return SessionDispatcher(service, sessions)


@pytest.fixture
def store_error():
    return TransientStoreError("connection lost")
