"""
utils/errors.py
---------------
Exception taxonomy shared by the repository and service layers.
Repositories raise these; services translate them into user-facing replies.
"""


class LinkBotError(Exception):
    """Base class for every error the bot knows how to report."""


class ValidationError(LinkBotError):
    """User input has the wrong format or an invalid URL. No store call was made."""


class DuplicateResourceError(LinkBotError):
    """The store rejected a record because a unique field already exists."""


class NotFoundError(LinkBotError):
    """No record with the requested id."""


class AuthorizationError(LinkBotError):
    """The record exists but belongs to another user."""


class TransientStoreError(LinkBotError):
    """Any other store failure (connection lost, bad statement, ...)."""
