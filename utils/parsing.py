"""
utils/parsing.py
----------------
Helpers for turning raw chat text into values the link service understands.
"""

import re
from typing import Optional
from urllib.parse import urlparse

from utils.errors import ValidationError
from utils import texts

# Leading whitespace, optional sign, then digits. Anything after is ignored.
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

_URL_SCHEMES = ("http", "https", "ftp")


def parse_int_prefix(text: str) -> Optional[int]:
    """
    Read an integer from the start of `text`, ignoring trailing garbage.

    Examples:
        "42"      -> 42
        " 7abc"   -> 7
        "abc"     -> None

    Returns:
        The parsed integer, or None if the text does not start with digits.
    """
    match = _INT_PREFIX.match(text or "")
    if not match:
        return None
    return int(match.group(1))


def is_absolute_url(url: str) -> bool:
    """Check that `url` has a known scheme and a dotted host (or localhost)."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if parsed.scheme.lower() not in _URL_SCHEMES or not parsed.netloc:
        return False
    host = parsed.hostname or ""
    if host == "localhost":
        return True
    labels = host.split(".")
    return len(labels) >= 2 and all(labels)


def split_save_input(text: str) -> tuple[str, str]:
    """
    Split a Save reply into (name, url).

    Exactly two whitespace-separated tokens are expected.

    Raises:
        ValidationError: with the message to show the user.
    """
    parts = (text or "").split()
    if len(parts) != 2:
        raise ValidationError(texts.PROMPT_SAVE)

    name, url = parts
    if not is_absolute_url(url):
        raise ValidationError(texts.INVALID_URL)
    return name, url
