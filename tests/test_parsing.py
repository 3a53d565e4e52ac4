import pytest

from utils import texts
from utils.errors import ValidationError
from utils.parsing import is_absolute_url, parse_int_prefix, split_save_input


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  7", 7),
        ("12abc", 12),
        ("3 4", 3),
        ("-5", -5),
        ("abc", None),
        ("", None),
        ("x12", None),
    ],
)
def test_parse_int_prefix(text, expected):
    assert parse_int_prefix(text) == expected


@pytest.mark.parametrize(
    "url",
    ["https://example.com", "http://example.com/path?q=1", "ftp://files.example.org", "http://localhost:8000"],
)
def test_absolute_urls_accepted(url):
    assert is_absolute_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "example.com", "/relative/path", "javascript:alert(1)", "https://", "mailto:me@example.com",
        "https://nodot", "https://.", "https://a..b",
    ],
)
def test_non_absolute_urls_rejected(url):
    assert not is_absolute_url(url)


def test_split_save_input_returns_name_and_url():
    assert split_save_input("docs   https://docs.python.org") == ("docs", "https://docs.python.org")


@pytest.mark.parametrize("text", ["onlyoneword", "", "a b c"])
def test_split_save_input_requires_two_tokens(text):
    with pytest.raises(ValidationError) as exc:
        split_save_input(text)
    assert str(exc.value) == texts.PROMPT_SAVE


def test_split_save_input_rejects_bad_url():
    with pytest.raises(ValidationError) as exc:
        split_save_input("name not-a-url")
    assert str(exc.value) == texts.INVALID_URL
