"""Small predicates and measurements used when transforming words."""

from __future__ import annotations

import re
import unicodedata

_ILLEGAL_URI_CHARS = re.compile(r"[^a-zA-Z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]")
_INCOMPLETE_HEX_1 = re.compile(r"%[^0-9a-fA-F]")
_INCOMPLETE_HEX_2 = re.compile(r"%[0-9a-fA-F](?:[^0-9a-fA-F]|\Z)")
_URI_PARTS = re.compile(r"(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?")
_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+\-.]*")


def is_at(value: str) -> bool:
    """Return True if the value is a mention or handle starting with '@'."""
    return value.startswith("@")


def get_capital_percentage(text: str) -> float:
    """Return the fraction of letters in ``text`` that are upper case."""
    categories = [unicodedata.category(ch) for ch in text]
    letters = [cat for cat in categories if cat.startswith("L")]
    if not letters:
        return 0.0
    return sum(1 for cat in letters if cat == "Lu") / len(letters)


def is_uri(value: str) -> bool:
    """Return True if ``value`` is a syntactically valid RFC 3986 URI."""
    if not value:
        return False
    if _ILLEGAL_URI_CHARS.search(value):
        return False
    if _INCOMPLETE_HEX_1.search(value) or _INCOMPLETE_HEX_2.search(value):
        return False

    match = _URI_PARTS.match(value)
    if match is None:
        return False

    scheme = match.group(1) or ""
    authority = match.group(2) or ""
    path = match.group(3) or ""

    if not scheme:
        return False
    if authority:
        if path and not path.startswith("/"):
            return False
    elif path.startswith("//"):
        return False

    return _SCHEME.fullmatch(scheme) is not None


def is_break(word: str) -> bool:
    """Return True if the word consists only of whitespace."""
    return not word.strip()