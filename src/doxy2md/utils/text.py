#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/utils/text.py
"""Small string helpers shared by the renderers."""

from __future__ import annotations

import re

_LEADING_NEWLINES = re.compile(r"^\n+")
_TRAILING_NEWLINES = re.compile(r"\n+$")


def strip_leading_newlines(text: str) -> str:
    """Remove newlines at the start of ``text``."""
    return _LEADING_NEWLINES.sub("", text)


def strip_trailing_newlines(text: str) -> str:
    """Remove newlines at the end of ``text``."""
    return _TRAILING_NEWLINES.sub("", text)


def strip_leading_and_trailing_newlines(text: str) -> str:
    """Remove newlines at both ends of ``text``, keeping other whitespace."""
    return strip_trailing_newlines(strip_leading_newlines(text))


def join_with_last(items: list[str], delimiter: str, last_delimiter: str) -> str:
    """Join items, using a different delimiter before the last one.

    Examples
    --------
        >>> join_with_last(["a", "b", "c"], ", ", " and ")
        'a, b and c'

    """
    if len(items) <= 1:
        return "".join(items)
    return delimiter.join(items[:-1]) + last_delimiter + items[-1]


__all__ = [
    "join_with_last",
    "strip_leading_and_trailing_newlines",
    "strip_leading_newlines",
    "strip_trailing_newlines",
]
