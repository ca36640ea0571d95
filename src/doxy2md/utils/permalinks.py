#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/utils/permalinks.py
"""Helpers deriving page paths and anchors from Doxygen identifiers.

Doxygen member ids are built from the compound id, the separator ``_1``
and a hash, e.g. ``classfoo_1a8f3c...``. Page anchors and compound ids
are recovered by cutting at that separator.

"""

from __future__ import annotations

import re

_ANCHOR_PREFIX = re.compile(r"^.*_1")
# Doxygen hashes may contain a ``g`` besides the hex digits.
_HEX_ANCHOR_SUFFIX = re.compile(r"_1[0-9a-fg]*$")
_TEXT_ANCHOR_SUFFIX = re.compile(r"_1_[0-9a-z]*$")
_ANONYMOUS_NAMESPACE = re.compile(r"anonymous_namespace\{")

_PATH_REPLACEMENTS = (
    ("*", "2a"),
    ("&", "26"),
    ("<", "3c"),
    (">", "3e"),
    ("(", "28"),
    (")", "29"),
)
_PATH_UNSAFE = re.compile(r"[^a-zA-Z0-9/-]")


def get_permalink_anchor(refid: str) -> str:
    """Return the anchor part of a member id.

    Examples
    --------
        >>> get_permalink_anchor("classfoo_1a8f3c")
        'a8f3c'

    """
    return _ANCHOR_PREFIX.sub("", refid)


def strip_permalink_hex_anchor(refid: str) -> str:
    """Return the compound id of a member id."""
    return _HEX_ANCHOR_SUFFIX.sub("", refid)


def strip_permalink_text_anchor(refid: str) -> str:
    """Return the page id of an xrefsect id such as ``todo_1_todo000001``."""
    return _TEXT_ANCHOR_SUFFIX.sub("", refid)


def sanitize_anonymous_namespace(text: str) -> str:
    """Shorten Doxygen's ``anonymous_namespace{file}`` spelling to ``anonymous{file}``."""
    return _ANONYMOUS_NAMESPACE.sub("anonymous{", text)


def sanitize_hierarchical_path(text: str) -> str:
    """Turn a slash separated name into a lower case, URL safe path.

    Operator characters are replaced by their hex codes so that overloads
    such as ``operator*`` and ``operator&`` do not collide.

    Examples
    --------
        >>> sanitize_hierarchical_path("Foo/Bar Baz")
        'foo/barbaz'

    """
    path = text.lower().replace(" ", "")
    for character, code in _PATH_REPLACEMENTS:
        path = path.replace(character, code)
    return _PATH_UNSAFE.sub("-", path)


__all__ = [
    "get_permalink_anchor",
    "sanitize_anonymous_namespace",
    "sanitize_hierarchical_path",
    "strip_permalink_hex_anchor",
    "strip_permalink_text_anchor",
]
