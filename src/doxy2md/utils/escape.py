#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/utils/escape.py
"""Text escaping for the output modes.

Escaping is applied once, to literal text taken from the XML, and never to
the output of a renderer. MDX reads braces as JSX expressions, so they are
escaped in both the HTML and the Markdown sets.

"""

from __future__ import annotations

import html

_BRACES = str.maketrans({"{": "&#123;", "}": "&#125;"})

_MARKDOWN_EXTRA = str.maketrans(
    {
        "*": "&#42;",
        "_": "&#95;",
        "~": "&#126;",
        "[": "&#91;",
        "]": "&#93;",
        "`": "&#96;",
    }
)


def escape_html(text: str) -> str:
    """Escape text for HTML embedded in MDX.

    Examples
    --------
        >>> escape_html("a < b && {c}")
        'a &lt; b &amp;&amp; &#123;c&#125;'

    Notes
    -----
    This function escapes the following characters:
    - ``& < > " '`` through :func:`html.escape`
    - ``{ }`` as numeric entities

    """
    if not text:
        return text
    return html.escape(text, quote=True).translate(_BRACES)


def escape_markdown(text: str) -> str:
    """Escape text for Markdown/MDX prose.

    Besides the HTML set, the characters that start Markdown emphasis,
    strikethrough, links and code spans are turned into numeric entities.

    Examples
    --------
        >>> escape_markdown("a*b_c")
        'a&#42;b&#95;c'

    """
    if not text:
        return text
    return escape_html(text).translate(_MARKDOWN_EXTRA)


def escape_for_mode(text: str, mode: str) -> str:
    """Escape literal text for the given output mode; ``text`` mode is raw."""
    if mode == "markdown":
        return escape_markdown(text)
    if mode == "html":
        return escape_html(text)
    return text


__all__ = ["escape_for_mode", "escape_html", "escape_markdown"]
