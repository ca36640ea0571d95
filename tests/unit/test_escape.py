#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_escape.py
"""Unit tests for the output mode escaping helpers.

Tests cover:
- HTML escaping with braces
- Markdown escaping of emphasis, link and code characters
- Raw text mode
- Single pass escaping of already special characters

"""

import pytest

from doxy2md.utils.escape import escape_for_mode, escape_html, escape_markdown


@pytest.mark.unit
class TestEscapeHtml:
    """Tests for escape_html."""

    def test_html_characters(self) -> None:
        """Markup characters and quotes become entities."""
        assert escape_html("a < b && \"c\" 'd'") == "a &lt; b &amp;&amp; &quot;c&quot; &#x27;d&#x27;"

    def test_braces(self) -> None:
        """Braces are escaped for MDX."""
        assert escape_html("{x}") == "&#123;x&#125;"

    def test_markdown_characters_untouched(self) -> None:
        """HTML escaping leaves Markdown emphasis alone."""
        assert escape_html("a*b_c") == "a*b_c"

    def test_empty(self) -> None:
        """Empty text stays empty."""
        assert escape_html("") == ""


@pytest.mark.unit
class TestEscapeMarkdown:
    """Tests for escape_markdown."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("*", "&#42;"),
            ("_", "&#95;"),
            ("~", "&#126;"),
            ("[", "&#91;"),
            ("]", "&#93;"),
            ("`", "&#96;"),
        ],
    )
    def test_markdown_characters(self, text: str, expected: str) -> None:
        """Each Markdown special character becomes a numeric entity."""
        assert escape_markdown(text) == expected

    def test_escaped_once(self) -> None:
        """Ampersands produced by escaping are not escaped again."""
        assert escape_markdown("& < * `") == "&amp; &lt; &#42; &#96;"

    def test_operator_name(self) -> None:
        """C++ operator names survive as entities."""
        assert escape_markdown("operator<<") == "operator&lt;&lt;"


@pytest.mark.unit
class TestEscapeForMode:
    """Tests for escape_for_mode."""

    def test_modes(self) -> None:
        """Each mode picks its own escaping."""
        assert escape_for_mode("<*>", "markdown") == "&lt;&#42;&gt;"
        assert escape_for_mode("<*>", "html") == "&lt;*&gt;"
        assert escape_for_mode("<*>", "text") == "<*>"
