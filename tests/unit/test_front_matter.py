#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_front_matter.py
"""Unit tests for YAML front matter generation.

Tests cover:
- Key order and dropping of empty values
- Lists and non-ASCII text
- Round trip through a YAML loader

"""

import pytest
import yaml

from doxy2md.utils.front_matter import generate_front_matter


def load(front_matter: str) -> dict:
    """Parse the YAML between the ``---`` delimiters."""
    assert front_matter.startswith("---\n")
    body = front_matter[len("---\n") :].split("---\n", 1)[0]
    return yaml.safe_load(body)


@pytest.mark.unit
class TestGenerateFrontMatter:
    """Tests for generate_front_matter."""

    def test_delimiters(self) -> None:
        """The block is delimited and followed by a blank line."""
        result = generate_front_matter({"title": "Foo"})

        assert result == "---\ntitle: Foo\n---\n\n"

    def test_key_order(self) -> None:
        """Known keys come out in a fixed order."""
        result = generate_front_matter(
            {"keywords": ["doxygen"], "slug": "/api/classes/foo", "title": "Foo", "description": "A foo."}
        )

        keys = [line.split(":")[0] for line in result.splitlines() if line and not line.startswith(("-", " "))]
        assert keys == ["title", "slug", "description", "keywords"]

    def test_empty_and_unknown_keys_dropped(self) -> None:
        """Empty values and unknown keys are left out."""
        result = generate_front_matter({"title": "Foo", "description": "", "author": "me"})

        assert load(result) == {"title": "Foo"}

    def test_special_characters_round_trip(self) -> None:
        """Titles with YAML special characters are quoted as needed."""
        metadata = {
            "title": "The `ns::Foo<T>` Class Reference",
            "slug": "/api/classes/ns/foo",
            "keywords": ["doxygen", "class", "reference", "ns::Foo<T>"],
        }

        assert load(generate_front_matter(metadata)) == metadata

    def test_unicode_kept(self) -> None:
        """Non-ASCII text is written as is."""
        assert "Café" in generate_front_matter({"title": "Café"})
