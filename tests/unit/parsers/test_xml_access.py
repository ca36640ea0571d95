#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_xml_access.py
"""Unit tests for the order-preserving XML element shape and its accessors.

Tests cover:
- Conversion of mixed content, attributes and self-closing elements
- Typed attribute values
- Text, number and boolean child accessors
- Error reporting for broken preconditions and malformed files

"""

import math
from pathlib import Path

import pytest

from doxy2md.exceptions import FileNotFoundError, MalformedFileError, XmlAccessError
from doxy2md.parsers.xml_access import ATTRIBUTES_KEY, TEXT_KEY, XmlAccess


@pytest.mark.unit
class TestElementShape:
    """Tests for the conversion into the element shape."""

    def test_mixed_content_keeps_order(self, xml: XmlAccess) -> None:
        """Text runs and child elements are interleaved as in the source."""
        root = xml.parse_string("<para>outer <bold>inner</bold> text</para>")[0]

        assert root == {
            "para": [
                {TEXT_KEY: "outer "},
                {"bold": [{TEXT_KEY: "inner"}]},
                {TEXT_KEY: " text"},
            ]
        }

    def test_self_closing_element_has_empty_children(self, xml: XmlAccess) -> None:
        """A self-closing element is an empty child list."""
        root = xml.parse_string("<para>a<linebreak/>b</para>")[0]
        children = xml.get_inner_elements(root, "para")

        assert children[1] == {"linebreak": []}
        assert xml.has_inner_element(children[1], "linebreak")

    def test_attributes_are_prefixed(self, xml: XmlAccess) -> None:
        """Attribute names get the ``@_`` prefix and live under ``:@``."""
        root = xml.parse_string('<ref refid="classfoo" kindref="compound">Foo</ref>')[0]

        assert root[ATTRIBUTES_KEY] == {"@_refid": "classfoo", "@_kindref": "compound"}
        assert xml.get_attribute_names(root) == ["@_refid", "@_kindref"]

    def test_namespaced_attributes_use_local_name(self, xml: XmlAccess) -> None:
        """``xml:lang`` and ``xsi:`` attributes are reachable by their local name."""
        root = xml.parse_string(
            '<doxygen xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
            'xsi:noNamespaceSchemaLocation="compound.xsd" version="1.9.8" xml:lang="en-US"/>'
        )[0]

        assert xml.get_attribute_as_string(root, "@_lang") == "en-US"
        assert xml.get_attribute_as_string(root, "@_noNamespaceSchemaLocation") == "compound.xsd"

    def test_element_name(self, xml: XmlAccess) -> None:
        """The element name is the tag; text nodes have none."""
        root = xml.parse_string('<sp value="3"/>')[0]

        assert xml.element_name(root) == "sp"
        assert xml.element_name({TEXT_KEY: "x"}) is None


@pytest.mark.unit
class TestAttributes:
    """Tests for typed attribute access."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("12", 12),
            ("-3", -3),
            ("1.5", 1.5),
            ("007", "007"),
            ("1e5", "1e5"),
            ("yes", "yes"),
        ],
    )
    def test_canonical_numbers_are_converted(self, xml: XmlAccess, value, expected) -> None:
        """Only canonical numeric spellings become numbers."""
        root = xml.parse_string(f'<codeline lineno="{value}"/>')[0]

        assert root[ATTRIBUTES_KEY]["@_lineno"] == expected

    def test_number_read_back_as_string(self, xml: XmlAccess) -> None:
        """Numeric attributes read back unchanged as strings."""
        root = xml.parse_string('<codeline lineno="42" refid="007"/>')[0]

        assert xml.get_attribute_as_string(root, "@_lineno") == "42"
        assert xml.get_attribute_as_string(root, "@_refid") == "007"
        assert xml.get_attribute_as_number(root, "@_lineno") == 42

    def test_number_accessor_rejects_text(self, xml: XmlAccess) -> None:
        """Reading a text attribute as a number fails."""
        root = xml.parse_string('<codeline refid="abc"/>')[0]

        with pytest.raises(XmlAccessError):
            xml.get_attribute_as_number(root, "@_refid")

    @pytest.mark.parametrize("value,expected", [("yes", True), ("YES", True), ("no", False), ("maybe", False)])
    def test_boolean_flags(self, xml: XmlAccess, value, expected) -> None:
        """``yes`` in any letter case is True, anything else False."""
        root = xml.parse_string(f'<memberdef static="{value}"/>')[0]

        assert xml.get_attribute_as_boolean(root, "@_static") is expected

    def test_boolean_accessor_rejects_numbers(self, xml: XmlAccess) -> None:
        """A numeric attribute is not a flag."""
        root = xml.parse_string('<memberdef static="1"/>')[0]

        with pytest.raises(XmlAccessError):
            xml.get_attribute_as_boolean(root, "@_static")

    def test_missing_attribute(self, xml: XmlAccess) -> None:
        """Reading an absent attribute fails."""
        root = xml.parse_string("<ref>Foo</ref>")[0]

        assert not xml.has_attributes(root)
        assert not xml.has_attribute(root, "@_refid")
        with pytest.raises(XmlAccessError):
            xml.get_attribute_as_string(root, "@_refid")


@pytest.mark.unit
class TestInnerText:
    """Tests for text-only child accessors."""

    def test_inner_element_text(self, xml: XmlAccess) -> None:
        """A text-only child returns its text; an empty one returns ``""``."""
        name = xml.parse_string("<name>Foo</name>")[0]
        empty = xml.parse_string("<name/>")[0]

        assert xml.is_inner_element_text(name, "name")
        assert xml.get_inner_element_text(name, "name") == "Foo"
        assert xml.get_inner_element_text(empty, "name") == ""

    def test_inner_element_text_with_children_fails(self, xml: XmlAccess) -> None:
        """More than one child is not a text-only element."""
        para = xml.parse_string("<para>a<bold>b</bold></para>")[0]

        assert not xml.is_inner_element_text(para, "para")
        with pytest.raises(XmlAccessError):
            xml.get_inner_element_text(para, "para")

    def test_inner_element_number(self, xml: XmlAccess) -> None:
        """The leading integer is returned; an empty child gives NaN."""
        value = xml.parse_string("<value>42abc</value>")[0]
        empty = xml.parse_string("<value/>")[0]

        assert xml.get_inner_element_number(value, "value") == 42
        assert math.isnan(xml.get_inner_element_number(empty, "value"))

    def test_inner_element_boolean(self, xml: XmlAccess) -> None:
        """``true`` in any case is True; empty is False."""
        assert xml.get_inner_element_boolean(xml.parse_string("<v> True </v>")[0], "v") is True
        assert xml.get_inner_element_boolean(xml.parse_string("<v>no</v>")[0], "v") is False
        assert xml.get_inner_element_boolean(xml.parse_string("<v/>")[0], "v") is False

    def test_missing_child_list(self, xml: XmlAccess) -> None:
        """Asking for a child list the element does not have fails."""
        root = xml.parse_string("<name>Foo</name>")[0]

        with pytest.raises(XmlAccessError):
            xml.get_inner_elements(root, "title")


@pytest.mark.unit
class TestLoading:
    """Tests for reading files."""

    def test_parse_file(self, xml: XmlAccess, tmp_path: Path) -> None:
        """A file on disk is parsed into the element shape."""
        path = tmp_path / "index.xml"
        path.write_text("<doxygenindex version='1.9.8'/>", encoding="utf-8")

        root = xml.parse_file(path)[0]

        assert xml.element_name(root) == "doxygenindex"

    def test_missing_file(self, xml: XmlAccess, tmp_path: Path) -> None:
        """A missing file raises the library FileNotFoundError."""
        with pytest.raises(FileNotFoundError) as exc_info:
            xml.parse_file(tmp_path / "missing.xml")

        assert exc_info.value.file_path.endswith("missing.xml")

    def test_malformed_file(self, xml: XmlAccess) -> None:
        """Broken XML raises MalformedFileError."""
        with pytest.raises(MalformedFileError):
            xml.parse_string("<para>unclosed")

    def test_entity_expansion_is_refused(self, xml: XmlAccess) -> None:
        """Documents declaring entities are rejected."""
        text = '<!DOCTYPE x [<!ENTITY a "aaaa">]><x>&a;</x>'

        with pytest.raises(MalformedFileError):
            xml.parse_string(text)
