#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_member_sections.py
"""Unit tests for member section reclassification.

Tests cover:
- Operator name detection
- Section kind adjustment for functions, variables and typedefs
- Section headers and ordering
- Regrouping the members of a compound

"""

import logging

import pytest

from doxy2md.ast.compounds import CompoundDef, Location, MemberDef, MemberRef, SectionDef
from doxy2md.ast.sections import (
    adjust_section_kind,
    compute_adjusted_kind,
    is_operator,
    reclassify_sections,
    section_header_name,
    section_order,
)


def member_def(name: str, member_kind: str = "function") -> MemberDef:
    """Create a minimal member definition."""
    return MemberDef(
        member_kind=member_kind, id=f"classfoo_1{name}", prot="public", name=name, location=Location(file="foo.h")
    )


@pytest.mark.unit
class TestIsOperator:
    """Tests for is_operator."""

    @pytest.mark.parametrize("name", ["operator==", "operator()", "operator[]", "operator new", "operator<<"])
    def test_operators(self, name: str) -> None:
        """Overloaded operator spellings are detected."""
        assert is_operator(name)

    @pytest.mark.parametrize("name", ["operator", "operatorName", "op=="])
    def test_not_operators(self, name: str) -> None:
        """Identifiers starting with ``operator`` are not operators."""
        assert not is_operator(name)


@pytest.mark.unit
class TestAdjustSectionKind:
    """Tests for compute_adjusted_kind and adjust_section_kind."""

    def test_replace_last_word(self) -> None:
        """The trailing word of a hyphenated kind is replaced."""
        assert compute_adjusted_kind("public-static-func", "operator") == "public-static-operator"

    def test_single_word_and_user_defined(self) -> None:
        """Single word and user defined kinds use the member suffix."""
        assert compute_adjusted_kind("func", "func", "function") == "function"
        assert compute_adjusted_kind("user-defined", "attrib", "variable") == "variable"

    def test_operator(self) -> None:
        """Operators get their own section."""
        assert adjust_section_kind("function", "operator==", "public-func") == "public-operator"

    def test_constructor_and_destructor(self) -> None:
        """Constructors and destructors are found with the class name."""
        assert adjust_section_kind("function", "Foo", "public-func", "Foo") == "public-constructorr"
        assert adjust_section_kind("function", "~Foo", "protected-func", "Foo") == "protected-destructor"

    def test_constructor_needs_class_name(self) -> None:
        """Without the class name a constructor stays a function."""
        assert adjust_section_kind("function", "Foo", "public-func") == "public-func"

    def test_plain_function(self) -> None:
        """Free functions in a ``func`` section become ``function``."""
        assert adjust_section_kind("function", "helper", "func") == "function"

    def test_variable_and_typedef(self) -> None:
        """Variables and typedefs map to their member sections."""
        assert adjust_section_kind("variable", "x", "public-attrib") == "public-attrib"
        assert adjust_section_kind("variable", "x", "var") == "variable"
        assert adjust_section_kind("typedef", "T", "public-type") == "public-type"

    def test_other_kinds_pass_through(self) -> None:
        """Other member kinds are their own section kind."""
        assert adjust_section_kind("enum", "Color", "public-type") == "enum"


@pytest.mark.unit
class TestSectionHeaders:
    """Tests for section_header_name and section_order."""

    @pytest.mark.parametrize(
        "kind,header",
        [
            ("public-func", "Public Member Functions"),
            ("public-constructorr", "Public Constructors"),
            ("public-operator", "Public Operators"),
            ("func", "Functions"),
            ("function", "Functions"),
            ("public-attrib", "Public Member Attributes"),
        ],
    )
    def test_known_kinds(self, kind: str, header: str) -> None:
        """Known kinds have a fixed header."""
        assert section_header_name(SectionDef(section_kind=kind)) == header

    def test_user_defined_header(self) -> None:
        """User defined sections show their own header."""
        assert section_header_name(SectionDef(section_kind="user-defined", header=" Helpers ")) == "Helpers"

    def test_user_defined_without_header(self, caplog: pytest.LogCaptureFixture) -> None:
        """A missing user defined header falls back to a generic one."""
        with caplog.at_level(logging.WARNING):
            assert section_header_name(SectionDef(section_kind="user-defined")) == "User Defined"
        assert "no header" in caplog.text

    def test_unknown_kind(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown kinds are logged and have no header."""
        with caplog.at_level(logging.ERROR):
            assert section_header_name(SectionDef(section_kind="mystery")) == ""
        assert "mystery" in caplog.text

    def test_order(self) -> None:
        """Constructors come before operators, functions and attributes."""
        kinds = ["public-attrib", "public-func", "public-operator", "public-constructorr"]

        assert sorted(kinds, key=section_order) == [
            "public-constructorr",
            "public-operator",
            "public-func",
            "public-attrib",
        ]


@pytest.mark.unit
class TestReclassifySections:
    """Tests for reclassify_sections."""

    def test_class_members_split(self) -> None:
        """A public-func section is split into constructors, operators and functions."""
        section = SectionDef(
            section_kind="public-func",
            member_defs=[member_def("bar"), member_def("Foo"), member_def("operator==")],
        )
        attributes = SectionDef(section_kind="public-attrib", member_defs=[member_def("count_", "variable")])
        compound = CompoundDef(compound_kind="class", compound_name="ns::Foo", section_defs=[section, attributes])

        result = reclassify_sections(compound, "Foo")

        assert [s.section_kind for s in result] == [
            "public-constructorr",
            "public-operator",
            "public-func",
            "public-attrib",
        ]
        assert [m.name for m in result[2].member_defs] == ["bar"]

    def test_compound_is_not_modified(self) -> None:
        """The parsed sections are left as they were."""
        section = SectionDef(section_kind="public-func", member_defs=[member_def("operator==")])
        compound = CompoundDef(compound_kind="class", compound_name="Foo", section_defs=[section])

        reclassify_sections(compound, "Foo")

        assert compound.section_defs == [section]
        assert section.section_kind == "public-func"

    def test_user_defined_with_header_kept(self) -> None:
        """Named user sections stay together."""
        user = SectionDef(section_kind="user-defined", header="Helpers", member_defs=[member_def("operator==")])
        compound = CompoundDef(compound_kind="class", compound_name="Foo", section_defs=[user])

        assert reclassify_sections(compound, "Foo") == [user]

    def test_member_references_grouped(self) -> None:
        """Group member references are regrouped by their kind."""
        helper = MemberRef(refid="ns_1a", member_kind="function", name="helper")
        section = SectionDef(section_kind="func", members=[helper])
        compound = CompoundDef(compound_kind="group", compound_name="core", section_defs=[section])

        result = reclassify_sections(compound)

        assert [s.section_kind for s in result] == ["function"]
        assert result[0].members[0].name == "helper"
