#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_compound_builder.py
"""Unit tests for the compound, section and member builders.

Tests cover:
- Building complete compound files from the sample project
- Member definitions, parameters, locations and references
- Member references with and without kind
- Mandatory attribute and child checks

"""

import logging

import pytest
from utils import CLASS_XML, FILE_ID, FOO_ID, GROUP_XML, HELPER_ID, NAMESPACE_XML, doxygen_file, parse_xml

from doxy2md.ast.compounds import CompoundDef, LinkedText, MemberDef, RefText
from doxy2md.exceptions import GrammarError
from doxy2md.parsers.compounds import CompoundBuilder


def build_compound(builder: CompoundBuilder, compounddef_xml: str) -> CompoundDef:
    """Build the only compound of a wrapped compound file."""
    doxygen = builder.build_doxygen(parse_xml(doxygen_file(compounddef_xml)))
    assert len(doxygen.compound_defs) == 1
    return doxygen.compound_defs[0]


def member_by_name(compound: CompoundDef, name: str) -> MemberDef:
    """Return the member definition with the given name."""
    for section in compound.section_defs:
        for member_def in section.member_defs:
            if member_def.name == name:
                return member_def
    raise KeyError(name)


@pytest.mark.unit
class TestDoxygenRoot:
    """Tests for the ``<doxygen>`` root."""

    def test_root_attributes(self, compound_builder: CompoundBuilder) -> None:
        """Version, language and schema are read from the root."""
        doxygen = compound_builder.build_doxygen(parse_xml(doxygen_file(NAMESPACE_XML)))

        assert doxygen.version == "1.9.8"
        assert doxygen.lang == "en-US"
        assert doxygen.no_namespace_schema_location == "compound.xsd"

    def test_root_requires_version(self, compound_builder: CompoundBuilder) -> None:
        """A root without version breaks the grammar."""
        with pytest.raises(GrammarError, match="missing version"):
            compound_builder.build_doxygen(parse_xml('<doxygen xml:lang="en-US"/>'))


@pytest.mark.unit
class TestCompoundDef:
    """Tests for ``<compounddef>``."""

    def test_class_compound(self, compound_builder: CompoundBuilder) -> None:
        """Identity, includes, sections and location are collected."""
        compound = build_compound(compound_builder, CLASS_XML)

        assert compound.id == FOO_ID
        assert compound.compound_kind == "class"
        assert compound.compound_name == "ns::Foo"
        assert compound.unqualified_name == "Foo"
        assert compound.language == "C++"
        assert compound.includes[0].text == "foo.h"
        assert compound.includes[0].refid == FILE_ID
        assert compound.includes[0].local is False
        assert [section.section_kind for section in compound.section_defs] == ["public-func", "public-attrib"]
        assert compound.location.line == 7
        assert compound.location.bodyend == 17
        assert len(compound.list_of_all_members.children) == 4

    def test_descriptions(self, compound_builder: CompoundBuilder) -> None:
        """Brief and detailed descriptions keep their paragraphs."""
        compound = build_compound(compound_builder, CLASS_XML)

        assert compound.brief_description.text_content().strip() == "A small class."
        assert "Foo keeps a count." in compound.detailed_description.text_content()

    def test_inner_references(self, compound_builder: CompoundBuilder) -> None:
        """``innerclass`` references are stored with their label."""
        compound = build_compound(compound_builder, NAMESPACE_XML)

        assert [(ref.refid, ref.text) for ref in compound.inner_classes] == [(FOO_ID, "ns::Foo")]
        assert compound.inner_classes[0].prot == "public"
        assert compound.inner_refs() == compound.inner_classes

    def test_anonymous_namespace_has_no_name(self, compound_builder: CompoundBuilder) -> None:
        """Only namespaces may come without a compound name."""
        namespace = build_compound(compound_builder, '<compounddef id="namespace_0d" kind="namespace"/>')
        assert namespace.compound_name == ""

        with pytest.raises(GrammarError, match="missing compoundname"):
            build_compound(compound_builder, '<compounddef id="classx" kind="class"/>')

    def test_compound_requires_id(self, compound_builder: CompoundBuilder) -> None:
        """A compound without id breaks the grammar."""
        with pytest.raises(GrammarError, match="missing id"):
            build_compound(compound_builder, '<compounddef kind="class"><compoundname>X</compoundname></compounddef>')

    def test_unknown_child_is_logged(self, compound_builder: CompoundBuilder, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown compound children are reported and skipped."""
        with caplog.at_level(logging.ERROR):
            compound = build_compound(
                compound_builder,
                '<compounddef id="classx" kind="class"><compoundname>X</compoundname><future/></compounddef>',
            )

        assert compound.compound_name == "X"
        assert "future" in caplog.text

    def test_program_listing_is_singleton(self, compound_builder: CompoundBuilder) -> None:
        """A second program listing breaks the grammar."""
        with pytest.raises(GrammarError, match="duplicate <programlisting>"):
            build_compound(
                compound_builder,
                '<compounddef id="a_8h" kind="file"><compoundname>a.h</compoundname>'
                "<programlisting/><programlisting/></compounddef>",
            )


@pytest.mark.unit
class TestMemberDef:
    """Tests for ``<memberdef>``."""

    def test_function_member(self, compound_builder: CompoundBuilder) -> None:
        """Signature parts, flags and location are read."""
        bar = member_by_name(build_compound(compound_builder, CLASS_XML), "bar")

        assert bar.id == f"{FOO_ID}_1a03"
        assert bar.member_kind == "function"
        assert bar.prot == "public"
        assert bar.const is True
        assert bar.inline is True
        assert bar.static is False
        assert bar.virt == "non-virtual"
        assert bar.argsstring == "(int x) const"
        assert bar.qualified_name == "ns::Foo::bar"
        assert bar.location.bodystart == 12
        assert bar.location.bodyfile == "include/foo.h"
        assert bar.labels == ["inline"]

    def test_params(self, compound_builder: CompoundBuilder) -> None:
        """Parameter types are linked text with references."""
        operator = member_by_name(build_compound(compound_builder, CLASS_XML), "operator==")
        param = operator.params[0]

        assert param.declname == "other"
        assert isinstance(param.type, LinkedText)
        assert param.type.children[0] == "const "
        assert isinstance(param.type.children[1], RefText)
        assert param.type.children[1].refid == FOO_ID
        assert param.type.children[2] == " &"

    def test_references(self, compound_builder: CompoundBuilder) -> None:
        """``references`` entries keep their line range."""
        bar = member_by_name(build_compound(compound_builder, CLASS_XML), "bar")

        assert len(bar.references) == 1
        reference = bar.references[0]
        assert reference.refid == HELPER_ID
        assert reference.compoundref == FILE_ID
        assert (reference.startline, reference.endline) == (20, 22)

    def test_initializer(self, compound_builder: CompoundBuilder) -> None:
        """Variables keep their initializer."""
        count = member_by_name(build_compound(compound_builder, CLASS_XML), "count_")

        assert count.member_kind == "variable"
        assert count.initializer.kind == "initializer"
        assert count.initializer.text_content() == "= 0"

    def test_member_requires_location(self, compound_builder: CompoundBuilder) -> None:
        """A member without location breaks the grammar."""
        with pytest.raises(GrammarError, match="missing location"):
            compound_builder.build_member_def(
                parse_xml('<memberdef kind="function" id="a_1b" prot="public"><name>f</name></memberdef>')
            )

    def test_location_requires_file(self, compound_builder: CompoundBuilder) -> None:
        """A location without file breaks the grammar."""
        with pytest.raises(GrammarError, match="missing file"):
            compound_builder.build_location(parse_xml('<location line="3"/>'))


@pytest.mark.unit
class TestSectionDef:
    """Tests for ``<sectiondef>`` and ``<member>`` references."""

    def test_member_reference_without_kind(self, compound_builder: CompoundBuilder) -> None:
        """A member reference may omit its kind."""
        group = build_compound(compound_builder, GROUP_XML)
        member = group.section_defs[0].members[0]

        assert group.title == "Core API"
        assert member.refid == HELPER_ID
        assert member.name == "helper"
        assert member.member_kind == ""

    def test_section_header(self, compound_builder: CompoundBuilder) -> None:
        """User defined sections carry a header."""
        section = compound_builder.build_section_def(
            parse_xml('<sectiondef kind="user-defined"><header>Helpers</header></sectiondef>')
        )

        assert section.section_kind == "user-defined"
        assert section.header == "Helpers"

    def test_section_requires_kind(self, compound_builder: CompoundBuilder) -> None:
        """A section without kind breaks the grammar."""
        with pytest.raises(GrammarError, match="missing kind"):
            compound_builder.build_section_def(parse_xml("<sectiondef/>"))

    def test_duplicate_header_fails(self, compound_builder: CompoundBuilder) -> None:
        """A section has at most one header."""
        with pytest.raises(GrammarError, match="duplicate <header>"):
            compound_builder.build_section_def(
                parse_xml('<sectiondef kind="user-defined"><header>a</header><header>b</header></sectiondef>')
            )
