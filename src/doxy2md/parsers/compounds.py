#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/parsers/compounds.py
"""Builders for compound files: ``<doxygen>``, compounds, sections and members."""

from __future__ import annotations

import logging

from doxy2md.ast.compounds import (
    CompoundDef,
    CompoundRef,
    Doxygen,
    EnumValue,
    Include,
    InnerRef,
    LinkedText,
    ListOfAllMembers,
    Location,
    MemberDef,
    MemberRef,
    MemberRefListItem,
    Param,
    Reference,
    Reimplement,
    SectionDef,
    TableOfContents,
    TemplateParamList,
    TocSect,
)
from doxy2md.parsers.description import DescriptionBuilder
from doxy2md.parsers.xml_access import XmlElement

logger = logging.getLogger(__name__)

_INNER_REF_FIELDS = {
    "innerdir": "inner_dirs",
    "innerfile": "inner_files",
    "innerclass": "inner_classes",
    "innernamespace": "inner_namespaces",
    "innerpage": "inner_pages",
    "innergroup": "inner_groups",
}
# Graphs are produced for diagram output only.
_IGNORED_COMPOUND_CHILDREN = ("incdepgraph", "invincdepgraph", "inheritancegraph", "collaborationgraph")

_MEMBER_FLAGS = (
    "static",
    "extern",
    "strong",
    "const",
    "explicit",
    "inline",
    "volatile",
    "mutable",
    "noexcept",
    "nodiscard",
    "constexpr",
    "consteval",
    "constinit",
    "final",
)
_MEMBER_STRING_ATTRIBUTES = ("virt", "refqual", "noexceptexpression")

_LOCATION_INT_ATTRIBUTES = ("line", "column", "declline", "declcolumn", "bodystart", "bodyend")
_LOCATION_STRING_ATTRIBUTES = ("declfile", "bodyfile")


class CompoundBuilder(DescriptionBuilder):
    """Build the compound, section and member nodes of a ``<refid>.xml`` file."""

    # ------------------------------------------------------------------
    # Linked text and references
    # ------------------------------------------------------------------

    def build_linked_text(self, element: XmlElement, element_name: str) -> LinkedText:
        """Build ``type``, ``initializer``, ``defval`` or ``typeconstraint``."""
        builder = "build_linked_text"
        children = list(self._build_linked_children(element, element_name, builder))
        self._assert_no_attributes(element, element_name, builder)
        return LinkedText(kind=element_name, children=children)

    def _label(self, element: XmlElement, element_name: str, builder: str) -> str:
        self._require(self.xml.is_inner_element_text(element, element_name), "expected text", element_name, builder)
        text = self.xml.get_inner_element_text(element, element_name)
        self._require(text, "empty text", element_name, builder)
        return text

    def build_inner_ref(self, element: XmlElement, element_name: str) -> InnerRef:
        """Build an ``innerclass``, ``innernamespace``... reference."""
        builder = "build_inner_ref"
        ref = InnerRef(kind=element_name, text=self._label(element, element_name, builder))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                ref.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_prot":
                ref.prot = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_inline":
                ref.inline = self.xml.get_attribute_as_boolean(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(ref.refid, "missing refid", element_name, builder)
        return ref

    def build_compound_ref(self, element: XmlElement, element_name: str) -> CompoundRef:
        """Build a ``basecompoundref`` or ``derivedcompoundref``."""
        builder = "build_compound_ref"
        ref = CompoundRef(kind=element_name, text=self._label(element, element_name, builder))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                ref.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_prot":
                ref.prot = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_virt":
                ref.virt = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(ref.prot, "missing prot", element_name, builder)
        self._require(ref.virt, "missing virt", element_name, builder)
        return ref

    def build_include(self, element: XmlElement, element_name: str) -> Include:
        """Build an ``includes`` or ``includedby`` entry."""
        builder = "build_include"
        include = Include(kind=element_name, text=self._label(element, element_name, builder))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_local":
                include.local = self.xml.get_attribute_as_boolean(element, attribute_name)
            elif attribute_name == "@_refid":
                include.refid = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return include

    def build_reimplement(self, element: XmlElement, element_name: str) -> Reimplement:
        """Build a ``reimplements`` or ``reimplementedby`` entry."""
        builder = "build_reimplement"
        reimplement = Reimplement(kind=element_name, text=self._label(element, element_name, builder))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                reimplement.refid = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(reimplement.refid, "missing refid", element_name, builder)
        return reimplement

    def build_reference(self, element: XmlElement, element_name: str) -> Reference:
        """Build a ``references`` or ``referencedby`` entry."""
        builder = "build_reference"
        reference = Reference(kind=element_name, text=self._label(element, element_name, builder))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                reference.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_compoundref":
                reference.compoundref = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_startline":
                reference.startline = self._attribute_int(element, attribute_name)
            elif attribute_name == "@_endline":
                reference.endline = self._attribute_int(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(reference.refid, "missing refid", element_name, builder)
        return reference

    # ------------------------------------------------------------------
    # Member level structures
    # ------------------------------------------------------------------

    def build_location(self, element: XmlElement, element_name: str = "location") -> Location:
        """Build a ``<location>``; the ``file`` attribute is mandatory."""
        builder = "build_location"
        location = Location()
        for attribute_name in self.xml.get_attribute_names(element):
            name = attribute_name[2:]
            if name == "file":
                location.file = self.xml.get_attribute_as_string(element, attribute_name)
            elif name in _LOCATION_INT_ATTRIBUTES:
                setattr(location, name, self._attribute_int(element, attribute_name))
            elif name in _LOCATION_STRING_ATTRIBUTES:
                setattr(location, name, self.xml.get_attribute_as_string(element, attribute_name))
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(location.file, "missing file", element_name, builder)
        return location

    def build_param(self, element: XmlElement, element_name: str = "param") -> Param:
        """Build a function or template ``<param>``."""
        builder = "build_param"
        param = Param()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "attributes"):
                param.attributes = self._text_child(inner_element, "attributes", builder)
            elif self.xml.has_inner_element(inner_element, "type"):
                param.type = self.build_linked_text(inner_element, "type")
            elif self.xml.has_inner_element(inner_element, "declname"):
                param.declname = self._text_child(inner_element, "declname", builder)
            elif self.xml.has_inner_element(inner_element, "defname"):
                param.defname = self._text_child(inner_element, "defname", builder)
            elif self.xml.has_inner_element(inner_element, "array"):
                param.array = self._text_child(inner_element, "array", builder)
            elif self.xml.has_inner_element(inner_element, "defval"):
                param.defval = self.build_linked_text(inner_element, "defval")
            elif self.xml.has_inner_element(inner_element, "typeconstraint"):
                param.typeconstraint = self.build_linked_text(inner_element, "typeconstraint")
            elif self.xml.has_inner_element(inner_element, "briefdescription"):
                param.brief_description = self.build_description(inner_element, "briefdescription")
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._assert_no_attributes(element, element_name, builder)
        return param

    def build_template_param_list(
        self, element: XmlElement, element_name: str = "templateparamlist"
    ) -> TemplateParamList:
        """Build a ``<templateparamlist>``."""
        builder = "build_template_param_list"
        params = TemplateParamList(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "param"):
                params.children.append(self.build_param(inner_element, "param"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        return params

    def build_enum_value(self, element: XmlElement, element_name: str = "enumvalue") -> EnumValue:
        """Build an ``<enumvalue>``."""
        builder = "build_enum_value"
        enum_value = EnumValue()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "name"):
                enum_value.name = self._text_child(inner_element, "name", builder)
            elif self.xml.has_inner_element(inner_element, "initializer"):
                enum_value.initializer = self.build_linked_text(inner_element, "initializer")
            elif self.xml.has_inner_element(inner_element, "briefdescription"):
                enum_value.brief_description = self.build_description(inner_element, "briefdescription")
            elif self.xml.has_inner_element(inner_element, "detaileddescription"):
                enum_value.detailed_description = self.build_description(inner_element, "detaileddescription")
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(enum_value.name, "missing name", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                enum_value.id = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_prot":
                enum_value.prot = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(enum_value.id, "missing id", element_name, builder)
        self._require(enum_value.prot, "missing prot", element_name, builder)
        return enum_value

    def build_member_ref(self, element: XmlElement, element_name: str = "member") -> MemberRef:
        """Build a ``<member>`` reference of a section; ``kind`` may be empty."""
        builder = "build_member_ref"
        member = MemberRef()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "name"):
                member.name = self._text_child(inner_element, "name", builder)
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(member.name, "missing name", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                member.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_kind":
                member.member_kind = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(member.refid, "missing refid", element_name, builder)
        return member

    def build_member_def(self, element: XmlElement, element_name: str = "memberdef") -> MemberDef:
        """Build a full ``<memberdef>`` record."""
        builder = "build_member_def"
        member = MemberDef()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            child_name = self.xml.element_name(inner_element)
            if child_name == "name":
                member.name = self._text_child(inner_element, "name", builder)
            elif child_name == "location":
                member.location = self._set_once(
                    member.location, self.build_location(inner_element), element_name, "location", builder
                )
            elif child_name == "templateparamlist":
                member.template_param_list = self.build_template_param_list(inner_element)
            elif child_name in ("type", "initializer"):
                setattr(member, child_name, self.build_linked_text(inner_element, child_name))
            elif child_name in ("definition", "argsstring", "bitfield"):
                setattr(member, child_name, self._text_child(inner_element, child_name, builder))
            elif child_name == "qualifiedname":
                member.qualified_name = self._text_child(inner_element, child_name, builder)
            elif child_name == "reimplements":
                member.reimplements.append(self.build_reimplement(inner_element, child_name))
            elif child_name == "reimplementedby":
                member.reimplemented_by.append(self.build_reimplement(inner_element, child_name))
            elif child_name == "param":
                member.params.append(self.build_param(inner_element))
            elif child_name == "enumvalue":
                member.enum_values.append(self.build_enum_value(inner_element))
            elif child_name == "briefdescription":
                member.brief_description = self.build_description(inner_element, child_name)
            elif child_name == "detaileddescription":
                member.detailed_description = self.build_description(inner_element, child_name)
            elif child_name == "inbodydescription":
                member.inbody_description = self.build_description(inner_element, child_name)
            elif child_name == "references":
                member.references.append(self.build_reference(inner_element, child_name))
            elif child_name == "referencedby":
                member.referenced_by.append(self.build_reference(inner_element, child_name))
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(member.name, "missing name", element_name, builder)
        self._require(member.location is not None, "missing location", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            name = attribute_name[2:]
            if name == "kind":
                member.member_kind = self.xml.get_attribute_as_string(element, attribute_name)
            elif name == "id":
                member.id = self.xml.get_attribute_as_string(element, attribute_name)
            elif name == "prot":
                member.prot = self.xml.get_attribute_as_string(element, attribute_name)
            elif name in _MEMBER_FLAGS:
                setattr(member, name, self.xml.get_attribute_as_boolean(element, attribute_name))
            elif name in _MEMBER_STRING_ATTRIBUTES:
                setattr(member, name, self.xml.get_attribute_as_string(element, attribute_name))
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(member.member_kind, "missing kind", element_name, builder)
        self._require(member.id, "missing id", element_name, builder)
        self._require(member.prot, "missing prot", element_name, builder)
        return member

    def build_section_def(self, element: XmlElement, element_name: str = "sectiondef") -> SectionDef:
        """Build a ``<sectiondef>``."""
        builder = "build_section_def"
        section = SectionDef()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "header"):
                section.header = self._set_once(
                    section.header,
                    self._text_child(inner_element, "header", builder),
                    element_name,
                    "header",
                    builder,
                )
            elif self.xml.has_inner_element(inner_element, "description"):
                section.description = self._set_once(
                    section.description,
                    self.build_description(inner_element, "description"),
                    element_name,
                    "description",
                    builder,
                )
            elif self.xml.has_inner_element(inner_element, "memberdef"):
                section.member_defs.append(self.build_member_def(inner_element))
            elif self.xml.has_inner_element(inner_element, "member"):
                section.members.append(self.build_member_ref(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_kind":
                section.section_kind = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(section.section_kind, "missing kind", element_name, builder)
        return section

    def build_member_ref_list_item(self, element: XmlElement, element_name: str = "member") -> MemberRefListItem:
        """Build one entry of ``<listofallmembers>``."""
        builder = "build_member_ref_list_item"
        item = MemberRefListItem()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "scope"):
                item.scope = self._text_child(inner_element, "scope", builder)
            elif self.xml.has_inner_element(inner_element, "name"):
                item.name = self._text_child(inner_element, "name", builder)
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(item.name, "missing name", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                item.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_prot":
                item.prot = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_virt":
                item.virt = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_ambiguityscope":
                item.ambiguityscope = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(item.refid, "missing refid", element_name, builder)
        self._require(item.prot, "missing prot", element_name, builder)
        self._require(item.virt, "missing virt", element_name, builder)
        return item

    def build_list_of_all_members(
        self, element: XmlElement, element_name: str = "listofallmembers"
    ) -> ListOfAllMembers:
        """Build a ``<listofallmembers>``."""
        builder = "build_list_of_all_members"
        members = ListOfAllMembers(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "member"):
                members.children.append(self.build_member_ref_list_item(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)
        return members

    def build_table_of_contents(
        self, element: XmlElement, element_name: str = "tableofcontents"
    ) -> TableOfContents:
        """Build a page ``<tableofcontents>``."""
        builder = "build_table_of_contents"
        toc = TableOfContents(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "tocsect"):
                toc.children.append(self.build_toc_sect(inner_element))
            elif self.xml.has_inner_element(inner_element, "tableofcontents"):
                toc.children.append(self.build_table_of_contents(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)
        return toc

    def build_toc_sect(self, element: XmlElement, element_name: str = "tocsect") -> TocSect:
        """Build a ``<tocsect>`` entry."""
        builder = "build_toc_sect"
        toc_sect = TocSect()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "name"):
                toc_sect.name = self._text_child(inner_element, "name", builder)
            elif self.xml.has_inner_element(inner_element, "reference"):
                toc_sect.reference = self._text_child(inner_element, "reference", builder)
            elif self.xml.has_inner_element(inner_element, "docs"):
                # Section docs are rendered from the page body.
                continue
            elif self.xml.has_inner_element(inner_element, "tableofcontents"):
                toc_sect.table_of_contents.append(self.build_table_of_contents(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)
        return toc_sect

    # ------------------------------------------------------------------
    # Compounds
    # ------------------------------------------------------------------

    def build_compound_def(self, element: XmlElement, element_name: str = "compounddef") -> CompoundDef:
        """Build a ``<compounddef>``."""
        builder = "build_compound_def"
        compound = CompoundDef()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            child_name = self.xml.element_name(inner_element)
            if child_name == "compoundname":
                compound.compound_name = self._text_child(inner_element, child_name, builder)
            elif child_name == "title":
                compound.title = self._text_child(inner_element, child_name, builder)
            elif child_name == "briefdescription":
                compound.brief_description = self.build_description(inner_element, child_name)
            elif child_name == "detaileddescription":
                compound.detailed_description = self.build_description(inner_element, child_name)
            elif child_name == "basecompoundref":
                compound.base_compound_refs.append(self.build_compound_ref(inner_element, child_name))
            elif child_name == "derivedcompoundref":
                compound.derived_compound_refs.append(self.build_compound_ref(inner_element, child_name))
            elif child_name == "includes":
                compound.includes.append(self.build_include(inner_element, child_name))
            elif child_name == "includedby":
                compound.included_by.append(self.build_include(inner_element, child_name))
            elif child_name in _INNER_REF_FIELDS:
                getattr(compound, _INNER_REF_FIELDS[child_name]).append(self.build_inner_ref(inner_element, child_name))
            elif child_name == "templateparamlist":
                compound.template_param_list = self.build_template_param_list(inner_element)
            elif child_name == "sectiondef":
                compound.section_defs.append(self.build_section_def(inner_element))
            elif child_name == "tableofcontents":
                compound.table_of_contents = self.build_table_of_contents(inner_element)
            elif child_name == "programlisting":
                compound.program_listing = self._set_once(
                    compound.program_listing,
                    self.build_listing(inner_element, child_name),
                    element_name,
                    child_name,
                    builder,
                )
            elif child_name == "location":
                compound.location = self.build_location(inner_element)
            elif child_name == "listofallmembers":
                compound.list_of_all_members = self.build_list_of_all_members(inner_element)
            elif child_name in _IGNORED_COMPOUND_CHILDREN:
                continue
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            name = attribute_name[2:]
            if name == "id":
                compound.id = self.xml.get_attribute_as_string(element, attribute_name)
            elif name == "kind":
                compound.compound_kind = self.xml.get_attribute_as_string(element, attribute_name)
            elif name in ("language", "prot"):
                setattr(compound, name, self.xml.get_attribute_as_string(element, attribute_name))
            elif name in ("final", "inline", "sealed", "abstract"):
                setattr(compound, name, self.xml.get_attribute_as_boolean(element, attribute_name))
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(compound.id, "missing id", element_name, builder)
        self._require(compound.compound_kind, "missing kind", element_name, builder)
        # Anonymous namespaces may come without a name.
        if compound.compound_kind != "namespace":
            self._require(compound.compound_name, "missing compoundname", element_name, builder)
        return compound

    def build_doxygen(self, element: XmlElement, element_name: str = "doxygen") -> Doxygen:
        """Build the ``<doxygen>`` root of a compound file."""
        builder = "build_doxygen"
        doxygen = Doxygen()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "compounddef"):
                doxygen.compound_defs.append(self.build_compound_def(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_version":
                doxygen.version = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_lang":
                doxygen.lang = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_noNamespaceSchemaLocation":
                doxygen.no_namespace_schema_location = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(doxygen.version, "missing version", element_name, builder)
        self._require(doxygen.lang, "missing lang", element_name, builder)
        return doxygen


__all__ = ["CompoundBuilder"]
