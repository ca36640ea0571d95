#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/compounds.py
"""Node classes for compounds, members, linked text and the index files.

Doxygen's ``kind`` attribute clashes with :attr:`DocumentNode.kind`, which
holds the element name, so the attribute is stored under a family specific
name: ``compound_kind``, ``member_kind``, ``section_kind``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from doxy2md.ast.nodes import Description, DocumentNode, ProgramListing

# ----------------------------------------------------------------------------
# Linked text and references
# ----------------------------------------------------------------------------


@dataclass
class RefText(DocumentNode):
    """A hyperlinked identifier inside linked text (``refTextType``).

    Parameters
    ----------
    text : str
        Display label, never empty
    refid : str
        Identifier of the target
    kindref : str
        ``compound`` or ``member``

    """

    kind: str = "ref"
    text: str = ""
    refid: str = ""
    kindref: str = ""
    external: Optional[str] = None
    tooltip: Optional[str] = None


@dataclass
class LinkedText(DocumentNode):
    """A type expression interleaving text and RefText.

    The ``kind`` is one of ``type``, ``initializer``, ``defval`` or
    ``typeconstraint``.
    """


@dataclass
class CompoundRef(DocumentNode):
    """A ``basecompoundref`` or ``derivedcompoundref``."""

    text: str = ""
    prot: str = ""
    virt: str = ""
    refid: Optional[str] = None


@dataclass
class InnerRef(DocumentNode):
    """An ``innerclass``/``innernamespace``/... reference to a child compound."""

    text: str = ""
    refid: str = ""
    prot: Optional[str] = None
    inline: Optional[bool] = None


@dataclass
class Include(DocumentNode):
    """An ``includes`` or ``includedby`` entry."""

    text: str = ""
    local: bool = False
    refid: Optional[str] = None


@dataclass
class Reimplement(DocumentNode):
    """A ``reimplements`` or ``reimplementedby`` entry."""

    text: str = ""
    refid: str = ""


@dataclass
class Reference(DocumentNode):
    """A ``references`` or ``referencedby`` entry."""

    text: str = ""
    refid: str = ""
    compoundref: Optional[str] = None
    startline: Optional[int] = None
    endline: Optional[int] = None


# ----------------------------------------------------------------------------
# Member level structures
# ----------------------------------------------------------------------------


@dataclass
class Location(DocumentNode):
    """Source location of a compound or member."""

    kind: str = "location"
    file: str = ""
    line: Optional[int] = None
    column: Optional[int] = None
    declfile: Optional[str] = None
    declline: Optional[int] = None
    declcolumn: Optional[int] = None
    bodyfile: Optional[str] = None
    bodystart: Optional[int] = None
    bodyend: Optional[int] = None


@dataclass
class Param(DocumentNode):
    """A function or template ``<param>``."""

    kind: str = "param"
    attributes: Optional[str] = None
    type: Optional[LinkedText] = None
    declname: Optional[str] = None
    defname: Optional[str] = None
    array: Optional[str] = None
    defval: Optional[LinkedText] = None
    typeconstraint: Optional[LinkedText] = None
    brief_description: Optional[Description] = None


@dataclass
class TemplateParamList(DocumentNode):
    """A ``<templateparamlist>``; children are Param."""

    kind: str = "templateparamlist"


@dataclass
class EnumValue(DocumentNode):
    """One ``<enumvalue>`` of an enum member."""

    kind: str = "enumvalue"
    name: str = ""
    id: str = ""
    prot: str = ""
    initializer: Optional[LinkedText] = None
    brief_description: Optional[Description] = None
    detailed_description: Optional[Description] = None


@dataclass
class MemberDef(DocumentNode):
    """A full ``<memberdef>`` record."""

    kind: str = "memberdef"
    member_kind: str = ""
    id: str = ""
    prot: str = ""
    name: str = ""
    location: Optional[Location] = None
    template_param_list: Optional[TemplateParamList] = None
    type: Optional[LinkedText] = None
    definition: Optional[str] = None
    argsstring: Optional[str] = None
    bitfield: Optional[str] = None
    qualified_name: Optional[str] = None
    reimplements: list[Reimplement] = field(default_factory=list)
    reimplemented_by: list[Reimplement] = field(default_factory=list)
    params: list[Param] = field(default_factory=list)
    enum_values: list[EnumValue] = field(default_factory=list)
    initializer: Optional[LinkedText] = None
    brief_description: Optional[Description] = None
    detailed_description: Optional[Description] = None
    inbody_description: Optional[Description] = None
    references: list[Reference] = field(default_factory=list)
    referenced_by: list[Reference] = field(default_factory=list)
    # Trait flags.
    static: bool = False
    extern: bool = False
    strong: bool = False
    const: bool = False
    explicit: bool = False
    inline: bool = False
    volatile: bool = False
    mutable: bool = False
    noexcept: bool = False
    nodiscard: bool = False
    constexpr: bool = False
    consteval: bool = False
    constinit: bool = False
    final: bool = False
    virt: Optional[str] = None
    refqual: Optional[str] = None
    noexceptexpression: Optional[str] = None

    @property
    def labels(self) -> list[str]:
        """Return the trait labels shown next to the member signature."""
        labels = []
        for name in ("inline", "explicit", "static", "extern", "constexpr", "consteval", "constinit", "mutable"):
            if getattr(self, name):
                labels.append(name)
        if self.virt == "virtual":
            labels.append("virtual")
        elif self.virt == "pure-virtual":
            labels.append("pure virtual")
        for name in ("final", "noexcept", "nodiscard", "strong"):
            if getattr(self, name):
                labels.append(name)
        if self.prot not in ("", "public"):
            labels.append(self.prot)
        return labels


@dataclass
class MemberRef(DocumentNode):
    """A ``<member>`` reference inside a section.

    The ``member_kind`` may be empty in the XML; it is back-filled from the
    matching :class:`MemberDef` once every compound has been parsed.
    """

    kind: str = "member"
    refid: str = ""
    member_kind: str = ""
    name: str = ""


@dataclass
class SectionDef(DocumentNode):
    """A ``<sectiondef>`` grouping members of a compound."""

    kind: str = "sectiondef"
    section_kind: str = ""
    header: Optional[str] = None
    description: Optional[Description] = None
    member_defs: list[MemberDef] = field(default_factory=list)
    members: list[MemberRef] = field(default_factory=list)

    def compute_adjusted_kind(self, section_suffix: str, member_suffix: Optional[str] = None) -> str:
        """Derive a section kind for a reclassified member.

        Parameters
        ----------
        section_suffix : str
            Replacement for the last ``-word`` of a hyphenated section kind,
            e.g. ``operator`` turns ``public-func`` into ``public-operator``
        member_suffix : str, optional
            Kind used for ``user-defined`` and non-hyphenated sections;
            defaults to ``section_suffix``

        """
        from doxy2md.ast.sections import compute_adjusted_kind

        return compute_adjusted_kind(self.section_kind, section_suffix, member_suffix)


@dataclass
class MemberRefListItem(DocumentNode):
    """An entry of ``<listofallmembers>``."""

    kind: str = "member"
    refid: str = ""
    prot: str = ""
    virt: str = ""
    ambiguityscope: Optional[str] = None
    scope: str = ""
    name: str = ""


@dataclass
class ListOfAllMembers(DocumentNode):
    """A ``<listofallmembers>``; children are MemberRefListItem."""

    kind: str = "listofallmembers"


@dataclass
class TableOfContents(DocumentNode):
    """A ``<tableofcontents>``; children are TocSect or nested TableOfContents."""

    kind: str = "tableofcontents"


@dataclass
class TocSect(DocumentNode):
    """A ``<tocsect>`` entry of a table of contents."""

    kind: str = "tocsect"
    name: str = ""
    reference: str = ""
    table_of_contents: list[TableOfContents] = field(default_factory=list)


# ----------------------------------------------------------------------------
# Compounds
# ----------------------------------------------------------------------------


@dataclass
class CompoundDef(DocumentNode):
    """A ``<compounddef>``: class, namespace, file, dir, group or page."""

    kind: str = "compounddef"
    id: str = ""
    compound_kind: str = ""
    compound_name: str = ""
    title: Optional[str] = None
    language: Optional[str] = None
    prot: Optional[str] = None
    final: bool = False
    inline: bool = False
    sealed: bool = False
    abstract: bool = False
    brief_description: Optional[Description] = None
    detailed_description: Optional[Description] = None
    base_compound_refs: list[CompoundRef] = field(default_factory=list)
    derived_compound_refs: list[CompoundRef] = field(default_factory=list)
    includes: list[Include] = field(default_factory=list)
    included_by: list[Include] = field(default_factory=list)
    inner_dirs: list[InnerRef] = field(default_factory=list)
    inner_files: list[InnerRef] = field(default_factory=list)
    inner_classes: list[InnerRef] = field(default_factory=list)
    inner_namespaces: list[InnerRef] = field(default_factory=list)
    inner_pages: list[InnerRef] = field(default_factory=list)
    inner_groups: list[InnerRef] = field(default_factory=list)
    template_param_list: Optional[TemplateParamList] = None
    section_defs: list[SectionDef] = field(default_factory=list)
    table_of_contents: Optional[TableOfContents] = None
    program_listing: Optional[ProgramListing] = None
    location: Optional[Location] = None
    list_of_all_members: Optional[ListOfAllMembers] = None

    def inner_refs(self) -> list[InnerRef]:
        """Return every inner compound reference, in a stable family order."""
        return [
            *self.inner_namespaces,
            *self.inner_classes,
            *self.inner_groups,
            *self.inner_dirs,
            *self.inner_files,
            *self.inner_pages,
        ]

    @property
    def unqualified_name(self) -> str:
        """Return the compound name without its ``::`` scope."""
        return self.compound_name.rsplit("::", 1)[-1]


@dataclass
class Doxygen(DocumentNode):
    """The ``<doxygen>`` root of one compound file."""

    kind: str = "doxygen"
    version: str = ""
    lang: str = ""
    no_namespace_schema_location: Optional[str] = None
    compound_defs: list[CompoundDef] = field(default_factory=list)


# ----------------------------------------------------------------------------
# index.xml and Doxyfile.xml
# ----------------------------------------------------------------------------


@dataclass
class IndexMember(DocumentNode):
    """A ``<member>`` of an index compound."""

    kind: str = "member"
    name: str = ""
    refid: str = ""
    member_kind: str = ""


@dataclass
class IndexCompound(DocumentNode):
    """A ``<compound>`` of ``index.xml``."""

    kind: str = "compound"
    name: str = ""
    refid: str = ""
    compound_kind: str = ""
    members: list[IndexMember] = field(default_factory=list)


@dataclass
class DoxygenIndex(DocumentNode):
    """The ``<doxygenindex>`` root."""

    kind: str = "doxygenindex"
    version: str = ""
    lang: str = ""
    no_namespace_schema_location: Optional[str] = None
    compounds: list[IndexCompound] = field(default_factory=list)


@dataclass
class DoxyfileOption(DocumentNode):
    """One ``<option>`` of ``Doxyfile.xml``."""

    kind: str = "option"
    id: str = ""
    default: str = ""
    option_type: str = ""
    values: list[str] = field(default_factory=list)


@dataclass
class Doxyfile(DocumentNode):
    """The ``<doxyfile>`` root."""

    kind: str = "doxyfile"
    version: str = ""
    lang: str = ""
    no_namespace_schema_location: Optional[str] = None
    options: list[DoxyfileOption] = field(default_factory=list)


AnyMember = Union[MemberDef, MemberRef]

__all__ = [
    "AnyMember",
    "CompoundDef",
    "CompoundRef",
    "Doxyfile",
    "DoxyfileOption",
    "Doxygen",
    "DoxygenIndex",
    "EnumValue",
    "Include",
    "IndexCompound",
    "IndexMember",
    "InnerRef",
    "LinkedText",
    "ListOfAllMembers",
    "Location",
    "MemberDef",
    "MemberRef",
    "MemberRefListItem",
    "Param",
    "RefText",
    "Reference",
    "Reimplement",
    "SectionDef",
    "TableOfContents",
    "TemplateParamList",
    "TocSect",
]
