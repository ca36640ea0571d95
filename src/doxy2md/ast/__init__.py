#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/__init__.py
"""Typed node tree for Doxygen XML.

The module consists of several components:

- nodes: the description grammar (paragraphs, lists, tables, listings)
- compounds: compounds, members, sections, linked text and index files
- entities: the character entity table
- sections: regrouping of member sections for display

Examples
--------
Walking a parsed description:

    >>> from doxy2md.ast import Para, Markup
    >>> para = Para(children=["outer ", Markup(kind="bold", children=["inner"]), " text"])
    >>> para.text_content()
    'outer inner text'

"""

from __future__ import annotations

from doxy2md.ast.compounds import (
    CompoundDef,
    CompoundRef,
    Doxyfile,
    DoxyfileOption,
    Doxygen,
    DoxygenIndex,
    EnumValue,
    Include,
    IndexCompound,
    IndexMember,
    InnerRef,
    LinkedText,
    ListOfAllMembers,
    Location,
    MemberDef,
    MemberRef,
    MemberRefListItem,
    Param,
    Reference,
    RefText,
    Reimplement,
    SectionDef,
    TableOfContents,
    TemplateParamList,
    TocSect,
)
from doxy2md.ast.entities import ENTITIES
from doxy2md.ast.nodes import (
    Anchor,
    Blockquote,
    Caption,
    CodeLine,
    Description,
    DocBookOnly,
    DocList,
    DocRef,
    DocumentNode,
    Emoji,
    EmptyElement,
    Entity,
    Entry,
    Formula,
    Heading,
    Highlight,
    HtmlOnly,
    Image,
    Internal,
    ListItem,
    Markup,
    MemberProgramListing,
    Para,
    ParameterItem,
    ParameterList,
    ParameterName,
    ParameterNameList,
    ParameterType,
    Preformatted,
    ProgramListing,
    Row,
    Sect,
    SimpleSect,
    Sp,
    Table,
    Term,
    Title,
    TocItem,
    TocList,
    Ulink,
    VariableList,
    VariableListPair,
    VarListEntry,
    Verbatim,
    XrefSect,
)

__all__ = [
    "Anchor",
    "Blockquote",
    "Caption",
    "CodeLine",
    "CompoundDef",
    "CompoundRef",
    "Description",
    "DocBookOnly",
    "DocList",
    "DocRef",
    "DocumentNode",
    "Doxyfile",
    "DoxyfileOption",
    "Doxygen",
    "DoxygenIndex",
    "ENTITIES",
    "Emoji",
    "EmptyElement",
    "Entity",
    "Entry",
    "EnumValue",
    "Formula",
    "Heading",
    "Highlight",
    "HtmlOnly",
    "Image",
    "Include",
    "IndexCompound",
    "IndexMember",
    "InnerRef",
    "Internal",
    "LinkedText",
    "ListItem",
    "ListOfAllMembers",
    "Location",
    "Markup",
    "MemberDef",
    "MemberProgramListing",
    "MemberRef",
    "MemberRefListItem",
    "Para",
    "Param",
    "ParameterItem",
    "ParameterList",
    "ParameterName",
    "ParameterNameList",
    "ParameterType",
    "Preformatted",
    "ProgramListing",
    "RefText",
    "Reference",
    "Reimplement",
    "Row",
    "SectionDef",
    "Sect",
    "SimpleSect",
    "Sp",
    "Table",
    "TableOfContents",
    "TemplateParamList",
    "Term",
    "Title",
    "TocItem",
    "TocList",
    "TocSect",
    "Ulink",
    "VarListEntry",
    "VariableList",
    "VariableListPair",
    "Verbatim",
    "XrefSect",
]
