#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/ast/nodes.py
"""Document node classes for the Doxygen description grammar.

This module defines the base :class:`DocumentNode` and the node classes of
the description family: paragraphs, markup spans, lists, tables, simple
sections, listings and the other elements that may appear inside Doxygen
``briefdescription`` and ``detaileddescription`` blocks.

Every node carries a ``kind`` tag, which is the name of the XML element it
was built from, and an optional ordered ``children`` list mixing literal
strings and nested nodes. The order of ``children`` is the reading order of
the source document and is never changed after construction.

Node Families
-------------
Text containers (children are ``str`` or inline nodes):
    - Para, Title, Term, Markup, Description, Internal, Sect
    - Heading, Caption, Ulink, DocRef, Verbatim, Preformatted, TocItem

Structured blocks:
    - DocList, ListItem, VariableList, VariableListPair, VarListEntry
    - Table, Row, Entry, SimpleSect, ParameterList, ParameterItem
    - ParameterNameList, ParameterType, ParameterName, XrefSect, Blockquote
    - TocList

Leaves:
    - Anchor, Formula, Image, Emoji, EmptyElement, Entity, HtmlOnly
    - DocBookOnly

Program listings:
    - ProgramListing, MemberProgramListing, CodeLine, Highlight, Sp

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional, Union

if TYPE_CHECKING:
    from doxy2md.ast.compounds import RefText

Child = Union[str, "DocumentNode"]


@dataclass
class DocumentNode:
    """Base class for all Doxygen document nodes.

    Parameters
    ----------
    kind : str
        Tag identifying the concrete variant; also the originating XML
        element name
    children : list of (str or DocumentNode) or None, default = None
        Ordered mixed content. None for nodes whose production has no
        mixed content

    """

    kind: str = ""
    children: Optional[list[Child]] = None

    def iter_child_nodes(self) -> Iterator[DocumentNode]:
        """Yield the node children, skipping literal text."""
        for child in self.children or []:
            if isinstance(child, DocumentNode):
                yield child

    def walk(self) -> Iterator[DocumentNode]:
        """Yield this node and all nested ``children`` nodes, depth first."""
        yield self
        for child in self.iter_child_nodes():
            yield from child.walk()

    def text_content(self) -> str:
        """Concatenate the literal text found under this node."""
        parts: list[str] = []
        for child in self.children or []:
            if isinstance(child, str):
                parts.append(child)
            else:
                parts.append(child.text_content())
        return "".join(parts)


# ----------------------------------------------------------------------------
# Text containers
# ----------------------------------------------------------------------------


@dataclass
class Para(DocumentNode):
    """A ``<para>`` element; may be empty.

    Parameters
    ----------
    skip_para : bool, default = False
        Set by page assembly for paragraphs that should render without a
        ``<p>`` wrapper

    """

    kind: str = "para"
    skip_para: bool = False


@dataclass
class Title(DocumentNode):
    """A ``<title>`` element holding title-command content."""

    kind: str = "title"


@dataclass
class Term(DocumentNode):
    """The ``<term>`` of a variable list entry."""

    kind: str = "term"


@dataclass
class Markup(DocumentNode):
    """An inline markup span such as ``<bold>`` or ``<computeroutput>``.

    The span flavour is the ``kind``; renderers map it to an HTML tag.
    """


@dataclass
class Description(DocumentNode):
    """A description block: brief, detailed, inbody and similar variants.

    Parameters
    ----------
    title : str or None, default = None
        Optional ``<title>`` text; at most one is allowed

    """

    title: Optional[str] = None


@dataclass
class Internal(DocumentNode):
    """An ``<internal>`` block at description or section level.

    Parameters
    ----------
    level : int, default = 0
        Nesting level: 0 at description level, N inside ``sectN``

    """

    kind: str = "internal"
    level: int = 0


@dataclass
class Sect(DocumentNode):
    """A ``<sect1>`` .. ``<sect6>`` section.

    Parameters
    ----------
    level : int
        Section depth, 1 to 6
    title : Title or None
        Section title
    id : str or None
        Anchor identifier

    """

    level: int = 1
    title: Optional[Title] = None
    id: Optional[str] = None


@dataclass
class Heading(DocumentNode):
    """A ``<heading level="N">`` element."""

    kind: str = "heading"
    level: Optional[int] = None


@dataclass
class Caption(DocumentNode):
    """A table ``<caption>`` with a mandatory id."""

    kind: str = "caption"
    id: str = ""


@dataclass
class Ulink(DocumentNode):
    """An external URL link."""

    kind: str = "ulink"
    url: str = ""


@dataclass
class DocRef(DocumentNode):
    """A cross reference inside a description (``docRefTextType``).

    Parameters
    ----------
    refid : str
        Identifier of the referenced compound or member
    kindref : str
        ``compound`` or ``member``
    external : str or None
        External tag file, if any

    """

    kind: str = "ref"
    refid: str = ""
    kindref: str = ""
    external: Optional[str] = None


@dataclass
class Verbatim(DocumentNode):
    """A ``<verbatim>`` block; its text is rendered unmodified."""

    kind: str = "verbatim"


@dataclass
class Preformatted(DocumentNode):
    """A ``<preformatted>`` block."""

    kind: str = "preformatted"


@dataclass
class TocItem(DocumentNode):
    """An entry of an inline ``<toclist>``."""

    kind: str = "tocitem"
    id: str = ""


# ----------------------------------------------------------------------------
# Lists
# ----------------------------------------------------------------------------


@dataclass
class ListItem(DocumentNode):
    """A ``<listitem>``; children are paragraphs."""

    kind: str = "listitem"
    override: Optional[str] = None
    value: Optional[int] = None


@dataclass
class DocList(DocumentNode):
    """An ``<itemizedlist>`` or ``<orderedlist>``; children are ListItem."""

    list_type: str = ""
    start: Optional[int] = None


@dataclass
class VarListEntry(DocumentNode):
    """A ``<varlistentry>``, holding exactly one term."""

    kind: str = "varlistentry"
    term: Optional[Term] = None


@dataclass
class VariableListPair(DocumentNode):
    """A synthetic pairing of one ``varlistentry`` with its ``listitem``."""

    kind: str = "variablelistpair"
    varlistentry: Optional[VarListEntry] = None
    listitem: Optional[ListItem] = None


@dataclass
class VariableList(DocumentNode):
    """A ``<variablelist>``; children are VariableListPair in source order."""

    kind: str = "variablelist"


@dataclass
class TocList(DocumentNode):
    """A ``<toclist>``; children are TocItem."""

    kind: str = "toclist"


# ----------------------------------------------------------------------------
# Tables
# ----------------------------------------------------------------------------


@dataclass
class Entry(DocumentNode):
    """A table cell; children are paragraphs."""

    kind: str = "entry"
    thead: bool = False
    colspan: Optional[int] = None
    rowspan: Optional[int] = None
    align: Optional[str] = None
    valign: Optional[str] = None
    width: Optional[str] = None
    class_name: Optional[str] = None


@dataclass
class Row(DocumentNode):
    """A table row; children are Entry."""

    kind: str = "row"


@dataclass
class Table(DocumentNode):
    """A ``<table>``; children are Row.

    Parameters
    ----------
    rows_count : int
        Value of the mandatory ``rows`` attribute
    cols_count : int
        Value of the mandatory ``cols`` attribute

    """

    kind: str = "table"
    caption: Optional[Caption] = None
    rows_count: int = 0
    cols_count: int = 0
    width: Optional[str] = None


# ----------------------------------------------------------------------------
# Sections and parameter lists
# ----------------------------------------------------------------------------


@dataclass
class SimpleSect(DocumentNode):
    """A ``<simplesect>``: returns, see, note, warning and the like.

    Parameters
    ----------
    sect_kind : str
        Value of the ``kind`` attribute
    title : str or None
        Title, used by ``par`` sections

    """

    kind: str = "simplesect"
    sect_kind: str = ""
    title: Optional[str] = None


@dataclass
class ParameterType(DocumentNode):
    """A ``<parametertype>``; children are text or RefText."""

    kind: str = "parametertype"


@dataclass
class ParameterName(DocumentNode):
    """A ``<parametername>`` with an optional in/out direction."""

    kind: str = "parametername"
    direction: Optional[str] = None


@dataclass
class ParameterNameList(DocumentNode):
    """A ``<parameternamelist>``; children are ParameterType or ParameterName."""

    kind: str = "parameternamelist"


@dataclass
class ParameterItem(DocumentNode):
    """A ``<parameteritem>``: name lists plus a mandatory description."""

    kind: str = "parameteritem"
    name_lists: list[ParameterNameList] = field(default_factory=list)
    description: Optional[Description] = None


@dataclass
class ParameterList(DocumentNode):
    """A ``<parameterlist>``; children are ParameterItem.

    Parameters
    ----------
    list_kind : str
        ``param``, ``retval``, ``exception`` or ``templateparam``

    """

    kind: str = "parameterlist"
    list_kind: str = ""


@dataclass
class XrefSect(DocumentNode):
    """A cross-reference section such as a todo or deprecated list entry."""

    kind: str = "xrefsect"
    id: str = ""
    xreftitle: Optional[str] = None
    xrefdescription: Optional[Description] = None


@dataclass
class Blockquote(DocumentNode):
    """A ``<blockquote>``; children are paragraphs."""

    kind: str = "blockquote"


# ----------------------------------------------------------------------------
# Leaves
# ----------------------------------------------------------------------------


@dataclass
class Anchor(DocumentNode):
    """An ``<anchor id="..."/>``."""

    kind: str = "anchor"
    id: str = ""


@dataclass
class Formula(DocumentNode):
    """A ``<formula>`` with its LaTeX text."""

    kind: str = "formula"
    text: str = ""
    id: str = ""


@dataclass
class Image(DocumentNode):
    """An ``<image>``; children hold the optional caption content."""

    kind: str = "image"
    image_type: Optional[str] = None
    name: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    alt: Optional[str] = None
    inline: Optional[bool] = None
    caption: Optional[str] = None


@dataclass
class Emoji(DocumentNode):
    """An ``<emoji>`` with its name and unicode sequence."""

    kind: str = "emoji"
    name: str = ""
    unicode: str = ""


@dataclass
class EmptyElement(DocumentNode):
    """A childless element: ``linebreak``, ``hruler`` or ``nonbreakablespace``."""


@dataclass
class Entity(DocumentNode):
    """A character entity element such as ``<copy/>`` or ``<alpha/>``.

    Parameters
    ----------
    substring : str
        The Unicode text the entity stands for

    """

    substring: str = ""


@dataclass
class HtmlOnly(DocumentNode):
    """An ``<htmlonly>`` block whose text is passed through unescaped."""

    kind: str = "htmlonly"
    text: str = ""
    block: Optional[str] = None


@dataclass
class DocBookOnly(DocumentNode):
    """A ``<docbookonly>`` block; kept in the tree, not rendered."""

    kind: str = "docbookonly"
    text: str = ""


# ----------------------------------------------------------------------------
# Program listings
# ----------------------------------------------------------------------------


@dataclass
class Sp(DocumentNode):
    """One or more spaces inside a highlight run."""

    kind: str = "sp"
    value: Optional[int] = None


@dataclass
class Highlight(DocumentNode):
    """A highlighted token run; children are text, Sp or RefText."""

    kind: str = "highlight"
    highlight_class: str = ""


@dataclass
class CodeLine(DocumentNode):
    """One line of a program listing; children are Highlight."""

    kind: str = "codeline"
    lineno: Optional[int] = None
    refid: Optional[str] = None
    refkind: Optional[str] = None
    external: Optional[bool] = None


@dataclass
class ProgramListing(DocumentNode):
    """A ``<programlisting>``; children are CodeLine."""

    kind: str = "programlisting"
    filename: Optional[str] = None


@dataclass
class MemberProgramListing(DocumentNode):
    """The slice of a file listing covering one member definition body."""

    kind: str = "memberprogramlisting"
    start_line: int = 0
    end_line: int = 0

    @classmethod
    def from_listing(cls, listing: ProgramListing, start_line: int, end_line: int) -> MemberProgramListing:
        """Keep the code lines whose number falls inside ``[start_line, end_line]``."""
        codelines: list[Child] = [
            codeline
            for codeline in listing.iter_child_nodes()
            if isinstance(codeline, CodeLine)
            and codeline.lineno is not None
            and start_line <= codeline.lineno <= end_line
        ]
        return cls(children=codelines, start_line=start_line, end_line=end_line)


LinkedChild = Union[str, "RefText"]

__all__ = [
    "Anchor",
    "Blockquote",
    "Caption",
    "Child",
    "CodeLine",
    "Description",
    "DocBookOnly",
    "DocList",
    "DocRef",
    "DocumentNode",
    "Emoji",
    "EmptyElement",
    "Entity",
    "Entry",
    "Formula",
    "Heading",
    "Highlight",
    "HtmlOnly",
    "Image",
    "Internal",
    "LinkedChild",
    "ListItem",
    "Markup",
    "MemberProgramListing",
    "Para",
    "ParameterItem",
    "ParameterList",
    "ParameterName",
    "ParameterNameList",
    "ParameterType",
    "Preformatted",
    "ProgramListing",
    "Row",
    "Sect",
    "SimpleSect",
    "Sp",
    "Table",
    "Term",
    "Title",
    "TocItem",
    "TocList",
    "Ulink",
    "VarListEntry",
    "VariableList",
    "VariableListPair",
    "Verbatim",
    "XrefSect",
]
