#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/parsers/description.py
"""Builders for the Doxygen description grammar.

The description grammar is mixed content: text runs interleave with inline
commands (``bold``, ``ref``, entities...) and block commands (lists,
tables, simple sections...). Two command groups decide which child
elements are accepted and how they are built:

- the *title* group, allowed inside titles, terms, links and captions;
- the *paragraph* group, a superset allowed inside ``<para>`` and markup.

Each group is an ordered table of ``(element name, builder)`` pairs. A
``None`` builder marks an element that is recognised but deliberately
produces no node (``latexonly``, ``indexentry``...). Elements matching no
entry are logged and skipped.

"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from doxy2md.ast.compounds import RefText
from doxy2md.ast.entities import ENTITIES
from doxy2md.ast.nodes import (
    Anchor,
    Blockquote,
    Caption,
    Child,
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
    LinkedChild,
    ListItem,
    Markup,
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
from doxy2md.parsers.base import BaseBuilder
from doxy2md.parsers.xml_access import XmlAccess, XmlElement

logger = logging.getLogger(__name__)

ElementBuilder = Callable[[XmlElement, str], DocumentNode]
CommandGroup = list[tuple[str, Optional[ElementBuilder]]]

MAX_SECT_LEVEL = 6

_TITLE_MARKUP = (
    "bold",
    "underline",
    "emphasis",
    "computeroutput",
    "subscript",
    "superscript",
    "center",
    "small",
    "cite",
    "del",
    "ins",
)
_IGNORED_OUTPUT_FORMATS = ("manonly", "xmlonly", "rtfonly", "latexonly", "docbookonly")
_EMPTY_ELEMENTS = ("linebreak", "nonbreakablespace")


class DescriptionBuilder(BaseBuilder):
    """Build description-family nodes from Doxygen XML elements.

    Parameters
    ----------
    xml : XmlAccess or None, default = None
        Shared XML accessor; HTML images met while building are appended to
        its ``images`` list

    """

    def __init__(self, xml: Optional[XmlAccess] = None):
        """Initialize the builder and its command group tables."""
        super().__init__(xml)
        self.title_cmd_group: CommandGroup = self._create_title_cmd_group()
        self.doc_cmd_group: CommandGroup = self._create_doc_cmd_group()
        self._title_lookup = dict(self.title_cmd_group)
        self._doc_lookup = dict(self.doc_cmd_group)

    # ------------------------------------------------------------------
    # Command groups
    # ------------------------------------------------------------------

    def _create_title_cmd_group(self) -> CommandGroup:
        group: CommandGroup = [("ulink", self.build_ulink)]
        group.extend((name, self.build_markup) for name in _TITLE_MARKUP)
        group.append(("htmlonly", self.build_html_only))
        group.extend((name, None) for name in _IGNORED_OUTPUT_FORMATS)
        group.extend(
            [
                ("image", self.build_image),
                ("anchor", self.build_anchor),
                ("formula", self.build_formula),
                ("ref", self.build_doc_ref),
                ("emoji", self.build_emoji),
            ]
        )
        group.extend((name, self.build_empty_element) for name in _EMPTY_ELEMENTS)
        group.extend((name, self.build_entity) for name in ENTITIES)
        return group

    def _create_doc_cmd_group(self) -> CommandGroup:
        group: CommandGroup = [("ulink", self.build_ulink), ("bold", self.build_markup)]
        group.extend([("s", self.build_markup), ("strike", self.build_markup)])
        group.extend((name, self.build_markup) for name in _TITLE_MARKUP if name != "bold")
        group.append(("htmlonly", self.build_html_only))
        group.extend((name, None) for name in _IGNORED_OUTPUT_FORMATS if name != "docbookonly")
        group.append(("docbookonly", self.build_docbook_only))
        group.extend(
            [
                ("image", self.build_image),
                ("anchor", self.build_anchor),
                ("formula", self.build_formula),
                ("ref", self.build_doc_ref),
                ("emoji", self.build_emoji),
            ]
        )
        group.extend((name, self.build_empty_element) for name in _EMPTY_ELEMENTS)
        group.extend((name, self.build_entity) for name in ENTITIES)
        group.extend(
            [
                ("hruler", self.build_empty_element),
                ("preformatted", self.build_preformatted),
                ("programlisting", self.build_listing),
                ("verbatim", self.build_verbatim),
                ("indexentry", None),
                ("orderedlist", self.build_list),
                ("itemizedlist", self.build_list),
                ("simplesect", self.build_simple_sect),
                ("variablelist", self.build_variable_list),
                ("table", self.build_table),
                ("heading", self.build_heading),
                ("toclist", self.build_toc_list),
                ("parameterlist", self.build_parameter_list),
                ("xrefsect", self.build_xref_sect),
                ("blockquote", self.build_blockquote),
            ]
        )
        return group

    def _build_mixed(
        self,
        inner_elements: list[XmlElement],
        element_name: str,
        builder_name: str,
        lookup: dict[str, Optional[ElementBuilder]],
    ) -> list[Child]:
        """Walk mixed content in order, building commands from a group table."""
        group_name = "doc_cmd_group" if lookup is self._doc_lookup else "doc_title_cmd_group"
        children: list[Child] = []
        for inner_element in inner_elements:
            if self.xml.has_inner_text(inner_element):
                children.append(self.xml.get_inner_text(inner_element))
                continue
            child_name = self.xml.element_name(inner_element)
            if child_name is None or child_name not in lookup:
                logger.error("%s element:%s not implemented yet by %s", element_name, child_name, group_name)
                continue
            build = lookup[child_name]
            if build is not None:
                children.append(build(inner_element, child_name))
        return children

    # ------------------------------------------------------------------
    # Descriptions and sections
    # ------------------------------------------------------------------

    def build_description(self, element: XmlElement, element_name: str) -> Description:
        """Build a ``briefdescription``, ``detaileddescription`` or similar block."""
        builder = "build_description"
        description = Description(kind=element_name, children=[])
        for inner_element in self._inner(element, element_name, builder, required=True):
            if self.xml.has_inner_text(inner_element):
                description.children.append(self.xml.get_inner_text(inner_element))
            elif self.xml.is_inner_element_text(inner_element, "title"):
                description.title = self._set_once(
                    description.title,
                    self.xml.get_inner_element_text(inner_element, "title"),
                    element_name,
                    "title",
                    builder,
                )
            elif self.xml.has_inner_element(inner_element, "para"):
                description.children.append(self.build_para(inner_element, "para"))
            elif self.xml.has_inner_element(inner_element, "internal"):
                description.children.append(self.build_internal(inner_element, "internal", 0))
            elif self.xml.has_inner_element(inner_element, "sect1"):
                description.children.append(self.build_sect(inner_element, "sect1", 1))
            else:
                self._unknown_element(inner_element, element_name, builder)

        self._assert_no_attributes(element, element_name, builder)
        return description

    def build_internal(self, element: XmlElement, element_name: str, level: int) -> Internal:
        """Build an ``<internal>`` block found at section ``level`` (0 for descriptions)."""
        builder = "build_internal"
        sect_name = f"sect{level + 1}"
        internal = Internal(children=[], level=level)
        for inner_element in self._inner(element, element_name, builder, required=True):
            if self.xml.has_inner_text(inner_element):
                internal.children.append(self.xml.get_inner_text(inner_element))
            elif self.xml.has_inner_element(inner_element, "para"):
                internal.children.append(self.build_para(inner_element, "para"))
            elif level < MAX_SECT_LEVEL and self.xml.has_inner_element(inner_element, sect_name):
                internal.children.append(self.build_sect(inner_element, sect_name, level + 1))
            else:
                self._unknown_element(inner_element, element_name, builder)

        self._assert_no_attributes(element, element_name, builder)
        return internal

    def build_sect(self, element: XmlElement, element_name: str, level: int) -> Sect:
        """Build a ``<sectN>`` section with its optional title and id."""
        builder = "build_sect"
        nested_name = f"sect{level + 1}"
        sect = Sect(kind=element_name, children=[], level=level)
        for inner_element in self._inner(element, element_name, builder, required=True):
            if self.xml.has_inner_text(inner_element):
                sect.children.append(self.xml.get_inner_text(inner_element))
            elif self.xml.has_inner_element(inner_element, "title"):
                sect.title = self._set_once(
                    sect.title, self.build_title(inner_element, "title"), element_name, "title", builder
                )
            elif self.xml.has_inner_element(inner_element, "para"):
                sect.children.append(self.build_para(inner_element, "para"))
            elif self.xml.has_inner_element(inner_element, "internal"):
                sect.children.append(self.build_internal(inner_element, "internal", level))
            elif level < MAX_SECT_LEVEL and self.xml.has_inner_element(inner_element, nested_name):
                sect.children.append(self.build_sect(inner_element, nested_name, level + 1))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                sect.id = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return sect

    # ------------------------------------------------------------------
    # Paragraph level containers
    # ------------------------------------------------------------------

    def build_para(self, element: XmlElement, element_name: str = "para") -> Para:
        """Build a ``<para>``; it may be empty."""
        builder = "build_para"
        inner_elements = self._inner(element, element_name, builder)
        children = self._build_mixed(inner_elements, element_name, builder, self._doc_lookup)
        self._assert_no_attributes(element, element_name, builder)
        return Para(children=children)

    def build_title(self, element: XmlElement, element_name: str = "title") -> Title:
        """Build a ``<title>``; it may be empty."""
        builder = "build_title"
        inner_elements = self._inner(element, element_name, builder)
        children = self._build_mixed(inner_elements, element_name, builder, self._title_lookup)
        self._assert_no_attributes(element, element_name, builder)
        return Title(kind=element_name, children=children)

    def build_term(self, element: XmlElement, element_name: str = "term") -> Term:
        """Build the ``<term>`` of a variable list entry."""
        builder = "build_term"
        inner_elements = self._inner(element, element_name, builder)
        children = self._build_mixed(inner_elements, element_name, builder, self._title_lookup)
        self._assert_no_attributes(element, element_name, builder)
        return Term(children=children)

    def build_markup(self, element: XmlElement, element_name: str) -> Markup:
        """Build an inline markup span; ``kind`` keeps the element name."""
        builder = "build_markup"
        inner_elements = self._inner(element, element_name, builder)
        children = self._build_mixed(inner_elements, element_name, builder, self._doc_lookup)
        self._assert_no_attributes(element, element_name, builder)
        return Markup(kind=element_name, children=children)

    def build_ulink(self, element: XmlElement, element_name: str = "ulink") -> Ulink:
        """Build an external link; the ``url`` attribute is mandatory."""
        builder = "build_ulink"
        inner_elements = self._inner(element, element_name, builder, required=True)
        children = self._build_mixed(inner_elements, element_name, builder, self._title_lookup)

        url = ""
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_url":
                url = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(url, "missing url", element_name, builder)
        return Ulink(children=children, url=url)

    def build_doc_ref(self, element: XmlElement, element_name: str = "ref") -> DocRef:
        """Build a cross reference inside a description."""
        builder = "build_doc_ref"
        inner_elements = self._inner(element, element_name, builder, required=True)
        children = self._build_mixed(inner_elements, element_name, builder, self._title_lookup)

        ref = DocRef(children=children)
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                ref.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_kindref":
                ref.kindref = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_external":
                ref.external = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(ref.refid, "missing refid", element_name, builder)
        self._require(ref.kindref, "missing kindref", element_name, builder)
        return ref

    def build_ref_text(self, element: XmlElement, element_name: str = "ref") -> RefText:
        """Build a linked-text reference (``refTextType``); the label must be non-empty."""
        builder = "build_ref_text"
        self._require(self.xml.is_inner_element_text(element, element_name), "expected text", element_name, builder)
        ref = RefText(text=self.xml.get_inner_element_text(element, element_name))
        self._require(ref.text, "empty text", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                ref.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_kindref":
                ref.kindref = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_external":
                ref.external = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_tooltip":
                ref.tooltip = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(ref.refid, "missing refid", element_name, builder)
        self._require(ref.kindref, "missing kindref", element_name, builder)
        return ref

    def build_anchor(self, element: XmlElement, element_name: str = "anchor") -> Anchor:
        """Build an ``<anchor>``; stray text content is reported but tolerated."""
        builder = "build_anchor"
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                logger.warning(
                    "Unexpected <anchor> text content %r", self.xml.get_inner_text(inner_element)
                )
            else:
                self._unknown_element(inner_element, element_name, builder)

        anchor = Anchor()
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                anchor.id = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(anchor.id, "missing id", element_name, builder)
        return anchor

    def build_formula(self, element: XmlElement, element_name: str = "formula") -> Formula:
        """Build a ``<formula>`` holding LaTeX text."""
        builder = "build_formula"
        self._require(self.xml.is_inner_element_text(element, element_name), "expected text", element_name, builder)
        formula = Formula(text=self.xml.get_inner_element_text(element, element_name))
        self._require(formula.text, "empty formula", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                formula.id = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(formula.id, "missing id", element_name, builder)
        return formula

    def build_emoji(self, element: XmlElement, element_name: str = "emoji") -> Emoji:
        """Build an ``<emoji>`` leaf."""
        builder = "build_emoji"
        emoji = Emoji()
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_name":
                emoji.name = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_unicode":
                emoji.unicode = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return emoji

    def build_empty_element(self, element: XmlElement, element_name: str) -> EmptyElement:
        """Build ``linebreak``, ``hruler`` or ``nonbreakablespace``."""
        return EmptyElement(kind=element_name)

    def build_entity(self, element: XmlElement, element_name: str) -> Entity:
        """Build a character entity leaf from the entity table."""
        return Entity(kind=element_name, substring=ENTITIES[element_name])

    def build_html_only(self, element: XmlElement, element_name: str = "htmlonly") -> HtmlOnly:
        """Build an ``<htmlonly>`` pass-through block."""
        builder = "build_html_only"
        html_only = HtmlOnly()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                html_only.text += self.xml.get_inner_text(inner_element)
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_block":
                html_only.block = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return html_only

    def build_docbook_only(self, element: XmlElement, element_name: str = "docbookonly") -> DocBookOnly:
        """Build a ``<docbookonly>`` block; it is kept but never rendered."""
        builder = "build_docbook_only"
        docbook_only = DocBookOnly()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                docbook_only.text += self.xml.get_inner_text(inner_element)
            else:
                self._unknown_element(inner_element, element_name, builder)
        return docbook_only

    def _build_title_text_block(self, element: XmlElement, element_name: str, builder: str) -> list[Child]:
        inner_elements = self._inner(element, element_name, builder, required=True)
        children = self._build_mixed(inner_elements, element_name, builder, self._title_lookup)
        self._assert_no_attributes(element, element_name, builder)
        return children

    def build_verbatim(self, element: XmlElement, element_name: str = "verbatim") -> Verbatim:
        """Build a ``<verbatim>`` block."""
        return Verbatim(children=self._build_title_text_block(element, element_name, "build_verbatim"))

    def build_preformatted(self, element: XmlElement, element_name: str = "preformatted") -> Preformatted:
        """Build a ``<preformatted>`` block."""
        return Preformatted(children=self._build_title_text_block(element, element_name, "build_preformatted"))

    def build_heading(self, element: XmlElement, element_name: str = "heading") -> Heading:
        """Build a ``<heading level="N">``."""
        builder = "build_heading"
        inner_elements = self._inner(element, element_name, builder)
        heading = Heading(children=self._build_mixed(inner_elements, element_name, builder, self._title_lookup))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_level":
                heading.level = self._attribute_int(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return heading

    def build_image(self, element: XmlElement, element_name: str = "image") -> Image:
        """Build an ``<image>``; HTML images are collected for copying."""
        builder = "build_image"
        inner_elements = self._inner(element, element_name, builder)
        image = Image(children=self._build_mixed(inner_elements, element_name, builder, self._title_lookup))

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_type":
                image.image_type = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_name":
                image.name = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_width":
                image.width = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_height":
                image.height = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_alt":
                image.alt = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_inline":
                image.inline = self.xml.get_attribute_as_boolean(element, attribute_name)
            elif attribute_name == "@_caption":
                image.caption = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)

        if image.image_type == "html":
            self.xml.images.append(image)
        return image

    def build_blockquote(self, element: XmlElement, element_name: str = "blockquote") -> Blockquote:
        """Build a ``<blockquote>``."""
        builder = "build_blockquote"
        blockquote = Blockquote(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                blockquote.children.append(self.xml.get_inner_text(inner_element))
            elif self.xml.has_inner_element(inner_element, "para"):
                blockquote.children.append(self.build_para(inner_element, "para"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._assert_no_attributes(element, element_name, builder)
        return blockquote

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def build_list(self, element: XmlElement, element_name: str) -> DocList:
        """Build an ``<itemizedlist>`` or ``<orderedlist>``."""
        builder = "build_list"
        doc_list = DocList(kind=element_name, children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                # Whitespace between items.
                continue
            if self.xml.has_inner_element(inner_element, "listitem"):
                doc_list.children.append(self.build_list_item(inner_element, "listitem"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(doc_list.children, "has no list items", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_type":
                doc_list.list_type = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_start":
                doc_list.start = self._attribute_int(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return doc_list

    def build_list_item(self, element: XmlElement, element_name: str = "listitem") -> ListItem:
        """Build a ``<listitem>``; children are paragraphs."""
        builder = "build_list_item"
        item = ListItem(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "para"):
                item.children.append(self.build_para(inner_element, "para"))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_override":
                item.override = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_value":
                item.value = self._attribute_int(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return item

    def build_variable_list(self, element: XmlElement, element_name: str = "variablelist") -> VariableList:
        """Build a ``<variablelist>`` by pairing each entry with the following list item.

        Raises
        ------
        GrammarError
            If a ``listitem`` has no preceding ``varlistentry``, or an entry
            is left without a ``listitem`` at the end of the list

        """
        builder = "build_variable_list"
        variable_list = VariableList(children=[])
        pending: Optional[VarListEntry] = None
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "varlistentry"):
                if pending is not None:
                    self._fail("varlistentry without listitem", element_name, builder)
                pending = self.build_var_list_entry(inner_element, "varlistentry")
            elif self.xml.has_inner_element(inner_element, "listitem"):
                if pending is None:
                    self._fail("listitem without varlistentry", element_name, builder)
                list_item = self.build_list_item(inner_element, "listitem")
                variable_list.children.append(VariableListPair(varlistentry=pending, listitem=list_item))
                pending = None
            else:
                self._unknown_element(inner_element, element_name, builder)

        if pending is not None:
            self._fail("trailing varlistentry without listitem", element_name, builder)
        self._assert_no_attributes(element, element_name, builder)
        return variable_list

    def build_var_list_entry(self, element: XmlElement, element_name: str = "varlistentry") -> VarListEntry:
        """Build a ``<varlistentry>`` holding exactly one ``<term>``."""
        builder = "build_var_list_entry"
        entry = VarListEntry()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "term"):
                entry.term = self._set_once(
                    entry.term, self.build_term(inner_element, "term"), element_name, "term", builder
                )
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(entry.term is not None, "missing term", element_name, builder)
        self._assert_no_attributes(element, element_name, builder)
        return entry

    def build_toc_list(self, element: XmlElement, element_name: str = "toclist") -> TocList:
        """Build an inline ``<toclist>``."""
        builder = "build_toc_list"
        toc_list = TocList(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "tocitem"):
                toc_list.children.append(self.build_toc_item(inner_element, "tocitem"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        return toc_list

    def build_toc_item(self, element: XmlElement, element_name: str = "tocitem") -> TocItem:
        """Build a ``<tocitem>`` entry."""
        builder = "build_toc_item"
        inner_elements = self._inner(element, element_name, builder)
        item = TocItem(children=self._build_mixed(inner_elements, element_name, builder, self._title_lookup))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                item.id = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return item

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def build_table(self, element: XmlElement, element_name: str = "table") -> Table:
        """Build a ``<table>`` with its optional caption and rows."""
        builder = "build_table"
        table = Table(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "caption"):
                table.caption = self._set_once(
                    table.caption, self.build_caption(inner_element, "caption"), element_name, "caption", builder
                )
            elif self.xml.has_inner_element(inner_element, "row"):
                table.children.append(self.build_row(inner_element, "row"))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_rows":
                table.rows_count = self._attribute_int(element, attribute_name)
            elif attribute_name == "@_cols":
                table.cols_count = self._attribute_int(element, attribute_name)
            elif attribute_name == "@_width":
                table.width = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(table.rows_count > 0, "rows must be positive", element_name, builder)
        self._require(table.cols_count > 0, "cols must be positive", element_name, builder)
        return table

    def build_row(self, element: XmlElement, element_name: str = "row") -> Row:
        """Build a table ``<row>``."""
        builder = "build_row"
        row = Row(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "entry"):
                row.children.append(self.build_entry(inner_element, "entry"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._assert_no_attributes(element, element_name, builder)
        return row

    def build_entry(self, element: XmlElement, element_name: str = "entry") -> Entry:
        """Build a table cell."""
        builder = "build_entry"
        entry = Entry(children=[])
        for inner_element in self._inner(element, element_name, builder, required=True):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "para"):
                entry.children.append(self.build_para(inner_element, "para"))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_thead":
                entry.thead = self.xml.get_attribute_as_boolean(element, attribute_name)
            elif attribute_name == "@_colspan":
                entry.colspan = self._attribute_int(element, attribute_name)
            elif attribute_name == "@_rowspan":
                entry.rowspan = self._attribute_int(element, attribute_name)
            elif attribute_name == "@_align":
                entry.align = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_valign":
                entry.valign = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_width":
                entry.width = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_class":
                entry.class_name = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return entry

    def build_caption(self, element: XmlElement, element_name: str = "caption") -> Caption:
        """Build a table ``<caption>``; its id is mandatory."""
        builder = "build_caption"
        inner_elements = self._inner(element, element_name, builder, required=True)
        caption = Caption(children=self._build_mixed(inner_elements, element_name, builder, self._title_lookup))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                caption.id = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(caption.id, "missing id", element_name, builder)
        return caption

    # ------------------------------------------------------------------
    # Simple sections, parameter lists and cross-reference sections
    # ------------------------------------------------------------------

    def build_simple_sect(self, element: XmlElement, element_name: str = "simplesect") -> SimpleSect:
        """Build a ``<simplesect kind="...">``."""
        builder = "build_simple_sect"
        sect = SimpleSect(children=[])
        for inner_element in self._inner(element, element_name, builder, required=True):
            if self.xml.has_inner_text(inner_element):
                sect.children.append(self.xml.get_inner_text(inner_element))
            elif self.xml.is_inner_element_text(inner_element, "title"):
                sect.title = self._set_once(
                    sect.title,
                    self.xml.get_inner_element_text(inner_element, "title"),
                    element_name,
                    "title",
                    builder,
                )
            elif self.xml.has_inner_element(inner_element, "para"):
                sect.children.append(self.build_para(inner_element, "para"))
            else:
                self._unknown_element(inner_element, element_name, builder)

        self._require(self.xml.has_attributes(element), "missing kind", element_name, builder)
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_kind":
                sect.sect_kind = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return sect

    def build_parameter_list(self, element: XmlElement, element_name: str = "parameterlist") -> ParameterList:
        """Build a ``<parameterlist kind="...">``."""
        builder = "build_parameter_list"
        parameter_list = ParameterList(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "parameteritem"):
                parameter_list.children.append(self.build_parameter_item(inner_element, "parameteritem"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(parameter_list.children, "has no parameter items", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_kind":
                parameter_list.list_kind = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return parameter_list

    def build_parameter_item(self, element: XmlElement, element_name: str = "parameteritem") -> ParameterItem:
        """Build a ``<parameteritem>``: name lists and a mandatory description."""
        builder = "build_parameter_item"
        item = ParameterItem()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "parameternamelist"):
                item.name_lists.append(self.build_parameter_name_list(inner_element, "parameternamelist"))
            elif self.xml.has_inner_element(inner_element, "parameterdescription"):
                item.description = self._set_once(
                    item.description,
                    self.build_description(inner_element, "parameterdescription"),
                    element_name,
                    "parameterdescription",
                    builder,
                )
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(item.description is not None, "missing parameterdescription", element_name, builder)
        self._assert_no_attributes(element, element_name, builder)
        return item

    def build_parameter_name_list(
        self, element: XmlElement, element_name: str = "parameternamelist"
    ) -> ParameterNameList:
        """Build a ``<parameternamelist>``."""
        builder = "build_parameter_name_list"
        name_list = ParameterNameList(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "parametertype"):
                name_list.children.append(self.build_parameter_type(inner_element, "parametertype"))
            elif self.xml.has_inner_element(inner_element, "parametername"):
                name_list.children.append(self.build_parameter_name(inner_element, "parametername"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        return name_list

    def _build_linked_children(self, element: XmlElement, element_name: str, builder: str) -> list[LinkedChild]:
        children: list[LinkedChild] = []
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                children.append(self.xml.get_inner_text(inner_element))
            elif self.xml.has_inner_element(inner_element, "ref"):
                children.append(self.build_ref_text(inner_element, "ref"))
            else:
                self._unknown_element(inner_element, element_name, builder)
        return children

    def build_parameter_type(self, element: XmlElement, element_name: str = "parametertype") -> ParameterType:
        """Build a ``<parametertype>``."""
        builder = "build_parameter_type"
        children: list[Child] = list(self._build_linked_children(element, element_name, builder))
        self._assert_no_attributes(element, element_name, builder)
        return ParameterType(children=children)

    def build_parameter_name(self, element: XmlElement, element_name: str = "parametername") -> ParameterName:
        """Build a ``<parametername>`` with its optional direction."""
        builder = "build_parameter_name"
        name = ParameterName(children=list(self._build_linked_children(element, element_name, builder)))
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_direction":
                name.direction = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return name

    def build_xref_sect(self, element: XmlElement, element_name: str = "xrefsect") -> XrefSect:
        """Build an ``<xrefsect>`` such as a todo or deprecated entry."""
        builder = "build_xref_sect"
        xref_sect = XrefSect()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "xreftitle"):
                xref_sect.xreftitle = self._set_once(
                    xref_sect.xreftitle,
                    self._text_child(inner_element, "xreftitle", builder),
                    element_name,
                    "xreftitle",
                    builder,
                )
            elif self.xml.has_inner_element(inner_element, "xrefdescription"):
                xref_sect.xrefdescription = self._set_once(
                    xref_sect.xrefdescription,
                    self.build_description(inner_element, "xrefdescription"),
                    element_name,
                    "xrefdescription",
                    builder,
                )
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._require(xref_sect.xrefdescription is not None, "missing xrefdescription", element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                xref_sect.id = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(xref_sect.id, "missing id", element_name, builder)
        return xref_sect

    # ------------------------------------------------------------------
    # Program listings
    # ------------------------------------------------------------------

    def build_listing(self, element: XmlElement, element_name: str = "programlisting") -> ProgramListing:
        """Build a ``<programlisting>`` of code lines."""
        builder = "build_listing"
        listing = ProgramListing(kind=element_name, children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "codeline"):
                listing.children.append(self.build_code_line(inner_element, "codeline"))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_filename":
                listing.filename = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return listing

    def build_code_line(self, element: XmlElement, element_name: str = "codeline") -> CodeLine:
        """Build one ``<codeline>``."""
        builder = "build_code_line"
        code_line = CodeLine(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "highlight"):
                code_line.children.append(self.build_highlight(inner_element, "highlight"))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_lineno":
                code_line.lineno = self._attribute_int(element, attribute_name)
            elif attribute_name == "@_refid":
                code_line.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_refkind":
                code_line.refkind = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_external":
                code_line.external = self.xml.get_attribute_as_boolean(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return code_line

    def build_highlight(self, element: XmlElement, element_name: str = "highlight") -> Highlight:
        """Build a ``<highlight class="...">`` token run."""
        builder = "build_highlight"
        highlight = Highlight(children=[])
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                highlight.children.append(self.xml.get_inner_text(inner_element))
            elif self.xml.has_inner_element(inner_element, "sp"):
                highlight.children.append(self.build_sp(inner_element, "sp"))
            elif self.xml.has_inner_element(inner_element, "ref"):
                highlight.children.append(self.build_ref_text(inner_element, "ref"))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_class":
                highlight.highlight_class = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(highlight.highlight_class, "missing class", element_name, builder)
        return highlight

    def build_sp(self, element: XmlElement, element_name: str = "sp") -> Sp:
        """Build an ``<sp/>`` space run."""
        builder = "build_sp"
        sp = Sp()
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_value":
                sp.value = self._attribute_int(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        return sp


__all__ = ["CommandGroup", "DescriptionBuilder", "ElementBuilder"]
