#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/parsers/index.py
"""Builders for ``index.xml`` and ``Doxyfile.xml``."""

from __future__ import annotations

import logging
from typing import Union

from doxy2md.ast.compounds import Doxyfile, DoxyfileOption, DoxygenIndex, IndexCompound, IndexMember
from doxy2md.parsers.base import BaseBuilder
from doxy2md.parsers.xml_access import XmlElement

logger = logging.getLogger(__name__)


class IndexBuilder(BaseBuilder):
    """Build the index of compounds and the Doxyfile configuration dump."""

    def _root_attributes(
        self, element: XmlElement, element_name: str, builder: str, root: Union[DoxygenIndex, Doxyfile]
    ) -> None:
        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_version":
                root.version = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_lang":
                root.lang = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_noNamespaceSchemaLocation":
                root.no_namespace_schema_location = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(root.version, "missing version", element_name, builder)
        self._require(root.lang, "missing lang", element_name, builder)

    # ------------------------------------------------------------------
    # index.xml
    # ------------------------------------------------------------------

    def build_doxygen_index(self, element: XmlElement, element_name: str = "doxygenindex") -> DoxygenIndex:
        """Build the ``<doxygenindex>`` root, keeping the compound order."""
        builder = "build_doxygen_index"
        index = DoxygenIndex()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "compound"):
                index.compounds.append(self.build_index_compound(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._root_attributes(element, element_name, builder, index)
        return index

    def build_index_compound(self, element: XmlElement, element_name: str = "compound") -> IndexCompound:
        """Build one ``<compound>`` of the index."""
        builder = "build_index_compound"
        compound = IndexCompound()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "name"):
                compound.name = self._text_child(inner_element, "name", builder)
            elif self.xml.has_inner_element(inner_element, "member"):
                compound.members.append(self.build_index_member(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                compound.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_kind":
                compound.compound_kind = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(compound.refid, "missing refid", element_name, builder)
        self._require(compound.compound_kind, "missing kind", element_name, builder)
        return compound

    def build_index_member(self, element: XmlElement, element_name: str = "member") -> IndexMember:
        """Build one ``<member>`` of an index compound."""
        builder = "build_index_member"
        member = IndexMember()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "name"):
                member.name = self._text_child(inner_element, "name", builder)
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_refid":
                member.refid = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_kind":
                member.member_kind = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(member.refid, "missing refid", element_name, builder)
        self._require(member.member_kind, "missing kind", element_name, builder)
        return member

    # ------------------------------------------------------------------
    # Doxyfile.xml
    # ------------------------------------------------------------------

    def build_doxyfile(self, element: XmlElement, element_name: str = "doxyfile") -> Doxyfile:
        """Build the ``<doxyfile>`` root."""
        builder = "build_doxyfile"
        doxyfile = Doxyfile()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "option"):
                doxyfile.options.append(self.build_doxyfile_option(inner_element))
            else:
                self._unknown_element(inner_element, element_name, builder)
        self._root_attributes(element, element_name, builder, doxyfile)
        return doxyfile

    def build_doxyfile_option(self, element: XmlElement, element_name: str = "option") -> DoxyfileOption:
        """Build one ``<option>``; all three attributes are mandatory."""
        builder = "build_doxyfile_option"
        option = DoxyfileOption()
        for inner_element in self._inner(element, element_name, builder):
            if self.xml.has_inner_text(inner_element):
                continue
            if self.xml.has_inner_element(inner_element, "value"):
                option.values.append(self._text_child(inner_element, "value", builder))
            else:
                self._unknown_element(inner_element, element_name, builder)

        for attribute_name in self.xml.get_attribute_names(element):
            if attribute_name == "@_id":
                option.id = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_default":
                option.default = self.xml.get_attribute_as_string(element, attribute_name)
            elif attribute_name == "@_type":
                option.option_type = self.xml.get_attribute_as_string(element, attribute_name)
            else:
                self._unknown_attribute(attribute_name, element_name, builder)
        self._require(option.id, "missing id", element_name, builder)
        self._require(option.default, "missing default", element_name, builder)
        self._require(option.option_type, "missing type", element_name, builder)
        return option


__all__ = ["IndexBuilder"]
