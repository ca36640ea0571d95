#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/compounds.py
"""Renderers for linked text, references and member sections.

Signatures are rendered as HTML tables so that linked type names survive
in MDX. Each member section is rendered twice on a page: once as a compact
index near the top (:meth:`SectionDefRenderer.render_index_lines`) and once
with the full member documentation (:meth:`SectionDefRenderer.render_to_lines`).

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from doxy2md.ast.compounds import (
    CompoundRef,
    EnumValue,
    Include,
    InnerRef,
    LinkedText,
    ListOfAllMembers,
    Location,
    MemberDef,
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
from doxy2md.ast.nodes import MemberProgramListing
from doxy2md.ast.sections import section_header_name
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RendererRegistry
from doxy2md.utils.permalinks import get_permalink_anchor
from doxy2md.utils.text import join_with_last

if TYPE_CHECKING:
    from doxy2md.renderers.workspace import RenderWorkspace

logger = logging.getLogger(__name__)

# Member kinds whose initializer is part of the prototype.
_INITIALIZED_KINDS = ("variable", "define")


# ----------------------------------------------------------------------------
# Linked text and references
# ----------------------------------------------------------------------------


class RefTextRenderer(ElementStringRenderer):
    """Render a ``<ref>`` inside linked text; unresolved ids keep the label."""

    def render_to_string(self, element: RefText, mode: str) -> str:
        label = self.workspace.render_escaped(element.text.strip(), mode)
        if mode == "text":
            return label
        if element.external:
            logger.debug("external %s ignored in %s", element.external, type(self).__name__)
        permalink = self.workspace.get_permalink(element.refid, element.kindref or "compound")
        if permalink is None:
            logger.debug("Reference %s (%s) not resolved", element.refid, element.text)
        return self.workspace.render_link(label, permalink)


class LinkedTextRenderer(ElementStringRenderer):
    def render_to_string(self, element: LinkedText, mode: str) -> str:
        return self.workspace.render_string(element.children, mode).strip()


class ParamRenderer(ElementStringRenderer):
    """Render a function or template parameter as ``type name[array] = default``."""

    def render_to_string(self, element: Param, mode: str) -> str:
        parts: list[str] = []
        if element.attributes:
            parts.append(self.workspace.render_escaped(element.attributes, mode))
        if element.type is not None:
            parts.append(self.workspace.render_string(element.type, mode))
        name = element.declname or element.defname
        if name:
            parts.append(self.workspace.render_escaped(name, mode))
        text = " ".join(part for part in parts if part)
        if element.array:
            text += self.workspace.render_escaped(element.array, mode)
        if element.defval is not None:
            text += " = " + self.workspace.render_string(element.defval, mode)
        return text


class TemplateParamListRenderer(ElementStringRenderer):
    def render_to_string(self, element: TemplateParamList, mode: str) -> str:
        params = [self.workspace.render_string(param, mode) for param in element.iter_child_nodes()]
        opening = self.workspace.render_escaped("template <", mode)
        closing = self.workspace.render_escaped(">", mode)
        return opening + ", ".join(params) + closing


class IncludeRenderer(ElementStringRenderer):
    """Render an include directive, linked to the file page when known."""

    def render_to_string(self, element: Include, mode: str) -> str:
        header = f'"{element.text}"' if element.local else f"<{element.text}>"
        label = self.workspace.render_escaped(header, mode)
        if mode == "text":
            return f"#include {label}"
        permalink = self.workspace.get_page_permalink(element.refid) if element.refid else None
        return f"#include {self.workspace.render_link(label, permalink)}"


class InnerRefRenderer(ElementStringRenderer):
    def render_to_string(self, element: InnerRef, mode: str) -> str:
        label = self.workspace.render_escaped(element.text, mode)
        if mode == "text":
            return label
        return self.workspace.render_link(label, self.workspace.get_page_permalink(element.refid))


class CompoundRefRenderer(ElementStringRenderer):
    def render_to_string(self, element: CompoundRef, mode: str) -> str:
        label = self.workspace.render_escaped(element.text, mode)
        if mode == "text" or not element.refid:
            return label
        return self.workspace.render_link(label, self.workspace.get_page_permalink(element.refid))


class MemberLinkRenderer(ElementStringRenderer):
    """Render ``reimplements`` and ``references`` entries as member links."""

    def render_to_string(self, element: Union[Reimplement, Reference], mode: str) -> str:
        label = self.workspace.render_escaped(element.text, mode)
        if mode == "text":
            return label
        return self.workspace.render_link(label, self.workspace.get_permalink(element.refid, "member"))


class LocationRenderer(ElementLinesRenderer):
    """Render the "Definition at line N of file F" sentence.

    The file is recorded as touched, so it shows up in the page footer.
    """

    def render_to_lines(self, element: Location, mode: str) -> list[str]:
        if not element.file:
            return []
        self.workspace.touch_file(element.file)

        file_compound = self.workspace.files_by_path.get(element.file)
        file_label = self.workspace.render_escaped(element.file.rsplit("/", 1)[-1], mode)
        file_permalink = None
        if file_compound is not None:
            file_permalink = self.workspace.get_page_permalink(file_compound.id)
        else:
            logger.debug("No file page for %s", element.file)

        if mode != "text":
            file_label = self.workspace.render_link(file_label, file_permalink)

        line = element.line
        if line is None:
            return ["", f"Declaration in file {file_label}."]
        line_label = str(line)
        if mode != "text" and file_permalink is not None:
            line_label = self.workspace.render_link(line_label, f"{file_permalink}/#l{line:05d}")
        return ["", f"Definition at line {line_label} of file {file_label}."]


# ----------------------------------------------------------------------------
# Table of contents
# ----------------------------------------------------------------------------


class TableOfContentsRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: TableOfContents, mode: str) -> list[str]:
        lines = ['<ul class="doxyTableOfContents">']
        for child in element.iter_child_nodes():
            lines.extend(self.workspace.render_lines(child, mode))
        lines.append("</ul>")
        return lines


class TocSectRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: TocSect, mode: str) -> list[str]:
        name = self.workspace.render_escaped(element.name, "html")
        anchor = get_permalink_anchor(element.reference)
        if not element.table_of_contents:
            return [f'<li><a href="#{anchor}">{name}</a></li>']
        lines = [f'<li><a href="#{anchor}">{name}</a>']
        for nested in element.table_of_contents:
            lines.extend(self.workspace.render_lines(nested, mode))
        lines.append("</li>")
        return lines


# ----------------------------------------------------------------------------
# Members
# ----------------------------------------------------------------------------


class ListOfAllMembersRenderer(ElementLinesRenderer):
    """Render the collapsible list of all the members of a class, inherited ones included."""

    def render_to_lines(self, element: ListOfAllMembers, mode: str) -> list[str]:
        items = [child for child in element.iter_child_nodes() if isinstance(child, MemberRefListItem)]
        if not items:
            return []

        workspace = self.workspace
        lines = ["", "## All Members", ""]
        if mode == "text":
            lines.extend(f"- {item.scope}::{item.name}" if item.scope else f"- {item.name}" for item in items)
            return lines

        lines.extend(["<details>", f"<summary>{len(items)} members</summary>", "", '<ul class="doxyAllMembers">'])
        for item in items:
            label = workspace.render_escaped(f"{item.scope}::{item.name}" if item.scope else item.name, "html")
            lines.append(f"<li>{workspace.render_link(label, workspace.get_permalink(item.refid, 'member'))}</li>")
        lines.extend(["</ul>", "", "</details>"])
        return lines


class MemberDefRenderer(ElementLinesRenderer):
    """Render the documentation block of one member.

    The block holds the anchor and heading, the prototype table, the enum
    values, the descriptions, the cross references and the location.
    """

    def render_to_lines(self, element: MemberDef, mode: str) -> list[str]:
        workspace = self.workspace
        anchor = get_permalink_anchor(element.id)
        name = workspace.render_escaped(element.name, "markdown")

        lines = ["", f"### {name} {{#{anchor}}}", "", '<div class="doxyMemberItem">']
        lines.extend(self.render_prototype_lines(element))

        lines.append('<div class="doxyMemberDoc">')
        lines.extend(workspace.render_lines(element.brief_description, mode))
        lines.extend(workspace.render_lines(element.detailed_description, mode))
        lines.extend(workspace.render_lines(element.inbody_description, mode))

        if element.enum_values:
            lines.extend(self.render_enum_lines(element.enum_values, mode))

        lines.extend(self._reference_lines("Reimplemented from", element.reimplements, mode))
        lines.extend(self._reference_lines("Reimplemented in", element.reimplemented_by, mode))
        lines.extend(self._reference_lines("References", element.references, mode))
        lines.extend(self._reference_lines("Referenced by", element.referenced_by, mode))

        if element.location is not None:
            lines.extend(workspace.render_lines(element.location, mode))
            lines.extend(self._body_listing_lines(element, mode))

        lines.extend(["", "</div>", "</div>"])
        return lines

    def render_prototype_lines(self, element: MemberDef) -> list[str]:
        """Render the signature table of a member."""
        lines = ['<div class="doxyMemberProto">']
        if element.template_param_list is not None:
            template = self.workspace.render_string(element.template_param_list, "html")
            lines.append(f'<div class="doxyMemberTemplate">{template}</div>')
        lines.append("<table>")
        lines.append("<tr>")
        lines.append(f'<td class="doxyMemberName">{self.render_signature(element, "html")}</td>')
        labels = element.labels
        if labels:
            label_text = "".join(f'<span class="doxyMemberLabel">{label}</span>' for label in labels)
            lines.append(f'<td class="doxyMemberLabels">{label_text}</td>')
        lines.append("</tr>")
        lines.append("</table>")
        lines.append("</div>")
        return lines

    def render_signature(self, element: MemberDef, mode: str) -> str:
        """Return the one line declaration of a member."""
        workspace = self.workspace
        name = workspace.render_escaped(element.name, mode)

        if element.member_kind == "define":
            text = f"#define {name}"
            if element.params:
                params = [
                    workspace.render_escaped(param.defname or param.declname or "", mode) for param in element.params
                ]
                text += "(" + ", ".join(params) + ")"
            if element.initializer is not None:
                separator = "   " if mode == "text" else "&nbsp;&nbsp;&nbsp;"
                text += separator + workspace.render_string(element.initializer, mode)
            return text

        if element.member_kind == "enum":
            prefix = "enum class" if element.strong else "enum"
            return f"{prefix} {name}"

        parts: list[str] = []
        if element.member_kind == "typedef" and element.definition and element.definition.startswith("using "):
            parts.append("using")
        elif element.member_kind == "typedef":
            parts.append("typedef")
        elif element.member_kind == "friend":
            parts.append("friend")
        type_text = workspace.render_string(element.type, mode)
        if type_text:
            parts.append(type_text)
        parts.append(name)
        text = " ".join(parts)
        if element.argsstring:
            text += workspace.render_escaped(element.argsstring, mode)
        if element.bitfield:
            text += " : " + workspace.render_escaped(element.bitfield, mode)
        if element.member_kind in _INITIALIZED_KINDS and element.initializer is not None:
            text += " " + workspace.render_string(element.initializer, mode)
        return text

    def render_enum_lines(self, enum_values: list[EnumValue], mode: str) -> list[str]:
        """Render the values of an enum as a two column table."""
        lines = [
            "",
            '<dl class="doxyEnumList">',
            "<dt>Enumeration values</dt>",
            "<dd>",
            '<table class="doxyEnumTable">',
        ]
        for value in enum_values:
            anchor = get_permalink_anchor(value.id)
            name = self.workspace.render_escaped(value.name, "html")
            if value.initializer is not None:
                name += " " + self.workspace.render_string(value.initializer, "html")
            description = " ".join(
                part
                for part in (
                    self.workspace.render_string(value.brief_description, "html").strip(),
                    self.workspace.render_string(value.detailed_description, "html").strip(),
                )
                if part
            )
            lines.append('<tr class="doxyEnumItem">')
            lines.append(f'<td class="doxyEnumItemName"><a id="{anchor}"></a>{name}</td>')
            lines.append(f'<td class="doxyEnumItemDescription">{description}</td>')
            lines.append("</tr>")
        lines.extend(["</table>", "</dd>", "</dl>"])
        return lines

    def _reference_lines(self, title: str, references: list, mode: str) -> list[str]:
        if not references:
            return []
        links = [self.workspace.render_string(reference, mode) for reference in references]
        return ["", f"{title} {join_with_last(links, ', ', ' and ')}."]

    def _body_listing_lines(self, element: MemberDef, mode: str) -> list[str]:
        location = element.location
        if location is None or not location.bodyfile or not location.bodystart or not location.bodyend:
            return []
        if location.bodyend < location.bodystart:
            return []
        file_compound = self.workspace.files_by_path.get(location.bodyfile)
        if file_compound is None or file_compound.program_listing is None:
            return []
        listing = MemberProgramListing.from_listing(
            file_compound.program_listing, location.bodystart, location.bodyend
        )
        return self.workspace.render_lines(listing, mode)


class SectionDefRenderer(ElementLinesRenderer):
    """Render a member section, as an index or with full documentation.

    Members are taken from ``member_defs`` and from the ``members``
    references, which are resolved through the workspace member lookup.
    Both renderings list members sorted by name.
    """

    def members_of(self, element: SectionDef) -> list[MemberDef]:
        members = list(element.member_defs)
        for member_ref in element.members:
            member_def = self.workspace.member_defs_by_id.get(member_ref.refid)
            if member_def is None:
                logger.debug("Member %s (%s) has no definition", member_ref.refid, member_ref.name)
                continue
            members.append(member_def)
        return sorted(members, key=lambda member: member.name)

    def render_index_lines(self, element: SectionDef, mode: str) -> list[str]:
        """Render the compact member table shown near the top of a page."""
        members = self.members_of(element)
        header = section_header_name(element)
        if not members or not header:
            return []

        lines = ["", f"## {header} Index", "", '<table class="doxyMembersIndex">']
        for member in members:
            anchor = get_permalink_anchor(member.id)
            signature = MemberDefRenderer(self.workspace).render_signature(member, "html")
            lines.append('<tr class="doxyMemberIndexItem">')
            lines.append(f'<td class="doxyMemberIndexItemName"><a href="#{anchor}">{signature}</a></td>')
            lines.append("</tr>")
            brief = self.workspace.render_string(member.brief_description, "html").strip()
            if brief:
                lines.append('<tr class="doxyMemberIndexDescription">')
                lines.append(f"<td>{brief}</td>")
                lines.append("</tr>")
        lines.append("</table>")
        return lines

    def render_to_lines(self, element: SectionDef, mode: str) -> list[str]:
        members = self.members_of(element)
        header = section_header_name(element)
        if not members or not header:
            return []

        lines = ["", '<div class="doxySectionDef">', "", f"## {header}"]
        lines.extend(self.workspace.render_lines(element.description, mode))
        for member in members:
            lines.extend(self.workspace.render_lines(member, mode))
        lines.extend(["", "</div>"])
        return lines


def register_compound_renderers(registry: RendererRegistry, workspace: RenderWorkspace) -> None:
    """Register the linked text, reference and member renderers."""
    member_link = MemberLinkRenderer(workspace)

    registry.register_string(RefText, RefTextRenderer(workspace))
    registry.register_string(LinkedText, LinkedTextRenderer(workspace))
    registry.register_string(Param, ParamRenderer(workspace))
    registry.register_string(TemplateParamList, TemplateParamListRenderer(workspace))
    registry.register_string(Include, IncludeRenderer(workspace))
    registry.register_string(InnerRef, InnerRefRenderer(workspace))
    registry.register_string(CompoundRef, CompoundRefRenderer(workspace))
    registry.register_string(Reimplement, member_link)
    registry.register_string(Reference, member_link)
    registry.register_lines(Location, LocationRenderer(workspace))
    registry.register_lines(TableOfContents, TableOfContentsRenderer(workspace))
    registry.register_lines(TocSect, TocSectRenderer(workspace))
    registry.register_lines(ListOfAllMembers, ListOfAllMembersRenderer(workspace))
    registry.register_lines(MemberDef, MemberDefRenderer(workspace))
    registry.register_lines(SectionDef, SectionDefRenderer(workspace))


def find_section_renderer(workspace: RenderWorkspace) -> Optional[SectionDefRenderer]:
    """Return the registered section renderer, if it supports index rendering."""
    renderer = workspace.registry.get_lines_renderer(SectionDef)
    if isinstance(renderer, SectionDefRenderer):
        return renderer
    return None


__all__ = [
    "ListOfAllMembersRenderer",
    "LocationRenderer",
    "MemberDefRenderer",
    "RefTextRenderer",
    "SectionDefRenderer",
    "find_section_renderer",
    "register_compound_renderers",
]
