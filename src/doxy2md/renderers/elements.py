#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/elements.py
"""Renderers for the description grammar.

Paragraph content is emitted as inline HTML embedded in Markdown/MDX, the
way Doxygen's own HTML output is structured: markup spans become ``<b>``,
``<em>`` and friends, blocks such as lists and tables become HTML blocks
with ``doxy*`` CSS classes, and the ``note``, ``warning``, ``attention``
and ``important`` simple sections become ``:::`` admonitions.

In ``text`` mode the renderers drop the markup and keep the words.

"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional, Union

from doxy2md.ast.compounds import RefText
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
    ParameterList,
    ParameterName,
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
    TocList,
    Ulink,
    VariableList,
    VariableListPair,
    Verbatim,
    XrefSect,
)
from doxy2md.constants import HIGHLIGHT_CLASSES, PARAMETER_LIST_TITLES, SIMPLE_SECT_TITLES
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RendererRegistry
from doxy2md.utils.escape import escape_html
from doxy2md.utils.permalinks import get_permalink_anchor
from doxy2md.utils.text import strip_leading_and_trailing_newlines

if TYPE_CHECKING:
    from doxy2md.renderers.workspace import RenderWorkspace

logger = logging.getLogger(__name__)

_MARKUP_TAGS: dict[str, str] = {
    "bold": "b",
    "emphasis": "em",
    "underline": "u",
    "subscript": "sub",
    "superscript": "sup",
    "center": "center",
    "small": "small",
    "cite": "cite",
    "del": "del",
    "ins": "ins",
    "s": "s",
    "strike": "strike",
}

_INLINE_NODES = (Markup, Ulink, DocRef, RefText, Image, Anchor, Formula, Emoji, Entity)

_TRAILING_PERIOD = re.compile(r"\.$")
_URL = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


def is_inline(child: Union[str, DocumentNode]) -> bool:
    """Return True for paragraph content that belongs to an inline run."""
    if isinstance(child, str):
        return True
    if isinstance(child, EmptyElement):
        return child.kind != "hruler"
    return isinstance(child, _INLINE_NODES)


def _definition_lines(title: str, body: str) -> list[str]:
    lines = ['<dl class="doxySectionUser">', f"<dt>{title}</dt>"]
    if not body:
        lines.append("<dd></dd>")
    elif "\n" not in body:
        lines.append(f"<dd>{body}</dd>")
    else:
        lines.append("<dd>")
        lines.extend(body.split("\n"))
        lines.append("</dd>")
    lines.append("</dl>")
    return lines


# ----------------------------------------------------------------------------
# Descriptions and paragraphs
# ----------------------------------------------------------------------------


class DescriptionRenderer(ElementLinesRenderer):
    """Render the paragraphs and sections of a description block."""

    def render_to_lines(self, element: Description, mode: str) -> list[str]:
        if element.title:
            logger.debug("Description title %r ignored", element.title)
        return self.workspace.render_lines(element.children, mode)


class InternalRenderer(ElementLinesRenderer):
    """Render ``<internal>`` content like any other description content."""

    def render_to_lines(self, element: Internal, mode: str) -> list[str]:
        return self.workspace.render_lines(element.children, mode)


class ParaRenderer(ElementLinesRenderer):
    """Render a paragraph as inline runs separated by blocks.

    Consecutive inline children are concatenated without any added
    whitespace and trimmed; block children are rendered to their own lines.
    In ``html`` mode runs are wrapped in ``<p>`` unless ``skip_para`` is set.
    """

    def render_to_lines(self, element: Para, mode: str) -> list[str]:
        lines: list[str] = []
        run: list[str] = []
        for child in element.children or []:
            if is_inline(child):
                run.append(self.workspace.render_string(child, mode))
            else:
                self._flush(run, lines, element, mode)
                run = []
                lines.extend(self.workspace.render_lines(child, mode))
        self._flush(run, lines, element, mode)
        return lines

    @staticmethod
    def _flush(run: list[str], lines: list[str], element: Para, mode: str) -> None:
        text = "".join(run).strip()
        if not text:
            return
        lines.append("")
        if mode == "html" and not element.skip_para:
            lines.append(f"<p>{text}</p>")
            lines.append("")
        else:
            lines.append(text)


class TextContainerRenderer(ElementStringRenderer):
    """Render titles, terms and parameter names as their inline content."""

    def render_to_string(self, element: DocumentNode, mode: str) -> str:
        return self.workspace.render_string(element.children, mode)


class SectRenderer(ElementLinesRenderer):
    """Render ``<sect1>``..``<sect6>`` as Markdown headings one level down."""

    def render_to_lines(self, element: Sect, mode: str) -> list[str]:
        lines: list[str] = []
        title = _TRAILING_PERIOD.sub("", self.workspace.render_string(element.title, mode).strip())
        if title:
            lines.append("")
            heading = "#" * (element.level + 1)
            if element.id:
                lines.append(f"{heading} {title} {{#{get_permalink_anchor(element.id)}}}")
            else:
                lines.append(f"{heading} {title}")
        lines.append("")
        lines.extend(self.workspace.render_lines(element.children, mode))
        return lines


class HeadingRenderer(ElementLinesRenderer):
    """Render ``<heading level="N">`` as a Markdown heading."""

    def render_to_lines(self, element: Heading, mode: str) -> list[str]:
        level = element.level or 1
        if level == 1 and self.workspace.options.verbose:
            logger.warning("Level 1 heading interferes with the page title")
        content = self.workspace.render_string(element.children, mode).strip()
        return ["", f"{'#' * level} {content}"]


# ----------------------------------------------------------------------------
# Inline content
# ----------------------------------------------------------------------------


class MarkupRenderer(ElementStringRenderer):
    """Render markup spans as the matching HTML tags."""

    def render_to_string(self, element: Markup, mode: str) -> str:
        content = self.workspace.render_string(element.children, mode)
        if mode == "text":
            return content
        if element.kind == "computeroutput":
            return f'<span class="doxyComputerOutput">{content}</span>'
        tag = _MARKUP_TAGS.get(element.kind)
        if tag is None:
            logger.error("markup %s not implemented yet in %s", element.kind, type(self).__name__)
            return content
        return f"<{tag}>{content}</{tag}>"


class UlinkRenderer(ElementStringRenderer):
    def render_to_string(self, element: Ulink, mode: str) -> str:
        content = self.workspace.render_string(element.children, mode)
        if mode == "text":
            return content
        return f'<a href="{escape_html(element.url)}">{content}</a>'


class DocRefRenderer(ElementStringRenderer):
    """Render a description cross reference, linked when the target has a page."""

    def render_to_string(self, element: DocRef, mode: str) -> str:
        if element.external:
            logger.debug("external %s ignored in %s", element.external, type(self).__name__)
        content = self.workspace.render_string(element.children, mode)
        if mode == "text" or not element.refid:
            return content
        permalink = self.workspace.get_permalink(element.refid, element.kindref)
        if permalink is None:
            logger.debug("Reference %s not resolved, rendered as plain text", element.refid)
        return self.workspace.render_link(content, permalink)


class AnchorRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: Anchor, mode: str) -> list[str]:
        if mode == "text":
            return []
        return [f'<a id="{get_permalink_anchor(element.id)}"></a>']


class FormulaRenderer(ElementStringRenderer):
    """Render LaTeX formulas as code; they are not typeset."""

    def render_to_string(self, element: Formula, mode: str) -> str:
        if mode == "text":
            return element.text
        if self.workspace.options.verbose:
            logger.info("LaTeX formula %s not rendered properly", element.text)
        return f"<code>{escape_html(element.text)}</code>"


class EmojiRenderer(ElementStringRenderer):
    def render_to_string(self, element: Emoji, mode: str) -> str:
        if mode == "text":
            return element.unicode
        return f'<span class="doxyEmoji">{element.unicode}</span>'


class EmptyElementRenderer(ElementStringRenderer):
    """Render ``hruler``, ``linebreak`` and ``nonbreakablespace``."""

    _HTML = {"hruler": "\n<hr/>\n", "linebreak": "\n<br/>", "nonbreakablespace": "&nbsp;"}
    _TEXT = {"hruler": "\n", "linebreak": "\n", "nonbreakablespace": " "}

    def render_to_string(self, element: EmptyElement, mode: str) -> str:
        table = self._TEXT if mode == "text" else self._HTML
        text = table.get(element.kind)
        if text is None:
            self._not_rendered(element, element.kind)
            return ""
        return text


class EntityRenderer(ElementStringRenderer):
    def render_to_string(self, element: Entity, mode: str) -> str:
        return self.workspace.render_string(element.substring, mode)


class HtmlOnlyRenderer(ElementStringRenderer):
    """Pass ``<htmlonly>`` content through unescaped."""

    def render_to_string(self, element: HtmlOnly, mode: str) -> str:
        if mode == "text":
            return ""
        return element.text


class DocBookOnlyRenderer(ElementStringRenderer):
    def render_to_string(self, element: DocBookOnly, mode: str) -> str:
        logger.debug("docbookonly content skipped")
        return ""


class VerbatimRenderer(ElementStringRenderer):
    """Render ``<verbatim>`` and ``<preformatted>`` as ``<pre><code>`` blocks."""

    def render_to_string(self, element: Union[Verbatim, Preformatted], mode: str) -> str:
        if mode == "text":
            return element.text_content()
        content = strip_leading_and_trailing_newlines(self.workspace.render_string(element.children, "html"))
        return f"\n\n<pre><code>{content}\n</code></pre>\n"


class ImageRenderer(ElementStringRenderer):
    """Render HTML images as ``<figure>`` blocks; LaTeX images are skipped."""

    def render_to_string(self, element: Image, mode: str) -> str:
        if element.image_type == "latex":
            return ""
        if element.image_type != "html":
            logger.error("Image type %s not rendered in %s", element.image_type, type(self).__name__)
            return ""
        if mode == "text":
            return element.caption or element.text_content().strip()

        parts = ["\n<figure>\n  <img"]
        if element.name is not None:
            parts.append(f' src="{self._image_source(element.name)}"')
        if element.width is not None:
            parts.append(f' width="{escape_html(element.width)}"')
        if element.height is not None:
            parts.append(f' height="{escape_html(element.height)}"')
        if element.alt is not None:
            parts.append(f' alt="{escape_html(element.alt)}"')
        if element.inline:
            parts.append(' class="inline"')
        parts.append("></img>")

        if element.caption is not None:
            caption = self.workspace.render_string(element.caption, "html")
        else:
            caption = self.workspace.render_string(element.children, "html").strip()
        if caption:
            parts.append(f"\n  <figcaption>{caption}</figcaption>")
        parts.append("\n</figure>")
        return "".join(parts)

    def _image_source(self, name: str) -> str:
        if _URL.match(name):
            return escape_html(name)
        return escape_html(f"{self.workspace.options.page_base_url}images/{name}")


# ----------------------------------------------------------------------------
# Blocks
# ----------------------------------------------------------------------------


class BlockquoteRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: Blockquote, mode: str) -> list[str]:
        lines = ['<blockquote class="doxyBlockQuote">']
        lines.extend(self.workspace.render_lines(element.children, "html"))
        lines.append("</blockquote>")
        return lines


def _inline_paragraphs(workspace: RenderWorkspace, children: Optional[list[Any]]) -> str:
    """Render paragraphs without ``<p>`` wrappers, separated by blank lines."""
    parts: list[str] = []
    for child in children or []:
        if isinstance(child, Para):
            child = replace(child, skip_para=True)
        elif isinstance(child, str) and not child.strip():
            continue
        text = workspace.render_string(child, "html").strip()
        if text:
            parts.append(text)
    return "\n\n".join(parts)


class DocListRenderer(ElementLinesRenderer):
    """Render ``<itemizedlist>`` and ``<orderedlist>``."""

    def render_to_lines(self, element: DocList, mode: str) -> list[str]:
        items = [child for child in element.iter_child_nodes() if isinstance(child, ListItem)]
        check = " check" if any(item.override is not None for item in items) else ""

        lines = [""]
        if element.kind == "orderedlist":
            lines.append(f'<ol class="doxyList" type="{element.list_type or "1"}">')
        else:
            lines.append(f'<ul class="doxyList{check}">')

        for item in items:
            item_class = f' class="{item.override}"' if item.override is not None else ""
            content = _inline_paragraphs(self.workspace, item.children)
            if content:
                lines.append(f"<li{item_class}>{content}</li>")
            if item.value is not None and self.workspace.options.verbose:
                logger.warning("List item value %s ignored", item.value)

        lines.append("</ol>" if element.kind == "orderedlist" else "</ul>")
        if element.start is not None and self.workspace.options.verbose:
            logger.warning("List start %s ignored", element.start)
        return lines


class ListItemRenderer(ElementStringRenderer):
    def render_to_string(self, element: ListItem, mode: str) -> str:
        return f"<li>{_inline_paragraphs(self.workspace, element.children)}</li>"


class TocListRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: TocList, mode: str) -> list[str]:
        lines = ["", "", '<ul class="doxyTocList">']
        for item in element.iter_child_nodes():
            anchor = get_permalink_anchor(getattr(item, "id", ""))
            content = self.workspace.render_string(item.children, "html").strip()
            lines.append(f'<li><a class="doxyTocListItem" href="#{anchor}">{content}</a></li>')
        lines.append("</ul>")
        return lines


class VariableListRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: VariableList, mode: str) -> list[str]:
        lines = ["", '<dl class="doxyVariableList">']
        lines.extend(self.workspace.render_lines(element.children, "html"))
        lines.append("</dl>")
        return lines


class VariableListPairRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: VariableListPair, mode: str) -> list[str]:
        term = element.varlistentry.term if element.varlistentry is not None else None
        title = self.workspace.render_string(term, "html").strip()
        listitem = element.listitem
        description = _inline_paragraphs(self.workspace, listitem.children if listitem is not None else None)
        lines = [f"<dt>{title}</dt>"]
        if "\n" not in description:
            lines.append(f"<dd>{description}</dd>")
        else:
            lines.append("<dd>")
            lines.extend(description.split("\n"))
            lines.append("</dd>")
        return lines


class TableRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: Table, mode: str) -> list[str]:
        lines = ["", '<table class="doxyTable">']
        if element.caption is not None:
            lines.extend(self.workspace.render_lines(element.caption, "html"))
        lines.extend(self.workspace.render_lines(element.children, "html"))
        lines.append("</table>")
        return lines


class CaptionRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: Caption, mode: str) -> list[str]:
        attributes = f' id="{element.id}"' if element.id else ""
        content = self.workspace.render_string(element.children, "html").strip()
        return [f"<caption{attributes}>{content}</caption>"]


class RowRenderer(ElementLinesRenderer):
    def render_to_lines(self, element: Row, mode: str) -> list[str]:
        lines = ["<tr>"]
        lines.extend(self.workspace.render_lines(element.children, "html"))
        lines.append("</tr>")
        return lines


class EntryRenderer(ElementStringRenderer):
    """Render a table cell as ``<th>`` or ``<td>`` with its span attributes."""

    def render_to_string(self, element: Entry, mode: str) -> str:
        attributes = ""
        for name, value in (
            ("colspan", element.colspan),
            ("rowspan", element.rowspan),
            ("align", element.align),
            ("valign", element.valign),
            ("width", element.width),
            ("class", element.class_name),
        ):
            if value is not None:
                attributes += f' {name}="{self.workspace.render_escaped(str(value), "html")}"'
        content = _inline_paragraphs(self.workspace, element.children)
        tag = "th" if element.thead else "td"
        return f"<{tag}{attributes}>{content}</{tag}>"


class SimpleSectRenderer(ElementLinesRenderer):
    """Render simple sections as admonitions or titled definition lists."""

    def render_to_lines(self, element: SimpleSect, mode: str) -> list[str]:
        lines = [""]
        marker = self.workspace.options.admonitions.get(element.sect_kind)
        if marker is not None:
            body = self.workspace.render_string(element.children, "markdown").strip()
            lines.extend(["", f":::{marker}", body, ":::"])
        elif element.sect_kind in SIMPLE_SECT_TITLES:
            body = self.workspace.render_string(element.children, "html").strip()
            lines.extend(_definition_lines(SIMPLE_SECT_TITLES[element.sect_kind], body))
        elif element.sect_kind == "par":
            title = _TRAILING_PERIOD.sub("", element.title or "")
            body = self.workspace.render_string(element.children, "html").strip()
            lines.extend(_definition_lines(self.workspace.render_string(title, "html"), body))
        else:
            logger.error("simplesect kind %s not yet rendered in %s", element.sect_kind, type(self).__name__)
            body = self.workspace.render_string(element.children, "html").strip()
            if body:
                lines.append(body)
        lines.append("")
        return lines


class ParameterListRenderer(ElementLinesRenderer):
    """Render a parameter list as a titled two column table."""

    def render_to_lines(self, element: ParameterList, mode: str) -> list[str]:
        title = PARAMETER_LIST_TITLES.get(element.list_kind)
        if title is None:
            logger.error("parameterlist kind %s not yet rendered in %s", element.list_kind, type(self).__name__)
            title = element.list_kind.capitalize()

        lines = [
            "",
            '<dl class="doxyParamsList">',
            f'<dt class="doxyParamsTableTitle">{title}</dt>',
            "<dd>",
            '<table class="doxyParamsTable">',
        ]
        for item in element.iter_child_nodes():
            names = ", ".join(self._item_names(item))
            description = self.workspace.render_string(getattr(item, "description", None), "html").strip()
            lines.append('<tr class="doxyParamItem">')
            lines.append(f'<td class="doxyParamItemName">{names}</td>')
            lines.append(f'<td class="doxyParamItemDescription">{description}</td>')
            lines.append("</tr>")
        lines.extend(["</table>", "</dd>", "</dl>"])
        return lines

    def _item_names(self, item: Any) -> list[str]:
        names: list[str] = []
        for name_list in getattr(item, "name_lists", []):
            for child in name_list.iter_child_nodes():
                if isinstance(child, ParameterType):
                    logger.debug("parametertype not rendered in %s", type(self).__name__)
                    continue
                direction = child.direction if isinstance(child, ParameterName) else None
                for sub_child in child.children or []:
                    if isinstance(sub_child, str):
                        name = self.workspace.render_string(sub_child, "html")
                        names.append(f"[{direction}] {name}" if direction else name)
                    else:
                        names.append(self.workspace.render_string(sub_child, "html"))
        return names


class XrefSectRenderer(ElementLinesRenderer):
    """Render ``\\todo``, ``\\deprecated`` and similar cross reference sections."""

    def render_to_lines(self, element: XrefSect, mode: str) -> list[str]:
        title = escape_html(element.xreftitle or "?")
        permalink = self.workspace.get_permalink(element.id, "xrefsect")
        description = self.workspace.render_string(element.xrefdescription, mode).strip()
        return [
            "",
            '<div class="doxyXrefSect">',
            '<dl class="doxyXrefSectList">',
            f'<dt class="doxyXrefSectTitle">{self.workspace.render_link(title, permalink)}</dt>',
            '<dd class="doxyXrefSectDescription">',
            description,
            "</dd>",
            "</dl>",
            "</div>",
        ]


# ----------------------------------------------------------------------------
# Program listings
# ----------------------------------------------------------------------------


class ProgramListingRenderer(ElementLinesRenderer):
    """Render listings as line numbered, highlighted HTML.

    Full file listings carry ``lNNNNN`` anchors on each line; member
    listings do not, since the same lines already appear on the file page.
    """

    def render_to_lines(self, element: Union[ProgramListing, MemberProgramListing], mode: str) -> list[str]:
        codelines = [child for child in element.iter_child_nodes() if isinstance(child, CodeLine)]
        if not codelines:
            return []
        show_anchor = not isinstance(element, MemberProgramListing)
        lines = ["", '<div class="doxyProgramListing">', ""]
        for codeline in codelines:
            lines.append(self.render_code_line(codeline, show_anchor))
        lines.extend(["", "</div>", ""])
        return lines

    def render_code_line(self, element: CodeLine, show_anchor: bool = True) -> str:
        if element.external:
            logger.debug("external ignored in codeline %s", element.lineno)
        permalink = None
        if element.refid and element.refkind:
            permalink = self.workspace.get_permalink(element.refid, element.refkind)

        text = '<div class="doxyCodeLine">'
        if element.lineno is not None:
            text += '<span class="doxyLineNumber">'
            if show_anchor:
                text += f'<a id="l{element.lineno:05d}"></a>'
            text += self.workspace.render_link(str(element.lineno), permalink)
            text += "</span>"
        else:
            text += '<span class="doxyNoLineNumber">&nbsp;</span>'
        content = self.workspace.render_string(element.children, "html")
        if content:
            text += f'<span class="doxyLineContent">{content}</span>'
        text += "</div>"
        return text


class CodeLineRenderer(ElementStringRenderer):
    def render_to_string(self, element: CodeLine, mode: str) -> str:
        return ProgramListingRenderer(self.workspace).render_code_line(element)


class HighlightRenderer(ElementStringRenderer):
    def render_to_string(self, element: Highlight, mode: str) -> str:
        span_class = HIGHLIGHT_CLASSES.get(element.highlight_class)
        if span_class is None:
            logger.error("highlight class %s not implemented yet in %s", element.highlight_class, type(self).__name__)
            span_class = "doxyHighlight"
        if not element.children:
            return ""
        content = self.workspace.render_string(element.children, "html")
        return f'<span class="{span_class}">{content}</span>'


class SpRenderer(ElementStringRenderer):
    def render_to_string(self, element: Sp, mode: str) -> str:
        return " " * max(1, element.value or 1)


def register_element_renderers(registry: RendererRegistry, workspace: RenderWorkspace) -> None:
    """Register the description grammar renderers."""
    text_container = TextContainerRenderer(workspace)
    verbatim = VerbatimRenderer(workspace)
    listing = ProgramListingRenderer(workspace)

    registry.register_lines(Description, DescriptionRenderer(workspace))
    registry.register_lines(Internal, InternalRenderer(workspace))
    registry.register_lines(Para, ParaRenderer(workspace))
    registry.register_string(Title, text_container)
    registry.register_string(Term, text_container)
    registry.register_string(ParameterType, text_container)
    registry.register_string(ParameterName, text_container)
    registry.register_lines(Sect, SectRenderer(workspace))
    registry.register_lines(Heading, HeadingRenderer(workspace))

    registry.register_string(Markup, MarkupRenderer(workspace))
    registry.register_string(Ulink, UlinkRenderer(workspace))
    registry.register_string(DocRef, DocRefRenderer(workspace))
    registry.register_lines(Anchor, AnchorRenderer(workspace))
    registry.register_string(Formula, FormulaRenderer(workspace))
    registry.register_string(Emoji, EmojiRenderer(workspace))
    registry.register_string(EmptyElement, EmptyElementRenderer(workspace))
    registry.register_string(Entity, EntityRenderer(workspace))
    registry.register_string(HtmlOnly, HtmlOnlyRenderer(workspace))
    registry.register_string(DocBookOnly, DocBookOnlyRenderer(workspace))
    registry.register_string(Verbatim, verbatim)
    registry.register_string(Preformatted, verbatim)
    registry.register_string(Image, ImageRenderer(workspace))

    registry.register_lines(Blockquote, BlockquoteRenderer(workspace))
    registry.register_lines(DocList, DocListRenderer(workspace))
    registry.register_string(ListItem, ListItemRenderer(workspace))
    registry.register_lines(TocList, TocListRenderer(workspace))
    registry.register_lines(VariableList, VariableListRenderer(workspace))
    registry.register_lines(VariableListPair, VariableListPairRenderer(workspace))
    registry.register_lines(Table, TableRenderer(workspace))
    registry.register_lines(Caption, CaptionRenderer(workspace))
    registry.register_lines(Row, RowRenderer(workspace))
    registry.register_string(Entry, EntryRenderer(workspace))
    registry.register_lines(SimpleSect, SimpleSectRenderer(workspace))
    registry.register_lines(ParameterList, ParameterListRenderer(workspace))
    registry.register_lines(XrefSect, XrefSectRenderer(workspace))

    registry.register_lines(ProgramListing, listing)
    registry.register_lines(MemberProgramListing, listing)
    registry.register_string(CodeLine, CodeLineRenderer(workspace))
    registry.register_string(Highlight, HighlightRenderer(workspace))
    registry.register_string(Sp, SpRenderer(workspace))


__all__ = [
    "DescriptionRenderer",
    "DocListRenderer",
    "MarkupRenderer",
    "ParaRenderer",
    "ProgramListingRenderer",
    "SimpleSectRenderer",
    "is_inline",
    "register_element_renderers",
]
