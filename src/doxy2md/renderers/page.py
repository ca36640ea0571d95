#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/page.py
"""Assemble and write one page per compound.

A page is made of:

1. YAML front matter (title, slug, description, keywords);
2. the brief description, followed by a "More..." link to the details;
3. the include line and the inheritance lists of classes;
4. index tables of the inner compounds and of the member sections;
5. the detailed description under ``## Description {#details}``;
6. the member sections with their full documentation;
7. the list of all members, inherited ones included, for classes;
8. the file listing, for file compounds;
9. the list of source files the page was generated from.

A top index page at the root of the output folder lists the top level
compounds of each family as trees, under a title taken from the Doxyfile
``PROJECT_BRIEF`` (or ``PROJECT_NAME``).

Examples
--------
    >>> session = ParseSession().parse("xml")
    >>> workspace = RenderWorkspace.from_session(session)
    >>> PageRenderer(workspace).write_pages("docs/api")

"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from doxy2md.ast.compounds import CompoundDef, InnerRef
from doxy2md.ast.sections import reclassify_sections
from doxy2md.constants import COMPOUND_KIND_LABELS
from doxy2md.exceptions import FileError
from doxy2md.parsers.session import ParseSession
from doxy2md.renderers.compounds import find_section_renderer
from doxy2md.renderers.workspace import RenderWorkspace
from doxy2md.utils.front_matter import generate_front_matter
from doxy2md.utils.text import join_with_last

logger = logging.getLogger(__name__)

_CLASS_KINDS = ("class", "struct", "union", "interface")

# Inner compound families shown as index tables, in page order.
_INNER_INDEXES = (
    ("Namespaces", "inner_namespaces"),
    ("Classes", "inner_classes"),
    ("Topics", "inner_groups"),
    ("Folders", "inner_dirs"),
    ("Files", "inner_files"),
    ("Pages", "inner_pages"),
)

# Top level families listed on the top index page, in page order.
_TOP_INDEX_FAMILIES = (
    ("Topics", ("group",)),
    ("Namespaces", ("namespace",)),
    ("Classes", _CLASS_KINDS),
    ("Folders", ("dir",)),
    ("Files", ("file",)),
    ("Pages", ("page",)),
)


@dataclass
class RenderedPage:
    """A rendered page and where it goes.

    Parameters
    ----------
    compound_id : str
        Id of the compound the page documents; empty for the top index
    relative_path : str
        Path of the page file, relative to the output folder
    content : str
        Full page text, front matter included

    """

    compound_id: str
    relative_path: str
    content: str


class PageRenderer:
    """Render the pages of all the compounds known to a workspace.

    Parameters
    ----------
    workspace : RenderWorkspace
        Workspace holding the compounds, options and renderers

    """

    def __init__(self, workspace: RenderWorkspace):
        self.workspace = workspace

    @property
    def mode(self) -> str:
        return self.workspace.options.mode

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def page_title(self, compound: CompoundDef) -> str:
        """Return the page title of a compound."""
        kind = compound.compound_kind
        if kind in ("page", "group", "example") and compound.title:
            return compound.title
        label = COMPOUND_KIND_LABELS.get(kind, kind.capitalize())
        if kind in ("file", "dir"):
            name = posixpath.basename(compound.compound_name.rstrip("/"))
        else:
            name = compound.compound_name
        return f"The `{name}` {label} Reference"

    def page_relative_path(self, compound: CompoundDef) -> Optional[str]:
        """Return the path of the page file, or None if the compound has no page.

        Each page is written as the ``index`` file of a folder named after
        its permalink, so nested names never collide with page files.
        """
        relative = self.workspace.page_permalinks.get(compound.id)
        if relative is None:
            return None
        return f"{relative}/index{self.workspace.options.page_file_extension}"

    def front_matter(self, compound: CompoundDef) -> str:
        label = COMPOUND_KIND_LABELS.get(compound.compound_kind, compound.compound_kind)
        metadata = {
            "title": self.page_title(compound),
            "slug": self.workspace.get_page_permalink(compound.id),
            "description": self.workspace.render_string(compound.brief_description, "text").strip(),
            "keywords": ["doxygen", label.lower(), "reference", compound.compound_name],
        }
        return generate_front_matter(metadata)

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def render_page(self, compound: CompoundDef) -> str:
        """Render the full text of one compound page."""
        workspace = self.workspace
        workspace.reset_files_touched()

        lines: list[str] = []
        lines.extend(self.render_brief_lines(compound))
        lines.extend(self.render_declaration_lines(compound))
        lines.extend(self.render_inner_index_lines(compound))

        class_name = compound.unqualified_name if compound.compound_kind in _CLASS_KINDS else None
        sections = reclassify_sections(compound, class_name)
        section_renderer = find_section_renderer(workspace)
        if section_renderer is not None:
            for section in sections:
                lines.extend(section_renderer.render_index_lines(section, self.mode))

        lines.extend(self.render_details_lines(compound))

        for section in sections:
            lines.extend(workspace.render_lines(section, self.mode))

        if compound.list_of_all_members is not None:
            lines.extend(workspace.render_lines(compound.list_of_all_members, self.mode))

        if compound.compound_kind == "file" and compound.program_listing is not None:
            lines.extend(["", "## File Listing", ""])
            lines.append("The file content with the documentation metadata removed is:")
            lines.extend(workspace.render_lines(compound.program_listing, self.mode))

        lines.extend(self.render_generated_from_lines(compound))

        body = "\n".join(lines).strip("\n") + "\n"
        if workspace.options.front_matter:
            return self.front_matter(compound) + body
        return body

    def render_brief_lines(self, compound: CompoundDef) -> list[str]:
        workspace = self.workspace
        brief = workspace.render_string(compound.brief_description, self.mode).strip()
        has_details = bool(workspace.render_string(compound.detailed_description, "text").strip())

        if brief:
            if has_details and compound.compound_kind != "page":
                brief += ' <a href="#details">More...</a>'
            return ["", brief]
        if workspace.options.suggest_todo_descriptions and compound.compound_kind != "page":
            return ["", self._todo_text("brief", compound)]
        return []

    def render_declaration_lines(self, compound: CompoundDef) -> list[str]:
        """Render the include directives, template line and inheritance lists."""
        workspace = self.workspace
        lines: list[str] = []

        if compound.compound_kind in _CLASS_KINDS:
            declaration = ""
            if compound.template_param_list is not None:
                declaration += workspace.render_string(compound.template_param_list, "html") + "<br/>"
            declaration += f"{compound.compound_kind} {workspace.render_escaped(compound.compound_name, 'html')}"
            lines.extend(["", "## Declaration", "", f'<div class="doxyDeclaration">{declaration}</div>'])

        if compound.includes:
            lines.append("")
            lines.append('<div class="doxyIncludes">')
            for include in compound.includes:
                lines.append(f"<div>{workspace.render_string(include, 'html')}</div>")
            lines.append("</div>")

        if compound.base_compound_refs:
            bases = [workspace.render_string(ref, self.mode) for ref in compound.base_compound_refs]
            lines.extend(["", f"Inherits {join_with_last(bases, ', ', ' and ')}."])
        if compound.derived_compound_refs:
            derived = [workspace.render_string(ref, self.mode) for ref in compound.derived_compound_refs]
            lines.extend(["", f"Inherited by {join_with_last(derived, ', ', ' and ')}."])
        return lines

    def render_inner_index_lines(self, compound: CompoundDef) -> list[str]:
        """Render one table per family of inner compounds."""
        lines: list[str] = []
        for title, field_name in _INNER_INDEXES:
            inner_refs: list[InnerRef] = getattr(compound, field_name)
            if not inner_refs:
                continue
            lines.extend(["", f"## {title} Index", "", '<table class="doxyInnerIndex">'])
            for inner_ref in inner_refs:
                lines.extend(self._inner_index_row(inner_ref))
            lines.append("</table>")
        return lines

    def _inner_index_row(self, inner_ref: InnerRef) -> list[str]:
        workspace = self.workspace
        inner = workspace.compounds_by_id.get(inner_ref.refid)
        label = self._index_label(inner, inner_ref.text)
        link = workspace.render_link(
            workspace.render_escaped(label, "html"), workspace.get_page_permalink(inner_ref.refid)
        )

        kind = inner.compound_kind if inner is not None else ""
        lines = ['<tr class="doxyInnerIndexItem">', f'<td class="doxyInnerIndexItemKind">{kind}</td>']
        lines.append(f'<td class="doxyInnerIndexItemName">{link}</td>')
        lines.append("</tr>")
        if inner is not None:
            brief = workspace.render_string(inner.brief_description, "html").strip()
            if brief:
                lines.append(f'<tr class="doxyInnerIndexDescription"><td></td><td>{brief}</td></tr>')
        else:
            logger.debug("Inner compound %s not found", inner_ref.refid)
        return lines

    @staticmethod
    def _index_label(compound: Optional[CompoundDef], name: str) -> str:
        """Return the short label of a compound in index lists."""
        if compound is None:
            return name
        if compound.compound_kind in ("dir", "file"):
            return posixpath.basename(name.rstrip("/"))
        if compound.compound_kind in ("group", "page") and compound.title:
            return compound.title
        return name

    def render_details_lines(self, compound: CompoundDef) -> list[str]:
        workspace = self.workspace
        detailed = workspace.render_lines(compound.detailed_description, self.mode)
        has_details = any(line.strip() for line in detailed)

        lines: list[str] = []
        if compound.compound_kind == "page":
            if compound.table_of_contents is not None:
                lines.append("")
                lines.extend(workspace.render_lines(compound.table_of_contents, self.mode))
            lines.extend(detailed)
            return lines

        if has_details or compound.location is not None:
            lines.extend(["", "## Description {#details}"])
        if has_details:
            lines.extend(detailed)
        elif workspace.options.suggest_todo_descriptions:
            lines.extend(["", self._todo_text("details", compound)])
        if compound.location is not None and compound.compound_kind != "dir":
            lines.extend(workspace.render_lines(compound.location, self.mode))
        return lines

    def render_generated_from_lines(self, compound: CompoundDef) -> list[str]:
        """List the source files met while rendering the page."""
        workspace = self.workspace
        if compound.compound_kind in ("file", "dir", "page") or not workspace.files_touched:
            return []

        label = COMPOUND_KIND_LABELS.get(compound.compound_kind, compound.compound_kind).lower()
        lines = [
            "",
            "<hr/>",
            "",
            f"The documentation for this {label} was generated from the following file"
            f"{'s' if len(workspace.files_touched) > 1 else ''}:",
            "",
            '<ul class="doxyGeneratedFrom">',
        ]
        for file_path in sorted(workspace.files_touched):
            file_compound = workspace.files_by_path.get(file_path)
            file_label = workspace.render_escaped(posixpath.basename(file_path), "html")
            permalink = workspace.get_page_permalink(file_compound.id) if file_compound is not None else None
            lines.append(f"<li>{workspace.render_link(file_label, permalink)}</li>")
        lines.append("</ul>")
        return lines

    def _todo_text(self, command: str, compound: CompoundDef) -> str:
        name = self.workspace.render_escaped(compound.compound_name, "html")
        return f"TODO: add <code>@{command}</code> to <code>{name}</code>"

    # ------------------------------------------------------------------
    # Top index
    # ------------------------------------------------------------------

    def top_index_title(self, session: ParseSession) -> str:
        """Return the top index title, named after the project when known."""
        for option_id in ("PROJECT_BRIEF", "PROJECT_NAME"):
            values = session.doxyfile_option(option_id)
            if values and values[0].strip():
                return f"{values[0].strip()} API Reference"
        return "API Reference"

    def render_top_index(self, session: ParseSession) -> str:
        """Render the page listing the top level compounds of each family."""
        lines: list[str] = []
        for title, kinds in _TOP_INDEX_FAMILIES:
            compounds = [compound for kind in kinds for compound in session.top_level_compounds(kind)]
            compounds = [compound for compound in compounds if self.workspace.page_permalinks.get(compound.id)]
            if not compounds:
                continue
            lines.extend(["", f"## {title}", ""])
            lines.extend(self._tree_lines(session, compounds, 0))

        body = "\n".join(lines).strip("\n") + "\n"
        if not self.workspace.options.front_matter:
            return body
        metadata = {
            "title": self.top_index_title(session),
            "slug": self.workspace.options.page_base_url,
            "keywords": ["doxygen", "reference"],
        }
        return generate_front_matter(metadata) + body

    def _tree_lines(self, session: ParseSession, compounds: list[CompoundDef], depth: int) -> list[str]:
        workspace = self.workspace
        lines: list[str] = []
        if self.mode != "text":
            lines.append('<ul class="doxyTreeIndex">' if depth == 0 else "<ul>")

        for compound in compounds:
            label = self._index_label(compound, compound.compound_name)
            children = session.children_of(compound.id)
            if self.mode == "text":
                brief = workspace.render_string(compound.brief_description, "text").strip()
                lines.append(f"{'  ' * depth}- {label}{': ' + brief if brief else ''}")
                lines.extend(self._tree_lines(session, children, depth + 1))
                continue

            link = workspace.render_link(
                workspace.render_escaped(label, "html"), workspace.get_page_permalink(compound.id)
            )
            brief = workspace.render_string(compound.brief_description, "html").strip()
            lines.append(f"<li>{link}{': ' + brief if brief else ''}")
            if children:
                lines.extend(self._tree_lines(session, children, depth + 1))
            lines.append("</li>")

        if self.mode != "text":
            lines.append("</ul>")
        return lines

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render_pages(self) -> list[RenderedPage]:
        """Render the top index and every compound that has a page, in index order.

        The top index needs the parse session and is skipped without one.
        """
        pages: list[RenderedPage] = []
        session = self.workspace.session
        if session is not None:
            relative_path = f"index{self.workspace.options.page_file_extension}"
            pages.append(RenderedPage("", relative_path, self.render_top_index(session)))
        for compound in self.workspace.compounds_by_id.values():
            relative_path = self.page_relative_path(compound)
            if relative_path is None:
                continue
            pages.append(RenderedPage(compound.id, relative_path, self.render_page(compound)))
        logger.info("%d pages rendered", len(pages))
        return pages

    def write_pages(self, output_folder: Union[str, Path]) -> list[Path]:
        """Render all pages and write them below ``output_folder``.

        Returns
        -------
        list of Path
            The written page files

        Raises
        ------
        FileError
            If a page cannot be written

        """
        output = Path(output_folder)
        written: list[Path] = []
        for page in self.render_pages():
            output_path = output / page.relative_path
            try:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(page.content, encoding="utf-8")
            except OSError as e:
                raise FileError(f"Cannot write page: {e}", file_path=str(output_path), original_error=e) from e
            logger.debug("Wrote %s", output_path)
            written.append(output_path)
        return written


__all__ = ["PageRenderer", "RenderedPage"]
