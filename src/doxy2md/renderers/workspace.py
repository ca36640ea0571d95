#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/workspace.py
"""Rendering workspace: dispatch, escaping and link resolution.

The workspace is handed to every renderer. It turns any renderable value
into text for one of the three output modes:

- ``None`` renders as nothing;
- a literal string is escaped for the mode, exactly once;
- a list renders each item in order;
- a node is dispatched through the :class:`RendererRegistry`.

It also resolves Doxygen ids into page URLs. Unknown ids never raise:
the caller gets None and renders the plain label.

"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from doxy2md.ast.compounds import CompoundDef, MemberDef
from doxy2md.ast.nodes import DocumentNode
from doxy2md.constants import RENDER_MODES
from doxy2md.exceptions import InvalidOptionsError, RenderingError
from doxy2md.options.render import RenderOptions
from doxy2md.parsers.session import ParseSession
from doxy2md.renderers.base import RendererRegistry
from doxy2md.renderers.links import PagePermalinks
from doxy2md.utils.escape import escape_for_mode
from doxy2md.utils.permalinks import get_permalink_anchor, strip_permalink_hex_anchor, strip_permalink_text_anchor

logger = logging.getLogger(__name__)

PermalinkResolver = Callable[[str, str], Optional[str]]


class RenderWorkspace:
    """Shared state of a rendering run.

    Parameters
    ----------
    compounds_by_id : dict
        Compound lookup by id
    options : RenderOptions or None, default = None
        Rendering options
    files_by_path : dict or None, default = None
        File compounds by path, used to link the source files of a page
    member_defs_by_id : dict or None, default = None
        Member definition lookup, used to resolve section member references
    page_permalinks : PagePermalinks or None, default = None
        Relative page permalinks; computed from ``compounds_by_id`` when
        omitted
    permalink_resolver : callable or None, default = None
        ``(refid, kindref) -> url or None``; replaces :meth:`get_permalink`
        for cross references when given
    registry : RendererRegistry or None, default = None
        Renderer table; the built-in renderers are registered when omitted
    session : ParseSession or None, default = None
        The parse session the compounds come from; its hierarchy and
        Doxyfile options feed the top index page

    Attributes
    ----------
    files_touched : set of str
        Source files met while rendering the current page

    """

    def __init__(
        self,
        compounds_by_id: dict[str, CompoundDef],
        options: Optional[RenderOptions] = None,
        files_by_path: Optional[dict[str, CompoundDef]] = None,
        member_defs_by_id: Optional[dict[str, MemberDef]] = None,
        page_permalinks: Optional[PagePermalinks] = None,
        permalink_resolver: Optional[PermalinkResolver] = None,
        registry: Optional[RendererRegistry] = None,
        session: Optional[ParseSession] = None,
    ):
        if options is not None and not isinstance(options, RenderOptions):
            raise InvalidOptionsError(
                component_name="RenderWorkspace", expected_type=RenderOptions, received_type=type(options)
            )
        self.compounds_by_id = compounds_by_id
        self.options = options or RenderOptions()
        self.files_by_path = files_by_path or {}
        self.member_defs_by_id = member_defs_by_id or {}
        self.page_permalinks = page_permalinks or PagePermalinks(list(compounds_by_id.values()))
        self.permalink_resolver = permalink_resolver
        self.session = session
        self.files_touched: set[str] = set()

        if registry is None:
            from doxy2md.renderers.compounds import register_compound_renderers
            from doxy2md.renderers.elements import register_element_renderers

            registry = RendererRegistry()
            register_element_renderers(registry, self)
            register_compound_renderers(registry, self)
        self.registry = registry

    @classmethod
    def from_session(cls, session: ParseSession, options: Optional[RenderOptions] = None) -> Self:
        """Create a workspace over the compounds of a finalized parse session."""
        return cls(
            session.compounds_by_id,
            options=options,
            files_by_path=session.files_by_path,
            member_defs_by_id=session.member_defs_by_id,
            page_permalinks=PagePermalinks(session.compound_defs, session.parent_of),
            session=session,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _check_mode(self, mode: Optional[str]) -> str:
        if mode is None:
            return self.options.mode
        if mode not in RENDER_MODES:
            raise RenderingError(f"Unknown render mode {mode!r}")
        return mode

    def render_escaped(self, text: str, mode: Optional[str] = None) -> str:
        """Escape a literal string for the mode."""
        return escape_for_mode(text, self._check_mode(mode))

    def render_string(self, element: Any, mode: Optional[str] = None) -> str:
        """Render a node, string, list or None to a single string.

        Parameters
        ----------
        element : DocumentNode, str, list or None
            Value to render
        mode : {"text", "markdown", "html"}, optional
            Output mode; defaults to ``options.mode``

        Returns
        -------
        str
            The rendered text

        """
        mode = self._check_mode(mode)
        if element is None:
            return ""
        if isinstance(element, str):
            return escape_for_mode(element, mode)
        if isinstance(element, list):
            return "".join(self.render_string(item, mode) for item in element)

        string_renderer = self.registry.get_string_renderer(type(element))
        if string_renderer is not None:
            return string_renderer.render_to_string(element, mode)
        lines_renderer = self.registry.get_lines_renderer(type(element))
        if lines_renderer is not None:
            return "\n".join(lines_renderer.render_to_lines(element, mode))

        self._no_renderer(element)
        return ""

    def render_lines(self, element: Any, mode: Optional[str] = None) -> list[str]:
        """Render a node, string, list or None to a list of lines."""
        mode = self._check_mode(mode)
        if element is None:
            return []
        if isinstance(element, str):
            return [escape_for_mode(element, mode)]
        if isinstance(element, list):
            lines: list[str] = []
            for item in element:
                # Whitespace between block elements carries no content.
                if isinstance(item, str) and not item.strip():
                    continue
                lines.extend(self.render_lines(item, mode))
            return lines

        lines_renderer = self.registry.get_lines_renderer(type(element))
        if lines_renderer is not None:
            return lines_renderer.render_to_lines(element, mode)
        string_renderer = self.registry.get_string_renderer(type(element))
        if string_renderer is not None:
            return string_renderer.render_to_string(element, mode).split("\n")

        self._no_renderer(element)
        return []

    def _no_renderer(self, element: Any) -> None:
        kind = element.kind if isinstance(element, DocumentNode) else "?"
        logger.error("%s (%s) has no renderer", type(element).__name__, kind)

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def get_page_permalink(self, refid: str) -> Optional[str]:
        """Return the absolute URL of a compound page, or None."""
        relative = self.page_permalinks.get(refid)
        if relative is None:
            logger.debug("No page for %s", refid)
            return None
        return f"{self.options.page_base_url}{relative}"

    def get_permalink(self, refid: str, kindref: str) -> Optional[str]:
        """Return the URL of a compound, member or xrefsect id, or None.

        Parameters
        ----------
        refid : str
            Doxygen id
        kindref : {"compound", "member", "xrefsect"}
            Kind of the referenced item

        """
        if self.permalink_resolver is not None:
            return self.permalink_resolver(refid, kindref)

        if kindref == "compound":
            return self.get_page_permalink(refid)
        if kindref == "member":
            page_permalink = self.get_page_permalink(strip_permalink_hex_anchor(refid))
            if page_permalink is None:
                logger.debug("Member %s has no page", refid)
                return None
            return f"{page_permalink}/#{get_permalink_anchor(refid)}"
        if kindref == "xrefsect":
            page_permalink = self.get_page_permalink(strip_permalink_text_anchor(refid))
            if page_permalink is None:
                logger.debug("Cross reference %s has no page", refid)
                return None
            return f"{page_permalink}/#{get_permalink_anchor(refid)}"

        logger.error("Unsupported kindref %s for %s", kindref, refid)
        return None

    def render_link(self, label: str, permalink: Optional[str]) -> str:
        """Wrap an already rendered label in a link, when there is a target."""
        if permalink:
            return f'<a href="{permalink}">{label}</a>'
        return label

    def touch_file(self, path: Optional[str]) -> None:
        """Record a source file shown on the current page."""
        if path:
            self.files_touched.add(path)

    def reset_files_touched(self) -> None:
        """Forget the files recorded for the previous page."""
        self.files_touched = set()


__all__ = ["PermalinkResolver", "RenderWorkspace"]
