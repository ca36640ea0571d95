#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/base.py
"""Base classes for node renderers and the registry that dispatches to them.

A node is rendered either to a list of lines or to a single string. Each
node class registers one or both flavours; the workspace falls back from
one to the other when only one is available.

Examples
--------
Registering a renderer for a node class:

    >>> class AnchorRenderer(ElementLinesRenderer):
    ...     def render_to_lines(self, element, mode):
    ...         return [f'<a id="{element.id}"></a>']
    >>> registry = RendererRegistry()
    >>> registry.register_lines(Anchor, AnchorRenderer(workspace))

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from doxy2md.renderers.workspace import RenderWorkspace

logger = logging.getLogger(__name__)


class ElementRenderer(ABC):
    """Common base of all node renderers.

    Parameters
    ----------
    workspace : RenderWorkspace
        Workspace used to render nested nodes and resolve links

    """

    def __init__(self, workspace: RenderWorkspace):
        self.workspace = workspace

    def _not_rendered(self, element: Any, what: str) -> None:
        logger.error("%s %s not yet rendered in %s", type(element).__name__, what, type(self).__name__)


class ElementLinesRenderer(ElementRenderer):
    """Renderer producing a list of lines."""

    @abstractmethod
    def render_to_lines(self, element: Any, mode: str) -> list[str]:
        """Render ``element`` in the given mode."""


class ElementStringRenderer(ElementRenderer):
    """Renderer producing a single string."""

    @abstractmethod
    def render_to_string(self, element: Any, mode: str) -> str:
        """Render ``element`` in the given mode."""


class RendererRegistry:
    """Map node classes to their lines and string renderers.

    Lookups walk the method resolution order of the node class, so a
    renderer registered for a base class serves its subclasses unless
    they have their own.
    """

    def __init__(self) -> None:
        self._lines_renderers: dict[type, ElementLinesRenderer] = {}
        self._string_renderers: dict[type, ElementStringRenderer] = {}

    def register_lines(self, node_class: type, renderer: ElementLinesRenderer) -> None:
        """Register the lines renderer of a node class."""
        if node_class in self._lines_renderers:
            logger.warning("Lines renderer for %s already registered, overwriting", node_class.__name__)
        self._lines_renderers[node_class] = renderer

    def register_string(self, node_class: type, renderer: ElementStringRenderer) -> None:
        """Register the string renderer of a node class."""
        if node_class in self._string_renderers:
            logger.warning("String renderer for %s already registered, overwriting", node_class.__name__)
        self._string_renderers[node_class] = renderer

    def get_lines_renderer(self, node_class: type) -> Optional[ElementLinesRenderer]:
        """Return the lines renderer of a node class, or None."""
        for klass in node_class.__mro__:
            renderer = self._lines_renderers.get(klass)
            if renderer is not None:
                return renderer
        return None

    def get_string_renderer(self, node_class: type) -> Optional[ElementStringRenderer]:
        """Return the string renderer of a node class, or None."""
        for klass in node_class.__mro__:
            renderer = self._string_renderers.get(klass)
            if renderer is not None:
                return renderer
        return None

    def has_renderer(self, node_class: type) -> bool:
        """Return True if the class has a renderer of either flavour."""
        return self.get_lines_renderer(node_class) is not None or self.get_string_renderer(node_class) is not None


__all__ = ["ElementLinesRenderer", "ElementRenderer", "ElementStringRenderer", "RendererRegistry"]
