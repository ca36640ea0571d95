#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/__init__.py
"""Rendering of parsed compounds to Markdown/MDX, HTML or text.

- base: renderer base classes and the registry
- workspace: dispatch, escaping and link resolution
- links: page locations of the compounds
- elements, compounds: the renderers of the description and compound nodes
- page: page assembly with YAML front matter
"""

from __future__ import annotations

from doxy2md.renderers.base import ElementLinesRenderer, ElementRenderer, ElementStringRenderer, RendererRegistry
from doxy2md.renderers.links import PagePermalinks
from doxy2md.renderers.page import PageRenderer, RenderedPage
from doxy2md.renderers.workspace import PermalinkResolver, RenderWorkspace

__all__ = [
    "ElementLinesRenderer",
    "ElementRenderer",
    "ElementStringRenderer",
    "PagePermalinks",
    "PageRenderer",
    "PermalinkResolver",
    "RenderWorkspace",
    "RenderedPage",
    "RendererRegistry",
]
