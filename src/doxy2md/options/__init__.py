#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing and rendering.

Options are frozen dataclasses; use ``create_updated`` to derive a
modified copy.
"""

from __future__ import annotations

from doxy2md.options.base import CloneFrozenMixin
from doxy2md.options.parse import ParseOptions
from doxy2md.options.render import RenderOptions

__all__ = ["CloneFrozenMixin", "ParseOptions", "RenderOptions"]
