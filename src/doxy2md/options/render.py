#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/options/render.py
"""Options controlling the rendering of pages."""

from __future__ import annotations

from dataclasses import dataclass, field

from doxy2md.constants import (
    DEFAULT_ADMONITIONS,
    DEFAULT_PAGE_BASE_URL,
    DEFAULT_PAGE_FILE_EXTENSION,
    DEFAULT_RENDER_MODE,
    RENDER_MODES,
    RenderMode,
)
from doxy2md.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Rendering configuration shared by all renderers.

    Parameters
    ----------
    mode : {"markdown", "html", "text"}, default "markdown"
        Output mode used for page bodies
    page_base_url : str, default "/api/"
        URL prefix of all generated pages; must start and end with ``/``
    suggest_todo_descriptions : bool, default False
        Show TODO placeholders for compounds without descriptions
    verbose : bool, default False
        Log progress at info level
    debug : bool, default False
        Log internals at debug level
    admonitions : dict[str, str]
        Simple section kinds rendered as ``:::`` blocks, mapped to the marker
    front_matter : bool, default True
        Prepend YAML front matter to each page
    page_file_extension : str, default ".md"
        Extension of the written page files

    """

    mode: RenderMode = field(
        default=DEFAULT_RENDER_MODE,
        metadata={"help": "Output mode", "choices": list(RENDER_MODES), "importance": "core"},
    )
    page_base_url: str = field(
        default=DEFAULT_PAGE_BASE_URL,
        metadata={"help": "URL prefix of the generated pages", "importance": "core"},
    )
    suggest_todo_descriptions: bool = field(
        default=False,
        metadata={"help": "Show TODO placeholders for undocumented compounds", "importance": "core"},
    )
    verbose: bool = field(
        default=False,
        metadata={"help": "Log progress at info level", "importance": "advanced"},
    )
    debug: bool = field(
        default=False,
        metadata={"help": "Log internals at debug level", "importance": "advanced"},
    )
    admonitions: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_ADMONITIONS),
        metadata={"help": "Simple section kinds rendered as admonitions", "importance": "advanced"},
    )
    front_matter: bool = field(
        default=True,
        metadata={"help": "Prepend YAML front matter to each page", "importance": "core"},
    )
    page_file_extension: str = field(
        default=DEFAULT_PAGE_FILE_EXTENSION,
        metadata={"help": "Extension of the written page files", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the mode is unknown, the base URL is not slash delimited or
            the file extension does not start with a dot.

        """
        if self.mode not in RENDER_MODES:
            raise ValueError(f"mode must be one of {', '.join(RENDER_MODES)}, got {self.mode!r}")
        if not self.page_base_url.startswith("/") or not self.page_base_url.endswith("/"):
            raise ValueError(f"page_base_url must start and end with '/', got {self.page_base_url!r}")
        if not self.page_file_extension.startswith("."):
            raise ValueError(f"page_file_extension must start with '.', got {self.page_file_extension!r}")
