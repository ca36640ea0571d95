#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the doxy2md library.

Constants are organized by category:
1. Type Definitions - Literal types
2. Input Layout - Names of the files Doxygen writes
3. Rendering Defaults - Output options and vocabulary tables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

RenderMode = Literal["text", "markdown", "html"]
RENDER_MODES: tuple[str, ...] = ("text", "markdown", "html")

# =============================================================================
# Input Layout
# =============================================================================

DEFAULT_INDEX_FILE_NAME = "index.xml"
DEFAULT_DOXYFILE_NAME = "Doxyfile.xml"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_RENDER_MODE: RenderMode = "markdown"
DEFAULT_PAGE_BASE_URL = "/api/"
DEFAULT_PAGE_FILE_EXTENSION = ".md"

# Simple section kinds rendered as admonition blocks, mapped to the marker.
DEFAULT_ADMONITIONS: dict[str, str] = {
    "note": "note",
    "warning": "warning",
    "attention": "danger",
    "important": "tip",
}

# Simple section kinds rendered as titled definition lists.
SIMPLE_SECT_TITLES: dict[str, str] = {
    "see": "See Also",
    "return": "Returns",
    "author": "Author",
    "authors": "Authors",
    "version": "Version",
    "since": "Since",
    "date": "Date",
    "pre": "Precondition",
    "post": "Postcondition",
    "copyright": "Copyright",
    "invariant": "Invariant",
    "remark": "Remarks",
}

PARAMETER_LIST_TITLES: dict[str, str] = {
    "templateparam": "Template Parameters",
    "retval": "Return Values",
    "param": "Parameters",
    "exception": "Exceptions",
}

HIGHLIGHT_CLASSES: dict[str, str] = {
    "normal": "doxyHighlight",
    "charliteral": "doxyHighlightCharLiteral",
    "comment": "doxyHighlightComment",
    "preprocessor": "doxyHighlightPreprocessor",
    "keyword": "doxyHighlightKeyword",
    "keywordtype": "doxyHighlightKeywordType",
    "keywordflow": "doxyHighlightKeywordFlow",
    "token": "doxyHighlightToken",
    "stringliteral": "doxyHighlightStringLiteral",
    "vhdlchar": "doxyHighlightVhdlChar",
    "vhdlkeyword": "doxyHighlightVhdlKeyword",
    "vhdllogic": "doxyHighlightVhdlLogic",
}

# Compound kind -> output folder and page label.
COMPOUND_KIND_FOLDERS: dict[str, str] = {
    "class": "classes",
    "struct": "structs",
    "union": "unions",
    "interface": "interfaces",
    "namespace": "namespaces",
    "file": "files",
    "dir": "folders",
    "group": "groups",
    "page": "pages",
    "example": "examples",
}

COMPOUND_KIND_LABELS: dict[str, str] = {
    "class": "Class",
    "struct": "Struct",
    "union": "Union",
    "interface": "Interface",
    "namespace": "Namespace",
    "file": "File",
    "dir": "Folder",
    "group": "Topic",
    "page": "Page",
    "example": "Example",
}
