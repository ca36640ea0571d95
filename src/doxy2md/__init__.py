"""doxy2md - Convert Doxygen XML output into Markdown/MDX reference pages.

doxy2md reads the XML that Doxygen writes (``index.xml``, one file per
compound and ``Doxyfile.xml``) into a typed, order-preserving node tree,
links the compounds into namespace, class, folder and topic hierarchies,
and renders one page per compound for static site generators such as
Docusaurus.

Key Features
------------
- Strict reading of the Doxygen XML grammar, with clear errors
- Lenient handling of unknown elements and attributes, logged as warnings
- Markdown/MDX, HTML or plain text rendering of descriptions
- Member sections regrouped into constructors, operators, functions...
- YAML front matter and cross-page permalinks

Requirements
------------
- Python 3.10+

Examples
--------
Converting a folder:

    >>> from doxy2md import ParseSession, RenderWorkspace, PageRenderer
    >>> session = ParseSession().parse("build/xml")
    >>> workspace = RenderWorkspace.from_session(session)
    >>> PageRenderer(workspace).write_pages("website/docs/api")

Rendering a single description:

    >>> workspace.render_string(session.compounds_by_id["classfoo"].brief_description)

See Also
--------
doxy2md.ast : node definitions
doxy2md.cli : the ``doxy2md`` command

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "doxy2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from doxy2md.exceptions import Doxy2MdError, GrammarError, ParsingError  # noqa: E402
from doxy2md.options import ParseOptions, RenderOptions  # noqa: E402
from doxy2md.parsers import ParseSession  # noqa: E402
from doxy2md.renderers import PageRenderer, RenderWorkspace  # noqa: E402

__all__ = [
    "__version__",
    "Doxy2MdError",
    "GrammarError",
    "PageRenderer",
    "ParseOptions",
    "ParseSession",
    "ParsingError",
    "RenderOptions",
    "RenderWorkspace",
]
