#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/parsers/__init__.py
"""Doxygen XML readers.

- xml_access: the order-preserving element shape and its accessors
- description, compounds, index: one builder method per grammar production
- session: reads a whole folder and links the compounds together
"""

from __future__ import annotations

from doxy2md.parsers.base import BaseBuilder
from doxy2md.parsers.compounds import CompoundBuilder
from doxy2md.parsers.description import DescriptionBuilder
from doxy2md.parsers.index import IndexBuilder
from doxy2md.parsers.session import ParseSession
from doxy2md.parsers.xml_access import XmlAccess, XmlElement

__all__ = [
    "BaseBuilder",
    "CompoundBuilder",
    "DescriptionBuilder",
    "IndexBuilder",
    "ParseSession",
    "XmlAccess",
    "XmlElement",
]
