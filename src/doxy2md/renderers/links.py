#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/renderers/links.py
"""Page locations of the compounds.

Every compound gets a relative permalink made of the plural folder of its
kind and a path derived from its name, e.g. ``classes/ns/foo`` for the
class ``ns::Foo``. Folders and files use the chain of their parent folders.
Permalinks are computed once, before rendering starts; two compounds
mapping to the same path are told apart with ``-1``, ``-2`` suffixes.

"""

from __future__ import annotations

import logging
import posixpath
from typing import Callable, Optional

from doxy2md.ast.compounds import CompoundDef
from doxy2md.constants import COMPOUND_KIND_FOLDERS
from doxy2md.utils.permalinks import sanitize_anonymous_namespace, sanitize_hierarchical_path

logger = logging.getLogger(__name__)

ParentLookup = Callable[[str], Optional[CompoundDef]]

_CLASS_KINDS = ("class", "struct", "union", "interface")


def _no_parent(compound_id: str) -> Optional[CompoundDef]:
    return None


class PagePermalinks:
    """Relative permalinks of all the compounds of a parse session.

    Parameters
    ----------
    compound_defs : list of CompoundDef
        Compounds, in index order; the order decides which duplicate keeps
        the plain path
    parent_of : callable, optional
        Returns the parent compound of a compound id; used to build the
        paths of folders and files

    """

    def __init__(self, compound_defs: list[CompoundDef], parent_of: Optional[ParentLookup] = None):
        self._parent_of = parent_of or _no_parent
        self.relative_permalinks: dict[str, str] = {}

        used: set[str] = set()
        for compound in compound_defs:
            path = self.compute_relative_permalink(compound)
            if path is None:
                continue
            unique = path
            counter = 1
            while unique in used:
                unique = f"{path}-{counter}"
                counter += 1
            if unique != path:
                logger.debug("Permalink %s already used, %s gets %s", path, compound.id, unique)
            used.add(unique)
            self.relative_permalinks[compound.id] = unique

    def get(self, compound_id: str) -> Optional[str]:
        """Return the relative permalink of a compound, or None."""
        return self.relative_permalinks.get(compound_id)

    def compute_relative_permalink(self, compound: CompoundDef) -> Optional[str]:
        """Derive the relative permalink of one compound.

        Returns None, with a warning, for kinds that get no page.
        """
        kind = compound.compound_kind
        folder = COMPOUND_KIND_FOLDERS.get(kind)
        if folder is None:
            logger.warning("Compound kind %s of %s has no page", kind, compound.id)
            return None

        if kind in _CLASS_KINDS:
            name = compound.compound_name.replace("::", "/")
        elif kind == "namespace":
            name = self._namespace_path(compound)
        elif kind in ("dir", "file"):
            name = self._folder_path(compound)
        else:
            name = compound.compound_name

        path = sanitize_hierarchical_path(name)
        if not path:
            logger.warning("Compound %s has an empty name, using its id", compound.id)
            path = sanitize_hierarchical_path(compound.id)
        return f"{folder}/{path}"

    def _namespace_path(self, compound: CompoundDef) -> str:
        name = compound.compound_name
        if name and not name.startswith("::"):
            return sanitize_anonymous_namespace(name.replace("::", "/"))

        file_name = ""
        if compound.location is not None:
            file_name = posixpath.basename(compound.location.file)
        anonymous = f"anonymous{{{file_name}}}"
        if name.startswith("::"):
            return f"{anonymous}{name}".replace("::", "/")
        return anonymous

    def _folder_path(self, compound: CompoundDef) -> str:
        names = [posixpath.basename(compound.compound_name.rstrip("/"))]
        parent = self._parent_of(compound.id)
        while parent is not None and parent.compound_kind == "dir":
            names.append(posixpath.basename(parent.compound_name.rstrip("/")))
            parent = self._parent_of(parent.id)
        return "/".join(reversed(names))


__all__ = ["PagePermalinks"]
