#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/parsers/session.py
"""Parse session: reads a Doxygen XML folder into a compound forest.

The session owns everything produced by one parse run. Files are read in
a fixed order, the index first, then each compound file in index order,
and finally the optional Doxyfile dump. Once every compound is known, two
passes fix up the cross references that could not be resolved while
building:

1. member kinds missing from ``<member>`` references are copied from the
   matching ``<memberdef>``;
2. parent and child links are derived from the ``inner*`` references.

Examples
--------
Parse a folder and look up a compound:

    >>> session = ParseSession().parse("build/xml")
    >>> session.compounds_by_id["classfoo"].compound_name
    'Foo'

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from doxy2md.ast.compounds import CompoundDef, Doxyfile, DoxygenIndex, MemberDef
from doxy2md.exceptions import GrammarError, InvalidOptionsError
from doxy2md.options.parse import ParseOptions
from doxy2md.parsers.compounds import CompoundBuilder
from doxy2md.parsers.index import IndexBuilder
from doxy2md.parsers.xml_access import XmlAccess, XmlElement

logger = logging.getLogger(__name__)

# Compound kind -> inner reference lists that make up its children. Each
# family forms its own tree; a class listed in a group or a file is not a
# child of that group or file.
_HIERARCHY_FIELDS: dict[str, tuple[str, ...]] = {
    "namespace": ("inner_namespaces", "inner_classes"),
    "class": ("inner_classes",),
    "struct": ("inner_classes",),
    "union": ("inner_classes",),
    "interface": ("inner_classes",),
    "group": ("inner_groups",),
    "dir": ("inner_dirs", "inner_files"),
    "page": ("inner_pages",),
}


class ParseSession:
    """State of one parse run over a Doxygen XML folder.

    Parameters
    ----------
    options : ParseOptions or None, default = None
        File names and input folder; defaults are used when omitted

    Attributes
    ----------
    index : DoxygenIndex or None
        The parsed ``index.xml``
    doxyfile : Doxyfile or None
        The parsed ``Doxyfile.xml``, when present
    compound_defs : list of CompoundDef
        All compounds, in index order
    compounds_by_id : dict
        Compound lookup by id
    member_defs_by_id : dict
        Member definition lookup by id
    files_by_path : dict
        File compounds by their ``location.file`` path
    parent_by_id : dict
        Parent compound id of each child compound id
    children_by_id : dict
        Ordered child compound ids of each parent compound id
    parsed_files_counter : int
        Number of XML files read so far

    """

    def __init__(self, options: Optional[ParseOptions] = None):
        if options is not None and not isinstance(options, ParseOptions):
            raise InvalidOptionsError(
                component_name="ParseSession", expected_type=ParseOptions, received_type=type(options)
            )
        self.options = options or ParseOptions()
        self.xml = XmlAccess()
        self.index_builder = IndexBuilder(self.xml)
        self.compound_builder = CompoundBuilder(self.xml)

        self.index: Optional[DoxygenIndex] = None
        self.doxyfile: Optional[Doxyfile] = None
        self.compound_defs: list[CompoundDef] = []
        self.compounds_by_id: dict[str, CompoundDef] = {}
        self.member_defs_by_id: dict[str, MemberDef] = {}
        self.files_by_path: dict[str, CompoundDef] = {}
        self.parent_by_id: dict[str, str] = {}
        self.children_by_id: dict[str, list[str]] = {}
        self.parsed_files_counter = 0
        self._finalized = False

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def parse(self, input_folder: Union[str, Path, None] = None) -> Self:
        """Parse a whole Doxygen XML folder.

        Parameters
        ----------
        input_folder : str, Path or None, default = None
            Folder to read; defaults to ``options.input_folder``

        Returns
        -------
        ParseSession
            This session, finalized

        Raises
        ------
        FileNotFoundError
            If the index or a compound file listed in it is missing
        GrammarError
            If any file breaks the Doxygen grammar

        """
        folder = Path(input_folder if input_folder is not None else self.options.input_folder)
        logger.info("Parsing the Doxygen XML files from %s", folder)

        self.index = self.parse_index_file(folder / self.options.index_file_name)
        for compound in self.index.compounds:
            self.parse_compound_file(folder / f"{compound.refid}.xml")

        doxyfile_path = folder / self.options.doxyfile_name
        if doxyfile_path.is_file():
            self.doxyfile = self.parse_doxyfile(doxyfile_path)
        else:
            logger.debug("No %s, Doxyfile options not available", doxyfile_path.name)

        logger.info("%d xml files parsed", self.parsed_files_counter)
        self.finalize()
        return self

    def _read_root(self, file_path: Path, root_name: str) -> XmlElement:
        elements = self.xml.parse_file(file_path)
        self.parsed_files_counter += 1
        root = elements[0]
        if not self.xml.has_inner_element(root, root_name):
            raise GrammarError(
                f"expected <{root_name}> root, got <{self.xml.element_name(root)}>",
                element_name=str(file_path),
                builder_name="ParseSession",
            )
        return root

    def parse_index_file(self, file_path: Union[str, Path]) -> DoxygenIndex:
        """Parse ``index.xml``."""
        root = self._read_root(Path(file_path), "doxygenindex")
        return self.index_builder.build_doxygen_index(root)

    def parse_compound_file(self, file_path: Union[str, Path]) -> list[CompoundDef]:
        """Parse one ``<refid>.xml`` file and register its compounds."""
        root = self._read_root(Path(file_path), "doxygen")
        doxygen = self.compound_builder.build_doxygen(root)
        self.add_compounds(doxygen.compound_defs)
        return doxygen.compound_defs

    def parse_doxyfile(self, file_path: Union[str, Path]) -> Doxyfile:
        """Parse ``Doxyfile.xml``."""
        root = self._read_root(Path(file_path), "doxyfile")
        return self.index_builder.build_doxyfile(root)

    def add_compounds(self, compound_defs: list[CompoundDef]) -> None:
        """Register compounds and their member definitions in the lookups."""
        for compound in compound_defs:
            if compound.id in self.compounds_by_id:
                logger.warning("Duplicate compound id %s, the first definition is kept", compound.id)
                continue
            self.compound_defs.append(compound)
            self.compounds_by_id[compound.id] = compound
            if compound.compound_kind == "file" and compound.location is not None:
                self.files_by_path[compound.location.file] = compound
            for section in compound.section_defs:
                for member_def in section.member_defs:
                    self.member_defs_by_id.setdefault(member_def.id, member_def)

    # ------------------------------------------------------------------
    # Second pass
    # ------------------------------------------------------------------

    def finalize(self) -> None:
        """Run the back-fill and hierarchy passes, once."""
        if self._finalized:
            logger.debug("Parse session already finalized")
            return
        self.backfill_member_kinds()
        self.build_hierarchy()
        self._finalized = True

    def backfill_member_kinds(self) -> int:
        """Copy the kind of each member definition to the references with no kind.

        Returns
        -------
        int
            Number of references updated

        Raises
        ------
        GrammarError
            If a reference without kind has no member definition

        """
        updated = 0
        for compound in self.compound_defs:
            for section in compound.section_defs:
                for member in section.members:
                    if member.member_kind:
                        continue
                    member_def = self.member_defs_by_id.get(member.refid)
                    if member_def is None:
                        raise GrammarError(
                            f"member {member.refid} ({member.name}) of {compound.id} has no definition",
                            element_name="member",
                            builder_name="backfill_member_kinds",
                        )
                    member.member_kind = member_def.member_kind
                    updated += 1
        logger.debug("%d member kinds back-filled", updated)
        return updated

    def build_hierarchy(self) -> None:
        """Link compounds to their parents through the inner references."""
        self.parent_by_id.clear()
        self.children_by_id.clear()
        for compound in self.compound_defs:
            for field_name in _HIERARCHY_FIELDS.get(compound.compound_kind, ()):
                for inner_ref in getattr(compound, field_name):
                    if inner_ref.refid not in self.compounds_by_id:
                        logger.debug("%s %s not found, skipped", field_name, inner_ref.refid)
                        continue
                    previous = self.parent_by_id.get(inner_ref.refid)
                    if previous is not None and previous != compound.id:
                        logger.warning(
                            "%s already has parent %s, %s ignored", inner_ref.refid, previous, compound.id
                        )
                        continue
                    self.parent_by_id[inner_ref.refid] = compound.id
                    self.children_by_id.setdefault(compound.id, []).append(inner_ref.refid)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def parent_of(self, compound_id: str) -> Optional[CompoundDef]:
        """Return the parent compound, or None for top level compounds."""
        parent_id = self.parent_by_id.get(compound_id)
        return self.compounds_by_id.get(parent_id) if parent_id is not None else None

    def children_of(self, compound_id: str) -> list[CompoundDef]:
        """Return the child compounds, in inner reference order."""
        return [self.compounds_by_id[child_id] for child_id in self.children_by_id.get(compound_id, [])]

    def top_level_compounds(self, compound_kind: str) -> list[CompoundDef]:
        """Return the compounds of one kind that have no parent."""
        return [
            compound
            for compound in self.compound_defs
            if compound.compound_kind == compound_kind and compound.id not in self.parent_by_id
        ]

    def doxyfile_option(self, option_id: str) -> Optional[list[str]]:
        """Return the values of a Doxyfile option, or None when unknown."""
        if self.doxyfile is None:
            return None
        for option in self.doxyfile.options:
            if option.id == option_id:
                return option.values
        return None


__all__ = ["ParseSession"]
