#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/options/parse.py
"""Options controlling which Doxygen XML files are read."""

from __future__ import annotations

from dataclasses import dataclass, field

from doxy2md.constants import DEFAULT_DOXYFILE_NAME, DEFAULT_INDEX_FILE_NAME
from doxy2md.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class ParseOptions(CloneFrozenMixin):
    """Configuration for a parse session.

    Parameters
    ----------
    input_folder : str
        Folder holding the Doxygen XML output
    index_file_name : str, default "index.xml"
        Name of the compound index inside ``input_folder``
    doxyfile_name : str, default "Doxyfile.xml"
        Name of the optional Doxyfile dump inside ``input_folder``

    """

    input_folder: str = field(
        default="",
        metadata={"help": "Folder holding the Doxygen XML output", "importance": "core"},
    )
    index_file_name: str = field(
        default=DEFAULT_INDEX_FILE_NAME,
        metadata={"help": "Name of the compound index file", "importance": "advanced"},
    )
    doxyfile_name: str = field(
        default=DEFAULT_DOXYFILE_NAME,
        metadata={"help": "Name of the Doxyfile dump, skipped when missing", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate file names.

        Raises
        ------
        ValueError
            If a file name is empty or contains a path separator.

        """
        for name in ("index_file_name", "doxyfile_name"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} must not be empty")
            if "/" in value or "\\" in value:
                raise ValueError(f"{name} must be a plain file name, got {value!r}")
