#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_parse_session.py
"""Unit tests for the parse session.

Tests cover:
- Reading a complete Doxygen XML folder
- Member kind back-fill
- Parent and child links between compounds
- Missing files, wrong roots and duplicate compounds

"""

import logging
from pathlib import Path

import pytest
from utils import (
    DIR_ID,
    FILE_ID,
    FOO_ID,
    GROUP_ID,
    HELPER_ID,
    NAMESPACE_XML,
    PAGE_ID,
    SAMPLE_INDEX_ENTRIES,
    doxygen_file,
)

from doxy2md.exceptions import FileNotFoundError, GrammarError, InvalidOptionsError
from doxy2md.options import ParseOptions, RenderOptions
from doxy2md.parsers.session import ParseSession


@pytest.fixture
def session(sample_xml_folder: Path) -> ParseSession:
    """Provide a session over the sample project."""
    return ParseSession().parse(sample_xml_folder)


@pytest.mark.unit
class TestParse:
    """Tests for reading a folder."""

    def test_all_compounds_in_index_order(self, session: ParseSession) -> None:
        """Every compound of the index is parsed, in index order."""
        assert [compound.id for compound in session.compound_defs] == [entry[0] for entry in SAMPLE_INDEX_ENTRIES]
        assert session.index is not None
        # index, six compound files and the Doxyfile
        assert session.parsed_files_counter == 8

    def test_lookups(self, session: ParseSession) -> None:
        """Compounds, members and files are indexed."""
        assert session.compounds_by_id[FOO_ID].compound_name == "ns::Foo"
        assert session.member_defs_by_id[HELPER_ID].name == "helper"
        assert session.member_defs_by_id[f"{FOO_ID}_1a03"].name == "bar"
        assert session.files_by_path["include/foo.h"].id == FILE_ID

    def test_doxyfile_options(self, session: ParseSession) -> None:
        """Doxyfile option values are available by id."""
        assert session.doxyfile_option("PROJECT_NAME") == ["Sample"]
        assert session.doxyfile_option("NO_SUCH_OPTION") is None

    def test_doxyfile_is_optional(self, sample_xml_folder: Path) -> None:
        """A folder without ``Doxyfile.xml`` still parses."""
        (sample_xml_folder / "Doxyfile.xml").unlink()

        session = ParseSession().parse(sample_xml_folder)

        assert session.doxyfile is None
        assert session.doxyfile_option("PROJECT_NAME") is None

    def test_options_folder(self, sample_xml_folder: Path) -> None:
        """The folder defaults to ``options.input_folder``."""
        session = ParseSession(ParseOptions(input_folder=str(sample_xml_folder))).parse()

        assert len(session.compound_defs) == 6

    def test_wrong_options_type(self) -> None:
        """Render options are refused."""
        with pytest.raises(InvalidOptionsError):
            ParseSession(RenderOptions())

    def test_missing_compound_file(self, sample_xml_folder: Path) -> None:
        """A compound listed in the index must have its file."""
        (sample_xml_folder / f"{DIR_ID}.xml").unlink()

        with pytest.raises(FileNotFoundError):
            ParseSession().parse(sample_xml_folder)

    def test_missing_index(self, tmp_path: Path) -> None:
        """A folder without ``index.xml`` cannot be parsed."""
        with pytest.raises(FileNotFoundError):
            ParseSession().parse(tmp_path)

    def test_wrong_root(self, sample_xml_folder: Path) -> None:
        """A compound file must have a ``<doxygen>`` root."""
        (sample_xml_folder / f"{PAGE_ID}.xml").write_text("<doxygenindex/>", encoding="utf-8")

        with pytest.raises(GrammarError, match="expected <doxygen> root"):
            ParseSession().parse(sample_xml_folder)

    def test_duplicate_compound_keeps_first(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A compound id seen twice keeps its first definition."""
        session = ParseSession()
        path = tmp_path / "ns.xml"
        path.write_text(doxygen_file(NAMESPACE_XML), encoding="utf-8")
        first = session.parse_compound_file(path)[0]

        with caplog.at_level(logging.WARNING):
            session.parse_compound_file(path)

        assert session.compound_defs == [first]
        assert session.compounds_by_id["namespacens"] is first
        assert "Duplicate compound id namespacens" in caplog.text


@pytest.mark.unit
class TestBackfill:
    """Tests for the member kind back-fill."""

    def test_group_member_kind_is_filled(self, session: ParseSession) -> None:
        """A member reference without kind gets the kind of its definition."""
        member = session.compounds_by_id[GROUP_ID].section_defs[0].members[0]

        assert member.refid == HELPER_ID
        assert member.member_kind == "function"

    def test_no_reference_left_empty(self, session: ParseSession) -> None:
        """After parsing, every member reference has a kind."""
        members = [
            member
            for compound in session.compound_defs
            for section in compound.section_defs
            for member in section.members
        ]

        assert members
        assert all(member.member_kind for member in members)

    def test_unresolved_reference_is_fatal(self, tmp_path: Path) -> None:
        """A reference without kind and without definition aborts the back-fill."""
        session = ParseSession()
        path = tmp_path / "group.xml"
        path.write_text(
            doxygen_file(
                '<compounddef id="group__x" kind="group"><compoundname>x</compoundname>'
                '<sectiondef kind="func"><member refid="nowhere_1a"><name>gone</name></member></sectiondef>'
                "</compounddef>"
            ),
            encoding="utf-8",
        )
        session.parse_compound_file(path)

        with pytest.raises(GrammarError, match="nowhere_1a .*gone.* of group__x"):
            session.finalize()


@pytest.mark.unit
class TestHierarchy:
    """Tests for parent and child links."""

    def test_namespace_owns_class(self, session: ParseSession) -> None:
        """A class listed by a namespace is its child."""
        assert session.parent_of(FOO_ID).id == "namespacens"
        assert [child.id for child in session.children_of("namespacens")] == [FOO_ID]

    def test_dir_owns_file(self, session: ParseSession) -> None:
        """A file listed by a directory is its child."""
        assert session.parent_of(FILE_ID).id == DIR_ID

    def test_file_and_group_do_not_own_classes(self, session: ParseSession) -> None:
        """Files and groups list classes without becoming their parent."""
        assert session.children_of(FILE_ID) == []
        assert session.children_of(GROUP_ID) == []

    def test_top_level_compounds(self, session: ParseSession) -> None:
        """Compounds without parent are listed by kind."""
        assert [c.id for c in session.top_level_compounds("namespace")] == ["namespacens"]
        assert session.top_level_compounds("class") == []
        assert [c.id for c in session.top_level_compounds("dir")] == [DIR_ID]
        assert session.parent_of(PAGE_ID) is None

    def test_finalize_runs_once(self, session: ParseSession) -> None:
        """Calling finalize again leaves the links unchanged."""
        before = dict(session.parent_by_id)

        session.finalize()

        assert session.parent_by_id == before
