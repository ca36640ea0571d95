#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_index_builder.py
"""Unit tests for the ``index.xml`` and ``Doxyfile.xml`` builders.

Tests cover:
- Compound order and members of the index
- Doxyfile options with several values
- Mandatory attributes

"""

import pytest
from utils import FOO_ID, SAMPLE_INDEX_ENTRIES, SAMPLE_INDEX_MEMBERS, doxyfile, index_file, parse_xml

from doxy2md.exceptions import GrammarError
from doxy2md.parsers.index import IndexBuilder


@pytest.fixture
def index_builder(xml) -> IndexBuilder:
    """Provide an index builder sharing the ``xml`` accessor."""
    return IndexBuilder(xml)


@pytest.mark.unit
class TestDoxygenIndex:
    """Tests for ``<doxygenindex>``."""

    def test_compounds_keep_order(self, index_builder: IndexBuilder) -> None:
        """Compounds are listed in document order."""
        index = index_builder.build_doxygen_index(parse_xml(index_file(SAMPLE_INDEX_ENTRIES, SAMPLE_INDEX_MEMBERS)))

        assert index.version == "1.9.8"
        assert index.lang == "en-US"
        assert [(c.refid, c.compound_kind, c.name) for c in index.compounds] == SAMPLE_INDEX_ENTRIES

    def test_members(self, index_builder: IndexBuilder) -> None:
        """Members of a compound are collected with their kind."""
        index = index_builder.build_doxygen_index(parse_xml(index_file(SAMPLE_INDEX_ENTRIES, SAMPLE_INDEX_MEMBERS)))
        foo = index.compounds[0]

        assert foo.refid == FOO_ID
        assert [(m.refid, m.member_kind, m.name) for m in foo.members] == SAMPLE_INDEX_MEMBERS[FOO_ID]

    def test_compound_requires_kind(self, index_builder: IndexBuilder) -> None:
        """An index compound without kind breaks the grammar."""
        with pytest.raises(GrammarError, match="missing kind"):
            index_builder.build_index_compound(parse_xml('<compound refid="classfoo"><name>Foo</name></compound>'))

    def test_member_requires_refid(self, index_builder: IndexBuilder) -> None:
        """An index member without refid breaks the grammar."""
        with pytest.raises(GrammarError, match="missing refid"):
            index_builder.build_index_member(parse_xml('<member kind="function"><name>f</name></member>'))

    def test_root_requires_lang(self, index_builder: IndexBuilder) -> None:
        """The index root needs a language."""
        with pytest.raises(GrammarError, match="missing lang"):
            index_builder.build_doxygen_index(parse_xml('<doxygenindex version="1.9.8"/>'))


@pytest.mark.unit
class TestDoxyfile:
    """Tests for ``<doxyfile>``."""

    def test_options(self, index_builder: IndexBuilder) -> None:
        """Options keep their id, type and values."""
        root = parse_xml(doxyfile({"PROJECT_NAME": ["Sample"], "INPUT": ["include", "docs"]}))
        result = index_builder.build_doxyfile(root)

        assert [option.id for option in result.options] == ["PROJECT_NAME", "INPUT"]
        assert result.options[0].option_type == "string"
        assert result.options[0].default == "no"
        assert result.options[1].values == ["include", "docs"]

    def test_option_requires_type(self, index_builder: IndexBuilder) -> None:
        """All three option attributes are mandatory."""
        with pytest.raises(GrammarError, match="missing type"):
            index_builder.build_doxyfile_option(parse_xml('<option id="X" default="yes"/>'))
