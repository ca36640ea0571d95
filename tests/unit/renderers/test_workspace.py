#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_workspace.py
"""Unit tests for the rendering workspace and the renderer registry.

Tests cover:
- Rendering of None, strings, lists and nodes
- Mode validation and option type checks
- Registry lookups through base classes
- Permalink resolution for compounds, members and cross references
- Touched file bookkeeping

"""

import logging

import pytest

from doxy2md.ast.compounds import CompoundDef
from doxy2md.ast.nodes import DocumentNode, Para
from doxy2md.exceptions import InvalidOptionsError, RenderingError
from doxy2md.options import ParseOptions, RenderOptions
from doxy2md.parsers import ParseSession
from doxy2md.renderers.base import ElementLinesRenderer, ElementStringRenderer, RendererRegistry
from doxy2md.renderers.workspace import RenderWorkspace


class UpperRenderer(ElementStringRenderer):
    """Render any node as its upper cased text."""

    def render_to_string(self, element, mode: str) -> str:
        return element.text_content().upper()


class CountLinesRenderer(ElementLinesRenderer):
    """Render any node as two fixed lines."""

    def render_to_lines(self, element, mode: str) -> list[str]:
        return ["first", "second"]


@pytest.fixture
def workspace() -> RenderWorkspace:
    """Provide a workspace knowing a class and the ``todo`` page."""
    foo = CompoundDef(id="classfoo", compound_kind="class", compound_name="Foo")
    todo = CompoundDef(id="todo", compound_kind="page", compound_name="todo")
    return RenderWorkspace({"classfoo": foo, "todo": todo})


@pytest.mark.unit
class TestRenderValues:
    """Tests for render_string and render_lines."""

    def test_none(self, workspace: RenderWorkspace) -> None:
        """None renders as nothing."""
        assert workspace.render_string(None) == ""
        assert workspace.render_lines(None) == []

    def test_string_escaped(self, workspace: RenderWorkspace) -> None:
        """Literal strings are escaped for the mode."""
        assert workspace.render_string("a<b_c", "markdown") == "a&lt;b&#95;c"
        assert workspace.render_string("a<b_c", "html") == "a&lt;b_c"
        assert workspace.render_string("a<b_c", "text") == "a<b_c"

    def test_default_mode(self) -> None:
        """Without a mode the options decide."""
        workspace = RenderWorkspace({}, RenderOptions(mode="html"))

        assert workspace.render_string("a_b") == "a_b"

    def test_list(self, workspace: RenderWorkspace) -> None:
        """Lists are concatenated for strings and flattened for lines."""
        assert workspace.render_string(["a", "b"], "text") == "ab"
        assert workspace.render_lines(["a", "  \n", Para(children=["b"])], "text") == ["a", "", "b"]

    def test_lines_renderer_as_string(self, workspace: RenderWorkspace) -> None:
        """Lines renderers are joined when a string is requested."""
        assert workspace.render_string(Para(children=["b"]), "text") == "\nb"

    def test_unknown_mode(self, workspace: RenderWorkspace) -> None:
        """Only the three modes are accepted."""
        with pytest.raises(RenderingError, match="Unknown render mode"):
            workspace.render_string("x", "pdf")

    def test_no_renderer(self, workspace: RenderWorkspace, caplog: pytest.LogCaptureFixture) -> None:
        """Nodes without a renderer are logged and render as nothing."""
        with caplog.at_level(logging.ERROR):
            assert workspace.render_string(DocumentNode(kind="mystery"), "text") == ""
        assert "mystery" in caplog.text

    def test_wrong_options_type(self) -> None:
        """Parse options are rejected."""
        with pytest.raises(InvalidOptionsError):
            RenderWorkspace({}, ParseOptions())


@pytest.mark.unit
class TestRendererRegistry:
    """Tests for the renderer registry."""

    def test_base_class_lookup(self) -> None:
        """A renderer registered for a base class serves its subclasses."""
        workspace = RenderWorkspace({}, registry=RendererRegistry())
        workspace.registry.register_string(DocumentNode, UpperRenderer(workspace))

        assert workspace.render_string(Para(children=["abc"]), "text") == "ABC"

    def test_requested_flavour_first(self) -> None:
        """The requested flavour is looked up through the whole hierarchy first."""
        registry = RendererRegistry()
        workspace = RenderWorkspace({}, registry=registry)
        registry.register_lines(DocumentNode, CountLinesRenderer(workspace))
        registry.register_string(Para, UpperRenderer(workspace))

        assert registry.get_string_renderer(Para) is not None
        assert workspace.render_lines(Para(children=["x"]), "text") == ["first", "second"]
        assert workspace.render_string(Para(children=["x"]), "text") == "X"

    def test_string_renderer_split_into_lines(self) -> None:
        """String renderers are split when lines are requested."""
        workspace = RenderWorkspace({}, registry=RendererRegistry())
        workspace.registry.register_string(Para, UpperRenderer(workspace))

        assert workspace.render_lines(Para(children=["a\nb"]), "text") == ["A", "B"]

    def test_duplicate_registration_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """Registering a class twice replaces the renderer with a warning."""
        registry = RendererRegistry()
        workspace = RenderWorkspace({}, registry=registry)
        with caplog.at_level(logging.WARNING):
            registry.register_string(Para, UpperRenderer(workspace))
            registry.register_string(Para, UpperRenderer(workspace))

        assert "already registered" in caplog.text
        assert registry.has_renderer(Para)
        assert not registry.has_renderer(CompoundDef)


@pytest.mark.unit
class TestPermalinks:
    """Tests for link resolution."""

    def test_compound(self, workspace: RenderWorkspace) -> None:
        """Compounds link to their page under the base URL."""
        assert workspace.get_permalink("classfoo", "compound") == "/api/classes/foo"

    def test_member(self, workspace: RenderWorkspace) -> None:
        """Members link to an anchor on their compound page."""
        assert workspace.get_permalink("classfoo_1a8f3c", "member") == "/api/classes/foo/#a8f3c"

    def test_xrefsect(self, workspace: RenderWorkspace) -> None:
        """Cross reference sections link into their list page."""
        assert workspace.get_permalink("todo_1_todo000001", "xrefsect") == "/api/pages/todo/#_todo000001"

    def test_unknown_ids(self, workspace: RenderWorkspace) -> None:
        """Unknown targets resolve to None."""
        assert workspace.get_permalink("classbar", "compound") is None
        assert workspace.get_permalink("classbar_1a01", "member") is None

    def test_unsupported_kindref(self, workspace: RenderWorkspace, caplog: pytest.LogCaptureFixture) -> None:
        """Unsupported kinds are logged and resolve to None."""
        with caplog.at_level(logging.ERROR):
            assert workspace.get_permalink("classfoo", "weird") is None
        assert "Unsupported kindref" in caplog.text

    def test_base_url(self) -> None:
        """The base URL prefixes every page permalink."""
        foo = CompoundDef(id="classfoo", compound_kind="class", compound_name="Foo")
        workspace = RenderWorkspace({"classfoo": foo}, RenderOptions(page_base_url="/reference/"))

        assert workspace.get_permalink("classfoo", "compound") == "/reference/classes/foo"

    def test_resolver_override(self) -> None:
        """A custom resolver replaces the built-in resolution."""
        calls = []

        def resolver(refid: str, kindref: str):
            calls.append((refid, kindref))
            return f"https://docs.example.com/{refid}"

        workspace = RenderWorkspace({}, permalink_resolver=resolver)

        assert workspace.get_permalink("classfoo", "compound") == "https://docs.example.com/classfoo"
        assert calls == [("classfoo", "compound")]

    def test_render_link(self, workspace: RenderWorkspace) -> None:
        """Labels are only wrapped when there is a target."""
        assert workspace.render_link("Foo", "/api/classes/foo") == '<a href="/api/classes/foo">Foo</a>'
        assert workspace.render_link("Foo", None) == "Foo"


@pytest.mark.unit
class TestWorkspaceState:
    """Tests for construction from a session and touched files."""

    def test_from_session(self, sample_session: ParseSession) -> None:
        """The session lookups are shared with the workspace."""
        workspace = RenderWorkspace.from_session(sample_session)

        assert workspace.compounds_by_id is sample_session.compounds_by_id
        assert "include/foo.h" in workspace.files_by_path
        assert workspace.get_page_permalink("dir_d44c64559bbebec7f509842c48db8b23") == "/api/folders/include"

    def test_touch_and_reset(self, workspace: RenderWorkspace) -> None:
        """Touched files accumulate until reset; empty paths are ignored."""
        workspace.touch_file("a.h")
        workspace.touch_file("")
        workspace.touch_file("a.h")

        assert workspace.files_touched == {"a.h"}

        workspace.reset_files_touched()

        assert workspace.files_touched == set()
