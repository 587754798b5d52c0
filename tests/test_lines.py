"""Unit tests for the line record models and Page helpers."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import TypeAdapter, ValidationError

from gemtext.parsing.lines import Heading, Line, Link, ListItem, Page, Pre, Quote, Text

LINE_ADAPTER = TypeAdapter(Line)


class TestLineRecords:

    def test_records_are_frozen(self):
        link = Link(url="gemini://example.org/")
        with pytest.raises(ValidationError):
            link.url = "other"

    def test_link_name_defaults_to_none(self):
        assert Link(url="x").name is None

    def test_empty_name_differs_from_missing_name(self):
        assert Link(url="x", name="") != Link(url="x", name=None)

    def test_heading_level_bounds(self):
        with pytest.raises(ValidationError):
            Heading(level=0, content="x")
        with pytest.raises(ValidationError):
            Heading(level=4, content="x")

    def test_variants_with_same_payload_are_not_equal(self):
        assert ListItem(text="a") != Quote(text="a")
        assert Quote(text="a") != Text(text="a")

    def test_discriminated_union_picks_variant(self):
        assert LINE_ADAPTER.validate_python({"kind": "quote", "text": "hi"}) == Quote(text="hi")
        assert LINE_ADAPTER.validate_python({"kind": "pre", "content": "x"}) == Pre(alt=None, content="x")

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            LINE_ADAPTER.validate_python({"kind": "table", "text": "x"})


class TestPage:

    def test_parse_classmethod(self):
        page = Page.parse("# Title\n=> gemini://example.org/ Home")
        assert page.lines == (Heading(level=1, content="Title"), Link(url="gemini://example.org/", name="Home"))

    def test_len(self):
        assert len(Page.parse("a\nb\nc")) == 3

    def test_links_in_order(self):
        page = Page.parse("=> a\ntext\n=> b B\n# h")
        assert page.links() == [Link(url="a"), Link(url="b", name="B")]

    def test_headings_in_order(self):
        page = Page.parse("# one\n=> a\n### three")
        assert page.headings() == [Heading(level=1, content="one"), Heading(level=3, content="three")]

    def test_helpers_on_empty_page(self):
        page = Page.parse("")
        assert page.links() == []
        assert page.headings() == []

    def test_json_round_trip_of_model(self):
        page = Page.parse("# t\n```py\nx = 1\n```\n* item\n> quote\n=> u n\nplain")
        assert Page.model_validate_json(page.model_dump_json()) == page

    def test_lines_are_not_mutable(self):
        page = Page.parse("a")
        with pytest.raises(ValidationError):
            page.lines = ()
