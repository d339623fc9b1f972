"""Tests for locating sections by id and by column index."""

from __future__ import annotations

from bs4 import BeautifulSoup, Comment
import pytest

from drudge_feed.config import SectionsConfig
from drudge_feed.errors import InvalidColumn, SectionNotFound
from drudge_feed.locator import (
    CommentStopMarker,
    IdMatcher,
    NthTagMatcher,
    SectionLocator,
    column_slot,
)
from drudge_feed.types import SectionSpec

SLOTS_HTML = """
<table><tr>
  <td id="S1"></td><td id="S2"></td><td id="S3"></td><td id="S4"></td><td id="S5"></td><td id="S6"></td>
</tr></table>
"""


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_locate_by_id_returns_first_match(page_html):
    doc = _soup(page_html)
    node = SectionLocator().locate(doc, SectionSpec.named("app_topstories"))

    assert node.name == "div"
    assert node["id"] == "app_topstories"


def test_locate_missing_id_raises(page_html):
    with pytest.raises(SectionNotFound):
        SectionLocator().locate(_soup(page_html), SectionSpec.named("app_nothing"))


@pytest.mark.parametrize("index,expected", [(1, "S1"), (2, "S3"), (3, "S5")])
def test_column_addressing_skips_spacer_slots(index, expected):
    node = SectionLocator().locate(_soup(SLOTS_HTML), SectionSpec(column=index))

    assert node["id"] == expected


@pytest.mark.parametrize("index", [0, 4, -1])
def test_invalid_column_fails_before_traversal(index):
    # A document of None would blow up if any traversal happened.
    with pytest.raises(InvalidColumn):
        SectionLocator().locate(None, SectionSpec(column=index))


def test_column_with_too_few_slots_is_not_found():
    doc = _soup("<table><tr><td>only</td><td>two</td></tr></table>")

    with pytest.raises(SectionNotFound):
        SectionLocator().locate(doc, SectionSpec(column=2))


def test_column_tag_is_configurable():
    doc = _soup("<div class='c'>a</div><div>gap</div><div class='c'>b</div>")
    locator = SectionLocator(SectionsConfig(column_tag="div"))

    assert locator.locate(doc, SectionSpec(column=2)).get_text() == "b"


def test_column_slot_positions():
    assert [column_slot(i) for i in (1, 2, 3)] == [1, 3, 5]


def test_nth_tag_matcher_counts_down_once():
    doc = _soup("<p>1</p><span>x</span><p>2</p><p>3</p>")
    matcher = NthTagMatcher("p", 2)

    hits = [node for node in doc.descendants if matcher.advance(node)]

    assert [node.get_text() for node in hits] == ["2"]


def test_id_matcher_ignores_text_nodes():
    doc = _soup("<div>app_col1</div><div id='app_col1'></div>")
    matcher = IdMatcher("app_col1")

    hits = [node for node in doc.descendants if matcher.advance(node)]

    assert len(hits) == 1
    assert hits[0]["id"] == "app_col1"


def test_comment_stop_marker_latches():
    doc = _soup("<p>a</p><!-- other --><p>b</p><!-- L I N K S --><p>c</p>")
    marker = CommentStopMarker("L I N K S")

    states = [marker.advance(node) for node in doc.descendants]

    first_stop = states.index(True)
    assert isinstance(list(doc.descendants)[first_stop], Comment)
    assert all(states[first_stop:])
    assert not any(states[:first_stop])


def test_stop_marker_only_for_columns():
    locator = SectionLocator()

    assert locator.stop_marker(SectionSpec.named("app_topstories")) is None
    assert isinstance(locator.stop_marker(SectionSpec(column=1)), CommentStopMarker)
    assert SectionLocator(SectionsConfig(stop_marker="")).stop_marker(SectionSpec(column=1)) is None
