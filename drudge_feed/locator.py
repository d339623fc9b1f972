"""
Locating sections of the page.

Sections are addressed either by element id ("app_topstories") or by column
index. Columns rely on the page layout: content columns alternate with
spacer cells, so column N is the (2N-1)-th structural cell in document order.

Matching is done with small stateful matchers that expose a single
advance(node) -> bool step, evaluated once per node during a depth-first
walk.
"""

from __future__ import annotations

from typing import Iterator, Protocol

from bs4 import Comment, PageElement, Tag

from .config import SectionsConfig
from .errors import SectionNotFound
from .types import Document, SectionSpec, check_column


class Matcher(Protocol):
    def advance(self, node: PageElement) -> bool: ...


class IdMatcher:
    """Matches the element whose id attribute equals target."""

    def __init__(self, target: str):
        self.target = target

    def advance(self, node: PageElement) -> bool:
        return isinstance(node, Tag) and node.get("id") == self.target


class NthTagMatcher:
    """Matches the n-th element with the given tag name.

    Each matching element decrements the counter; the matcher succeeds only
    on the element that brings it to zero.
    """

    def __init__(self, tag: str, n: int):
        if n < 1:
            raise ValueError("n must be positive")
        self.tag = tag
        self.remaining = n

    def advance(self, node: PageElement) -> bool:
        if not isinstance(node, Tag) or node.name != self.tag:
            return False
        self.remaining -= 1
        return self.remaining == 0


class CommentStopMarker:
    """Latches once a comment containing the sentinel token is seen."""

    def __init__(self, token: str):
        self.token = token
        self.stopped = False

    def advance(self, node: PageElement) -> bool:
        if not self.stopped and isinstance(node, Comment) and self.token in str(node):
            self.stopped = True
        return self.stopped


def walk(node: PageElement) -> Iterator[PageElement]:
    """Yield node and then every node below it, in document order."""
    yield node
    if isinstance(node, Tag):
        yield from node.descendants


def find_first(root: PageElement, matcher: Matcher) -> PageElement | None:
    for node in walk(root):
        if matcher.advance(node):
            return node
    return None


def column_slot(index: int) -> int:
    """Position of column index among the structural cells, counting from 1."""
    return 2 * (index - 1) + 1


class SectionLocator:
    """Finds the sub-tree of a document that holds a section's headlines."""

    def __init__(self, cfg: SectionsConfig | None = None):
        self.cfg = cfg if cfg is not None else SectionsConfig()

    def matcher(self, spec: SectionSpec) -> Matcher:
        if spec.is_column:
            return NthTagMatcher(self.cfg.column_tag, column_slot(check_column(spec.column)))
        if not spec.name:
            raise SectionNotFound("<unnamed>")
        return IdMatcher(spec.name)

    def stop_marker(self, spec: SectionSpec) -> CommentStopMarker | None:
        """A fresh stop marker for extracting spec, or None if unbounded.

        Only columns are bounded; they run on into the page's link lists.
        """
        if spec.is_column and self.cfg.stop_marker:
            return CommentStopMarker(self.cfg.stop_marker)
        return None

    def locate(self, document: Document, spec: SectionSpec) -> Tag:
        """Return the root element of the section.

        Raises:
            InvalidColumn: If a column index is outside [1, 3]; raised before
                any traversal
            SectionNotFound: If the document has no such section
        """
        matcher = self.matcher(spec)
        node = find_first(document, matcher)
        if node is None:
            raise SectionNotFound(spec.describe())
        return node
