"""
Article extraction from a located section.

Walks the section in document order collecting links. A link immediately
preceded by an image gets that image, unless an earlier link in the same
pass already claimed the same image address.
"""

from __future__ import annotations

import re
from typing import Iterator

import httpx
from bs4 import NavigableString, PageElement, Tag

from .errors import MalformedURL
from .locator import Matcher, walk
from .types import Article

# Attribute values are trimmed of ASCII whitespace only; U+00A0 is content.
_HTML_WHITESPACE = " \t\n\r\f"
_CONTROL_OR_SPACE = re.compile(r"[\x00-\x20\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_HOST_CHARS = re.compile(r"^[A-Za-z0-9\-._~!$&'()*+,;=:\[\]]+$")


def extract_articles(root: PageElement, stop: Matcher | None = None) -> list[Article]:
    """Extract the articles linked from a section.

    Args:
        root: Root of the section, as returned by SectionLocator.locate
        stop: Optional stop marker; once it matches a visited node no further
            links are collected

    Returns:
        Articles in document order. An empty list if the section holds no
        links before the stop marker.

    Raises:
        MalformedURL: If any link target or image source does not parse. No
            partial result is returned.
    """
    used_images: set[str] = set()
    articles: list[Article] = []

    for link in _links(root, stop):
        article = Article(headline=_text(link), url=_parse_url(link["href"]))

        img = _previous_sibling(link)
        if isinstance(img, Tag) and img.name == "img" and img.get("src") is not None:
            image = _parse_url(img["src"])
            key = str(image)
            if key not in used_images:
                used_images.add(key)
                article = Article(headline=article.headline, url=article.url, image=image)

        articles.append(article)

    return articles


def _links(root: PageElement, stop: Matcher | None) -> Iterator[Tag]:
    for node in walk(root):
        if stop is not None and stop.advance(node):
            return
        if isinstance(node, Tag) and node.name == "a" and node.has_attr("href"):
            yield node


def _previous_sibling(node: Tag) -> PageElement | None:
    """The sibling right before node, ignoring whitespace-only text."""
    sibling = node.previous_sibling
    # Comments and other NavigableString subclasses are real siblings.
    while type(sibling) is NavigableString and not sibling.strip(_HTML_WHITESPACE):
        sibling = sibling.previous_sibling
    return sibling


def _text(node: Tag) -> str:
    return " ".join(node.get_text(" ").split())


def _parse_url(value: str | list[str]) -> httpx.URL:
    if isinstance(value, list):
        value = " ".join(value)
    value = value.strip(_HTML_WHITESPACE)
    if _CONTROL_OR_SPACE.search(value):
        raise MalformedURL(value, "contains whitespace or a control character")
    if _BAD_ESCAPE.search(value):
        raise MalformedURL(value, "invalid percent-escape")
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise MalformedURL(value, str(exc)) from exc
    host = url.raw_host.decode("ascii", "replace")
    if host and not _HOST_CHARS.match(host):
        raise MalformedURL(value, f"invalid host {host!r}")
    return url
