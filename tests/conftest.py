"""Shared fixtures: a small page in the Drudge layout and fake collaborators."""

from __future__ import annotations

import pytest

from drudge_feed.fetcher import FetchResult

PAGE_HTML = """<html>
<head><title>DRUDGE REPORT</title></head>
<body>
<div id="app_topstories">
  <img src="http://img.example.com/main.jpg">
  <a href="http://news.example.com/main">MAIN   HEADLINE</a>
  <br>
  <a href="http://news.example.com/second">Second story</a>
</div>
<table><tr>
<td id="col1">
  <img src="http://img.example.com/a.jpg"><a href="http://news.example.com/a">Col one A</a><br>
  <a href="http://news.example.com/b">Col one B</a><br>
  <!-- L I N K S    F I R S T    C O L U M N -->
  <a href="http://links.example.com/one">Link list one</a>
</td>
<td>&nbsp;</td>
<td id="col2">
  <a href="http://news.example.com/c">Col two C</a><br>
  <!-- L I N K S    S E C O N D    C O L U M N -->
  <a href="http://links.example.com/two">Link list two</a>
</td>
<td>&nbsp;</td>
<td id="col3">
  <img src="http://img.example.com/d.jpg">
  <a href="http://news.example.com/d">Col three D</a>
</td>
<td>&nbsp;</td>
</tr></table>
</body>
</html>
"""


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeFetcher:
    """Stands in for PageFetcher; counts calls and serves fixed content."""

    def __init__(self, content: bytes | Exception = PAGE_HTML.encode("utf-8")):
        self.content = content
        self.calls: list[str] = []

    def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        if isinstance(self.content, Exception):
            raise self.content
        return FetchResult(url=url, status_code=200, content=self.content, encoding="utf-8")


@pytest.fixture
def page_html() -> str:
    return PAGE_HTML


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def make_fetcher():
    return FakeFetcher
