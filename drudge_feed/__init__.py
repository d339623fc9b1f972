"""
Drudge Feed - headlines from the Drudge Report.

This package fetches the Drudge Report home page, extracts the headline
links from its top stories and three columns, and caches the parsed page
for an hour between fetches.

Main entry point is the CLI via the `drudge-feed` command.

Example:
    $ drudge-feed --sec top,1 --format markdown
"""

__all__ = [
    "__version__",
    "Article",
    "DrudgeClient",
    "SectionSpec",
    "TimedCache",
    "DrudgeError",
    "FetchError",
    "ParseError",
    "SectionNotFound",
    "InvalidColumn",
    "MalformedURL",
]
__version__ = "0.1.0"

from .cache import TimedCache
from .client import DrudgeClient
from .errors import DrudgeError, FetchError, InvalidColumn, MalformedURL, ParseError, SectionNotFound
from .types import Article, SectionSpec
