"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SourceConfig: Page address and HTTP transport settings
- CacheConfig: Document cache TTL
- SectionsConfig: Page layout conventions used to locate sections
- OutputConfig: Output format settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml

DEFAULT_URL = "http://www.drudgereport.com"
URL_ENV = "DRUDGE_FEED_URL"


@dataclass
class SourceConfig:
    """Configuration for fetching the page.

    Attributes:
        url: Address of the page, fetched with a single GET
        timeout_seconds: HTTP request timeout
        user_agent: HTTP User-Agent header string
        trust_env: Whether to respect system proxy settings
        parser: BeautifulSoup parser backend ("html.parser", "lxml", "html5lib")
    """

    url: str = DEFAULT_URL
    timeout_seconds: float = 30.0
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    trust_env: bool = True
    parser: str = "html.parser"


@dataclass
class CacheConfig:
    """Configuration for the in-memory document cache.

    Attributes:
        ttl_seconds: Age after which the cached document is refetched
    """

    ttl_seconds: float = 3600.0


@dataclass
class SectionsConfig:
    """Page layout conventions.

    Attributes:
        top_id: Element id of the top stories region
        column_tag: Structural tag counted when locating columns
        stop_marker: Text of the comment that ends a column's headlines
        default: Sections printed when none are requested
    """

    top_id: str = "app_topstories"
    column_tag: str = "td"
    stop_marker: str = "L I N K S"
    default: list[str] = field(default_factory=lambda: ["top", "1", "2", "3"])


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        format: "text", "markdown", "json" or "html"
    """

    format: str = "text"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "drudge-feed.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    source: SourceConfig = field(default_factory=SourceConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    sections: SectionsConfig = field(default_factory=SectionsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    A fresh AppConfig is returned on every call so callers may override
    fields without affecting each other. The DRUDGE_FEED_URL environment
    variable, when set, replaces the source URL.
    """
    raw: dict[str, Any] = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"config file {path} must contain a mapping")

    cfg = _merge_config(AppConfig(), raw)
    env_url = os.getenv(URL_ENV)
    if env_url:
        cfg.source.url = env_url
    return cfg


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        # An empty section header ("cache:") loads as None.
        if value is None:
            continue
        if not isinstance(value, dict):
            raise ValueError(f"config section {key!r} must be a mapping")
        data[key].update({k: v for k, v in value.items() if k in data[key]})
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "source": {
            "url": cfg.source.url,
            "timeout_seconds": cfg.source.timeout_seconds,
            "user_agent": cfg.source.user_agent,
            "trust_env": cfg.source.trust_env,
            "parser": cfg.source.parser,
        },
        "cache": {
            "ttl_seconds": cfg.cache.ttl_seconds,
        },
        "sections": {
            "top_id": cfg.sections.top_id,
            "column_tag": cfg.sections.column_tag,
            "stop_marker": cfg.sections.stop_marker,
            "default": list(cfg.sections.default),
        },
        "output": {
            "format": cfg.output.format,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        source=SourceConfig(**data["source"]),
        cache=CacheConfig(**data["cache"]),
        sections=SectionsConfig(**data["sections"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
