"""
Output rendering for extracted sections.

Text and Markdown are rendered one section at a time so the CLI can write
each section as soon as it is extracted. JSON and HTML describe the whole
run and are rendered once every requested section is available.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .types import Article

FORMATS = ("text", "markdown", "json", "html")
STREAMING_FORMATS = ("text", "markdown")


@dataclass
class SectionResult:
    """Articles extracted for one requested section."""

    key: str
    title: str
    articles: list[Article] = field(default_factory=list)


def render_section(section: SectionResult, fmt: str) -> str:
    if fmt == "text":
        return render_text(section)
    if fmt == "markdown":
        return render_markdown(section)
    raise ValueError(f"format {fmt!r} cannot be rendered per section")


def render_text(section: SectionResult) -> str:
    """Plain text: a banner, then each headline with its URL indented below."""
    lines = [f"### {section.title} ###", ""]
    for article in section.articles:
        lines.append(article.headline)
        lines.append(f"\t{article.url}")
    lines.append("")
    return "\n".join(lines) + "\n"


def render_markdown(section: SectionResult) -> str:
    lines = [f"## {section.title}", ""]
    for article in section.articles:
        headline = _escape_markdown(article.headline) or str(article.url)
        line = f"- [{headline}]({article.url})"
        if article.image is not None:
            line += f" ([image]({article.image}))"
        lines.append(line)
    lines.append("")
    return "\n".join(lines) + "\n"


def render_json(sections: list[SectionResult], source_url: str) -> str:
    payload = {
        "source": source_url,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "sections": [
            {
                "key": section.key,
                "title": section.title,
                "articles": [article.to_dict() for article in section.articles],
            }
            for section in sections
        ],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def render_html(sections: list[SectionResult], title: str, source_url: str) -> str:
    env = Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )
    template = env.get_template("report.html")
    return template.render(
        title=title,
        source_url=source_url,
        generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        sections=sections,
    )


def _escape_markdown(text: str) -> str:
    return text.replace("[", "\\[").replace("]", "\\]")
