"""
Command-line interface for the Drudge feed.

Uses Typer to print the requested sections of the page in the order given.
Processing stops at the first section that fails. Supports loading .env
files for environment configuration.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import TextIO

import typer
from rich.console import Console

from .client import DrudgeClient
from .config import load_config
from .errors import DrudgeError
from .logging_utils import setup_logging
from .renderer import (
    FORMATS,
    STREAMING_FORMATS,
    SectionResult,
    render_html,
    render_json,
    render_section,
)
from .types import SectionSpec

try:
    from dotenv import load_dotenv
except Exception:  # noqa: BLE001
    load_dotenv = None

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True)


def split_sections(value: str) -> list[str]:
    """Split a comma separated section list, trimming whitespace."""
    return [part.strip() for part in value.split(",") if part.strip()]


@app.command()
def show(
    sec: str | None = typer.Option(
        None,
        "--sec",
        "-s",
        help="Print sections in order given, comma separated: top, 1, 2, 3 or #element_id.",
    ),
    fmt: str | None = typer.Option(
        None, "--format", "-f", help="Output format: text, markdown, json or html."
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    url: str | None = typer.Option(None, "--url", help="Override the page URL."),
    timeout: float | None = typer.Option(
        None, "--timeout", help="HTTP timeout in seconds."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_dir: Path | None = typer.Option(
        None, "--log-dir", help="Directory for the log file (enables file logging)."
    ),
):
    """Print headlines from the Drudge Report.

    Args:
        sec: Comma separated sections to print
        fmt: Output format
        output: Optional output file
        config: Optional path to YAML config file
        url: Page URL override
        timeout: HTTP timeout override
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the log file
    """
    if load_dotenv is not None:
        load_dotenv()

    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if url:
        cfg.source.url = url
    if timeout is not None:
        cfg.source.timeout_seconds = timeout
    if fmt:
        cfg.output.format = fmt.lower()
    if log_level:
        cfg.logging.level = log_level
    if log_dir is not None:
        cfg.logging.file = True

    if cfg.output.format not in FORMATS:
        err_console.print(f"[red]Error:[/red] Unknown format: {cfg.output.format!r}")
        raise typer.Exit(code=2)

    setup_logging(cfg.logging, log_dir)
    tokens = split_sections(sec) if sec is not None else list(cfg.sections.default)
    client = DrudgeClient(cfg)

    if output is not None:
        with output.open("w", encoding="utf-8") as stream:
            code = _print_sections(client, tokens, stream)
    else:
        code = _print_sections(client, tokens, sys.stdout)

    if code:
        raise typer.Exit(code=code)


def _print_sections(client: DrudgeClient, tokens: list[str], stream: TextIO) -> int:
    fmt = client.cfg.output.format
    results: list[SectionResult] = []

    for token in tokens:
        try:
            spec = SectionSpec.parse(token, client.cfg.sections.top_id)
        except DrudgeError as exc:
            err_console.print(f"[red]Error:[/red] Invalid section {token!r}: {exc}")
            return 1
        except ValueError:
            err_console.print(f"[red]Error:[/red] Unknown section: {token!r}")
            return 1

        try:
            articles = client.section(spec)
        except DrudgeError as exc:
            err_console.print(f"[red]Error:[/red] Failed to print section {token!r}: {exc}")
            return 1

        result = SectionResult(key=token.lstrip("#"), title=spec.title, articles=articles)
        if fmt in STREAMING_FORMATS:
            stream.write(render_section(result, fmt))
            stream.flush()
        else:
            results.append(result)

    if fmt == "json":
        stream.write(render_json(results, client.cfg.source.url))
    elif fmt == "html":
        stream.write(render_html(results, "Drudge Report headlines", client.cfg.source.url))
    return 0


if __name__ == "__main__":
    app()
