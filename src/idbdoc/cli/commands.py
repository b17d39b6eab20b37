"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pygments.util import ClassNotFound

from idbdoc.config import Settings, load_config
from idbdoc.core.pipeline import DocumentRenderer
from idbdoc.core.source import read_path, read_source
from idbdoc.core.styles import highlight_css
from idbdoc.errors import RenderError


STDIN = "-"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings() -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config()
    except ValueError as e:
        _fail("Invalid configuration", e)


def render_cmd(
    source: Annotated[str, typer.Argument(help="Markdown file to render, or '-' for stdin")] = STDIN,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML to this file instead of stdout")] = None,
    ):
    """Render markdown to a complete, highlighted HTML document."""
    settings = _settings()
    try:
        markdown = read_source(typer.get_binary_stream("stdin")) if source == STDIN else read_path(source)
        page = DocumentRenderer(settings).render(markdown)
    except RenderError as e:
        _fail(str(e))

    # the whole page exists before anything is written
    if out is None:
        typer.echo(page, nl=False)
        return
    try:
        out.write_text(page, encoding="utf-8")
    except OSError as e:
        _fail(f"Failed to write {out}", e)
    typer.echo(f"{'<stdin>' if source == STDIN else source} -> {out}", err=True)


def css_cmd():
    """Print the Pygments stylesheet for highlighted code blocks."""
    settings = _settings()
    try:
        css = highlight_css(settings.highlight_class, settings.pygments_style)
    except ClassNotFound as e:
        _fail(f"Unknown pygments style: {settings.pygments_style}", e)
    typer.echo(css)
