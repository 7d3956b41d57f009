"""CLI command implementations"""

import sys
from pathlib import Path
from typing import Annotated, Optional

import structlog
import typer
from sqlmodel import Session

from mdconvert.config import Settings, load_config
from mdconvert.core.models import OutputFormat
from mdconvert.core.pipeline import convert_text, run_convert, run_record
from mdconvert.crud.conversions import get_conversion, list_conversions
from mdconvert.crud.database import init_db, make_engine, reset_db
from mdconvert.log import configure_logging


FORMAT_HELP = {
    OutputFormat.html: "HTML fragment (no <html>/<head> shell)",
    OutputFormat.document: "Complete HTML page with an embedded stylesheet",
}

logger = structlog.get_logger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then set up logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level, settings.log_format)
    return settings


def convert_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="html or document")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Page title for the document format")] = None,
    shield: Annotated[Optional[bool], typer.Option("--shield-fences/--no-shield-fences", help="Keep fenced code out of inline rewriting")] = None,
    no_history: Annotated[bool, typer.Option("--no-history", help="Do not store conversions in the database")] = False,
    ):
    """Convert Markdown files to .html and record them in the history."""
    settings = _settings(overrides={
        "output_dir": out, "output_format": fmt,
        "document_title": title, "shield_fences": shield,
    })
    output_dir = Path(settings.output_dir)
    if not Path(path).exists():
        _fail(f"Path not found: {path}")

    try:
        docs = run_convert(
            path, output_dir, OutputFormat(settings.output_format),
            settings.document_title, settings.shield_fences,
        )
    except RuntimeError as e:
        _fail(str(e))
    if not docs:
        typer.echo(f"No Markdown files found in {path}.")
        raise typer.Exit(1)

    for doc in docs:
        typer.echo(f"  {doc.source_path} -> {doc.output_path}")
    typer.echo(f"Converted {len(docs)} document(s) to {output_dir}/")

    if no_history or not settings.record_history:
        return
    try:
        engine = make_engine(settings.db_url)
        init_db(engine)
        counts, _ = run_record(engine, docs, settings.max_history)
    except Exception as e:
        logger.error("History update failed", db_url=settings.db_url, exc_info=True)
        _fail("History update failed", e)
    typer.echo(f"History - {counts['created']} recorded, {counts['unchanged']} unchanged")


def render_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Markdown file; omit or '-' to read stdin")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="html or document")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Page title for the document format")] = None,
    shield: Annotated[Optional[bool], typer.Option("--shield-fences/--no-shield-fences", help="Keep fenced code out of inline rewriting")] = None,
    ):
    """Render a single Markdown source to stdout without touching the history."""
    settings = _settings(overrides={"output_format": fmt, "document_title": title, "shield_fences": shield})
    if path in (None, "-"):
        markdown, source = sys.stdin.read(), "<stdin>"
    else:
        try:
            markdown, source = Path(path).read_text(encoding="utf-8"), path
        except (OSError, UnicodeDecodeError) as e:
            _fail(f"Cannot read {path}", e)
    doc = convert_text(
        markdown, source, OutputFormat(settings.output_format),
        settings.document_title, settings.shield_fences,
    )
    typer.echo(doc.html)


def history_cmd(
    limit: Annotated[int, typer.Option("--limit", "-n", min=0, help="Max entries to show; 0 = all")] = 20,
    ):
    """List stored conversions, newest first."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        conversions = list_conversions(session, limit or None)
        rows = [
            (str(c.id), c.created_at.isoformat(timespec="seconds"), c.format.value, c.source_path)
            for c in conversions
        ]
    if not rows:
        typer.echo("No conversions recorded.")
        raise typer.Exit(1)
    for conversion_id, created, fmt, source in rows:
        typer.echo(f"{conversion_id[:8]}  {created}  {fmt:<8}  {source}")


def show_cmd(
    ref: Annotated[str, typer.Argument(help="Conversion id or unique id prefix")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write the HTML to this file")] = None,
    ):
    """Print (or save) the HTML of a stored conversion."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        try:
            html = get_conversion(session, ref).html
        except ValueError as e:
            _fail(str(e))
    if out is None:
        typer.echo(html)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    typer.echo(f"Wrote {out}")


def formats_cmd():
    """List the available output formats."""
    for fmt in OutputFormat:
        typer.echo(f"{fmt.value:<10}{FORMAT_HELP[fmt]}")


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize the history database. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        reset_db(engine)
        typer.echo("Existing history cleared.")
    else:
        init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")
