"""Pipeline step functions: file discovery, convert, and record orchestration"""

from pathlib import Path

import structlog
from sqlmodel import Session

from mdconvert.core.convert.render import render
from mdconvert.core.document import wrap_as_document
from mdconvert.core.models import OutputFormat, RenderedDoc
from mdconvert.core.utils.hashing import sha256
from mdconvert.crud.conversions import prune_history, record_conversion


MD_EXTENSIONS = {'.md', '.markdown'}

logger = structlog.get_logger(__name__)


def discover_files(path: Path) -> list[Path]:
    """Return sorted Markdown files under path, or [path] if a single Markdown file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def convert_text(
    markdown: str,
    source_path: str = "<stdin>",
    fmt: OutputFormat = OutputFormat.html,
    title: str = "Document",
    shield_fences: bool = False,
    ) -> RenderedDoc:
    """Render markdown and, for the document format, wrap it in a full page."""
    html = render(markdown, shield_fences=shield_fences)
    if fmt == OutputFormat.document:
        html = wrap_as_document(html, title=title)
    return RenderedDoc(
        source_path=source_path,
        markdown=markdown,
        html=html,
        format=fmt,
        hash=sha256(markdown),
    )


def run_convert(
    path: str,
    output_dir: Path,
    fmt: OutputFormat = OutputFormat.html,
    title: str = "Document",
    shield_fences: bool = False,
    ) -> list[RenderedDoc]:
    """Convert every Markdown file under path and write <stem>.html files to output_dir.

    Output path mirrors the source layout relative to path:
      output_dir / relative parent / stem.html
    Raises RuntimeError naming the file when one cannot be read or decoded.
    """
    root = Path(path)
    files = discover_files(root)
    base = root.parent if root.is_file() else root
    results = []
    for p in files:
        try:
            markdown = p.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e

        doc = convert_text(markdown, str(p), fmt, title, shield_fences)
        dest_dir = output_dir / p.parent.relative_to(base)
        dest_dir.mkdir(parents=True, exist_ok=True)
        out_file = dest_dir / f"{p.stem}.html"
        out_file.write_text(doc.html, encoding='utf-8')
        doc.output_path = str(out_file)
        logger.info("Converted markdown file", source=str(p), output=str(out_file), format=fmt.value)
        results.append(doc)
    return results


def run_record(
    engine,
    docs: list[RenderedDoc],
    max_history: int,
    ) -> tuple[dict[str, int], list[tuple[str, str]]]:
    """Store rendered docs in the history and prune it to max_history.

    Returns (counts, changes) where changes is a list of (status, conversion id)
    for newly created entries.
    """
    counts = {"created": 0, "unchanged": 0}
    changes = []
    with Session(engine) as session:
        for doc in docs:
            conversion, status = record_conversion(session, doc)
            counts[status] += 1
            if status != 'unchanged':
                changes.append((status, str(conversion.id)))
        pruned = prune_history(session, max_history)
        session.commit()
    logger.info("Recorded conversions", pruned=pruned, **counts)
    return counts, changes
