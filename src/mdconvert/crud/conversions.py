"""Conversion history persistence: record, lookup, listing, and pruning"""

from uuid import UUID

from sqlmodel import Session, select

from mdconvert.core.models import RenderedDoc
from mdconvert.crud.models import Conversion


def get_latest_by_path(session: Session, source_path: str) -> Conversion | None:
    """Return the most recent Conversion for source_path, or None."""
    return session.exec(
        select(Conversion)
        .where(Conversion.source_path == source_path)
        .order_by(Conversion.created_at.desc())
    ).first()


def list_conversions(session: Session, limit: int | None = None) -> list[Conversion]:
    """Return stored conversions, newest first. limit=None returns all."""
    query = select(Conversion).order_by(Conversion.created_at.desc())
    if limit:
        query = query.limit(limit)
    return list(session.exec(query).all())


def get_conversion(session: Session, ref: str) -> Conversion:
    """Look up a Conversion by full UUID or unique id prefix.

    Prefixes match either the dashed or the plain hex form of the id.
    Raises ValueError if nothing matches or the prefix is ambiguous.
    """
    ref = ref.strip().lower()
    if not ref:
        raise ValueError("Conversion id must not be empty")
    try:
        found = session.get(Conversion, UUID(ref))
    except ValueError:
        found = None
    if found is not None:
        return found

    ids = session.exec(select(Conversion.id)).all()
    matches = [i for i in ids if str(i).startswith(ref) or i.hex.startswith(ref)]
    if not matches:
        raise ValueError(f"Conversion {ref} not found")
    if len(matches) > 1:
        raise ValueError(f"Conversion id prefix {ref} is ambiguous ({len(matches)} matches)")
    return session.get(Conversion, matches[0])


def prune_history(session: Session, max_history: int) -> int:
    """Delete oldest conversions beyond max_history. Returns count deleted. No-op if max_history=0."""
    if max_history == 0:
        return 0

    conversions = session.exec(select(Conversion).order_by(Conversion.created_at.asc())).all()
    excess = len(conversions) - max_history
    if excess <= 0:
        return 0

    for c in conversions[:excess]:
        session.delete(c)
    session.flush()
    return excess


def record_conversion(session: Session, doc: RenderedDoc) -> tuple[Conversion, str]:
    """Store a RenderedDoc unless the latest entry for its path already matches.

    Returns (conversion, status) where status is 'created' or 'unchanged'.
    Flushes but does not commit; caller controls the transaction.
    """
    latest = get_latest_by_path(session, doc.source_path)
    if latest and latest.hash == doc.hash and latest.format == doc.format and latest.html == doc.html:
        return latest, 'unchanged'

    conversion = Conversion(
        source_path=doc.source_path,
        markdown=doc.markdown,
        html=doc.html,
        hash=doc.hash,
        format=doc.format,
    )
    session.add(conversion)
    session.flush()
    return conversion, 'created'
