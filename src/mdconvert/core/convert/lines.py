"""Line splitting and per-stage line classification"""

import re
from enum import Enum


UNORDERED_MARKERS = ('- ', '* ')
ORDERED_ITEM_RE = re.compile(r'^\d+\. +')


class LineKind(str, Enum):
    """Structural role of a single line, recomputed by each stage that needs it"""
    blank = "blank"
    html = "html"
    unordered_item = "unordered_item"
    ordered_item = "ordered_item"
    text = "text"


def split_lines(text: str) -> list[str]:
    """Split text on line breaks, treating \\r\\n and \\r as \\n."""
    return text.replace('\r\n', '\n').replace('\r', '\n').split('\n')


def join_lines(lines: list[str]) -> str:
    return '\n'.join(lines)


def is_blank(line: str) -> bool:
    return not line.strip()


def is_html_line(line: str) -> bool:
    """True when the trimmed line already looks like a complete HTML element."""
    stripped = line.strip()
    return stripped.startswith('<') and stripped.endswith('>')


def unordered_item_text(line: str) -> str | None:
    """Return item text for a '- ' / '* ' list line, else None."""
    stripped = line.strip()
    if stripped.startswith(UNORDERED_MARKERS):
        return stripped[2:]
    return None


def ordered_item_text(line: str) -> str | None:
    """Return item text for a '1. ' style list line, else None."""
    stripped = line.strip()
    m = ORDERED_ITEM_RE.match(stripped)
    if m:
        return stripped[m.end():]
    return None


def classify_line(line: str) -> LineKind:
    """Classify a line in isolation; the non-blank kinds start with disjoint characters."""
    if is_blank(line):
        return LineKind.blank
    if is_html_line(line):
        return LineKind.html
    if unordered_item_text(line) is not None:
        return LineKind.unordered_item
    if ordered_item_text(line) is not None:
        return LineKind.ordered_item
    return LineKind.text
