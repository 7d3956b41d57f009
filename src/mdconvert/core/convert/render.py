"""Markdown to HTML rendering: the fixed-order stage pipeline"""

from typing import Callable

from mdconvert.core.convert import fences
from mdconvert.core.convert.headers import rewrite_headers
from mdconvert.core.convert.inline import rewrite_inline
from mdconvert.core.convert.lines import join_lines, split_lines
from mdconvert.core.convert.lists import group_lists
from mdconvert.core.convert.paragraphs import assemble_paragraphs


TextTransform = Callable[[str], str]

# Order is part of the output contract; each stage sees the full text of the previous one.
STAGES: list[tuple[str, TextTransform]] = [
    ('headers',    rewrite_headers),
    ('inline',     rewrite_inline),
    ('lists',      group_lists),
    ('fences',     fences.extract_fences),
    ('paragraphs', assemble_paragraphs),
]


def _normalize(markdown_text: str | bytes) -> str:
    if isinstance(markdown_text, bytes):
        markdown_text = markdown_text.decode('utf-8', errors='replace')
    return join_lines(split_lines(markdown_text))


def render(markdown_text: str | bytes, shield_fences: bool = False) -> str:
    """Convert Markdown text to an HTML fragment.

    Never raises for str or bytes input: unterminated fences, unmatched
    emphasis markers and dangling link syntax are left as literal text.

    With shield_fences=False the stages run in their historical order, so
    header, inline and list rules also rewrite text inside fenced code before
    it is escaped. shield_fences=True pulls fenced regions out first and puts
    the rendered blocks back after paragraph assembly.
    """
    text = _normalize(markdown_text)

    blocks: dict[str, str] = {}
    if shield_fences:
        text, blocks = fences.shield_fences(text)

    for _name, stage in STAGES:
        text = stage(text)

    if blocks:
        text = fences.restore_fences(text, blocks)
    return text
