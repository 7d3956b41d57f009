"""Grouping of contiguous list-marker lines into <ul>/<ol> containers"""

from enum import Enum
from typing import Callable, Optional

from mdconvert.core.convert.lines import (
    LineKind, classify_line, join_lines, ordered_item_text, split_lines, unordered_item_text,
)


class ListState(str, Enum):
    outside = "outside"
    in_list = "in_list"


def _group(
    text: str,
    kind: LineKind,
    item_text: Callable[[str], Optional[str]],
    tag: str,
    ) -> str:
    """Fold lines through an outside/in-list state machine, wrapping runs of `kind` lines in <tag>."""
    out: list[str] = []
    state = ListState.outside

    for line in split_lines(text):
        if classify_line(line) is kind:
            if state is ListState.outside:
                out.append(f'<{tag}>')
                state = ListState.in_list
            out.append(f'  <li>{item_text(line)}</li>')
            continue
        if state is ListState.in_list:
            out.append(f'</{tag}>')
            state = ListState.outside
        out.append(line)

    if state is ListState.in_list:
        out.append(f'</{tag}>')
    return join_lines(out)


def group_unordered(text: str) -> str:
    """Wrap runs of '- ' / '* ' lines in <ul> with one <li> per line."""
    return _group(text, LineKind.unordered_item, unordered_item_text, 'ul')


def group_ordered(text: str) -> str:
    """Wrap runs of '1. ' style lines in <ol> with one <li> per line."""
    return _group(text, LineKind.ordered_item, ordered_item_text, 'ol')


def group_lists(text: str) -> str:
    """Unordered pass first; its <li> output starts with '<' and never looks ordered."""
    return group_ordered(group_unordered(text))
