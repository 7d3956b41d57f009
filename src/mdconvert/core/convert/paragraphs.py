"""Paragraph assembly: merge plain-text line runs into <p> blocks"""

from enum import Enum

from mdconvert.core.convert.lines import LineKind, classify_line, join_lines, split_lines


# Opening emitted by the fence extractor; a bare user-written <pre> is ordinary HTML.
CODE_BLOCK_OPEN = '<pre><code'
CODE_BLOCK_CLOSE = '</pre>'


class ParagraphState(str, Enum):
    no_paragraph = "no_paragraph"
    accumulating = "accumulating"
    preformatted = "preformatted"    # inside a multi-line code block; lines are opaque


def _code_block_start(line: str) -> int | None:
    """Index where an unclosed code block opens on this line, else None."""
    start = line.find(CODE_BLOCK_OPEN)
    if start >= 0 and CODE_BLOCK_CLOSE not in line[start:]:
        return start
    return None


def assemble_paragraphs(text: str) -> str:
    """Join consecutive plain lines with single spaces and wrap each run in <p>.

    Blank lines end a paragraph and are dropped. Lines that already look like
    an HTML element end a paragraph and pass through unchanged. A code block
    spanning several lines is copied verbatim; text before its opening tag on
    the same line closes the current paragraph.
    """
    out: list[str] = []
    current: list[str] = []
    state = ParagraphState.no_paragraph

    def _flush() -> None:
        if current:
            out.append(f"<p>{' '.join(current)}</p>")
            current.clear()

    for line in split_lines(text):
        if state is ParagraphState.preformatted:
            out.append(line)
            if CODE_BLOCK_CLOSE in line:
                state = ParagraphState.no_paragraph
            continue

        start = _code_block_start(line)
        if start is not None:
            lead = line[:start].strip()
            if lead:
                current.append(lead)
            _flush()
            out.append(line[start:] if lead else line)
            state = ParagraphState.preformatted
            continue

        kind = classify_line(line)
        if kind is LineKind.blank:
            _flush()
            state = ParagraphState.no_paragraph
        elif kind is LineKind.html:
            _flush()
            out.append(line)
            state = ParagraphState.no_paragraph
        else:
            current.append(line.strip())
            state = ParagraphState.accumulating

    _flush()
    return join_lines(out)
