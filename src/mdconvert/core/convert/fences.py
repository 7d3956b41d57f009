"""Fenced code block extraction into escaped <pre><code> blocks"""

import re
import uuid

from mdconvert.core.utils.escape import escape_html


# Lazy body match: each fence closes at the nearest following ```.
FENCE_RE = re.compile(r'```([\w+#.-]*)[ \t]*\n(.*?)```', re.DOTALL)


def render_fence(lang: str, body: str) -> str:
    """Build the <pre><code> element for one fenced region."""
    code = escape_html(body.strip())
    if lang:
        return f'<pre><code class="language-{lang}">{code}</code></pre>'
    return f'<pre><code>{code}</code></pre>'


def extract_fences(text: str) -> str:
    """Replace every fenced region with its rendered block in a single pass."""
    return FENCE_RE.sub(lambda m: render_fence(m.group(1), m.group(2)), text)


def shield_fences(text: str) -> tuple[str, dict[str, str]]:
    """Swap fenced regions for HTML comment placeholders.

    Returns (text_with_placeholders, blocks) where blocks maps each placeholder
    to its rendered block. Placeholders carry a token drawn per call, so
    marker-like comments already present in the text are never matched.
    """
    token = uuid.uuid4().hex
    blocks: dict[str, str] = {}

    def _stash(m: re.Match) -> str:
        placeholder = f'<!--mdconvert:fence:{token}:{len(blocks)}-->'
        blocks[placeholder] = render_fence(m.group(1), m.group(2))
        return placeholder

    return FENCE_RE.sub(_stash, text), blocks


def restore_fences(text: str, blocks: dict[str, str]) -> str:
    """Put rendered blocks back in place of the placeholders left by shield_fences."""
    for placeholder, block in blocks.items():
        text = text.replace(placeholder, block)
    return text
