"""Inline span substitutions: bold, italic, code, link, image"""

import re


# Applied strictly in this order. Spans never cross a line break, and the
# link pattern leaves '![' alone so images still reach their own pass.
INLINE_RULES: list[tuple[str, re.Pattern, str]] = [
    ('bold',   re.compile(r'\*\*([^*\n]+?)\*\*'),              r'<strong>\1</strong>'),
    ('italic', re.compile(r'\*([^*\n]+?)\*'),                  r'<em>\1</em>'),
    ('code',   re.compile(r'`([^`\n]+?)`'),                    r'<code>\1</code>'),
    ('link',   re.compile(r'(?<!!)\[([^\]\n]+)\]\(([^)\n]+)\)'), r'<a href="\2">\1</a>'),
    ('image',  re.compile(r'!\[([^\]\n]*)\]\(([^)\n]+)\)'),    r'<img src="\2" alt="\1">'),
]


def rewrite_inline(text: str) -> str:
    """Run each inline rule once over the whole text, left to right."""
    for _name, pattern, replacement in INLINE_RULES:
        text = pattern.sub(replacement, text)
    return text
