"""ATX-style header lines to <h1>-<h6> tags"""

import re


# Checked 6 down to 1. Each pattern needs an exact hash count followed by
# whitespace, so "### x" never matches the level 2 or level 1 pattern.
HEADER_PATTERNS: list[tuple[int, re.Pattern]] = [
    (level, re.compile(rf'^#{{{level}}}[ \t]+(.*)$', re.MULTILINE))
    for level in range(6, 0, -1)
]


def rewrite_headers(text: str) -> str:
    """Replace every '#'-prefixed heading line with its <hN> element."""
    for level, pattern in HEADER_PATTERNS:
        text = pattern.sub(rf'<h{level}>\1</h{level}>', text)
    return text
