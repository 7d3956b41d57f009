"""HTML escaping for text embedded in preformatted blocks"""


# Ampersand first so entities introduced by later replacements are not re-escaped.
HTML_ESCAPES: tuple[tuple[str, str], ...] = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#39;'),
)


def escape_html(text: str) -> str:
    """Replace &, <, >, double and single quotes with their HTML entities."""
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text
