"""Standalone HTML document shell around a rendered fragment"""

from mdconvert.core.utils.escape import escape_html


STYLESHEET = """\
body {
  font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
  line-height: 1.6;
  color: #1a1a2e;
  max-width: 800px;
  margin: 0 auto;
  padding: 2em 1em;
}
h1, h2, h3, h4, h5, h6 { line-height: 1.25; margin: 1.5em 0 0.5em; }
h1 { border-bottom: 1px solid #e1e4e8; padding-bottom: 0.3em; }
a { color: #0d6efd; }
code {
  font-family: SFMono-Regular, Consolas, "Liberation Mono", Menlo, monospace;
  background: #f6f8fa;
  padding: 0.2em 0.4em;
  border-radius: 3px;
}
pre { background: #f6f8fa; padding: 1em; overflow: auto; border-radius: 6px; }
pre code { background: none; padding: 0; }
img { max-width: 100%; }
"""


def wrap_as_document(html_fragment: str, title: str = "Document") -> str:
    """Return html_fragment inside a complete HTML5 page with an embedded stylesheet."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape_html(title)}</title>
<style>
{STYLESHEET}</style>
</head>
<body>
{html_fragment}
</body>
</html>
"""
