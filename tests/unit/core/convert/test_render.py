"""Unit tests for core/convert/render.py (whole-pipeline behaviour)"""

import re

import pytest

from mdconvert.core.convert.render import STAGES, render


SAMPLE_MD = """\
# Title

Some **bold** text
over two lines.

- one
- two

1. first
2. second
"""

SAMPLE_HTML = """\
<h1>Title</h1>
<p>Some <strong>bold</strong> text over two lines.</p>
<ul>
  <li>one</li>
  <li>two</li>
</ul>
<ol>
  <li>first</li>
  <li>second</li>
</ol>"""


def test_render_sample_document():
    """Headings, inline spans, lists and paragraphs compose in one pass."""
    assert render(SAMPLE_MD) == SAMPLE_HTML


def test_render_heading():
    """'# Title' yields exactly one h1 and no other heading tag."""
    result = render("# Title")
    assert result == "<h1>Title</h1>"
    assert re.findall(r"<h\d>", result) == ["<h1>"]


def test_render_bold_and_italic():
    """Bold and italic both render; no literal asterisks survive."""
    result = render("**bold** and *italic*")
    assert "<strong>bold</strong>" in result
    assert "<em>italic</em>" in result
    assert "*" not in result


def test_render_list_then_paragraph():
    """A blank line ends the list and is not echoed."""
    assert render("- a\n- b\n\ntext") == "<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>\n<p>text</p>"


def test_render_fenced_code():
    """A tagged fence becomes a classed <pre><code> block."""
    assert render("```go\nx := 1\n```") == '<pre><code class="language-go">x := 1</code></pre>'


def test_render_fenced_code_escapes():
    """'<' inside a fence body comes out as &lt;."""
    assert render("```\nif a < b\n```") == "<pre><code>if a &lt; b</code></pre>"


def test_render_multiline_fence_not_wrapped_in_paragraph():
    """Lines of a multi-line code block are never merged into a <p>."""
    result = render("```\na\n\nb\n```\n\ntext")
    assert result == "<pre><code>a\n\nb</code></pre>\n<p>text</p>"


def test_render_paragraph_merge():
    """Adjacent plain lines join into one paragraph."""
    assert render("line one\nline two") == "<p>line one line two</p>"


def test_render_html_passthrough():
    """A pre-tagged line is emitted unchanged and not wrapped."""
    assert render("<div>x</div>") == "<div>x</div>"


def test_render_empty():
    assert render("") == ""


def test_render_crlf_input():
    """Windows line endings behave like plain line breaks."""
    assert render("line one\r\nline two\r\n\r\n# T") == "<p>line one line two</p>\n<h1>T</h1>"


def test_render_bytes_input():
    """Bytes are decoded as UTF-8; undecodable bytes are replaced, not raised."""
    assert render("# Café".encode("utf-8")) == "<h1>Café</h1>"
    assert isinstance(render(b"\xff\xfe bad"), str)


@pytest.mark.parametrize("text", [
    "```",
    "```py\nunclosed",
    "**",
    "*",
    "[label](",
    "![alt](",
    "- ",
    "1.",
    "# ",
    "\x00\x01",
    "  \ufeff",
    "\r\n\r\n",
    "\ud800",
    "<",
    ">",
])
def test_render_is_total(text):
    """Malformed input always produces a string."""
    assert isinstance(render(text), str)


def test_render_is_deterministic():
    """Repeated calls share no state and give identical output."""
    assert render(SAMPLE_MD) == render(SAMPLE_MD)


def test_render_fence_contamination_preserved_by_default():
    """Default stage order rewrites heading syntax inside fences before escaping."""
    result = render("```\n# not a heading\n```")
    assert result == "<pre><code>&lt;h1&gt;not a heading&lt;/h1&gt;</code></pre>"


def test_render_shield_fences_keeps_code_literal():
    """With shield_fences the fence body is escaped from the original text."""
    result = render("```\n# not a heading\n**x**\n```", shield_fences=True)
    assert result == "<pre><code># not a heading\n**x**</code></pre>"


def test_render_shield_fences_rest_of_document_unchanged():
    """Shielding only affects fenced regions."""
    text = "# T\n\n```py\nx = 1\n```\n\nbody"
    assert render(text, shield_fences=True) == render(text)


def test_stage_order():
    """Stages run headers, inline, lists, fences, paragraphs."""
    assert [name for name, _ in STAGES] == ["headers", "inline", "lists", "fences", "paragraphs"]


def test_render_bare_pre_line_keeps_later_paragraphs():
    """A raw <pre> line in the source does not suppress paragraph wrapping."""
    assert render("<pre>\n\npara one\n\npara two") == "<pre>\n<p>para one</p>\n<p>para two</p>"


def test_render_fence_opening_after_text():
    """A fence that opens mid-line is split from the leading text."""
    assert render("Example: ```\na\nb\n```") == "<p>Example:</p>\n<pre><code>a\nb</code></pre>"


def test_render_shield_fences_keeps_literal_marker_comment():
    """Marker-like comments in the source survive shielding and the block appears once."""
    text = "literal <!--mdconvert:fence:0--> text\n\n```\nx\n```"
    result = render(text, shield_fences=True)
    assert result == "<p>literal <!--mdconvert:fence:0--> text</p>\n<pre><code>x</code></pre>"
