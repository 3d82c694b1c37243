"""tests for paragraph wrapping and cleanup."""

from mdrender.core.paragraphs import is_block_line, is_empty_paragraph, wrap_paragraphs


def test_single_line_paragraph() -> None:
    """wraps a single line in a paragraph."""
    assert wrap_paragraphs(["hello"]) == "<p>hello</p>"


def test_newlines_become_line_breaks() -> None:
    """single newlines inside a paragraph become <br>."""
    assert wrap_paragraphs(["a", "b", "c"]) == "<p>a<br>b<br>c</p>"


def test_blank_lines_split_paragraphs() -> None:
    """whitespace-only lines are paragraph boundaries."""
    assert wrap_paragraphs(["a", "", "  ", "b"]) == "<p>a</p>\n<p>b</p>"


def test_block_elements_are_not_wrapped() -> None:
    """headings, lists, rules and code blocks stay bare."""
    lines = [
        "<h1>T</h1>",
        "text",
        "<hr />",
        "<ul>",
        "<li>a</li>",
        "</ul>",
        "__CODE_BLOCK_0__",
    ]
    assert wrap_paragraphs(lines) == (
        "<h1>T</h1>\n<p>text</p>\n<hr />\n<ul>\n<li>a</li>\n</ul>\n__CODE_BLOCK_0__"
    )


def test_no_line_break_before_block() -> None:
    """a newline followed by a block element is not a line break."""
    assert wrap_paragraphs(["intro", "<ul>", "<li>a</li>", "</ul>"]) == (
        "<p>intro</p>\n<ul>\n<li>a</li>\n</ul>"
    )


def test_empty_input() -> None:
    """no lines or only blank lines produce no paragraph."""
    assert wrap_paragraphs([]) == ""
    assert wrap_paragraphs(["", " ", ""]) == ""


def test_drops_paragraphs_of_only_line_breaks() -> None:
    """paragraphs containing only <br> are removed."""
    assert wrap_paragraphs(["<br>", "<br/>"]) == ""


def test_is_block_line() -> None:
    """recognizes block-level lines with or without attributes."""
    assert is_block_line('<h2 class="x">T</h2>')
    assert is_block_line('<ol start="3">')
    assert is_block_line("</ol>")
    assert is_block_line("<pre><code>x</code></pre>")
    assert is_block_line("__CODE_BLOCK_4__")
    assert not is_block_line("<strong>x</strong>")
    assert not is_block_line("<header>")
    assert not is_block_line("plain")


def test_is_empty_paragraph() -> None:
    """detects empty or break-only paragraphs."""
    assert is_empty_paragraph("<p></p>")
    assert is_empty_paragraph("<p> <br> </p>")
    assert not is_empty_paragraph("<p>x</p>")
    assert not is_empty_paragraph("<ul>")
