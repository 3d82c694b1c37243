"""tests for the markdown-it-py engine."""

from mdrender.core.models import RenderOptions
from mdrender.engines import registry


def test_renders_paragraph() -> None:
    """renders simple text as a paragraph."""
    assert registry.render("commonmark", "Hello world") == "<p>Hello world</p>"


def test_renders_bold_and_italic() -> None:
    """renders emphasis with standard tags."""
    html = registry.render("commonmark", "**b** and *i*")
    assert "<strong>b</strong>" in html
    assert "<em>i</em>" in html


def test_links_open_in_new_tab() -> None:
    """adds the same link attributes as the lite engine."""
    html = registry.render("commonmark", "[site](https://example.com)")
    assert 'target="_blank"' in html
    assert 'rel="noopener noreferrer"' in html


def test_code_block_escaped() -> None:
    """escapes code block content."""
    html = registry.render("commonmark", "```\n<b>\n```")
    assert html == "<pre><code>&lt;b&gt;</code></pre>"


def test_fence_language_class() -> None:
    """adds a language class when fence languages are enabled."""
    html = registry.render(
        "commonmark", "```python\nx\n```", RenderOptions(fence_languages=True)
    )
    assert '<code class="language-python">' in html


def test_raw_html_disabled() -> None:
    """escapes raw HTML instead of passing it through."""
    html = registry.render("commonmark", "<script>alert('xss')</script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_theme_classes() -> None:
    """applies theme classes to headings and inline code."""
    options = RenderOptions.for_theme("tailwind")
    html = registry.render("commonmark", "# T\n\nuse `x`", options)
    assert '<h1 class="text-2xl font-semibold">T</h1>' in html
    assert '<code class="text-sm font-mono bg-gray-100 p-1 rounded-md">x</code>' in html
