"""Line-level markdown transforms: rules, emphasis, headers and links."""

import re
from typing import Optional

from mdrender.core.models import RenderOptions

RULE_PATTERN = re.compile(r"^---$", re.MULTILINE)
# closes on the last ** of a run so ***x*** keeps its inner italic
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*(?!\*)")
# never part of a ** pair, never across lines, never a "* " bullet marker
ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?!\s)([^*\n]+)(?<!\s)\*(?!\*)")
HEADER_PATTERN = re.compile(r"^(#{1,3}) (.*)$", re.MULTILINE)
LINK_PATTERN = re.compile(r"\[([^\]\n]*)\]\(([^)\n]*)\)")

GENERATED_TAG_PATTERN = re.compile(r"<(/?)(strong|em|a)(?:\s[^>]*)?>")


def is_balanced(fragment: str) -> bool:
    """
    checks that generated inline tags in a fragment nest properly.

    Args:
        fragment: HTML fragment

    Returns:
        True if every strong/em/a tag is closed in order
    """
    stack: list[str] = []
    for match in GENERATED_TAG_PATTERN.finditer(fragment):
        closing, tag = match.group(1), match.group(2)
        if not closing:
            stack.append(tag)
        elif not stack or stack.pop() != tag:
            return False
    return not stack


def _wrap_if_balanced(match: re.Match[str], tag: str) -> str:
    """wraps group 1 in tag, or leaves the match as literal text."""
    content = match.group(1)
    if not is_balanced(content):
        return match.group(0)
    return f"<{tag}>{content}</{tag}>"


def render_rules(text: str, options: RenderOptions) -> str:
    """converts lines of exactly --- to horizontal rules."""
    return RULE_PATTERN.sub(f"<hr{options.class_attr('hr')} />", text)


def render_emphasis(text: str) -> str:
    """converts **bold** then *italic* spans."""
    text = BOLD_PATTERN.sub(lambda m: _wrap_if_balanced(m, "strong"), text)
    return ITALIC_PATTERN.sub(lambda m: _wrap_if_balanced(m, "em"), text)


def render_headers(text: str, options: RenderOptions) -> str:
    """converts #, ## and ### lines to headings."""

    def replacer(match: re.Match[str]) -> str:
        level = len(match.group(1))
        attr = options.class_attr(f"h{level}")
        return f"<h{level}{attr}>{match.group(2)}</h{level}>"

    return HEADER_PATTERN.sub(replacer, text)


def render_links(text: str, options: RenderOptions) -> str:
    """converts [text](url) to anchors opening in a new tab."""

    def replacer(match: re.Match[str]) -> str:
        label, url = match.group(1), match.group(2)
        if not is_balanced(label) or "<" in url or ">" in url:
            return match.group(0)
        href = url.replace('"', "&quot;")
        return (
            f'<a href="{href}" target="_blank" rel="noopener noreferrer"'
            f"{options.class_attr('a')}>{label}</a>"
        )

    return LINK_PATTERN.sub(replacer, text)


def render_inline(text: str, options: Optional[RenderOptions] = None) -> str:
    """
    applies line-level transforms in their fixed order.

    Rules, then bold, then italic, then headers, then links. Bold runs
    before italic so a ** pair is never read as two single asterisks.

    Args:
        text: placeholder-protected markdown text
        options: render options (element classes)

    Returns:
        text with inline elements converted to HTML
    """
    options = options or RenderOptions()
    text = render_rules(text, options)
    text = render_emphasis(text)
    text = render_headers(text, options)
    return render_links(text, options)
