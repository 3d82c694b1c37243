"""Markdown to HTML renderer for the lite markdown dialect."""

import html as html_lib
import logging
import re
from typing import Optional

from mdrender.core.inline import render_inline
from mdrender.core.lists import render_lists
from mdrender.core.models import RenderOptions
from mdrender.core.paragraphs import wrap_paragraphs
from mdrender.core.protect import neutralize_placeholders, protect_code

logger = logging.getLogger(__name__)

LINE_ENDING_PATTERN = re.compile(r"\r\n?")


def render(text: str, options: Optional[RenderOptions] = None) -> str:
    """
    converts markdown to an HTML fragment.

    Stages run strictly in order: code protection, line-level transforms,
    list structure, then paragraph wrapping and code restoration. CRLF and
    lone CR line endings are read as LF. Never raises; malformed constructs
    come out as literal text.

    Args:
        text: markdown text
        options: render options (defaults to plain output, no escaping)

    Returns:
        HTML fragment string
    """
    options = options or RenderOptions()
    text = LINE_ENDING_PATTERN.sub("\n", text)
    if options.escape_html:
        text = html_lib.escape(text)

    protected_text, protected = protect_code(neutralize_placeholders(text), options)
    logger.debug(
        "protected %d code block(s) and %d code span(s)",
        len(protected.blocks),
        len(protected.spans),
    )

    transformed = render_inline(protected_text, options)
    lines = render_lists(transformed)
    result = wrap_paragraphs(lines)

    return protected.restore(result)
