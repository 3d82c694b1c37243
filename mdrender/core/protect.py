"""Code protection utilities for markdown processing."""

import re
from dataclasses import dataclass, field
from typing import Optional

from mdrender.core.models import RenderOptions

# opening fence at line start; an unterminated fence runs to end of input
CODE_BLOCK_PATTERN = re.compile(r"^[ \t]*```([\s\S]*?)(?:```|\Z)", re.MULTILINE)
CODE_SPAN_PATTERN = re.compile(r"`([^`]*)`")
FENCE_INFO_PATTERN = re.compile(r"([\w+#.-]+)[ \t]*\n")

# placeholder prefixes already present in the source
LITERAL_PLACEHOLDER_PATTERN = re.compile(r"__(?=CODE_(?:BLOCK|SPAN)_)")
CODE_BLOCK_LINE_PATTERN = re.compile(r"__CODE_BLOCK_\d+__")
PLACEHOLDER_PATTERN = re.compile(r"__CODE_(BLOCK|SPAN)_(\d{1,9})__")


def code_block_token(index: int) -> str:
    """returns placeholder token for the code block at index."""
    return f"__CODE_BLOCK_{index}__"


def code_span_token(index: int) -> str:
    """returns placeholder token for the code span at index."""
    return f"__CODE_SPAN_{index}__"


def is_code_block_line(line: str) -> bool:
    """checks if a line holds only a code block placeholder."""
    return CODE_BLOCK_LINE_PATTERN.fullmatch(line.strip()) is not None


@dataclass
class ProtectedSpans:
    """rendered code fragments indexed by placeholder number."""

    blocks: list[str] = field(default_factory=list)
    spans: list[str] = field(default_factory=list)

    def add_block(self, fragment: str) -> str:
        self.blocks.append(fragment)
        return code_block_token(len(self.blocks) - 1)

    def add_span(self, fragment: str) -> str:
        self.spans.append(fragment)
        return code_span_token(len(self.spans) - 1)

    def restore(self, text: str) -> str:
        """
        restores code fragments from placeholders.

        Tokens are matched left to right in a single pass, so the trailing
        underscores of one token can never start a second one, and restored
        code is never rescanned. Each token is replaced exactly once.

        Args:
            text: text with placeholders

        Returns:
            text with code fragments restored
        """

        def replacer(match: re.Match[str]) -> str:
            fragments = self.blocks if match.group(1) == "BLOCK" else self.spans
            index = int(match.group(2))
            if index < len(fragments):
                return fragments[index]
            return neutralize_placeholders(match.group(0))

        return PLACEHOLDER_PATTERN.sub(replacer, text)


def neutralize_placeholders(text: str) -> str:
    """
    disarms placeholder-shaped text typed by the user.

    The first underscore is replaced with its character reference, which
    displays the same but can no longer match a real placeholder.

    Args:
        text: raw markdown text

    Returns:
        text without placeholder-shaped substrings
    """
    return LITERAL_PLACEHOLDER_PATTERN.sub("&#95;_", text)


def _split_fence_info(content: str) -> tuple[Optional[str], str]:
    """splits a leading info string (language) from fenced content."""
    match = FENCE_INFO_PATTERN.match(content)
    if not match:
        return None, content
    return match.group(1), content[match.end() :]


def protect_code(
    text: str, options: Optional[RenderOptions] = None
) -> tuple[str, ProtectedSpans]:
    """
    replaces code blocks and code spans with placeholders.

    Fenced blocks are extracted before inline spans so a backtick inside a
    block is never read as a span delimiter.

    Args:
        text: markdown text
        options: render options (classes, fence languages)

    Returns:
        tuple of (protected text, rendered code fragments)
    """
    options = options or RenderOptions()
    protected = ProtectedSpans()

    def block_replacer(match: re.Match[str]) -> str:
        content = match.group(1)
        language = None
        if options.fence_languages:
            language, content = _split_fence_info(content)

        code_attr = options.class_attr("pre_code")
        if language:
            css = " ".join(
                c for c in (options.classes.get("pre_code"), f"language-{language}") if c
            )
            code_attr = f' class="{css}"'

        fragment = (
            f"<pre{options.class_attr('pre')}>"
            f"<code{code_attr}>{content.strip()}</code></pre>"
        )
        return f"\n{protected.add_block(fragment)}\n"

    def span_replacer(match: re.Match[str]) -> str:
        fragment = f"<code{options.class_attr('code')}>{match.group(1)}</code>"
        return protected.add_span(fragment)

    text = CODE_BLOCK_PATTERN.sub(block_replacer, text)
    text = CODE_SPAN_PATTERN.sub(span_replacer, text)
    return text, protected
