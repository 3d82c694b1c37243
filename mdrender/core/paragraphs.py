"""Paragraph wrapping and cleanup of rendered lines."""

import re
from collections.abc import Iterator

from mdrender.core.protect import is_code_block_line

BLOCK_TAG_PATTERN = re.compile(r"^</?(?:h[1-6]|ul|ol|li|pre|hr|p)(?:[\s/>])", re.IGNORECASE)
EMPTY_PARAGRAPH_PATTERN = re.compile(r"^(?:<br\s*/?>|\s)*$", re.IGNORECASE)


def is_block_line(line: str) -> bool:
    """checks if a line starts with a block-level element or code block placeholder."""
    stripped = line.strip()
    return bool(BLOCK_TAG_PATTERN.match(stripped)) or is_code_block_line(stripped)


def _paragraph(run: list[str]) -> str:
    """joins a run of inline lines with line breaks and wraps it."""
    return "<p>" + "<br>".join(run) + "</p>"


def iter_blocks(lines: list[str]) -> Iterator[str]:
    """
    groups lines into block-level fragments.

    Whitespace-only lines end a paragraph. Consecutive inline lines form one
    paragraph with line breaks between them. Block-level lines are yielded
    bare, never wrapped in a paragraph.

    Args:
        lines: output lines of the list pass

    Yields:
        HTML fragments in document order
    """
    run: list[str] = []
    for line in lines:
        if not line.strip():
            if run:
                yield _paragraph(run)
                run = []
        elif is_block_line(line):
            if run:
                yield _paragraph(run)
                run = []
            yield line.strip()
        else:
            run.append(line)
    if run:
        yield _paragraph(run)


def is_empty_paragraph(fragment: str) -> bool:
    """checks if a fragment is a paragraph with no content but line breaks."""
    if not (fragment.startswith("<p>") and fragment.endswith("</p>")):
        return False
    return bool(EMPTY_PARAGRAPH_PATTERN.match(fragment[3:-4]))


def wrap_paragraphs(lines: list[str]) -> str:
    """
    converts rendered lines into paragraphs and bare block elements.

    Args:
        lines: output lines of the list pass

    Returns:
        HTML with one fragment per line, placeholders still in place
    """
    return "\n".join(
        block for block in iter_blocks(lines) if not is_empty_paragraph(block)
    )
