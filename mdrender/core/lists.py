"""List structure transform: nested ul/ol tracking with an indentation stack."""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from mdrender.core.models import ListFrame, ListKind, OrderedFrame, UnorderedFrame
from mdrender.core.protect import is_code_block_line

logger = logging.getLogger(__name__)

# caps the digit run so the start number stays a small int
NUMBERED_ITEM_PATTERN = re.compile(r"^(\d{1,9})\.\s+(.*)$")
BULLET_ITEM_PATTERN = re.compile(r"^[*-]\s+(.*)$")

INDENT_WIDTH = 2


@dataclass(frozen=True)
class ListItem:
    """a list item line after classification."""

    kind: ListKind
    level: int
    content: str
    number: Optional[int] = None


def indent_level(line: str) -> int:
    """returns indentation level (2 leading whitespace chars per level, rounded down)."""
    return (len(line) - len(line.lstrip())) // INDENT_WIDTH


def parse_list_item(line: str) -> Optional[ListItem]:
    """
    classifies a line as a numbered or bulleted list item.

    Args:
        line: one physical line, with its indentation

    Returns:
        ListItem, or None if the line is not a list item
    """
    trimmed = line.strip()
    level = indent_level(line)

    numbered = NUMBERED_ITEM_PATTERN.match(trimmed)
    if numbered:
        return ListItem(
            kind=ListKind.ORDERED,
            level=level,
            content=numbered.group(2),
            number=int(numbered.group(1)),
        )

    bullet = BULLET_ITEM_PATTERN.match(trimmed)
    if bullet:
        return ListItem(kind=ListKind.UNORDERED, level=level, content=bullet.group(1))

    return None


class ListBuilder:
    """line-by-line state machine that emits balanced list markup."""

    def __init__(self) -> None:
        self.stack: list[ListFrame] = []
        self.lines: list[str] = []

    def close_all(self) -> None:
        """closes every open list, innermost first."""
        while self.stack:
            self.lines.append(self.stack.pop().close_tag())

    def _close_deeper_than(self, level: int) -> None:
        while self.stack and self.stack[-1].level > level:
            self.lines.append(self.stack.pop().close_tag())

    def _open(self, item: ListItem) -> None:
        frame: ListFrame
        if item.kind is ListKind.ORDERED:
            start = item.number if item.number is not None else 1
            frame = OrderedFrame(level=item.level, start=start)
        else:
            frame = UnorderedFrame(level=item.level)
        self.stack.append(frame)
        self.lines.append(frame.open_tag())

    def add_item(self, item: ListItem) -> None:
        """
        emits a list item, opening or closing lists as needed.

        Strictly deeper lists are closed first. A list at the same level but
        of a different kind is closed too, so kinds never mix in one list.
        """
        self._close_deeper_than(item.level)

        top = self.stack[-1] if self.stack else None
        if top is not None and top.level == item.level and top.kind is not item.kind:
            self.lines.append(self.stack.pop().close_tag())
            top = self.stack[-1] if self.stack else None

        if top is None or top.level < item.level:
            self._open(item)

        self.lines.append(f"<li>{item.content}</li>")

    def feed(self, line: str) -> None:
        """processes one physical line."""
        if is_code_block_line(line):
            # code blocks are never nested inside a list
            self.close_all()
            self.lines.append(line)
            return

        item = parse_list_item(line)
        if item is not None:
            self.add_item(item)
        elif not line.strip():
            # blank lines may separate items of one list
            self.lines.append("")
        else:
            self.close_all()
            self.lines.append(line)

    def finish(self) -> list[str]:
        """closes remaining lists and returns the output lines."""
        self.close_all()
        return self.lines


def render_lists(text: str) -> list[str]:
    """
    converts list item lines into nested ul/ol markup.

    Args:
        text: text after line-level transforms

    Returns:
        output lines with balanced list tags
    """
    builder = ListBuilder()
    for line in text.split("\n"):
        builder.feed(line)
    lines = builder.finish()
    logger.debug("list pass produced %d line(s)", len(lines))
    return lines
