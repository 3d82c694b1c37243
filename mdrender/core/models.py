"""Value types shared by the rendering pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class ListKind(Enum):
    """kind of an open list element."""

    UNORDERED = "ul"
    ORDERED = "ol"


@dataclass(frozen=True)
class UnorderedFrame:
    """open bulleted list at an indentation level."""

    level: int

    @property
    def kind(self) -> ListKind:
        return ListKind.UNORDERED

    def open_tag(self) -> str:
        return "<ul>"

    def close_tag(self) -> str:
        return "</ul>"


@dataclass(frozen=True)
class OrderedFrame:
    """open numbered list at an indentation level, starting at `start`."""

    level: int
    start: int = 1

    @property
    def kind(self) -> ListKind:
        return ListKind.ORDERED

    def open_tag(self) -> str:
        return f'<ol start="{self.start}">'

    def close_tag(self) -> str:
        return "</ol>"


ListFrame = Union[UnorderedFrame, OrderedFrame]


TAILWIND_CLASSES: dict[str, str] = {
    "pre": "bg-gray-800 p-2 rounded-md",
    "pre_code": "text-sm font-mono text-white",
    "code": "text-sm font-mono bg-gray-100 p-1 rounded-md",
    "hr": "my-4",
    "h1": "text-2xl font-semibold",
    "h2": "text-xl font-semibold mt-2",
    "h3": "text-lg font-semibold mt-1",
    "a": "text-blue-700 hover:text-blue-800 underline",
}

THEMES: dict[str, dict[str, str]] = {
    "plain": {},
    "tailwind": TAILWIND_CLASSES,
}


@dataclass(frozen=True)
class RenderOptions:
    """options for a single render call."""

    # element key (pre, pre_code, code, hr, h1..h3, a) -> class attribute
    classes: dict[str, str] = field(default_factory=dict)
    escape_html: bool = False
    fence_languages: bool = False

    @classmethod
    def for_theme(cls, theme: str, **kwargs: bool) -> "RenderOptions":
        """
        builds options using one of the named themes.

        Args:
            theme: key into THEMES
            **kwargs: remaining RenderOptions flags

        Returns:
            RenderOptions with the theme's classes

        Raises:
            KeyError: if theme is unknown
        """
        return cls(classes=dict(THEMES[theme]), **kwargs)

    def class_attr(self, key: str) -> str:
        """returns ` class="..."` for an element key, or empty string."""
        css = self.classes.get(key)
        return f' class="{css}"' if css else ""


@dataclass
class Document:
    """markdown source and its rendered HTML."""

    name: str
    source: str
    html: str = ""
    title: Optional[str] = None
