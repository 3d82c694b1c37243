"""lite markdown dialect rendering core."""

from mdrender.core.models import THEMES, Document, RenderOptions
from mdrender.core.renderer import render

__all__ = ["render", "RenderOptions", "Document", "THEMES"]
