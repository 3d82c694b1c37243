"""lite markdown engine."""

from mdrender.core.models import RenderOptions
from mdrender.core.renderer import render
from mdrender.engines import engine


@engine("lite")
class LiteEngine:  # pylint: disable=too-few-public-methods
    """renders with the built-in lite dialect renderer."""

    def render(self, text: str, options: RenderOptions) -> str:
        """renders markdown text to an HTML fragment."""
        return render(text, options)
