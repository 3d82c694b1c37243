"""CommonMark engine backed by markdown-it-py."""

import html as html_lib
from typing import Any, cast

from markdown_it import MarkdownIt

from mdrender.core.models import RenderOptions
from mdrender.engines import engine

# tags rendered through renderToken that take theme classes
CLASSED_TAGS = ("h1", "h2", "h3", "hr", "a")


@engine("commonmark")
class CommonMarkEngine:  # pylint: disable=too-few-public-methods
    """renders with markdown-it-py for comparison with the lite dialect."""

    def render(self, text: str, options: RenderOptions) -> str:
        """
        renders markdown to HTML with the same theme and link attributes.

        Args:
            text: markdown text
            options: render options

        Returns:
            HTML string
        """
        md = MarkdownIt()
        # disables HTML to prevent injection attacks
        md.disable("html_inline")
        md.disable("html_block")

        # cast to Any for mypy since RendererProtocol doesn't expose renderToken/rules
        renderer: Any = md.renderer
        original_render_token = renderer.renderToken

        def custom_render_token(tokens: Any, idx: int, opts: Any, env: Any) -> str:
            """adds theme classes and new-tab link attributes."""
            token = tokens[idx]

            if token.nesting != -1 and token.tag in CLASSED_TAGS:
                css = options.classes.get(token.tag)
                if css:
                    token.attrSet("class", css)
                if token.tag == "a":
                    token.attrSet("target", "_blank")
                    token.attrSet("rel", "noopener noreferrer")

            return cast(str, original_render_token(tokens, idx, opts, env))

        renderer.renderToken = custom_render_token

        def render_code_block(tokens: Any, idx: int, _opts: Any, _env: Any) -> str:
            token = tokens[idx]
            classes = [options.classes.get("pre_code", "")]
            info = token.info.strip() if token.info else ""
            if options.fence_languages and info:
                classes.append(f"language-{info.split()[0]}")
            css = " ".join(c for c in classes if c)
            code_attr = f' class="{css}"' if css else ""
            escaped = html_lib.escape(token.content.strip("\n"))
            return (
                f"<pre{options.class_attr('pre')}><code{code_attr}>"
                f"{escaped}</code></pre>\n"
            )

        renderer.rules["code_block"] = render_code_block
        renderer.rules["fence"] = render_code_block

        def render_code_inline(tokens: Any, idx: int, _opts: Any, _env: Any) -> str:
            token = tokens[idx]
            escaped = html_lib.escape(token.content)
            return f"<code{options.class_attr('code')}>{escaped}</code>"

        renderer.rules["code_inline"] = render_code_inline

        result = cast(str, md.render(text))
        return result.rstrip("\n")
