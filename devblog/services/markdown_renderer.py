import logging

import markdown
from fastapi.concurrency import run_in_threadpool
from pygments.formatters import HtmlFormatter

logger = logging.getLogger(__name__)

HIGHLIGHT_CSS_CLASS = "highlight"


class MarkdownRenderer:
    """
    Converts a post body to HTML.

    Python-Markdown parses the body into an element tree, the codehilite
    tree processor runs Pygments over fenced blocks that declare a language,
    and the tree is serialized to an HTML string. Output is not sanitized.
    """

    def __init__(self, theme: str = "default"):
        self.theme = theme

    async def render(self, body: str) -> str:
        return await run_in_threadpool(self.render_sync, body)

    def render_sync(self, body: str) -> str:
        # markdown.Markdown keeps per-document state, so build one per call
        md = markdown.Markdown(
            extensions=["fenced_code", "codehilite", "tables"],
            extension_configs={
                "codehilite": {
                    "css_class": HIGHLIGHT_CSS_CLASS,
                    "guess_lang": False,
                    "pygments_style": self.theme,
                }
            },
            output_format="html",
        )
        source = body or ""
        html = md.convert(source)
        logger.debug(f"Rendered {len(source)} chars of markdown to {len(html)} chars")
        return html

    def stylesheet(self) -> str:
        return HtmlFormatter(style=self.theme).get_style_defs(
            f".{HIGHLIGHT_CSS_CLASS}"
        )
