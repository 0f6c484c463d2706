from fastapi import APIRouter, Depends
from fastapi.responses import Response

from devblog import dependencies as deps
from devblog.services.markdown_renderer import MarkdownRenderer

router = APIRouter()


@router.get("/highlight.css")
def get_highlight_css(renderer: MarkdownRenderer = Depends(deps.get_renderer)):
    """
    Serve the Pygments stylesheet matching the highlighted code blocks
    """
    return Response(content=renderer.stylesheet(), media_type="text/css")
