from typing import Any, Dict, Optional, Tuple

import yaml
from frontmatter.default_handlers import YAMLHandler

from devblog.errors import MalformedFrontMatterError

_HANDLER = YAMLHandler()


def parse_front_matter(
    raw: str, slug: Optional[str] = None
) -> Tuple[Dict[str, Any], str]:
    """
    Split a post into its YAML front-matter mapping and markdown body.

    Unlike ``frontmatter.loads``, a missing or unreadable block is an error
    rather than an empty mapping.
    """
    text = raw.lstrip("\ufeff")

    if not _HANDLER.detect(text):
        raise MalformedFrontMatterError("missing front-matter block", slug=slug)

    try:
        fm, content = _HANDLER.split(text)
    except ValueError:
        raise MalformedFrontMatterError(
            "front-matter block is not closed", slug=slug
        ) from None

    try:
        metadata = _HANDLER.load(fm)
    except yaml.YAMLError as e:
        raise MalformedFrontMatterError(
            f"invalid front-matter: {e}", slug=slug
        ) from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise MalformedFrontMatterError(
            f"front-matter must be key/value pairs, got {type(metadata).__name__}",
            slug=slug,
        )

    return metadata, content.strip()
