import datetime
import logging
import math
from typing import Any, Dict, List

from devblog.schemas.blog import PostSummary

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "excerpt")


def enrich(
    slug: str,
    metadata: Dict[str, Any],
    body: str,
    default_author: str = "Your Name",
    words_per_minute: int = 200,
) -> PostSummary:
    """Build post metadata from parsed front-matter, filling derived and default fields."""
    missing = [key for key in REQUIRED_FIELDS if metadata.get(key) in (None, "")]
    if missing:
        logger.warning(f"Post {slug} is missing front-matter fields: {', '.join(missing)}")

    return PostSummary(
        slug=slug,
        title=_to_text(metadata.get("title")),
        date=_convert_date(metadata.get("date")),
        excerpt=_to_text(metadata.get("excerpt")),
        tags=_normalize_tags(metadata.get("tags")),
        author=_to_text(metadata.get("author")) or default_author,
        readTime=calculate_reading_time(body, words_per_minute),
    )


def count_words(text: str) -> int:
    return len(text.split())


def calculate_reading_time(text: str, words_per_minute: int = 200) -> str:
    minutes = math.ceil(count_words(text) / words_per_minute) or 1
    return f"{minutes} min read"


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)


def _to_text(value):
    if value is None:
        return None
    return str(value)
