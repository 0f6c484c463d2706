import logging
from typing import List, Optional, Tuple

from fastapi.concurrency import run_in_threadpool

from devblog.schemas.blog import PostDetail, PostPageMeta, PostSlug, PostSummary
from devblog.services.front_matter import parse_front_matter
from devblog.services.metadata_enricher import enrich

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        repo,
        renderer,
        default_author: str = "Your Name",
        site_title: str = "DevBlog",
        words_per_minute: int = 200,
    ):
        self.repo = repo
        self.renderer = renderer
        self.default_author = default_author
        self.site_title = site_title
        self.words_per_minute = words_per_minute

    def list_slugs(self) -> List[PostSlug]:
        return [PostSlug(slug=slug) for slug in self.repo.list_slugs()]

    def list_posts(self, limit: Optional[int] = None) -> List[PostSummary]:
        posts = [self._load(slug)[0] for slug in self.repo.list_slugs()]

        # Plain string comparison; list.sort is stable so ties keep enumeration order
        posts.sort(key=lambda p: p.date or "", reverse=True)

        if limit is not None:
            posts = posts[:limit]
        return posts

    async def get_post(self, slug: str) -> PostDetail:
        # File read and YAML parse block, so keep them off the event loop
        summary, body = await run_in_threadpool(self._load, slug)
        content = await self.renderer.render(body)
        return PostDetail(**summary.model_dump(), content=content)

    def get_page_meta(self, slug: str) -> PostPageMeta:
        summary, _body = self._load(slug)
        return PostPageMeta(
            title=f"{summary.title or slug} - {self.site_title}",
            description=summary.excerpt,
        )

    def _load(self, slug: str) -> Tuple[PostSummary, str]:
        raw = self.repo.read_raw(slug)
        metadata, body = parse_front_matter(raw, slug=slug)
        summary = enrich(
            slug,
            metadata,
            body,
            default_author=self.default_author,
            words_per_minute=self.words_per_minute,
        )
        return summary, body
