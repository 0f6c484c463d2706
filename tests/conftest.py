import textwrap

import pytest

from devblog.errors import PostNotFoundError


def write_post(posts_dir, slug: str, raw: str, extension: str = ".md"):
    path = posts_dir / f"{slug}{extension}"
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


class FakeRepo:
    """
    Minimal post store stand-in keyed by slug.
    Set track_calls=True to record the order of calls.
    """

    def __init__(self, raw_by_slug: dict[str, str], track_calls: bool = False):
        self.raw_by_slug = raw_by_slug
        self.track_calls = track_calls
        self.calls = []

    def list_slugs(self):
        if self.track_calls:
            self.calls.append("list_slugs")
        return list(self.raw_by_slug)

    def read_raw(self, slug: str) -> str:
        if self.track_calls:
            self.calls.append(f"read_raw({slug})")
        if slug not in self.raw_by_slug:
            raise PostNotFoundError(slug)
        return textwrap.dedent(self.raw_by_slug[slug]).lstrip()


class FakeRenderer:
    """
    Renderer stand-in that wraps the body instead of converting it.
    """

    def __init__(self):
        self.rendered = []

    async def render(self, body: str) -> str:
        self.rendered.append(body)
        return f"<rendered>{body}</rendered>"

    def stylesheet(self) -> str:
        return ".highlight { color: red }"


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        slugs_return=None,
        page_meta_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._slugs_return = slugs_return or []
        self._page_meta_return = page_meta_return
        self.limits = []

    def list_posts(self, limit=None):
        self.limits.append(limit)
        posts = self._list_posts_return
        return posts[:limit] if limit is not None else posts

    def list_slugs(self):
        return self._slugs_return

    async def get_post(self, slug: str):
        if self._get_post_return is None:
            raise PostNotFoundError(slug)
        return self._get_post_return

    def get_page_meta(self, slug: str):
        if self._page_meta_return is None:
            raise PostNotFoundError(slug)
        return self._page_meta_return
