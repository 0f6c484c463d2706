import logging
from pathlib import Path
from typing import List

from devblog.errors import PostNotFoundError, PostsDirectoryError

logger = logging.getLogger(__name__)


class FilePostsRepo:
    def __init__(self, posts_dir: Path, extension: str = ".md"):
        self.posts_dir = Path(posts_dir)
        self.extension = extension

    def list_slugs(self) -> List[str]:
        if not self.posts_dir.is_dir():
            raise PostsDirectoryError(self.posts_dir)

        slugs = [
            path.name.removesuffix(self.extension)
            for path in sorted(self.posts_dir.iterdir())
            if path.is_file() and path.name.endswith(self.extension)
        ]
        logger.debug(f"Found {len(slugs)} posts in {self.posts_dir}")
        return slugs

    def read_raw(self, slug: str) -> str:
        path = self._path_for(slug)
        try:
            return path.read_text(encoding="utf-8")
        except PermissionError:
            raise
        except OSError:
            # Missing files and names the OS refuses (too long, bad directory)
            raise PostNotFoundError(slug) from None

    def _path_for(self, slug: str) -> Path:
        # Slugs are bare file stems; anything that would leave posts_dir is unknown
        if (
            not slug
            or "\x00" in slug
            or Path(slug).name != slug
            or slug in (".", "..")
        ):
            raise PostNotFoundError(slug)
        return self.posts_dir / f"{slug}{self.extension}"
