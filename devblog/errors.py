from pathlib import Path
from typing import Optional


class BlogError(Exception):
    """Base class for failures while reading posts."""


class PostNotFoundError(BlogError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"No post found for slug {slug!r}")


class MalformedFrontMatterError(BlogError):
    def __init__(self, message: str, slug: Optional[str] = None):
        self.slug = slug
        if slug:
            message = f"{slug}: {message}"
        super().__init__(message)


class PostsDirectoryError(BlogError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Posts directory does not exist: {path}")
