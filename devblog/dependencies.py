from fastapi import Depends

from devblog.repos.posts_repo import FilePostsRepo
from devblog.services.markdown_renderer import MarkdownRenderer
from devblog.services.posts_service import PostsService
from devblog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(
        current_settings.posts_path, extension=current_settings.POSTS_EXTENSION
    )


def get_renderer(current_settings: Settings = Depends(get_settings)):
    return MarkdownRenderer(theme=current_settings.CODE_HIGHLIGHTING_THEME)


def get_posts_service(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_renderer),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo,
        renderer=renderer,
        default_author=current_settings.DEFAULT_AUTHOR,
        site_title=current_settings.SITE_TITLE,
        words_per_minute=current_settings.WORDS_PER_MINUTE,
    )
