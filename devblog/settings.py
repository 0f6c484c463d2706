from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Posts
    POSTS_DIR: str = "posts"
    POSTS_EXTENSION: str = ".md"
    DEFAULT_AUTHOR: str = "Your Name"
    WORDS_PER_MINUTE: int = 200

    # Site
    SITE_TITLE: str = "DevBlog"
    CODE_HIGHLIGHTING_THEME: str = "default"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        path = Path(self.POSTS_DIR)
        if path.is_absolute():
            return path
        return Path.cwd() / path


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
