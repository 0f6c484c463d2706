from pathlib import Path

from devblog.settings import Settings, choose_env_file


def test_defaults_match_blog_conventions():
    s = Settings()
    assert s.POSTS_EXTENSION == ".md"
    assert s.DEFAULT_AUTHOR == "Your Name"
    assert s.WORDS_PER_MINUTE == 200


def test_posts_path_resolves_relative_to_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    s = Settings(POSTS_DIR="content/posts")
    assert s.posts_path == tmp_path / "content" / "posts"


def test_posts_path_keeps_absolute_directory(tmp_path):
    s = Settings(POSTS_DIR=str(tmp_path))
    assert s.posts_path == tmp_path


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_AUTHOR", "Ada")
    monkeypatch.setenv("WORDS_PER_MINUTE", "250")
    s = Settings()
    assert s.DEFAULT_AUTHOR == "Ada"
    assert s.WORDS_PER_MINUTE == 250


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
