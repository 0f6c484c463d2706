from typing import List, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    author: str
    readTime: str


class PostDetail(PostSummary):
    content: str  # Rendered HTML


class PostSlug(BaseModel):
    slug: str


class PostPageMeta(BaseModel):
    title: str
    description: Optional[str] = None
