import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from devblog import dependencies as deps
from devblog.errors import PostNotFoundError
from devblog.schemas.blog import PostDetail, PostPageMeta, PostSlug, PostSummary
from devblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    limit: Optional[int] = Query(default=None, ge=1),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts(limit=limit)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/slugs", response_model=List[PostSlug])
def list_post_slugs(service: PostsService = Depends(deps.get_posts_service)):
    """Get every slug, one per page to pre-generate."""
    try:
        return service.list_slugs()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing post slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, with its body rendered to HTML."""
    try:
        return await service.get_post(slug)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/posts/{slug}/meta", response_model=PostPageMeta)
def get_post_page_meta(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return service.get_page_meta(slug)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving metadata for post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
