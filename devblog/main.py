import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from devblog.routers import posts, styles
from devblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="DevBlog API", description="Markdown posts for the DevBlog site")


@asynccontextmanager
async def lifespan(app: FastAPI):
    posts_path = settings.posts_path
    if posts_path.is_dir():
        logger.info(f"Serving posts from {posts_path}")
    else:
        logger.warning(f"Posts directory {posts_path} does not exist")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(styles.router)


@app.get("/")
async def root():
    return {"message": "DevBlog API is running"}
