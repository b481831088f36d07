import logging
from contextlib import asynccontextmanager
from typing import Optional

import aiohttp
import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from config import Settings, setup_logging
from routes.health import router as health_router
from routes.posts import router as posts_router
from services.post_store import PostStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[PostStore] = None) -> FastAPI:
    """
    Build the API service

    When a store is passed in it is used as-is and its lifecycle is left to the
    caller; otherwise one is created on startup and its session closed on shutdown.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            app.state.store = store
            yield
            return

        if not settings.supabase_url or not settings.supabase_key:
            logger.warning("SUPABASE_URL or SUPABASE_ANON_KEY is not set")

        session = aiohttp.ClientSession()
        app.state.session = session
        app.state.store = PostStore(session, settings.supabase_url, settings.supabase_key,
                                    settings.posts_table)
        logger.info("Post store configured for %s", settings.supabase_url or "<unset>")

        try:
            yield
        finally:
            # Cleanup resources
            await session.close()

    app = FastAPI(title="Blog Service", lifespan=lifespan)

    # Open CORS policy, any origin may call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(posts_router, prefix="/posts", tags=["posts"])
    app.include_router(health_router, tags=["health"])

    return app


settings = Settings.from_env()
setup_logging(settings.log_level)
app = create_app(settings)


if __name__ == "__main__":
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
