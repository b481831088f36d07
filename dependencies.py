from typing import Annotated

from fastapi import Request, Depends

from services.post_store import PostStore


async def get_store(request: Request) -> PostStore:
    """Get the post store client from app state"""
    return request.app.state.store


# Type annotations for dependency injection
Store = Annotated[PostStore, Depends(get_store)]
