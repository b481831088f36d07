import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from dependencies import Store
from models.post import ErrorResponse
from services.errors import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Store operation failed"}}


def store_failure(context: str, error: StoreError) -> JSONResponse:
    logger.error("%s failed (store status %s): %s", context, error.status, error.message)
    return JSONResponse(status_code=500, content={"error": error.message})


@router.get("", responses=ERROR_RESPONSES)
async def get_posts(store: Store) -> List[Dict[str, Any]]:
    """Get all posts exactly as the store returns them"""
    try:
        return await store.list_posts()
    except StoreError as e:
        return store_failure("Listing posts", e)


@router.post("", status_code=201, responses=ERROR_RESPONSES)
async def create_post(store: Store, post_data: Any = Body(None)) -> Dict[str, Any]:
    """
    Create a new post and return the stored row

    Field values are forwarded untouched; the store decides what it accepts.
    """
    if post_data is None:
        post_data = {}
    if not isinstance(post_data, dict):
        return store_failure("Creating post", StoreError("Request body must be a JSON object"))

    try:
        post = await store.insert_post(post_data.get("title"), post_data.get("content"),
                                       post_data.get("author"))
    except StoreError as e:
        return store_failure("Creating post", e)

    logger.info("Created post %s", post.get("id"))
    return post
