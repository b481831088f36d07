from fastapi import APIRouter

from dependencies import Store

router = APIRouter()


@router.get("/health")
async def health(store: Store):
    """Health check endpoint - returns service and store status"""
    reachable = await store.check_health()
    return {
        "status": "ok",
        "service": "blog",
        "store": "reachable" if reachable else "unreachable",
    }
