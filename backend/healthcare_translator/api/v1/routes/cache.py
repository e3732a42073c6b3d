"""Cache management API routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from healthcare_translator.api.dependencies import RequireAuth, TranslationServiceDep

router = APIRouter()


class CacheStatsResponse(BaseModel):
    """Cache statistics response."""
    entries: int
    hits: int
    misses: int


class CacheClearResponse(BaseModel):
    """Cache clear response."""
    entries_deleted: int
    action: str


@router.get("/cache/stats")
async def get_cache_stats(service: TranslationServiceDep) -> CacheStatsResponse:
    """Get translation cache statistics.

    Hit and miss counters cover the lifetime of the process; they are not
    reset when the cache is cleared.
    """
    return CacheStatsResponse(**service.cache_stats())


@router.post("/cache/clear")
async def clear_cache(
    service: TranslationServiceDep,
    _auth: RequireAuth,
) -> CacheClearResponse:
    """Clear all cached translations.

    Subsequent translations will make fresh API calls until the cache is
    rebuilt.
    """
    count = service.clear_cache()
    return CacheClearResponse(entries_deleted=count, action="clear_all")
