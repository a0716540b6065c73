"""Maintenance routes. Disabled outside development."""
from fastapi import APIRouter, Depends, HTTPException, status

from catalog_service.config import Settings
from catalog_service.core.logging import get_logger
from catalog_service.dependencies import get_app_settings, get_content_store, get_library_store
from catalog_service.schemas.common import ErrorResponse, MessageResponse
from catalog_service.storage import ContentStore, LibraryStore

logger = get_logger("api.admin")

router = APIRouter(tags=["Admin"])


@router.post(
    "/reset",
    response_model=MessageResponse,
    responses={403: {"model": ErrorResponse, "description": "Disabled in production."}},
)
async def reset_stores(
    settings: Settings = Depends(get_app_settings),
    library_store: LibraryStore = Depends(get_library_store),
    content_store: ContentStore = Depends(get_content_store),
) -> MessageResponse:
    """
    Restore both stores to their initial sample data.
    """
    if not settings.is_development:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="/reset is disabled in production.")
    library_store.reset()
    content_store.reset()
    logger.info("Stores reset through the API")
    return MessageResponse(message="Reset completed.")
