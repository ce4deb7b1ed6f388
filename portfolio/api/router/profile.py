import logging

from fastapi import Depends, HTTPException, status

from portfolio.models import Profile
from portfolio.services.document_service import DocumentService
from portfolio.services.exceptions import DocumentNotFoundError
from .crud import build_crud_router, document_service_dependency

logger = logging.getLogger(__name__)

# GET /api/profile answers with the profile itself, so the full listing
# lives under /all.
profile_router = build_crud_router(Profile, "Profile", list_path="/all")


@profile_router.get("")
async def get_profile(
    service: DocumentService = Depends(document_service_dependency(Profile, "Profile")),
):
    """Return the first stored profile."""
    try:
        document = await service.first()
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"Get Profile failed: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return document.to_public()
