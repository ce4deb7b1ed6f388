import logging
from typing import Any, Callable, Dict, Optional, Type

from fastapi import APIRouter, Body, Depends, HTTPException, status

from portfolio.core import Datastore, get_datastore
from portfolio.models.base import PortfolioDocument
from portfolio.services.document_service import DocumentService
from portfolio.services.exceptions import DocumentNotFoundError

logger = logging.getLogger(__name__)


def document_service_dependency(
    model: Type[PortfolioDocument], label: str, sort_desc: Optional[str] = None
) -> Callable[..., DocumentService]:
    def get_service(datastore: Datastore = Depends(get_datastore)) -> DocumentService:
        return DocumentService(datastore, model, label, sort_desc=sort_desc)

    return get_service


def build_crud_router(
    model: Type[PortfolioDocument],
    label: str,
    sort_desc: Optional[str] = None,
    list_path: str = "",
) -> APIRouter:
    """
    Create/list/get/update/delete routes for one collection.

    Each route catches its own faults and answers {"message": <error text>}
    with the status code for that operation: create and update report
    failures as 400, the read and delete routes as 500, unknown ids as 404.
    """
    router = APIRouter()
    get_service = document_service_dependency(model, label, sort_desc)

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_document(
        payload: Dict[str, Any] = Body(...),
        service: DocumentService = Depends(get_service),
    ):
        try:
            document = await service.create(payload)
        except Exception as e:
            logger.warning(f"Create {label} failed: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return document.to_public()

    @router.get(list_path)
    async def list_documents(service: DocumentService = Depends(get_service)):
        try:
            documents = await service.list()
        except Exception as e:
            logger.error(f"List {label} failed: {e}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
        return [document.to_public() for document in documents]

    @router.get("/{document_id}")
    async def get_document(document_id: str, service: DocumentService = Depends(get_service)):
        try:
            document = await service.get(document_id)
        except DocumentNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except Exception as e:
            logger.error(f"Get {label} {document_id} failed: {e}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
        return document.to_public()

    @router.put("/{document_id}")
    async def update_document(
        document_id: str,
        payload: Dict[str, Any] = Body(...),
        service: DocumentService = Depends(get_service),
    ):
        try:
            document = await service.update(document_id, payload)
        except DocumentNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except Exception as e:
            logger.warning(f"Update {label} {document_id} failed: {e}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return document.to_public()

    @router.delete("/{document_id}")
    async def delete_document(document_id: str, service: DocumentService = Depends(get_service)):
        try:
            await service.delete(document_id)
        except DocumentNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except Exception as e:
            logger.error(f"Delete {label} {document_id} failed: {e}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
        return {"message": f"{label} deleted"}

    return router
