import logging
from typing import Any, Dict, List, Optional, Set, Type

from beanie import PydanticObjectId, UpdateResponse
from pymongo import DESCENDING

from portfolio.core.database import Datastore
from portfolio.models.base import PortfolioDocument
from .exceptions import DocumentNotFoundError, DatastoreUnavailableError

logger = logging.getLogger(__name__)

# Keys a client may send but never gets to write.
_PROTECTED_KEYS = ("_id", "id", "revision_id")


class DocumentService:
    """CRUD over one portfolio collection.

    `label` is the entity name used in not-found messages ("Project").
    `sort_desc`, when set, names the field `list()` orders by, descending.
    """

    def __init__(
        self,
        datastore: Datastore,
        model: Type[PortfolioDocument],
        label: str,
        sort_desc: Optional[str] = None,
    ):
        self.datastore = datastore
        self.model = model
        self.label = label
        self.sort_desc = sort_desc

    def _ensure_connected(self) -> None:
        if not self.datastore.connected:
            raise DatastoreUnavailableError()

    @staticmethod
    def _object_id(document_id: str) -> PydanticObjectId:
        # bson.errors.InvalidId for anything that isn't a 24-char hex string
        return PydanticObjectId(document_id)

    @staticmethod
    def _writable(payload: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in payload.items() if k not in _PROTECTED_KEYS}

    async def create(self, payload: Dict[str, Any]) -> PortfolioDocument:
        """Validate `payload` and insert it as a new document."""
        self._ensure_connected()
        document = self.model.model_validate(self._writable(payload))
        await document.insert()
        logger.info(f"Created {self.label} {document.id}")
        return document

    async def list(self) -> List[PortfolioDocument]:
        self._ensure_connected()
        query = self.model.find_all()
        if self.sort_desc:
            # plain string ordering, done by MongoDB
            query = query.sort([(self.sort_desc, DESCENDING)])
        return await query.to_list()

    async def get(self, document_id: str) -> PortfolioDocument:
        self._ensure_connected()
        document = await self.model.get(self._object_id(document_id))
        if document is None:
            raise DocumentNotFoundError(self.label, document_id)
        return document

    async def first(self) -> PortfolioDocument:
        """Return whichever document MongoDB yields first."""
        self._ensure_connected()
        document = await self.model.find_one({})
        if document is None:
            raise DocumentNotFoundError(self.label)
        return document

    def _supplied_fields(self, payload: Dict[str, Any]) -> Set[str]:
        """Model field names `payload` mentions, by attribute name or wire name."""
        names = set()
        for name, field in self.model.model_fields.items():
            if name in _PROTECTED_KEYS:
                continue
            if name in payload or (field.alias and field.alias in payload):
                names.add(name)
        return names

    async def update(self, document_id: str, payload: Dict[str, Any]) -> PortfolioDocument:
        """
        Merge `payload` over the stored document and write the supplied fields.

        Fields missing from `payload` keep their stored values. The merged
        record is validated before anything is written, so a failing update
        leaves the stored document untouched. The write itself is a single
        find-and-update that `$set`s only the supplied fields, so concurrent
        updates to different fields do not overwrite each other.
        """
        self._ensure_connected()
        existing = await self.get(document_id)

        merged = existing.model_dump(by_alias=True, exclude={"id", "revision_id"})
        merged.update(self._writable(payload))
        validated = self.model.model_validate(merged)

        changes = validated.model_dump(by_alias=True, include=self._supplied_fields(payload))
        if not changes:
            return existing

        document = await self.model.find_one({"_id": existing.id}).update(
            {"$set": changes}, response_type=UpdateResponse.NEW_DOCUMENT
        )
        if document is None:
            raise DocumentNotFoundError(self.label, document_id)
        logger.info(f"Updated {self.label} {document.id}")
        return document

    async def delete(self, document_id: str) -> None:
        self._ensure_connected()
        result = await self.model.find_one({"_id": self._object_id(document_id)}).delete()
        if result is None or result.deleted_count == 0:
            raise DocumentNotFoundError(self.label, document_id)
        logger.info(f"Deleted {self.label} {document_id}")
