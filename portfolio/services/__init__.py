from .document_service import DocumentService
from .exceptions import DocumentNotFoundError, DatastoreUnavailableError

__all__ = ["DocumentService", "DocumentNotFoundError", "DatastoreUnavailableError"]
