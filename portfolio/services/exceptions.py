from typing import Optional


class DocumentNotFoundError(Exception):
    """Raised when no document with the requested id exists."""

    def __init__(self, label: str, document_id: Optional[str] = None):
        self.label = label
        self.document_id = document_id
        super().__init__(f"{label} not found")


class DatastoreUnavailableError(Exception):
    """Raised when the datastore never finished connecting."""

    def __init__(self, message: str = "Database not available"):
        super().__init__(message)
