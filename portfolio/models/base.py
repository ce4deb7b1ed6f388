"""Shared base for the portfolio's Beanie documents.

Wire names are camelCase; Python attributes are snake_case with the wire
name as alias where the two differ.
"""

from typing import Any, Dict

from beanie import Document
from pydantic import ConfigDict


class PortfolioDocument(Document):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_public(self) -> Dict[str, Any]:
        """Serialize for API responses: wire names, `_id` as a hex string."""
        data = self.model_dump(mode="json", by_alias=True, exclude={"id", "revision_id"})
        return {"_id": str(self.id), **data}
