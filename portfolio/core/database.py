from __future__ import annotations

import logging
from typing import Any, Optional

import motor.motor_asyncio
from beanie import init_beanie
from fastapi import Request

from ..models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)


class Datastore:
    """Handle on the MongoDB database backing the API.

    Built once per process and handed to the app; `connect()` and `close()`
    are driven by the application lifespan. A failed `connect()` is logged and
    left at that: the app keeps serving and every datastore call fails.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        client: Optional[motor.motor_asyncio.AsyncIOMotorClient] = None,
    ):
        self.uri = uri
        self.db_name = db_name
        self._client = client
        self.connected = False

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = motor.motor_asyncio.AsyncIOMotorClient(self.uri)
        return self._client

    @property
    def database(self) -> Any:
        return self.client[self.db_name]

    async def connect(self) -> bool:
        """Initialize Beanie over the three portfolio collections."""
        if self.connected:
            return True
        try:
            await init_beanie(database=self.database, document_models=DOCUMENT_MODELS)
        except Exception as e:
            logger.error(f"MongoDB connection failed: {e}")
            return False
        self.connected = True
        logger.info(f"MongoDB connected (database '{self.db_name}')")
        return True

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self.connected = False

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
        except Exception:
            logger.error("Database health check failed", exc_info=True)
            return False
        return True


def get_datastore(request: Request) -> Datastore:
    """FastAPI dependency: the Datastore the app was created with."""
    return request.app.state.datastore
