from __future__ import annotations

from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.server_api import ServerApi
from src.core.config import Settings, get_settings

logger = structlog.get_logger()

CLASSES_COLLECTION = "classes"
USERS_COLLECTION = "users"
SELECTED_CLASSES_COLLECTION = "selectedClasses"
PAYMENTS_COLLECTION = "payments"


class Store:
    """Accessor for the four collections backing the API.

    Holds no business rules; handlers and services issue their queries against
    the collection attributes directly.
    """

    def __init__(self, database: Any, client: Any | None = None) -> None:
        self.database = database
        self._client = client
        self.classes = database[CLASSES_COLLECTION]
        self.users = database[USERS_COLLECTION]
        self.selected_classes = database[SELECTED_CLASSES_COLLECTION]
        self.payments = database[PAYMENTS_COLLECTION]

    @classmethod
    def connect(cls, settings: Settings | None = None) -> Store:
        """Create a Motor client for the configured deployment.

        The driver connects lazily, so this performs no I/O.
        """
        settings = settings or get_settings()
        client: AsyncIOMotorClient = AsyncIOMotorClient(
            settings.db_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=settings.db_server_selection_timeout_ms,
        )
        return cls(client[settings.db_name], client=client)

    async def ping(self) -> dict[str, Any]:
        """Round-trip a ping command to the deployment."""
        return await self.database.command("ping")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("database_client_closed")
