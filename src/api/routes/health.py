from __future__ import annotations

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from src.api.deps import get_store
from src.core.config import get_settings
from src.infrastructure.db.store import Store

router = APIRouter(tags=["Observability"])
logger = structlog.get_logger()


async def check_mongo(store: Store) -> dict:
    """Check MongoDB connection."""
    try:
        await store.ping()
        return {"status": "ok"}
    except Exception as e:
        return {"status": "error", "message": str(e)[:100]}


@router.get("/", response_class=PlainTextResponse, summary="Root greeting")
async def root() -> str:
    return "Hello World!"


@router.get("/health", summary="Service health probe")
async def health_check(store: Store = Depends(get_store)) -> dict:  # noqa: B008
    """Return basic service and datastore status information."""
    settings = get_settings()

    mongo_status = await check_mongo(store)
    overall_status = "ok" if mongo_status.get("status") == "ok" else "degraded"

    payload = {
        "service": settings.app_name,
        "version": settings.version,
        "status": overall_status,
        "timestamp": datetime.now(UTC).isoformat(),
        "datastores": {
            "mongo": mongo_status,
        },
    }
    logger.info("health_probe", **payload)
    return payload
