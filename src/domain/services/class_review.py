"""Admin review of instructor-submitted classes."""

from __future__ import annotations

from typing import Any

import structlog
from bson import ObjectId
from pymongo.errors import PyMongoError
from pymongo.results import UpdateResult
from src.domain.models import ClassStatus
from src.infrastructure.db.store import Store

logger = structlog.get_logger()


class ClassReviewError(Exception):
    """Raised when a review decision cannot be persisted."""


def decide_status(feedback: Any) -> dict[str, Any]:
    """Map admin feedback onto the class status fields.

    Truthy feedback denies the class and keeps the feedback; anything falsy
    approves it and stores that falsy value as the feedback.
    """
    status = ClassStatus.DENIED if feedback else ClassStatus.APPROVED
    return {"status": status.value, "feedback": feedback}


class ClassReviewService:
    def __init__(self, store: Store) -> None:
        self.store = store

    async def decide(self, class_id: ObjectId, feedback: Any) -> UpdateResult:
        fields = decide_status(feedback)
        try:
            result = await self.store.classes.update_one({"_id": class_id}, {"$set": fields})
        except PyMongoError as exc:
            await logger.aerror("class_status_update_failed", class_id=str(class_id), error=str(exc)[:200])
            raise ClassReviewError("Failed to update class status") from exc

        await logger.ainfo(
            "class_status_decided",
            class_id=str(class_id),
            status=fields["status"],
            matched=result.matched_count,
        )
        return result
