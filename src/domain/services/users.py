"""User registration, role lookup and role promotion."""

from __future__ import annotations

from typing import Any

import structlog
from bson import ObjectId
from pymongo.results import InsertOneResult, UpdateResult
from src.domain.models import UserRole
from src.infrastructure.db.store import CLASSES_COLLECTION, Store

logger = structlog.get_logger()


class UserExistsError(Exception):
    """Raised when registering an email that is already taken."""


def instructor_roster_pipeline() -> list[dict[str, Any]]:
    """Aggregation joining each instructor with the classes they teach."""
    return [
        {"$match": {"role": UserRole.INSTRUCTOR.value}},
        {
            "$lookup": {
                "from": CLASSES_COLLECTION,
                "localField": "email",
                "foreignField": "instructor.email",
                "as": "classes",
            }
        },
    ]


class UserService:
    """Service for user account operations."""

    def __init__(self, store: Store) -> None:
        self.store = store

    async def register_user(self, user: dict[str, Any]) -> InsertOneResult:
        """
        Store a self-registered user.

        The email is the natural key; a second registration with the same
        email is rejected and nothing is written.
        """
        email = user.get("email")
        existing = await self.store.users.find_one({"email": email})
        if existing:
            await logger.awarning("register_duplicate_email", email=email)
            raise UserExistsError("User already exists")

        result = await self.store.users.insert_one(user)
        await logger.ainfo("user_registered", email=email, user_id=str(result.inserted_id))
        return result

    async def get_role(self, email: str) -> str | None:
        user = await self.store.users.find_one({"email": email})
        return user.get("role") if user else None

    async def set_role(self, user_id: ObjectId, role: UserRole) -> UpdateResult:
        """Set a user's role; an unknown id is a zero-modified no-op."""
        result = await self.store.users.update_one(
            {"_id": user_id},
            {"$set": {"role": role.value}},
        )
        await logger.ainfo(
            "user_role_set",
            user_id=str(user_id),
            role=role.value,
            matched=result.matched_count,
            modified=result.modified_count,
        )
        return result

    async def list_instructors(self) -> list[dict[str, Any]]:
        cursor = self.store.users.aggregate(instructor_roster_pipeline())
        return await cursor.to_list(length=None)
