"""User registration, role lookup, instructor roster and role promotion."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends
from src.api.deps import get_claims, get_store
from src.api.schemas.common import InsertResultOut, UpdateResultOut
from src.api.schemas.users import RoleResponse, UserCreate
from src.core.errors import ConflictError
from src.domain.models import UserRole
from src.domain.services.users import UserExistsError, UserService
from src.infrastructure.db.serializers import serialize_document, to_object_id
from src.infrastructure.db.store import Store

router = APIRouter(tags=["Users"])
logger = structlog.get_logger()


@router.get("/users", dependencies=[Depends(get_claims)])
async def list_users(store: Store = Depends(get_store)) -> list[dict[str, Any]]:  # noqa: B008
    cursor = store.users.find({})
    return serialize_document(await cursor.to_list(length=None))


@router.post("/users", response_model=InsertResultOut)
async def register_user(
    payload: UserCreate,
    store: Store = Depends(get_store),  # noqa: B008
) -> InsertResultOut:
    """Register a user; the email must not be taken yet."""
    try:
        result = await UserService(store).register_user(payload.model_dump())
    except UserExistsError as exc:
        raise ConflictError(str(exc)) from exc
    return InsertResultOut.from_mongo(result)


@router.get("/user/role/{email}", response_model=RoleResponse)
async def get_user_role(email: str, store: Store = Depends(get_store)) -> RoleResponse:  # noqa: B008
    role = await UserService(store).get_role(email)
    return RoleResponse(role=role)


@router.get("/instructors")
async def list_instructors(store: Store = Depends(get_store)) -> list[dict[str, Any]]:  # noqa: B008
    """Return every instructor with the classes they teach nested under ``classes``."""
    instructors = await UserService(store).list_instructors()
    return serialize_document(instructors)


@router.patch("/users/admin/{user_id}", response_model=UpdateResultOut)
async def make_admin(
    user_id: str,
    store: Store = Depends(get_store),  # noqa: B008
    claims: dict[str, Any] = Depends(get_claims),  # noqa: B008
) -> UpdateResultOut:
    result = await UserService(store).set_role(to_object_id(user_id), UserRole.ADMIN)
    logger.info("role_change_requested", user_id=user_id, role="admin", requested_by=claims.get("email"))
    return UpdateResultOut.from_mongo(result)


@router.patch("/users/instructor/{user_id}", response_model=UpdateResultOut)
async def make_instructor(
    user_id: str,
    store: Store = Depends(get_store),  # noqa: B008
    claims: dict[str, Any] = Depends(get_claims),  # noqa: B008
) -> UpdateResultOut:
    result = await UserService(store).set_role(to_object_id(user_id), UserRole.INSTRUCTOR)
    logger.info(
        "role_change_requested", user_id=user_id, role="instructor", requested_by=claims.get("email")
    )
    return UpdateResultOut.from_mongo(result)
