"""Class catalogue, submission and review routes."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends
from pymongo.errors import PyMongoError
from src.api.deps import get_claims, get_store
from src.api.schemas.classes import ClassStatusUpdate
from src.api.schemas.common import InsertResultOut, UpdateResultOut
from src.core.errors import UpstreamError
from src.domain.models import TOP_CLASSES_LIMIT, ClassStatus
from src.domain.services.class_review import ClassReviewError, ClassReviewService
from src.domain.services.enrollment import EnrollmentService
from src.infrastructure.db.serializers import serialize_document, to_object_id
from src.infrastructure.db.store import Store

router = APIRouter(tags=["Classes"])
logger = structlog.get_logger()


@router.get("/topClasses")
async def top_classes(store: Store = Depends(get_store)) -> list[dict[str, Any]]:  # noqa: B008
    """Return the most attended classes; ties keep storage order."""
    cursor = store.classes.find({}, sort=[("totalStudents", -1)], limit=TOP_CLASSES_LIMIT)
    return serialize_document(await cursor.to_list(length=None))


@router.get("/approvedClasses")
async def approved_classes(store: Store = Depends(get_store)) -> list[dict[str, Any]]:  # noqa: B008
    cursor = store.classes.find({"status": ClassStatus.APPROVED.value})
    return serialize_document(await cursor.to_list(length=None))


@router.post("/selectClass", response_model=InsertResultOut)
async def select_class(
    selection: dict[str, Any] = Body(...),  # noqa: B008
    store: Store = Depends(get_store),  # noqa: B008
    claims: dict[str, Any] = Depends(get_claims),  # noqa: B008
) -> InsertResultOut:
    """Record a student's pending enrollment intent."""
    result = await EnrollmentService(store).select_class(selection)
    logger.info("select_class_requested", requested_by=claims.get("email"))
    return InsertResultOut.from_mongo(result)


@router.get("/class/{selected_class_id}")
async def get_selected_class(
    selected_class_id: str,
    store: Store = Depends(get_store),  # noqa: B008
) -> dict[str, Any] | None:
    """Fetch one selected-class intent, or ``null`` when it does not exist."""
    document = await store.selected_classes.find_one({"_id": to_object_id(selected_class_id)})
    return serialize_document(document)


@router.get("/enrolledClasses")
async def enrolled_classes(
    email: str | None = None,
    store: Store = Depends(get_store),  # noqa: B008
) -> list[dict[str, Any]]:
    try:
        cursor = store.classes.find({"students": {"$in": [email]}})
        classes = await cursor.to_list(length=None)
    except PyMongoError as exc:
        logger.error("enrolled_classes_query_failed", email=email, error=str(exc)[:200])
        raise UpstreamError("Failed to fetch enrolled classes") from exc
    return serialize_document(classes)


@router.post("/addClass", response_model=InsertResultOut, dependencies=[Depends(get_claims)])
async def add_class(
    class_data: dict[str, Any] = Body(...),  # noqa: B008
    store: Store = Depends(get_store),  # noqa: B008
) -> InsertResultOut:
    """Store an instructor-submitted class as sent."""
    result = await store.classes.insert_one(class_data)

    instructor = class_data.get("instructor")
    logger.info(
        "class_submitted",
        class_id=str(result.inserted_id),
        instructor_email=instructor.get("email") if isinstance(instructor, dict) else None,
    )
    return InsertResultOut.from_mongo(result)


@router.get("/instructor/classes/{email}", dependencies=[Depends(get_claims)])
async def instructor_classes(
    email: str,
    store: Store = Depends(get_store),  # noqa: B008
) -> list[dict[str, Any]]:
    cursor = store.classes.find({"instructor.email": email})
    return serialize_document(await cursor.to_list(length=None))


@router.get("/classes", dependencies=[Depends(get_claims)])
async def list_classes(store: Store = Depends(get_store)) -> list[dict[str, Any]]:  # noqa: B008
    cursor = store.classes.find({})
    return serialize_document(await cursor.to_list(length=None))


@router.patch("/classes/status/{class_id}", response_model=UpdateResultOut)
async def update_class_status(
    class_id: str,
    payload: ClassStatusUpdate | None = None,
    store: Store = Depends(get_store),  # noqa: B008
    claims: dict[str, Any] = Depends(get_claims),  # noqa: B008
) -> UpdateResultOut:
    """Approve the class, or deny it when feedback is given."""
    feedback = payload.feedback if payload is not None else None
    try:
        result = await ClassReviewService(store).decide(to_object_id(class_id), feedback)
    except ClassReviewError as exc:
        raise UpstreamError(str(exc)) from exc

    logger.info("class_status_requested", class_id=class_id, reviewed_by=claims.get("email"))
    return UpdateResultOut.from_mongo(result)
