from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from src.api.deps import get_claims, get_store
from src.api.schemas.common import DeleteResultOut
from src.domain.services.enrollment import EnrollmentService
from src.infrastructure.db.serializers import serialize_document, to_object_id
from src.infrastructure.db.store import Store

router = APIRouter(prefix="/student/classes", tags=["Students"], dependencies=[Depends(get_claims)])


@router.get("/{email}")
async def list_selected_classes(
    email: str,
    store: Store = Depends(get_store),  # noqa: B008
) -> list[dict[str, Any]]:
    """Return the student's pending enrollment intents."""
    cursor = store.selected_classes.find({"studentEmail": email})
    return serialize_document(await cursor.to_list(length=None))


@router.delete("/{selected_class_id}", response_model=DeleteResultOut)
async def cancel_selected_class(
    selected_class_id: str,
    store: Store = Depends(get_store),  # noqa: B008
) -> DeleteResultOut:
    """Cancel an intent; an unknown id reports ``deletedCount: 0``."""
    result = await EnrollmentService(store).cancel_selection(to_object_id(selected_class_id))
    return DeleteResultOut.from_mongo(result)
