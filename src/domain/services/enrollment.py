"""Enrollment intent lifecycle: select, cancel and pay.

Completing a payment touches three documents in sequence without a
transaction:

1. the payment is appended to the ledger, unconditionally;
2. the matching selected-class intent is deleted;
3. only when step 2 removed exactly one intent, the class roster is updated.

If the intent was already consumed the payment is still recorded and the class
is left untouched. Nothing is compensated; the single-document atomicity of
``delete_one`` is what keeps two concurrent payments for one intent from both
enrolling the student.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import structlog
from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult
from src.infrastructure.db.serializers import to_object_id
from src.infrastructure.db.store import Store

logger = structlog.get_logger()


@dataclass(slots=True)
class PaymentOutcome:
    """Results of the ledger insert and intent delete, plus whether the roster changed."""

    result: InsertOneResult
    delete_result: DeleteResult
    enrolled: bool


def enrollment_update(email: str) -> dict[str, Any]:
    """Roster mutation applied to a class when a student's payment completes."""
    return {
        "$inc": {"enrolledStudents": 1, "availableSeats": -1},
        "$push": {"students": email},
    }


class EnrollmentService:
    """Service for the selected-class and payment flows."""

    def __init__(self, store: Store) -> None:
        self.store = store

    async def select_class(self, selection: dict[str, Any]) -> InsertOneResult:
        # No duplicate check: a student may hold several intents for one class
        result = await self.store.selected_classes.insert_one(selection)
        await logger.ainfo(
            "class_selected",
            selected_class_id=str(result.inserted_id),
            student_email=selection.get("studentEmail"),
        )
        return result

    async def cancel_selection(self, selected_class_id: ObjectId) -> DeleteResult:
        result = await self.store.selected_classes.delete_one({"_id": selected_class_id})
        await logger.ainfo(
            "class_selection_cancelled",
            selected_class_id=str(selected_class_id),
            deleted=result.deleted_count,
        )
        return result

    async def complete_payment(self, payment: dict[str, Any]) -> PaymentOutcome:
        """Record a payment and, if its intent is still pending, enroll the payer."""
        selected_class_id = to_object_id(payment["selectedClassId"])
        class_id = to_object_id(payment["classId"])
        payment.setdefault("createdAt", datetime.now(UTC))

        result = await self.store.payments.insert_one(payment)
        await logger.ainfo(
            "payment_recorded",
            payment_id=str(result.inserted_id),
            email=payment.get("email"),
            amount=payment.get("amount"),
        )

        delete_result = await self.store.selected_classes.delete_one({"_id": selected_class_id})
        if delete_result.deleted_count != 1:
            await logger.awarning(
                "enrollment_skipped",
                reason="selected_class_missing",
                selected_class_id=str(selected_class_id),
                payment_id=str(result.inserted_id),
            )
            return PaymentOutcome(result=result, delete_result=delete_result, enrolled=False)

        await self.store.classes.update_one({"_id": class_id}, enrollment_update(payment["email"]))
        await logger.ainfo(
            "enrollment_completed",
            class_id=str(class_id),
            email=payment.get("email"),
        )
        return PaymentOutcome(result=result, delete_result=delete_result, enrolled=True)
