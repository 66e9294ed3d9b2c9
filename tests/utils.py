from __future__ import annotations

from typing import Any

from bson import ObjectId
from src.core.auth import create_access_token
from src.infrastructure.db.store import Store
from src.libs.stripe_client import PaymentGatewayError, PaymentIntent


def auth_headers(email: str = "student@example.com") -> dict[str, str]:
    token = create_access_token({"email": email})
    return {"Authorization": f"Bearer {token}"}


def build_class(**overrides: Any) -> dict[str, Any]:
    """Construct a class document with sensible defaults."""
    data: dict[str, Any] = {
        "name": "Intro to Guitar",
        "instructor": {"email": "mentor@example.com", "name": "Mina Mentor"},
        "status": "approved",
        "totalStudents": 10,
        "enrolledStudents": 3,
        "availableSeats": 7,
        "students": [],
        "price": 50,
    }
    data.update(overrides)
    return data


async def seed_class(store: Store, **overrides: Any) -> ObjectId:
    result = await store.classes.insert_one(build_class(**overrides))
    return result.inserted_id


async def seed_selected_class(
    store: Store, class_id: ObjectId, email: str = "student@example.com", price: float = 50
) -> ObjectId:
    result = await store.selected_classes.insert_one(
        {"classId": str(class_id), "studentEmail": email, "price": price, "name": "Intro to Guitar"}
    )
    return result.inserted_id


async def find_all(collection: Any, query: dict[str, Any] | None = None) -> list[dict[str, Any]]:
    return await collection.find(query or {}).to_list(length=None)


class FakePaymentGateway:
    """Records requested amounts instead of calling Stripe."""

    def __init__(self) -> None:
        self.amounts: list[int] = []
        self.fail = False

    async def create_payment_intent(self, amount: int) -> PaymentIntent:
        self.amounts.append(amount)
        if self.fail:
            raise PaymentGatewayError("provider unavailable")
        return PaymentIntent(
            id=f"pi_test_{len(self.amounts)}",
            client_secret=f"pi_test_{len(self.amounts)}_secret",
            amount=amount,
            currency="usd",
        )
