"""Payment intent creation, payment completion and the payment ledger."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends
from src.api.deps import get_claims, get_payment_gateway, get_store
from src.api.schemas.common import DeleteResultOut, InsertResultOut
from src.api.schemas.payments import (
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentResponse,
)
from src.core.errors import UpstreamError
from src.domain.services.enrollment import EnrollmentService
from src.infrastructure.db.serializers import serialize_document
from src.infrastructure.db.store import Store
from src.libs.stripe_client import PaymentGatewayError, PaymentGatewayProtocol, to_minor_units

router = APIRouter(tags=["Payments"])
logger = structlog.get_logger()


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(get_claims)],
)
async def create_payment_intent(
    payload: PaymentIntentRequest | None = None,
    gateway: PaymentGatewayProtocol = Depends(get_payment_gateway),  # noqa: B008
) -> PaymentIntentResponse:
    """Create a card payment intent and hand its client secret to the browser.

    A missing body, or a missing, zero or negative price, makes no provider
    call and returns an empty object.
    """
    price = payload.price if payload is not None else None
    if not price or price <= 0:
        logger.info("payment_intent_skipped", price=price)
        return PaymentIntentResponse()

    try:
        intent = await gateway.create_payment_intent(to_minor_units(price))
    except PaymentGatewayError as exc:
        raise UpstreamError("Payment provider request failed") from exc

    return PaymentIntentResponse(clientSecret=intent.client_secret)


@router.post("/payment", response_model=PaymentResponse)
async def complete_payment(
    payload: PaymentCreate,
    store: Store = Depends(get_store),  # noqa: B008
) -> PaymentResponse:
    """Record the payment, consume its intent and enroll the payer."""
    outcome = await EnrollmentService(store).complete_payment(payload.model_dump())
    return PaymentResponse(
        result=InsertResultOut.from_mongo(outcome.result),
        deleteResult=DeleteResultOut.from_mongo(outcome.delete_result),
    )


@router.get("/payments")
async def list_payments(
    email: str | None = None,
    store: Store = Depends(get_store),  # noqa: B008
) -> list[dict[str, Any]]:
    cursor = store.payments.find({"email": email})
    return serialize_document(await cursor.to_list(length=None))
