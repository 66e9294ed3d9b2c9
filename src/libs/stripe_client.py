"""
Stripe client for card payment intents.

The browser completes the payment with the returned client secret; the
server only creates the intent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import stripe
import structlog
from src.core.config import get_settings

logger = structlog.get_logger(__name__)


class PaymentGatewayError(Exception):
    """Raised when the payment provider rejects or fails a request."""


@dataclass(slots=True)
class PaymentIntent:
    """Minimal view of a created payment intent."""

    id: str
    client_secret: str
    amount: int
    currency: str


class PaymentGatewayProtocol(Protocol):
    """Protocol for payment gateways (allows mocking)."""

    async def create_payment_intent(self, amount: int) -> PaymentIntent:
        """Create a card payment intent for ``amount`` minor units."""
        ...


def to_minor_units(price: float) -> int:
    """Convert a major-unit price (dollars) to minor units (cents)."""
    return int(round(price * 100))


class StripeClient:
    """Async Stripe API client restricted to card payment intents."""

    def __init__(self, api_key: str | None = None, currency: str | None = None) -> None:
        settings = get_settings()
        self.api_key = api_key or settings.stripe_secret_key
        self.currency = currency or settings.payment_currency

        if not self.api_key:
            logger.warning("stripe_api_key_missing", msg="STRIPE_SECRET_KEY not configured")

    async def create_payment_intent(self, amount: int) -> PaymentIntent:
        if not self.api_key:
            raise PaymentGatewayError("STRIPE_SECRET_KEY not configured")

        try:
            intent = await stripe.PaymentIntent.create_async(
                api_key=self.api_key,
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
            )
        except stripe.StripeError as exc:
            logger.error(
                "stripe_payment_intent_failed",
                amount=amount,
                error=str(exc)[:200],
                http_status=getattr(exc, "http_status", None),
            )
            raise PaymentGatewayError("Stripe payment intent creation failed") from exc

        logger.info("stripe_payment_intent_created", intent_id=intent.id, amount=amount)
        return PaymentIntent(
            id=intent.id,
            client_secret=intent.client_secret or "",
            amount=intent.amount,
            currency=intent.currency,
        )
