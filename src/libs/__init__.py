"""Shared library helpers."""

from src.libs.stripe_client import (
    PaymentGatewayError,
    PaymentGatewayProtocol,
    PaymentIntent,
    StripeClient,
    to_minor_units,
)

__all__ = [
    "PaymentGatewayError",
    "PaymentGatewayProtocol",
    "PaymentIntent",
    "StripeClient",
    "to_minor_units",
]
