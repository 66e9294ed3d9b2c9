from __future__ import annotations

from types import SimpleNamespace

import pytest
import stripe
from src.libs.stripe_client import PaymentGatewayError, StripeClient, to_minor_units


@pytest.mark.parametrize(
    ("price", "expected"),
    [(25, 2500), (19.99, 1999), (0.5, 50), (120.0, 12000)],
)
def test_to_minor_units(price: float, expected: int) -> None:
    assert to_minor_units(price) == expected


@pytest.mark.asyncio
async def test_create_payment_intent_requests_usd_card_intent(monkeypatch) -> None:
    calls: list[dict] = []

    async def fake_create_async(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(
            id="pi_1", client_secret="pi_1_secret_abc", amount=kwargs["amount"], currency="usd"
        )

    monkeypatch.setattr(stripe.PaymentIntent, "create_async", fake_create_async)
    client = StripeClient(api_key="sk_test_123", currency="usd")

    intent = await client.create_payment_intent(2500)

    assert intent.client_secret == "pi_1_secret_abc"
    assert calls == [
        {
            "api_key": "sk_test_123",
            "amount": 2500,
            "currency": "usd",
            "payment_method_types": ["card"],
        }
    ]


@pytest.mark.asyncio
async def test_provider_error_is_wrapped(monkeypatch) -> None:
    async def failing_create_async(**kwargs):
        raise stripe.StripeError("card network down")

    monkeypatch.setattr(stripe.PaymentIntent, "create_async", failing_create_async)
    client = StripeClient(api_key="sk_test_123")

    with pytest.raises(PaymentGatewayError):
        await client.create_payment_intent(1000)


@pytest.mark.asyncio
async def test_missing_api_key_fails_without_calling_provider(monkeypatch) -> None:
    async def unexpected_call(**kwargs):  # pragma: no cover - must not run
        raise AssertionError("Stripe must not be called without a key")

    monkeypatch.setattr(stripe.PaymentIntent, "create_async", unexpected_call)
    client = StripeClient(api_key="")
    client.api_key = ""

    with pytest.raises(PaymentGatewayError):
        await client.create_payment_intent(1000)
