from __future__ import annotations

from typing import Any

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from src.core.auth import TokenError, decode_access_token
from src.core.errors import UnauthorizedError
from src.infrastructure.db.store import Store
from src.libs.stripe_client import PaymentGatewayProtocol

logger = structlog.get_logger()

bearer_scheme = HTTPBearer(auto_error=False)


async def get_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),  # noqa: B008
) -> dict[str, Any]:
    """Verify the bearer token and expose its claims on the request."""
    if credentials is None:
        raise UnauthorizedError()

    try:
        claims = decode_access_token(credentials.credentials)
    except TokenError as exc:
        logger.info("bearer_token_rejected", path=request.url.path)
        raise UnauthorizedError() from exc

    request.state.claims = claims
    return claims


def get_store(request: Request) -> Store:
    """Return the store opened by the application lifespan."""
    return request.app.state.store


def get_payment_gateway(request: Request) -> PaymentGatewayProtocol:
    return request.app.state.payment_gateway
