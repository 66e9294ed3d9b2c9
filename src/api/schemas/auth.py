"""Pydantic schemas for token issuance."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """Response schema containing a signed JWT."""

    token: str = Field(..., description="JWT access token, valid for one day")
