from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Self-registration payload; profile fields beyond email are stored as sent."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, description="User email, unique across users")


class RoleResponse(BaseModel):
    role: str | None = None
