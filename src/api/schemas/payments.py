"""Pydantic schemas for payment endpoints."""

from __future__ import annotations

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import DeleteResultOut, InsertResultOut


class PaymentIntentRequest(BaseModel):
    price: float | None = Field(None, description="Price in major currency units")


class PaymentIntentResponse(BaseModel):
    clientSecret: str | None = None


class PaymentCreate(BaseModel):
    """A completed client-side payment; extra fields are kept in the ledger."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1)
    amount: int | float
    selectedClassId: str
    classId: str

    @field_validator("selectedClassId", "classId")
    @classmethod
    def _ensure_object_id(cls, value: str) -> str:
        if not ObjectId.is_valid(value):
            raise ValueError("must be a 24-character hex id")
        return value


class PaymentResponse(BaseModel):
    result: InsertResultOut
    deleteResult: DeleteResultOut
