"""Acknowledgement shapes for store writes, rendered the way the driver reports them."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class InsertResultOut(BaseModel):
    acknowledged: bool = True
    insertedId: str | None = Field(None, description="Hex id of the inserted document")

    @classmethod
    def from_mongo(cls, result: InsertOneResult) -> InsertResultOut:
        inserted_id = result.inserted_id
        return cls(
            acknowledged=result.acknowledged,
            insertedId=str(inserted_id) if inserted_id is not None else None,
        )


class DeleteResultOut(BaseModel):
    acknowledged: bool = True
    deletedCount: int = 0

    @classmethod
    def from_mongo(cls, result: DeleteResult) -> DeleteResultOut:
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)


class UpdateResultOut(BaseModel):
    acknowledged: bool = True
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedCount: int = 0
    upsertedId: str | None = None

    @classmethod
    def from_mongo(cls, result: UpdateResult) -> UpdateResultOut:
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=1 if upserted_id is not None else 0,
            upsertedId=str(upserted_id) if upserted_id is not None else None,
        )
