from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class RecordOut(BaseModel):
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class AuditedOut(RecordOut):
    created_by: int | None = None
    updated_by: int | None = None


class SoftDeletedOut(AuditedOut):
    deleted_at: datetime | None = None


class BulkResult(BaseModel):
    affected: int
