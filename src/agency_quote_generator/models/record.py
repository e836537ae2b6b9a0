from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Sequence

from pydantic import BaseModel, Field

from .quote import ProjectInput, QuoteResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuoteStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    declined = "declined"


class ProjectStatus(str, Enum):
    quoted = "quoted"
    confirmed = "confirmed"
    cancelled = "cancelled"


class QuoteRecord(BaseModel):
    id: str
    status: QuoteStatus = QuoteStatus.pending
    project_status: ProjectStatus = ProjectStatus.quoted
    project_name: str | None = None
    client_email: str | None = None
    input: ProjectInput
    quote: QuoteResult
    warnings: Sequence[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


__all__ = ["QuoteRecord", "QuoteStatus", "ProjectStatus"]
