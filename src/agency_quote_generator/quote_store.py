from __future__ import annotations

import re
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, Sequence

from .errors import QuoteNotFoundError, QuoteStateError
from .models.quote import ProjectInput, QuoteResult
from .models.record import ProjectStatus, QuoteRecord, QuoteStatus


class QuoteStore:
    def __init__(self) -> None:
        self._quotes: Dict[str, QuoteRecord] = {}
        self._lock = threading.Lock()

    def create_quote(
        self,
        *,
        project_name: str | None,
        client_email: str | None,
        input: ProjectInput,
        quote: QuoteResult,
        warnings: Sequence[str] = (),
    ) -> QuoteRecord:
        with self._lock:
            quote_id = self._generate_id(project_name)
            record = QuoteRecord(
                id=quote_id,
                project_name=project_name,
                client_email=client_email,
                input=input,
                quote=quote,
                warnings=list(warnings),
            )
            self._quotes[quote_id] = record
            return record

    def get_quote(self, quote_id: str) -> QuoteRecord | None:
        with self._lock:
            return self._quotes.get(quote_id)

    def list_quotes(self) -> list[QuoteRecord]:
        with self._lock:
            return sorted(self._quotes.values(), key=lambda record: record.created_at, reverse=True)

    def accept_quote(self, quote_id: str) -> QuoteRecord:
        return self._decide(quote_id, QuoteStatus.accepted, ProjectStatus.confirmed, action="accept")

    def decline_quote(self, quote_id: str) -> QuoteRecord:
        return self._decide(quote_id, QuoteStatus.declined, ProjectStatus.cancelled, action="decline")

    def _decide(
        self,
        quote_id: str,
        status: QuoteStatus,
        project_status: ProjectStatus,
        *,
        action: str,
    ) -> QuoteRecord:
        with self._lock:
            record = self._quotes.get(quote_id)
            if record is None:
                raise QuoteNotFoundError(quote_id)
            if record.status is not QuoteStatus.pending:
                raise QuoteStateError(quote_id, record.status.value, action)
            record.status = status
            record.project_status = project_status
            record.updated_at = datetime.now(timezone.utc)
            return record

    def _generate_id(self, project_name: str | None) -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
        suffix = uuid.uuid4().hex[:6]
        if project_name:
            slug = re.sub(r"[^a-z0-9]+", "-", project_name.lower()).strip("-")
            if slug:
                return f"quote_{slug}_{suffix}"
        return f"quote_{ts}_{suffix}"


__all__ = ["QuoteStore"]
