from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from .dictionaries import BUDGET_RANGES, INTAKE_FEATURES, TIMELINE_RANGES
from .errors import QuoteNotFoundError, QuoteStateError, QuoteValidationError
from .generator import QuoteGenerator, format_amount
from .intake import validate_project_input
from .logging_config import set_trace_id
from .models.intake import ClientIntake
from .models.quote import ProjectInput, QuoteResult
from .models.record import QuoteRecord
from .quote_store import QuoteStore
from .summary import build_quote_summary

logger = logging.getLogger(__name__)


class QuoteResponse(QuoteResult):
    formatted_amount: str

    @staticmethod
    def from_result(result: QuoteResult) -> "QuoteResponse":
        return QuoteResponse(
            amount_cents=result.amount_cents,
            timeline_weeks=result.timeline_weeks,
            breakdown=list(result.breakdown),
            formatted_amount=format_amount(result.amount_cents),
        )


def create_app(
    *,
    store: QuoteStore | None = None,
    generator: QuoteGenerator | None = None,
    strict_features: bool = False,
) -> FastAPI:
    app = FastAPI(title="Agency Quote Generator API", version="0.1.0")
    quote_store = store or QuoteStore()
    quote_generator = generator or QuoteGenerator()

    @app.middleware("http")
    async def trace_requests(request: Request, call_next):
        header = request.headers.get("X-Cloud-Trace-Context", "")
        set_trace_id(header.split("/")[0] or uuid.uuid4().hex)
        try:
            return await call_next(request)
        finally:
            set_trace_id(None)

    @app.post("/v1/quotes:calculate", response_model=QuoteResponse)
    async def calculate(project: ProjectInput) -> QuoteResponse:
        return QuoteResponse.from_result(quote_generator.generate(project))

    @app.post("/v1/intakes", response_model=QuoteRecord, response_model_by_alias=False, status_code=201)
    async def submit_intake(intake: ClientIntake) -> QuoteRecord:
        try:
            validated = validate_project_input(intake, strict=strict_features, generator=quote_generator)
        except QuoteValidationError as exc:
            raise HTTPException(status_code=422, detail=exc.messages) from exc
        quote = quote_generator.generate(validated.project)
        record = quote_store.create_quote(
            project_name=intake.project_name,
            client_email=str(intake.email),
            input=validated.project,
            quote=quote,
            warnings=validated.warnings,
        )
        logger.info(
            "Quote created from intake",
            extra={"quote_id": record.id, "amount_cents": quote.amount_cents},
        )
        return record

    @app.get("/v1/quotes", response_model=list[QuoteRecord], response_model_by_alias=False)
    async def list_quotes() -> list[QuoteRecord]:
        return quote_store.list_quotes()

    @app.get("/v1/quotes/{quote_id}", response_model=QuoteRecord, response_model_by_alias=False)
    async def get_quote(quote_id: str) -> QuoteRecord:
        return _get_or_404(quote_store, quote_id)

    @app.get("/v1/quotes/{quote_id}/summary", response_class=PlainTextResponse)
    async def get_summary(quote_id: str) -> str:
        record = _get_or_404(quote_store, quote_id)
        return build_quote_summary(record.project_name, record.input, record.quote, warnings=record.warnings)

    @app.post("/v1/quotes/{quote_id}:accept", response_model=QuoteRecord, response_model_by_alias=False)
    async def accept_quote(quote_id: str) -> QuoteRecord:
        return _decide(quote_store.accept_quote, quote_id)

    @app.post("/v1/quotes/{quote_id}:decline", response_model=QuoteRecord, response_model_by_alias=False)
    async def decline_quote(quote_id: str) -> QuoteRecord:
        return _decide(quote_store.decline_quote, quote_id)

    @app.get("/v1/catalog")
    async def catalog() -> JSONResponse:
        return JSONResponse(
            {
                "project_types": {
                    project_type.value: {
                        "min_amount_cents": rate.min_amount_cents,
                        "max_amount_cents": rate.max_amount_cents,
                        "base_weeks": rate.base_weeks,
                        "rate_per_day": rate.rate_per_day,
                    }
                    for project_type, rate in quote_generator.base_rates.items()
                },
                "feature_costs": dict(quote_generator.feature_costs),
                "intake_features": list(INTAKE_FEATURES),
                "timeline_ranges": dict(TIMELINE_RANGES),
                "budget_ranges": dict(BUDGET_RANGES),
            }
        )

    @app.get("/health")
    async def healthcheck() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return app


def _get_or_404(store: QuoteStore, quote_id: str) -> QuoteRecord:
    record = store.get_quote(quote_id)
    if not record:
        raise HTTPException(status_code=404, detail="Quote not found")
    return record


def _decide(action, quote_id: str) -> QuoteRecord:
    try:
        record = action(quote_id)
    except QuoteNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Quote not found") from exc
    except QuoteStateError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    logger.info("Quote decision recorded", extra={"quote_id": quote_id, "status": record.status.value})
    return record


__all__ = ["create_app", "QuoteResponse"]
