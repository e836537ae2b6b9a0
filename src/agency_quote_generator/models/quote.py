from __future__ import annotations

from enum import Enum
from typing import Sequence

from pydantic import BaseModel, Field


class ProjectType(str, Enum):
    portfolio = "portfolio"
    ecommerce = "ecommerce"
    saas = "saas"
    custom = "custom"


class Phase(str, Enum):
    design = "design"
    development = "development"
    qa = "qa"
    deployment = "deployment"


PHASE_ORDER: Sequence[Phase] = (Phase.design, Phase.development, Phase.qa, Phase.deployment)


class ProjectInput(BaseModel):
    type: ProjectType
    description: str | None = None
    features: Sequence[str]
    # Accepted for intake compatibility; not read by the pricing formula.
    timeline_range: str | None = Field(default=None, alias="timelineRange")
    budget_range: str | None = Field(default=None, alias="budgetRange")

    class Config:
        frozen = True
        populate_by_name = True


class QuoteBreakdown(BaseModel):
    phase: Phase
    component: str
    description: str | None = None
    estimated_days: int
    rate_per_day: int
    amount_cents: int


class QuoteResult(BaseModel):
    amount_cents: int
    timeline_weeks: int
    breakdown: Sequence[QuoteBreakdown]

    @property
    def breakdown_total_cents(self) -> int:
        return sum(item.amount_cents for item in self.breakdown)

    @property
    def total_days(self) -> int:
        return self.timeline_weeks * 5

    def phase_totals(self) -> dict[Phase, int]:
        totals = {phase: 0 for phase in PHASE_ORDER}
        for item in self.breakdown:
            totals[item.phase] += item.amount_cents
        return totals


__all__ = [
    "PHASE_ORDER",
    "Phase",
    "ProjectInput",
    "ProjectType",
    "QuoteBreakdown",
    "QuoteResult",
]
