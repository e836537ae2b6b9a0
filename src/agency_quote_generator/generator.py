from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Iterable, Mapping, Sequence

from .dictionaries import (
    COMPLEX_SIGNALS,
    DEFAULT_BASE_RATES,
    DEFAULT_DEVELOPMENT_COMPONENTS,
    DEFAULT_FEATURE_COSTS,
    DEFAULT_PHASE_DISTRIBUTION,
    DEPLOYMENT_COMPONENT,
    DESIGN_COMPONENTS,
    QA_COMPONENT,
    SIMPLE_SIGNALS,
    BaseRate,
    ComponentSplit,
    PhaseDistribution,
)
from .models.quote import Phase, ProjectInput, ProjectType, QuoteBreakdown, QuoteResult

logger = logging.getLogger(__name__)

MIN_COMPLEXITY = 1.0
MAX_COMPLEXITY = 2.0
WORK_DAYS_PER_WEEK = 5
WEEKS_PER_FEATURE = 0.3

# Nine lines at most, each rounded on its own, plus the design and
# development phase totals they are split from.
MAX_ROUNDING_DRIFT_CENTS = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


class QuoteGenerator:
    def __init__(
        self,
        *,
        base_rates: Mapping[ProjectType, BaseRate] = DEFAULT_BASE_RATES,
        feature_costs: Mapping[str, int] | None = None,
        phase_distribution: Mapping[ProjectType, PhaseDistribution] = DEFAULT_PHASE_DISTRIBUTION,
        design_components: Sequence[ComponentSplit] = DESIGN_COMPONENTS,
        development_components: Mapping[ProjectType, Sequence[ComponentSplit]] = DEFAULT_DEVELOPMENT_COMPONENTS,
        complex_signals: Sequence[str] = COMPLEX_SIGNALS,
        simple_signals: Sequence[str] = SIMPLE_SIGNALS,
    ) -> None:
        self._base_rates = base_rates
        self._feature_costs = dict(DEFAULT_FEATURE_COSTS if feature_costs is None else feature_costs)
        self._phase_distribution = phase_distribution
        self._design_components = tuple(design_components)
        self._development_components = development_components
        self._complex_signals = tuple(complex_signals)
        self._simple_signals = tuple(simple_signals)

    @property
    def feature_costs(self) -> Mapping[str, int]:
        return dict(self._feature_costs)

    @property
    def base_rates(self) -> Mapping[ProjectType, BaseRate]:
        return dict(self._base_rates)

    def generate(self, project: ProjectInput) -> QuoteResult:
        base_rate = self._base_rates[project.type]
        feature_cost = self.calculate_feature_cost(project.features)
        complexity = self.assess_complexity(project)

        base_amount = (
            base_rate.min_amount_cents
            + (base_rate.max_amount_cents - base_rate.min_amount_cents) * (complexity - 1) / 2
        )
        total_amount = round_half_up(base_amount + feature_cost)

        timeline_weeks = base_rate.base_weeks + round_half_up(len(project.features) * WEEKS_PER_FEATURE)

        breakdown = self.generate_breakdown(
            project.type, total_amount, timeline_weeks, base_rate.rate_per_day
        )
        logger.debug(
            "Generated quote",
            extra={
                "project_type": ProjectType(project.type).value,
                "complexity": complexity,
                "feature_cost_cents": feature_cost,
                "amount_cents": total_amount,
                "timeline_weeks": timeline_weeks,
            },
        )
        return QuoteResult(amount_cents=total_amount, timeline_weeks=timeline_weeks, breakdown=breakdown)

    def calculate_feature_cost(self, features: Iterable[str]) -> int:
        return sum(self._feature_costs.get(feature, 0) for feature in features)

    def unknown_features(self, features: Iterable[str]) -> list[str]:
        return [feature for feature in features if feature not in self._feature_costs]

    def assess_complexity(self, project: ProjectInput) -> float:
        feature_count = len(project.features)
        description = (project.description or "").lower()

        score = 1.0
        if feature_count > 8:
            score += 0.5
        elif feature_count > 4:
            score += 0.25

        # Substring match, so "api" also fires on e.g. "rapid".
        if any(signal in description for signal in self._complex_signals):
            score += 0.5
        if any(signal in description for signal in self._simple_signals):
            score -= 0.25

        return max(MIN_COMPLEXITY, min(MAX_COMPLEXITY, score))

    def generate_breakdown(
        self,
        project_type: ProjectType,
        total_amount: int,
        timeline_weeks: int,
        rate_per_day: int,
    ) -> list[QuoteBreakdown]:
        distribution = self._phase_distribution[project_type]
        total_days = timeline_weeks * WORK_DAYS_PER_WEEK

        breakdown: list[QuoteBreakdown] = []
        phase_components = (
            (Phase.design, self._design_components),
            (Phase.development, self._development_components[project_type]),
            (Phase.qa, (QA_COMPONENT,)),
            (Phase.deployment, (DEPLOYMENT_COMPONENT,)),
        )
        for phase, components in phase_components:
            percent = distribution.percent(phase)
            phase_days = round_half_up(total_days * (percent / 100))
            phase_amount = round_half_up(total_amount * (percent / 100))
            breakdown.extend(
                self._split_phase(phase, components, phase_days, phase_amount, rate_per_day)
            )
        return breakdown

    def _split_phase(
        self,
        phase: Phase,
        components: Sequence[ComponentSplit],
        days: int,
        amount: int,
        rate_per_day: int,
    ) -> list[QuoteBreakdown]:
        if len(components) == 1 and components[0].percent == 100:
            comp = components[0]
            return [
                QuoteBreakdown(
                    phase=phase,
                    component=comp.component,
                    description=comp.description,
                    estimated_days=days,
                    rate_per_day=rate_per_day,
                    amount_cents=amount,
                )
            ]
        return [
            QuoteBreakdown(
                phase=phase,
                component=comp.component,
                description=comp.description,
                estimated_days=round_half_up(days * (comp.percent / 100)),
                rate_per_day=rate_per_day,
                amount_cents=round_half_up(amount * (comp.percent / 100)),
            )
            for comp in components
        ]


_default_generator = QuoteGenerator()


def calculate_quote(project: ProjectInput) -> QuoteResult:
    return _default_generator.generate(project)


def assess_complexity(project: ProjectInput) -> float:
    return _default_generator.assess_complexity(project)


def calculate_feature_cost(features: Iterable[str]) -> int:
    return _default_generator.calculate_feature_cost(features)


def generate_quote_breakdown(
    project_type: ProjectType, total_amount: int, timeline_weeks: int, rate_per_day: int
) -> list[QuoteBreakdown]:
    return _default_generator.generate_breakdown(project_type, total_amount, timeline_weeks, rate_per_day)


def format_amount(cents: int) -> str:
    """Render cents as euros, e.g. 950000 -> "€9,500" and -1000 -> "€-10".

    Thousands are comma-grouped and whole amounts carry no fraction; the minus
    sign follows the euro symbol.
    """
    euros = Decimal(cents) / 100
    return f"€{euros:,}"


__all__ = [
    "MAX_ROUNDING_DRIFT_CENTS",
    "QuoteGenerator",
    "assess_complexity",
    "calculate_feature_cost",
    "calculate_quote",
    "format_amount",
    "generate_quote_breakdown",
    "round_half_up",
]
