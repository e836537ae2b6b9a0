from __future__ import annotations

from typing import Iterable

from .generator import format_amount
from .models.quote import Phase, ProjectInput, QuoteResult

_PHASE_LABELS = {
    Phase.design: "Design",
    Phase.development: "Development",
    Phase.qa: "QA",
    Phase.deployment: "Deployment",
}


def build_quote_summary(
    project_name: str | None,
    project: ProjectInput,
    quote: QuoteResult,
    *,
    warnings: Iterable[str] = (),
) -> str:
    phase_lines = [
        f"- {_PHASE_LABELS[phase]}: {format_amount(amount)}"
        for phase, amount in quote.phase_totals().items()
    ]
    item_lines = [
        f"- [{item.phase.value}] {item.component}: {item.estimated_days}d × "
        f"{format_amount(item.rate_per_day)}/day → {format_amount(item.amount_cents)}"
        for item in quote.breakdown
    ]
    features = "\n".join(f"- {feature}" for feature in project.features) or "- none"
    notes = "\n".join(f"- {warning}" for warning in warnings) or "- none"

    summary_lines = [
        "## Quote Summary",
        f"- Project: {project_name or 'Untitled project'}",
        f"- Type: {project.type.value}",
        f"- Total: {format_amount(quote.amount_cents)}",
        f"- Timeline: {quote.timeline_weeks} weeks ({quote.total_days} working days)",
        f"- Preferred timeline: {project.timeline_range or 'not given'}",
        f"- Budget range: {project.budget_range or 'not given'}",
        "",
        "## Phases",
        "\n".join(phase_lines),
        "",
        "## Breakdown",
        "\n".join(item_lines),
        "",
        "## Features",
        features,
        "",
        "## Notes",
        notes,
    ]
    return "\n".join(summary_lines)


__all__ = ["build_quote_summary"]
