from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import ValidationError

from .dictionaries import BUDGET_RANGES, TIMELINE_RANGES
from .errors import QuoteValidationError
from .generator import QuoteGenerator
from .models.intake import ClientIntake
from .models.quote import ProjectInput, ProjectType, QuoteResult

logger = logging.getLogger(__name__)

_PROJECT_TYPES = tuple(project_type.value for project_type in ProjectType)


@dataclass
class ValidatedInput:
    project: ProjectInput
    warnings: list[str] = field(default_factory=list)


def validate_project_input(
    data: Mapping[str, Any] | ProjectInput | ClientIntake,
    *,
    strict: bool = False,
    generator: QuoteGenerator | None = None,
) -> ValidatedInput:
    """Check caller input before it reaches the pricing engine.

    The engine itself never rejects input; this wrapper enforces the stricter
    contract the intake handler needs. All problems are collected and raised
    together as a QuoteValidationError.

    Unknown feature names are priced at zero by the engine, so they only
    produce warnings unless ``strict`` is set. Unknown timeline or budget
    ranges always produce warnings.
    """
    generator = generator or QuoteGenerator()

    if isinstance(data, ClientIntake):
        project = data.to_project_input()
    elif isinstance(data, ProjectInput):
        project = data
    else:
        project = _parse_mapping(data)

    errors: list[str] = []
    warnings: list[str] = []

    for name in generator.unknown_features(project.features):
        message = f"Unknown feature '{name}' is not priced"
        if strict:
            errors.append(message)
        else:
            warnings.append(message)
    if project.timeline_range and project.timeline_range not in TIMELINE_RANGES:
        warnings.append(f"Unrecognised timeline range '{project.timeline_range}'")
    if project.budget_range and project.budget_range not in BUDGET_RANGES:
        warnings.append(f"Unrecognised budget range '{project.budget_range}'")

    if errors:
        raise QuoteValidationError(errors)
    if warnings:
        logger.warning(
            "Project input accepted with warnings",
            extra={"project_type": project.type.value, "warnings": warnings},
        )
    return ValidatedInput(project=project, warnings=warnings)


def quote_from_intake(
    intake: ClientIntake | Mapping[str, Any],
    *,
    strict: bool = False,
    generator: QuoteGenerator | None = None,
) -> tuple[QuoteResult, list[str]]:
    generator = generator or QuoteGenerator()
    if not isinstance(intake, ClientIntake):
        try:
            intake = ClientIntake.model_validate(intake)
        except ValidationError as exc:
            raise QuoteValidationError(_format_errors(exc)) from exc
    validated = validate_project_input(intake, strict=strict, generator=generator)
    return generator.generate(validated.project), validated.warnings


def _parse_mapping(data: Mapping[str, Any]) -> ProjectInput:
    errors: list[str] = []
    project_type = data.get("type")
    if project_type not in _PROJECT_TYPES:
        errors.append(
            f"Project type must be one of {', '.join(_PROJECT_TYPES)}, got {project_type!r}"
        )
    features = data.get("features")
    if not isinstance(features, (list, tuple)):
        errors.append("Features must be a list of feature names")
    elif not all(isinstance(feature, str) for feature in features):
        errors.append("Every feature must be a string")
    description = data.get("description")
    if description is not None and not isinstance(description, str):
        errors.append("Description must be text")
    if errors:
        raise QuoteValidationError(errors)

    try:
        return ProjectInput.model_validate(data)
    except ValidationError as exc:
        raise QuoteValidationError(_format_errors(exc)) from exc


def _format_errors(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]


__all__ = ["ValidatedInput", "validate_project_input", "quote_from_intake"]
