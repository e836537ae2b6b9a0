from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, EmailStr, Field

from .quote import ProjectInput, ProjectType


class ClientIntake(BaseModel):
    email: EmailStr
    full_name: str
    company_name: str | None = None
    industry: str | None = None
    project_name: str
    project_type: ProjectType
    description: str | None = None
    features: Sequence[str] = Field(default_factory=list)
    timeline_range: str | None = Field(default=None, description="Preferred timeline in weeks, e.g. '2-4'")
    budget_range: str | None = Field(default="10-15", description="Budget band in thousands of EUR, e.g. '8-12'")
    example_sites: str | None = None
    brand_colors: str | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "email": "test@example.com",
                "full_name": "Test User",
                "company_name": "Test Company",
                "industry": "Technology",
                "project_name": "Test Project",
                "project_type": "portfolio",
                "description": "A test portfolio website for demonstration purposes",
                "features": ["Authentication & User Accounts", "Contact Forms & Lead Capture"],
                "timeline_range": "2-4",
                "budget_range": "8-12",
            }
        }

    def to_project_input(self) -> ProjectInput:
        return ProjectInput(
            type=self.project_type,
            description=self.description,
            features=tuple(self.features),
            timeline_range=self.timeline_range,
            budget_range=self.budget_range,
        )


__all__ = ["ClientIntake"]
