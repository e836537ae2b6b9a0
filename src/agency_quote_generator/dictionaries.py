from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from .models.quote import Phase, ProjectType


@dataclass(frozen=True)
class BaseRate:
    min_amount_cents: int
    max_amount_cents: int
    base_weeks: int
    rate_per_day: int


@dataclass(frozen=True)
class PhaseDistribution:
    design: int
    development: int
    qa: int
    deployment: int

    def percent(self, phase: Phase) -> int:
        return getattr(self, phase.value)


@dataclass(frozen=True)
class ComponentSplit:
    component: str
    description: str
    percent: int


DEFAULT_BASE_RATES: Mapping[ProjectType, BaseRate] = {
    ProjectType.portfolio: BaseRate(
        min_amount_cents=800000,  # €8,000
        max_amount_cents=1200000,  # €12,000
        base_weeks=3,
        rate_per_day=500 * 100,
    ),
    ProjectType.ecommerce: BaseRate(
        min_amount_cents=1500000,
        max_amount_cents=2500000,
        base_weeks=6,
        rate_per_day=500 * 100,
    ),
    ProjectType.saas: BaseRate(
        min_amount_cents=2500000,
        max_amount_cents=5000000,
        base_weeks=10,
        rate_per_day=600 * 100,
    ),
    ProjectType.custom: BaseRate(
        min_amount_cents=5000000,
        max_amount_cents=10000000,
        base_weeks=12,
        rate_per_day=600 * 100,
    ),
}


DEFAULT_FEATURE_COSTS: Mapping[str, int] = {
    "Authentication & User Accounts": 100000,
    "Payment Processing (Stripe)": 150000,
    "Content Management System (CMS)": 200000,
    "Blog/News Section": 100000,
    "Contact Forms & Lead Capture": 50000,
    "Image Gallery/Portfolio": 100000,
    "Live Chat/Support Widget": 50000,
    "Booking System": 150000,
    "Inventory Management": 200000,
    "Dashboard/Analytics": 200000,
    "Real-time Features": 300000,
    "Mobile App Integration": 500000,
    "Multi-language Support": 150000,
    "Email Notifications": 100000,
    "Search Functionality": 150000,
}


DEFAULT_PHASE_DISTRIBUTION: Mapping[ProjectType, PhaseDistribution] = {
    ProjectType.portfolio: PhaseDistribution(design=40, development=40, qa=10, deployment=10),
    ProjectType.ecommerce: PhaseDistribution(design=30, development=45, qa=15, deployment=10),
    ProjectType.saas: PhaseDistribution(design=25, development=50, qa=15, deployment=10),
    ProjectType.custom: PhaseDistribution(design=25, development=55, qa=12, deployment=8),
}


DESIGN_COMPONENTS: Sequence[ComponentSplit] = (
    ComponentSplit("UI/UX Design", "User interface design, user experience optimization", 40),
    ComponentSplit("Wireframes & Prototyping", "Wireframe creation, interactive prototypes", 30),
    ComponentSplit("Responsive Design", "Mobile, tablet, desktop responsive layouts", 30),
)

_APP_DEVELOPMENT: Sequence[ComponentSplit] = (
    ComponentSplit("Frontend Development", "React/Next.js frontend implementation", 40),
    ComponentSplit("Backend Development", "Full backend implementation with API", 50),
    ComponentSplit("Integration & Features", "Third-party integrations and custom features", 10),
)

DEFAULT_DEVELOPMENT_COMPONENTS: Mapping[ProjectType, Sequence[ComponentSplit]] = {
    ProjectType.portfolio: (
        ComponentSplit("Frontend Development", "React/Next.js frontend implementation", 60),
        ComponentSplit("CMS Integration", "Content management system integration", 30),
        ComponentSplit("API Integration", "Third-party API integrations", 10),
    ),
    ProjectType.ecommerce: (
        ComponentSplit("Frontend Development", "React/Next.js e-commerce frontend", 40),
        ComponentSplit("Backend Development", "Node.js/Express backend implementation", 30),
        ComponentSplit("E-commerce Features", "Product catalog, cart, checkout implementation", 20),
        ComponentSplit("Stripe Integration", "Payment processing via Stripe", 10),
    ),
    ProjectType.saas: _APP_DEVELOPMENT,
    ProjectType.custom: _APP_DEVELOPMENT,
}

QA_COMPONENT = ComponentSplit(
    "Testing & QA", "Comprehensive testing, bug fixing, quality assurance", 100
)
DEPLOYMENT_COMPONENT = ComponentSplit(
    "Deployment & Launch", "Production deployment, final testing, live launch", 100
)


COMPLEX_SIGNALS: Sequence[str] = (
    "custom",
    "complex",
    "sophisticated",
    "advanced",
    "enterprise",
    "scalable",
    "microservices",
    "api",
    "integration",
    "database",
    "backend",
    "frontend",
    "full-stack",
    "multi-platform",
)

SIMPLE_SIGNALS: Sequence[str] = (
    "simple",
    "basic",
    "minimal",
    "clean",
    "minimalist",
    "starter",
)


# Options offered by the client intake form. The form's "Payment Processing"
# entry has no price in DEFAULT_FEATURE_COSTS and is quoted at zero.
INTAKE_FEATURES: Sequence[str] = (
    "Authentication & User Accounts",
    "Payment Processing",
    "Content Management System (CMS)",
    "Blog/News Section",
    "Contact Forms & Lead Capture",
    "Image Gallery/Portfolio",
    "Live Chat/Support Widget",
    "Booking System",
    "Inventory Management",
    "Dashboard/Analytics",
    "Real-time Features",
    "Mobile App Integration",
)

TIMELINE_RANGES: Mapping[str, str] = {
    "2-4": "2-4 weeks",
    "4-8": "4-8 weeks",
    "8-12": "8-12 weeks",
    "12+": "12+ weeks",
}

BUDGET_RANGES: Mapping[str, str] = {
    "8-12": "€8,000 - €12,000",
    "10-15": "€10,000 - €15,000",
    "15-25": "€15,000 - €25,000",
    "25-50": "€25,000 - €50,000",
    "50-100": "€50,000 - €100,000",
    "100+": "€100,000+",
}


__all__ = [
    "BUDGET_RANGES",
    "COMPLEX_SIGNALS",
    "DEFAULT_BASE_RATES",
    "DEFAULT_DEVELOPMENT_COMPONENTS",
    "DEFAULT_FEATURE_COSTS",
    "DEFAULT_PHASE_DISTRIBUTION",
    "DEPLOYMENT_COMPONENT",
    "DESIGN_COMPONENTS",
    "INTAKE_FEATURES",
    "QA_COMPONENT",
    "SIMPLE_SIGNALS",
    "TIMELINE_RANGES",
    "BaseRate",
    "ComponentSplit",
    "PhaseDistribution",
]
