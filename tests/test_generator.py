import pytest

from agency_quote_generator.dictionaries import DEFAULT_BASE_RATES, DEFAULT_FEATURE_COSTS
from agency_quote_generator.generator import (
    MAX_ROUNDING_DRIFT_CENTS,
    QuoteGenerator,
    assess_complexity,
    calculate_feature_cost,
    calculate_quote,
    format_amount,
    generate_quote_breakdown,
    round_half_up,
)
from agency_quote_generator.models.quote import Phase, ProjectInput, ProjectType

PROJECT_TYPES = ["portfolio", "ecommerce", "saas", "custom"]


def make_input(project_type="portfolio", description="", features=(), **kwargs):
    return ProjectInput(
        type=project_type,
        description=description,
        features=list(features),
        timeline_range=kwargs.get("timeline_range", "2-4"),
        budget_range=kwargs.get("budget_range", "8-12"),
    )


def test_simple_portfolio_quote():
    result = calculate_quote(make_input())

    assert 800000 <= result.amount_cents <= 1200000
    assert result.amount_cents == 800000
    assert result.timeline_weeks >= 3
    assert len(result.breakdown) >= 4


def test_portfolio_breakdown_lines():
    result = calculate_quote(make_input())

    lines = [(item.phase, item.component, item.estimated_days, item.amount_cents) for item in result.breakdown]
    assert lines == [
        (Phase.design, "UI/UX Design", 2, 128000),
        (Phase.design, "Wireframes & Prototyping", 2, 96000),
        (Phase.design, "Responsive Design", 2, 96000),
        (Phase.development, "Frontend Development", 4, 192000),
        (Phase.development, "CMS Integration", 2, 96000),
        (Phase.development, "API Integration", 1, 32000),
        (Phase.qa, "Testing & QA", 2, 80000),
        (Phase.deployment, "Deployment & Launch", 2, 80000),
    ]
    assert {item.rate_per_day for item in result.breakdown} == {50000}


def test_ecommerce_development_split():
    result = calculate_quote(make_input("ecommerce"))

    components = [item.component for item in result.breakdown if item.phase is Phase.development]
    assert components == [
        "Frontend Development",
        "Backend Development",
        "E-commerce Features",
        "Stripe Integration",
    ]


@pytest.mark.parametrize("project_type", ["saas", "custom"])
def test_app_development_split(project_type):
    result = calculate_quote(make_input(project_type))

    components = [item.component for item in result.breakdown if item.phase is Phase.development]
    assert components == ["Frontend Development", "Backend Development", "Integration & Features"]
    assert {item.rate_per_day for item in result.breakdown} == {60000}


@pytest.mark.parametrize("project_type", PROJECT_TYPES)
def test_breakdown_includes_all_phases(project_type):
    result = calculate_quote(make_input(project_type, features=["Booking System"]))

    phases = {item.phase for item in result.breakdown}
    assert phases == {Phase.design, Phase.development, Phase.qa, Phase.deployment}
    assert all(item.estimated_days >= 0 for item in result.breakdown)


def test_quote_is_deterministic():
    project = make_input("saas", "Scalable backend", ["Dashboard/Analytics", "Real-time Features"])

    assert calculate_quote(project) == calculate_quote(project)


def test_type_ordering():
    quotes = [
        calculate_quote(make_input(project_type, features=["Authentication & User Accounts"]))
        for project_type in PROJECT_TYPES
    ]
    amounts = [quote.amount_cents for quote in quotes]

    assert amounts == [900000, 1600000, 2600000, 5100000]
    assert amounts == sorted(amounts)
    assert len(set(amounts)) == 4


def test_mobile_app_integration_adds_exact_feature_cost():
    baseline = calculate_quote(make_input(description="Test project"))
    with_feature = calculate_quote(make_input(description="Test project", features=["Mobile App Integration"]))

    assert with_feature.amount_cents - baseline.amount_cents == 500000


@pytest.mark.parametrize(
    "feature, expected",
    [
        ("Contact Forms & Lead Capture", 50000),
        ("Payment Processing (Stripe)", 150000),
        ("Real-time Features", 300000),
        ("Mobile App Integration", 500000),
    ],
)
def test_feature_delta_within_tolerance(feature, expected):
    baseline = calculate_quote(make_input(description="Test project"))
    with_feature = calculate_quote(make_input(description="Test project", features=[feature]))

    delta = with_feature.amount_cents - baseline.amount_cents
    assert expected * 0.8 <= delta <= expected * 1.2


def test_adding_recognised_feature_never_decreases_amount():
    features: list[str] = []
    previous = calculate_quote(make_input("ecommerce", features=features)).amount_cents
    for feature in DEFAULT_FEATURE_COSTS:
        features.append(feature)
        current = calculate_quote(make_input("ecommerce", features=features)).amount_cents
        assert current >= previous, f"adding {feature} lowered the quote"
        previous = current


def test_feature_cost_sums_table_and_ignores_unknown_names():
    features = ["Booking System", "Booking System", "Teleportation", "Payment Processing"]

    assert calculate_feature_cost(features) == 300000
    assert calculate_feature_cost([]) == 0


@pytest.mark.parametrize(
    "description, feature_count, expected",
    [
        ("", 0, 1.0),
        ("", 5, 1.25),
        ("", 9, 1.5),
        ("Simple basic portfolio website", 0, 1.0),
        ("Custom enterprise platform with advanced API integration", 0, 1.5),
        ("A simple site with an API", 0, 1.25),
        ("Rapid turnaround", 0, 1.5),
        ("Custom enterprise platform", 10, 2.0),
        ("Clean and minimal", 5, 1.0),
        ("Scalable starter kit", 9, 1.75),
        (None, 0, 1.0),
    ],
)
def test_assess_complexity(description, feature_count, expected):
    project = make_input(description=description, features=["Unlisted"] * feature_count)

    assert assess_complexity(project) == expected


def test_complexity_stays_in_range():
    descriptions = ["", "simple", "complex", "simple complex", "enterprise full-stack multi-platform database"]
    for description in descriptions:
        for count in range(0, 20):
            score = assess_complexity(make_input(description=description, features=["x"] * count))
            assert 1.0 <= score <= 2.0


def test_max_complexity_reaches_midpoint_of_range():
    rate = DEFAULT_BASE_RATES[ProjectType.custom]
    project = make_input("custom", "Complex enterprise platform", ["Unlisted"] * 10)

    result = calculate_quote(project)

    assert result.amount_cents == rate.min_amount_cents + (rate.max_amount_cents - rate.min_amount_cents) // 2
    assert result.amount_cents < rate.max_amount_cents


def test_timeline_counts_every_feature():
    assert calculate_quote(make_input()).timeline_weeks == 3
    assert calculate_quote(make_input(features=["Test Feature"] * 10)).timeline_weeks == 6
    # round(0.6) -> 1, round(1.5) -> 2
    assert calculate_quote(make_input("saas", features=["Booking System"] * 2)).timeline_weeks == 11
    assert calculate_quote(make_input("saas", features=["Booking System"] * 5)).timeline_weeks == 12


def test_range_strings_do_not_change_price():
    first = calculate_quote(make_input(timeline_range="2-4", budget_range="8-12"))
    second = calculate_quote(make_input(timeline_range="12+", budget_range="100+"))

    assert first == second


def test_breakdown_sums_close_to_total():
    descriptions = ["", "simple", "custom api", "Portfolio website for photographer"]
    feature_sets = [
        [],
        ["Contact Forms & Lead Capture"],
        ["Authentication & User Accounts", "Payment Processing (Stripe)", "Live Chat/Support Widget"],
        list(DEFAULT_FEATURE_COSTS)[:7],
        list(DEFAULT_FEATURE_COSTS),
    ]
    for project_type in PROJECT_TYPES:
        for description in descriptions:
            for features in feature_sets:
                result = calculate_quote(make_input(project_type, description, features))
                drift = abs(result.breakdown_total_cents - result.amount_cents)
                assert drift <= MAX_ROUNDING_DRIFT_CENTS, (project_type, description, features)


def test_phase_totals_follow_distribution():
    result = calculate_quote(make_input("custom"))

    totals = result.phase_totals()
    assert list(totals) == [Phase.design, Phase.development, Phase.qa, Phase.deployment]
    assert totals[Phase.qa] == 600000
    assert totals[Phase.deployment] == 400000


def test_generate_quote_breakdown_directly():
    breakdown = generate_quote_breakdown(ProjectType.saas, 1000001, 10, 60000)

    qa = [item for item in breakdown if item.phase is Phase.qa]
    assert len(qa) == 1
    assert qa[0].estimated_days == 8
    assert qa[0].amount_cents == 150000


def test_unknown_type_is_a_programming_error():
    project = ProjectInput.model_construct(type="enterprise", description="", features=[])

    with pytest.raises(KeyError):
        QuoteGenerator().generate(project)


def test_custom_feature_table():
    generator = QuoteGenerator(feature_costs={"Chatbot": 250000})
    project = make_input(features=["Chatbot", "Booking System"])

    assert generator.generate(project).amount_cents == 1050000
    assert generator.unknown_features(project.features) == ["Booking System"]


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.4999) == 2


@pytest.mark.parametrize(
    "cents, expected",
    [
        (950000, "€9,500"),
        (100000, "€1,000"),
        (1000000, "€10,000"),
        (0, "€0"),
        (100000000, "€1,000,000"),
        (-1000, "€-10"),
        (950050, "€9,500.5"),
        (12345, "€123.45"),
    ],
)
def test_format_amount(cents, expected):
    assert format_amount(cents) == expected


def test_empty_feature_table_prices_nothing():
    generator = QuoteGenerator(feature_costs={})

    assert generator.calculate_feature_cost(["Mobile App Integration"]) == 0
    assert generator.unknown_features(["Mobile App Integration"]) == ["Mobile App Integration"]


@pytest.mark.parametrize("project_type", PROJECT_TYPES)
@pytest.mark.parametrize(
    "features",
    [[], ["Booking System"], list(DEFAULT_FEATURE_COSTS), ["Unlisted"] * 25],
)
def test_amount_positive_and_timeline_at_least_base(project_type, features):
    rate = DEFAULT_BASE_RATES[ProjectType(project_type)]

    result = calculate_quote(make_input(project_type, "simple", features))

    assert result.amount_cents > 0
    assert result.timeline_weeks >= rate.base_weeks
