import pytest
from idea_validator.analysis import (
    BusinessIdeaAnalysisService,
    CRITERIA,
    MVP_BASELINE,
    MVP_FOLLOWUP,
    BUSINESS_PLAN,
    contains_keywords,
)

MEAL_PLANNER = (
    "An AI-powered meal planning app that creates personalized shopping lists and recipes "
    "based on dietary restrictions, preferences, and nutritional goals."
)
BAKERY = "A neighbourhood bakery selling fresh bread, pastries and cakes every morning to local families."
COACHING = "Personal coaching for retirees who want to start gardening, delivered face to face in their homes."


@pytest.fixture
def service():
    return BusinessIdeaAnalysisService()


def test_analysis_has_all_criteria_and_recommendations(service):
    analysis = service.analyze(MEAL_PLANNER)

    assert set(analysis) == set(CRITERIA) | {"recommendations"}
    for criterion in CRITERIA:
        assert set(analysis[criterion]) == {"score", "pros", "cons"}
        assert 1 <= analysis[criterion]["score"] <= 10
        assert isinstance(analysis[criterion]["pros"], list)
        assert isinstance(analysis[criterion]["cons"], list)

    assert len(analysis["recommendations"]) > 0


def test_same_description_gives_same_analysis(service):
    assert service.analyze(MEAL_PLANNER) == service.analyze(MEAL_PLANNER)
    assert service.analyze(MEAL_PLANNER) == service.analyze(MEAL_PLANNER.upper())


def test_keyword_extraction(service):
    keywords = service.extract_keywords(MEAL_PLANNER.lower())
    assert keywords["is_tech"] is True

    keywords = service.extract_keywords("a consulting business for farmers")
    assert keywords == {"is_tech": False, "is_service": True, "is_product": False, "is_social": False}


def test_contains_keywords_is_substring_match():
    assert contains_keywords("we maintain gardens", ["ai"])
    assert not contains_keywords("bread", ["app", "web"])


def test_tech_keywords_add_pros_and_cons(service):
    analysis = service.analyze(MEAL_PLANNER)

    assert "Growing digital market demand" in analysis["market_demand"]["pros"]
    assert "Technical expertise required" in analysis["feasibility"]["cons"]
    assert "Technology enables rapid scaling" in analysis["scalability"]["pros"]
    assert "Technology obsolescence risk" in analysis["risk_assessment"]["cons"]
    assert "Leverages cutting-edge technology" in analysis["uniqueness"]["pros"]


def test_plain_description_keeps_default_tables(service):
    analysis = service.analyze(BAKERY)

    assert analysis["market_demand"]["pros"] == [
        "Identifies a real market need",
        "Target audience is clearly defined",
    ]
    assert analysis["risk_assessment"]["cons"] == ["Market uncertainty", "Competitive threats"]
    assert 5 <= analysis["market_demand"]["score"] <= 8
    assert 6 <= analysis["feasibility"]["score"] <= 8
    assert 5 <= analysis["profitability"]["score"] <= 7


def test_service_without_tech_is_harder_to_scale(service):
    analysis = service.analyze(COACHING)

    assert "Human resource scaling challenges" in analysis["scalability"]["cons"]
    assert "Lower initial investment required" in analysis["feasibility"]["pros"]
    assert 5 <= analysis["scalability"]["score"] <= 7


def test_subscription_boosts_profitability(service):
    analysis = service.analyze("A monthly subscription of handmade candles shipped to your door in a gift box.")

    assert "Recurring revenue model" in analysis["profitability"]["pros"]
    assert "Inventory and logistics costs" in analysis["profitability"]["cons"]
    assert analysis["profitability"]["score"] >= 7


def test_scores_never_exceed_ten(service):
    text = "An AI subscription platform for social community support services with mobile app and api."
    for suffix in range(30):
        analysis = service.analyze(f"{text} variant {suffix}")
        assert all(analysis[c]["score"] <= 10 for c in CRITERIA)


def test_recommendations_without_specific_bands(service):
    scores = {c: 6 for c in CRITERIA}
    keywords = {"is_tech": False, "is_service": False, "is_product": False, "is_social": False}

    assert service.generate_recommendations("", keywords, scores) == [MVP_BASELINE, BUSINESS_PLAN]


def test_recommendations_for_weak_scores(service):
    scores = {
        "market_demand": 3,
        "feasibility": 4,
        "profitability": 6,
        "uniqueness": 6,
        "scalability": 6,
        "risk_assessment": 8,
    }
    keywords = {"is_tech": True, "is_service": False, "is_product": False, "is_social": False}

    recs = service.generate_recommendations("", keywords, scores)

    assert recs[0].startswith("Conduct extensive market research")
    assert "Create a proof-of-concept to validate the most challenging technical assumptions" in recs
    assert "Consider diversifying your approach or building in flexibility to pivot if needed" in recs
    assert MVP_FOLLOWUP in recs
    assert MVP_BASELINE not in recs
    assert recs[-1].startswith("Build a technical prototype")
    assert len(recs) == len(set(recs))


def test_contextual_recommendations(service):
    scores = {c: 7 for c in CRITERIA}
    scores["scalability"] = 5
    keywords = {"is_tech": False, "is_service": True, "is_product": False, "is_social": True}

    recs = service.generate_recommendations("monthly subscription", keywords, scores)

    assert any(r.startswith("Focus on building an initial community") for r in recs)
    assert any(r.startswith("Standardize your service delivery") for r in recs)
    assert any(r.startswith("Design strong customer retention") for r in recs)


def test_low_risk_line(service):
    scores = {c: 6 for c in CRITERIA}
    scores["risk_assessment"] = 3
    keywords = {"is_tech": False, "is_service": False, "is_product": False, "is_social": False}

    recs = service.generate_recommendations("", keywords, scores)
    assert recs == [
        "Take advantage of the low-risk profile by being more aggressive in your market entry strategy",
        MVP_FOLLOWUP,
    ]


def test_overall_score_weighted_sum(service):
    analysis = {
        "market_demand": {"score": 8},
        "feasibility": {"score": 7},
        "profitability": {"score": 6},
        "uniqueness": {"score": 9},
        "scalability": {"score": 8},
        "risk_assessment": {"score": 7},
    }
    # 8*.25 + 7*.20 + 6*.20 + 9*.15 + 8*.15 + 7*.05
    assert service.calculate_overall_score(analysis) == 7.5


def test_overall_score_ignores_missing_criteria(service):
    assert service.calculate_overall_score({"market_demand": {"score": 10}}) == 2.5
    assert service.calculate_overall_score({}) == 0.0


def test_overall_score_of_real_analysis_is_rounded(service):
    analysis = service.analyze(MEAL_PLANNER)
    score = service.calculate_overall_score(analysis)

    assert 0.0 <= score <= 10.0
    assert score == round(score, 1)


def test_overall_score_rounds_half_up(service):
    def scored(*values):
        return {c: {"score": v} for c, v in zip(CRITERIA, values)}

    # 7.25 and 5.05 sit exactly on the half
    assert service.calculate_overall_score(scored(8, 7, 7, 7, 7, 7)) == 7.3
    assert service.calculate_overall_score(scored(5, 6, 5, 4, 5, 5)) == 5.1
    assert service.calculate_overall_score(scored(5, 6, 5, 4, 5, 7)) == 5.2


def test_overall_score_half_up_over_reachable_scores(service):
    from decimal import Decimal, ROUND_HALF_UP
    from itertools import product

    weights = [Decimal("0.25"), Decimal("0.20"), Decimal("0.20"), Decimal("0.15"), Decimal("0.15"), Decimal("0.05")]
    ranges = [range(5, 10), range(6, 10), range(5, 10), range(4, 10), range(5, 10), range(5, 9)]

    for values in product(*ranges):
        analysis = {c: {"score": v} for c, v in zip(CRITERIA, values)}
        exact = sum(Decimal(v) * w for v, w in zip(values, weights))
        expected = float(exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
        assert service.calculate_overall_score(analysis) == expected, values
