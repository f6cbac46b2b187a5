"""
Unit tests for the deterministic mock content.
"""

import pytest

from ai_cofounder.models import BusinessPlanDraft
from ai_cofounder.services.mock_content import (
    detect_industry,
    detect_target_age,
    is_food_idea,
    mock_business_plan,
    mock_validation_content,
)


class TestIdeaDetection:
    """Tests for keyword-based idea classification."""

    def test_food_keywords(self):
        assert is_food_idea("Meal prep for busy parents")
        assert is_food_idea("RESTAURANT reviews")
        assert not is_food_idea("a ride sharing app")

    def test_first_matching_industry_wins(self):
        # 'app' (technology) comes after 'patient' (healthcare)
        assert detect_industry(["patient", "app"]) == "healthcare"

    def test_keyword_contained_in_word(self):
        assert detect_industry(["streaming"]) == "entertainment"
        assert detect_industry(["payments"]) == "finance"

    def test_default_industry(self):
        assert detect_industry(["gardening", "tools"]) == "technology"

    def test_target_age(self):
        assert detect_target_age(["for", "college", "kids"]) == "22"
        assert detect_target_age(["retirement", "planning"]) == "65"
        assert detect_target_age(["toddler", "games"]) == "8"
        assert detect_target_age(["students"]) == "28"


class TestMockBusinessPlan:
    """Tests for the mock plan payloads."""

    def test_food_plan_satisfies_contract(self):
        plan = BusinessPlanDraft.model_validate(
            {**mock_business_plan("late night meal kits"), "idea": "late night meal kits"})

        assert plan.pitch_deck_summary.title == "CampusBites"
        assert plan.customer_persona.name == "Sarah Chen"

    def test_generic_plan_satisfies_contract(self):
        plan = BusinessPlanDraft.model_validate(
            {**mock_business_plan("online course for school teachers"), "idea": "x"})

        assert plan.customer_persona.name == "Professor Alex Johnson"
        assert plan.customer_persona.age == "22"
        assert plan.lean_canvas.revenue_streams[0] == "Course fees"

    def test_problem_statement_quotes_idea(self):
        plan = mock_business_plan("drone inspections")

        assert '"drone inspections"' in plan["problemStatement"]

    def test_returned_payload_is_a_copy(self):
        first = mock_business_plan("food trucks")
        first["leanCanvas"]["channels"].append("Billboards")

        assert "Billboards" not in mock_business_plan("food trucks")["leanCanvas"]["channels"]


class TestMockValidationContent:

    def test_survey(self):
        assert len(mock_validation_content("x", "survey")) == 5

    def test_landing_page_mentions_idea(self):
        content = mock_validation_content("pet sitting", "landingPage")

        assert content["headline"] == "Revolutionary Solution for pet sitting"

    def test_ad_copy(self):
        content = mock_validation_content("pet sitting", "adCopy")

        assert content["keywords"] == ["innovation", "solution", "modern", "effective", "user-friendly"]

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            mock_validation_content("x", "poster")
