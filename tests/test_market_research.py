"""
Unit tests for plan market research reports.
"""

from datetime import datetime

from ai_cofounder.data.industries import detect_plan_industry
from ai_cofounder.services.market_research import research_market


class TestDetectPlanIndustry:

    def test_first_keyword_group_wins(self):
        # "meal" (food) is checked before "app" (technology)
        assert detect_plan_industry("a meal planning app") == "food"

    def test_keywords(self):
        assert detect_plan_industry("Fitness coaching") == "healthcare"
        assert detect_plan_industry("peer payment splitting") == "finance"
        assert detect_plan_industry("drone delivery") == "transportation"

    def test_defaults_to_technology(self):
        assert detect_plan_industry("a bakery") == "technology"
        assert detect_plan_industry("") == "technology"


class TestResearchMarket:
    """Tests for the market research report."""

    def test_industry_tables_without_plan_sections(self):
        report = research_market("a software tool")

        assert report.market_size.current == "$5.2T global technology market"
        assert report.market_size.cagr == 18
        assert report.market_size.growth == "18%"
        assert report.market_size.projected == "18% CAGR over next 5 years"
        assert [c.name for c in report.competitors] == ["Microsoft", "Google"]
        assert [t.name for t in report.trends] == [
            "AI Integration", "Cloud Computing", "Cybersecurity"]
        assert report.opportunity_score.overall == 8.7
        assert report.opportunity_score.market_size == 9
        assert report.insights

    def test_plan_market_size_wins(self):
        report = research_market(
            "a software tool", pitch_deck_summary={"marketSize": "$1.2B addressable market"})

        assert report.market_size.current == "$1.2B addressable market"

    def test_plan_competitors_keep_names(self):
        report = research_market("a software tool", market_research={
            "competitors": ["Notion", "Asana", "Trello", "Monday"]})

        assert [c.name for c in report.competitors] == ["Notion", "Asana", "Trello"]
        assert report.competitors[0].analysis.startswith("Technology giant")
        # Only two technology templates; the third falls back
        assert report.competitors[2].analysis == "AI-generated competitive analysis"

    def test_plan_trends_keep_names(self):
        report = research_market("a restaurant finder", market_research={
            "trends": ["Ghost kitchens"]})

        assert len(report.trends) == 1
        assert report.trends[0].name == "Ghost kitchens"

    def test_persona_pain_points_extend_segments(self):
        report = research_market("a software tool", customer_persona={
            "painPoints": ["Too many tabs", "Slow onboarding", "Pricing"]})

        segment = report.customer_segments[0]
        assert segment.segment == "Small Businesses"
        assert segment.pain_points[-2:] == ["Too many tabs", "Slow onboarding"]
        assert "Pricing" not in segment.pain_points

    def test_tables_are_not_modified(self):
        research_market("a software tool", customer_persona={"painPoints": ["X"]})

        report = research_market("a software tool")
        assert "X" not in report.customer_segments[0].pain_points

    def test_generated_at(self):
        moment = datetime(2024, 5, 1, 12, 0)

        assert research_market("an app", generated_at=moment).generated_at == moment

    def test_camel_case_dump(self):
        data = research_market("an app").model_dump(by_alias=True, mode="json")

        assert "opportunityScore" in data
        assert "painPoints" in data["customerSegments"][0]
