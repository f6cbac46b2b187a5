"""
Unit tests for three-year scenario projections.
"""

import pytest

from ai_cofounder.data.industries import FINANCE
from ai_cofounder.models import Scenario, ScenarioMonth
from ai_cofounder.services.forecasts import (
    FORECAST_MONTHS,
    expense_breakdown,
    funding_requirements,
    project_scenario,
    revenue_breakdown,
    seasonality,
)


def _month(month, net_profit, runway):
    return ScenarioMonth(
        month=month, users=0, revenue=0, costs=0,
        net_profit=net_profit, runway=runway, market_share=0
    )


class TestProjectScenario:
    """Tests for the monthly projection."""

    def test_three_years_of_months(self):
        result = project_scenario("a software tool")

        assert len(result.monthly_projections) == FORECAST_MONTHS
        assert [p.month for p in result.projections] == [12, 24, 36]

    def test_first_month_technology(self):
        first = project_scenario("a software tool").monthly_projections[0]

        # 100 users grow 20%, then 7% churn
        assert first.users == 112
        assert first.costs == 5100
        assert first.revenue == pytest.approx(first.users * 10, abs=10)

    def test_costs_scale_up_to_half_again(self):
        months = project_scenario("a software tool").monthly_projections

        assert months[1].costs == 5200
        assert months[-1].costs == 7500

    def test_unit_economics(self):
        metrics = project_scenario("a software tool").metrics

        assert metrics.arpu == 10
        assert metrics.ltv == 120
        assert metrics.ltv_cac == 3.0
        assert metrics.gross_margin == 0
        assert metrics.churn_rate == 7

    def test_industry_changes_economics(self):
        metrics = project_scenario("a restaurant finder").metrics

        assert metrics.ltv_cac == 3.43
        assert metrics.gross_margin == 20

    def test_scenario_scales_revenue_per_user(self):
        conservative = project_scenario("an app", scenario=Scenario.CONSERVATIVE)
        optimistic = project_scenario("an app", scenario=Scenario.OPTIMISTIC)

        assert conservative.metrics.arpu == 7
        assert optimistic.metrics.arpu == 13
        assert conservative.summary.scenario == Scenario.CONSERVATIVE

    def test_zero_inputs_use_industry_defaults(self):
        result = project_scenario(
            "a restaurant finder", initial_funding=0, revenue_per_user=0,
            monthly_costs=0, initial_users=0)

        assert result.metrics.arpu == 25
        assert result.monthly_projections[0].costs == 15300
        assert result.summary.industry == "food"

    def test_users_capped_at_reachable_market(self):
        result = project_scenario("a restaurant finder", initial_users=1_000_000)

        assert result.market_analysis.max_users == 230000
        assert all(m.users <= 230000 for m in result.monthly_projections)
        assert result.monthly_projections[0].market_share == 100

    def test_break_even_month(self):
        result = project_scenario("an app", initial_users=100000, monthly_costs=1000)

        assert result.summary.break_even_month == 1
        assert result.funding_requirements.profitability_month == 1

    def test_no_break_even(self):
        result = project_scenario("an app", initial_users=1, growth_rate=1, monthly_costs=100000)

        assert result.summary.break_even_month is None
        assert result.summary.final_runway < 0

    def test_runway_accumulates_net_profit(self):
        result = project_scenario("an app")
        months = result.monthly_projections

        assert months[0].runway == pytest.approx(10000 + months[0].net_profit, abs=0.01)
        assert result.summary.final_runway == months[-1].runway


class TestSeasonality:

    def test_education_summer_dip(self):
        assert seasonality(7, "education") == 0.2

    def test_wraps_every_year(self):
        assert seasonality(13, "education") == seasonality(1, "education") == 0.3

    def test_unknown_industry_is_flat(self):
        assert seasonality(5, "space") == 1.0


class TestFundingRequirements:
    """Tests for seed and Series A sizing."""

    def test_sized_from_losses(self):
        months = [_month(1, -100, 50), _month(2, -50, 0), _month(3, 30, 30)]

        result = funding_requirements(months, FINANCE["technology"])

        assert result.seed_round == 50000
        assert result.series_a == 250000
        assert result.runway_months == 1
        assert result.burn_rate == 75
        assert result.profitability_month == 3

    def test_large_losses_exceed_minimums(self):
        months = [_month(1, -100000, -50000), _month(2, -100000, -150000)]

        result = funding_requirements(months, FINANCE["technology"])

        assert result.seed_round == 300000
        assert result.series_a == 600000
        assert result.profitability_month is None

    def test_runway_never_empty(self):
        months = [_month(1, 10, 100), _month(2, 10, 110)]

        result = funding_requirements(months, FINANCE["technology"])

        assert result.runway_months == 2
        assert result.burn_rate == 0


class TestExpenseBreakdown:

    def test_realistic_is_industry_split(self):
        assert expense_breakdown("finance", Scenario.REALISTIC) == {
            "development": 45, "marketing": 20, "operations": 20, "admin": 15}

    def test_optimistic_shifts_to_marketing(self):
        assert expense_breakdown("technology", Scenario.OPTIMISTIC) == {
            "development": 36, "marketing": 33, "operations": 18, "admin": 9}


class TestRevenueBreakdown:

    def test_default_streams(self):
        assert revenue_breakdown(None) == {
            "Subscription Revenue": 60, "Premium Features": 25, "Enterprise Sales": 15}

    def test_known_streams_take_usual_share(self):
        assert revenue_breakdown(["Transaction Fees", "Advertising"]) == {
            "Transaction Fees": 40, "Advertising": 20}

    def test_unknown_streams_split_remainder(self):
        assert revenue_breakdown(["Commission", "Tips"]) == {"Commission": 50, "Tips": 50}

    def test_only_first_three_streams(self):
        result = revenue_breakdown(["a", "b", "c", "d"])

        assert list(result) == ["a", "b", "c"]
        assert sum(result.values()) <= 100
