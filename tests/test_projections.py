"""
Unit tests for the financial projection and ad campaign calculators.
"""

import pytest

from ai_cofounder.core.exceptions import ValidationError
from ai_cofounder.core.rounding import round_half_up
from ai_cofounder.services.projections import (
    DEFAULT_AD_KEYWORDS,
    platform_rates,
    project_financials,
    simulate_ad_campaign,
)


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (-2.5, -2)])
    def test_whole_numbers(self, value, expected):
        assert round_half_up(value) == expected

    def test_returns_int_without_digits(self):
        assert isinstance(round_half_up(3.7), int)

    def test_two_digits(self):
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(1234.5678, 2) == 1234.57


class TestProjectFinancials:
    """Tests for the six-month projection."""

    def test_default_projection(self):
        result = project_financials()

        assert len(result.projections) == 6
        first = result.projections[0]
        assert first.month == 1
        assert first.users == 100
        assert first.revenue == 1000
        assert first.costs == 5000
        assert first.net_profit == -4000
        assert first.runway == 6000

    def test_users_grow_each_month(self):
        result = project_financials()

        assert [p.users for p in result.projections] == [100, 120, 144, 173, 207, 249]

    def test_no_break_even_with_defaults(self):
        result = project_financials()

        assert result.summary.break_even_month is None
        assert result.summary.total_costs == 30000
        assert result.summary.final_runway == result.projections[-1].runway

    def test_break_even_month(self):
        result = project_financials(
            initial_funding=0, growth_rate=100, monthly_costs=1000,
            revenue_per_user=1, initial_users=250)

        # 250, 500, 1000 users -> net -750, -500, 0
        assert result.summary.break_even_month == 3

    def test_half_user_rounds_up(self):
        result = project_financials(initial_users=2.5, growth_rate=0)

        assert result.projections[0].users == 3
        assert result.projections[0].revenue == 25

    def test_total_revenue_sums_months(self):
        result = project_financials(growth_rate=0)

        assert result.summary.total_revenue == 6000
        assert result.summary.final_runway == 10000 - 6 * 4000


class TestSimulateAdCampaign:
    """Tests for the ad campaign estimate."""

    def test_default_budget(self):
        result = simulate_ad_campaign()

        assert result.budget == 500
        assert result.clicks == 333
        assert result.impressions == 13333
        assert result.leads == 50

    def test_metrics_formatting(self):
        metrics = simulate_ad_campaign(300).metrics

        assert metrics.ctr == "2.50%"
        assert metrics.cpc == "$1.50"
        assert metrics.conversion_rate == "15%"

    def test_default_keywords(self):
        assert simulate_ad_campaign(100).keywords == DEFAULT_AD_KEYWORDS

    def test_custom_keywords(self):
        result = simulate_ad_campaign(100, keywords=["campus food", " "])

        assert result.keywords == ["campus food"]

    def test_zero_budget(self):
        result = simulate_ad_campaign(0)

        assert result.clicks == 0
        assert result.impressions == 0
        assert result.leads == 0

    def test_half_click_rounds_up(self):
        # 0.75 / 1.50 = 0.5 clicks
        assert simulate_ad_campaign(0.75).clicks == 1

    def test_google_is_default_platform(self):
        assert simulate_ad_campaign(100).platform == "google"

    def test_facebook_rates(self):
        result = simulate_ad_campaign(300, platform="facebook")

        assert result.platform == "facebook"
        assert result.clicks == 375
        assert result.impressions == 25000
        assert result.leads == 45
        assert result.metrics.ctr == "1.50%"
        assert result.metrics.cpc == "$0.80"
        assert result.metrics.conversion_rate == "12%"

    def test_platform_name_is_normalized(self):
        result = simulate_ad_campaign(60, platform=" Instagram ")

        assert result.platform == "instagram"
        assert result.clicks == 100
        assert result.leads == 18

    def test_unknown_platform(self):
        with pytest.raises(ValidationError) as exc_info:
            simulate_ad_campaign(100, platform="tiktok")

        assert exc_info.value.field == "platform"
        assert "'tiktok'" in exc_info.value.message


class TestPlatformRates:

    def test_default(self):
        assert platform_rates(None) == platform_rates("google")

    def test_instagram(self):
        assert platform_rates("instagram")["cpc"] == 0.60
