"""
Planning calculators: six-month financial projection and ad campaign estimate.
"""

from typing import Dict, List, Optional

from ai_cofounder.core.exceptions import ValidationError
from ai_cofounder.core.rounding import round_half_up
from ai_cofounder.models import (
    AdMetrics,
    AdSimulationResponse,
    FinancialProjectionResponse,
    MonthlyProjection,
    ProjectionSummary,
)

PROJECTION_MONTHS = 6

# Average cost per click, click-through rate and lead conversion per platform
PLATFORM_RATES: Dict[str, Dict[str, float]] = {
    "google": {"cpc": 1.50, "ctr": 0.025, "conversion_rate": 0.15},
    "facebook": {"cpc": 0.80, "ctr": 0.015, "conversion_rate": 0.12},
    "instagram": {"cpc": 0.60, "ctr": 0.020, "conversion_rate": 0.18},
}
DEFAULT_PLATFORM = "google"
DEFAULT_AD_KEYWORDS = ["startup", "innovation", "business", "technology", "growth"]


def project_financials(
    initial_funding: float = 10000,
    growth_rate: float = 20,
    monthly_costs: float = 5000,
    revenue_per_user: float = 10,
    initial_users: float = 100
) -> FinancialProjectionResponse:
    """
    Month-by-month users, revenue and runway.

    Each month earns users * revenue_per_user, pays monthly_costs and adds
    the net to the runway; users then grow by growth_rate percent.
    """
    users = float(initial_users)
    runway = float(initial_funding)
    projections: List[MonthlyProjection] = []
    break_even_month: Optional[int] = None

    for month in range(1, PROJECTION_MONTHS + 1):
        revenue = users * revenue_per_user
        net_profit = revenue - monthly_costs
        runway += net_profit

        if break_even_month is None and net_profit >= 0:
            break_even_month = month

        projections.append(MonthlyProjection(
            month=month,
            users=round_half_up(users),
            revenue=round_half_up(revenue, 2),
            costs=round_half_up(monthly_costs, 2),
            net_profit=round_half_up(net_profit, 2),
            runway=round_half_up(runway, 2)
        ))

        users *= 1 + growth_rate / 100

    summary = ProjectionSummary(
        break_even_month=break_even_month,
        total_revenue=round_half_up(sum(p.revenue for p in projections), 2),
        total_costs=round_half_up(monthly_costs * PROJECTION_MONTHS, 2),
        final_runway=round_half_up(runway, 2)
    )
    return FinancialProjectionResponse(projections=projections, summary=summary)


def platform_rates(platform: Optional[str]) -> Dict[str, float]:
    """
    Rates for an ad platform (google when none is given).

    Raises:
        ValidationError: if the platform is unknown.
    """
    name = (platform or DEFAULT_PLATFORM).strip().lower()
    rates = PLATFORM_RATES.get(name)
    if rates is None:
        raise ValidationError(
            f"Unknown ad platform '{platform}'. "
            f"Must be one of: {', '.join(PLATFORM_RATES)}",
            field="platform"
        )
    return rates


def simulate_ad_campaign(
    budget: float = 500,
    keywords: Optional[List[str]] = None,
    platform: Optional[str] = None
) -> AdSimulationResponse:
    """Estimated reach of a paid campaign at the platform's CTR, CPC and conversion."""
    name = (platform or DEFAULT_PLATFORM).strip().lower()
    rates = platform_rates(name)

    clicks = budget / rates["cpc"]
    impressions = clicks / rates["ctr"]
    leads = clicks * rates["conversion_rate"]
    keywords = [k.strip() for k in (keywords or []) if k.strip()]

    return AdSimulationResponse(
        budget=budget,
        platform=name,
        impressions=round_half_up(impressions),
        clicks=round_half_up(clicks),
        leads=round_half_up(leads),
        metrics=AdMetrics(
            ctr=f"{rates['ctr'] * 100:.2f}%",
            cpc=f"${rates['cpc']:.2f}",
            conversion_rate=f"{rates['conversion_rate'] * 100:.0f}%"
        ),
        keywords=keywords or list(DEFAULT_AD_KEYWORDS)
    )
