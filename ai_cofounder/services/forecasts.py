"""
Three-year financial projection of a business plan under a scenario.

Growth slows as the user base approaches the reachable market, users churn
every month, revenue follows the industry's seasonality and costs scale up
by 2% a month (capped at +50%).
"""

from typing import Dict, List, Optional, Sequence

from ai_cofounder.core.rounding import round_half_up
from ai_cofounder.data.industries import (
    DEFAULT_REVENUE_STREAMS,
    EXPENSE_SPLIT,
    FINANCE,
    REVENUE_STREAM_SHARES,
    SEASONALITY,
    IndustryFinance,
    detect_plan_industry,
    for_industry,
)
from ai_cofounder.models import (
    FundingRequirements,
    MarketAnalysis,
    Scenario,
    ScenarioMonth,
    ScenarioProjectionResponse,
    ScenarioSummary,
    UnitEconomics,
)

FORECAST_MONTHS = 36
MONTHLY_COST_GROWTH = 0.02
MAX_COST_SCALE = 1.5

# revenue multiplier, growth factor, cost factor, market penetration
SCENARIOS: Dict[Scenario, Dict[str, float]] = {
    Scenario.CONSERVATIVE: {"revenue": 0.7, "growth": 0.8, "cost": 1.1, "penetration": 0.5},
    Scenario.REALISTIC: {"revenue": 1.0, "growth": 1.0, "cost": 1.0, "penetration": 1.0},
    Scenario.OPTIMISTIC: {"revenue": 1.3, "growth": 1.2, "cost": 0.9, "penetration": 1.5},
}

EXPENSE_SCENARIO_FACTORS: Dict[Scenario, Dict[str, float]] = {
    Scenario.CONSERVATIVE: {"development": 1.1, "marketing": 0.9, "operations": 1.0, "admin": 1.0},
    Scenario.REALISTIC: {"development": 1.0, "marketing": 1.0, "operations": 1.0, "admin": 1.0},
    Scenario.OPTIMISTIC: {"development": 0.9, "marketing": 1.1, "operations": 0.9, "admin": 0.9},
}


def seasonality(month: int, industry: str) -> float:
    """Revenue multiplier for a projection month (month 1 is January)."""
    factors = SEASONALITY.get(industry)
    if not factors:
        return 1.0
    return factors[(month - 1) % 12]


def project_scenario(
    idea: str,
    revenue_streams: Optional[Sequence[str]] = None,
    initial_funding: float = 10000,
    growth_rate: float = 20,
    monthly_costs: float = 5000,
    revenue_per_user: float = 10,
    initial_users: float = 100,
    scenario: Scenario = Scenario.REALISTIC
) -> ScenarioProjectionResponse:
    """
    Project a plan month by month for three years.

    A zero input is replaced by the default of the idea's industry before
    the scenario factors are applied.
    """
    industry = detect_plan_industry(idea)
    finance: IndustryFinance = for_industry(FINANCE, industry)
    factors = SCENARIOS[scenario]

    growth = (growth_rate or finance.growth_rate) * factors["growth"] / 100
    arpu = (revenue_per_user or finance.arpu) * factors["revenue"]
    base_costs = (monthly_costs or finance.monthly_costs) * factors["cost"]
    market_share = finance.target_market_share * factors["penetration"]
    max_users = round_half_up(finance.market_size * market_share / arpu)
    churn = finance.churn_rate / 100

    funding = float(initial_funding or finance.initial_funding)
    users = float(initial_users or finance.initial_users)

    months: List[ScenarioMonth] = []
    for month in range(1, FORECAST_MONTHS + 1):
        users *= min(1 + growth, 1 + growth * (1 - users / max_users))
        users *= 1 - churn
        users = min(users, max_users)

        revenue = users * arpu * seasonality(month, industry)
        costs = base_costs * min(1 + month * MONTHLY_COST_GROWTH, MAX_COST_SCALE)
        net_profit = revenue - costs
        funding += net_profit

        months.append(ScenarioMonth(
            month=month,
            users=round_half_up(users),
            revenue=round_half_up(revenue, 2),
            costs=round_half_up(costs, 2),
            net_profit=round_half_up(net_profit, 2),
            runway=round_half_up(funding, 2),
            market_share=round_half_up(users / max_users * 100, 2)
        ))

    break_even_month = next((m.month for m in months if m.net_profit >= 0), None)
    final_users = months[-1].users

    return ScenarioProjectionResponse(
        projections=[m for m in months if m.month % 12 == 0],
        monthly_projections=months,
        summary=ScenarioSummary(
            break_even_month=break_even_month,
            total_revenue=round_half_up(sum(m.revenue for m in months), 2),
            total_costs=round_half_up(sum(m.costs for m in months), 2),
            final_runway=round_half_up(funding, 2),
            final_users=final_users,
            max_market_share=round_half_up(final_users / max_users * 100, 2),
            scenario=scenario,
            industry=industry
        ),
        metrics=UnitEconomics(
            arpu=round_half_up(arpu, 2),
            churn_rate=finance.churn_rate,
            cac=finance.cac,
            ltv_cac=round_half_up(arpu * 12 / finance.cac, 2),
            ltv=round_half_up(arpu * 12, 2),
            gross_margin=round_half_up((arpu - finance.cost_per_user) / arpu * 100, 2)
        ),
        funding_requirements=funding_requirements(months, finance),
        expense_breakdown=expense_breakdown(industry, scenario),
        revenue_breakdown=revenue_breakdown(revenue_streams),
        market_analysis=MarketAnalysis(
            market_size=finance.market_size,
            target_market_share=round_half_up(market_share * 100, 2),
            max_users=max_users,
            industry=industry
        )
    )


def funding_requirements(
    months: Sequence[ScenarioMonth],
    finance: IndustryFinance
) -> FundingRequirements:
    """Seed and Series A sizing from the months that lose money."""
    losses = [m.net_profit for m in months if m.net_profit < 0]
    total_loss = abs(sum(losses))
    first_empty = next((i for i, m in enumerate(months) if m.runway <= 0), -1)

    return FundingRequirements(
        seed_round=round_half_up(max(total_loss * 1.5, finance.initial_funding), 2),
        series_a=round_half_up(max(total_loss * 3, finance.initial_funding * 5), 2),
        runway_months=first_empty if first_empty > 0 else len(months),
        burn_rate=round_half_up(total_loss / max(len(losses), 1), 2),
        profitability_month=next((m.month for m in months if m.net_profit >= 0), None)
    )


def expense_breakdown(industry: str, scenario: Scenario) -> Dict[str, int]:
    """Percent of spend per category, shifted by the scenario."""
    split = for_industry(EXPENSE_SPLIT, industry)
    factors = EXPENSE_SCENARIO_FACTORS[scenario]
    return {
        category: round_half_up(share * factors[category])
        for category, share in split.items()
    }


def revenue_breakdown(revenue_streams: Optional[Sequence[str]]) -> Dict[str, float]:
    """
    Percent of revenue for the first three streams.

    Known streams take their usual share; others split what is left evenly.
    Shares never exceed 100 in total.
    """
    streams = [s for s in (revenue_streams or []) if s] or list(DEFAULT_REVENUE_STREAMS)
    remaining = 100.0
    result: Dict[str, float] = {}
    for index, stream in enumerate(streams[:3]):
        share = REVENUE_STREAM_SHARES.get(stream) or remaining / (len(streams) - index)
        result[stream] = round_half_up(min(share, remaining), 2)
        remaining -= result[stream]
    return result
