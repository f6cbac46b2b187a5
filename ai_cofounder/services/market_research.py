"""
Market research report for a stored business plan.

The plan's own sections take precedence: its market size, competitor and
trend names are kept and enriched from the industry tables.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from ai_cofounder.data import market
from ai_cofounder.data.industries import detect_plan_industry, for_industry
from ai_cofounder.models import MarketResearchReport

DEFAULT_COMPETITOR = {
    "analysis": "AI-generated competitive analysis",
    "strengths": ["Market presence", "Brand recognition"],
    "weaknesses": ["High costs", "Limited innovation"],
}
DEFAULT_TREND = {"impact": "High", "description": "AI-analyzed market trend"}


def research_market(
    idea: str,
    pitch_deck_summary: Optional[Dict[str, Any]] = None,
    market_research: Optional[Dict[str, Any]] = None,
    customer_persona: Optional[Dict[str, Any]] = None,
    generated_at: Optional[datetime] = None
) -> MarketResearchReport:
    """
    Build the report from the plan's camelCase sections.

    At most three of the plan's competitors and trends are kept. Customer
    segments gain the persona's first two pain points.
    """
    industry = detect_plan_industry(idea)
    summary = pitch_deck_summary or {}
    research = market_research or {}
    cagr = for_industry(market.CAGR, industry)

    return MarketResearchReport.model_validate({
        "market_size": {
            "current": summary.get("marketSize") or for_industry(market.MARKET_SIZES, industry),
            "projected": f"{cagr:g}% CAGR over next 5 years",
            "unit": "USD",
            "growth": f"{cagr:g}%",
            "cagr": cagr,
        },
        "competitors": _competitors(industry, research.get("competitors") or []),
        "trends": _trends(industry, research.get("trends") or []),
        "customer_segments": _segments(industry, customer_persona),
        "opportunity_score": for_industry(market.OPPORTUNITY_SCORES, industry),
        "insights": list(for_industry(market.INSIGHTS, industry)),
        "generated_at": generated_at or datetime.utcnow(),
    })


def _competitors(industry: str, names: list) -> list:
    templates = for_industry(market.COMPETITORS, industry)
    if not names:
        return templates[:3]
    result = []
    for index, name in enumerate(names[:3]):
        template = templates[index] if index < len(templates) else DEFAULT_COMPETITOR
        result.append({
            "name": name,
            "analysis": template["analysis"],
            "strengths": template["strengths"],
            "weaknesses": template["weaknesses"],
        })
    return result


def _trends(industry: str, names: list) -> list:
    templates = for_industry(market.TRENDS, industry)
    if not names:
        return templates
    result = []
    for index, name in enumerate(names[:3]):
        template = templates[index] if index < len(templates) else DEFAULT_TREND
        result.append({
            "name": name,
            "impact": template["impact"],
            "description": template["description"],
        })
    return result


def _segments(industry: str, persona: Optional[Dict[str, Any]]) -> list:
    templates = for_industry(market.CUSTOMER_SEGMENTS, industry)
    if not persona:
        return templates
    extra = list(persona.get("painPoints") or [])[:2]
    return [{**segment, "painPoints": segment["painPoints"] + extra} for segment in templates]
