"""
Investor pitch deck built from a stored business plan, and its share links.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from ai_cofounder.data import market
from ai_cofounder.data.industries import detect_plan_industry, for_industry
from ai_cofounder.models import PitchDeck

DECK_VERSION = "1.0"
SHARE_LINK_DAYS = 30

DEFAULT_SEGMENTS = ["Enterprise", "SMB", "Consumer", "Government"]
DEFAULT_PRICING = ["Subscription", "Transaction Fees", "Licensing", "Services"]
UNIT_ECONOMICS = "LTV: $2,400 | CAC: $120 | LTV/CAC: 20x | Payback: 6 months"


def company_name(idea: str) -> str:
    """First two words of the idea, capitalized and joined, plus a suffix."""
    words = idea.lower().split(" ")[:2]
    return "".join(w[:1].upper() + w[1:] for w in words) + market.COMPANY_SUFFIXES[0]


def build_pitch_deck(
    plan_id: int,
    idea: str,
    problem_statement: Optional[str] = None,
    pitch_deck_summary: Optional[Dict[str, Any]] = None,
    lean_canvas: Optional[Dict[str, Any]] = None,
    style: str = "modern",
    custom_message: Optional[str] = None,
    now: Optional[datetime] = None
) -> PitchDeck:
    """
    Ten slides from title to funding ask.

    The plan's pitch summary and lean canvas fill the slides where they
    have content; industry tables cover the rest. A custom message is
    appended to the problem and solution descriptions.
    """
    idea = idea or "Your startup idea"
    now = now or datetime.utcnow()
    industry = detect_plan_industry(idea)
    summary = pitch_deck_summary or {}
    canvas = lean_canvas or {}
    note = f"\n\nCustom requirements: {custom_message}" if custom_message else ""
    title = summary.get("title") or company_name(idea)

    slides: List[Dict[str, Any]] = [
        _slide("title", "Title Slide", {
            "companyName": title,
            "tagline": summary.get("tagline") or for_industry(market.TAGLINES, industry)[0],
            "presenter": "Founder & CEO",
            "date": now.year,
            "location": "Global",
        }),
        _slide("problem", "Problem", {
            "headline": summary.get("problem") or for_industry(market.PROBLEM_HEADLINES, industry),
            "description": (problem_statement or (
                f"Current solutions in the {industry} industry are inadequate, creating "
                "significant pain points for users and businesses. Our research shows that "
                f"{idea.lower()} addresses a critical gap in the market."
            )) + note,
            "stats": for_industry(market.PROBLEM_STATS, industry),
            "impact": "This problem affects millions of users and costs the industry billions "
                      "annually. Solving it represents a massive opportunity for innovation and growth.",
        }),
        _slide("solution", "Solution", {
            "headline": summary.get("solution") or f"Our {industry} Solution",
            "description": (summary.get("solution") or (
                f"We've developed an innovative {industry} solution that addresses the core "
                "problems through cutting-edge technology and user-centered design."
            )) + note,
            "features": (canvas.get("valuePropositions") or [])[:4]
                        or for_industry(market.SOLUTION_FEATURES, industry),
            "benefits": "Our solution delivers measurable improvements in efficiency, cost "
                        "reduction, and user satisfaction, creating significant value for all stakeholders.",
        }),
        _slide("market", "Market", {
            "headline": "Market Opportunity",
            "description": f"The {industry} market represents a massive opportunity with strong "
                           "growth trends and increasing demand for innovative solutions.",
            "marketSize": summary.get("marketSize") or for_industry(market.MARKET_SIZES, industry),
            "growth": f"{for_industry(market.CAGR, industry):g}% CAGR",
            "segments": canvas.get("customerSegments") or DEFAULT_SEGMENTS,
            "trends": for_industry(market.TRENDS, industry),
        }),
        _slide("business-model", "Business Model", {
            "headline": summary.get("businessModel") or f"{industry} Business Model",
            "description": "Our revenue model is designed for scalability and sustainability, with "
                           "multiple revenue streams and strong unit economics.",
            "pricing": canvas.get("revenueStreams") or DEFAULT_PRICING,
            "revenue": "Year 1: $500K | Year 2: $2M | Year 3: $8M",
            "unitEconomics": UNIT_ECONOMICS,
        }),
        _slide("traction", "Traction", {
            "headline": "Early Traction & Validation",
            "description": "We've achieved strong early traction with validated demand and "
                           "growing user engagement.",
            "metrics": ["500+ beta users", "85% user satisfaction",
                        "40% month-over-month growth", "3 pilot customers"],
            "milestones": ["Product development completed", "Beta testing launched",
                           "First paying customers", "Series A funding secured"],
            "partnerships": ["Strategic industry partnerships", "Technology integrations",
                             "Channel partnerships", "Academic collaborations"],
        }),
        _slide("competition", "Competition", {
            "headline": "Competitive Landscape",
            "description": "While competition exists, our unique approach and technology give us "
                           "significant advantages.",
            "competitors": canvas.get("keyPartners")
                           or [c["name"] for c in for_industry(market.COMPETITORS, industry)],
            "advantage": "Our proprietary technology, deep industry expertise, and customer-first "
                         "approach create sustainable competitive advantages.",
            "differentiation": "We differentiate through superior technology, better user "
                               "experience, and proven results.",
        }),
        _slide("team", "Team", {
            "headline": "Team & Advisors",
            "description": f"Our team combines deep {industry} expertise with proven technology "
                           "and business experience.",
            "members": ["CEO - Former industry executive",
                        "CTO - Technology leader with 10+ years experience",
                        "Head of Product - Product management expert",
                        "Head of Sales - Sales leader with proven track record"],
            "advisors": ["Industry veteran advisor", "Technology expert advisor",
                         "Business development advisor", "Financial advisor"],
            "hiring": ["Engineering team expansion", "Sales and marketing hires",
                       "Customer success team", "Operations and support"],
        }),
        _slide("financials", "Financial Projections", {
            "headline": "Financial Projections",
            "description": "Our financial projections show strong growth potential with healthy "
                           "unit economics and clear path to profitability.",
            "projections": ["Year 1: $500K revenue, $1.2M expenses",
                            "Year 2: $2M revenue, $2.5M expenses",
                            "Year 3: $8M revenue, $6M expenses",
                            "Break-even: Month 18"],
            "unitEconomics": UNIT_ECONOMICS,
            "assumptions": ["Customer acquisition cost: $120", "Customer lifetime value: $2,400",
                            "Monthly churn rate: 5%", "Gross margin: 80%"],
        }),
        _slide("funding", "Funding Ask", {
            "headline": summary.get("theAsk") or "$2M Series A Funding",
            "description": "We're seeking $2M in Series A funding to accelerate growth and "
                           "capture market opportunity.",
            "useOfFunds": ["40% - Product development", "30% - Sales and marketing",
                           "20% - Team expansion", "10% - Operations and infrastructure"],
            "milestones": ["Scale to 10,000 users", "Achieve $1M ARR",
                           "Expand to 3 new markets", "Build strategic partnerships"],
            "timeline": "18-month runway with clear milestones and metrics for Series B.",
        }),
    ]

    return PitchDeck.model_validate({
        "id": f"pitch-deck-{int(now.timestamp() * 1000)}",
        "title": title,
        "style": style,
        "slides": slides,
        "generated_at": now,
        "last_modified": now,
        "version": DECK_VERSION,
        "metadata": {
            "industry": industry,
            "idea": idea,
            "business_plan_id": plan_id,
            "total_slides": len(slides),
        },
    })


def _slide(slide_id: str, title: str, content: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": slide_id, "title": title, "content": content}


def share_expires_at(shared_at: datetime) -> datetime:
    return shared_at + timedelta(days=SHARE_LINK_DAYS)


def share_expired(shared_at: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """True when the link was never shared or is older than the share window."""
    if shared_at is None:
        return True
    return share_expires_at(shared_at) < (now or datetime.utcnow())
