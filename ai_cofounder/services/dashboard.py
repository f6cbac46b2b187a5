"""
Progress dashboard over a user's business plans.

Plans are given newest first; the newest one drives the progress figure
and the suggested next steps.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from ai_cofounder.core.rounding import round_half_up
from ai_cofounder.database.models import BusinessPlan
from ai_cofounder.models import (
    ActivityItem,
    CurrentPlanSummary,
    DashboardResponse,
    DashboardStats,
    NextStep,
    PlanStatus,
)

RECENT_ACTIVITY_LIMIT = 5
NEXT_STEPS_LIMIT = 3

# Plan attributes counted as completed workflow steps, in workflow order
PROGRESS_FIELDS = (
    "idea",
    "problem_statement",
    "market_research_data",
    "lean_canvas",
    "validation",
    "financial_projections",
    "pitch_deck_summary",
)

FIRST_STEP = NextStep(
    id=1,
    title="Submit Your First Idea",
    description="Start your startup journey by submitting your business idea",
    priority="high",
    due_date="Today",
)

# (plan attribute, step) offered while the attribute is empty
STEPS = (
    ("problem_statement", NextStep(
        id=1, title="Refine Problem Statement",
        description="Define and validate your problem statement",
        priority="high", due_date="In 2 days")),
    ("market_research_data", NextStep(
        id=2, title="Complete Market Research",
        description="Analyze market size, competitors, and trends",
        priority="high", due_date="In 1 week")),
    ("lean_canvas", NextStep(
        id=3, title="Define Business Model",
        description="Create your lean canvas and business model",
        priority="medium", due_date="In 1 week")),
    ("validation", NextStep(
        id=4, title="Run Validation Experiments",
        description="Test your assumptions with real users",
        priority="medium", due_date="In 2 weeks")),
    ("financial_projections", NextStep(
        id=5, title="Create Financial Projections",
        description="Build financial models and projections",
        priority="low", due_date="In 2 weeks")),
    ("pitch_deck_summary", NextStep(
        id=6, title="Create Pitch Deck",
        description="Build your investor presentation",
        priority="low", due_date="In 3 weeks")),
)


def format_time_ago(moment: datetime, now: Optional[datetime] = None) -> str:
    """Coarse relative time: seconds, minutes, hours, days, then 30-day months."""
    seconds = int(((now or datetime.utcnow()) - moment).total_seconds())
    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{seconds // 60} minutes ago"
    if seconds < 86400:
        return f"{seconds // 3600} hours ago"
    if seconds < 2592000:
        return f"{seconds // 86400} days ago"
    return f"{seconds // 2592000} months ago"


def plan_progress(plan: Optional[BusinessPlan]) -> int:
    """Percent of workflow steps the plan has content for."""
    if plan is None:
        return 0
    done = sum(1 for field in PROGRESS_FIELDS if getattr(plan, field))
    return round_half_up(done / len(PROGRESS_FIELDS) * 100)


def next_steps(plan: Optional[BusinessPlan]) -> List[NextStep]:
    """Up to three steps still open on the plan."""
    if plan is None:
        return [FIRST_STEP]
    return [step for field, step in STEPS if not getattr(plan, field)][:NEXT_STEPS_LIMIT]


def _count(plans: Sequence[BusinessPlan], field: str) -> int:
    return sum(1 for plan in plans if getattr(plan, field))


def build_dashboard(
    plans: Sequence[BusinessPlan],
    now: Optional[datetime] = None
) -> DashboardResponse:
    now = now or datetime.utcnow()
    current = plans[0] if plans else None

    summary = None
    if current is not None:
        revenue_streams = (current.lean_canvas or {}).get("revenueStreams") or []
        opportunity = (current.market_research_data or {}).get("opportunityScore") or {}
        summary = CurrentPlanSummary(
            id=current.id,
            idea=current.idea,
            status=current.status or PlanStatus.COMPLETED.value,
            progress=plan_progress(current),
            business_model=revenue_streams[0] if revenue_streams else "TBD",
            market_score=opportunity.get("overall") or 0
        )

    return DashboardResponse(
        stats=DashboardStats(
            ideas_submitted=len(plans),
            problem_refined=_count(plans, "problem_statement"),
            market_research=_count(plans, "market_research_data"),
            business_model=_count(plans, "lean_canvas"),
            experiments=_count(plans, "validation"),
            financial_projections=_count(plans, "financial_projections"),
            pitch_deck=_count(plans, "pitch_deck_summary")
        ),
        recent_activity=[
            ActivityItem(
                id=plan.id,
                title=plan.idea or "Untitled Idea",
                date=format_time_ago(plan.created_at, now),
                status=plan.status or PlanStatus.COMPLETED.value
            )
            for plan in plans[:RECENT_ACTIVITY_LIMIT]
        ],
        next_steps=next_steps(current),
        current_business_plan=summary,
        total_business_plans=len(plans)
    )
