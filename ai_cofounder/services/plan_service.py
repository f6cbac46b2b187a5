"""
Business Plan Service - generates plans through the AI gateway and keeps
them as per-user documents.
"""

from datetime import datetime
from typing import Any, Dict, Optional
import copy
import logging
import math
import secrets

from sqlalchemy.ext.asyncio import AsyncSession

from ai_cofounder.core.events import event_bus, Event, EventType
from ai_cofounder.core.exceptions import ResourceNotFoundError, ShareLinkExpiredError
from ai_cofounder.database.models import BusinessPlan
from ai_cofounder.database.repositories import BusinessPlanRepository
from ai_cofounder.models import (
    BusinessPlanListResponse,
    BusinessPlanResponse,
    BusinessPlanUpdate,
    DashboardResponse,
    GeneratePlanRequest,
    MarketResearchReport,
    Pagination,
    PitchDeck,
    PitchDeckRequest,
    PitchDeckSlide,
    PlanStatus,
    ScenarioProjectionRequest,
    ScenarioProjectionResponse,
    SharedPitchDeckResponse,
    SharedPlanSummary,
    ShareLinkResponse,
    SharePermission,
)
from ai_cofounder.services import forecasts, market_research, pitch_deck
from ai_cofounder.services.ai_service import AIService
from ai_cofounder.services.dashboard import build_dashboard

logger = logging.getLogger(__name__)

# Plan sections stored as camelCase JSON documents
JSON_SECTIONS = (
    "customer_persona",
    "lean_canvas",
    "pitch_deck_summary",
    "market_research",
    "validation",
)

NULLABLE_FIELDS = ("industry", "stage", "challenge")


def build_enhanced_idea(request: GeneratePlanRequest) -> str:
    """Idea text with the optional form answers appended as context."""
    context = [
        f"{label}: {value}"
        for label, value in (
            ("Industry", request.industry),
            ("Development Stage", request.stage),
            ("Current Challenge", request.challenge),
        )
        if value
    ]
    if not context:
        return request.idea
    return f"{request.idea}\n\nAdditional Context:\n" + "\n".join(context)


def to_response(plan: BusinessPlan) -> BusinessPlanResponse:
    return BusinessPlanResponse.model_validate({
        "id": plan.id,
        "user_id": plan.user_id,
        "idea": plan.idea,
        "industry": plan.industry,
        "stage": plan.stage,
        "challenge": plan.challenge,
        "problem_statement": plan.problem_statement,
        **{section: getattr(plan, section) for section in JSON_SECTIONS},
        "financial_projections": plan.financial_projections,
        "market_research_data": plan.market_research_data,
        "pitch_deck": plan.pitch_deck,
        "source": plan.source,
        "provider": plan.provider,
        "status": plan.status,
        "tags": plan.tags or [],
        "is_public": plan.is_public,
        "created_at": plan.created_at,
        "updated_at": plan.updated_at,
    })


class BusinessPlanService:
    """
    Owner-scoped business plan documents.

    A plan owned by another user is reported exactly like a missing one.
    """

    def __init__(self, session: AsyncSession, ai_service: AIService):
        self._plans = BusinessPlanRepository(session)
        self._ai = ai_service

    async def generate_and_save(
        self,
        user_id: str,
        request: GeneratePlanRequest
    ) -> BusinessPlanResponse:
        """Generate a plan for the idea and store it for the user."""
        result = await self._ai.generate_business_plan(
            build_enhanced_idea(request),
            provider=request.api_provider
        )
        draft = result.plan

        plan = await self._plans.create(
            user_id,
            idea=request.idea,
            industry=request.industry,
            stage=request.stage,
            challenge=request.challenge,
            problem_statement=draft.problem_statement,
            **{
                section: getattr(draft, section).model_dump(by_alias=True)
                for section in JSON_SECTIONS
            },
            source=result.source.value,
            provider=result.provider,
            status=PlanStatus.COMPLETED.value,
            tags=[],
            is_public=False,
        )
        logger.info(
            f"Stored business plan {plan.id} for user {user_id} (source={result.source.value})")
        return to_response(plan)

    async def list_plans(
        self,
        user_id: str,
        page: int = 1,
        limit: int = 10,
        status: Optional[PlanStatus] = None
    ) -> BusinessPlanListResponse:
        """Plans of the user, newest first."""
        page = max(1, page)
        plans, total = await self._plans.list_for_user(
            user_id,
            status=status.value if status else None,
            limit=limit,
            offset=(page - 1) * limit
        )
        return BusinessPlanListResponse(
            business_plans=[to_response(p) for p in plans],
            pagination=Pagination(
                current=page,
                pages=math.ceil(total / limit) if limit else 0,
                total=total
            )
        )

    async def get_plan(self, user_id: str, plan_id: int) -> BusinessPlanResponse:
        return to_response(await self._require(user_id, plan_id))

    async def update_plan(
        self,
        user_id: str,
        plan_id: int,
        update: BusinessPlanUpdate
    ) -> BusinessPlanResponse:
        """Apply the fields set in `update`."""
        plan = await self._require(user_id, plan_id)

        values: Dict[str, Any] = {}
        for field in update.model_fields_set:
            value = getattr(update, field)
            if value is None and field not in NULLABLE_FIELDS:
                continue
            if field in JSON_SECTIONS and value is not None:
                value = value.model_dump(by_alias=True)
            elif field == "status" and value is not None:
                value = value.value
            values[field] = value

        plan = await self._plans.update(plan, values)
        return to_response(plan)

    async def delete_plan(self, user_id: str, plan_id: int) -> None:
        if not await self._plans.delete(plan_id, user_id):
            raise ResourceNotFoundError("BusinessPlan", str(plan_id))
        logger.info(f"Deleted business plan {plan_id} for user {user_id}")

    # ------------------------------------------------------------------
    # Plan workspace
    # ------------------------------------------------------------------

    async def project_plan_financials(
        self,
        user_id: str,
        request: ScenarioProjectionRequest
    ) -> ScenarioProjectionResponse:
        """Three-year scenario projection, saved on the plan."""
        plan = await self._require(user_id, request.business_plan_id)
        streams = (plan.lean_canvas or {}).get("revenueStreams")

        result = forecasts.project_scenario(
            plan.idea,
            revenue_streams=streams,
            initial_funding=request.initial_funding,
            growth_rate=request.growth_rate,
            monthly_costs=request.monthly_costs,
            revenue_per_user=request.revenue_per_user,
            initial_users=request.initial_users,
            scenario=request.scenario
        )
        await self._plans.update(plan, {
            "financial_projections": result.model_dump(by_alias=True, mode="json")
        })
        await event_bus.publish(Event(
            type=EventType.PROJECTIONS_SAVED,
            data={"plan_id": plan.id, "scenario": request.scenario.value},
            source="plan_service"
        ))
        return result

    async def research_market(self, user_id: str, plan_id: int) -> MarketResearchReport:
        """Market research report, saved on the plan."""
        plan = await self._require(user_id, plan_id)
        report = market_research.research_market(
            plan.idea,
            pitch_deck_summary=plan.pitch_deck_summary,
            market_research=plan.market_research,
            customer_persona=plan.customer_persona
        )
        await self._plans.update(plan, {
            "market_research_data": report.model_dump(by_alias=True, mode="json")
        })
        await event_bus.publish(Event(
            type=EventType.MARKET_RESEARCH_SAVED,
            data={"plan_id": plan.id},
            source="plan_service"
        ))
        return report

    async def generate_pitch_deck(self, user_id: str, request: PitchDeckRequest) -> PitchDeck:
        """Build a fresh deck for the plan, replacing any earlier one."""
        plan = await self._require(user_id, request.business_plan_id)
        now = datetime.utcnow()
        deck = pitch_deck.build_pitch_deck(
            plan.id,
            plan.idea,
            problem_statement=plan.problem_statement,
            pitch_deck_summary=plan.pitch_deck_summary,
            lean_canvas=plan.lean_canvas,
            style=request.style,
            custom_message=request.custom_message,
            now=now
        )
        await self._plans.update(plan, {
            "pitch_deck": deck.model_dump(by_alias=True, mode="json"),
            "pitch_deck_generated_at": now,
        })
        logger.info(f"Generated pitch deck for plan {plan.id} with {len(deck.slides)} slides")

        await event_bus.publish(Event(
            type=EventType.PITCH_DECK_GENERATED,
            data={"plan_id": plan.id, "slides": len(deck.slides)},
            source="plan_service"
        ))
        return deck

    async def update_slide(
        self,
        user_id: str,
        plan_id: int,
        slide_id: str,
        content: Dict[str, Any]
    ) -> PitchDeckSlide:
        """Merge `content` into one slide of the plan's deck."""
        plan = await self._require(user_id, plan_id)
        if not plan.pitch_deck:
            raise ResourceNotFoundError("PitchDeck", str(plan_id))

        deck = copy.deepcopy(plan.pitch_deck)
        slide = next((s for s in deck.get("slides", []) if s.get("id") == slide_id), None)
        if slide is None:
            raise ResourceNotFoundError("Slide", slide_id)

        slide["content"] = {**slide.get("content", {}), **content}
        deck["lastModified"] = datetime.utcnow().isoformat()
        await self._plans.update(plan, {"pitch_deck": deck})
        return PitchDeckSlide.model_validate(slide)

    async def share_pitch_deck(
        self,
        user_id: str,
        plan_id: int,
        permissions: SharePermission,
        frontend_url: str
    ) -> ShareLinkResponse:
        """
        Issue a new share link for the plan's deck.

        Any earlier link of the plan stops working.
        """
        plan = await self._require(user_id, plan_id)
        if not plan.pitch_deck:
            raise ResourceNotFoundError("PitchDeck", str(plan_id))

        token = secrets.token_hex(32)
        shared_at = datetime.utcnow()
        await self._plans.update(plan, {
            "share_token": token,
            "share_permissions": permissions.value,
            "shared_at": shared_at,
        })
        logger.info(f"Shared pitch deck of plan {plan.id} ({permissions.value})")

        await event_bus.publish(Event(
            type=EventType.PITCH_DECK_SHARED,
            data={"plan_id": plan.id, "permissions": permissions.value},
            source="plan_service"
        ))
        return ShareLinkResponse(
            share_url=f"{frontend_url.rstrip('/')}/pitch-deck/shared/{token}",
            share_token=token,
            permissions=permissions,
            expires_at=pitch_deck.share_expires_at(shared_at)
        )

    async def get_shared_pitch_deck(self, token: str) -> SharedPitchDeckResponse:
        """
        Deck behind a share link. No ownership check.

        Raises:
            ResourceNotFoundError: unknown token or the deck is gone.
            ShareLinkExpiredError: the link is older than the share window.
        """
        plan = await self._plans.get_by_share_token(token)
        if plan is None or not plan.pitch_deck:
            raise ResourceNotFoundError("SharedPitchDeck", token)
        if pitch_deck.share_expired(plan.shared_at):
            raise ShareLinkExpiredError(
                "Shared link has expired",
                details={"expired_at": pitch_deck.share_expires_at(plan.shared_at).isoformat()}
            )

        return SharedPitchDeckResponse(
            pitch_deck=PitchDeck.model_validate(plan.pitch_deck),
            business_plan=SharedPlanSummary(
                idea=plan.idea,
                company_name=(plan.pitch_deck_summary or {}).get("title") or "Startup"
            )
        )

    async def dashboard(self, user_id: str) -> DashboardResponse:
        plans = await self._plans.all_for_user(user_id)
        return build_dashboard(plans)

    async def _require(self, user_id: str, plan_id: int) -> BusinessPlan:
        plan = await self._plans.get_for_user(plan_id, user_id)
        if plan is None:
            raise ResourceNotFoundError("BusinessPlan", str(plan_id))
        return plan
