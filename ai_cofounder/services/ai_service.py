"""
AI Service - turns a raw startup idea into a structured business plan and
validation assets.

Providers are tried in order (requested provider, then the configured
fallback order); the first reply that parses and satisfies the JSON contract
wins. When every provider fails the deterministic mock content is returned.
Results always carry a `source` tag so callers can tell the two apart.
"""

from typing import Any, Awaitable, Callable, List, Optional, Union
import asyncio
import json
import logging
import re

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ai_cofounder.config import Settings, get_settings
from ai_cofounder.core.protocols import LLMConfig, LLMProvider
from ai_cofounder.core.providers import get_llm, registry
from ai_cofounder.core.exceptions import ValidationError, ProviderResponseError
from ai_cofounder.core.events import event_bus, Event, EventType
from ai_cofounder.models import (
    AdCampaign,
    BusinessPlanDraft,
    ContentSource,
    LandingPage,
    PlanGenerationResult,
    ValidationContentResult,
    ValidationType,
)
from ai_cofounder.services import mock_content

# Registers the LLM providers
import ai_cofounder.providers  # noqa: F401

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[str, LLMConfig], Awaitable[LLMProvider]]

SYSTEM_PROMPT = (
    'You are "AI Co-Founder," an expert startup consultant for students. '
    "Answer with a single JSON value and nothing else."
)

BUSINESS_PLAN_PROMPT = """
You are "AI Co-Founder," an expert startup consultant for students. Your task is to refine a raw startup idea into a comprehensive and actionable plan.
For the idea: "{idea}", provide the following outputs in a single, clean JSON format. Do not include any text, notes, or markdown formatting like ```json before or after the JSON object.

The JSON object should have these exact keys:
1. "problemStatement": A concise, powerful paragraph detailing the core problem the startup solves.
2. "customerPersona": A brief profile of the primary target customer. Include keys for "name", "age", "occupation", "painPoints" (an array of strings), and "goals" (an array of strings).
3. "leanCanvas": An object where each key is a component of the Lean Business Model Canvas. The keys must be: "keyPartners", "keyActivities", "valuePropositions", "customerRelationships", "customerSegments", "keyResources", "channels", "costStructure", "revenueStreams". Each value should be an array of actionable bullet points (strings).
4. "pitchDeckSummary": An object representing a one-page investor pitch. The keys must be: "title", "tagline", "problem", "solution", "marketSize", "businessModel", "theAsk". Each value should be a short, compelling string.
5. "marketResearch": An object containing market analysis data. It must contain these keys:
   - "marketSize": A string describing the total addressable market size (e.g., "$2.3B addressable market").
   - "competitors": An array of 3-5 competitor names or companies in this space.
   - "trends": An array of 3-5 key market trends affecting this industry.
6. "validation": An object for idea validation assets. It must contain these keys:
   - "surveyQuestions": An array of 5 insightful questions to ask potential customers.
   - "landingPage": An object with keys "headline", "subheading", and "callToAction".
   - "adCampaign": An object with keys "adCopy" (a short, punchy ad text) and "keywords" (an array of 5 relevant keywords).
"""

VALIDATION_PROMPTS = {
    ValidationType.SURVEY: (
        'Generate 5 insightful survey questions to validate the startup idea: "{idea}". '
        "Focus on understanding customer pain points, willingness to pay, and market demand. "
        "Return as JSON array."
    ),
    ValidationType.LANDING_PAGE: (
        'Create compelling landing page content for the startup idea: "{idea}". '
        "Include headline, subheading, and call-to-action. "
        "Return as JSON object with keys: headline, subheading, callToAction."
    ),
    ValidationType.AD_COPY: (
        'Create effective ad copy and keywords for the startup idea: "{idea}". '
        "Return as JSON object with keys: adCopy (string) and keywords (array of 5 strings)."
    ),
}

_SURVEY_ADAPTER = TypeAdapter(List[str])

_RAW_EXCERPT_LENGTH = 200

# Opening fence with an optional language tag ("```json")
_OPENING_FENCE = re.compile(r"^```[\w+-]*\s*")


def strip_code_fences(content: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```) if present."""
    sanitized = _OPENING_FENCE.sub("", content.strip(), count=1)
    if sanitized.endswith("```"):
        sanitized = sanitized[:-3]
    return sanitized.strip()


def parse_json_reply(raw: str, provider: str) -> Any:
    """Parse a provider reply as JSON, tolerating a code fence wrapper."""
    try:
        return json.loads(strip_code_fences(raw or ""))
    except json.JSONDecodeError as e:
        raise ProviderResponseError(
            message=f"Reply is not valid JSON: {e.msg}",
            provider=provider,
            raw_excerpt=(raw or "")[:_RAW_EXCERPT_LENGTH],
            original_error=e
        )


def build_business_plan_prompt(idea: str) -> str:
    return BUSINESS_PLAN_PROMPT.format(idea=idea)


def build_validation_prompt(idea: str, content_type: ValidationType) -> str:
    return VALIDATION_PROMPTS[content_type].format(idea=idea)


class AIService:
    """
    Gateway to the generative providers with a mock fallback.

    Caller mistakes (blank idea, unknown provider, unknown content type) raise
    ValidationError. Provider failures never do: they are logged, published
    as PROVIDER_ERROR events and end in the next provider or the mock.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider_factory: Optional[ProviderFactory] = None
    ):
        self.settings = settings or get_settings()
        self._provider_factory = provider_factory or get_llm

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def generate_business_plan(
        self,
        idea: str,
        provider: Optional[str] = None
    ) -> PlanGenerationResult:
        """Generate a business plan for an idea."""
        idea = self._require_idea(idea)
        candidates = self.provider_order(provider)
        prompt = build_business_plan_prompt(idea)

        def to_plan(data: Any, provider_name: str) -> BusinessPlanDraft:
            if not isinstance(data, dict):
                raise ProviderResponseError(
                    message="Business plan reply is not a JSON object",
                    provider=provider_name
                )
            return BusinessPlanDraft.model_validate({**data, "idea": idea})

        plan, used = await self._first_valid_reply(candidates, prompt, to_plan)

        if plan is None:
            plan = BusinessPlanDraft.model_validate(
                {**mock_content.mock_business_plan(idea), "idea": idea}
            )
            await self._publish_fallback("business_plan", idea, candidates)
            result = PlanGenerationResult(source=ContentSource.MOCK, plan=plan)
        else:
            result = PlanGenerationResult(
                source=ContentSource.PROVIDER, provider=used, plan=plan
            )

        await event_bus.publish(Event(
            type=EventType.PLAN_GENERATED,
            data={"idea": idea, "source": result.source.value, "provider": result.provider},
            source="ai_service"
        ))
        return result

    async def generate_validation_content(
        self,
        idea: str,
        content_type: Union[str, ValidationType],
        provider: Optional[str] = None
    ) -> ValidationContentResult:
        """Generate survey questions, landing page copy or ad copy for an idea."""
        content_type = self._require_content_type(content_type)
        idea = self._require_idea(idea)
        candidates = self.provider_order(provider)
        prompt = build_validation_prompt(idea, content_type)

        def to_content(data: Any, provider_name: str) -> Any:
            if content_type == ValidationType.SURVEY:
                return _SURVEY_ADAPTER.validate_python(data)
            if content_type == ValidationType.LANDING_PAGE:
                return LandingPage.model_validate(data)
            return AdCampaign.model_validate(data)

        content, used = await self._first_valid_reply(candidates, prompt, to_content)

        if content is None:
            content = mock_content.mock_validation_content(idea, content_type.value)
            await self._publish_fallback(content_type.value, idea, candidates)
            result = ValidationContentResult(
                type=content_type, source=ContentSource.MOCK, content=content
            )
        else:
            result = ValidationContentResult(
                type=content_type, source=ContentSource.PROVIDER,
                provider=used, content=content
            )

        await event_bus.publish(Event(
            type=EventType.VALIDATION_CONTENT_GENERATED,
            data={"type": content_type.value, "source": result.source.value},
            source="ai_service"
        ))
        return result

    # ------------------------------------------------------------------
    # Provider selection
    # ------------------------------------------------------------------

    def provider_order(self, requested: Optional[str] = None) -> List[str]:
        """
        Providers to try, in order.

        The requested provider (or the default) comes first, followed by the
        rest of LLM_FALLBACK_ORDER. Providers without an API key are left
        out, so the list may be empty.

        Raises:
            ValidationError: if the requested provider is not registered.
        """
        name = (requested or self.settings.default_llm_provider).strip().lower()
        if registry.get_class(name) is None:
            raise ValidationError(
                f"Unknown AI provider '{name}'. "
                f"Available: {', '.join(registry.names())}",
                field="api_provider"
            )

        order = [name]
        for candidate in self.settings.parsed_fallback_order():
            if candidate not in order and registry.get_class(candidate):
                order.append(candidate)

        return [p for p in order if self.settings.is_provider_configured(p)]

    def available_providers(self) -> List[str]:
        """Registered providers that have an API key."""
        return [
            name for name in registry.names()
            if self.settings.is_provider_configured(name)
        ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _first_valid_reply(
        self,
        candidates: List[str],
        prompt: str,
        convert: Callable[[Any, str], Any]
    ):
        """Return (content, provider) from the first provider that succeeds."""
        for name in candidates:
            try:
                raw = await self._call_provider(name, prompt)
                data = parse_json_reply(raw, name)
                try:
                    return convert(data, name), name
                except PydanticValidationError as e:
                    raise ProviderResponseError(
                        message=f"Reply does not match the expected keys: {e.error_count()} error(s)",
                        provider=name,
                        raw_excerpt=raw[:_RAW_EXCERPT_LENGTH],
                        original_error=e
                    )
            except asyncio.TimeoutError:
                await self._record_provider_failure(
                    name, f"timed out after {self.settings.ai_timeout_seconds}s"
                )
            except Exception as e:
                await self._record_provider_failure(name, str(e))

        return None, None

    async def _call_provider(self, name: str, prompt: str) -> str:
        llm_settings = self.settings.get_llm_config(name)
        config = LLMConfig(
            model_name=llm_settings.get("model", ""),
            system_prompt=SYSTEM_PROMPT
        )
        provider = await self._provider_factory(name, config)
        return await asyncio.wait_for(
            provider.generate_text(prompt),
            timeout=self.settings.ai_timeout_seconds
        )

    async def _record_provider_failure(self, name: str, reason: str) -> None:
        logger.warning(f"Provider {name} failed, trying next option: {reason}")
        await event_bus.publish(Event(
            type=EventType.PROVIDER_ERROR,
            data={"provider": name, "error": reason},
            source="ai_service"
        ))

    async def _publish_fallback(self, kind: str, idea: str, tried: List[str]) -> None:
        if tried:
            logger.warning(f"All providers failed for {kind}, serving mock content")
        else:
            logger.info(f"No AI provider configured, serving mock {kind}")
        await event_bus.publish(Event(
            type=EventType.MOCK_FALLBACK_USED,
            data={"kind": kind, "idea": idea, "providers_tried": tried},
            source="ai_service"
        ))

    @staticmethod
    def _require_idea(idea: Optional[str]) -> str:
        if idea is None or not idea.strip():
            raise ValidationError("Idea cannot be empty", field="idea")
        return idea.strip()

    @staticmethod
    def _require_content_type(content_type: Union[str, ValidationType]) -> ValidationType:
        try:
            return ValidationType(content_type)
        except ValueError:
            allowed = ", ".join(t.value for t in ValidationType)
            raise ValidationError(
                f"Invalid validation type '{content_type}'. Must be one of: {allowed}",
                field="type"
            )


_ai_service: Optional[AIService] = None


def get_ai_service() -> AIService:
    """Get the shared AI service."""
    global _ai_service
    if _ai_service is None:
        _ai_service = AIService()
    return _ai_service
