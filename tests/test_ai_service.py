"""
Unit tests for the AI gateway: provider ordering, reply parsing and the mock
fallback.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from ai_cofounder.core.events import event_bus, EventType
from ai_cofounder.core.exceptions import LLMProviderError, ProviderResponseError, ValidationError
from ai_cofounder.models import ContentSource, LandingPage, AdCampaign
from ai_cofounder.services import mock_content
from ai_cofounder.services.ai_service import AIService, parse_json_reply, strip_code_fences

LEAN_CANVAS_KEYS = {
    "keyPartners", "keyActivities", "valuePropositions", "customerRelationships",
    "customerSegments", "keyResources", "channels", "costStructure", "revenueStreams",
}
PITCH_DECK_KEYS = {
    "title", "tagline", "problem", "solution", "marketSize", "businessModel", "theAsk",
}


def provider_plan_json(title: str = "ProviderPlan") -> str:
    plan = mock_content.mock_business_plan("a software tool")
    plan["pitchDeckSummary"]["title"] = title
    return json.dumps(plan)


class TestStripCodeFences:
    """Tests for markdown fence removal."""

    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fences('```\n[1, 2]\n```') == "[1, 2]"

    def test_plain_text_untouched(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'

    def test_single_line_fence_with_language_tag(self):
        assert strip_code_fences('```json{"a": 1}```') == '{"a": 1}'

    def test_single_line_fenced_reply_parses(self):
        assert parse_json_reply('```json{"a": 1}```', "gemini") == {"a": 1}

    def test_parse_json_reply_rejects_garbage(self):
        with pytest.raises(ProviderResponseError) as exc_info:
            parse_json_reply("Sure! Here is your plan.", "gemini")

        assert exc_info.value.details["provider"] == "gemini"
        assert exc_info.value.code == "PROVIDER_RESPONSE_ERROR"


class TestProviderOrder:
    """Tests for provider selection."""

    def test_requested_provider_first(self, make_settings):
        service = AIService(settings=make_settings(
            gemini_api_key="g-key", openai_api_key="o-key"))

        assert service.provider_order("openai") == ["openai", "gemini"]

    def test_default_provider_used_when_none_requested(self, make_settings):
        service = AIService(settings=make_settings(
            gemini_api_key="g-key", openai_api_key="o-key"))

        assert service.provider_order(None) == ["gemini", "openai"]

    def test_unconfigured_providers_skipped(self, make_settings):
        service = AIService(settings=make_settings(openai_api_key="o-key"))

        assert service.provider_order("gemini") == ["openai"]

    def test_nothing_configured(self, make_settings):
        service = AIService(settings=make_settings())

        assert service.provider_order("gemini") == []

    def test_unknown_provider_rejected(self, make_settings):
        service = AIService(settings=make_settings())

        with pytest.raises(ValidationError):
            service.provider_order("clippy")

    def test_unknown_default_provider_named_in_error(self, make_settings):
        service = AIService(settings=make_settings(default_llm_provider="clippy"))

        with pytest.raises(ValidationError) as exc_info:
            service.provider_order(None)

        assert "'clippy'" in exc_info.value.message
        assert "None" not in exc_info.value.message

    def test_provider_name_case_insensitive(self, make_settings):
        service = AIService(settings=make_settings(gemini_api_key="g-key"))

        assert service.provider_order("Gemini") == ["gemini"]


class TestGenerateBusinessPlanFallback:
    """Tests for the mock path when no provider can answer."""

    def setup_method(self):
        self.factory = AsyncMock()

    def test_food_idea_without_providers(self, make_settings):
        service = AIService(settings=make_settings(), provider_factory=self.factory)

        result = asyncio.run(service.generate_business_plan("a campus food delivery app"))
        data = result.plan.model_dump(by_alias=True)

        assert result.source == ContentSource.MOCK
        assert result.provider is None
        assert set(data["leanCanvas"]) == LEAN_CANVAS_KEYS
        assert set(data["pitchDeckSummary"]) == PITCH_DECK_KEYS
        assert data["marketResearch"]["competitors"]
        assert data["pitchDeckSummary"]["title"] == "CampusBites"
        self.factory.assert_not_called()

    def test_mock_is_deterministic(self, make_settings):
        service = AIService(settings=make_settings(), provider_factory=self.factory)

        first = asyncio.run(service.generate_business_plan("a campus food delivery app"))
        second = asyncio.run(service.generate_business_plan("a campus food delivery app"))

        assert first.model_dump() == second.model_dump()

    def test_generic_idea_uses_industry_tables(self, make_settings):
        service = AIService(settings=make_settings(), provider_factory=self.factory)

        result = asyncio.run(service.generate_business_plan("clinic booking for seniors"))
        persona = result.plan.customer_persona

        assert persona.name == "Dr. Sarah Martinez"
        assert persona.occupation == "Medical Professional"
        assert result.plan.pitch_deck_summary.title == "InnovateApp"
        assert result.plan.idea == "clinic booking for seniors"

    def test_blank_idea_rejected(self, make_settings):
        service = AIService(settings=make_settings(), provider_factory=self.factory)

        with pytest.raises(ValidationError):
            asyncio.run(service.generate_business_plan("   "))

    def test_unknown_provider_is_not_masked(self, make_settings):
        service = AIService(settings=make_settings(), provider_factory=self.factory)

        with pytest.raises(ValidationError):
            asyncio.run(service.generate_business_plan("an idea", provider="clippy"))

    def test_fallback_event_published(self, make_settings):
        received = []
        event_bus.subscribe(EventType.MOCK_FALLBACK_USED, received.append)
        service = AIService(settings=make_settings(), provider_factory=self.factory)

        asyncio.run(service.generate_business_plan("a to-do app"))

        assert len(received) == 1
        assert received[0].data["kind"] == "business_plan"
        assert received[0].data["providers_tried"] == []


class TestGenerateBusinessPlanWithProviders:
    """Tests for provider replies, failures and fallbacks."""

    def test_provider_reply_used(self, make_settings, provider_factory, mock_llm_provider):
        mock_llm_provider.generate_text.return_value = provider_plan_json()
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.PROVIDER
        assert result.provider == "gemini"
        assert result.plan.pitch_deck_summary.title == "ProviderPlan"
        prompt = mock_llm_provider.generate_text.call_args.args[0]
        assert '"a software tool"' in prompt
        assert "revenueStreams" in prompt

    def test_fenced_reply_accepted(self, make_settings, provider_factory, mock_llm_provider):
        mock_llm_provider.generate_text.return_value = f"```json\n{provider_plan_json()}\n```"
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.PROVIDER

    def test_missing_key_falls_back_to_mock(self, make_settings, provider_factory, mock_llm_provider):
        plan = json.loads(provider_plan_json())
        del plan["leanCanvas"]["channels"]
        mock_llm_provider.generate_text.return_value = json.dumps(plan)
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.MOCK
        assert result.plan.pitch_deck_summary.title == "InnovateApp"

    def test_invalid_json_falls_back_to_mock(self, make_settings, provider_factory, mock_llm_provider):
        mock_llm_provider.generate_text.return_value = "I cannot help with that."
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.MOCK

    def test_provider_error_tries_next_provider(self, make_settings):
        failing = MagicMock()
        failing.generate_text = AsyncMock(
            side_effect=LLMProviderError("quota exceeded", provider="gemini"))
        working = MagicMock()
        working.generate_text = AsyncMock(return_value=provider_plan_json("FromOpenAI"))

        async def factory(name, config):
            return failing if name == "gemini" else working

        errors = []
        event_bus.subscribe(EventType.PROVIDER_ERROR, errors.append)
        service = AIService(
            settings=make_settings(gemini_api_key="g-key", openai_api_key="o-key"),
            provider_factory=factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.PROVIDER
        assert result.provider == "openai"
        assert result.plan.pitch_deck_summary.title == "FromOpenAI"
        assert [e.data["provider"] for e in errors] == ["gemini"]

    def test_initialization_failure_falls_back(self, make_settings):
        factory = AsyncMock(side_effect=LLMProviderError("bad key", provider="gemini"))
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.MOCK

    def test_timeout_falls_back(self, make_settings, provider_factory, mock_llm_provider):
        async def slow_reply(prompt):
            await asyncio.sleep(5)
            return provider_plan_json()

        mock_llm_provider.generate_text = AsyncMock(side_effect=slow_reply)
        service = AIService(
            settings=make_settings(gemini_api_key="g-key", ai_timeout_seconds=0.05),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.MOCK

    def test_numeric_persona_age_accepted(self, make_settings, provider_factory, mock_llm_provider):
        plan = json.loads(provider_plan_json())
        plan["customerPersona"]["age"] = 31
        mock_llm_provider.generate_text.return_value = json.dumps(plan)
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_business_plan("a software tool"))

        assert result.source == ContentSource.PROVIDER
        assert result.plan.customer_persona.age == "31"


class TestGenerateValidationContent:
    """Tests for survey, landing page and ad copy generation."""

    def test_invalid_type_rejected_before_any_call(self, make_settings, provider_factory):
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        with pytest.raises(ValidationError):
            asyncio.run(service.generate_validation_content("x", "bogus"))

        provider_factory.assert_not_called()

    def test_mock_survey(self, make_settings):
        service = AIService(settings=make_settings())

        result = asyncio.run(service.generate_validation_content("a to-do app", "survey"))

        assert result.source == ContentSource.MOCK
        assert isinstance(result.content, list)
        assert len(result.content) == 5

    def test_mock_landing_page(self, make_settings):
        service = AIService(settings=make_settings())

        result = asyncio.run(service.generate_validation_content("a to-do app", "landingPage"))

        assert isinstance(result.content, LandingPage)
        assert result.content.headline == "Revolutionary Solution for a to-do app"

    def test_mock_ad_copy(self, make_settings):
        service = AIService(settings=make_settings())

        result = asyncio.run(service.generate_validation_content("a to-do app", "adCopy"))

        assert isinstance(result.content, AdCampaign)
        assert len(result.content.keywords) == 5
        assert "a to-do app" in result.content.ad_copy

    def test_provider_survey(self, make_settings, provider_factory, mock_llm_provider):
        questions = [f"Question {i}?" for i in range(5)]
        mock_llm_provider.generate_text.return_value = json.dumps(questions)
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_validation_content("a to-do app", "survey"))

        assert result.source == ContentSource.PROVIDER
        assert result.content == questions

    def test_provider_reply_with_wrong_shape_falls_back(
        self, make_settings, provider_factory, mock_llm_provider
    ):
        mock_llm_provider.generate_text.return_value = '{"headline": "Only a headline"}'
        service = AIService(
            settings=make_settings(gemini_api_key="g-key"),
            provider_factory=provider_factory)

        result = asyncio.run(service.generate_validation_content("a to-do app", "landingPage"))

        assert result.source == ContentSource.MOCK
        assert result.content.call_to_action


class TestOpenAIProviderMessages:
    """Tests for the chat messages sent to OpenAI."""

    def _provider(self, system_prompt=None):
        from ai_cofounder.core.protocols import LLMConfig
        from ai_cofounder.providers.llm.openai_provider import OpenAIProvider

        provider = OpenAIProvider(LLMConfig(model_name="gpt-4o-mini", system_prompt=system_prompt))
        reply = MagicMock()
        reply.choices = [MagicMock()]
        reply.choices[0].message.content = "{}"
        provider._client = MagicMock()
        provider._client.chat.completions.create = AsyncMock(return_value=reply)
        provider.mark_initialized()
        return provider

    def test_no_system_message_without_prompt(self):
        provider = self._provider()

        asyncio.run(provider.generate_text("hello"))

        messages = provider._client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "hello"}]

    def test_configured_system_prompt_sent_first(self):
        provider = self._provider(system_prompt="Reply in JSON.")

        asyncio.run(provider.generate_text("hello"))

        messages = provider._client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[0] == {"role": "system", "content": "Reply in JSON."}
        assert messages[1]["role"] == "user"
