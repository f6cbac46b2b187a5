"""
OpenAI LLM Provider implementation.
Used as a second provider when Gemini is unavailable or explicitly requested.
"""

import logging

from openai import AsyncOpenAI

from ai_cofounder.core.protocols import LLMConfig, ProviderMixin
from ai_cofounder.core.providers import llm_provider
from ai_cofounder.core.exceptions import LLMProviderError, ConfigurationError
from ai_cofounder.config import get_settings

logger = logging.getLogger(__name__)


@llm_provider("openai")
class OpenAIProvider(ProviderMixin):
    """
    OpenAI LLM provider implementation.

    To use this provider set OPENAI_API_KEY in .env and request
    'openai' as the api provider, or list it in LLM_FALLBACK_ORDER.
    """

    def __init__(self, config: LLMConfig):
        super().__init__()
        self._config = config
        self._client = None

    @property
    def name(self) -> str:
        return "openai"

    @property
    def config(self) -> LLMConfig:
        return self._config

    async def initialize(self) -> None:
        """Initialize OpenAI client."""
        if self.is_initialized:
            return

        settings = get_settings()
        if not settings.openai_api_key:
            raise ConfigurationError(
                "OPENAI_API_KEY not found in environment variables"
            )

        self._client = AsyncOpenAI(api_key=settings.openai_api_key)
        self.mark_initialized()

        logger.info(
            f"OpenAI provider initialized with model: {self._config.model_name}")

    async def generate_text(self, prompt: str) -> str:
        """Generate a single reply from OpenAI."""
        if not self.is_initialized or not self._client:
            await self.initialize()

        messages = []
        if self._config.system_prompt:
            messages.append({"role": "system", "content": self._config.system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            self.record_request()
            response = await self._client.chat.completions.create(
                model=self._config.model_name or get_settings().openai_model,
                messages=messages,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens
            )

            return response.choices[0].message.content or ""

        except Exception as e:
            self.record_error()
            logger.error(f"OpenAI generation error: {e}")
            raise LLMProviderError(
                message=f"Generation failed: {str(e)}",
                provider="openai",
                original_error=e
            )

    async def cleanup(self) -> None:
        """Cleanup resources."""
        if self._client is not None:
            await self._client.close()
        self._client = None
        self._state.initialized = False
        logger.info("OpenAI provider cleaned up")
