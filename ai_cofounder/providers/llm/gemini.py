"""
Gemini LLM Provider implementation.
"""

import google.generativeai as genai
import logging

from ai_cofounder.core.protocols import LLMConfig, ProviderMixin
from ai_cofounder.core.providers import llm_provider
from ai_cofounder.core.exceptions import LLMProviderError, ConfigurationError
from ai_cofounder.config import get_settings

logger = logging.getLogger(__name__)


@llm_provider("gemini")
class GeminiProvider(ProviderMixin):
    """
    Google Gemini LLM provider implementation.

    Implements the LLMProvider protocol without inheritance.
    Uses ProviderMixin for usage bookkeeping.
    """

    def __init__(self, config: LLMConfig):
        super().__init__()
        self._config = config
        self._model = None

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def config(self) -> LLMConfig:
        return self._config

    async def initialize(self) -> None:
        """Initialize Gemini API."""
        settings = get_settings()
        if not settings.gemini_api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured")

        try:
            genai.configure(api_key=settings.gemini_api_key)

            model_name = self._config.model_name or settings.gemini_model
            generation_config = {
                "temperature": self._config.temperature,
                "max_output_tokens": self._config.max_tokens,
            }
            self._model = genai.GenerativeModel(
                model_name,
                generation_config=generation_config,
                system_instruction=self._config.system_prompt,
            )

            self.mark_initialized()
            logger.info(
                f"Gemini provider initialized with model: {model_name}")

        except Exception as e:
            self.record_error()
            raise LLMProviderError(
                message=f"Failed to initialize Gemini: {str(e)}",
                provider="gemini",
                original_error=e
            )

    async def generate_text(self, prompt: str) -> str:
        """Generate a single reply from Gemini."""
        if not self.is_initialized:
            raise LLMProviderError(
                message="Provider not initialized",
                provider="gemini"
            )

        try:
            self.record_request()
            response = await self._model.generate_content_async(prompt)
            return response.text

        except Exception as e:
            self.record_error()
            logger.error(f"Gemini generation error: {e}")
            raise LLMProviderError(
                message=f"Generation failed: {str(e)}",
                provider="gemini",
                original_error=e
            )

    async def cleanup(self) -> None:
        """Cleanup resources."""
        self._model = None
        self._state.initialized = False
        logger.info("Gemini provider cleaned up")
