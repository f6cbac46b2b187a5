"""
LLM Providers package.
Import all providers here to register them with the registry.
"""

from ai_cofounder.providers.llm.gemini import GeminiProvider
from ai_cofounder.providers.llm.openai_provider import OpenAIProvider

__all__ = ["GeminiProvider", "OpenAIProvider"]
