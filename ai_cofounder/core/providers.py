"""
LLM provider registry.

Provider classes register themselves with `@llm_provider("name")` when their
module is imported; `get_llm()` hands out one initialized instance per
provider and model.
"""

from typing import Dict, List, Optional, Tuple
import logging

from ai_cofounder.core.protocols import Initializable, LLMProvider, LLMConfig
from ai_cofounder.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registered provider classes and their live instances."""

    def __init__(self):
        self._classes: Dict[str, type] = {}
        self._instances: Dict[Tuple[str, Optional[str]], LLMProvider] = {}

    def register(self, name: str, cls: type) -> None:
        self._classes[name.lower()] = cls
        logger.info(f"Registered LLM provider: {name}")

    def get_class(self, name: str) -> Optional[type]:
        return self._classes.get(name.lower())

    def names(self) -> List[str]:
        """Registered provider names, in registration order."""
        return list(self._classes)

    def cached(self, name: str, model: Optional[str]) -> Optional[LLMProvider]:
        return self._instances.get((name.lower(), model))

    def remember(self, name: str, model: Optional[str], instance: LLMProvider) -> None:
        self._instances[(name.lower(), model)] = instance

    async def cleanup_all(self) -> None:
        """Release every cached instance; errors are logged, not raised."""
        for (name, model), instance in self._instances.items():
            if not isinstance(instance, Initializable):
                continue
            try:
                await instance.cleanup()
            except Exception as e:
                logger.error(f"Error cleaning up {name} ({model}): {e}")

        self._instances = {}
        logger.info("All provider instances cleaned up")


# Global registry instance
registry = ProviderRegistry()


def llm_provider(name: str):
    """
    Class decorator registering an LLM provider.

    Usage:
        @llm_provider("gemini")
        class GeminiProvider:
            ...
    """
    def decorator(cls: type) -> type:
        registry.register(name, cls)
        return cls
    return decorator


async def get_llm(
    name: str,
    config: LLMConfig,
    cache: bool = True
) -> LLMProvider:
    """
    Get or create an initialized LLM provider instance.

    Raises:
        ConfigurationError: if no provider is registered under `name`, or
            the provider cannot start (e.g. missing API key).
    """
    if cache:
        instance = registry.cached(name, config.model_name)
        if instance is not None:
            return instance

    cls = registry.get_class(name)
    if cls is None:
        raise ConfigurationError(
            f"LLM provider '{name}' not found. Available: {registry.names()}"
        )

    instance = cls(config)
    if isinstance(instance, Initializable):
        await instance.initialize()

    if cache:
        registry.remember(name, config.model_name, instance)

    return instance
