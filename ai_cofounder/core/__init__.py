"""
Core module containing protocols, providers, and shared components.
"""

# Events
from ai_cofounder.core.events import EventBus, Event, EventType, event_bus

# Exceptions
from ai_cofounder.core.exceptions import (
    AppException,
    LLMProviderError,
    ProviderResponseError,
    ConfigurationError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    ResourceNotFoundError,
    ShareLinkExpiredError,
)

# Protocols (type definitions)
from ai_cofounder.core.protocols import (
    LLMProvider,
    LLMConfig,
    ProviderState,
    ProviderMixin,
    CofounderDirectory,
)

# Registry and factory functions
from ai_cofounder.core.providers import (
    registry,
    llm_provider,
    get_llm,
)

__all__ = [
    # Protocols
    "LLMProvider",
    "LLMConfig",
    "ProviderState",
    "ProviderMixin",
    "CofounderDirectory",
    # Registry
    "registry",
    "llm_provider",
    "get_llm",
    # Exceptions
    "AppException",
    "LLMProviderError",
    "ProviderResponseError",
    "ConfigurationError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "ResourceNotFoundError",
    "ShareLinkExpiredError",
    # Events
    "EventBus",
    "Event",
    "EventType",
    "event_bus",
]
