"""
Providers package.
Import all provider modules to register them with the registry.
"""

# Import provider modules to trigger registration
from ai_cofounder.providers import llm

__all__ = ["llm"]
