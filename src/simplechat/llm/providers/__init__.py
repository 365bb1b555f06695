from .openai import OpenAIProvider
from .openrouter import OpenRouterProvider

__all__ = ["OpenAIProvider", "OpenRouterProvider"]
