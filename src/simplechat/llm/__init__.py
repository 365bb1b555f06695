from .base import LLMProvider
from .errors import CompletionError, MalformedCompletionError
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import OpenAIProvider, OpenRouterProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "CompletionError",
    "LLMResponse",
    "MalformedCompletionError",
    "OpenAIProvider",
    "OpenRouterProvider",
]
