from typing import Any

from .base import LLMProvider
from .providers import OpenAIProvider, OpenRouterProvider


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('openrouter', 'openai')
        **config: Provider-specific configuration
            For OpenRouter:
                - api_key: str (required, may be empty)
                - model: str (default: 'mistralai/mistral-7b-instruct')
                - base_url: str (default: 'https://openrouter.ai/api/v1')
                - referer: str | None (sent as HTTP-Referer)
                - title: str | None (sent as X-Title)
            For OpenAI (or any OpenAI-compatible endpoint):
                - api_key: str (required)
                - model: str (default: 'gpt-4o-mini')
                - base_url: str | None
                - organization: str | None

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_llm_provider(
        ...     "openrouter",
        ...     api_key="sk-or-...",
        ...     referer="http://localhost"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower == "openrouter":
        if "api_key" not in config:
            raise TypeError("OpenRouter provider requires 'api_key' in config")
        return OpenRouterProvider(**config)

    if provider_lower == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI provider requires 'api_key' in config")
        return OpenAIProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'openrouter', 'openai'"
    )
