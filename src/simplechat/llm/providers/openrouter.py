from typing import Any

from .openai import OpenAIProvider

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_DEFAULT_MODEL = "mistralai/mistral-7b-instruct"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter provider using its OpenAI-compatible API.

    Hidden design decisions:
    - OpenRouter endpoint and default model
    - Attribution headers (HTTP-Referer, X-Title) identifying the caller
    """

    def __init__(
        self,
        api_key: str,
        model: str = OPENROUTER_DEFAULT_MODEL,
        base_url: str = OPENROUTER_BASE_URL,
        referer: str | None = None,
        title: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenRouter provider.

        Args:
            api_key: OpenRouter API key
            model: Default model to use
            base_url: API base URL (override to route through a proxy)
            referer: Origin sent as the HTTP-Referer header
            title: Application name sent as the X-Title header
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        headers = dict(client_kwargs.pop("default_headers", None) or {})
        if referer:
            headers["HTTP-Referer"] = referer
        if title:
            headers["X-Title"] = title

        super().__init__(
            api_key=api_key,
            model=model,
            base_url=base_url,
            default_headers=headers or None,
            **client_kwargs
        )
