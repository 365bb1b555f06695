from typing import Any

from openai import AsyncOpenAI

from ..base import LLMProvider
from ..errors import MalformedCompletionError
from ..models import ChatMessage, LLMResponse

# Sent when no key is configured; the service answers with 401
MISSING_API_KEY = "missing-api-key"


def _field(obj: Any, name: str) -> Any:
    """Read ``name`` from an SDK object or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _extract_content(completion: Any) -> str:
    """Return ``choices[0].message.content`` or raise.

    The SDK hands back the raw text when the body is not JSON, and builds
    partial objects when the JSON lacks fields, so every step is checked.
    """
    choices = _field(completion, "choices")
    if not isinstance(choices, list) or not choices:
        raise MalformedCompletionError("response has no choices")

    message = _field(choices[0], "message")
    content = _field(message, "content") if message is not None else None
    if not isinstance(content, str):
        raise MalformedCompletionError("first choice has no message content")
    return content


def _extract_usage(completion: Any) -> dict[str, int] | None:
    usage = _field(completion, "usage")
    if not usage:
        return None

    cleaned = {}
    for key in ("prompt_tokens", "completion_tokens", "total_tokens"):
        value = _field(usage, key)
        if isinstance(value, int):
            cleaned[key] = value
    return cleaned or None


class OpenAIProvider(LLMProvider):
    """OpenAI-compatible chat completions provider.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Authentication mechanism
    - Response shape validation

    The client is built with ``max_retries=0``: one send is exactly one
    request. An empty key is replaced by a placeholder, because the SDK
    refuses to build a client without credentials; the request still goes
    out and the service rejects it.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        organization: str | None = None,
        default_headers: dict[str, str] | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: Bearer token for the endpoint (may be empty)
            model: Default model to use
            base_url: Optional custom API base URL
            organization: Optional organization ID
            default_headers: Extra headers sent with every request
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncOpenAI(
            api_key=api_key or MISSING_API_KEY,
            base_url=base_url,
            organization=organization,
            default_headers=default_headers,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    @property
    def base_url(self) -> str:
        """Get the API base URL requests are sent to."""
        return str(self._client.base_url)

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            messages: Messages to send, in order
            model: Model to use (overrides default)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            **kwargs: Additional request parameters

        Returns:
            LLMResponse with generated content

        Raises:
            MalformedCompletionError: If the body is not a usable completion
            openai.APIError: On connection failures and HTTP error statuses
        """
        model_to_use = model or self._model

        # Only send sampling parameters the caller set explicitly
        request_params: dict[str, Any] = {
            "model": model_to_use,
            "messages": [
                {"role": msg.role, "content": msg.content}
                for msg in messages
            ],
            **kwargs
        }
        if temperature is not None:
            request_params["temperature"] = temperature
        if max_tokens is not None:
            request_params["max_tokens"] = max_tokens

        completion = await self._client.chat.completions.create(**request_params)

        content = _extract_content(completion)
        return LLMResponse(
            content=content,
            model=_field(completion, "model") or model_to_use,
            usage=_extract_usage(completion)
        )

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
