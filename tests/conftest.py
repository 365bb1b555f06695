"""Pytest configuration and shared fixtures."""
import asyncio
import json
import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from simplechat.llm import ChatMessage, LLMProvider, LLMResponse, OpenRouterProvider


class ScriptedLLM(LLMProvider):
    """LLM provider that plays back scripted replies.

    Each reply is consumed in order and may be:
    - a string: returned as the completion content
    - an exception instance: raised
    - an async callable: awaited, and its result handled as above
    """

    def __init__(self, replies: list[Any] | None = None, model: str = "scripted-model"):
        self._replies = list(replies or [])
        self._model = model
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append({"messages": list(messages), "model": model})
        reply = self._replies.pop(0) if self._replies else "ok"
        if callable(reply):
            reply = await reply()
        if isinstance(reply, BaseException):
            raise reply
        return LLMResponse(content=reply, model=model or self._model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def scripted_llm() -> Callable[..., ScriptedLLM]:
    """Factory for ScriptedLLM instances."""
    def _make(*replies: Any, model: str = "scripted-model") -> ScriptedLLM:
        return ScriptedLLM(list(replies), model=model)
    return _make


@pytest.fixture
def gated_reply():
    """Factory for replies that wait until their gate is opened.

    Returns (gate, reply) where reply is an async callable for ScriptedLLM.
    """
    def _make(result: Any) -> tuple[asyncio.Event, Callable[[], Any]]:
        gate = asyncio.Event()

        async def reply() -> Any:
            await gate.wait()
            return result

        return gate, reply
    return _make


def _completion_body(content: Any = "Hi there!") -> dict[str, Any]:
    return {
        "id": "gen-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "mistralai/mistral-7b-instruct",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 3, "total_tokens": 15},
    }


@pytest.fixture
def completion_body():
    """Factory for chat completion bodies in the shape the endpoint returns."""
    return _completion_body


@pytest.fixture
def openrouter_with():
    """Factory for an OpenRouterProvider whose HTTP traffic goes to ``handler``.

    The handler receives each httpx.Request; requests are also recorded in
    the returned list.
    """
    def _make(handler: Callable[[httpx.Request], httpx.Response], **config: Any):
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        config.setdefault("api_key", "sk-or-test")
        config.setdefault("referer", "http://localhost")
        provider = OpenRouterProvider(http_client=http_client, **config)
        return provider, requests
    return _make


@pytest.fixture
def request_json():
    """Decode the JSON body of a recorded httpx.Request."""
    def _decode(request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content)
    return _decode


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openrouter": os.getenv("OPENROUTER_API_KEY"),
    }
