"""Send pipeline.

Hides how user input becomes a completion request and how the outcome is
recorded in the transcript. Every send settles as exactly one assistant turn:
the reply on success, the fallback text on any failure.
"""

from typing import Any

from ..llm import ChatMessage, LLMProvider
from ..transcript import ChatTurn, Sender, TranscriptStore
from .config import DEFAULT_SYSTEM_PROMPT, FALLBACK_REPLY, LOG_COMPONENT


class SendPipeline:
    """Forward user input to an LLM provider and record the reply.

    Only the latest user message is sent; earlier turns never leave the
    process. Concurrent sends are allowed and append their replies in the
    order they arrive.

    Example:
        pipeline = SendPipeline(llm, TranscriptStore())
        await pipeline.send("Hello")
        # transcript: [user "Hello", assistant "<reply>"]
    """

    def __init__(
        self,
        llm: LLMProvider,
        transcript: TranscriptStore,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        model: str | None = None,
    ) -> None:
        self._llm = llm
        self._transcript = transcript
        self._system_prompt = system_prompt
        self._model = model
        self._request_counter = 0
        self._debug_callback: Any | None = None

    @property
    def transcript(self) -> TranscriptStore:
        return self._transcript

    @property
    def model(self) -> str:
        """Model identifier sent with each request."""
        return self._model or self._llm.model

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for diagnostic logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def build_messages(self, user_text: str) -> list[ChatMessage]:
        """Build the request messages: system instruction plus one user message."""
        return [
            ChatMessage(role="system", content=self._system_prompt),
            ChatMessage(role="user", content=user_text),
        ]

    def accept(self, raw_input: str) -> ChatTurn | None:
        """Record user input as a turn.

        Blank input is ignored. Otherwise the untrimmed text is appended as
        a user turn right away, before any request is made.

        Returns:
            The appended user turn, or None if the input was blank
        """
        if not raw_input.strip():
            return None

        turn = ChatTurn(sender=Sender.USER, text=raw_input)
        self._transcript.append(turn)
        return turn

    async def complete(self, user_turn: ChatTurn) -> ChatTurn:
        """Request a reply to ``user_turn`` and append it.

        Any failure is logged and replaced by the fallback turn; this method
        only raises if the surrounding task is cancelled.

        Returns:
            The appended assistant turn
        """
        self._request_counter += 1
        request_id = self._request_counter
        messages = self.build_messages(user_turn.text)

        self._debug(
            "info",
            LOG_COMPONENT,
            f"Request #{request_id}: model={self.model} chars={len(user_turn.text)}",
        )
        try:
            response = await self._llm.chat_completion(messages, model=self._model)
            reply = ChatTurn(sender=Sender.ASSISTANT, text=response.content)
            self._debug(
                "debug",
                LOG_COMPONENT,
                f"Request #{request_id} completed: {len(response.content)} chars, usage={response.usage}",
            )
        except Exception as e:
            self._debug(
                "error",
                LOG_COMPONENT,
                f"Request #{request_id} failed: {type(e).__name__}: {e}",
            )
            reply = ChatTurn(sender=Sender.ASSISTANT, text=FALLBACK_REPLY)

        self._transcript.append(reply)
        return reply

    async def send(self, raw_input: str) -> ChatTurn | None:
        """Accept ``raw_input`` and wait for its reply.

        Returns:
            The assistant turn, or None if the input was blank
        """
        user_turn = self.accept(raw_input)
        if user_turn is None:
            return None
        return await self.complete(user_turn)
