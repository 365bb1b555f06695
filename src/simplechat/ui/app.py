"""Main Textual TUI application.

Orchestrates the UI components and the send flow: submit, record the user
turn, clear the input, then wait for the reply in a background worker.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..chat import DEFAULT_SYSTEM_PROMPT, SendPipeline
from ..llm import LLMProvider
from ..transcript import ChatTurn, Sender, TranscriptStore
from .config import APP_TITLE, THEME_NAME, LogLevel
from .styles import APP_CSS
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class ChatApp(App):
    """Textual TUI for a single-window LLM chat."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        # Priority so the focused input does not swallow them
        Binding("ctrl+l", "clear_chat", "Clear Chat", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response", priority=True),
        Binding("f2", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        llm: LLMProvider,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        model: str | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._log_level = log_level
        self._transcript = TranscriptStore()
        self._pipeline = SendPipeline(
            llm,
            self._transcript,
            system_prompt=system_prompt,
            model=model,
        )
        self._awaiting = 0

    @property
    def transcript(self) -> TranscriptStore:
        return self._transcript

    @property
    def pipeline(self) -> SendPipeline:
        return self._pipeline

    @property
    def awaiting(self) -> int:
        """Number of replies still in flight."""
        return self._awaiting

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(self._transcript, id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.theme = THEME_NAME

        # Configure log panel if --log-level was passed
        if self._log_level is not None:
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.log_level = LogLevel.parse(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._pipeline.set_debug_callback(self._route_debug)
        self._update_status()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route diagnostic messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        if level == "debug":
            log_panel.debug(component, message)
        elif level == "info":
            log_panel.info(component, message)
        elif level == "warning":
            log_panel.warning(component, message)
        elif level == "error":
            log_panel.error(component, message)

    def _update_status(self) -> None:
        if self._awaiting == 0:
            status = "idle"
        elif self._awaiting == 1:
            status = "awaiting reply"
        else:
            status = f"awaiting {self._awaiting} replies"
        self.sub_title = f"{self._pipeline.model} | {status}"

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        user_turn = self._pipeline.accept(event.value)
        if user_turn is None:
            return

        # Input is cleared before the request goes out
        self.query_one("#chat-input-bar", ChatInputBar).clear_input()

        self._awaiting += 1
        self._update_status()
        self._request_reply(user_turn)

    @work(group="replies")
    async def _request_reply(self, user_turn: ChatTurn) -> None:
        """Wait for the reply to one user turn as a background async worker.

        Workers are not exclusive: every send settles on its own, and replies
        are appended in the order they arrive.
        """
        try:
            await self._pipeline.complete(user_turn)
        finally:
            self._awaiting -= 1
            self._update_status()

    def action_clear_chat(self) -> None:
        """Clear the chat history."""
        self._transcript.clear()
        self.notify("Chat cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        turn = self._transcript.last(Sender.ASSISTANT)
        if turn is not None:
            self.copy_to_clipboard(turn.text)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    llm: LLMProvider,
    system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    model: str | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        llm: LLM provider instance
        system_prompt: Instruction sent as the system message
        model: Model override (None uses the provider's default)
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ChatApp(
        llm=llm,
        system_prompt=system_prompt,
        model=model,
        log_level=log_level,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
