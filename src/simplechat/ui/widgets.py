"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Transcript rendering and scrolling
- Log rendering and level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from ..transcript import ChatTurn, TranscriptStore
from .config import (
    INPUT_HISTORY_MAX_SIZE,
    INPUT_PLACEHOLDER,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    TURN_TIMESTAMP_FORMAT,
    LogLevel,
)


class ClickableTurn(Vertical):
    """A chat turn container that copies its text when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=2)


class HistoryInput(Input):
    """Input widget with command history support.

    Use Up/Down arrow keys to navigate through history.
    Multi-line pastes are converted to single line (newlines become spaces).
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    def _on_paste(self, event) -> None:
        """Handle paste events - convert newlines to spaces for single-line input."""
        from textual.events import Paste

        if isinstance(event, Paste) and event.text:
            clean_text = " ".join(event.text.split())
            self.insert_text_at_cursor(clean_text)
            event.prevent_default()
            event.stop()

    def _on_key(self, event) -> None:
        """Handle key events for history navigation."""
        if event.key == "up":
            if self._history:
                if self._history_index == -1:
                    self._current_input = self.value
                    self._history_index = len(self._history) - 1
                elif self._history_index > 0:
                    self._history_index -= 1
                self.value = self._history[self._history_index]
                self.cursor_position = len(self.value)
            event.prevent_default()
            event.stop()
        elif event.key == "down":
            if self._history_index != -1:
                if self._history_index < len(self._history) - 1:
                    self._history_index += 1
                    self.value = self._history[self._history_index]
                else:
                    self._history_index = -1
                    self.value = self._current_input
                self.cursor_position = len(self.value)
            event.prevent_default()
            event.stop()

    @property
    def history(self) -> list[str]:
        return list(self._history)

    def add_to_history(self, command: str) -> None:
        """Add a command to history."""
        if command and (not self._history or self._history[-1] != command):
            self._history.append(command)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Chat input bar with a single-line input and a Send button.

    Enter and the Send button both post ``Submitted`` with the raw text.
    The bar never clears itself; the app decides whether the text was
    accepted and calls ``clear_input``.
    """

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield HistoryInput(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Send message (Enter)"
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", HistoryInput)
        self.post_message(self.Submitted(text_input.value))

    def clear_input(self) -> None:
        """Record the current text in history and empty the input."""
        text_input = self.query_one("#chat-input", HistoryInput)
        text_input.add_to_history(text_input.value)
        text_input.value = ""

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript panel bound to a TranscriptStore.

    Mounts a widget for every new turn and scrolls to the newest one on each
    transcript change.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "No messages yet"

    def __init__(self, transcript: TranscriptStore, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._transcript = transcript
        self._rendered = 0
        self._unsubscribe = None

    def on_mount(self) -> None:
        self._unsubscribe = self._transcript.subscribe(self._on_transcript_changed)
        self._sync()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_transcript_changed(self, transcript: TranscriptStore) -> None:
        self._sync()

    def _sync(self) -> None:
        turns = self._transcript.turns

        # Fewer turns than rendered only happens after a clear
        if len(turns) < self._rendered:
            self.remove_children()
            self._rendered = 0

        for turn in turns[self._rendered:]:
            self.mount(self._render_turn(turn))
        self._rendered = len(turns)

        if turns:
            self.border_subtitle = f"{len(turns)} messages"
        else:
            self.border_subtitle = "No messages yet"

        # Wait for layout so the new turn is inside the scrollable region
        self.call_after_refresh(self.scroll_end, animate=False)

    def _render_turn(self, turn: ChatTurn) -> ClickableTurn:
        if turn.is_user:
            prefix = "You"
            turn_class = "user-turn"
            icon = ">"
        else:
            prefix = "Assistant"
            turn_class = "assistant-turn"
            icon = "<"

        timestamp = turn.timestamp.strftime(TURN_TIMESTAMP_FORMAT)
        header_text = f"{icon} {prefix} [{timestamp}]"

        container = ClickableTurn(content=turn.text, classes=f"chat-turn {turn_class}")
        container.compose_add_child(Static(header_text, markup=False, classes="turn-header"))
        # Replies are shown verbatim, no markdown
        container.compose_add_child(Static(turn.text, markup=False, classes="turn-content"))
        return container


class DebugPanel(RichLog):
    """Log panel for diagnostic messages with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with F2.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "LLM": "magenta",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        self._entry_count = 0

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    @property
    def entry_count(self) -> int:
        """Number of entries that passed the level filter."""
        return self._entry_count

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: LogLevel = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, LLM, ...)
            message: Log message, written without markup
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self._entry_count += 1
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level.name:<5}[/] "
            f"[{comp_color}]\\[{escape(component)}][/] {escape(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
