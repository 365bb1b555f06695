"""Terminal UI module for simplechat.

Provides a Textual-based TUI for chatting with an LLM provider.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (input history, transcript panel, log panel)
- styles.py: CSS styling (layout decisions)
- config.py: UI constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, HistoryInput

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "HistoryInput",
    "LogLevel",
    "run_textual_tui",
]
