"""UI configuration constants.

Centralizes display strings, limits and the log level scale for the UI module.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Severity scale for the log panel.

    Entries below the panel's threshold are dropped, so a lower threshold
    shows more: DEBUG < INFO < WARNING < ERROR.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Map a --log-level value to a level. Unknown values mean DEBUG."""
        try:
            return cls[value.upper()]
        except KeyError:
            return cls.DEBUG


APP_TITLE = "Simple AI Chatbot"
THEME_NAME = "catppuccin-mocha"

# Input bar
INPUT_PLACEHOLDER = "Type your message..."
INPUT_HISTORY_MAX_SIZE = 100  # Sent lines kept for Up/Down recall

# Transcript panel
TURN_TIMESTAMP_FORMAT = "%H:%M:%S"

# Log panel
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
