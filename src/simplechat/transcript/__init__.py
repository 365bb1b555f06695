"""Chat transcript module for simplechat.

Holds the ordered chat turns for the lifetime of a view.
"""

from .models import ChatTurn, Sender
from .store import TranscriptListener, TranscriptStore

__all__ = [
    "ChatTurn",
    "Sender",
    "TranscriptListener",
    "TranscriptStore",
]
