"""Chat module for simplechat.

Turns user input into completion requests and records the outcome.
"""

from .config import DEFAULT_SYSTEM_PROMPT, FALLBACK_REPLY
from .pipeline import SendPipeline

__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "FALLBACK_REPLY",
    "SendPipeline",
]
