"""
Simplechat: a minimal terminal chat widget for hosted LLM completion endpoints.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .chat import DEFAULT_SYSTEM_PROMPT, FALLBACK_REPLY, SendPipeline
from .llm import LLMProvider, create_llm_provider
from .transcript import ChatTurn, Sender, TranscriptStore

__all__ = [
    "ChatTurn",
    "DEFAULT_SYSTEM_PROMPT",
    "FALLBACK_REPLY",
    "LLMProvider",
    "SendPipeline",
    "Sender",
    "TranscriptStore",
    "create_llm_provider",
]
