class CompletionError(Exception):
    """Base class for completion request failures."""


class MalformedCompletionError(CompletionError):
    """Response body does not have the expected completion shape."""

    def __init__(self, message: str):
        super().__init__(f"Malformed completion: {message}")
