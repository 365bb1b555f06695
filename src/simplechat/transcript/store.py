"""In-memory transcript store.

Hides how the ordered sequence of chat turns is held and how views are told
about changes. Data lives only as long as the owning view.
"""

from collections.abc import Callable, Iterator

from .models import ChatTurn, Sender

TranscriptListener = Callable[["TranscriptStore"], None]


class TranscriptStore:
    """Append-only, ordered sequence of chat turns.

    Insertion order is display order. Turns are never edited or removed
    individually; ``clear`` drops the whole transcript when the view is reset.

    All mutation happens on the UI event loop, so no locking is done here.
    """

    def __init__(self) -> None:
        self._turns: list[ChatTurn] = []
        self._listeners: list[TranscriptListener] = []

    def append(self, turn: ChatTurn) -> None:
        """Append a turn and notify listeners."""
        self._turns.append(turn)
        self._notify()

    def clear(self) -> None:
        """Drop every turn and notify listeners."""
        self._turns.clear()
        self._notify()

    @property
    def turns(self) -> tuple[ChatTurn, ...]:
        """Snapshot of the current transcript, oldest first."""
        return tuple(self._turns)

    def last(self, sender: Sender | None = None) -> ChatTurn | None:
        """Return the most recent turn, optionally only from ``sender``."""
        for turn in reversed(self._turns):
            if sender is None or turn.sender == sender:
                return turn
        return None

    def subscribe(self, listener: TranscriptListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ChatTurn]:
        return iter(tuple(self._turns))
