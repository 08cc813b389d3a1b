"""Display synchronization between the network context and the UI.

The network side only ever enqueues DisplayUpdates. The UI-owning thread
drains the queue on a fixed cadence (a Gradio timer tick or a terminal loop
iteration) and applies the updates to its Transcript. The Transcript must
only be touched from that one thread.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Dict, List, Literal, NamedTuple

from gemini_chat.core.constants import ERROR_SPEAKER, MODEL_SPEAKER, USER_SPEAKER


class TranscriptEntry(NamedTuple):
    """One visible block of the transcript."""

    speaker: str
    text: str


class DisplayUpdate(NamedTuple):
    """A buffered change to the transcript.

    - kind="append": add text to the end of the last entry (the open reply)
    - kind="entry": add a new entry for `speaker`
    """

    kind: Literal["append", "entry"]
    text: str
    speaker: str = ""


class DisplayQueue:
    """Thread-safe FIFO of DisplayUpdates."""

    def __init__(self) -> None:
        self._items: Deque[DisplayUpdate] = deque()
        self._lock = threading.Lock()

    def put(self, update: DisplayUpdate) -> None:
        """Enqueue an update (any thread)."""
        with self._lock:
            self._items.append(update)

    def drain(self) -> List[DisplayUpdate]:
        """Remove and return every buffered update in order."""
        with self._lock:
            items = list(self._items)
            self._items.clear()
        return items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class Transcript:
    """The visible chat transcript, owned by the UI thread."""

    def __init__(self) -> None:
        self.entries: List[TranscriptEntry] = []

    def add(self, speaker: str, text: str) -> None:
        """Add a new entry."""
        self.entries.append(TranscriptEntry(speaker, text))

    def extend_last(self, text: str) -> None:
        """Append text to the last entry, or open a model entry if empty."""
        if not self.entries:
            self.add(MODEL_SPEAKER, text)
            return
        last = self.entries[-1]
        self.entries[-1] = last._replace(text=last.text + text)

    def apply(self, updates: List[DisplayUpdate]) -> bool:
        """Apply drained updates in order. Returns True if anything changed.

        An error entry replaces a reply entry that never received text.
        """
        for update in updates:
            if update.kind == "append":
                self.extend_last(update.text)
                continue
            if update.speaker == ERROR_SPEAKER and self._has_open_reply():
                self.entries.pop()
            self.add(update.speaker, update.text)
        return bool(updates)

    def _has_open_reply(self) -> bool:
        return bool(self.entries) and self.entries[-1] == TranscriptEntry(MODEL_SPEAKER, "")

    def as_messages(self) -> List[Dict[str, str]]:
        """Convert to Gradio chatbot "messages" (role/content dicts)."""
        messages = []
        for entry in self.entries:
            if entry.speaker == USER_SPEAKER:
                messages.append({"role": "user", "content": entry.text})
            elif entry.speaker == ERROR_SPEAKER:
                messages.append(
                    {"role": "assistant", "content": f"# ❌ Error\n{entry.text}"}
                )
            else:
                # an empty reply entry is still waiting on the network
                messages.append({"role": "assistant", "content": entry.text or "…"})
        return messages

    def __len__(self) -> int:
        return len(self.entries)
