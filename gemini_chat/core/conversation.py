"""Conversation history replayed to the API on every request."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    """Author of a turn, using the API's role names."""

    USER = "user"
    MODEL = "model"


class Turn(BaseModel):
    """One message in the conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str

    def to_content(self) -> Dict[str, Any]:
        """Serialize as a generateContent `contents` item."""
        return {"role": self.role.value, "parts": [{"text": self.text}]}


class Conversation:
    """Append-only, ordered sequence of turns.

    No deletion, editing or size cap. Alternation of user/model turns is
    common but not enforced. Access is guarded by a lock because the model
    turn is recorded from the network context.
    """

    def __init__(self) -> None:
        self._turns: List[Turn] = []
        self._lock = threading.Lock()

    def append(self, turn: Turn) -> None:
        """Add a turn to the end of the conversation."""
        with self._lock:
            self._turns.append(turn)

    def snapshot(self) -> List[Turn]:
        """Return a copy of all turns in submission order."""
        with self._lock:
            return list(self._turns)

    def last(self) -> Optional[Turn]:
        """Return the most recent turn, if any."""
        with self._lock:
            return self._turns[-1] if self._turns else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._turns)
