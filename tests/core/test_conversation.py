"""Unit tests for the conversation store."""

import pytest
from pydantic import ValidationError

from gemini_chat.core.conversation import Conversation, Role, Turn


@pytest.mark.unit
def test_append_preserves_submission_order() -> None:
    """Snapshot should return turns in the order they were appended."""
    conversation = Conversation()
    turns = [
        Turn(role=Role.USER, text="hi"),
        Turn(role=Role.MODEL, text="hello"),
        Turn(role=Role.USER, text="how are you?"),
    ]
    for turn in turns:
        conversation.append(turn)

    assert conversation.snapshot() == turns
    assert len(conversation) == 3
    assert conversation.last() == turns[-1]


@pytest.mark.unit
def test_alternation_is_not_enforced() -> None:
    """Two user turns in a row are accepted (e.g. after a failed exchange)."""
    conversation = Conversation()
    conversation.append(Turn(role=Role.USER, text="first"))
    conversation.append(Turn(role=Role.USER, text="second"))
    assert [t.role for t in conversation.snapshot()] == [Role.USER, Role.USER]


@pytest.mark.unit
def test_snapshot_is_a_copy() -> None:
    """Mutating a snapshot must not change the store."""
    conversation = Conversation()
    conversation.append(Turn(role=Role.USER, text="hi"))
    snap = conversation.snapshot()
    snap.clear()
    assert len(conversation) == 1


@pytest.mark.unit
def test_empty_conversation_has_no_last_turn() -> None:
    """last() on an empty store returns None."""
    assert Conversation().last() is None


@pytest.mark.unit
def test_turn_is_immutable() -> None:
    """Turns are frozen once created."""
    turn = Turn(role=Role.USER, text="hi")
    with pytest.raises(ValidationError):
        turn.text = "changed"  # type: ignore[misc]


@pytest.mark.unit
def test_turn_to_content_uses_api_shape() -> None:
    """A turn serializes to a generateContent `contents` item."""
    turn = Turn(role=Role.MODEL, text="Hello")
    assert turn.to_content() == {"role": "model", "parts": [{"text": "Hello"}]}
