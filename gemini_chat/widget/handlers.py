"""Web handlers for the Gradio chat widget.

Send → manager.submit records the turn and starts the exchange → timer ticks
drain the display queue → the reply appears and input is re-enabled.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

import gradio as gr
from loguru import logger

from gemini_chat.widget.constants import USER_FRIENDLY_EXC
from gemini_chat.widget.helpers import get_manager
from gemini_chat.widget.session_state import SessionState

ChatbotValue = Union[List[Dict[str, str]], Dict[str, Any]]


def on_submit(
    message: str, state: SessionState
) -> Tuple[SessionState, ChatbotValue, Dict[str, Any], Dict[str, Any]]:
    """Handle the send button or Enter in the textbox.

    Returns (state, chatbot, textbox update, send button update). Rejected
    submissions (blank input or an exchange still pending) change nothing.
    """
    try:
        manager = get_manager(state)
        accepted = manager.submit(message)
    except Exception as e:
        logger.exception(f"Error while handling on_submit: {e}")
        raise gr.Error(USER_FRIENDLY_EXC)

    if not accepted:
        logger.debug("Submission rejected; leaving UI unchanged.")
        return state, gr.update(), gr.update(), gr.update()

    return (
        state,
        manager.transcript.as_messages(),
        gr.update(value="", interactive=False),  # clear and lock input
        gr.update(interactive=False),
    )


def on_tick(
    state: SessionState,
) -> Tuple[ChatbotValue, Dict[str, Any], Dict[str, Any]]:
    """Drain the session's display queue once per timer tick.

    Returns (chatbot, textbox update, send button update).
    """
    if "manager" not in state:
        return gr.update(), gr.update(), gr.update()
    manager = state["manager"]

    # read busy before draining: once it is False every update is already queued
    busy = manager.busy
    changed = manager.poll()
    chatbot = manager.transcript.as_messages() if changed else gr.update()
    return chatbot, gr.update(interactive=not busy), gr.update(interactive=not busy)
