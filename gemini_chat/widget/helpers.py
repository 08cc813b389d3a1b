"""Helper functions for widget."""

from loguru import logger

from gemini_chat.core.chat_manager import ChatManager
from gemini_chat.widget.session_state import SessionState


def get_manager(state: SessionState) -> ChatManager:
    """Return the session's chat manager, creating it on first use."""
    if "manager" not in state:
        logger.debug("No chat manager in session state; creating one.")
        state["manager"] = ChatManager.create(settings=state.get("settings"))
    return state["manager"]


def cleanup(state: SessionState) -> None:
    """Clean up resources associated with a session."""
    logger.debug("Cleaning up session resources")
    if not state or "manager" not in state:
        logger.debug("No 'manager' in session state to clean up")
        return
    try:
        logger.debug("Closing chat manager...")
        state["manager"].close()
    except Exception:
        logger.exception("Failed to cleanly close chat manager on delete")
    finally:
        logger.debug("Session cleanup complete.")
