"""App state definition for the Gradio UI."""

from typing import TypedDict

from gemini_chat.core.chat_manager import ChatManager
from gemini_chat.core.settings import Settings


class SessionState(TypedDict, total=False):
    """State stored in gr.State for a single browser session."""

    settings: Settings
    manager: ChatManager  # created on first submit, closed on session delete
