"""Gradio widget construction."""

from __future__ import annotations

from typing import Optional

import gradio as gr
from loguru import logger

from gemini_chat.core.settings import Settings
from gemini_chat.core.settings import settings as default_settings
from gemini_chat.widget.constants import MAX_TTL_SECONDS
from gemini_chat.widget.helpers import cleanup
from gemini_chat.widget.session_state import SessionState
from gemini_chat.widget.ui.chat import build_chat
from gemini_chat.widget.ui.header import build_header
from gemini_chat.widget.wiring import wire_handlers


def build_widget(
    banner: str | None = None,
    settings: Optional[Settings] = None,
) -> gr.Blocks:
    """Build the Gradio UI for chatting with Gemini."""
    settings = settings or default_settings
    logger.info(f"Building Gradio widget for model '{settings.model}'")

    if not settings.secrets_path.exists():
        logger.warning(
            f"Secrets file '{settings.secrets_path}' does not exist yet;"
            " chats will fail until it is created."
        )

    widget = gr.Blocks(
        title="Gemini Chat",
        theme=gr.themes.Default(primary_hue="violet"),
    )
    with widget:
        # one chat manager per browser session, created lazily on first submit
        state = gr.State(
            value=SessionState(settings=settings),
            time_to_live=MAX_TTL_SECONDS,
            delete_callback=cleanup,  # function to call when state is deleted
        )

        build_header(settings.model, banner)
        chat = build_chat(poll_interval=settings.poll_interval)

        # Wire up event handlers
        wire_handlers(state, chat)

    return widget
