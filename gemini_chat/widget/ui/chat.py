"""Chat UI components."""

from typing import NamedTuple

import gradio as gr

from gemini_chat.widget.constants import TEXTBOX_PLACEHOLDER


class ChatUI(NamedTuple):
    """Named tuple for chat UI components."""

    chatbot: gr.Chatbot
    textbox: gr.Textbox
    send_btn: gr.Button
    timer: gr.Timer


def build_chat(poll_interval: float) -> ChatUI:
    """Build chat UI components."""
    chatbot = gr.Chatbot(
        type="messages",
        show_label=False,
        show_copy_all_button=True,
        autoscroll=True,  # scroll to latest message on update
        render_markdown=True,
        group_consecutive_messages=False,  # separate back2back
    )
    with gr.Row():
        textbox = gr.Textbox(
            placeholder=TEXTBOX_PLACEHOLDER,
            show_label=False,
            lines=1,
            scale=8,
            autofocus=True,
            container=False,
        )
        send_btn = gr.Button("Send", variant="primary", scale=1)

    # plays the role of a per-frame update: drains buffered replies into the chat
    timer = gr.Timer(value=poll_interval)

    return ChatUI(chatbot=chatbot, textbox=textbox, send_btn=send_btn, timer=timer)
