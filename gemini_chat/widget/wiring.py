"""Wiring of event handlers to widget components."""

import gradio as gr

from gemini_chat.widget.handlers import on_submit, on_tick
from gemini_chat.widget.ui.chat import ChatUI


def wire_handlers(state: gr.State, chat: ChatUI) -> None:
    """Wire event handlers to widget components."""
    submit_outputs = [state, chat.chatbot, chat.textbox, chat.send_btn]

    # Send button and Enter in the textbox both submit
    chat.send_btn.click(
        fn=on_submit,
        inputs=[chat.textbox, state],
        outputs=submit_outputs,
        show_progress="hidden",
    )
    chat.textbox.submit(
        fn=on_submit,
        inputs=[chat.textbox, state],
        outputs=submit_outputs,
        show_progress="hidden",
    )

    # Drain buffered replies and re-enable input once the exchange is done
    chat.timer.tick(
        fn=on_tick,
        inputs=[state],
        outputs=[chat.chatbot, chat.textbox, chat.send_btn],
        show_progress="hidden",
    )
