"""CLI runner for the Gemini chat component."""

from typing import Optional, Sequence

from loguru import logger
from rich.console import Console

from gemini_chat.cli.configuration import load_theme, style_for
from gemini_chat.core.chat_manager import ChatManager
from gemini_chat.core.constants import ERROR_SPEAKER, USER_SPEAKER
from gemini_chat.core.display import TranscriptEntry
from gemini_chat.core.settings import Settings

EXIT_COMMANDS = {"/quit", "/exit", "/stop"}


def _render_entries(
    entries: Sequence[TranscriptEntry],
    console: Console,
    theme: dict[str, str],
) -> None:
    """Print transcript entries produced by one exchange."""
    for entry in entries:
        console.print()
        console.print(
            f"{entry.speaker}: {entry.text}",
            style=style_for(theme, entry.speaker),
            markup=False,
        )


def run_cli(
    settings: Optional[Settings] = None,
    custom_theme_path: Optional[str] = None,
    manager: Optional[ChatManager] = None,
    console: Optional[Console] = None,
) -> None:
    """Run the CLI interaction loop.

    The loop thread owns the transcript: it submits, waits for the exchange
    and drains the display queue itself. Empty input or /quit exits.
    """
    console = console or Console()
    theme = load_theme(custom_theme_path)

    if manager is None:
        try:
            manager = ChatManager.create(settings=settings)
        except Exception as e:
            console.print(f"Failed to setup chat with error: {e}", style=theme[ERROR_SPEAKER])
            logger.exception(f"Failed to setup chat with error: {e}")
            raise

    console.rule(f"Gemini Chat ({manager.client.model})", style=theme["intro"])
    try:
        while True:
            console.print()
            console.print(f"{USER_SPEAKER}:", style=theme[USER_SPEAKER], end=" ")
            user_input = console.input()

            if not user_input.strip() or user_input.strip().lower() in EXIT_COMMANDS:
                break

            if not manager.submit(user_input):
                continue
            reply_index = len(manager.transcript) - 1  # the open Gemini entry

            with console.status(
                "Waiting for Gemini...", spinner="dots", spinner_style=theme["status"]
            ):
                manager.wait()
            manager.poll()

            _render_entries(manager.transcript.entries[reply_index:], console, theme)
    finally:
        manager.close()
        console.rule("Chat Ended", style=theme["outtro"])
