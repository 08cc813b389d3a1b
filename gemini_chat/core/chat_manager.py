"""Chat manager that runs the request/response cycle.

Submit → record user turn → exchange runs on the manager's loop thread →
reply is enqueued → UI polls and applies it to the transcript.

Threading constraint: `submit()`, `poll()` and `close()` belong to the single
thread that owns the UI. Only the exchange coroutine runs elsewhere (on the
manager's private asyncio loop) and it talks back through the display queue
and the lock-guarded conversation.
"""

from __future__ import annotations

import asyncio
import contextlib
import threading
from typing import List, Optional

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from gemini_chat.core.constants import (
    CANCELLED_MSG,
    ERROR_MSG,
    ERROR_SPEAKER,
    MODEL_SPEAKER,
    NO_REPLY_MSG,
    USER_SPEAKER,
)
from gemini_chat.core.conversation import Conversation, Role, Turn
from gemini_chat.core.display import DisplayQueue, DisplayUpdate, Transcript
from gemini_chat.core.gemini_client import GeminiClient, GeminiError
from gemini_chat.core.secrets import load_api_key
from gemini_chat.core.settings import Settings
from gemini_chat.core.settings import settings as default_settings

SHUTDOWN_TIMEOUT = 10.0  # seconds to wait for cancellation + client disposal


class ChatState(BaseModel):
    """Mutable state of one chat session, shared with the display layer."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    conversation: Conversation = Field(default_factory=Conversation)
    display: DisplayQueue = Field(default_factory=DisplayQueue)
    busy: bool = False  # single-flight flag
    pending: Optional[asyncio.Task] = Field(default=None, exclude=True)


class ChatManager:
    """Relays user text to Gemini and feeds replies back to the transcript."""

    def __init__(self, client: GeminiClient, state: Optional[ChatState] = None) -> None:
        self.client = client
        self.state = state or ChatState()
        self.transcript = Transcript()
        self.closed = False

        self._lock = threading.Lock()  # guards state.busy and state.pending
        self._idle = threading.Event()
        self._idle.set()

        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(
            target=self._run_loop, name="gemini-chat-loop", daemon=True
        )
        self._thread.start()

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ChatManager":
        """Load the credential and build a manager with a fresh HTTP client."""
        settings = settings or default_settings
        logger.debug(f"Creating chat manager with secrets at '{settings.secrets_path}'")
        api_key = load_api_key(settings.secrets_path)
        client = GeminiClient(
            api_key,
            base_url=settings.api_base_url,
            model=settings.model,
            timeout=settings.request_timeout,
            transport=transport,
        )
        return cls(client)

    @property
    def busy(self) -> bool:
        """True while an exchange is in flight; input should be disabled."""
        with self._lock:
            return self.state.busy

    @property
    def conversation(self) -> Conversation:
        """The conversation replayed on every request."""
        return self.state.conversation

    def submit(self, text: str) -> bool:
        """Start an exchange for `text`.

        Returns False (and changes nothing) for blank input, while another
        exchange is pending, or after close().
        """
        if self.closed:
            logger.warning("submit called on a closed chat manager; ignoring.")
            return False
        if not text or not text.strip():
            logger.debug("Ignoring blank submission.")
            return False

        with self._lock:
            if self.state.busy:
                logger.debug("Exchange already pending; ignoring submission.")
                return False
            self.state.busy = True
            self._idle.clear()

        # the previous reply must land before the new entries are opened
        self.poll()
        self.state.conversation.append(Turn(role=Role.USER, text=text))
        self.transcript.add(USER_SPEAKER, text)
        self.transcript.add(MODEL_SPEAKER, "")  # reply is appended here later

        turns = self.state.conversation.snapshot()
        logger.info(f"Submitting exchange with {len(turns)} turns of history.")
        asyncio.run_coroutine_threadsafe(self._exchange(turns), self._loop)
        return True

    def poll(self) -> bool:
        """Drain buffered display updates into the transcript.

        Returns True if the transcript changed.
        """
        return self.transcript.apply(self.state.display.drain())

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until no exchange is pending. Returns False on timeout."""
        return self._idle.wait(timeout)

    def close(self) -> None:
        """Cancel any pending exchange, dispose the HTTP client and stop the loop."""
        if self.closed:
            logger.debug("Chat manager already closed; skipping.")
            return
        self.closed = True
        logger.debug("Closing chat manager...")
        future = asyncio.run_coroutine_threadsafe(self._shutdown(), self._loop)
        try:
            future.result(timeout=SHUTDOWN_TIMEOUT)
        except Exception:
            logger.exception("Failed to cleanly shut down chat manager")
        finally:
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join(timeout=SHUTDOWN_TIMEOUT)
            logger.debug("Chat manager closed.")

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()

    async def _exchange(self, turns: List[Turn]) -> None:
        """One network round trip. Every failure ends up as an error entry."""
        with self._lock:
            self.state.pending = asyncio.current_task()
        display = self.state.display
        try:
            text = await self.client.generate(turns)
            if text is None:
                display.put(DisplayUpdate("append", NO_REPLY_MSG))
            else:
                self.state.conversation.append(Turn(role=Role.MODEL, text=text))
                display.put(DisplayUpdate("append", text))
        except asyncio.CancelledError:
            logger.info("Exchange cancelled before a reply arrived.")
            display.put(
                DisplayUpdate("entry", f"{ERROR_MSG}\n{CANCELLED_MSG}", ERROR_SPEAKER)
            )
            raise
        except GeminiError as e:
            display.put(DisplayUpdate("entry", f"{ERROR_MSG}\n{e}", ERROR_SPEAKER))
        except Exception as e:
            logger.exception("Unexpected error during exchange")
            display.put(
                DisplayUpdate("entry", f"{ERROR_MSG}\n{type(e).__name__}", ERROR_SPEAKER)
            )
        finally:
            with self._lock:
                self.state.busy = False
                self.state.pending = None
            self._idle.set()

    async def _shutdown(self) -> None:
        with self._lock:
            task = self.state.pending
        if task is not None and not task.done():
            logger.info("Cancelling pending exchange.")
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        await self.client.aclose()
