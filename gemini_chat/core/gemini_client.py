"""Thin async client for the Gemini generateContent endpoint.

Direct httpx calls, no SDK. The API is stateless per call so the caller sends
the full conversation every time. There is no retry: a failed call raises a
GeminiError and is final.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Sequence

import httpx
from loguru import logger

from gemini_chat.core.constants import (
    GEMINI_BASE_URL,
    GEMINI_MODEL,
    REQUEST_TIMEOUT_SECONDS,
)
from gemini_chat.core.conversation import Turn


class GeminiError(Exception):
    """Base class for failed exchanges with the Gemini API.

    Messages are safe to show to the user: they never include the request URL
    (which carries the API key).
    """


class GeminiTransportError(GeminiError):
    """The request could not be completed (timeout, connection error, ...)."""


class GeminiStatusError(GeminiError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Gemini API returned HTTP {status_code}.")
        self.status_code = status_code


class GeminiResponseError(GeminiError):
    """The response body was not a JSON object."""


def build_payload(turns: Sequence[Turn]) -> Dict[str, Any]:
    """Build the generateContent request body from the conversation."""
    return {"contents": [turn.to_content() for turn in turns]}


def extract_text(body: Dict[str, Any]) -> Optional[str]:
    """Return the first candidate's first text part, or None if there is none."""
    candidates = body.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    if not isinstance(first, dict):
        return None
    content = first.get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    if not isinstance(text, str) or not text:
        return None
    return text


class GeminiClient:
    """Owns one httpx.AsyncClient, reused for every exchange until aclose()."""

    def __init__(
        self,
        api_key: Optional[str],
        *,
        base_url: str = GEMINI_BASE_URL,
        model: str = GEMINI_MODEL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            logger.warning("GeminiClient created without an API key; calls will fail.")
        self._api_key = api_key or ""
        self.model = model
        self.timeout = timeout
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers={"content-type": "application/json"},
            transport=transport,
        )
        logger.debug(f"httpx client initialized (base_url={base_url}, model={model})")

    @property
    def closed(self) -> bool:
        """Whether the underlying HTTP client has been disposed."""
        return self._http.is_closed

    @property
    def endpoint(self) -> str:
        """Path of the generateContent call for the configured model."""
        return f"/v1beta/models/{self.model}:generateContent"

    async def generate(self, turns: List[Turn]) -> Optional[str]:
        """Send the conversation and return the reply text.

        Returns None when the response is well formed but has no usable text.
        Raises GeminiError subclasses on transport, status or body failures.
        Cancellation (asyncio.CancelledError) propagates untouched.
        """
        payload = build_payload(turns)
        logger.debug(f"Sending {len(turns)} turns to {self.endpoint}")
        try:
            # httpx limits each phase; wait_for bounds the whole exchange
            response = await asyncio.wait_for(
                self._http.post(self.endpoint, params={"key": self._api_key}, json=payload),
                timeout=self.timeout,
            )
        except (httpx.HTTPError, asyncio.TimeoutError) as e:
            logger.error(f"Gemini request failed: {type(e).__name__}: {e}")
            raise GeminiTransportError(
                f"Could not reach the Gemini API ({type(e).__name__})."
            ) from e

        if not response.is_success:
            logger.error(
                f"Gemini API error {response.status_code}: {response.text[:500]}"
            )
            raise GeminiStatusError(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Gemini API returned a non-JSON body: {response.text[:500]}")
            raise GeminiResponseError("The Gemini API returned an unreadable response.") from e
        if not isinstance(body, dict):
            logger.error(f"Gemini API returned a non-object body: {type(body).__name__}")
            raise GeminiResponseError("The Gemini API returned an unexpected response.")

        text = extract_text(body)
        if text is None:
            logger.warning(f"Gemini response had no candidate text: {str(body)[:500]}")
        return text

    async def aclose(self) -> None:
        """Dispose the HTTP client. Safe to call more than once."""
        if not self._http.is_closed:
            await self._http.aclose()
            logger.debug("httpx client closed")
