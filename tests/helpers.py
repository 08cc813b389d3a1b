"""Helpers tests."""

import asyncio
import json
import threading
import time
from typing import Any, Callable, Dict, List, Union

import httpx

TEST_API_KEY = "test-key-123"


def _clone(response: httpx.Response) -> httpx.Response:
    """Fresh copy so one canned response can serve several requests."""
    return httpx.Response(
        response.status_code, headers=response.headers, content=response.content
    )


def reply_body(text: str) -> Dict[str, Any]:
    """A generateContent success body with a single text part."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


class FakeGemini:
    """Handler for httpx.MockTransport that records requests.

    Each item in `responses` is an httpx.Response to return or an exception to
    raise; the last item is reused once the others are consumed.
    """

    def __init__(self, *responses: Union[httpx.Response, Exception]) -> None:
        self.responses = list(responses)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, Exception):
            raise item
        return _clone(item)

    @property
    def bodies(self) -> List[Dict[str, Any]]:
        """JSON bodies of all recorded requests."""
        return [json.loads(r.content) for r in self.requests]


class BlockingGemini(FakeGemini):
    """Async handler that holds every request until `release` is set."""

    def __init__(self, *responses: Union[httpx.Response, Exception]) -> None:
        super().__init__(*responses)
        self.release = threading.Event()

    async def __call__(self, request: httpx.Request) -> httpx.Response:  # type: ignore[override]
        self.requests.append(request)
        while not self.release.is_set():
            await asyncio.sleep(0.01)
        return _clone(self.responses[0])  # type: ignore[arg-type]


def wait_for(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    """Poll `predicate` until it is true or `timeout` seconds pass."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()
