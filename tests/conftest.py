"""The main entry point for pytest fixtures.

This will run before any tests are executed when `import pytest` is called.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, Optional

import httpx
import pytest
from loguru import logger

from gemini_chat.core.chat_manager import ChatManager
from gemini_chat.core.gemini_client import GeminiClient
from tests.helpers import TEST_API_KEY

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def _setup_logging() -> None:
    """Add a file sink to the default pytest console logging."""
    # logs/pytest_YYYYMMDD.log
    logs_dir = Path(__file__).resolve().parent.parent / "logs"
    logs_dir.mkdir(exist_ok=True)
    logfile = logs_dir / f"pytest_{datetime.now():%Y%m%d}.log"

    # Add file sink to existing pytest console handler
    logger.add(
        logfile,
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    # Intercept stdlib logging (httpx, gradio) so everything funnels through Loguru
    class InterceptHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                level = logger.level(record.levelname).name
            except ValueError:
                level = logging.getLevelName(record.levelno)
            logger.opt(depth=6, exception=record.exc_info, colors=False).log(
                level, record.getMessage()
            )

    # Force stdlib logging to go through our intercept handler
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def pytest_configure(config: pytest.Config) -> None:
    """Pytest configuration hook to add a file sink to default pytest logging."""
    _setup_logging()


@pytest.fixture
def write_secrets(tmp_path: Path) -> Callable[..., Path]:
    """Create a secrets JSON file inside tmp_path and give you a path to it.

    Returns:
      a function you can call with an api key (or raw body text)
    """

    def _write(api_key: Optional[str] = TEST_API_KEY, raw: Optional[str] = None) -> Path:
        path = tmp_path / "secrets.json"
        body = raw if raw is not None else json.dumps({"apiKey": api_key})
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_manager() -> Iterator[Callable[..., ChatManager]]:
    """Build ChatManagers backed by an httpx.MockTransport handler.

    Every manager created through the fixture is closed on teardown.
    """
    managers: list[ChatManager] = []

    def _make(handler: Callable, api_key: Optional[str] = TEST_API_KEY) -> ChatManager:
        client = GeminiClient(api_key, transport=httpx.MockTransport(handler))
        manager = ChatManager(client)
        managers.append(manager)
        return manager

    yield _make

    for manager in managers:
        manager.close()
