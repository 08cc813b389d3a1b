"""Runtime configuration for the chat component.

Uses Pydantic BaseSettings to read environment variables with the
`GEMINI_CHAT_` prefix. A `.env` file is loaded first if present.

Example:
    export GEMINI_CHAT_MODEL=gemini-1.5-pro-latest
    export GEMINI_CHAT_SECRETS_PATH=/etc/gemini/secrets.json
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gemini_chat.core.constants import (
    GEMINI_BASE_URL,
    GEMINI_MODEL,
    REQUEST_TIMEOUT_SECONDS,
    SECRETS_FPATH,
)

load_dotenv()  # Load environment variables from a .env file if present


class Settings(BaseSettings):
    """Application settings read from environment variables.

    Attributes:
        api_base_url (str): Root of the generative-language API.
        model (str): Model name used in the generateContent path.
        request_timeout (float): Upper bound for one exchange, in seconds.
        secrets_path (Path): Location of the JSON credential file.
        poll_interval (float): Seconds between display queue drains in the widget.
    """

    model_config = SettingsConfigDict(env_prefix="GEMINI_CHAT_")

    api_base_url: str = GEMINI_BASE_URL
    model: str = GEMINI_MODEL
    request_timeout: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0)
    secrets_path: Path = SECRETS_FPATH
    poll_interval: float = Field(default=0.1, gt=0)


settings = Settings()
