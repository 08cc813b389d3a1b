"""Constants for core module."""

from pathlib import Path

# --- Gemini API --- #
GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
GEMINI_MODEL: str = "gemini-1.5-flash-latest"
REQUEST_TIMEOUT_SECONDS: float = 5 * 60.0

# --- I/O --- #
LOGS_FPATH: Path = Path("logs")
SECRETS_FPATH: Path = Path("streaming_assets") / "secrets.json"

# --- Transcript --- #
USER_SPEAKER: str = "You"
MODEL_SPEAKER: str = "Gemini"
ERROR_SPEAKER: str = "Error"

ERROR_MSG: str = "An error occurred."
NO_REPLY_MSG: str = "(no reply)"
CANCELLED_MSG: str = "The request was cancelled."
