"""Credential loading from a local secrets file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Secrets(BaseModel):
    """Shape of the secrets file: a JSON object holding the API key."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[str] = Field(default=None, alias="apiKey")


def load_api_key(path: Path | str) -> Optional[str]:
    """Read the API key from a secrets JSON file.

    A missing, unreadable or undecodable file is logged and returns None; the caller keeps
    going without a credential and requests will fail later. The key itself is
    not validated.
    """
    p = Path(path)
    if not p.exists():
        logger.error(
            f"Secrets file not found at '{p}'. Requests to the Gemini API will"
            " fail until an apiKey is provided."
        )
        return None

    try:
        # utf-8-sig drops the byte order mark some Windows editors write
        secrets = Secrets.model_validate_json(p.read_text(encoding="utf-8-sig"))
    except UnicodeDecodeError:
        logger.error(f"Secrets file '{p}' is not valid UTF-8 text.")
        return None
    except OSError as e:
        logger.error(f"Failed to read secrets file '{p}': {e}")
        return None
    except ValidationError as e:
        # input values are left out so a malformed file never leaks its key
        reasons = ", ".join(err["type"] for err in e.errors(include_input=False))
        logger.error(f"Secrets file '{p}' is malformed: {reasons}")
        return None

    if not secrets.api_key:
        logger.warning(f"Secrets file '{p}' has no apiKey value.")
        return None

    logger.debug(f"Loaded API key from '{p}'.")
    return secrets.api_key
