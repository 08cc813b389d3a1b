"""Terminal theme: one rich style per transcript speaker plus the banners."""

from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger

from gemini_chat.core.constants import ERROR_SPEAKER, MODEL_SPEAKER, USER_SPEAKER

DEFAULT_THEME: Dict[str, str] = {
    "intro": "bold blue",
    "outtro": "bold blue",
    "status": "bold bright_black",
    USER_SPEAKER: "bold cyan",
    MODEL_SPEAKER: "bold green",
    ERROR_SPEAKER: "bold red",
}


def load_theme(config_path: Optional[str] = None) -> Dict[str, str]:
    """Load speaker styles from a YAML file.

    The file holds a top-level ``theme`` mapping keyed by speaker label
    ("You", "Gemini", "Error") or by "intro", "outtro" and "status". Keys it
    leaves out keep their default style. Problems with the file are logged
    and the defaults are used.
    """
    theme = DEFAULT_THEME.copy()
    if config_path is None:
        return theme

    p = Path(config_path)
    if not p.exists():
        logger.warning(f"Theme file not found at {p}; using defaults.")
        return theme

    try:
        with p.open("r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load theme from {p}: {e}")
        return theme

    overrides = config.get("theme") if isinstance(config, dict) else None
    if not isinstance(overrides, dict):
        logger.warning(f"Theme file {p} has no 'theme' mapping; using defaults.")
        return theme

    for key, style in overrides.items():
        if not isinstance(style, str):
            logger.warning(f"Ignoring non-string style for '{key}' in {p}.")
            continue
        theme[str(key)] = style
    return theme


def style_for(theme: Dict[str, str], speaker: str) -> str:
    """Style of a transcript speaker; unknown speakers get the status style."""
    return theme.get(speaker, theme["status"])
