"""Constants for the widget package."""

MAX_TTL_SECONDS = 24 * 3600  # 24 hours

TEXTBOX_PLACEHOLDER = "Ask Gemini something..."

USER_FRIENDLY_EXC = (
    "Whoa...something went sideways."
    " This chat can’t continue, please reload the page and try again."
)
