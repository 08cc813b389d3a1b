"""Gemini chat component.

Relays user text to the Gemini generateContent API and shows the replies in a
chat transcript (Gradio widget or terminal).
"""

__version__ = "0.1.0"
