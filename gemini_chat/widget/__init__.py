"""Gradio widget for the Gemini chat component.

A text box, a send button and a scrolling chat transcript. A timer drains
the session's display queue on a fixed cadence, which is the only place the
transcript is updated from network results.

NOTE: THIS IS A SIMPLE MINIMAL GUI WIDGET. It is NOT a full fledged front end.
"""
