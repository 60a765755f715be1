"""nudge: install the Learn agent for AI coding assistants."""

__version__ = "0.3.0"
