"""In-memory todo list web application."""

__version__ = "1.0.0"
