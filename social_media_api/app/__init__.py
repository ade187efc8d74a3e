"""
Application package initializer.

The application is split into layers that only call downwards:
``api`` (HTTP routes) uses ``services`` (validation rules), which use
``repositories`` (SQL), which use ``core.db`` (the shared SQLite
connection).  ``schemas`` holds the pydantic models passed between
them.
"""

from .main import app  # noqa: F401
