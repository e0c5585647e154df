"""Application start-up helpers."""

from app.initialization.logging import setup_logging

__all__ = ["setup_logging"]
