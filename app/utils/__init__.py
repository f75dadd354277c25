"""Utility functions for the backend."""

from app.utils.request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
