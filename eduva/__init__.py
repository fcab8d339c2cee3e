"""Eduva core HTTP API: Flask routes, Swagger document, MongoDB connection and data models."""

__version__ = "1.0.0"
__all__ = ["__version__"]