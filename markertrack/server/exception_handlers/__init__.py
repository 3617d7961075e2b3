"""
Exception handlers for the markertrack server.

This package contains the exception handlers for domain errors and for
unhandled exceptions, plus a setup function to register them with the
FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
