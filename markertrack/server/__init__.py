"""
markertrack Server Package.

This package contains the web server implementation for markertrack.
It includes the API definition, security, configuration and the service layer.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration, constants and token security.
    exception_handlers: Translation of domain errors into HTTP responses.
    middleware: Request timing and logging.
    services: Progress calculation and registration workflow.
"""
