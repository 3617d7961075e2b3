"""
Service layer for the markertrack server.

Modules:
- progress: Progress calculation and response shaping
- users: Registration, lookups and marker recording
- deps: FastAPI dependency aliases
"""
