"""
Version 1 of the markertrack REST API.

Modules:
- health: Liveness and version endpoints
- users: Registration, progress and marker events
- markers: Marker catalogue
"""
