"""markertrack.

Progress tracking for users collecting markers.

A registered user collects markers (named milestones, each shown as a
letter). The service records every marker event with its timestamp and
derives the user's *progress*: the time elapsed between registration and
the most recent marker event.

Subpackages
-----------

- ``markertrack.core``: logging, monitoring, domain errors and the database
  layer (SQLModel entities and repositories).
- ``markertrack.server``: the FastAPI application exposing the REST API.
- ``markertrack.client``: a small httpx client that registers a user and keeps
  the issued token on disk.
"""
