"""
Server constants.

Values shared by the application factory and the routers.
"""

PROJECT_NAME = "markertrack"
VERSION = "0.1.0"
SCHEMA_VERSION = "v1"

# Prefix of every REST route
API_PREFIX = "/api"
