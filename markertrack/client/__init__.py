"""markertrack API client.

Exposes a thin HTTP client for the markertrack server together with the
local token store that keeps the registered user's session between runs.
"""

from .client import UserApiClient
from .errors import MarkerTrackApiError
from .token_store import TokenStore

__all__ = [
    "MarkerTrackApiError",
    "TokenStore",
    "UserApiClient",
]
