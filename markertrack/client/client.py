"""markertrack user API client

Overview
--------
Thin HTTP client for the user endpoints of the markertrack server. It
registers users, remembers the issued token and the current user in a
``TokenStore`` and reads progress using the stored token.

Authentication
--------------
``create`` stores the token returned by ``POST /api/user``. Every later call
sends it as ``Authorization: Bearer <jwt>``. ``is_authenticated`` reports
whether a token is stored, which is all a front-end route guard needs.

Errors
------
Non-2xx responses raise ``MarkerTrackApiError`` carrying the status code and
the server's ``detail`` (or the raw body when it is not JSON).

Usage
-----
>>> client = UserApiClient("http://localhost:8000")
>>> created = client.create("Ada", "Lovelace", "ada@example.com")
>>> client.is_authenticated()
True
>>> board = client.list_progress()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from markertrack.core.models.io import MarkerResponse, UserCreated

from .errors import MarkerTrackApiError
from .token_store import TokenStore


class UserApiClient:
    """HTTP client for ``/api/user``.

    Responsibilities
    ----------------
    - Register users and persist the issued token and the current user.
    - Attach the stored token to authenticated requests.
    - Map responses to the server's own schemas.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token_store: Optional[TokenStore] = None,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Create a user API client.

        Args:
            base_url: Base URL of the markertrack server (e.g., ``http://localhost:8000``).
            token_store: Where the session is kept; defaults to ``~/.markertrack/session.json``.
            timeout: Default HTTP timeout for the internal client.
            client: Optional preconfigured ``httpx.Client`` to use.
        """
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store or TokenStore()
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> Dict[str, str]:
        """Build JSON headers and include the stored bearer token when present."""
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        token = self.token_store.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        r = self._client.request(method, f"{self.base_url}{path}", headers=self._headers(), **kwargs)
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            try:
                details = e.response.json().get("detail")
            except Exception:
                details = e.response.text
            raise MarkerTrackApiError(
                f"{method} {path} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=details,
            ) from e
        return r

    def create(self, first_name: str, last_name: str, email: str) -> UserCreated:
        """Register a user.

        API
        ---
        - Method/Path: ``POST /api/user``
        - Body: ``{"firstName", "lastName", "email"}``

        Side-effects
        ------------
        When the response carries a token, the token and the current user
        (with the returned id) are written to the token store.

        Raises:
            MarkerTrackApiError: 400 for a missing field, 409 for a taken email.
        """
        payload = {"firstName": first_name, "lastName": last_name, "email": email}
        r = self._request("POST", "/api/user", json=payload)
        created = UserCreated.model_validate(r.json())
        if created.token:
            self.token_store.set_token(created.token)
            self.token_store.set_current_user({"id": created.id, **payload})
            self._logger.info("Registered user %s", created.id)
        return created

    def get_current_user_token(self) -> Optional[str]:
        return self.token_store.get_token()

    def get_current_user(self) -> Optional[Dict[str, Any]]:
        return self.token_store.get_current_user()

    def is_authenticated(self) -> bool:
        """True when a token is stored."""
        return bool(self.token_store.get_token())

    def get_progress(self, user_id: int) -> MarkerResponse:
        """Get one user's progress.

        API
        ---
        - Method/Path: ``GET /api/user/{user_id}``
        - Auth: bearer token from the store

        Raises:
            MarkerTrackApiError: 401 without a valid token, 404 for an unknown user.
        """
        r = self._request("GET", f"/api/user/{user_id}")
        return MarkerResponse.model_validate(r.json())

    def list_progress(self) -> List[MarkerResponse]:
        """Get the ranked progress of every active user.

        API
        ---
        - Method/Path: ``GET /api/user``
        """
        r = self._request("GET", "/api/user")
        return [MarkerResponse.model_validate(item) for item in r.json()]

    def close(self) -> None:
        self._client.close()
