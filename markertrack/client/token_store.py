"""Local persistence of the current user's session.

The session is one small JSON document::

    {"token": "<jwt>", "currentUser": {"id": 1, "firstName": ..., "lastName": ..., "email": ...}}

Both keys are optional; a missing or unreadable file is an empty session.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_SESSION_PATH = Path.home() / ".markertrack" / "session.json"

TOKEN_KEY = "token"
CURRENT_USER_KEY = "currentUser"


class TokenStore:
    """JSON file holding the issued token and the current user."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else DEFAULT_SESSION_PATH

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get_token(self) -> Optional[str]:
        return self._read().get(TOKEN_KEY)

    def set_token(self, token: str) -> None:
        data = self._read()
        data[TOKEN_KEY] = token
        self._write(data)

    def get_current_user(self) -> Optional[Dict[str, Any]]:
        return self._read().get(CURRENT_USER_KEY)

    def set_current_user(self, user: Dict[str, Any]) -> None:
        data = self._read()
        data[CURRENT_USER_KEY] = user
        self._write(data)

    def clear(self) -> None:
        """Forget the stored session."""
        if self.path.exists():
            self.path.unlink()
