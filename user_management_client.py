"""User Management API client.

A thin wrapper around the REST endpoints of the User Management API,
built on the ``requests`` library.  It is meant for scripts and other
services that need to read or modify user records without dealing
with URLs and the response envelope themselves.

The client exposes one method per endpoint:

* :meth:`list_users` – return all users.
* :meth:`get_user` – fetch a single user by its identifier.
* :meth:`create_user` – create a new user.
* :meth:`update_user` – replace a user's name, email and age.
* :meth:`delete_user` – remove a user.
* :meth:`search_users` – case‑insensitive search by name.

Every method returns a ``(result, error)`` tuple instead of raising.
On success ``error`` is ``None``; on failure ``result`` is empty and
``error`` is a dictionary with the keys ``status_code`` and
``message``.  ``status_code`` is ``None`` when no HTTP response was
received at all (connection refused, timeout, ...).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserManagementClient:
    """Client for interacting with the User Management API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            prefix: Path prefix the API is mounted under (``API_PREFIX``
                on the server side).  Empty by default.
            timeout: Timeout in seconds for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(envelope, error)`` where ``envelope`` is the
            decoded response body on success.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return {}, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        envelope, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return envelope.get("data") or [], None

    def _single(self, method: str, path: str, json_body: Any | None = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        envelope, error = self._request(method, path, json_body=json_body)
        if error:
            return None, error
        return envelope.get("data"), None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``. ``users`` is empty on failure.
        """
        return self._list("/users")

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user by ID.

        Returns:
            A tuple ``(user, error)``.  A missing user is reported as an
            error with ``status_code`` 404.
        """
        return self._single("GET", f"/users/{user_id}")

    def create_user(self, name: str, email: str, age: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user.

        Returns:
            A tuple ``(user, error)`` where ``user`` includes the
            server‑assigned ``id``.
        """
        payload = {"name": name, "email": email, "age": age}
        return self._single("POST", "/users", json_body=payload)

    def update_user(self, user_id: Any, name: str, email: str, age: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the data of an existing user.

        Returns:
            A tuple ``(user, error)`` with the updated record.
        """
        payload = {"name": name, "email": email, "age": age}
        return self._single("PUT", f"/users/{user_id}", json_body=payload)

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        envelope, error = self._request("DELETE", f"/users/{user_id}")
        if error:
            return False, error
        return bool(envelope.get("success")), None

    def search_users(self, name: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search users by a case‑insensitive substring of their name.

        Returns:
            A tuple ``(users, error)``.
        """
        return self._list("/users/search", params={"name": name})
