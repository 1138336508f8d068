"""Person API client.

This module defines a small client wrapper around the DevTalk Person
API.  It uses the ``requests`` library internally and maps each HTTP
verb of the ``/api/v1/person`` resource onto a method:

* :meth:`PersonAPI.list_people` – ``GET /person?skip=&take=``
* :meth:`PersonAPI.get_person` – ``GET /person/{id}``
* :meth:`PersonAPI.put_person` – ``PUT /person/{id}``
* :meth:`PersonAPI.patch_person` – ``PATCH /person/{id}``
* :meth:`PersonAPI.delete_person` – ``DELETE /person/{id}``
* :meth:`PersonAPI.post_person` – ``POST /person``

None of the methods raise on HTTP errors.  Each returns a tuple
``(result, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PersonAPI:
    """Client for interacting with the Person API."""

    resource_path = "/api/v1/person"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for an empty body) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` describes the issue.
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
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = self._error_message(exc.response.json())
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(err_json: Any) -> str:
        """Turn an error body into a single string.

        FastAPI reports validation failures as ``{"detail": [{"msg": ...}, ...]}``;
        those messages are joined with ``"; "``.
        """
        if not isinstance(err_json, dict):
            return str(err_json)
        detail = err_json.get("detail")
        if isinstance(detail, str):
            return detail
        if isinstance(detail, list):
            msgs = [str(item.get("msg", item)) if isinstance(item, dict) else str(item) for item in detail]
            return "; ".join(msgs)
        return str(detail if detail is not None else err_json)

    def _item_path(self, person_id: int) -> str:
        return f"{self.resource_path}/{person_id}"

    # ------------------------------------------------------------------
    # Person operations
    # ------------------------------------------------------------------
    def list_people(self, skip: int = 0, take: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve a page of people.

        Returns:
            A tuple ``(people, error)``. ``people`` is empty on failure.
        """
        params: Dict[str, Any] = {"skip": skip}
        if take is not None:
            params["take"] = take
        data, error = self._request("GET", self.resource_path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._item_path(person_id))

    def put_person(self, person_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a person under ``person_id``; the URL id wins over ``payload``."""
        return self._request("PUT", self._item_path(person_id), json_body=payload)

    def patch_person(self, person_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the person ``person_id`` with ``payload``."""
        return self._request("PATCH", self._item_path(person_id), json_body=payload)

    def delete_person(self, person_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a person.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._item_path(person_id))
        if error:
            return False, error
        return True, None

    def post_person(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a person, or update it when ``payload`` carries a stored ``Id``."""
        return self._request("POST", self.resource_path, json_body=payload)
