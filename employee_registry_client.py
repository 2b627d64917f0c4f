"""Employee registry API client.

A small wrapper around the HTTP surface of the Employee Registry API,
built on the ``requests`` library.  It exposes one method per
endpoint:

* :meth:`create_employee` – register a new employee.
* :meth:`get_employee` – fetch a single employee by its identifier.
* :meth:`list_employees_by_gender` – list employees of one gender.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` (``None`` for transport errors) and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class EmployeeRegistryAPI:
    """Client for the employee registry API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any prefix, e.g.
                ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
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
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
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
                    err_json = exc.response.json()
                    message = str(err_json.get("detail") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Register a new employee.

        Args:
            payload: ``name``, ``age``, ``gender`` and ``salary`` of the
                employee.  Any ``id`` is ignored by the server.
        Returns:
            A tuple ``(employee, error)``.
        """
        return self._request("POST", "/employees", json_body=payload)

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single employee by ID.

        An unknown ID yields ``(None, {"status_code": 404, ...})``.
        """
        return self._request("GET", f"/employees/{employee_id}")

    def list_employees_by_gender(self, gender: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """List all employees with the given gender (``male``/``female``)."""
        data, error = self._request("GET", "/employees", params={"gender": gender})
        if error:
            return [], error
        return data or [], None
