"""Creative Engine API client.

This module defines a small client wrapper around the Creative Engine
HTTP API, covering what the web front end does:

* :meth:`generate_brief` – request a brief for a product and audience.
* :meth:`get_dna` – download the current brand DNA.
* :meth:`update_dna` – replace the brand DNA.
* :meth:`upload_exemplar` – add a sample ad to the exemplar library.
* :meth:`list_exemplars` – list the exemplar library.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or empty) and ``error``
is a dictionary with ``status_code`` and ``message`` keys.  The client
uses the ``requests`` library internally.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CreativeEngineAPI:
    """Client for interacting with the Creative Engine API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api",
        timeout: float = 90,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3001``.
            prefix: Path prefix the routes are mounted under.
            timeout: Per‑request timeout in seconds.  Brief generation waits
                on the model, so this is deliberately generous.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + "/" + prefix.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/dna``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success.  On failure ``error`` carries the HTTP
            status (``None`` for network errors) and the server's
            ``error`` message when one was returned.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
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

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def generate_brief(self, product: str, audience: str) -> Tuple[Optional[Any], Optional[Error]]:
        """Request a brief.  Blank inputs are rejected without calling the API."""
        if not product or not product.strip() or not audience or not audience.strip():
            return None, {"status_code": None, "message": "Please fill out both Product and Audience."}
        return self._request("POST", "/generate", json_body={"product": product, "audience": audience})

    def get_dna(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/dna")

    def update_dna(self, dna: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the brand DNA.  ``dna`` must be a JSON object."""
        if not isinstance(dna, dict):
            return None, {"status_code": None, "message": "Brand DNA must be a JSON object."}
        return self._request("POST", "/dna", json_body=dna)

    def upload_exemplar(self, text: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        if not text or not text.strip():
            return None, {"status_code": None, "message": "Exemplar text cannot be empty."}
        return self._request("POST", "/upload", json_body={"text": text})

    def list_exemplars(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/exemplars")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None
