# job_search/transports/http.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from job_search.errors import TransportError
from job_search.transports.base import SearchTransport

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jobs.googleapis.com/v2"

_AUTH_STATUSES = (401, 403)


class HttpTransport(SearchTransport):
    """
    POSTs the request to the hosted jobs:search endpoint:
      {base_url}/jobs:search
    Either an API key (query param) or an OAuth access token (bearer header) authenticates.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        timeout: float = 60,
    ):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.api_key = api_key or None
        self.access_token = access_token or None
        self.timeout = timeout

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/jobs:search"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _params(self) -> Dict[str, str]:
        return {"key": self.api_key} if self.api_key else {}

    def execute(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = self.search_url

        try:
            resp = requests.post(
                url,
                json=payload,
                headers=self._headers(),
                params=self._params(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed → {e}", cause=e) from e

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            if resp.status_code in _AUTH_STATUSES:
                message = f"Authentication failed for {url} (HTTP {resp.status_code})"
            else:
                message = f"HTTP error from {url} → {e}"
            raise TransportError(message, cause=e, status_code=resp.status_code) from e

        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError(f"Response from {url} is not valid JSON", cause=e) from e

        logger.debug("jobs:search %s → HTTP %s", url, resp.status_code)
        return body
