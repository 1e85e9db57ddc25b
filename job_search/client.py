# job_search/client.py
from __future__ import annotations

import logging

from job_search.errors import TransportError
from job_search.models import SearchRequest, SearchResponse
from job_search.transports.base import SearchTransport

logger = logging.getLogger(__name__)


class SearchClient:
    """
    Typed wrapper around one RPC: jobs:search.

    Stateless apart from the transport it was built with, so one client can be
    shared by the caller. Failures come back as TransportError, never retried.
    """

    def __init__(self, transport: SearchTransport):
        self._transport = transport

    def search(self, request: SearchRequest) -> SearchResponse:
        payload = request.to_wire()
        logger.debug(
            "search query=%r mode=%s domain=%s",
            request.query.keywords,
            request.mode.value,
            request.metadata.domain,
        )

        try:
            raw = self._transport.execute(payload)
            response = SearchResponse.from_wire(raw)
        except TransportError as e:
            logger.warning("search failed: %s", e)
            raise
        except Exception as e:
            logger.warning("search failed: %s", e)
            raise TransportError(f"Transport failed → {e}", cause=e) from e

        logger.debug("search returned %d matches", len(response.matches))
        return response
