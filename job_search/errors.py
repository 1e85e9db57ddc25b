# job_search/errors.py
from __future__ import annotations

from typing import Optional


class TransportError(Exception):
    """
    The only error the search client raises.
    Covers network, auth, HTTP status, serialization and malformed-response failures.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message
