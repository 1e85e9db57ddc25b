from job_search.transports.base import SearchTransport
from job_search.transports.http import HttpTransport
from job_search.transports.null_transport import NullTransport

__all__ = [
    "SearchTransport",
    "HttpTransport",
    "NullTransport",
]
