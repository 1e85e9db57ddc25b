from job_search.client import SearchClient
from job_search.errors import TransportError
from job_search.models import (
    EmploymentType,
    JobQuery,
    LocationFilter,
    MatchedJob,
    RequestMetadata,
    SearchMode,
    SearchRequest,
    SearchResponse,
)

__all__ = [
    "SearchClient",
    "TransportError",
    "EmploymentType",
    "JobQuery",
    "LocationFilter",
    "MatchedJob",
    "RequestMetadata",
    "SearchMode",
    "SearchRequest",
    "SearchResponse",
]
