# job_search/samples.py
"""
Search basics: four small searches against the hosted job-search API.

Every sample takes the client and the session's RequestMetadata from the caller.
Use the same metadata for any view/click events tied to these searches.
"""
from __future__ import annotations

from typing import List

from job_search.client import SearchClient
from job_search.models import (
    EmploymentType,
    JobQuery,
    LocationFilter,
    RequestMetadata,
    SearchMode,
    SearchRequest,
    SearchResponse,
)


def print_matches(response: SearchResponse) -> None:
    if not response.matches:
        print("No jobs for this search")
        return
    for match in response.matches:
        print(match.title)
        print(match.identifier)
        print(match.summary)


def keyword_search(client: SearchClient, metadata: RequestMetadata) -> SearchResponse:
    """Basic keyword search."""
    request = SearchRequest(
        metadata=metadata,
        query=JobQuery(keywords="analyst"),
        mode=SearchMode.JOB_SEARCH,
    )
    response = client.search(request)
    print_matches(response)
    return response


def keyword_and_single_location_search(client: SearchClient, metadata: RequestMetadata) -> SearchResponse:
    """Keyword and single location search."""
    location = LocationFilter(
        name="1600 Amphitheatre Parkway, Mountain View, CA",
        distance_in_miles=0.5,
    )
    request = SearchRequest(
        metadata=metadata,
        query=JobQuery(keywords="Software Engineer", location_filters=(location,)),
        mode=SearchMode.JOB_SEARCH,
    )
    response = client.search(request)
    print(response.model_dump_json(indent=2))
    return response


def keyword_and_multi_locations_search(client: SearchClient, metadata: RequestMetadata) -> SearchResponse:
    """Keyword and multiple locations search."""
    locations = (
        LocationFilter(name="Mountain View, CA"),
        LocationFilter(name="Sunnyvale, CA"),
    )
    request = SearchRequest(
        metadata=metadata,
        query=JobQuery(keywords="Analyst", location_filters=locations),
        mode=SearchMode.JOB_SEARCH,
    )
    response = client.search(request)
    print(response.model_dump_json(indent=2))
    return response


def keyword_and_multi_employment_types_search(client: SearchClient, metadata: RequestMetadata) -> SearchResponse:
    """Keyword and multiple employment types search."""
    request = SearchRequest(
        metadata=metadata,
        query=JobQuery(
            keywords="Analyst",
            employment_types=frozenset({EmploymentType.FULL_TIME, EmploymentType.INTERN}),
        ),
        mode=SearchMode.JOB_SEARCH,
    )
    response = client.search(request)
    print(response.model_dump_json(indent=2))
    return response


SAMPLES = [
    keyword_search,
    keyword_and_single_location_search,
    keyword_and_multi_locations_search,
    keyword_and_multi_employment_types_search,
]


def run_all(client: SearchClient, metadata: RequestMetadata) -> List[SearchResponse]:
    return [sample(client, metadata) for sample in SAMPLES]
