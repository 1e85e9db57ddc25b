# job_search/models.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from job_search.errors import TransportError
from job_search.utils import hash_identifier


def _str_or_empty(x: Any) -> str:
    return x if isinstance(x, str) else ""


class EmploymentType(str, Enum):
    EMPLOYMENT_TYPE_UNSPECIFIED = "EMPLOYMENT_TYPE_UNSPECIFIED"
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACTOR = "CONTRACTOR"
    TEMPORARY = "TEMPORARY"
    INTERN = "INTERN"
    VOLUNTEER = "VOLUNTEER"
    PER_DIEM = "PER_DIEM"
    CONTRACT_TO_HIRE = "CONTRACT_TO_HIRE"
    OTHER = "OTHER"


class SearchMode(str, Enum):
    SEARCH_MODE_UNSPECIFIED = "SEARCH_MODE_UNSPECIFIED"
    JOB_SEARCH = "JOB_SEARCH"
    FEATURED_JOB_SEARCH = "FEATURED_JOB_SEARCH"
    EMAIL_ALERT_SEARCH = "EMAIL_ALERT_SEARCH"


class _Value(BaseModel):
    # Python names on our side, camelCase aliases on the wire
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RequestMetadata(_Value):
    """
    Who is searching and from where.
    Must be the same across every call of one user session (search, view, click);
    the client passes it through untouched.
    """
    user_id: str = Field(alias="userId")
    session_id: str = Field(alias="sessionId")
    domain: str

    @classmethod
    def hashed(cls, user_id: str, session_id: str, domain: str) -> "RequestMetadata":
        """Build metadata from raw identifiers, hashing user and session ids."""
        return cls(
            user_id=hash_identifier(user_id),
            session_id=hash_identifier(session_id),
            domain=domain,
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class LocationFilter(_Value):
    name: str
    distance_in_miles: Optional[float] = Field(default=None, alias="distanceInMiles", ge=0)

    def to_wire(self) -> Dict[str, Any]:
        # unset radius -> no distanceInMiles key at all
        return self.model_dump(by_alias=True, exclude_none=True)


class JobQuery(_Value):
    keywords: str = Field(default="", alias="query")
    location_filters: Tuple[LocationFilter, ...] = Field(default=(), alias="locationFilters")
    employment_types: FrozenSet[EmploymentType] = Field(default=frozenset(), alias="employmentTypes")

    def to_wire(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"query": self.keywords}
        if self.location_filters:
            out["locationFilters"] = [f.to_wire() for f in self.location_filters]
        if self.employment_types:
            # declaration order, so one set always encodes the same way
            out["employmentTypes"] = [t.value for t in EmploymentType if t in self.employment_types]
        return out


class SearchRequest(_Value):
    metadata: RequestMetadata = Field(alias="requestMetadata")
    query: JobQuery = Field(default_factory=JobQuery)
    mode: SearchMode = SearchMode.JOB_SEARCH

    def to_wire(self) -> Dict[str, Any]:
        return {
            "requestMetadata": self.metadata.to_wire(),
            "query": self.query.to_wire(),
            "mode": self.mode.value,
        }


class MatchedJob(_Value):
    title: str = ""
    identifier: str = ""
    summary: str = ""


class SearchResponse(_Value):
    matches: Tuple[MatchedJob, ...] = ()

    @classmethod
    def from_wire(cls, payload: Any) -> "SearchResponse":
        """
        Decode a jobs:search response body.

        Missing or null matchingJobs means "no results" and yields an empty response.
        Anything structurally wrong raises TransportError; a partial response is never returned.
        """
        if not isinstance(payload, dict):
            raise TransportError(
                f"Malformed search response: expected an object, got {type(payload).__name__}"
            )

        items = payload.get("matchingJobs")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise TransportError("Malformed search response: matchingJobs is not a list")

        matches: List[MatchedJob] = []
        for i, item in enumerate(items):
            if not isinstance(item, dict):
                raise TransportError(f"Malformed search response: matchingJobs[{i}] is not an object")

            job = item.get("job")
            if job is None:
                job = {}
            if not isinstance(job, dict):
                raise TransportError(f"Malformed search response: matchingJobs[{i}].job is not an object")

            matches.append(
                MatchedJob(
                    title=_str_or_empty(job.get("jobTitle")),
                    identifier=_str_or_empty(job.get("name")),
                    summary=_str_or_empty(item.get("jobSummary")),
                )
            )

        return cls(matches=tuple(matches))
