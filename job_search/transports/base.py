# job_search/transports/base.py
from abc import ABC, abstractmethod
from typing import Any, Dict


class SearchTransport(ABC):
    """
    Carries a serialized search request to the service and brings back the decoded body.
    Auth, connections and wire encoding live here, not in the client.
    """

    @abstractmethod
    def execute(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError
