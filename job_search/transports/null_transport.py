# job_search/transports/null_transport.py
from typing import Any, Dict, Optional

from job_search.transports.base import SearchTransport


class NullTransport(SearchTransport):
    """
    A transport that never goes to the network and always answers "no matches".
    Useful for wiring/testing without credentials.
    """

    def __init__(self):
        self.last_payload: Optional[Dict[str, Any]] = None

    def execute(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.last_payload = payload
        return {}
