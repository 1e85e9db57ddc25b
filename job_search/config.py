from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field

from job_search.models import RequestMetadata
from job_search.transports.http import DEFAULT_BASE_URL, HttpTransport


class TransportSettings(BaseModel):
    base_url: str = DEFAULT_BASE_URL

    # Secrets never live in the YAML; only the env var names do
    api_key_env: Optional[str] = "JOBS_API_KEY"
    access_token_env: Optional[str] = None

    timeout: float = Field(default=60, gt=0)

    def _from_env(self, name: Optional[str]) -> Optional[str]:
        if not name:
            return None
        return os.environ.get(name) or None

    def build(self) -> HttpTransport:
        return HttpTransport(
            base_url=self.base_url,
            api_key=self._from_env(self.api_key_env),
            access_token=self._from_env(self.access_token_env),
            timeout=self.timeout,
        )


class MetadataSettings(BaseModel):
    user_id: str
    session_id: str
    domain: str
    hash_ids: bool = False


class Config(BaseModel):
    version: int = 1
    transport: TransportSettings = Field(default_factory=TransportSettings)
    metadata: MetadataSettings

    def request_metadata(self) -> RequestMetadata:
        m = self.metadata
        if m.hash_ids:
            return RequestMetadata.hashed(m.user_id, m.session_id, m.domain)
        return RequestMetadata(user_id=m.user_id, session_id=m.session_id, domain=m.domain)


def load_config(path: str) -> Config:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")

    with p.open("r", encoding="utf-8") as f:
        raw: Dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a YAML mapping (dict). Got: {type(raw)}")

    return Config(**raw)
