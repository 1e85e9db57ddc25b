# job_search/main.py
from __future__ import annotations

from pathlib import Path

from job_search.client import SearchClient
from job_search.config import load_config
from job_search.samples import run_all

REPO_ROOT = Path(__file__).resolve().parents[1]


def run(config_path: str = "config/config.yaml") -> None:
    config_file = (REPO_ROOT / config_path).resolve()
    cfg = load_config(str(config_file))

    client = SearchClient(cfg.transport.build())
    metadata = cfg.request_metadata()

    run_all(client, metadata)


if __name__ == "__main__":
    run()
