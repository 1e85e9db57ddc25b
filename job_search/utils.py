# job_search/utils.py
import hashlib


def hash_identifier(value: str) -> str:
    """
    One-way hash for user/session ids before they leave the process.
    Stable across runs so the same user always maps to the same value.
    """
    v = (value or "").strip()
    if not v:
        return ""
    return hashlib.sha256(v.encode("utf-8")).hexdigest()
