"""Collector permalink helpers."""

from typing import Optional
from urllib.parse import quote

PARTIAL_URL = "/collector/pipeline/"


def build_permalink(base_url: Optional[str], pipeline_id: str) -> str:
    """
    Build the collector UI link for a pipeline.

    Example:
        build_permalink("http://sdc:18630", "orders::1") ->
        "http://sdc:18630/collector/pipeline/orders%3A%3A1"
    """
    base = (base_url or "").rstrip("/")
    return f"{base}{PARTIAL_URL}{quote(pipeline_id, safe='')}"
