"""Upstream puzzle endpoints client."""

from upstream.client import RawResponse, build_url, fetch_raw

__all__ = [
    "RawResponse",
    "build_url",
    "fetch_raw",
]
