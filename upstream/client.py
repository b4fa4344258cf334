"""
Upstream puzzle client. Issues one bounded GET per puzzle and returns the raw
body tagged with its puzzle type and content kind. No retries.
Base URLs, timeout and User-Agent come from core.config (.env in the project root).
"""

import logging
from dataclasses import dataclass

import requests

from core import config
from core.errors import UpstreamError

logger = logging.getLogger(__name__)

CONTENT_KINDS = ("json", "html")


@dataclass(frozen=True)
class RawResponse:
    """Upstream body for one puzzle fetch."""

    puzzle_type: str
    content_kind: str
    url: str
    text: str


def build_url(base: str, path: str) -> str:
    """
    Join a base URL kind ("new" or "old") with a path starting with "/".

    Args:
        base: Base URL kind passed to config.get_base_url.
        path: Path under the base, e.g. "/wordle/v2/2024-01-01.json".
    """
    return f"{config.get_base_url(base)}{path}"


def fetch_raw(
    puzzle_type: str,
    url: str,
    content_kind: str,
    *,
    timeout: float | None = None,
) -> RawResponse:
    """
    Fetch one puzzle payload.

    Args:
        puzzle_type: Puzzle slug, used for logging and errors.
        url: Absolute upstream URL.
        content_kind: "json" or "html"; fixed per puzzle type, not sniffed.
        timeout: Seconds; defaults to REQUEST_TIMEOUT (10s).

    Returns:
        RawResponse with the decoded body text.

    Raises:
        UpstreamError: network failure or non-2xx status.
    """
    if content_kind not in CONTENT_KINDS:
        raise ValueError(f"Unknown content kind: {content_kind}. Expected one of {list(CONTENT_KINDS)}")
    if timeout is None:
        timeout = config.get_request_timeout()
    headers = {"User-Agent": config.get_user_agent()}
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("upstream request failed puzzle=%s url=%s error=%s", puzzle_type, url, e)
        raise UpstreamError(puzzle_type, e) from e

    try:
        resp.raise_for_status()
    except requests.HTTPError as e:
        logger.warning(
            "upstream returned error puzzle=%s url=%s status=%s",
            puzzle_type,
            url,
            resp.status_code,
        )
        raise UpstreamError(puzzle_type, e, status_code=resp.status_code) from e

    logger.info(
        "upstream %s puzzle=%s url=%s kind=%s bytes=%s",
        resp.status_code,
        puzzle_type,
        url,
        content_kind,
        len(resp.text),
    )
    return RawResponse(
        puzzle_type=puzzle_type,
        content_kind=content_kind,
        url=url,
        text=resp.text,
    )
