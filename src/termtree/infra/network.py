from __future__ import annotations

"""
Network Communication Infrastructure.

Downloads transcripts published over HTTP(S). Failures surface as
TranscriptSourceError so callers handle local and remote sources alike.
"""

import logging

import requests

from termtree.domain.errors import TranscriptSourceError

logger = logging.getLogger(__name__)

USER_AGENT = "TermTree-Client/1.0.0"
DEFAULT_TIMEOUT = 10


def is_remote_source(source: str) -> bool:
    """Check whether a transcript source points at an HTTP(S) URL."""
    lowered = source.strip().lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def fetch_transcript(url: str, timeout: int = DEFAULT_TIMEOUT) -> str:
    """
    Download a transcript from a remote location.

    Args:
        url: HTTP(S) address of the transcript.
        timeout: Request timeout in seconds.

    Returns:
        str: Raw transcript text.

    Raises:
        TranscriptSourceError: On timeout, HTTP error or connection failure.
    """
    headers = {"User-Agent": USER_AGENT}
    logger.debug(f"Downloading transcript from: {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise TranscriptSourceError(f"Transcript download timed out after {timeout}s: {url}") from e
    except requests.exceptions.RequestException as e:
        raise TranscriptSourceError(f"Transcript download failed: {e}") from e

    size_kb = len(response.content) / 1024
    logger.info(f"Network: Transcript downloaded ({size_kb:.1f} KB).")
    return response.text
