from __future__ import annotations

"""
Integration tests for Network Infrastructure.

Uses mocking to verify transcript downloads without real network calls.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from termtree.domain.errors import TranscriptSourceError
from termtree.infra.network import USER_AGENT, fetch_transcript, is_remote_source


@pytest.mark.parametrize("source, expected", [
    ("https://host/session.txt", True),
    ("HTTP://host/session.txt", True),
    ("session.txt", False),
    ("-", False),
])
def test_is_remote_source(source, expected) -> None:
    assert is_remote_source(source) is expected


def test_fetch_transcript_success() -> None:
    """TC-01: Successful download returns the response text."""
    mock_response = MagicMock()
    mock_response.text = "$ cd /\n$ ls\n"
    mock_response.content = b"$ cd /\n$ ls\n"

    with patch("requests.get", return_value=mock_response) as get:
        assert fetch_transcript("https://host/session.txt") == "$ cd /\n$ ls\n"

    _, kwargs = get.call_args
    assert kwargs["headers"]["User-Agent"] == USER_AGENT
    mock_response.raise_for_status.assert_called_once()


def test_fetch_transcript_http_error() -> None:
    """TC-02: HTTP errors surface as TranscriptSourceError."""
    mock_response = MagicMock()
    mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("404")

    with patch("requests.get", return_value=mock_response):
        with pytest.raises(TranscriptSourceError):
            fetch_transcript("https://host/missing.txt")


def test_fetch_transcript_timeout() -> None:
    """TC-03: Timeouts surface as TranscriptSourceError."""
    with patch("requests.get", side_effect=requests.exceptions.Timeout()):
        with pytest.raises(TranscriptSourceError) as excinfo:
            fetch_transcript("https://host/slow.txt", timeout=1)

    assert "timed out" in str(excinfo.value)
