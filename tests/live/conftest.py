"""Pytest configuration and fixtures for live httpbin tests."""

import os

import httpx
import pytest
from dotenv import load_dotenv

DEFAULT_HTTPBIN_URL = "https://httpbin.org"


@pytest.fixture(scope="session")
def httpbin_url() -> str:
    """Base URL of the httpbin server, from ``HTTPBIN_URL`` or ``.env``.

    Skips the test when the server cannot be reached.
    """
    load_dotenv()
    url = (os.getenv("HTTPBIN_URL") or DEFAULT_HTTPBIN_URL).rstrip("/")

    try:
        httpx.get(f"{url}/status/200", timeout=10)
    except httpx.HTTPError as e:
        pytest.skip(f"httpbin not reachable at {url}: {e}")

    return url
