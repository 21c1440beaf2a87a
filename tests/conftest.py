import json
from typing import Any, Callable, Dict, Optional
from urllib.parse import parse_qsl

import httpx
import pytest


@pytest.fixture
def base_url() -> str:
    return "https://httpbin.test"


@pytest.fixture
def httpbin_echo() -> Callable[[httpx.Request], httpx.Response]:
    """Callback for ``httpx_mock.add_callback`` that answers like httpbin.org."""

    def echo(request: httpx.Request) -> httpx.Response:
        raw = request.content.decode("utf-8")
        content_type = request.headers.get("Content-Type", "")

        form: Dict[str, str] = {}
        payload: Optional[Any] = None
        if content_type == "application/x-www-form-urlencoded":
            form = dict(parse_qsl(raw))
        elif raw:
            try:
                payload = json.loads(raw)
            except ValueError:
                payload = None

        return httpx.Response(
            status_code=200,
            json={
                "args": dict(request.url.params),
                "data": "" if form else raw,
                "files": {},
                "form": form,
                "headers": {k.title(): v for k, v in request.headers.items()},
                "json": payload,
                "origin": "127.0.0.1",
                "url": str(request.url),
            },
        )

    return echo
