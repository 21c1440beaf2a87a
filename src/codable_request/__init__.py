"""Typed HTTP requests over httpx.

Send one request, get back a pydantic-validated model, or a ``RemoteError``
carrying a decoded error payload.

```python
from pydantic import BaseModel

from codable_request import RemoteError, request


class HTTPBin(BaseModel):
    url: str


try:
    result = request("GET", "https://httpbin.org/get", HTTPBin)
except RemoteError as e:
    print(e.code, e.error)
```
"""

from ._config import Config
from ._request import build_request_spec, request, request_async
from ._utils import (
    Encoding,
    HttpMethod,
    JSONValue,
    RequestSpec,
    encode_form,
    to_params,
)
from ._utils.constants import VERSION as __version__
from .models import CodableRequestError, ErrorMsg, ErrorResponse, RemoteError

__all__ = [
    "CodableRequestError",
    "Config",
    "Encoding",
    "ErrorMsg",
    "ErrorResponse",
    "HttpMethod",
    "JSONValue",
    "RemoteError",
    "RequestSpec",
    "__version__",
    "build_request_spec",
    "encode_form",
    "request",
    "request_async",
    "to_params",
]
